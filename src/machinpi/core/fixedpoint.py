"""Fixed-point arithmetic on plain integers.

A real number ``r`` is carried as the integer ``trunc(r * unity)`` where
``unity`` is a power of ten.  The scale is not stored alongside the bare
integers used in the series loops; :class:`FixedPoint` pairs the two where
values from different computations meet, so that mixing scales fails loudly.
"""

from __future__ import annotations

from dataclasses import dataclass


class ScaleMismatchError(ValueError):
    """Raised when two fixed-point values with different scales are combined."""


def make_unity(digits: int, guard_digits: int) -> int:
    """Return the scale ``10 ** (digits + guard_digits)`` standing for 1.0."""
    return 10 ** (digits + guard_digits)


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero.

    Python's ``//`` floors, which differs from truncation when exactly one
    operand is negative.
    """
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@dataclass(frozen=True)
class FixedPoint:
    """An integer *value* whose real meaning is ``value / unity``."""

    value: int
    unity: int

    def __post_init__(self) -> None:
        if self.unity <= 0:
            raise ValueError(f"unity must be positive, got {self.unity}")

    def _check_scale(self, other: FixedPoint) -> None:
        if self.unity != other.unity:
            raise ScaleMismatchError(
                f"Cannot combine values at scale {self.unity} and {other.unity}"
            )

    def __add__(self, other: FixedPoint) -> FixedPoint:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        self._check_scale(other)
        return FixedPoint(self.value + other.value, self.unity)

    def __sub__(self, other: FixedPoint) -> FixedPoint:
        if not isinstance(other, FixedPoint):
            return NotImplemented
        self._check_scale(other)
        return FixedPoint(self.value - other.value, self.unity)

    def __mul__(self, factor: int) -> FixedPoint:
        # Scaled * scaled would need a division by unity; only plain integers here.
        if isinstance(factor, FixedPoint) or not isinstance(factor, int):
            return NotImplemented
        return FixedPoint(self.value * factor, self.unity)

    __rmul__ = __mul__

    def rescale(self, unity: int) -> FixedPoint:
        """Drop trailing digits so the value is expressed at a smaller *unity*.

        *unity* must divide the current scale; the dropped digits are
        truncated, not rounded.
        """
        if unity <= 0 or self.unity % unity:
            raise ScaleMismatchError(
                f"Cannot rescale from {self.unity} to {unity}: not a divisor"
            )
        return FixedPoint(trunc_div(self.value, self.unity // unity), unity)

