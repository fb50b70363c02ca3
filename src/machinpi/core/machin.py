"""Pi from Machin's formula: pi = 4 * (4 * arccot(5) - arccot(239))."""

from __future__ import annotations

import math
from concurrent.futures import ProcessPoolExecutor

from machinpi.core.arccot import arccot, arccot_terms
from machinpi.core.fixedpoint import FixedPoint, make_unity

GUARD_DIGITS = 10
AUTO_GUARD = "auto"

# Reciprocal bases of the two arccotangent terms.
ARCCOT_ARGS = (5, 239)


class InvalidDigitsError(ValueError):
    """Raised when the requested digit count is not a non-negative integer."""


class InvalidGuardDigitsError(ValueError):
    """Raised when the guard digit setting is neither a non-negative int nor 'auto'."""


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_digits(digits: object) -> int:
    """Return *digits* if it is a non-negative int, else raise InvalidDigitsError."""
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise InvalidDigitsError(f"digits must be an integer, got {digits!r}")
    if digits < 0:
        raise InvalidDigitsError(f"digits must be >= 0, got {digits}")
    return digits


def validate_guard_digits(guard_digits: object) -> bool:
    """Return True if *guard_digits* is a non-negative int or ``"auto"``."""
    if guard_digits == AUTO_GUARD:
        return True
    if isinstance(guard_digits, bool) or not isinstance(guard_digits, int):
        return False
    return guard_digits >= 0


# ---------------------------------------------------------------------------
# Guard digits
# ---------------------------------------------------------------------------


def _max_terms(x: int, scale_digits: int) -> int:
    """Upper bound on the terms arccot(x) sums at scale ``10 ** scale_digits``."""
    return int(scale_digits * math.log(10) / math.log(x * x)) + 2


def required_guard_digits(digits: int) -> int:
    """Guard digits that cover the worst-case truncation error for *digits*.

    Each series term is off by less than 2 units (the truncated power carries
    under 4/3 of a unit, the division by the odd counter adds one more).
    The combination scales the arccot(5) error by 16 and the arccot(239)
    error by 4, and the final truncation adds a unit.  The guard is one
    digit more than that bound needs.  The term counts depend on the scale,
    which depends on the guard, so iterate until the count settles.
    """
    validate_digits(digits)
    guard = 0
    while True:
        scale_digits = digits + guard
        bound = (
            16 * 2 * _max_terms(5, scale_digits)
            + 4 * 2 * _max_terms(239, scale_digits)
            + 1
        )
        needed = len(str(bound)) + 1
        if needed <= guard:
            return guard
        guard = needed


def resolve_guard_digits(digits: int, guard_digits: int | str = GUARD_DIGITS) -> int:
    """Turn a guard setting (an int or ``"auto"``) into a concrete count."""
    if not validate_guard_digits(guard_digits):
        raise InvalidGuardDigitsError(
            f"guard_digits must be a non-negative integer or '{AUTO_GUARD}', "
            f"got {guard_digits!r}"
        )
    if guard_digits == AUTO_GUARD:
        return required_guard_digits(digits)
    return int(guard_digits)


# ---------------------------------------------------------------------------
# Computation
# ---------------------------------------------------------------------------


def _arccots(unity: int, parallel: bool) -> list[int]:
    if not parallel:
        return [arccot(x, unity) for x in ARCCOT_ARGS]
    # The two series share no state; join both before combining.
    with ProcessPoolExecutor(max_workers=len(ARCCOT_ARGS)) as executor:
        futures = [executor.submit(arccot, x, unity) for x in ARCCOT_ARGS]
        return [f.result() for f in futures]


def compute_pi(
    digits: int,
    guard_digits: int | str = GUARD_DIGITS,
    parallel: bool = False,
) -> int:
    """Return pi scaled by ``10 ** digits`` as an integer.

    The decimal string of the result is ``"3"`` followed by *digits*
    fractional digits.  Internally the series run at ``10 ** (digits + G)``
    where ``G`` is *guard_digits* (or a computed count for ``"auto"``);
    the guard digits are truncated off at the end.

    With *parallel* the two arccotangent series run in separate processes.
    The result is identical either way.
    """
    validate_digits(digits)
    guard = resolve_guard_digits(digits, guard_digits)
    unity = make_unity(digits, guard)

    acot5, acot239 = _arccots(unity, parallel)

    left = FixedPoint(acot5, unity) * 4
    right = FixedPoint(acot239, unity)
    pi = (left - right) * 4

    return pi.rescale(make_unity(digits, 0)).value


def series_terms(digits: int, guard_digits: int | str = GUARD_DIGITS) -> dict:
    """Report the scale and per-series term counts for a computation.

    Returns a dict with ``digits``, ``guard_digits``, ``scale_digits`` and
    ``terms`` (a mapping of reciprocal base to number of terms summed).
    """
    validate_digits(digits)
    guard = resolve_guard_digits(digits, guard_digits)
    unity = make_unity(digits, guard)
    return {
        "digits": digits,
        "guard_digits": guard,
        "scale_digits": digits + guard,
        "terms": {x: arccot_terms(x, unity)[1] for x in ARCCOT_ARGS},
    }
