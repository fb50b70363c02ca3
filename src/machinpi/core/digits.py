"""Decimal rendering of a scaled pi integer."""

from __future__ import annotations

from machinpi.core.machin import GUARD_DIGITS, compute_pi


def format_pi(scaled: int, digits: int) -> str:
    """Render *scaled* (pi times ``10 ** digits``) as ``"3.1415..."``.

    Returns just ``"3"`` when *digits* is 0.
    """
    text = str(scaled)
    if scaled < 0 or len(text) != digits + 1:
        raise ValueError(
            f"Scaled value has {len(text)} digits, expected {digits + 1}"
        )
    if digits == 0:
        return text
    return f"{text[0]}.{text[1:]}"


def pi_string(
    digits: int,
    guard_digits: int | str = GUARD_DIGITS,
    parallel: bool = False,
) -> str:
    """Compute pi to *digits* decimal places and return it as a string."""
    scaled = compute_pi(digits, guard_digits=guard_digits, parallel=parallel)
    return format_pi(scaled, digits)
