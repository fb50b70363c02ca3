"""Arccotangent series in fixed-point integer arithmetic.

::

                1      1       1       1
    arccot(x) = -  -  ---  +  ---  -  ---  + ...
                x       3       5       7
                      3x      5x      7x

Dividing *unity* by ``x`` gives the first term.  Each further term comes from
dividing the running power by ``x**2`` and then by the odd counter 3, 5, 7,
...  The sum stops at the first term that truncates to zero, which at this
scale stands for a real value below ``1 / unity``.
"""

from __future__ import annotations


def arccot_terms(x: int, unity: int) -> tuple[int, int]:
    """Return ``(arccot(x) * unity, terms)`` for integer *x* >= 2.

    *terms* counts the series terms summed, including the leading ``1/x``.
    Every division truncates; operands stay non-negative so ``//`` is exact
    truncation.  The power shrinks by ``x**2`` per step, so the loop ends
    after at most ``log(unity, x**2) + 1`` terms.
    """
    xpower = unity // x
    total = xpower
    square = x * x
    n = 3
    sign = -1
    terms = 1

    while True:
        xpower //= square
        term = xpower // n
        if term == 0:
            break
        total += sign * term
        terms += 1
        sign = -sign
        n += 2

    return total, terms


def arccot(x: int, unity: int) -> int:
    """Return ``arccot(x)`` scaled by *unity*, truncated toward zero."""
    value, _ = arccot_terms(x, unity)
    return value
