"""machinpi: digits of pi via Machin's formula in fixed-point integers."""

from machinpi.core.digits import format_pi, pi_string
from machinpi.core.machin import compute_pi

__all__ = ["compute_pi", "format_pi", "pi_string"]
