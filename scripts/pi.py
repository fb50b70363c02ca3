#!/usr/bin/env python3
"""Print Pi to 20 decimal places using machinpi."""

from machinpi import pi_string

print(pi_string(20))
