"""Pure computation: fixed-point series, Machin combination, config."""
