"""
Generators
----------
This module contains some utility signal generators. Choose from:

- `dirac()` (impulse)
- `harmonic()` (sine tone)
- `noise()` (white noise)

"""

from .generators import dirac, harmonic, noise

__all__ = ["dirac", "harmonic", "noise"]
