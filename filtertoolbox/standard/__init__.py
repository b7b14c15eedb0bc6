"""
Standard
--------
Enumerations used to configure the processors:

- `FilterPassType`
- `WindowType`

"""

from .enums import FilterPassType, WindowType

__all__ = ["FilterPassType", "WindowType"]
