"""
Plots
-----
This module contains plotting templates that use matplotlib and seaborn for
styling.

- `general_plot()`
- `general_stem()`
- `show()`

"""

from .plots import general_plot, general_stem, show

__all__ = ["general_plot", "general_stem", "show"]
