"""
# filtertoolbox

Fixed-length signal containers, realtime FIR/IIR filters with windowed-sinc
design and window functions.

"""

from .classes import (
    Signal,
    SignalProcessor,
    Filter,
    FIRFilter,
    IIRFilter,
    Window,
    FilterChain,
)
from .standard import FilterPassType, WindowType
from . import generators
from . import plots

__all__ = [
    # Basic classes
    "Signal",
    "SignalProcessor",
    "Filter",
    "FIRFilter",
    "IIRFilter",
    "Window",
    "FilterChain",
    # Enums
    "FilterPassType",
    "WindowType",
    # Modules
    "generators",
    "plots",
]

__version__ = "0.1.0"
