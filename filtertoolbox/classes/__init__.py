"""
Classes
-------
Here are the classes of the filtertoolbox:

- `Signal` (fixed-length container for time samples)
- `SignalProcessor` (base for all processors with a coefficient vector)
- `Filter` (base for all filters with state across calls)
- `FIRFilter` (circular-buffer FIR filter with windowed-sinc design)
- `IIRFilter` (direct-form IIR filter)
- `Window` (element-wise window)
- `FilterChain` (filters applied sequentially)

"""

from .signal import Signal
from .signal_processor import SignalProcessor
from .filter import Filter
from .fir_filter import FIRFilter
from .iir_filter import IIRFilter
from .window import Window
from .filter_chain import FilterChain

__all__ = [
    "Signal",
    "SignalProcessor",
    "Filter",
    "FIRFilter",
    "IIRFilter",
    "Window",
    "FilterChain",
]
