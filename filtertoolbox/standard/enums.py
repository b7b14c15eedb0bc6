from enum import Enum, auto


class FilterPassType(Enum):
    """Pass types that can be designed with the windowed-sinc method of
    `FIRFilter`."""

    Lowpass = auto()
    Highpass = auto()
    Bandpass = auto()

    def __str__(self):
        return self.name.lower()

    def to_str(self):
        return str(self)


class WindowType(Enum):
    """Window shapes supported by `Window`:

    - Rectangular: all ones (identity).
    - Hamming: 0.54 - 0.46 cos(2 pi n / (N-1)).
    - Hann: 0.5 (1 - cos(2 pi n / (N-1))).
    - Blackman: 0.42 - 0.5 cos(2 pi n / (N-1)) + 0.08 cos(4 pi n / (N-1)).

    """

    Rectangular = auto()
    Hamming = auto()
    Hann = auto()
    Blackman = auto()

    def __str__(self):
        return self.name.lower()

    def to_scipy_format(self) -> str:
        """Name of the window as expected by
        `scipy.signal.windows.get_window()`."""
        if self == WindowType.Rectangular:
            return "boxcar"
        return str(self)
