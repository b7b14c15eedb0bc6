import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from .signal_processor import SignalProcessor
from ..helpers.other import _get_buffer_length
from ..helpers.windows import _get_window
from ..standard.enums import WindowType


class Window(SignalProcessor):
    """Window applied by element-wise multiplication. It has no state across
    calls and always processes exactly `length` samples.

    """

    def __init__(
        self, length: int, dtype: DTypeLike = np.float64, name: str = "window"
    ):
        """Create a new (rectangular) window.

        Parameters
        ----------
        length : int
            Window length.
        dtype : DTypeLike, optional
            Floating point data type. Default: `np.float64`.
        name : str, optional
            Name of the window. Default: `"window"`.

        """
        super().__init__(length, dtype, name)
        self.setup_rectangular()

    def process(self, signal, length: int | None = None):
        """Multiply the first `length` samples of the buffer with the window in
        place.

        Parameters
        ----------
        signal : NDArray, list or `Signal`
            Buffer with at least `length` samples.
        length : int, optional
            Number of samples. It must be equal to the window length. Pass
            `None` to use the length of the buffer. Default: `None`.

        Returns
        -------
        signal
            The same (windowed) buffer.

        """
        length = _get_buffer_length(signal, length)
        if length != self.length:
            raise ValueError(
                f"Bad length! Window of length {self.length} can not process "
                + f"{length} samples"
            )
        if isinstance(signal, np.ndarray):
            signal[:length] *= self._coefficients
            return signal
        for i in range(length):
            signal[i] = signal[i] * self._coefficients[i]
        return signal

    # ======== Design =========================================================
    def setup_rectangular(self):
        """All coefficients set to 1."""
        self._coefficients = _get_window(
            WindowType.Rectangular, self.length, self.dtype
        )
        self.__window_type = WindowType.Rectangular
        return self

    def setup_hamming(self):
        """0.54 - 0.46 cos(2 pi n / (N-1)). Windows with a single point are
        not modified."""
        if self.length > 1:
            self._coefficients = _get_window(
                WindowType.Hamming, self.length, self.dtype
            )
            self.__window_type = WindowType.Hamming
        return self

    def setup_hann(self):
        """0.5 (1 - cos(2 pi n / (N-1))). Windows with a single point are
        not modified."""
        if self.length > 1:
            self._coefficients = _get_window(
                WindowType.Hann, self.length, self.dtype
            )
            self.__window_type = WindowType.Hann
        return self

    def setup_blackman(self):
        """0.42 - 0.5 cos(2 pi n / (N-1)) + 0.08 cos(4 pi n / (N-1)). Windows
        with a single point are not modified."""
        if self.length > 1:
            self._coefficients = _get_window(
                WindowType.Blackman, self.length, self.dtype
            )
            self.__window_type = WindowType.Blackman
        return self

    def setup_window(self, window_type: WindowType):
        """Compute the coefficients of a window shape.

        Parameters
        ----------
        window_type : WindowType
            Shape of the window.

        """
        if window_type == WindowType.Rectangular:
            return self.setup_rectangular()
        if window_type == WindowType.Hamming:
            return self.setup_hamming()
        if window_type == WindowType.Hann:
            return self.setup_hann()
        if window_type == WindowType.Blackman:
            return self.setup_blackman()
        raise TypeError(f"{window_type} is not a supported window type")

    def set_coefficients(self, coefficients: ArrayLike):
        super().set_coefficients(coefficients)
        self.__window_type = None
        return self

    @property
    def window_type(self) -> WindowType | None:
        """Last window shape that was computed. `None` if the coefficients
        were set manually."""
        return self.__window_type

    @property
    def metadata(self) -> dict:
        info = super().metadata
        info["window_type"] = str(self.window_type)
        return info

    def __eq__(self, other) -> bool:
        if not isinstance(other, Window):
            return NotImplemented
        return self.length == other.length and np.array_equal(
            self._coefficients, other._coefficients
        )
