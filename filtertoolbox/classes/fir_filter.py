import numpy as np
from numpy.typing import NDArray, DTypeLike

from .filter import Filter
from ..helpers.ring_buffer import CircularBuffer
from ..helpers.filter_design import (
    _check_normalized_frequency,
    _check_band,
    _windowed_sinc_lowpass,
    _spectral_inversion,
)
from ..standard.enums import FilterPassType


class FIRFilter(Filter):
    """FIR filter implemented in the time domain with a circular buffer. FIR
    filters are always stable since the output depends only on the current
    and past inputs. Low-, high- and band-pass coefficients can be designed
    with the windowed-sinc method.

    """

    def __init__(
        self, length: int, dtype: DTypeLike = np.float64, name: str = "fir"
    ):
        """Instantiate an FIR filter with all coefficients and states set to
        zero. Use one of the `setup_*` methods or `set_coefficients` before
        filtering.

        Parameters
        ----------
        length : int
            Number of taps (filter order + 1).
        dtype : DTypeLike, optional
            Floating point data type. Default: `np.float64`.
        name : str, optional
            Name of the filter. Default: `"fir"`.

        Notes
        -----
        - The state is stored as a circular buffer holding the last `length`
          input samples.

        """
        super().__init__(length, dtype, name)
        self.__buffer = CircularBuffer(self.length, self.dtype)

    @staticmethod
    def from_design(
        length: int,
        type_of_pass: FilterPassType,
        frequency: float | tuple[float, float],
        dtype: DTypeLike = np.float64,
        name: str = "fir",
    ) -> "FIRFilter":
        """Create an FIR filter and design its coefficients.

        Parameters
        ----------
        length : int
            Number of taps.
        type_of_pass : FilterPassType
            Lowpass, Highpass or Bandpass.
        frequency : float or tuple[float, float]
            Normalized cutoff frequency in ]0, 0.5[. For band-pass filters,
            (low, high) frequencies are expected.
        dtype : DTypeLike, optional
            Floating point data type. Default: `np.float64`.
        name : str, optional
            Name of the filter. Default: `"fir"`.

        Returns
        -------
        FIRFilter

        """
        fir = FIRFilter(length, dtype, name)
        fir.setup_filter(type_of_pass, frequency)
        return fir

    # ======== Design =========================================================
    def setup_low_pass(self, frequency: float):
        """Design a low-pass filter with the windowed-sinc method. The
        coefficients are normalized to unity gain at DC.

        Parameters
        ----------
        frequency : float
            Normalized cutoff frequency in ]0, 0.5[. For instance, 0.1 means
            0.1 times the sampling rate.

        """
        _check_normalized_frequency(frequency)
        self._coefficients = _windowed_sinc_lowpass(
            self.length, frequency, self.dtype
        )
        return self

    def setup_high_pass(self, frequency: float):
        """Design a high-pass filter by spectral inversion of the low-pass
        with the same cutoff frequency.

        Parameters
        ----------
        frequency : float
            Normalized cutoff frequency in ]0, 0.5[.

        """
        _check_normalized_frequency(frequency)
        self._coefficients = _spectral_inversion(
            _windowed_sinc_lowpass(self.length, frequency, self.dtype)
        )
        return self

    def setup_band_pass(self, frequency_low: float, frequency_high: float):
        """Design a band-pass filter as the difference of two low-pass
        filters: LowPass(frequency_high) - LowPass(frequency_low).

        Parameters
        ----------
        frequency_low : float
            Lower normalized cutoff frequency in ]0, 0.5[.
        frequency_high : float
            Upper normalized cutoff frequency in ]0, 0.5[. It must be larger
            than `frequency_low`.

        """
        _check_band(frequency_low, frequency_high)
        high = _windowed_sinc_lowpass(self.length, frequency_high, self.dtype)
        low = _windowed_sinc_lowpass(self.length, frequency_low, self.dtype)
        self._coefficients = high - low
        return self

    def setup_filter(
        self,
        type_of_pass: FilterPassType,
        frequency: float | tuple[float, float],
    ):
        """Design the filter according to the type of pass.

        Parameters
        ----------
        type_of_pass : FilterPassType
            Lowpass, Highpass or Bandpass.
        frequency : float or tuple[float, float]
            Normalized cutoff frequency. A pair (low, high) is expected for
            band-pass filters.

        """
        if type_of_pass == FilterPassType.Lowpass:
            return self.setup_low_pass(frequency)
        if type_of_pass == FilterPassType.Highpass:
            return self.setup_high_pass(frequency)
        if type_of_pass == FilterPassType.Bandpass:
            if np.ndim(frequency) != 1 or len(frequency) != 2:
                raise ValueError(
                    "Band-pass filters need a pair of frequencies"
                )
            return self.setup_band_pass(*frequency)
        raise TypeError(f"{type_of_pass} is not a supported type of pass")

    # ======== Filtering ======================================================
    def _process_sample(self, x: float) -> float:
        """Store the sample in the circular buffer and compute the weighted
        sum of the current and the past `length-1` inputs. The first
        coefficient multiplies the newest sample."""
        self.__buffer.write(x)
        y = np.dot(self._coefficients, self.__buffer.newest_first())
        self.__buffer.advance()
        return y

    def reset(self):
        """Clear the circular buffer and its head. Coefficients are not
        modified."""
        self.__buffer.reset()

    @property
    def ba(self) -> tuple[NDArray, NDArray]:
        return self.get_coefficients(), np.ones(1, dtype=self.dtype)

    @property
    def head(self) -> int:
        """Current write position in the circular buffer."""
        return self.__buffer.head

    @property
    def state(self) -> NDArray:
        """Copy of the circular buffer (raw storage order)."""
        return self.__buffer.data

    def __eq__(self, other) -> bool:
        if not isinstance(other, FIRFilter):
            return NotImplemented
        return (
            self.length == other.length
            and self.__buffer == other.__buffer
            and np.array_equal(self._coefficients, other._coefficients)
        )

