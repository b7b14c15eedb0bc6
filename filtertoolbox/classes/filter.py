"""
Contains the Filter base class for realtime (sample-by-sample) filters
"""

import abc
from warnings import warn
import numpy as np
import scipy.signal as sig
from numpy.typing import NDArray
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from .signal_processor import SignalProcessor
from .signal import Signal
from ..helpers.other import _get_buffer_length, _check_length
from ..plots import general_plot


class Filter(SignalProcessor):
    """Abstract base class for digital filters that keep a state across
    calls to `process`. Filtering a signal in several consecutive buffers
    delivers the same output as filtering it at once.

    """

    @abc.abstractmethod
    def reset(self):
        """Reset the filter to its initial (silent) state. What is reset is
        filter-specific."""
        pass

    @abc.abstractmethod
    def _process_sample(self, x: float) -> float:
        """Process a single sample, update the filter state and return the
        output sample."""
        pass

    @property
    @abc.abstractmethod
    def ba(self) -> tuple[NDArray, NDArray]:
        """Transfer function coefficients (b, a) with `a[0] == 1`."""
        pass

    # ======== Filtering ======================================================
    def process(self, signal, length: int | None = None):
        """Filter a buffer in place. The filter state is kept after the
        call, so that a stream can be filtered in consecutive buffers.

        Parameters
        ----------
        signal : NDArray, list or `Signal`
            Buffer with samples. The first `length` samples are replaced by
            the filtered ones.
        length : int, optional
            Number of samples to filter. It must be positive. Pass `None` to
            filter the complete buffer. Default: `None`.

        Returns
        -------
        signal
            The same (modified) buffer.

        """
        return _filter_buffer(self, signal, length)

    def process_sequence(self, container):
        """Filter any ordered container in place, sample by sample in the
        order of iteration. The container must support item assignment by
        index (e.g., list, numpy array, `Signal`), otherwise a `TypeError` is
        raised before any sample is processed.

        Parameters
        ----------
        container : MutableSequence, NDArray or `Signal`
            Samples to be filtered.

        Returns
        -------
        container
            The same (modified) container.

        """
        return _filter_container(self, container)

    def filter_signal(self, signal: Signal) -> Signal:
        """Return a filtered copy of the signal. The input is not modified
        but the filter state is updated.

        Parameters
        ----------
        signal : `Signal`
            Signal to be filtered.

        Returns
        -------
        new_signal : `Signal`
            Filtered signal.

        """
        assert isinstance(signal, Signal), "Only Signal objects are supported"
        new_signal = signal.copy()
        self.process(new_signal.time_data)
        return new_signal

    def _warn_if_silent(self):
        if not np.any(self._coefficients):
            warn(
                f"All coefficients of {self.name} are zero, the output will "
                + "be silent. Coefficients might need to be set."
            )

    # ======== Frequency response =============================================
    def get_frequency_response(
        self, n_points: int = 512
    ) -> tuple[NDArray[np.float64], NDArray[np.complex128]]:
        """Evaluate the transfer function of the current coefficients on the
        unit circle with `scipy.signal.freqz`.

        Parameters
        ----------
        n_points : int, optional
            Number of frequency points between 0 and Nyquist (excluded).
            Default: 512.

        Returns
        -------
        frequencies : NDArray[np.float64]
            Normalized frequencies, 0.5 corresponds to Nyquist.
        response : NDArray[np.complex128]
            Complex frequency response.

        """
        n_points = _check_length(n_points, "Number of points")
        b, a = self.ba
        frequencies, response = sig.freqz(
            b.astype(np.float64), a.astype(np.float64), worN=n_points, fs=1.0
        )
        return frequencies, response

    def plot_magnitude(
        self, n_points: int = 512, range_db=None
    ) -> tuple[Figure, Axes]:
        """Plot the magnitude response in dB.

        Parameters
        ----------
        n_points : int, optional
            Number of frequency points. Default: 512.
        range_db : array-like, optional
            Range of the y axis in dB. Default: None.

        Returns
        -------
        fig : `matplotlib.figure.Figure`
            Figure.
        ax : `matplotlib.axes.Axes`
            Axes.

        """
        frequencies, response = self.get_frequency_response(n_points)
        magnitude_db = 20 * np.log10(
            np.clip(np.abs(response), np.finfo(np.float64).tiny, None)
        )
        return general_plot(
            frequencies,
            magnitude_db,
            range_y=range_db,
            labels=self.name,
            ylabel="Magnitude / dB",
        )


def _filter_buffer(processor, signal, length: int | None):
    """Validate the buffer, then replace its first `length` samples with the
    output of `processor._process_sample`."""
    length = _get_buffer_length(signal, length)
    if length <= 0:
        raise ValueError("Bad array! Length must be positive")
    processor._warn_if_silent()
    for i in range(length):
        signal[i] = processor._process_sample(signal[i])
    return signal


def _filter_container(processor, container):
    """Validate the container, then replace each of its samples (in order of
    iteration) with the output of `processor._process_sample`."""
    if container is None or not hasattr(container, "__setitem__"):
        raise TypeError(
            f"{type(container)} does not support item assignment and can "
            + "not be filtered in place"
        )
    if isinstance(container, np.ndarray) and not np.issubdtype(
        container.dtype, np.floating
    ):
        raise TypeError(
            f"Buffer must have a floating point type, got {container.dtype}"
        )
    processor._warn_if_silent()
    for i, x in enumerate(container):
        container[i] = processor._process_sample(x)
    return container
