import numpy as np
from numpy.typing import NDArray, DTypeLike


def _check_normalized_frequency(frequency: float):
    """Raises a `ValueError` if the frequency is not inside the open range
    ]0, 0.5[ (normalized to the sampling rate, 0.5 is Nyquist)."""
    if not np.isfinite(frequency) or frequency <= 0 or frequency >= 0.5:
        raise ValueError(
            "Invalid frequency parameters! Use normalized frequency "
            + f"(0.0-0.5), got {frequency}"
        )


def _check_band(frequency_low: float, frequency_high: float):
    if frequency_low >= frequency_high:
        raise ValueError(
            "Low frequency must be smaller than High frequency! Got "
            + f"{frequency_low} and {frequency_high}"
        )
    _check_normalized_frequency(frequency_low)
    _check_normalized_frequency(frequency_high)


def _windowed_sinc_lowpass(
    length: int, frequency: float, dtype: DTypeLike = np.float64
) -> NDArray:
    """Low-pass coefficients obtained by sampling the ideal (sinc) impulse
    response around the center of the filter. The taps are normalized so that
    their sum is 1 (unity gain at DC).

    Parameters
    ----------
    length : int
        Number of taps.
    frequency : float
        Normalized cutoff frequency in ]0, 0.5[.
    dtype : DTypeLike, optional
        Floating point type of the output. Default: `np.float64`.

    Returns
    -------
    h : NDArray
        Filter taps with shape (length,).

    Notes
    -----
    - For even lengths the center lies between two taps, so no tap takes the
      limit value `2*frequency`.
    - No window other than the implicit rectangular truncation is applied.

    """
    n = np.arange(length, dtype=dtype)
    center = (length - 1) / 2
    distance = n - center
    on_center = distance == 0

    # Avoid the division by zero on the center tap, it is overwritten below
    safe_distance = np.where(on_center, 1, distance)
    h = np.sin(2 * np.pi * frequency * safe_distance) / (
        np.pi * safe_distance
    )
    h[on_center] = 2 * frequency
    h = h.astype(dtype, copy=False)
    return h / np.sum(h)


def _spectral_inversion(h: NDArray) -> NDArray:
    """Turn low-pass taps into high-pass taps by negating all of them and
    adding 1 to the center tap (index `(N-1)//2`)."""
    h_inv = -h
    h_inv[(len(h) - 1) // 2] += 1
    return h_inv

