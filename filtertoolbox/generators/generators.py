"""
This contains signal generators that are useful for testing processors
"""

import numpy as np
from numpy.typing import DTypeLike

from ..classes.signal import Signal
from ..helpers.filter_design import _check_normalized_frequency


def dirac(
    length_samples: int = 512,
    delay_samples: int = 0,
    dtype: DTypeLike = np.float64,
) -> Signal:
    """Generates a dirac impulse Signal with the specified length.

    Parameters
    ----------
    length_samples : int, optional
        Length in samples. Default: 512.
    delay_samples : int, optional
        Delay of the impulse in samples. Default: 0.
    dtype : DTypeLike, optional
        Data type of the signal. Default: `np.float64`.

    Returns
    -------
    imp : `Signal`
        Signal with dirac impulse.

    """
    imp = Signal(length_samples, dtype)
    assert (
        type(delay_samples) is int and delay_samples >= 0
    ), "Only positive delay is supported"
    assert (
        delay_samples < length_samples
    ), "Delay is bigger than the samples of the signal"
    imp[delay_samples] = 1.0
    return imp


def harmonic(
    frequency: float = 0.1,
    length_samples: int = 512,
    amplitude: float = 1.0,
    phase_rad: float = 0.0,
    dtype: DTypeLike = np.float64,
) -> Signal:
    """Creates a harmonic (sine) tone.

    Parameters
    ----------
    frequency : float, optional
        Normalized frequency in ]0, 0.5[. Default: 0.1.
    length_samples : int, optional
        Length in samples. Default: 512.
    amplitude : float, optional
        Peak amplitude. Default: 1.
    phase_rad : float, optional
        Initial phase in radians. Default: 0.
    dtype : DTypeLike, optional
        Data type of the signal. Default: `np.float64`.

    Returns
    -------
    harmonic_sig : `Signal`
        Sine tone.

    """
    _check_normalized_frequency(frequency)
    harmonic_sig = Signal(length_samples, dtype)
    n = np.arange(length_samples)
    harmonic_sig.time_data = amplitude * np.sin(
        2 * np.pi * frequency * n + phase_rad
    )
    return harmonic_sig


def noise(
    length_samples: int = 512,
    peak_level: float = 1.0,
    random_state: int | np.random.Generator | None = None,
    dtype: DTypeLike = np.float64,
) -> Signal:
    """Creates a white noise signal (uniformly distributed).

    Parameters
    ----------
    length_samples : int, optional
        Length in samples. Default: 512.
    peak_level : float, optional
        Maximum absolute value of the noise. Default: 1.
    random_state : int, `np.random.Generator` or None, optional
        Seed or generator for reproducible noise. Default: `None`.
    dtype : DTypeLike, optional
        Data type of the signal. Default: `np.float64`.

    Returns
    -------
    noise_sig : `Signal`
        Noise Signal object.

    """
    assert peak_level > 0, "Peak level must be positive"
    noise_sig = Signal(length_samples, dtype)
    rng = np.random.default_rng(random_state)
    noise_sig.time_data = rng.uniform(-peak_level, peak_level, length_samples)
    return noise_sig
