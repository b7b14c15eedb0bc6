import numpy as np
from numpy.typing import NDArray, DTypeLike
from scipy.signal import windows

from ..standard.enums import WindowType


def _get_window(
    window_type: WindowType, length: int, dtype: DTypeLike = np.float64
) -> NDArray:
    """Symmetric window computed with `scipy.signal.windows.get_window`.

    Parameters
    ----------
    window_type : WindowType
        Shape of the window.
    length : int
        Window length N.
    dtype : DTypeLike, optional
        Floating point type of the output. Default: `np.float64`.

    Returns
    -------
    NDArray
        Window with shape (length,).

    """
    return windows.get_window(
        window_type.to_scipy_format(), length, fftbins=False
    ).astype(dtype)
