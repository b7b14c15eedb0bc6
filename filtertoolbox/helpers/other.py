import numpy as np
from numpy.typing import DTypeLike


def _check_dtype(dtype: DTypeLike) -> np.dtype:
    """Checks that the passed data type is a floating point type and returns
    it as a numpy dtype.

    Parameters
    ----------
    dtype : DTypeLike
        Data type, e.g. `np.float32`, `np.float64` or `np.longdouble`.

    Returns
    -------
    np.dtype

    """
    try:
        dtype = np.dtype(dtype)
    except TypeError as e:
        raise TypeError(f"{dtype} is not a valid data type") from e
    if not np.issubdtype(dtype, np.floating):
        raise TypeError(
            f"Data type must be a floating point type, got {dtype}"
        )
    return dtype


def _check_length(length, name: str = "Length") -> int:
    """Checks that the length is a positive integer and returns it as `int`."""
    if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {type(length)}")
    if length <= 0:
        raise ValueError(f"{name} must be positive, got {length}")
    return int(length)


def _check_name(name: str) -> str:
    if not isinstance(name, str) or len(name.strip()) == 0:
        raise ValueError("Name can not be empty")
    return name


def _get_buffer_length(signal, length: int | None) -> int:
    """Validate a buffer passed for processing and the number of samples that
    should be processed from it.

    Parameters
    ----------
    signal : array-like
        Buffer to be processed. It must support `len()`. Arrays must have a
        floating point data type.
    length : int or None
        Number of samples to process. Pass `None` to use the complete buffer.

    Returns
    -------
    int
        Number of samples to process.

    """
    if signal is None:
        raise ValueError("Bad array! Buffer can not be None")
    if isinstance(signal, np.ndarray) and signal.ndim != 1:
        raise ValueError(
            f"Only 1D-buffers are supported, got {signal.ndim} dimensions"
        )
    if isinstance(signal, np.ndarray) and not np.issubdtype(
        signal.dtype, np.floating
    ):
        raise TypeError(
            f"Buffer must have a floating point type, got {signal.dtype}"
        )
    buffer_length = len(signal)
    if buffer_length == 0:
        raise ValueError("Bad array! Buffer is empty")
    if length is None:
        return buffer_length
    if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
        raise ValueError(f"Length must be an integer, got {type(length)}")
    if length > buffer_length:
        raise ValueError(
            f"Length {length} exceeds the buffer length {buffer_length}"
        )
    return int(length)
