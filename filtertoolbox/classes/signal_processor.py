"""
Contains the SignalProcessor base class
"""

import abc
from copy import deepcopy
import numpy as np
from numpy.typing import NDArray, ArrayLike, DTypeLike
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from ..helpers.other import _check_dtype, _check_length, _check_name
from ..plots import general_stem


class SignalProcessor(abc.ABC):
    """Abstract base class for all processors that hold a fixed-length vector
    of coefficients and can be fed with buffers of samples.

    """

    def __init__(
        self, length: int, dtype: DTypeLike = np.float64, name: str = "processor"
    ):
        """Initialize the processor with all coefficients set to zero.

        Parameters
        ----------
        length : int
            Number of coefficients. It must be positive and can not be
            changed afterwards.
        dtype : DTypeLike, optional
            Floating point data type of the coefficients and internal
            buffers. Default: `np.float64`.
        name : str, optional
            Name identifying the processor. It can not be empty.
            Default: `"processor"`.

        """
        self.__length = _check_length(length, "Number of coefficients")
        self.__dtype = _check_dtype(dtype)
        self.name = name
        self.__coefficients = np.zeros(self.__length, dtype=self.__dtype)

    # ======== Coefficients ===================================================
    def set_coefficients(self, coefficients: ArrayLike):
        """Replace the coefficients. No validation is done on the values
        themselves (finiteness, normalization, stability), this is the
        responsibility of the caller.

        Parameters
        ----------
        coefficients : ArrayLike
            1D-array with exactly `length` coefficients.

        """
        coefficients = np.asarray(coefficients)
        if coefficients.shape != (self.__length,):
            raise ValueError(
                f"Expected {self.__length} coefficients, got an array "
                + f"with shape {coefficients.shape}"
            )
        self.__coefficients[:] = coefficients
        return self

    def get_coefficients(self) -> NDArray:
        """Return a copy of the coefficients. Modifying it does not alter
        the processor."""
        return self.__coefficients.copy()

    @property
    def _coefficients(self) -> NDArray:
        """Internal view of the coefficients for the processing routines.
        Assigning to it replaces the coefficients in place."""
        return self.__coefficients

    @_coefficients.setter
    def _coefficients(self, new_coefficients: NDArray):
        self.__coefficients[:] = new_coefficients

    # ======== Processing =====================================================
    @abc.abstractmethod
    def process(self, signal, length: int | None = None):
        """Process a buffer of samples in place.

        Parameters
        ----------
        signal : NDArray, list or `Signal`
            Buffer with samples. It is modified in place.
        length : int, optional
            Number of samples to process. Pass `None` to process the whole
            buffer. Default: `None`.

        Returns
        -------
        signal
            The same (modified) buffer.

        """
        pass

    # ======== Properties =====================================================
    @property
    def length(self) -> int:
        """Number of coefficients."""
        return self.__length

    @property
    def dtype(self) -> np.dtype:
        return self.__dtype

    @property
    def name(self) -> str:
        return self.__name

    @name.setter
    def name(self, new_name: str):
        self.__name = _check_name(new_name)

    @property
    def metadata(self) -> dict:
        """Get a dictionary with metadata about the processor."""
        info: dict = {}
        info["name"] = self.name
        info["processor_type"] = type(self).__name__
        info["number_of_coefficients"] = self.length
        info["dtype"] = str(self.dtype)
        return info

    @property
    def metadata_str(self) -> str:
        txt = f"{type(self).__name__}:\n"
        txt += "-" * (len(txt) - 1) + "\n"
        for k, v in self.metadata.items():
            txt += f"{str(k).replace('_', ' ').capitalize()}: {v}\n"
        return txt

    def __len__(self):
        return self.__length

    def __str__(self):
        return self.metadata_str

    # ======== Plots and copy =================================================
    def plot_coefficients(self) -> tuple[Figure, Axes]:
        """Stem plot of the coefficients.

        Returns
        -------
        fig : `matplotlib.figure.Figure`
            Figure.
        ax : `matplotlib.axes.Axes`
            Axes.

        """
        return general_stem(
            self.get_coefficients().astype(np.float64), title=self.name
        )

    def copy(self):
        """Return an independent copy of the processor with all coefficients
        and internal states."""
        return deepcopy(self)
