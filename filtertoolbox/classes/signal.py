"""
Signal class
"""

from warnings import warn
from copy import deepcopy
import numpy as np
from numpy.typing import NDArray, ArrayLike, DTypeLike

from ..helpers.other import _check_dtype, _check_length


class Signal:
    """Fixed-length container for a single-channel time series. The number
    of samples is defined on construction and can not change afterwards, so
    that a signal can be used as a source and sink for processors of a given
    length.

    """

    # ======== Constructor and State handler ==================================
    def __init__(self, length_samples: int, dtype: DTypeLike = np.float64):
        """Create a new signal with all samples set to zero.

        Parameters
        ----------
        length_samples : int
            Number of samples of the signal. It must be positive.
        dtype : DTypeLike, optional
            Floating point data type of the samples. Default: `np.float64`.

        Methods
        -------
        Constructors:
            from_time_data, from_file.
        Statistics:
            energy, power, rms.
        General:
            save_signal, copy.

        """
        self.__length_samples = _check_length(length_samples, "Signal length")
        self.__dtype = _check_dtype(dtype)
        self.__time_data = np.zeros(self.__length_samples, dtype=self.__dtype)

    @staticmethod
    def from_time_data(
        time_data: ArrayLike, dtype: DTypeLike | None = None
    ) -> "Signal":
        """Create a signal from a vector of samples. The samples are copied.

        Parameters
        ----------
        time_data : ArrayLike
            1D-array with the samples.
        dtype : DTypeLike, optional
            Data type for the signal. Pass `None` to use the data type of
            `time_data` if it is a floating point type or `np.float64`
            otherwise. Default: `None`.

        Returns
        -------
        Signal

        """
        time_data = np.asarray(time_data)
        if dtype is None:
            dtype = (
                time_data.dtype
                if np.issubdtype(time_data.dtype, np.floating)
                else np.float64
            )
        if time_data.ndim != 1:
            raise ValueError(
                "Time data must be a 1D-array, got "
                + f"{time_data.ndim} dimensions"
            )
        signal = Signal(len(time_data), dtype)
        signal.time_data = time_data
        return signal

    @staticmethod
    def from_file(
        path: str, length_samples: int, dtype: DTypeLike = np.float64
    ) -> "Signal":
        """Read a signal from a text file with whitespace-separated (space,
        tab or newline) values. Exactly `length_samples` values are read.

        Parameters
        ----------
        path : str
            Path to the text file.
        length_samples : int
            Number of samples to read.
        dtype : DTypeLike, optional
            Data type of the signal. Default: `np.float64`.

        Returns
        -------
        Signal

        Raises
        ------
        OSError
            If the file can not be opened.
        ValueError
            If the file contains fewer values than requested or a value can
            not be parsed.

        Notes
        -----
        - Values after the first `length_samples` are ignored and a warning
          is shown.

        """
        signal = Signal(length_samples, dtype)
        with open(path, "r") as data_file:
            tokens = data_file.read().split()

        if len(tokens) < signal.length_samples:
            raise ValueError(
                f"Failed to read data: {signal.length_samples} values were "
                + f"expected but the file contains only {len(tokens)}"
            )
        if len(tokens) > signal.length_samples:
            warn(
                f"File contains {len(tokens)} values, only the first "
                + f"{signal.length_samples} are used"
            )

        try:
            signal.time_data = np.array(
                [float(t) for t in tokens[: signal.length_samples]],
                dtype=signal.dtype,
            )
        except ValueError as e:
            raise ValueError(f"Failed to read data: {e}") from e
        return signal

    # ======== Properties and setters =========================================
    @property
    def time_data(self) -> NDArray:
        """Array with the time samples. It has shape (length_samples,) and
        can be modified in place. Assigning a new vector copies its values
        and requires the same length.

        """
        return self.__time_data

    @time_data.setter
    def time_data(self, new_time_data: ArrayLike):
        new_time_data = np.asarray(new_time_data)
        if new_time_data.shape != (self.__length_samples,):
            raise ValueError(
                f"Time data with shape {new_time_data.shape} does not fit a "
                + f"signal with {self.__length_samples} samples"
            )
        self.__time_data[:] = new_time_data

    @property
    def length_samples(self) -> int:
        return self.__length_samples

    @property
    def dtype(self) -> np.dtype:
        return self.__dtype

    @property
    def metadata(self) -> dict:
        """Return dictionary with metadata about the signal."""
        info = {}
        info["signal_length_samples"] = self.length_samples
        info["dtype"] = str(self.dtype)
        info["rms"] = self.rms()
        return info

    @property
    def metadata_str(self) -> str:
        txt = "Signal:\n"
        txt += "-" * (len(txt) - 1) + "\n"
        for k, v in self.metadata.items():
            txt += f"{str(k).replace('_', ' ').capitalize()}: {v}\n"
        return txt

    # ======== Statistics =====================================================
    def energy(self) -> float:
        """Sum of squared samples."""
        return np.sum(self.__time_data * self.__time_data)

    def power(self) -> float:
        """Energy divided by the number of samples."""
        return self.energy() / self.__length_samples

    def rms(self) -> float:
        """Root mean squared value, i.e., square root of the power."""
        return np.sqrt(self.power())

    # ======== Saving and copy ================================================
    def save_signal(self, path: str):
        """Write the samples into a text file, one value per line. An existing
        file is overwritten.

        Parameters
        ----------
        path : str
            Path of the output file.

        """
        np.savetxt(path, self.__time_data, fmt="%.17g")
        return self

    def copy(self) -> "Signal":
        """Returns a copy of the object.

        Returns
        -------
        new_sig : `Signal`
            Copy of Signal.

        """
        return deepcopy(self)

    # ======== Container protocol and arithmetic ==============================
    def __len__(self):
        """Length of time signal in samples."""
        return self.__length_samples

    def __str__(self):
        return self.metadata_str

    def __iter__(self):
        """Iterate over the samples."""
        return iter(self.__time_data)

    def __getitem__(self, index):
        return self.__time_data[index]

    def __setitem__(self, index, value):
        self.__time_data[index] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Signal):
            return NotImplemented
        return self.__length_samples == other.length_samples and bool(
            np.array_equal(self.__time_data, other.time_data)
        )

    def __check_compatible(self, other: "Signal"):
        if not isinstance(other, Signal):
            raise TypeError(f"Expected a Signal, got {type(other)}")
        if other.length_samples != self.__length_samples:
            raise ValueError(
                "Signals must have the same length, got "
                + f"{self.__length_samples} and {other.length_samples}"
            )

    def __add__(self, other: "Signal") -> "Signal":
        self.__check_compatible(other)
        result = self.copy()
        result += other
        return result

    def __iadd__(self, other: "Signal") -> "Signal":
        self.__check_compatible(other)
        self.__time_data += other.time_data
        return self

    def __sub__(self, other: "Signal") -> "Signal":
        self.__check_compatible(other)
        result = self.copy()
        result -= other
        return result

    def __isub__(self, other: "Signal") -> "Signal":
        self.__check_compatible(other)
        self.__time_data -= other.time_data
        return self
