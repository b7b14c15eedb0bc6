import numpy as np
from numpy.typing import NDArray, ArrayLike, DTypeLike

from .filter import Filter
from ..helpers.ring_buffer import ShiftRegister


class IIRFilter(Filter):
    """IIR filter implemented with the direct-form difference equation

        y[n] = sum_i b[i] x[n-i] - sum_k a[k+1] y[n-1-k]

    with separate histories for inputs and outputs. The leading feedback
    coefficient a0 is assumed to be 1 and is not stored. No stability check is
    done, coefficients with poles outside the unit circle deliver a diverging
    output.

    """

    def __init__(
        self,
        n_b: int,
        n_a: int,
        dtype: DTypeLike = np.float64,
        name: str = "iir",
    ):
        """Instantiate an IIR filter with all coefficients and states set to
        zero. Use `set_coefficients` before filtering.

        Parameters
        ----------
        n_b : int
            Number of feedforward (numerator) coefficients. At least 1.
        n_a : int
            Number of feedback (denominator) coefficients without a0. It can
            be 0, in which case the filter has no feedback.
        dtype : DTypeLike, optional
            Floating point data type. Default: `np.float64`.
        name : str, optional
            Name of the filter. Default: `"iir"`.

        """
        if isinstance(n_b, bool) or not isinstance(n_b, (int, np.integer)):
            raise ValueError(f"n_b must be an integer, got {type(n_b)}")
        if isinstance(n_a, bool) or not isinstance(n_a, (int, np.integer)):
            raise ValueError(f"n_a must be an integer, got {type(n_a)}")
        if n_b < 1:
            raise ValueError("At least one feedforward coefficient is needed")
        if n_a < 0:
            raise ValueError("Number of feedback coefficients can not be < 0")
        super().__init__(int(n_b) + int(n_a), dtype, name)
        self.__n_b = int(n_b)
        self.__n_a = int(n_a)
        self.__input_history = ShiftRegister(self.__n_b, self.dtype)
        self.__output_history = ShiftRegister(self.__n_a, self.dtype)

    # ======== Coefficients ===================================================
    def set_coefficients(self, b: ArrayLike, a: ArrayLike | None = None):
        """Set feedforward and feedback coefficients.

        Parameters
        ----------
        b : ArrayLike
            Feedforward coefficients [b0, b1, ..., b(n_b-1)]. If `a` is `None`,
            the complete vector [b0, ..., b(n_b-1), a1, ..., a(n_a)] with
            `n_b + n_a` elements is expected.
        a : ArrayLike, optional
            Feedback coefficients [a1, a2, ..., a(n_a)]. a0 is assumed to be 1
            and must not be passed. Default: `None`.

        Notes
        -----
        - Ensure that the coefficients deliver a stable filter (poles inside
          the unit circle). This is not checked.

        """
        if a is None:
            return super().set_coefficients(b)

        b = np.atleast_1d(np.asarray(b))
        a = np.asarray(a)
        if a.ndim == 0:
            a = a[None]
        if b.shape != (self.__n_b,):
            raise ValueError(
                f"Expected {self.__n_b} feedforward coefficients, got an "
                + f"array with shape {b.shape}"
            )
        if a.shape != (self.__n_a,):
            raise ValueError(
                f"Expected {self.__n_a} feedback coefficients, got an "
                + f"array with shape {a.shape}"
            )
        return super().set_coefficients(np.concatenate([b, a]))

    @property
    def b(self) -> NDArray:
        """Copy of the feedforward coefficients."""
        return self._coefficients[: self.__n_b].copy()

    @property
    def a(self) -> NDArray:
        """Copy of the feedback coefficients (without a0)."""
        return self._coefficients[self.__n_b :].copy()

    @property
    def ba(self) -> tuple[NDArray, NDArray]:
        return self.b, np.concatenate([np.ones(1, dtype=self.dtype), self.a])

    @property
    def n_b(self) -> int:
        return self.__n_b

    @property
    def n_a(self) -> int:
        return self.__n_a

    @property
    def metadata(self) -> dict:
        info = super().metadata
        info["n_b"] = self.__n_b
        info["n_a"] = self.__n_a
        return info

    # ======== Filtering ======================================================
    def _process_sample(self, x: float) -> float:
        """Apply the difference equation to a single sample and update both
        histories."""
        self.__input_history.shift_in(x)
        feedforward = np.dot(
            self._coefficients[: self.__n_b], self.__input_history.data
        )
        feedback = np.dot(
            self._coefficients[self.__n_b :], self.__output_history.data
        )
        y = feedforward - feedback
        self.__output_history.shift_in(y)
        return y

    def reset(self):
        """Clear input and output histories and set all coefficients to zero.

        Unlike `FIRFilter.reset()`, this also removes the coefficients, so
        `set_coefficients` has to be called again before filtering.

        """
        self.__input_history.reset()
        self.__output_history.reset()
        self._coefficients = 0.0

    @property
    def state(self) -> tuple[NDArray, NDArray]:
        """Copies of the input and output histories, newest sample first."""
        return (
            self.__input_history.data.copy(),
            self.__output_history.data.copy(),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, IIRFilter):
            return NotImplemented
        return (
            self.__n_b == other.n_b
            and self.__n_a == other.n_a
            and self.__input_history == other.__input_history
            and self.__output_history == other.__output_history
            and np.array_equal(self._coefficients, other._coefficients)
        )
