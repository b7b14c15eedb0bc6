import numpy as np
from numpy.typing import NDArray

from .filter import Filter, _filter_buffer, _filter_container


class FilterChain:
    """This is a utility class for applying a series of filters sequentially
    on a stream of samples."""

    def __init__(self, filters: list[Filter]):
        """Instantiate a filter chain from a list of filters. They will be
        applied in the provided order.

        Parameters
        ----------
        filters : list[Filter]
            List containing the filters.

        """
        if len(filters) == 0:
            raise ValueError("A filter chain needs at least one filter")
        for f in filters:
            if not isinstance(f, (Filter, FilterChain)):
                raise TypeError(f"{type(f)} is not a filter")
        self.filters = list(filters)

    @property
    def n_filters(self):
        return len(self.filters)

    @property
    def ba(self) -> tuple[NDArray, NDArray]:
        """Transfer function of the whole chain, i.e., the product of the
        transfer functions of all filters."""
        b = np.ones(1)
        a = np.ones(1)
        for f in self.filters:
            b_f, a_f = f.ba
            b = np.convolve(b, b_f)
            a = np.convolve(a, a_f)
        return b, a

    def reset(self):
        for f in self.filters:
            f.reset()

    def _process_sample(self, x: float) -> float:
        for f in self.filters:
            x = f._process_sample(x)
        return x

    def _warn_if_silent(self):
        for f in self.filters:
            f._warn_if_silent()

    def process(self, signal, length: int | None = None):
        """Filter a buffer in place with all filters. See `Filter.process`."""
        return _filter_buffer(self, signal, length)

    def process_sequence(self, container):
        """Filter an ordered container in place with all filters. See
        `Filter.process_sequence`."""
        return _filter_container(self, container)
