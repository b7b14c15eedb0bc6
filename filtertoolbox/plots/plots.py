"""
Includes some basic plotting templates
"""

import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes
from numpy import arange
from numpy.typing import NDArray

try:
    from seaborn import set_style

    set_style("whitegrid")
except ModuleNotFoundError as e:
    print("Seaborn will not be used for plotting: ", e)
    pass


def show():
    """Show created plots by using this wrapper around matplotlib's show."""
    plt.show()


def general_plot(
    x: NDArray | None,
    matrix: NDArray,
    range_x=None,
    range_y=None,
    log: bool = False,
    labels=None,
    xlabel: str = "Normalized frequency",
    ylabel: str | None = None,
    info_box: str | None = None,
    tight_layout: bool = True,
) -> tuple[Figure, Axes]:
    """Generic plot template.

    Parameters
    ----------
    x : array-like
        Vector for x axis. Pass `None` to generate automatically.
    matrix : NDArray
        Matrix with data to plot. Each column is a line.
    range_x : array-like, optional
        Range to show for x axis. Default: None.
    range_y : array-like, optional
        Range to show for y axis. Default: None.
    log : bool, optional
        Show x axis as logarithmic. Default: `False`.
    labels : list or str, optional
        Labels for the drawn lines as list of strings. Default: `None`.
    xlabel : str, optional
        Label for x axis. Default: `"Normalized frequency"`.
    ylabel : str, optional
        Label for y axis. Default: None.
    info_box : str, optional
        String containing extra information to be shown in a info box on the
        plot. Default: None.
    tight_layout: bool, optional
        When `True`, tight layout is activated. Default: `True`.

    Returns
    -------
    fig, ax

    """
    fig, ax = plt.subplots(1, 1, figsize=(8, 5))
    if matrix.ndim == 1:
        matrix = matrix[..., None]
    elif matrix.ndim > 2:
        raise ValueError("Only 1D and 2D-arrays are supported")
    if x is None:
        x = arange(matrix.shape[0])
    if labels is not None:
        if type(labels) not in (list, tuple):
            assert type(labels) is str, "labels should be a list or a string"
            labels = [labels]
        ax.plot(x, matrix, label=labels)
        ax.legend()
    else:
        ax.plot(x, matrix)
    if log:
        ax.set_xscale("log")
    if range_x is not None:
        ax.set_xlim(range_x)
    if range_y is not None:
        ax.set_ylim(range_y)
    if ylabel is not None:
        ax.set_ylabel(ylabel)
    if xlabel is not None:
        ax.set_xlabel(xlabel)
    if info_box is not None:
        ax.text(
            0.1,
            0.5,
            info_box,
            transform=ax.transAxes,
            verticalalignment="top",
            bbox=dict(boxstyle="round", facecolor="grey", alpha=0.75),
        )
    if tight_layout:
        fig.tight_layout()
    return fig, ax


def general_stem(
    values: NDArray,
    xlabel: str = "Tap",
    ylabel: str | None = "Coefficient",
    title: str | None = None,
    tight_layout: bool = True,
) -> tuple[Figure, Axes]:
    """Stem plot template for coefficient vectors.

    Parameters
    ----------
    values : NDArray
        1D-array with the values to plot.
    xlabel : str, optional
        Label for x axis. Default: `"Tap"`.
    ylabel : str, optional
        Label for y axis. Default: `"Coefficient"`.
    title : str, optional
        Title of the plot. Default: None.
    tight_layout: bool, optional
        When `True`, tight layout is activated. Default: `True`.

    Returns
    -------
    fig, ax

    """
    if values.ndim != 1:
        raise ValueError("Only 1D-arrays are supported")
    fig, ax = plt.subplots(1, 1, figsize=(8, 5))
    ax.stem(arange(len(values)), values)
    ax.set_xlabel(xlabel)
    if ylabel is not None:
        ax.set_ylabel(ylabel)
    if title is not None:
        ax.set_title(title)
    if tight_layout:
        fig.tight_layout()
    return fig, ax
