"""Visualization utilities."""

from __future__ import annotations

from typing import Any, Callable, Optional

import matplotlib.pyplot as plt

from advent_solver.src.core.grid import Grid


def plot_grid(
    grid: Grid[Any],
    to_value: Optional[Callable[[Any], float]] = None,
    ax: Optional[Any] = None,
    show: bool = False,
) -> Any:
    """Draw ``grid`` as an image with ``matplotlib``.

    Cells must be numeric or boolean unless ``to_value`` converts them. The
    returned ``AxesImage`` gives access to the rendered array.
    """
    source = grid.map(to_value) if to_value is not None else grid
    data = source.to_array(dtype=float)
    if ax is None:
        _, ax = plt.subplots()
    image = ax.imshow(data, interpolation="nearest")
    ax.axis("off")
    if show:
        plt.show()
    return image


__all__ = ["plot_grid"]
