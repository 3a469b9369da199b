# src/pixelcanvas/canvasgen/fill.py
# Constrained fill: one pass, row-major, every cell written exactly once.
# Accent colors may not touch an equal accent on any of the 4 sides; base may.

import logging
from typing import Callable, List, Mapping, Optional, Sequence

from ..grid import GridRows, empty_grid, neighbor_colors
from ..palette import BASE, COLOR_NAMES, COLORS
from ..rng import create_rng, string_hash
from .weights import merge_ratios, pick_weighted, ratio_weight

logger = logging.getLogger(__name__)

def legal_color_names(neighbors: Sequence[int]) -> List[str]:
    """Palette-ordered names that may be placed next to `neighbors`."""
    return [
        name for name in COLOR_NAMES
        if name == "base" or COLORS[name] not in neighbors
    ]

def color_for_cell(
    grid: GridRows,
    x: int,
    y: int,
    width: int,
    height: int,
    ratios: Mapping[str, float],
    rng: Callable[[], float],
) -> int:
    legal = legal_color_names(neighbor_colors(grid, x, y, width, height))
    weights = [ratio_weight(ratios.get(name, 0)) for name in legal]
    # Exactly one draw per cell, even when nothing is selectable.
    r = rng()
    name = pick_weighted(legal, weights, r)
    if name is None:
        logger.debug("empty weighted pool at (%d,%d); falling back to base", x, y)
        return BASE
    return COLORS[name]

def fill_canvas(
    width: int,
    height: int,
    ratios: Mapping[str, float],
    rng: Callable[[], float],
) -> GridRows:
    """Fill a fresh width×height grid from an already-merged ratio map and generator."""
    grid = empty_grid(width, height)
    for y in range(height):
        for x in range(width):
            grid[y][x] = color_for_cell(grid, x, y, width, height, ratios, rng)
    return grid

def generate_canvas(
    width: int,
    height: int,
    seed_string: str,
    custom_ratios: Optional[Mapping[str, float]] = None,
) -> GridRows:
    """
    Produce a height×width grid of 24-bit colors for `seed_string`.
    The ratio overlay and the generator live only for this call.
    """
    ratios = merge_ratios(custom_ratios)
    seed = string_hash(seed_string)
    logger.debug("generating %dx%d canvas, seed %r -> %d", width, height, seed_string, seed)
    return fill_canvas(width, height, ratios, create_rng(seed))
