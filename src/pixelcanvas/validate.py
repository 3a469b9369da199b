from typing import Optional, Sequence

from .grid import dims_of, neighbor_colors
from .palette import is_accent

def validate_canvas(
    grid: Sequence[Sequence[int]],
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> bool:
    """
    Re-check the adjacency rule on a finished grid: no accent cell may have an
    equal color on any of its 4 sides. Scans row-major and stops at the first
    violation. width/height default to the grid's own size.
    """
    gw, gh = dims_of(grid)
    width = gw if width is None else width
    height = gh if height is None else height
    if width > gw or height > gh:
        raise ValueError(f"requested {width}x{height} exceeds grid size {gw}x{gh}")

    for y in range(height):
        for x in range(width):
            c = grid[y][x]
            if is_accent(c) and c in neighbor_colors(grid, x, y, width, height):
                return False
    return True
