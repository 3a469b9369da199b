from typing import List, Optional, Sequence, Tuple

Cell = Optional[int]
GridRows = List[List[Cell]]
FrozenGrid = Tuple[Tuple[int, ...], ...]

# (dx, dy): left, right, up, down
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))

def empty_grid(width: int, height: int) -> GridRows:
    """Return a fresh height×width grid with every cell unset (None)."""
    if width < 0 or height < 0:
        raise ValueError(f"grid dimensions must be non-negative, got {width}x{height}")
    return [[None for _ in range(width)] for _ in range(height)]

def dims_of(grid: Sequence[Sequence[Cell]]) -> Tuple[int, int]:
    h = len(grid)
    w = len(grid[0]) if h else 0
    return w, h

def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    return 0 <= x < width and 0 <= y < height

def neighbor_colors(grid: Sequence[Sequence[Cell]], x: int, y: int, width: int, height: int) -> List[int]:
    # Out-of-range and not-yet-filled neighbors are skipped.
    out = []
    for dx, dy in NEIGHBOR_OFFSETS:
        nx, ny = x + dx, y + dy
        if not in_bounds(nx, ny, width, height):
            continue
        c = grid[ny][nx]
        if c is not None:
            out.append(c)
    return out

def freeze(grid: Sequence[Sequence[int]]) -> FrozenGrid:
    return tuple(tuple(row) for row in grid)
