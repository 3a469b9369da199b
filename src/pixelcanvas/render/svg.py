# src/pixelcanvas/render/svg.py
# SVG 1.1 markup: one <rect> per cell, solid #RRGGBB fill.
# Layout is fixed: one rect per line, two-space indent, no newline after </svg>.

from typing import List, Sequence

from ..grid import dims_of
from ..palette import hex_rgb

SVG_NS = "http://www.w3.org/2000/svg"

def _check_sizes(pixel_size: int, gap: int = 0) -> None:
    if isinstance(pixel_size, bool) or not isinstance(pixel_size, int) or pixel_size <= 0:
        raise ValueError(f"pixel_size must be a positive int, got {pixel_size!r}")
    if isinstance(gap, bool) or not isinstance(gap, int) or gap < 0:
        raise ValueError(f"gap must be a non-negative int, got {gap!r}")

def _rects(grid: Sequence[Sequence[int]], pixel_size: int, y_offset: int = 0) -> List[str]:
    out = []
    for y, row in enumerate(grid):
        for x, color in enumerate(row):
            out.append(
                f'  <rect x="{x * pixel_size}" y="{y_offset + y * pixel_size}" '
                f'width="{pixel_size}" height="{pixel_size}" fill="#{hex_rgb(color)}"/>'
            )
    return out

def _document(width: int, height: int, rects: List[str]) -> str:
    head = f'<svg width="{width}" height="{height}" xmlns="{SVG_NS}">'
    return "\n".join([head, *rects, "</svg>"])

def to_svg(grid: Sequence[Sequence[int]], pixel_size: int = 20) -> str:
    _check_sizes(pixel_size)
    w, h = dims_of(grid)
    return _document(w * pixel_size, h * pixel_size, _rects(grid, pixel_size))

def to_combined_svg(
    top_grid: Sequence[Sequence[int]],
    main_grid: Sequence[Sequence[int]],
    pixel_size: int = 20,
    gap: int = 40,
) -> str:
    """Top grid stacked above the main grid, `gap` pixels apart, both at x=0."""
    _check_sizes(pixel_size, gap)
    top_w, top_h = dims_of(top_grid)
    main_w, main_h = dims_of(main_grid)
    top_px = top_h * pixel_size
    rects = _rects(top_grid, pixel_size) + _rects(main_grid, pixel_size, y_offset=top_px + gap)
    return _document(max(top_w, main_w) * pixel_size, top_px + gap + main_h * pixel_size, rects)
