import re
import pytest
from pixelcanvas.canvasgen.generator import generate
from pixelcanvas.palette import ACCENT_2, ACCENT_5, BASE
from pixelcanvas.render.svg import SVG_NS, to_combined_svg, to_svg
from pixelcanvas.render.symbols import from_symbol_matrix, to_symbol_matrix

RECT = re.compile(r'<rect x="(\d+)" y="(\d+)" width="(\d+)" height="(\d+)" fill="#([0-9A-F]{6})"/>')

def test_symbol_matrix_shape():
    res = generate("shape")
    lines = to_symbol_matrix(res.main_grid).split("\n")
    assert len(lines) == 24
    assert all(len(ln) == 19 for ln in lines)

def test_symbol_matrix_unknown_and_roundtrip():
    grid = [[BASE, ACCENT_2], [0x010203, ACCENT_5]]
    assert to_symbol_matrix(grid) == ".B\n?O"
    assert from_symbol_matrix(".B\nOO\n") == [[BASE, ACCENT_2], [ACCENT_5, ACCENT_5]]
    assert to_symbol_matrix([]) == ""

def test_svg_rect_per_cell():
    res = generate("svg")
    svg = to_svg(res.main_grid, pixel_size=10)
    assert svg.startswith(f'<svg width="190" height="240" xmlns="{SVG_NS}">')
    assert svg.endswith("</svg>")
    rects = RECT.findall(svg)
    assert len(rects) == 19 * 24
    x, y, w, h, fill = rects[19 + 2]  # row 1, col 2
    assert (x, y, w, h) == ("20", "10", "10", "10")
    assert int(fill, 16) == res.main_grid[1][2]

def test_svg_uses_grid_size():
    svg = to_svg([[BASE, BASE, BASE]], pixel_size=5)
    assert '<svg width="15" height="5"' in svg
    assert svg.count("<rect") == 3

def test_combined_svg_stacks_with_gap():
    top = [[ACCENT_2, BASE]]
    main = [[BASE, ACCENT_5], [ACCENT_5, BASE]]
    svg = to_combined_svg(top, main, pixel_size=4, gap=3)
    assert svg.split("\n")[0] == f'<svg width="8" height="15" xmlns="{SVG_NS}">'
    rects = RECT.findall(svg)
    assert len(rects) == 6
    assert rects[0] == ("0", "0", "4", "4", "000000")
    # main rows start at top height (4) + gap (3)
    assert rects[2][:2] == ("0", "7")
    assert rects[5][:2] == ("4", "11")

def test_bad_sizes_rejected():
    with pytest.raises(ValueError):
        to_svg([[BASE]], pixel_size=0)
    with pytest.raises(ValueError):
        to_combined_svg([[BASE]], [[BASE]], gap=-1)
