# src/pixelcanvas/render/symbols.py
from typing import List, Sequence

from ..palette import color_for_symbol, symbol_for

def to_symbol_matrix(grid: Sequence[Sequence[int]]) -> str:
    """One character per cell, rows joined by newlines (no trailing newline)."""
    return "\n".join("".join(symbol_for(c) for c in row) for row in grid)

def from_symbol_matrix(text: str) -> List[List[int]]:
    """Inverse of to_symbol_matrix; blank lines are ignored."""
    rows = []
    for line in text.splitlines():
        line = line.rstrip("\r")
        if not line:
            continue
        rows.append([color_for_symbol(ch) for ch in line])
    return rows
