# src/pixelcanvas/canvasgen/generator.py
# Top + main canvas for a seed string, packaged with its metadata.

from dataclasses import dataclass
from typing import Mapping, Optional

from ..config import DEFAULT_LAYOUT, CanvasDims, CanvasLayout
from ..grid import FrozenGrid, freeze
from ..rng import string_hash
from .fill import generate_canvas
from .weights import merge_ratios

TOP_SUFFIX = "-top"
MAIN_SUFFIX = "-main"

@dataclass(frozen=True)
class Dimensions:
    top: CanvasDims
    main: CanvasDims

@dataclass(frozen=True)
class GenerationResult:
    top_grid: FrozenGrid
    main_grid: FrozenGrid
    seed: str
    seed_value: int
    ratios: Mapping[str, float]
    dimensions: Dimensions

def generate(
    seed_string: str,
    custom_ratios: Optional[Mapping[str, float]] = None,
    layout: CanvasLayout = DEFAULT_LAYOUT,
) -> GenerationResult:
    """
    Build the top canvas from seed_string + "-top", then the main canvas from
    seed_string + "-main". Each canvas gets its own generator, so neither
    depends on how many draws the other consumed.
    seed_value is the hash of the bare seed string (no suffix).
    """
    ratios = merge_ratios(custom_ratios)
    seed_value = string_hash(seed_string)

    top = generate_canvas(layout.top.width, layout.top.height,
                          seed_string + TOP_SUFFIX, custom_ratios)
    main = generate_canvas(layout.main.width, layout.main.height,
                           seed_string + MAIN_SUFFIX, custom_ratios)

    return GenerationResult(
        top_grid=freeze(top),
        main_grid=freeze(main),
        seed=seed_string,
        seed_value=seed_value,
        ratios=ratios,
        dimensions=Dimensions(top=layout.top, main=layout.main),
    )
