# src/pixelcanvas/canvasgen/weights.py
# Ratio handling and weighted selection.
# Ratios are quantized to whole percentage points with floor(), never rounded:
# a ratio below 0.01 carries zero weight and its color can never be picked.

import math
from bisect import bisect_right
from numbers import Real
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from ..palette import COLOR_NAMES, DEFAULT_RATIOS

def _check_ratio(name, value) -> float:
    if name not in COLOR_NAMES:
        raise ValueError(f"unknown color name in ratios: {name!r}")
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"ratio for {name!r} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"ratio for {name!r} must be finite, got {value!r}")
    if value < 0:
        raise ValueError(f"ratio for {name!r} must be non-negative, got {value!r}")
    return value

def merge_ratios(custom: Optional[Mapping[str, float]] = None) -> Mapping[str, float]:
    """
    Overlay `custom` on the default ratios. Only the names present in `custom`
    change; the result is a fresh read-only mapping in palette order.
    Malformed entries raise ValueError here so they never reach the fill loop.
    """
    merged = dict(DEFAULT_RATIOS)
    if custom:
        for name, value in custom.items():
            merged[name] = _check_ratio(name, value)
    return MappingProxyType({name: merged[name] for name in COLOR_NAMES})

def ratio_weight(ratio: float) -> int:
    return math.floor(ratio * 100)

def cumulative_weights(weights: Sequence[int]) -> Tuple[int, ...]:
    out = []
    total = 0
    for w in weights:
        total += w
        out.append(total)
    return tuple(out)

def pick_weighted(items: Sequence, weights: Sequence[int], r: float):
    """
    Select items[i] where i is the slot of floor(r * total) in the cumulative
    weights. Equivalent to indexing a pool with each item repeated weights[i]
    times, in order. Returns None when the total weight is zero.
    """
    cum = cumulative_weights(weights)
    total = cum[-1] if cum else 0
    if total <= 0:
        return None
    index = math.floor(r * total)
    return items[bisect_right(cum, index)]
