from dataclasses import dataclass
from typing import Callable

A = 1664525
C = 1013904223
M = 0x100000000  # 2^32

HASH_MULT = 31   # realized as (h << 5) - h

def int32(x: int) -> int:
    """Two's-complement truncation to a signed 32-bit value."""
    x &= 0xFFFFFFFF
    return x - 0x100000000 if (x & 0x80000000) else x

def utf16_units(s: str):
    # Character codes are UTF-16 code units: astral characters yield a surrogate pair.
    data = s.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)

def string_hash(s: str) -> int:
    """
    Polynomial string hash with 32-bit wraparound:
      h = int32((h << 5) - h + code)   for every UTF-16 code unit
    Returns |h|, so the result lies in 0..2^31. The empty string hashes to 0.
    """
    if not isinstance(s, str):
        raise TypeError(f"seed must be a str, not {type(s).__name__}")
    h = 0
    for code in utf16_units(s):
        h = int32((h << 5) - h + code)
    return abs(h)

def lcg_next(state: int) -> int:
    return (state * A + C) % M

@dataclass
class LCGRandom:
    state: int
    def next32(self) -> int:
        self.state = lcg_next(self.state)
        return self.state
    def next_float(self) -> float:
        # [0, 1): the state is always < 2^32
        return self.next32() / M

def create_rng(seed: int) -> Callable[[], float]:
    """
    Return a generator function; each call advances the LCG and yields a
    float in [0, 1). The seed is the pre-call state, so the first output is
    lcg_next(seed) / 2^32.
    """
    if seed < 0:
        raise ValueError("seed must be non-negative")
    return LCGRandom(seed % M).next_float
