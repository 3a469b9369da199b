# Canonical palette: seven fixed colors, their text symbols and default ratios.

from types import MappingProxyType

BASE     = 0xF5F5DC  # off-white (beige)
ACCENT_1 = 0xFFD700  # yellow
ACCENT_2 = 0x000000  # black
ACCENT_3 = 0x0000FF  # blue
ACCENT_4 = 0xFF69B4  # pink
ACCENT_5 = 0xFFA500  # orange
ACCENT_6 = 0xFF0000  # red

# Order matters: it is the order colors enter the weighted pool.
COLOR_NAMES = ("base", "accent1", "accent2", "accent3", "accent4", "accent5", "accent6")

COLORS = MappingProxyType({
    "base": BASE,
    "accent1": ACCENT_1,
    "accent2": ACCENT_2,
    "accent3": ACCENT_3,
    "accent4": ACCENT_4,
    "accent5": ACCENT_5,
    "accent6": ACCENT_6,
})

SYMBOLS = MappingProxyType({
    BASE: ".",
    ACCENT_1: "Y",
    ACCENT_2: "B",
    ACCENT_3: "U",
    ACCENT_4: "P",
    ACCENT_5: "O",
    ACCENT_6: "R",
})
UNKNOWN_SYMBOL = "?"

# 50% base, 10% each accent.
DEFAULT_RATIOS = MappingProxyType({
    "base": 0.5,
    "accent1": 0.1,
    "accent2": 0.1,
    "accent3": 0.1,
    "accent4": 0.1,
    "accent5": 0.1,
    "accent6": 0.1,
})

def is_accent(color: int) -> bool:
    # Only base may sit next to itself.
    return color != BASE

def symbol_for(color) -> str:
    return SYMBOLS.get(color, UNKNOWN_SYMBOL)

def color_for_symbol(symbol: str) -> int:
    for color, sym in SYMBOLS.items():
        if sym == symbol:
            return color
    raise ValueError(f"unknown color symbol {symbol!r}")

def hex_rgb(color: int) -> str:
    """Format a 24-bit color as RRGGBB (upper case, no leading #)."""
    if not (0 <= color <= 0xFFFFFF):
        raise ValueError(f"color out of 24-bit range: {color!r}")
    return f"{color:06X}"
