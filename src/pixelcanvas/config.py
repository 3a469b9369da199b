from dataclasses import dataclass, field

@dataclass(frozen=True)
class CanvasDims:
    width: int
    height: int

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"canvas dimensions must be non-negative, got {self.width}x{self.height}")

@dataclass(frozen=True)
class CanvasLayout:
    # Standard layout: a 19x5 strip above the 19x24 main canvas.
    top: CanvasDims = field(default_factory=lambda: CanvasDims(19, 5))
    main: CanvasDims = field(default_factory=lambda: CanvasDims(19, 24))

# Default layout (callers may pass their own to generate())
DEFAULT_LAYOUT = CanvasLayout()
