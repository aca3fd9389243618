"""Drawing primitives the core drives.

The core never talks to a toolkit directly. It hands numeric parameters to a
DrawingSurface, which the host implements on top of its own painter.
"""

from dataclasses import dataclass
from typing import Protocol

from .config import CircuitConfig


@dataclass(frozen=True)
class Paint:
    """Stroke configuration for one render pass.

    Attributes:
        color: Stroke color as ``#RRGGBB``
        stroke_width: Pen width in pixels
        width: View width in pixels
        height: View height in pixels
    """

    color: str
    stroke_width: float
    width: float
    height: float

    @staticmethod
    def for_view(config: CircuitConfig, width: float, height: float) -> "Paint":
        """Create the paint used for a view of the given size."""
        return Paint(
            color=config.fore_color,
            stroke_width=config.stroke_width(width, height),
            width=width,
            height=height,
        )


class DrawingSurface(Protocol):
    """Transform stack plus straight-line drawing."""

    def fill(self, color: str) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def rotate(self, degrees: float) -> None: ...

    def draw_line(
        self, x1: float, y1: float, x2: float, y2: float, paint: Paint
    ) -> None: ...
