"""Fixed animation and geometry constants for the circuit view.

All constants are collected in one frozen dataclass that is built once at
startup and shared by the chain, the renderer and the node drawing code.
"""

from dataclasses import dataclass

from circuit_view.settings.types import ConfigError


@dataclass(frozen=True)
class CircuitConfig:
    """Immutable configuration for the circuit animation.

    Attributes:
        nodes: Number of nodes in the chain
        lines: Number of rotated line-groups drawn per node
        sc_gap: Base scale increment per tick
        sc_div: Discretization divisor for the mirrored interpolation
        stroke_factor: View min-dimension divided by this gives stroke width
        rot_deg: Rotation between line-groups, in degrees
        size_factor: Node spacing divided by this gives node size
        inner_factor: Node size divided by this gives branch length
        delay_ms: Pause between a tick and the next redraw request
        fore_color: Line color
        back_color: Background color
    """

    nodes: int = 5
    lines: int = 4
    sc_gap: float = 0.05
    sc_div: float = 0.51
    stroke_factor: int = 90
    rot_deg: float = 90.0
    size_factor: float = 2.9
    inner_factor: float = 5.6
    delay_ms: int = 50
    fore_color: str = "#4527A0"
    back_color: str = "#BDBDBD"

    def __post_init__(self) -> None:
        if self.nodes < 1:
            raise ConfigError(f"nodes must be positive, got {self.nodes}")
        if self.lines < 1:
            raise ConfigError(f"lines must be positive, got {self.lines}")
        if self.sc_gap <= 0:
            raise ConfigError(f"sc_gap must be positive, got {self.sc_gap}")
        if not 0 < self.sc_div < 1:
            raise ConfigError(f"sc_div must be in (0, 1), got {self.sc_div}")
        if self.stroke_factor <= 0 or self.size_factor <= 0 or self.inner_factor <= 0:
            raise ConfigError("geometry factors must be positive")
        if self.delay_ms < 0:
            raise ConfigError(f"delay_ms must not be negative, got {self.delay_ms}")

    def stroke_width(self, width: float, height: float) -> float:
        """Stroke width for a view of the given size."""
        return min(width, height) / self.stroke_factor

    def node_gap(self, width: float) -> float:
        """Horizontal spacing between node centers."""
        return width / (self.nodes + 1)

    def node_size(self, width: float) -> float:
        """Length of a line-group stem."""
        return self.node_gap(width) / self.size_factor


DEFAULT_CONFIG = CircuitConfig()
