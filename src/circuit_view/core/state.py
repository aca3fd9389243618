"""Per-node animation state.

A ScaleState moves its scale from one resting value to the next (0 -> 1 or
1 -> 0) over many ticks and reports the tick on which that step completes.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from .config import CircuitConfig, DEFAULT_CONFIG
from .scale_math import update_value


@dataclass(frozen=True)
class StepResult:
    """Outcome of a single advance of a ScaleState.

    Attributes:
        completed: True when this advance finished the step
        final_scale: Resting scale reached, set only when completed
        index: Index of the node that completed, when known
    """

    completed: bool = False
    final_scale: Optional[float] = None
    index: Optional[int] = None

    CONTINUE: ClassVar["StepResult"]

    @classmethod
    def done(cls, final_scale: float, index: Optional[int] = None) -> "StepResult":
        return cls(completed=True, final_scale=final_scale, index=index)


StepResult.CONTINUE = StepResult()


class ScaleState:
    """Animatable scalar with direction and previous-value bookkeeping."""

    def __init__(self, config: CircuitConfig = DEFAULT_CONFIG):
        self.config = config
        self.scale: float = 0.0
        self.direction: float = 0.0
        self.previous_scale: float = 0.0

    @property
    def is_animating(self) -> bool:
        return self.direction != 0

    def advance(self) -> StepResult:
        """Move the scale by one tick.

        Returns:
            StepResult.CONTINUE while the step is in progress (or when idle),
            a completed result carrying the new resting scale otherwise
        """
        if not self.is_animating:
            return StepResult.CONTINUE

        self.scale += update_value(
            self.scale,
            self.direction,
            self.config.lines,
            1,
            self.config.sc_div,
            self.config.sc_gap,
        )
        if abs(self.scale - self.previous_scale) > 1:
            self.scale = self.previous_scale + self.direction
            self.direction = 0.0
            self.previous_scale = self.scale
            return StepResult.done(self.previous_scale)
        return StepResult.CONTINUE

    def begin_animating(self) -> bool:
        """Start a step away from the current resting value.

        Returns:
            True if the step started, False if one was already running
        """
        if self.is_animating:
            return False
        self.direction = 1 - 2 * self.previous_scale
        return True

    def __repr__(self) -> str:
        return (
            f"ScaleState(scale={self.scale:.3f}, direction={self.direction:+.0f}, "
            f"previous_scale={self.previous_scale:.0f})"
        )
