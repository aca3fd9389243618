"""Renderer tying the chain to the animation driver."""

import logging
from typing import Callable

from .chain import Chain
from .config import CircuitConfig, DEFAULT_CONFIG
from .driver import AnimationDriver, Scheduler
from .state import StepResult
from .surface import DrawingSurface, Paint


class Renderer:
    """Draws the chain and advances it by one tick per render pass.

    Each tap animates exactly one step of one node. The driver keeps
    requesting redraws while the step runs and is stopped on the tick that
    completes it.
    """

    def __init__(
        self,
        request_redraw: Callable[[], None],
        scheduler: Scheduler,
        config: CircuitConfig = DEFAULT_CONFIG,
    ):
        """Initialize the renderer.

        Args:
            request_redraw: Asks the host view to repaint
            scheduler: Paces the redraw that follows each tick
            config: Animation constants
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.config = config
        self.chain = Chain(config)
        self.animator = AnimationDriver(request_redraw, scheduler, config)

    def render(self, surface: DrawingSurface, width: float, height: float) -> None:
        """Paint one frame and run one animation tick.

        Drawing happens before the tick, so the frame shows the state as it
        was before this tick's increment.
        """
        surface.fill(self.config.back_color)
        self.chain.draw(surface, Paint.for_view(self.config, width, height))
        self.animator.tick(self._update_chain)

    def _update_chain(self) -> None:
        result = self.chain.update()
        if result.completed:
            self._on_step_complete(result)

    def _on_step_complete(self, result: StepResult) -> None:
        self.animator.stop()
        self.logger.debug(
            f"Step complete on node {result.index} (scale {result.final_scale})"
        )

    def handle_tap(self) -> None:
        """Start animating the current node unless it is already animating."""
        if self.chain.start_updating():
            self.animator.start()
        else:
            self.logger.debug(
                f"Tap ignored, node {self.chain.current.index} is still animating"
            )
