"""Tick pacing for the circuit animation.

The driver does not own a timer loop. Each redraw of the host runs at most
one tick; after the tick the driver asks a Scheduler to request the next
redraw once the fixed delay has elapsed.
"""

import logging
from typing import Callable, Optional, Protocol

from .config import CircuitConfig, DEFAULT_CONFIG


class ScheduledCall(Protocol):
    """Handle of a pending delayed call."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Runs a callback once after a delay in milliseconds."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall: ...


class AnimationDriver:
    """Start/stop flag plus the paced redraw request that follows each tick."""

    def __init__(
        self,
        request_redraw: Callable[[], None],
        scheduler: Scheduler,
        config: CircuitConfig = DEFAULT_CONFIG,
    ):
        """Initialize the driver.

        Args:
            request_redraw: Asks the host surface to repaint
            scheduler: Delays the redraw request that follows a tick
            config: Animation constants (for the tick delay)
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.request_redraw = request_redraw
        self.scheduler = scheduler
        self.config = config
        self.running = False
        self._pending: Optional[ScheduledCall] = None

    def start(self) -> bool:
        """Start ticking and request the first redraw.

        Returns:
            True if the driver was idle and is now running
        """
        if self.running:
            return False
        self.running = True
        self.logger.debug("Animation started")
        self.request_redraw()
        return True

    def stop(self) -> None:
        """Stop ticking and drop any paced redraw request.

        When called from inside a tick action, the redraw that the tick
        schedules afterwards still fires so the resting frame gets painted.
        """
        if not self.running:
            return
        self.running = False
        self.cancel_pending()
        self.logger.debug("Animation stopped")

    @property
    def has_pending(self) -> bool:
        """Whether a paced redraw request is waiting to fire."""
        return self._pending is not None

    def cancel_pending(self) -> None:
        """Drop the paced redraw request, if any."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def tick(self, action: Callable[[], None]) -> bool:
        """Run one tick if the driver is running.

        Args:
            action: Work to perform on this tick

        Returns:
            True if the action ran
        """
        if not self.running:
            return False

        action()
        self._schedule_redraw()
        return True

    def _schedule_redraw(self) -> None:
        self.cancel_pending()
        try:
            self._pending = self.scheduler.call_later(
                self.config.delay_ms, self._on_delay_elapsed
            )
        except Exception as e:
            # The redraw must still happen when the delay cannot be honored
            self.logger.warning(f"Could not schedule tick delay: {e}", exc_info=True)
            self._pending = None
            self.request_redraw()

    def _on_delay_elapsed(self) -> None:
        self._pending = None
        self.request_redraw()
