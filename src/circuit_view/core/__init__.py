"""
Toolkit-independent animation core for circuit_view.

Usage:
    from circuit_view.core import Renderer

    renderer = Renderer(request_redraw=view.update, scheduler=scheduler)
    renderer.handle_tap()
    renderer.render(surface, width, height)
"""

from .config import CircuitConfig, DEFAULT_CONFIG
from .state import ScaleState, StepResult
from .driver import AnimationDriver, Scheduler, ScheduledCall
from .chain import Chain, ChainNode, NeighborResult
from .surface import DrawingSurface, Paint
from .renderer import Renderer

__all__ = [
    "CircuitConfig",
    "DEFAULT_CONFIG",
    "ScaleState",
    "StepResult",
    "AnimationDriver",
    "Scheduler",
    "ScheduledCall",
    "Chain",
    "ChainNode",
    "NeighborResult",
    "DrawingSurface",
    "Paint",
    "Renderer",
]
