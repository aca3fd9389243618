"""
circuit_view: animated circuit-like node chain

A row of nodes whose rotating line-groups grow one node at a time on each
click, ping-ponging along the chain.
"""

__version__ = "0.1.0"
__author__ = "circuit_view Contributors"

from .core import (
    CircuitConfig, DEFAULT_CONFIG, ScaleState, StepResult,
    AnimationDriver, Chain, ChainNode, Renderer, Paint
)
from .utils.logging_config import setup_logging

__all__ = [
    # Core
    'CircuitConfig',
    'DEFAULT_CONFIG',
    'ScaleState',
    'StepResult',
    'AnimationDriver',
    'Chain',
    'ChainNode',
    'Renderer',
    'Paint',

    # Logging
    'setup_logging',
]
