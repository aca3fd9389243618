"""Fixed-size chain of animated nodes.

Nodes live in a flat list owned by the Chain. Neighbors are found by index
arithmetic, so the chain needs no owning next/prev references.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .config import CircuitConfig, DEFAULT_CONFIG
from .scale_math import divide_scale
from .state import ScaleState, StepResult
from .surface import DrawingSurface, Paint


@dataclass(frozen=True)
class NeighborResult:
    """Node reached by a neighbor lookup.

    Attributes:
        node: The neighbor, or the node itself when the chain end was hit
        exhausted: True when there was no neighbor in the requested direction
    """

    node: "ChainNode"
    exhausted: bool = False


class ChainNode:
    """One animatable node of the chain."""

    def __init__(self, chain: "Chain", index: int):
        self.chain = chain
        self.index = index
        self.state = ScaleState(chain.config)

    @property
    def next(self) -> Optional["ChainNode"]:
        return self.chain.node_at(self.index + 1)

    @property
    def prev(self) -> Optional["ChainNode"]:
        return self.chain.node_at(self.index - 1)

    def draw(self, surface: DrawingSurface, paint: Paint) -> None:
        """Draw this node and every node after it, root to tail."""
        node: Optional[ChainNode] = self
        while node is not None:
            node._draw_self(surface, paint)
            node = node.next

    def _draw_self(self, surface: DrawingSurface, paint: Paint) -> None:
        """Draw the rotating line-groups of this node.

        The first half of the scale grows the line-groups one after another,
        the second half turns the whole node by one rotation step.
        """
        config = self.chain.config
        gap = config.node_gap(paint.width)
        size = config.node_size(paint.width)
        branch = size / config.inner_factor
        sc1 = divide_scale(self.state.scale, 0, 2)
        sc2 = divide_scale(self.state.scale, 1, 2)

        surface.save()
        surface.translate(gap * (self.index + 1), paint.height / 2)
        surface.rotate(config.rot_deg * sc2)
        for j in range(config.lines):
            progress = divide_scale(sc1, j, config.lines)
            stem = size * divide_scale(progress, 0, 2)
            twig = branch * divide_scale(progress, 1, 2)
            surface.save()
            surface.rotate(config.rot_deg * j)
            surface.draw_line(0, 0, stem, 0, paint)
            if twig > 0:
                surface.draw_line(size, 0, size, -twig, paint)
                surface.draw_line(size, 0, size, twig, paint)
            surface.restore()
        surface.restore()

    def update(self) -> StepResult:
        """Advance this node's state by one tick, tagging completion with the index."""
        result = self.state.advance()
        if result.completed:
            return StepResult(
                completed=True, final_scale=result.final_scale, index=self.index
            )
        return result

    def start_updating(self) -> bool:
        return self.state.begin_animating()

    def neighbor(self, direction: int) -> NeighborResult:
        """Get the adjacent node in ``direction`` (-1 for prev, otherwise next).

        At either end of the chain the node itself is returned and the
        result is marked exhausted.
        """
        other = self.prev if direction == -1 else self.next
        if other is None:
            return NeighborResult(self, exhausted=True)
        return NeighborResult(other)

    def __repr__(self) -> str:
        return f"ChainNode(index={self.index}, state={self.state!r})"


class Chain:
    """Owns the nodes and drives the ping-pong traversal between them."""

    def __init__(self, config: CircuitConfig = DEFAULT_CONFIG):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.config = config
        self.nodes: list[ChainNode] = [ChainNode(self, i) for i in range(config.nodes)]
        self.current: ChainNode = self.nodes[0]
        self.direction: int = 1

    @property
    def root(self) -> ChainNode:
        return self.nodes[0]

    def node_at(self, index: int) -> Optional[ChainNode]:
        """Get the node at ``index``, or None outside the chain."""
        if 0 <= index < len(self.nodes):
            return self.nodes[index]
        return None

    def draw(self, surface: DrawingSurface, paint: Paint) -> None:
        self.root.draw(surface, paint)

    def update(self) -> StepResult:
        """Advance the current node; on completion move to its neighbor.

        Reaching either end of the chain flips the traversal direction and
        leaves the boundary node current.
        """
        result = self.current.update()
        if not result.completed:
            return result

        step = self.current.neighbor(self.direction)
        if step.exhausted:
            self.direction *= -1
            self.logger.debug(
                f"Chain end reached at node {self.current.index}, "
                f"direction is now {self.direction:+d}"
            )
        self.current = step.node
        self.logger.debug(
            f"Node {result.index} settled at {result.final_scale}, "
            f"current node is {self.current.index}"
        )
        return result

    def start_updating(self) -> bool:
        return self.current.start_updating()
