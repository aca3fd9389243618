"""End-to-end tests for the Renderer driving the chain."""

from circuit_view.core import Renderer


class RedrawTarget:
    """Stands in for the host view's repaint request."""

    def __init__(self) -> None:
        self.requests = 0

    def __call__(self) -> None:
        self.requests += 1


def animate(renderer: Renderer, surface, scheduler, limit: int = 500) -> int:  # type: ignore[no-untyped-def]
    """Render frames until the driver stops; returns the number of frames."""
    frames = 0
    while renderer.animator.running:
        renderer.render(surface, 600, 300)
        scheduler.run_pending()
        frames += 1
        assert frames < limit
    return frames


class TestRenderer:
    """Test render/tap orchestration."""

    def test_render_clears_then_draws(self, surface, scheduler) -> None:
        renderer = Renderer(RedrawTarget(), scheduler)
        renderer.render(surface, 600, 300)

        assert surface.ops[0] == ("fill", "#BDBDBD")
        assert len(surface.of_kind("line")) == 20
        # Idle: no tick, no paced redraw
        assert scheduler.calls == []

    def test_tap_on_idle_view_animates_first_node(self, surface, scheduler) -> None:
        redraw = RedrawTarget()
        renderer = Renderer(redraw, scheduler)

        renderer.handle_tap()
        node = renderer.chain.nodes[0]
        assert node.state.direction == 1
        assert renderer.animator.running
        assert redraw.requests == 1

        renderer.render(surface, 600, 300)
        assert node.state.scale > 0
        first = node.state.scale
        scheduler.run_pending()
        renderer.render(surface, 600, 300)
        assert node.state.scale > first

    def test_step_completes_and_moves_on(self, surface, scheduler) -> None:
        renderer = Renderer(RedrawTarget(), scheduler)
        renderer.handle_tap()
        frames = animate(renderer, surface, scheduler)

        node = renderer.chain.nodes[0]
        assert frames > 1
        assert node.state.scale == 1.0
        assert node.state.direction == 0
        assert not renderer.animator.running
        assert renderer.chain.current.index == 1
        assert renderer.chain.nodes[1].state.scale == 0.0

    def test_frame_shows_state_before_tick(self, surface, scheduler) -> None:
        renderer = Renderer(RedrawTarget(), scheduler)
        renderer.handle_tap()
        renderer.render(surface, 600, 300)

        # Node 0 was drawn at scale 0 even though the tick then advanced it
        first_stem = surface.of_kind("line")[0]
        assert first_stem[3] == 0
        assert renderer.chain.nodes[0].state.scale > 0

    def test_tap_while_animating_is_ignored(self, surface, scheduler) -> None:
        redraw = RedrawTarget()
        renderer = Renderer(redraw, scheduler)
        renderer.handle_tap()
        renderer.render(surface, 600, 300)
        scale = renderer.chain.nodes[0].state.scale

        renderer.handle_tap()
        assert redraw.requests == 1
        assert renderer.chain.nodes[0].state.scale == scale

    def test_one_tap_per_step(self, surface, scheduler) -> None:
        renderer = Renderer(RedrawTarget(), scheduler)
        for expected in [1, 2, 3, 4, 4, 3]:
            renderer.handle_tap()
            animate(renderer, surface, scheduler)
            assert renderer.chain.current.index == expected
        assert renderer.chain.direction == -1
