"""Tests for ScaleState and CircuitConfig."""

import dataclasses

import pytest

from circuit_view.core import CircuitConfig, DEFAULT_CONFIG, ScaleState, StepResult
from circuit_view.settings.types import ConfigError


def run_until_complete(state: ScaleState, limit: int = 1000) -> tuple[StepResult, int]:
    """Advance until a step completes; returns the result and tick count."""
    for ticks in range(1, limit + 1):
        result = state.advance()
        if result.completed:
            return result, ticks
    raise AssertionError("step did not complete")


class TestCircuitConfig:
    """Test the fixed configuration object."""

    def test_defaults(self) -> None:
        config = CircuitConfig()
        assert config.nodes == 5
        assert config.lines == 4
        assert config.sc_gap == 0.05
        assert config.sc_div == 0.51
        assert config.delay_ms == 50
        assert config.fore_color == "#4527A0"
        assert config.back_color == "#BDBDBD"

    def test_is_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.nodes = 3  # type: ignore[misc]

    def test_geometry(self) -> None:
        config = CircuitConfig()
        assert config.stroke_width(900, 450) == pytest.approx(5.0)
        assert config.node_gap(600) == pytest.approx(100.0)
        assert config.node_size(600) == pytest.approx(100.0 / 2.9)

    @pytest.mark.parametrize(
        "overrides",
        [{"nodes": 0}, {"lines": 0}, {"sc_gap": 0.0}, {"sc_div": 1.5}, {"delay_ms": -1}],
    )
    def test_invalid_values_rejected(self, overrides: dict) -> None:
        with pytest.raises(ConfigError):
            CircuitConfig(**overrides)


class TestScaleState:
    """Test stepping a single scale."""

    def test_initial_state_is_idle(self) -> None:
        state = ScaleState()
        assert (state.scale, state.direction, state.previous_scale) == (0.0, 0.0, 0.0)
        assert not state.is_animating

    def test_idle_advance_does_nothing(self) -> None:
        state = ScaleState()
        assert state.advance() is StepResult.CONTINUE
        assert state.scale == 0.0

    def test_begin_sets_direction_from_previous(self) -> None:
        state = ScaleState()
        assert state.begin_animating() is True
        assert state.direction == 1

        state.direction = 0.0
        state.scale = state.previous_scale = 1.0
        assert state.begin_animating() is True
        assert state.direction == -1

    def test_begin_is_noop_while_animating(self) -> None:
        state = ScaleState()
        state.begin_animating()
        state.advance()
        scale = state.scale
        assert state.begin_animating() is False
        assert state.direction == 1
        assert state.scale == scale

    def test_forward_step_snaps_to_one(self) -> None:
        state = ScaleState()
        state.begin_animating()
        result, ticks = run_until_complete(state)

        assert result.completed
        assert result.final_scale == 1.0
        assert state.scale == 1.0
        assert state.previous_scale == 1.0
        assert state.direction == 0
        # Slow quarter-speed first half, full speed afterwards
        assert 45 <= ticks <= 55

    def test_completion_fires_once(self) -> None:
        state = ScaleState()
        state.begin_animating()
        run_until_complete(state)
        for _ in range(20):
            assert not state.advance().completed
        assert state.scale == 1.0

    def test_scale_monotonic_during_step(self) -> None:
        state = ScaleState()
        state.begin_animating()
        last = state.scale
        while not state.advance().completed:
            assert state.scale > last
            last = state.scale

    def test_scale_monotonic_during_reverse_step(self) -> None:
        """Scale decreases on every tick of a 1 -> 0 step and lands on 0."""
        state = ScaleState()
        state.begin_animating()
        run_until_complete(state)

        assert state.begin_animating()
        last = state.scale
        ticks = 0
        while True:
            result = state.advance()
            ticks += 1
            if result.completed:
                break
            assert state.scale < last
            last = state.scale
            assert ticks < 1000
        assert state.scale == 0.0
        assert state.direction == 0

    def test_reverse_step_snaps_to_zero(self) -> None:
        state = ScaleState()
        state.begin_animating()
        run_until_complete(state)

        assert state.begin_animating()
        result, _ = run_until_complete(state)
        assert result.final_scale == 0.0
        assert state.scale == 0.0
        assert state.direction == 0
