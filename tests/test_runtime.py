"""Tests for the fixed timestep animation loop."""

from __future__ import annotations

import json
import math

import pytest

from simulation.logic import AnimationConfig
from simulation.logic import AnimationState
from simulation.recording import RecordingSurface
from simulation.runtime import AnimationLoop


def _fresh_loop(width: int = 640, height: int = 480, **kwargs):
    surface = RecordingSurface()
    return surface, AnimationLoop(surface, width, height, **kwargs)


def test_position_after_n_ticks() -> None:
    _, loop = _fresh_loop()

    for _ in range(250):
        loop.tick()

    assert loop.state.position_x == pytest.approx(250 * 0.05)
    assert loop.snapshot().tick == 250


def test_position_strictly_increases_each_tick() -> None:
    _, loop = _fresh_loop()

    previous = loop.state.position_x
    for _ in range(20):
        snapshot = loop.tick()
        assert snapshot.position_x > previous
        assert snapshot.position_x - previous == pytest.approx(0.05)
        previous = snapshot.position_x


def test_tick_clears_before_filling_circle() -> None:
    surface, loop = _fresh_loop(width=300, height=200)

    loop.tick()

    assert surface.names() == [
        "fill_style",
        "fill_rect",
        "begin_path",
        "arc",
        "fill_style",
        "fill",
    ]
    clear_style, clear, _, arc, circle_style, _ = surface.commands
    assert clear_style.args == ["white"]
    assert clear.args == [0, 0, 300, 200]
    assert circle_style.args == ["black"]
    assert surface.fill_style == "black"


def test_circle_follows_updated_position() -> None:
    surface, loop = _fresh_loop()

    for _ in range(3):
        surface.reset()
        snapshot = loop.tick()
        arc = next(command for command in surface.commands if command.name == "arc")
        cx, cy, radius, start, end = arc.args
        assert cx == snapshot.position_x
        assert cy == 100
        assert radius == 50
        assert start == 0
        assert end == pytest.approx(2 * math.pi)


def test_custom_config_and_state_are_used() -> None:
    state = AnimationState(position_x=10.0)
    config = AnimationConfig(fps=10, velocity_x=5.0, circle_y=20.0, circle_radius=3.0)
    surface, loop = _fresh_loop(config=config, state=state)

    loop.tick()

    assert state.position_x == pytest.approx(10.5)
    arc = surface.commands[3]
    assert arc.args[:3] == [pytest.approx(10.5), 20.0, 3.0]
    assert loop.interval_seconds == pytest.approx(0.1)


def test_tick_ignores_scheduler_arguments() -> None:
    _, loop = _fresh_loop()

    loop.tick(0.016)

    assert loop.state.position_x == pytest.approx(0.05)


def test_start_registers_tick_with_scheduler() -> None:
    _, loop = _fresh_loop()
    registrations = []

    loop.start(lambda callback, interval: registrations.append((callback, interval)))

    assert len(registrations) == 1
    callback, interval = registrations[0]
    assert interval == pytest.approx(0.001)
    callback()
    assert loop.snapshot().tick == 1


def test_log_callback_receives_messages() -> None:
    messages = []
    _, loop = _fresh_loop(log_callback=messages.append)
    loop.start(lambda callback, interval: None)

    assert any("640x480" in message for message in messages)
    assert any("every 1.0 ms" in message for message in messages)


def test_snapshot_serializes_to_json() -> None:
    _, loop = _fresh_loop(width=10, height=20)
    loop.tick()

    payload = json.loads(loop.snapshot().to_json())

    assert payload["tick"] == 1
    assert payload["width"] == 10
    assert payload["height"] == 20
    assert payload["position_x"] == pytest.approx(0.05)


@pytest.mark.parametrize("width,height", [(0, 10), (10, -1), (10.5, 10)])
def test_rejects_invalid_dimensions(width, height) -> None:
    with pytest.raises(ValueError):
        AnimationLoop(RecordingSurface(), width, height)
