"""Desktop window running the circle animation with arcade."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Callable

import arcade

REPO_ROOT = Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from simulation.arcade_surface import ArcadeSurface
from simulation.recording import RecordingSurface
from simulation.runtime import AnimationLoop

SCREEN_TITLE = "Canvas Motion Demo"

logger = logging.getLogger(__name__)


class DemoWindow(arcade.Window):
    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height, SCREEN_TITLE)
        self.background_color = arcade.color.WHITE
        self._frame = RecordingSurface()
        self._loop = AnimationLoop(self._frame, width, height, log_callback=logger.debug)
        self._loop.start(self._schedule)

    def _schedule(self, callback: Callable[..., Any], interval: float) -> None:
        def _run(delta_time: float) -> None:
            # Only the most recent frame is kept for on_draw.
            self._frame.reset()
            callback(delta_time)

        arcade.schedule(_run, interval)

    def on_draw(self) -> None:
        """Replay the last recorded frame."""
        self.clear()
        self._frame.replay(ArcadeSurface(self.height))


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s %(name)s - %(message)s",
        stream=sys.stdout,
    )


def main() -> None:
    """Entrypoint for launching the demo window."""
    _configure_logging()
    width, height = arcade.get_display_size()
    logger.info("Opening %sx%s animation window", width, height)
    DemoWindow(width, height)
    arcade.run()


if __name__ == "__main__":
    main()
