"""Browser build of the circle animation, packaged with pygbag."""

import asyncio
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Tuple

import pygame

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from simulation.pygame_surface import PygameSurface
from simulation.runtime import AnimationLoop

DEFAULT_SIZE = (800, 600)

logger = logging.getLogger(__name__)


def _browser_window() -> Optional[Any]:
    """Return the ``js.window`` bridge when running under pygbag."""

    js_spec = importlib.util.find_spec("js")
    if js_spec is None:
        return None

    from js import window  # type: ignore[attr-defined]

    return window


def _disable_beforeunload_prompt(window: Any) -> None:
    """Remove the default browser prompt about unsaved changes."""

    remove_event_listener: Optional[Any]
    remove_event_listener = getattr(window, "removeEventListener", None)
    previous_handler: Optional[Any]
    previous_handler = getattr(window, "onbeforeunload", None)

    if callable(remove_event_listener) and previous_handler is not None:
        remove_event_listener("beforeunload", previous_handler)

    window.onbeforeunload = None


def _prepare_page(window: Optional[Any]) -> Tuple[int, int]:
    """Strip the page margin and return the body size to fill."""

    if window is None:
        return DEFAULT_SIZE

    body = window.document.body
    body.style.margin = "0px"
    # Measured once; the canvas does not follow later resizes.
    return int(body.clientWidth) or DEFAULT_SIZE[0], int(body.clientHeight) or DEFAULT_SIZE[1]


async def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s - %(message)s")

    window = _browser_window()
    if window is not None:
        _disable_beforeunload_prompt(window)
    width, height = _prepare_page(window)

    pygame.init()
    screen = pygame.display.set_mode((width, height))
    loop = AnimationLoop(PygameSurface(screen), width, height, log_callback=logger.debug)
    interval = loop.interval_seconds
    logger.info("Running animation at %sx%s", width, height)

    while True:
        loop.tick()
        pygame.display.update()
        pygame.event.pump()
        await asyncio.sleep(interval)  # Yields to the browser between ticks.


if __name__ == "__main__":
    asyncio.run(main())
