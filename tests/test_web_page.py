"""Tests for the page setup performed by the browser build."""

from __future__ import annotations

import importlib.util
import os
from pathlib import Path
from types import SimpleNamespace

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
pytest.importorskip("pygame")

WEB_MAIN = Path(__file__).resolve().parents[1] / "web" / "main.py"


def _load_web_main():
    spec = importlib.util.spec_from_file_location("web_main", WEB_MAIN)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _fake_window(width: int, height: int) -> SimpleNamespace:
    removed = []
    window = SimpleNamespace(
        document=SimpleNamespace(
            body=SimpleNamespace(
                style=SimpleNamespace(margin="8px"),
                clientWidth=width,
                clientHeight=height,
            )
        ),
        onbeforeunload=lambda event: "unsaved",
        removeEventListener=lambda name, handler: removed.append((name, handler)),
    )
    window.removed = removed
    return window


def test_import_does_not_start_the_loop() -> None:
    web_main = _load_web_main()

    assert callable(web_main.main)
    assert web_main.DEFAULT_SIZE == (800, 600)


def test_prepare_page_strips_margin_and_measures_body() -> None:
    web_main = _load_web_main()
    window = _fake_window(1024, 768)

    size = web_main._prepare_page(window)

    assert window.document.body.style.margin == "0px"
    assert size == (1024, 768)


def test_prepare_page_falls_back_for_empty_body() -> None:
    web_main = _load_web_main()

    assert web_main._prepare_page(_fake_window(0, 0)) == web_main.DEFAULT_SIZE
    assert web_main._prepare_page(None) == web_main.DEFAULT_SIZE


def test_size_is_measured_once() -> None:
    web_main = _load_web_main()
    window = _fake_window(640, 480)

    size = web_main._prepare_page(window)
    window.document.body.clientWidth = 1920

    assert size == (640, 480)


def test_beforeunload_prompt_is_removed() -> None:
    web_main = _load_web_main()
    window = _fake_window(640, 480)
    handler = window.onbeforeunload

    web_main._disable_beforeunload_prompt(window)

    assert window.removed == [("beforeunload", handler)]
    assert window.onbeforeunload is None
