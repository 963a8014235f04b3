"""Test setup for mdbook-compile-output."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (invoke a real cargo toolchain)",
    )


def make_chapter(
    name: str,
    content: str,
    *,
    path: str | None = "chapter.md",
    number: list[int] | None = None,
    sub_items: list[Any] | None = None,
) -> dict[str, Any]:
    """Build a book item the way mdBook 0.4 serializes a chapter."""
    return {
        "Chapter": {
            "name": name,
            "content": content,
            "number": number,
            "sub_items": sub_items or [],
            "path": path,
            "source_path": path,
            "parent_names": [],
        }
    }


def make_context(options: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build a preprocessor context as mdBook sends it."""
    return {
        "root": "/tmp/book",
        "config": {
            "book": {"authors": ["Someone"], "language": "en", "src": "src", "title": "Stages"},
            "preprocessor": {"compile-output": options or {}},
        },
        "renderer": "html",
        "mdbook_version": "0.4.40",
    }


def make_book(*items: dict[str, Any] | str) -> dict[str, Any]:
    return {"sections": list(items), "__non_exhaustive": None}


@pytest.fixture
def python_command() -> Any:
    """Build a step command running a Python snippet with this interpreter."""

    def _command(code: str) -> tuple[str, ...]:
        return (sys.executable, "-c", code)

    return _command
