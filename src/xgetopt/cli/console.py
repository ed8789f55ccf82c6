"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so the
demo (and ``--help`` in particular) stays functional even when Rich is
not installed.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

_MARKUP_TAG = re.compile(r"\[/?(?:bold |dim )?(?:bold|dim|red|green|yellow|cyan)\]")


def _load_rich_console_class() -> type[Any] | None:
    """Return ``rich.console.Console``, or ``None`` when Rich is missing."""
    try:
        from rich.console import Console
    except ModuleNotFoundError:
        return None
    return Console


def get_rich_console(*, stderr: bool = True) -> Any | None:
    """Create a Rich console on stderr (or stdout), if Rich is available."""
    console_class = _load_rich_console_class()
    if console_class is None:
        return None
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with a plain-text fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else a plain ``print``."""
        rich_console = get_rich_console(stderr=self._stderr)
        if rich_console is None:
            stream = sys.stderr if self._stderr else sys.stdout
            print(*(_strip_markup(obj) if markup else obj for obj in objects), file=stream)
            return
        rich_console.print(
            *objects, markup=markup, emoji=markup, highlight=False, soft_wrap=True,
        )


def _strip_markup(obj: object) -> object:
    """Drop the style tags used in our own messages."""
    if not isinstance(obj, str):
        return obj
    return _MARKUP_TAG.sub("", obj)


def escape(text: str) -> str:
    """Escape *text* so Rich prints it verbatim (e.g. ``[=arg]`` labels)."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


console = _ConsoleProxy(stderr=True)
"""Diagnostics and errors (stderr)."""

out = _ConsoleProxy(stderr=False)
"""Command results (stdout)."""


def configure_logging(*, verbose: bool = False) -> None:
    """Install a single stderr handler on the root logger.

    Uses :class:`rich.logging.RichHandler` when Rich is importable.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        logging.basicConfig(
            level=level,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
            force=True,
        )
        return
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=get_rich_console(stderr=True), show_path=False)],
        force=True,
    )
