"""Shared utilities — constants and id helpers used by every layer.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from __future__ import annotations

SHORT_ID_MIN: int = 33
"""Lowest character code usable as a short option (``!``)."""

SHORT_ID_MAX: int = 126
"""Highest character code usable as a short option (``~``)."""

LONG_ONLY_ID_MIN: int = 1000
"""Ids at or above this value identify long-only options."""

DEFAULT_PLACEHOLDER: str = "arg"


def is_short_id(option_id: int) -> bool:
    """Return ``True`` when *option_id* is a printable short-option code."""
    return SHORT_ID_MIN <= option_id <= SHORT_ID_MAX


def is_long_only_id(option_id: int) -> bool:
    """Return ``True`` when *option_id* is reserved for long-only options."""
    return option_id >= LONG_ONLY_ID_MIN


def normalize_id(option_id: int | str) -> int:
    """Convert a one-character string to its code; pass integers through.

    Raises
    ------
    TypeError
        If *option_id* is neither an ``int`` nor a one-character ``str``.
    """
    if isinstance(option_id, bool):
        raise TypeError("Option id must be an int or a single character, not bool")
    if isinstance(option_id, int):
        return option_id
    if isinstance(option_id, str) and len(option_id) == 1:
        return ord(option_id)
    raise TypeError(
        f"Option id must be an int or a single character, got {option_id!r}"
    )
