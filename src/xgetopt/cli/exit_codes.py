"""Process exit statuses returned by ``xgetopt-demo``.

Every exit path in :mod:`xgetopt.cli.app` goes through one of these
names so tests can assert on them directly.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Options parsed and reported (or help printed)."""

GENERAL_ERROR: int = 1
"""A known XGetOptError (e.g. an unknown option) was caught and shown."""

UNEXPECTED_ERROR: int = 2
"""Anything else escaped :func:`~xgetopt.cli.app.main`."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
