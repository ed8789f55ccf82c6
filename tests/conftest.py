"""Shared pytest fixtures and configuration for the xgetopt test suite.

Guidelines
----------
* Core tests are pure — argv is always passed explicitly.
* Rich may be hidden via ``sys.modules`` to exercise plain fallbacks.
* Tests must not depend on the real ``sys.argv``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from xgetopt.core.models import ArgRequirement, OptionDescriptor
from xgetopt.core.parser import OptionParser

LONG_DESCRIPTION = (
    "This item has an extremely long description, which XGetOpt is expected "
    "to wrap at 80-character lines for easy display in a terminal. If it fails "
    "to do this, it is not functioning properly."
)

MAIN_OPTIONS: tuple[OptionDescriptor, ...] = (
    OptionDescriptor("h", "help", "help"),
    OptionDescriptor("v", "verbose", "verbose"),
    OptionDescriptor("o", "output", "output", ArgRequirement.REQUIRED, "file"),
    OptionDescriptor("p", "param", "param", ArgRequirement.OPTIONAL),
    OptionDescriptor(1001, "long-only", "long-only"),
    OptionDescriptor("s", "", "short-only"),
    OptionDescriptor(
        1002, "long-description", LONG_DESCRIPTION, ArgRequirement.REQUIRED, "arg",
    ),
)

SUB_OPTIONS: tuple[OptionDescriptor, ...] = (
    OptionDescriptor("a", "alpha", "alpha"),
    OptionDescriptor("b", "beta", "beta", ArgRequirement.REQUIRED, "value"),
)


@pytest.fixture()
def main_parser() -> OptionParser:
    return OptionParser(*MAIN_OPTIONS)


@pytest.fixture()
def sub_parser() -> OptionParser:
    return OptionParser(*SUB_OPTIONS)


@pytest.fixture()
def restore_root_logger() -> Iterator[None]:
    """Undo ``configure_logging`` side effects on the root logger."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
