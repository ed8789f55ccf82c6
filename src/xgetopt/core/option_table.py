"""Validated, immutable set of option descriptors.

The table is checked once, when it is built: a duplicate id, a
duplicate long name or an unusable descriptor raises a
:class:`~xgetopt.exceptions.ValidationError` subclass and no table is
returned.  Validation stops at the first violation, in descriptor
order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from xgetopt.core.models import OptionDescriptor
from xgetopt.exceptions import (
    DuplicateLongNameError,
    DuplicateOptionIdError,
    InvalidOptionError,
)
from xgetopt.utils import (
    LONG_ONLY_ID_MIN,
    SHORT_ID_MAX,
    SHORT_ID_MIN,
    is_long_only_id,
    is_short_id,
    normalize_id,
)

logger = logging.getLogger(__name__)


class OptionTable:
    """Ordered, read-only collection of :class:`OptionDescriptor` entries.

    Parameters
    ----------
    descriptors:
        The options, in the order they should appear in the help text.
    """

    __slots__ = ("_descriptors", "_by_id", "_by_long_name")

    def __init__(self, descriptors: Iterable[OptionDescriptor]) -> None:
        entries = tuple(descriptors)
        by_id: dict[int, OptionDescriptor] = {}
        by_long_name: dict[str, OptionDescriptor] = {}

        for descriptor in entries:
            self._check_descriptor(descriptor)
            if descriptor.id in by_id:
                raise DuplicateOptionIdError(descriptor.id)
            by_id[descriptor.id] = descriptor
            if descriptor.long_name:
                if descriptor.long_name in by_long_name:
                    raise DuplicateLongNameError(descriptor.long_name)
                by_long_name[descriptor.long_name] = descriptor

        self._descriptors: tuple[OptionDescriptor, ...] = entries
        self._by_id = MappingProxyType(by_id)
        self._by_long_name = MappingProxyType(by_long_name)
        logger.debug(
            "Built option table with %d option(s), %d long name(s)",
            len(entries),
            len(by_long_name),
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _check_descriptor(descriptor: OptionDescriptor) -> None:
        """Reject descriptors the scanner could never match."""
        option_id = descriptor.id
        long_name = descriptor.long_name

        if not (is_short_id(option_id) or is_long_only_id(option_id)):
            raise InvalidOptionError(
                f"Invalid option id {option_id}",
                hint=(
                    f"Use a printable character code ({SHORT_ID_MIN}-{SHORT_ID_MAX}) "
                    f"or an integer >= {LONG_ONLY_ID_MIN} for long-only options."
                ),
            )
        if not is_short_id(option_id) and not long_name:
            raise InvalidOptionError(
                f"Long-only option {option_id} has no long name",
            )
        if long_name and (
            long_name.startswith("-")
            or "=" in long_name
            or any(ch.isspace() for ch in long_name)
        ):
            raise InvalidOptionError(
                f"Invalid long option name: {long_name!r}",
                hint="Give the name without leading dashes, '=' or whitespace.",
            )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def descriptors(self) -> tuple[OptionDescriptor, ...]:
        return self._descriptors

    def find_by_id(self, option_id: int | str) -> OptionDescriptor | None:
        """Return the descriptor for *option_id* (int or character)."""
        return self._by_id.get(normalize_id(option_id))

    def find_by_long_name(self, long_name: str) -> OptionDescriptor | None:
        """Return the descriptor whose long name is exactly *long_name*."""
        if not long_name:
            return None
        return self._by_long_name.get(long_name)

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"OptionTable({list(self._descriptors)!r})"
