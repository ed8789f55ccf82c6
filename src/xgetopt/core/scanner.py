"""The argument-vector scanning state machine.

:class:`ArgvScanner` walks an argv the way GNU ``getopt_long`` does in
return-in-order mode, but keeps its cursor in a per-call
:class:`_Cursor` instead of process-wide globals, so repeated or
concurrent scans against one table never see each other's state.

Token classification
--------------------
1. ``--`` — consumed; every later token is a non-option, verbatim.
2. ``--name[=value]`` — long option, exact name match.
3. ``-abc`` — cluster of short options, walked left to right.
4. ``-`` alone or anything without a leading dash — non-option.

Argument binding
----------------
=========  ============================  =================================
           long (``--name``)             short (``-x``)
=========  ============================  =================================
REQUIRED   ``=value``, else next token    rest of token, else next token
OPTIONAL   ``=value`` only                rest of token, else next token
                                          unless it starts with ``-``
NONE       ``=value`` is rejected         walk continues in the same token
=========  ============================  =================================
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from xgetopt.core.models import (
    ArgRequirement,
    OptionDescriptor,
    OptionSequence,
    ParsedOption,
    Remainder,
    ScanResult,
    StopCondition,
)
from xgetopt.core.option_table import OptionTable
from xgetopt.exceptions import (
    MissingRequiredArgumentError,
    OptionParseError,
    UnexpectedArgumentError,
    UnknownOptionError,
)

logger = logging.getLogger(__name__)

END_OF_OPTIONS: str = "--"


# ---------------------------------------------------------------------------
# Cursor
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class _Cursor:
    """Position in one argv, owned by a single scan call.

    Index 0 holds the program name and is never scanned.
    """

    argv: Sequence[str]
    index: int = 1

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.argv)

    def peek(self) -> str | None:
        """Return the token at the cursor without consuming it."""
        return None if self.exhausted else self.argv[self.index]

    def take(self) -> str:
        """Consume and return the token at the cursor."""
        token = self.argv[self.index]
        self.index += 1
        return token


# ---------------------------------------------------------------------------
# Token shape predicates
# ---------------------------------------------------------------------------

def _is_long_option(token: str) -> bool:
    return token.startswith("--") and token != END_OF_OPTIONS


def _is_short_cluster(token: str) -> bool:
    return len(token) > 1 and token.startswith("-") and not token.startswith("--")


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------

class ArgvScanner:
    """Scan argument vectors against a fixed :class:`OptionTable`.

    The scanner holds only the immutable table; all per-scan state
    lives in the :class:`_Cursor` and :class:`OptionSequence` created
    inside :meth:`scan`.
    """

    def __init__(self, table: OptionTable) -> None:
        self._table: OptionTable = table

    @property
    def table(self) -> OptionTable:
        return self._table

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def scan(
        self,
        argv: Sequence[str],
        stop: StopCondition = StopCondition.ALL_OPTIONS,
    ) -> ScanResult:
        """Scan *argv* (program name first) until *stop* triggers.

        Returns the recognized options and non-options, plus the
        untouched tail of *argv*.  The remainder is empty when the whole
        vector was consumed.

        Raises
        ------
        UnknownOptionError
            A token matched no option (not under ``BEFORE_FIRST_ERROR``).
        MissingRequiredArgumentError
            A required argument was missing (not under ``BEFORE_FIRST_ERROR``).
        """
        argv = tuple(argv)
        cursor = _Cursor(argv, index=min(1, len(argv)))
        sequence = OptionSequence()

        while not cursor.exhausted:
            start = cursor.index
            token = cursor.take()

            if token == END_OF_OPTIONS:
                stop_at = self._scan_after_end_of_options(cursor, sequence, stop, start)
                if stop_at is not None:
                    return self._stopped(sequence, argv, stop_at, "non-option after --")
                break

            if _is_long_option(token) or _is_short_cluster(token):
                try:
                    if _is_long_option(token):
                        self._scan_long(token, cursor, sequence)
                    else:
                        self._scan_short_cluster(token, cursor, sequence)
                except OptionParseError as exc:
                    if stop is not StopCondition.BEFORE_FIRST_ERROR:
                        logger.debug("Scan aborted at argv[%d]: %s", start, exc)
                        raise
                    return self._stopped(sequence, argv, start, type(exc).__name__)
                continue

            if stop is StopCondition.BEFORE_FIRST_NON_OPTION_ARGUMENT:
                return self._stopped(sequence, argv, start, "first non-option")
            sequence.add_non_option_argument(token)
            if stop is StopCondition.AFTER_FIRST_NON_OPTION_ARGUMENT:
                return self._stopped(sequence, argv, cursor.index, "first non-option")

        return ScanResult(sequence, Remainder(start=len(argv)))

    # ------------------------------------------------------------------
    # Classification steps
    # ------------------------------------------------------------------

    @staticmethod
    def _scan_after_end_of_options(
        cursor: _Cursor,
        sequence: OptionSequence,
        stop: StopCondition,
        marker_index: int,
    ) -> int | None:
        """Collect every token after ``--`` as a non-option.

        Returns the index the remainder starts at when *stop* triggers,
        else ``None`` once the vector is exhausted.
        """
        if cursor.exhausted:
            return None
        if stop is StopCondition.BEFORE_FIRST_NON_OPTION_ARGUMENT:
            return marker_index
        while not cursor.exhausted:
            sequence.add_non_option_argument(cursor.take())
            if stop is StopCondition.AFTER_FIRST_NON_OPTION_ARGUMENT:
                return cursor.index
        return None

    def _scan_long(self, token: str, cursor: _Cursor, sequence: OptionSequence) -> None:
        name, has_value, value = token[2:].partition("=")
        descriptor = self._table.find_by_long_name(name)
        if descriptor is None:
            raise UnknownOptionError(token)

        argument: str | None = value if has_value else None
        requirement = descriptor.arg_requirement

        if requirement is ArgRequirement.NONE:
            if has_value:
                raise UnexpectedArgumentError(token, descriptor.long_flag)
        elif requirement is ArgRequirement.REQUIRED and argument is None:
            if cursor.exhausted:
                raise MissingRequiredArgumentError(descriptor.long_flag, token)
            argument = cursor.take()
        # OPTIONAL binds only through "=value", never from the next token.

        sequence.add_option(ParsedOption(descriptor.id, argument))

    def _scan_short_cluster(
        self,
        token: str,
        cursor: _Cursor,
        sequence: OptionSequence,
    ) -> None:
        for position in range(1, len(token)):
            descriptor = self._find_short(token[position])
            if descriptor is None:
                raise UnknownOptionError(token)

            requirement = descriptor.arg_requirement
            if requirement is ArgRequirement.NONE:
                sequence.add_option(ParsedOption(descriptor.id))
                continue

            rest = token[position + 1:]
            argument: str | None = rest or None
            if argument is None:
                if requirement is ArgRequirement.REQUIRED:
                    if cursor.exhausted:
                        raise MissingRequiredArgumentError(descriptor.short_flag, token)
                    argument = cursor.take()
                elif self._can_bind_optional(cursor.peek()):
                    argument = cursor.take()

            sequence.add_option(ParsedOption(descriptor.id, argument))
            return

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _find_short(self, char: str) -> OptionDescriptor | None:
        descriptor = self._table.find_by_id(ord(char))
        if descriptor is None or not descriptor.is_short:
            return None
        return descriptor

    @staticmethod
    def _can_bind_optional(next_token: str | None) -> bool:
        """Short optional arguments may take a following non-dash token."""
        return next_token is not None and not next_token.startswith("-")

    @staticmethod
    def _stopped(
        sequence: OptionSequence,
        argv: tuple[str, ...],
        start: int,
        reason: str,
    ) -> ScanResult:
        logger.debug("Scan stopped at argv[%d] (%s)", start, reason)
        return ScanResult(sequence, Remainder.from_argv(argv, start))
