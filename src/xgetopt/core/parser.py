"""High-level parser — one object per option set.

:class:`OptionParser` bundles the validated table, the help formatter
and the scanner.  It is what application code normally builds::

    parser = OptionParser(
        OptionDescriptor("h", "help", "Display this help message"),
        OptionDescriptor("o", "output", "Specify output file",
                         ArgRequirement.REQUIRED, "file"),
    )
    options = parser.parse(sys.argv)
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from xgetopt.core.help_formatter import DEFAULT_HELP_FORMAT, HelpFormat, HelpFormatter
from xgetopt.core.models import OptionDescriptor, OptionSequence, ScanResult, StopCondition
from xgetopt.core.option_table import OptionTable
from xgetopt.core.scanner import ArgvScanner


class OptionParser:
    """Parse argument vectors and render help for a fixed option set.

    Parameters
    ----------
    *descriptors:
        The options, in help-text order.  Validated immediately.
    help_format:
        Layout constants for :attr:`help_string`.

    Raises
    ------
    ValidationError
        If the descriptors contain duplicate ids or long names, or an
        unusable descriptor.
    """

    def __init__(
        self,
        *descriptors: OptionDescriptor,
        help_format: HelpFormat = DEFAULT_HELP_FORMAT,
    ) -> None:
        self._table = OptionTable(descriptors)
        self._scanner = ArgvScanner(self._table)
        self._help_string = HelpFormatter(help_format).format(self._table)

    @classmethod
    def from_descriptors(
        cls,
        descriptors: Iterable[OptionDescriptor],
        *,
        help_format: HelpFormat = DEFAULT_HELP_FORMAT,
    ) -> OptionParser:
        return cls(*descriptors, help_format=help_format)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def table(self) -> OptionTable:
        return self._table

    @property
    def help_string(self) -> str:
        """Help text for every option, built once at construction."""
        return self._help_string

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, argv: Sequence[str] | None = None) -> OptionSequence:
        """Scan the whole of *argv* (``sys.argv`` when ``None``).

        Raises
        ------
        UnknownOptionError
            If a token matches no option.
        MissingRequiredArgumentError
            If a required argument is missing.
        """
        return self.parse_until(StopCondition.ALL_OPTIONS, argv).options

    def parse_until(
        self,
        stop: StopCondition,
        argv: Sequence[str] | None = None,
    ) -> ScanResult:
        """Scan *argv* until *stop* triggers; return options and remainder."""
        if argv is None:
            argv = sys.argv
        return self._scanner.scan(argv, stop)
