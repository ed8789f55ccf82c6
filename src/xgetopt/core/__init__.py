"""Core layer — option table, help formatting and argv scanning.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or terminal I/O.
* No imports from ``cli``.
* Every scan is deterministic and owns all of its state.
"""

from xgetopt.core.help_formatter import HelpFormat, HelpFormatter
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
from xgetopt.core.parser import OptionParser
from xgetopt.core.scanner import ArgvScanner

__all__: list[str] = [
    "ArgRequirement",
    "ArgvScanner",
    "HelpFormat",
    "HelpFormatter",
    "OptionDescriptor",
    "OptionParser",
    "OptionSequence",
    "OptionTable",
    "ParsedOption",
    "Remainder",
    "ScanResult",
    "StopCondition",
]
