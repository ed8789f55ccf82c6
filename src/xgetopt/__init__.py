"""xgetopt — getopt-style command-line option scanning.

Declare options once as :class:`OptionDescriptor` values, then scan
argument vectors and render an aligned, wrapped help text from the same
table.
"""

from xgetopt.core.help_formatter import DEFAULT_HELP_FORMAT, HelpFormat, HelpFormatter
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
from xgetopt.exceptions import (
    ArgumentNotPresentError,
    MissingRequiredArgumentError,
    OptionParseError,
    UnknownOptionError,
    ValidationError,
    XGetOptError,
)
from xgetopt.version import __version__

__all__: list[str] = [
    "DEFAULT_HELP_FORMAT",
    "ArgRequirement",
    "ArgumentNotPresentError",
    "ArgvScanner",
    "HelpFormat",
    "HelpFormatter",
    "MissingRequiredArgumentError",
    "OptionDescriptor",
    "OptionParseError",
    "OptionParser",
    "OptionSequence",
    "OptionTable",
    "ParsedOption",
    "Remainder",
    "ScanResult",
    "StopCondition",
    "UnknownOptionError",
    "ValidationError",
    "XGetOptError",
    "__version__",
]
