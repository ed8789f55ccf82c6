"""``xgetopt-demo`` — a small program driven entirely by xgetopt.

It declares a representative option set (short and long, long-only,
short-only, required and optional arguments), scans its own command
line with :class:`~xgetopt.core.parser.OptionParser`, and reports what
was recognized.

This module is the **sole error boundary** of the demo.  It catches
:class:`~xgetopt.exceptions.XGetOptError`, ``KeyboardInterrupt`` and
any unexpected ``Exception``, rendering user-friendly messages via the
console proxy and returning well-defined exit codes.
"""

from __future__ import annotations

import logging
import sys

from xgetopt.cli import exit_codes
from xgetopt.cli.console import configure_logging, console, escape, out
from xgetopt.core.models import ArgRequirement, OptionDescriptor, ParsedOption
from xgetopt.core.parser import OptionParser
from xgetopt.exceptions import OptionParseError, XGetOptError
from xgetopt.version import __version__

logger = logging.getLogger(__name__)

PROG: str = "xgetopt-demo"

LONG_OPTION_ONLY: int = 1001
LONG_OPTION_WITH_ARG: int = 1002


# ---------------------------------------------------------------------------
# Option set
# ---------------------------------------------------------------------------

DEMO_OPTIONS: tuple[OptionDescriptor, ...] = (
    OptionDescriptor("h", "help", "Display this help message"),
    OptionDescriptor(
        "o", "output", "Specify output file", ArgRequirement.REQUIRED, "file",
    ),
    OptionDescriptor(
        "p", "parameter", "Specify optional parameter", ArgRequirement.OPTIONAL,
    ),
    OptionDescriptor(LONG_OPTION_ONLY, "long-option-only", "This has no shortopt"),
    OptionDescriptor(
        LONG_OPTION_WITH_ARG,
        "long-option-with-arg",
        "This has no shortopt and requires an argument",
        ArgRequirement.REQUIRED,
    ),
    OptionDescriptor("s", "", "This has no longopt"),
    OptionDescriptor(
        "v",
        "verbose",
        "Log how the command line was scanned (debug output on stderr)",
    ),
)


def build_parser() -> OptionParser:
    """Construct the demo parser."""
    return OptionParser(*DEMO_OPTIONS)


def _usage(parser: OptionParser) -> str:
    return (
        f"{PROG} {__version__}\n"
        f"Usage: {PROG} [OPTION...] [ARG...]\n\n"
        f"{parser.help_string}"
    )


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------

def _describe(option: ParsedOption) -> str:
    """Render one recognized option as a report line."""
    if option.id == ord("o"):
        return f"Output file: {option.get_argument()}"
    if option.id == ord("p"):
        if option.has_argument:
            return f"-p given with argument: {option.get_argument()}"
        return "-p given with no argument"
    if option.id == LONG_OPTION_ONLY:
        return "--long-option-only given"
    if option.id == LONG_OPTION_WITH_ARG:
        return f"--long-option-with-arg given with argument: {option.get_argument()}"
    if option.id == ord("s"):
        return "-s given"
    return f"-{chr(option.id)} given"


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the demo.

    Parameters
    ----------
    argv:
        Explicit argument list, without the program name.  When
        ``None`` (default), ``sys.argv[1:]`` is used.

    Returns
    -------
    int
        OS process exit code.
    """
    args = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    options = parser.parse([PROG, *args])

    configure_logging(verbose=options.has_option("v"))
    logger.debug(
        "Recognized %d option(s) and %d non-option argument(s)",
        len(options),
        len(options.non_option_arguments),
    )

    for option in options:
        if option.id == ord("h"):
            out.print(_usage(parser).rstrip("\n"), markup=False)
            return exit_codes.SUCCESS
        if option.id == ord("v"):
            continue
        out.print(_describe(option), markup=False)

    for argument in options.non_option_arguments:
        out.print(f"Non-option argument: {argument}", markup=False)

    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except XGetOptError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        hint = exc.hint
        if hint is None and isinstance(exc, OptionParseError):
            hint = f"Run '{PROG} --help' to list the available options."
        if hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
