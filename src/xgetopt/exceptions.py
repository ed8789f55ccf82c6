"""Custom exception hierarchy for xgetopt.

Every failure the library reports derives from :class:`XGetOptError`,
so callers can guard a whole parse with a single ``except`` clause and
the CLI error boundary can render a clean message plus an optional
hint.

Hierarchy
---------
XGetOptError
├── ConfigurationError
├── ValidationError
│   ├── DuplicateOptionIdError
│   ├── DuplicateLongNameError
│   └── InvalidOptionError
├── OptionParseError
│   ├── UnknownOptionError
│   │   └── UnexpectedArgumentError
│   └── MissingRequiredArgumentError
└── ArgumentNotPresentError
"""

from __future__ import annotations

from xgetopt.utils import is_short_id


class XGetOptError(Exception):
    """Base exception for all xgetopt errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(XGetOptError):
    """Raised when a help-format configuration value is out of range."""


# --- Option table validation ----------------------------------------------

class ValidationError(XGetOptError):
    """Raised when an option table cannot be built from its descriptors.

    Raised once, at construction time.  A table that failed validation
    never becomes observable.
    """


class DuplicateOptionIdError(ValidationError):
    """Raised when two descriptors share the same id."""

    def __init__(self, option_id: int) -> None:
        super().__init__(
            f"Duplicate option id: {_describe_id(option_id)}",
            hint="Every option needs its own short character or long-only id.",
        )
        self.option_id: int = option_id


class DuplicateLongNameError(ValidationError):
    """Raised when two descriptors share the same non-empty long name."""

    def __init__(self, long_name: str) -> None:
        super().__init__(f"Duplicate long option name: --{long_name}")
        self.long_name: str = long_name


class InvalidOptionError(ValidationError):
    """Raised when a single descriptor can never be matched or displayed."""


# --- Scanning --------------------------------------------------------------

class OptionParseError(XGetOptError):
    """Base class for errors found while scanning an argument vector.

    Attributes
    ----------
    token : str
        The argument-vector token the scanner was classifying.
    """

    def __init__(self, message: str, token: str, *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.token: str = token


class UnknownOptionError(OptionParseError):
    """Raised when a token matches no known option."""

    def __init__(self, token: str, *, message: str | None = None) -> None:
        super().__init__(
            message if message is not None else f"Unknown option: {token}",
            token,
        )


class UnexpectedArgumentError(UnknownOptionError):
    """Raised when ``--name=value`` is given for an option taking no argument."""

    def __init__(self, token: str, option: str) -> None:
        super().__init__(
            token,
            message=f"Option {option} does not take an argument: {token}",
        )
        self.option: str = option


class MissingRequiredArgumentError(OptionParseError):
    """Raised when an option with a required argument has none to bind."""

    def __init__(self, option: str, token: str) -> None:
        super().__init__(
            f"Missing required argument for option: {option}",
            token,
        )
        self.option: str = option


# --- Result access ---------------------------------------------------------

class ArgumentNotPresentError(XGetOptError):
    """Raised when reading the argument of an option that bound none."""


def _describe_id(option_id: int) -> str:
    if is_short_id(option_id):
        return f"-{chr(option_id)}"
    return str(option_id)
