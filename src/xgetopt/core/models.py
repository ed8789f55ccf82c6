"""Domain models for xgetopt.

Descriptors, parsed options and remainders are **frozen** dataclasses —
immutable value objects.  :class:`OptionSequence` is the one mutable
type: it accumulates results while a single scan runs and is handed to
the caller afterwards.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import NamedTuple, overload

from xgetopt.exceptions import ArgumentNotPresentError
from xgetopt.utils import DEFAULT_PLACEHOLDER, is_short_id, normalize_id


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ArgRequirement(enum.Enum):
    """Whether an option binds an argument."""

    NONE = 0
    REQUIRED = 1
    OPTIONAL = 2


class StopCondition(enum.Enum):
    """When a scan stops and hands the rest of argv back as a remainder."""

    ALL_OPTIONS = enum.auto()
    """Scan to the end; non-options may be interleaved with options."""

    BEFORE_FIRST_NON_OPTION_ARGUMENT = enum.auto()
    """Stop before the first non-option; it starts the remainder."""

    AFTER_FIRST_NON_OPTION_ARGUMENT = enum.auto()
    """Record the first non-option, then stop."""

    BEFORE_FIRST_ERROR = enum.auto()
    """Stop silently where an unknown option or missing argument occurs."""


# ---------------------------------------------------------------------------
# Option descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionDescriptor:
    """Static definition of one option.

    ``id`` may be given as a one-character string (``"h"``) and is
    stored as its character code.  Ids from 33 to 126 double as the
    short form; ids of 1000 and above name long-only options.
    """

    id: int
    """Short-option character code, or a long-only identifier."""

    long_name: str = ""
    """Name used after ``--``; empty when the option has no long form."""

    description: str = ""
    """Help text shown next to the option label."""

    arg_requirement: ArgRequirement = ArgRequirement.NONE

    placeholder: str = DEFAULT_PLACEHOLDER
    """Name of the argument as displayed in the help text."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", normalize_id(self.id))

    @property
    def is_short(self) -> bool:
        """``True`` when the option can be given as ``-x``."""
        return is_short_id(self.id)

    @property
    def short_flag(self) -> str:
        """``-x`` form, or an empty string for long-only options."""
        return f"-{chr(self.id)}" if self.is_short else ""

    @property
    def long_flag(self) -> str:
        """``--name`` form, or an empty string without a long name."""
        return f"--{self.long_name}" if self.long_name else ""

    @property
    def flag(self) -> str:
        """Preferred display form: the short flag when there is one."""
        return self.short_flag or self.long_flag


# ---------------------------------------------------------------------------
# Scan results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedOption:
    """One recognized option occurrence from an argument vector."""

    id: int
    argument: str | None = None
    """Bound argument, or ``None`` when no binding occurred."""

    @property
    def has_argument(self) -> bool:
        return self.argument is not None

    def get_argument(self) -> str:
        """Return the bound argument.

        Raises
        ------
        ArgumentNotPresentError
            If the option was given without an argument.  Check
            :attr:`has_argument` first for optional arguments.
        """
        if self.argument is None:
            raise ArgumentNotPresentError(
                f"No argument present for option id {self.id}",
            )
        return self.argument


@dataclass(slots=True)
class OptionSequence:
    """Ordered options and non-option arguments, as encountered in argv.

    Iterating, indexing and ``len`` act on the options; non-option
    arguments are exposed through :attr:`non_option_arguments`.
    """

    _options: list[ParsedOption] = field(default_factory=list)
    _non_option_arguments: list[str] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Accumulation
    # ------------------------------------------------------------------

    def add_option(self, option: ParsedOption) -> None:
        self._options.append(option)

    def add_non_option_argument(self, argument: str) -> None:
        self._non_option_arguments.append(argument)

    def merge(self, other: OptionSequence) -> OptionSequence:
        """Return a new sequence holding ``self`` followed by *other*."""
        return OptionSequence(
            [*self._options, *other._options],
            [*self._non_option_arguments, *other._non_option_arguments],
        )

    def __add__(self, other: OptionSequence) -> OptionSequence:
        if not isinstance(other, OptionSequence):
            return NotImplemented
        return self.merge(other)

    def __iadd__(self, other: OptionSequence) -> OptionSequence:
        if not isinstance(other, OptionSequence):
            return NotImplemented
        self._options.extend(other._options)
        self._non_option_arguments.extend(other._non_option_arguments)
        return self

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def options(self) -> tuple[ParsedOption, ...]:
        return tuple(self._options)

    @property
    def non_option_arguments(self) -> tuple[str, ...]:
        return tuple(self._non_option_arguments)

    def has_option(self, option_id: int | str) -> bool:
        """Return ``True`` if *option_id* occurred at least once."""
        wanted = normalize_id(option_id)
        return any(opt.id == wanted for opt in self._options)

    def get(self, option_id: int | str) -> ParsedOption | None:
        """Return the first occurrence of *option_id*, or ``None``."""
        wanted = normalize_id(option_id)
        return next((opt for opt in self._options if opt.id == wanted), None)

    def get_all(self, option_id: int | str) -> list[ParsedOption]:
        """Return every occurrence of *option_id*, in argv order."""
        wanted = normalize_id(option_id)
        return [opt for opt in self._options if opt.id == wanted]

    def __contains__(self, option_id: object) -> bool:
        try:
            return self.has_option(option_id)  # type: ignore[arg-type]
        except TypeError:
            return False

    def __iter__(self) -> Iterator[ParsedOption]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    @overload
    def __getitem__(self, index: int) -> ParsedOption: ...

    @overload
    def __getitem__(self, index: slice) -> list[ParsedOption]: ...

    def __getitem__(self, index: int | slice) -> ParsedOption | list[ParsedOption]:
        return self._options[index]


@dataclass(frozen=True, slots=True)
class Remainder:
    """The untouched tail of an argument vector after a bounded scan.

    ``tokens`` is exactly ``argv[start:]`` of the scanned vector.  To
    continue with a nested scan (e.g. a subcommand), pass :attr:`argv`:
    its first token then plays the role of the program name.
    """

    start: int
    tokens: tuple[str, ...] = ()

    @classmethod
    def from_argv(cls, argv: Sequence[str], start: int) -> Remainder:
        return cls(start=start, tokens=tuple(argv[start:]))

    @property
    def count(self) -> int:
        return len(self.tokens)

    @property
    def argv(self) -> list[str]:
        return list(self.tokens)

    def with_program_name(self, program_name: str) -> list[str]:
        """Return the tail prefixed with *program_name*.

        Use this when every remaining token must be scanned, for
        example after an :attr:`StopCondition.AFTER_FIRST_NON_OPTION_ARGUMENT`
        stop.
        """
        return [program_name, *self.tokens]

    def __len__(self) -> int:
        return len(self.tokens)

    def __bool__(self) -> bool:
        return bool(self.tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)


class ScanResult(NamedTuple):
    """Pair returned by bounded scans; unpacks as ``options, remainder``."""

    options: OptionSequence
    remainder: Remainder
