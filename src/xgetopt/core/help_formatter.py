"""Column-aligned, word-wrapped help text for an option table.

Every function here is a pure transformation of the descriptors — no
I/O, fully deterministic.

Layout of one entry (default :class:`HelpFormat`)::

    ··-o, --output <file>····Write the result to <file> instead of
    ·························standard output.

* Two spaces of indent, then the **label**.
* Labels are padded to the longest label in the table, then one space
  separates them from the description, so every description starts
  at ``max label length + 3``.
* Descriptions wrap greedily at word boundaries to fit 80 columns.  A
  line never breaks before its first word, so one over-long word
  simply overflows.
"""

from __future__ import annotations

from dataclasses import dataclass

from xgetopt.core.models import ArgRequirement, OptionDescriptor
from xgetopt.core.option_table import OptionTable
from xgetopt.exceptions import ConfigurationError

LONG_ONLY_LABEL_PAD: str = " " * 4
"""Stands in for ``-x, `` so long-only names line up with the others."""


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HelpFormat:
    """Layout constants for :class:`HelpFormatter`."""

    width: int = 80
    """Target maximum line length."""

    indent: int = 2
    """Spaces before each label."""

    gap: int = 1
    """Spaces between the padded label column and the description."""

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ConfigurationError(f"Help width must be positive, got {self.width}")
        if self.indent < 0:
            raise ConfigurationError(f"Help indent must not be negative, got {self.indent}")
        if self.gap < 1:
            raise ConfigurationError(
                f"Help gap must be at least one space, got {self.gap}",
            )

    def description_column(self, max_label_length: int) -> int:
        """Column at which every description starts."""
        return self.indent + max_label_length + self.gap


DEFAULT_HELP_FORMAT = HelpFormat()


# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------

def _argument_annotation(descriptor: OptionDescriptor) -> str:
    requirement = descriptor.arg_requirement
    if requirement is ArgRequirement.REQUIRED:
        return f" <{descriptor.placeholder}>"
    if requirement is ArgRequirement.OPTIONAL:
        if descriptor.long_name:
            return f"[={descriptor.placeholder}]"
        return f"[{descriptor.placeholder}]"
    return ""


def build_label(descriptor: OptionDescriptor) -> str:
    """Return the label for *descriptor*, e.g. ``-p, --param[=arg]``."""
    if descriptor.is_short:
        label = descriptor.short_flag
        if descriptor.long_name:
            label += f", {descriptor.long_flag}"
    else:
        label = LONG_ONLY_LABEL_PAD + descriptor.long_flag
    return label + _argument_annotation(descriptor)


# ---------------------------------------------------------------------------
# Word wrap
# ---------------------------------------------------------------------------

def wrap_description(text: str, start_column: int, width: int) -> list[str]:
    """Greedily wrap *text* into lines for a block starting at *start_column*.

    Returned lines carry no indentation; the caller places the first
    one after the label and indents the others to *start_column*.
    """
    lines: list[str] = []
    current: list[str] = []
    cursor = start_column

    for word in text.split():
        if current and cursor + 1 + len(word) > width:
            lines.append(" ".join(current))
            current = []
            cursor = start_column
        if current:
            cursor += 1
        current.append(word)
        cursor += len(word)

    if current:
        lines.append(" ".join(current))
    return lines


# ---------------------------------------------------------------------------
# Formatter
# ---------------------------------------------------------------------------

class HelpFormatter:
    """Render the help text of an :class:`OptionTable`.

    Parameters
    ----------
    help_format:
        Layout constants; :data:`DEFAULT_HELP_FORMAT` when omitted.
    """

    def __init__(self, help_format: HelpFormat = DEFAULT_HELP_FORMAT) -> None:
        self._format: HelpFormat = help_format

    @property
    def help_format(self) -> HelpFormat:
        return self._format

    def format(self, table: OptionTable) -> str:
        """Return the complete help text, one entry per descriptor."""
        labels = [build_label(descriptor) for descriptor in table]
        if not labels:
            return ""

        max_label_length = max(len(label) for label in labels)
        column = self._format.description_column(max_label_length)
        indent = " " * self._format.indent
        continuation = " " * column

        parts: list[str] = []
        for descriptor, label in zip(table, labels):
            lines = wrap_description(descriptor.description, column, self._format.width)
            if not lines:
                parts.append(f"{indent}{label}\n")
                continue
            head = f"{indent}{label}".ljust(column - self._format.gap)
            parts.append(head + " " * self._format.gap + lines[0] + "\n")
            parts.extend(continuation + line + "\n" for line in lines[1:])
        return "".join(parts)
