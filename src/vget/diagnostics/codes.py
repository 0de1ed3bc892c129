"""Diagnostic codes, source locations and the Diagnostic record.

Python 3.13+.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Stable numeric identifiers for every reportable problem.

    1xxx: malformed shorthand invocations
    2xxx: tree shape (nesting depth)
    """

    ARGUMENT_COUNT_INVALID = 1001
    ROOT_NOT_PATH = 1002

    MAX_DEPTH_EXCEEDED = 2001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Where a node came from in the template source.

    Offsets count characters, as Python strings do. Hosts that track byte
    offsets convert before building spans.

    Attributes:
        start: Offset of the first character (0-based)
        end: Offset one past the last character
        line: 1-based line of ``start``
        column: 1-based column of ``start``
        module: Template module name (e.g. "app/templates/form.hbs"), if known
    """

    start: int
    end: int
    line: int
    column: int
    module: str | None = None

    def __post_init__(self) -> None:
        """Reject spans that cannot point into a source file.

        Raises:
            ValueError: On a negative start, an end before start, or a line
                or column below 1.
        """
        problem: str | None = None
        if self.start < 0:
            problem = f"SourceSpan.start cannot be negative, got {self.start}"
        elif self.end < self.start:
            problem = f"SourceSpan.end ({self.end}) is before start ({self.start})"
        elif self.line < 1:
            problem = f"SourceSpan.line is 1-based, got {self.line}"
        elif self.column < 1:
            problem = f"SourceSpan.column is 1-based, got {self.column}"
        if problem is not None:
            raise ValueError(problem)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Everything known about one failed rewrite.

    Attributes:
        code: What went wrong
        message: One-line description, also used as the exception text
        span: Location of the offending invocation, when the host supplied one
        hint: How to fix the template
        help_url: Documentation for the helper
        helper_name: Name of the helper as written in the template
        received: What was found instead ("1 argument(s)", "StringLiteral")
        severity: "error" aborts the transform; "warning" is informational
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    helper_name: str | None = None
    received: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Multi-line rendering with location and hint.

            error[ROOT_NOT_PATH]: The first argument to {{v-get}} must be a stream
              --> app/templates/form.hbs:3, column 5
              = helper: v-get
              = received: StringLiteral
              = help: Pass a bound property such as model or model.details
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
