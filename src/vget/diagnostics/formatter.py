"""Rendering of diagnostics for build output and tooling.

A host compiler reports a failed template transform through one of three
renderings:
- rust: multi-line, with location, helper and hint (terminal output)
- simple: one line per diagnostic (compact build logs)
- json: one object per diagnostic (editor integrations)

Python 3.13+.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic, SourceSpan

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_ANSI_RESET = "\033[0m"
_SEVERITY_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
}


class OutputFormat(StrEnum):
    """Rendering styles understood by DiagnosticFormatter."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


def _describe_span(span: SourceSpan) -> str:
    """app/templates/form.hbs:3, column 5  or  line 3, column 5"""
    if span.module:
        return f"{span.module}:{span.line}, column {span.column}"
    return f"line {span.line}, column {span.column}"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns Diagnostic objects into text.

    Attributes:
        output_format: Rendering style
        sanitize: Truncate free-text fields longer than max_content_length
        color: Wrap the severity in ANSI colour codes
        max_content_length: Truncation limit used when sanitize is set

    Example:
        >>> diagnostic = ErrorTemplate.too_few_arguments("v-get", 1)
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[ARGUMENT_COUNT_INVALID]: {{v-get}} requires at least two arguments
          = helper: v-get
          = received: 1 argument(s)
          = help: Use (v-get model 'isValid') or (v-get model 'attr' 'message')
          = note: see https://github.com/qonto/ember-cp-validations/blob/master/docs/templating.md

        >>> simple = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> simple.format(diagnostic)
        'ARGUMENT_COUNT_INVALID: {{v-get}} requires at least two arguments'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return json.dumps(self._as_record(diagnostic), ensure_ascii=False)
            case _:
                return self._render_rust(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, separated by a blank line."""
        return "\n\n".join(map(self.format, diagnostics))

    def _render_rust(self, diagnostic: Diagnostic) -> str:
        severity = "warning" if diagnostic.severity == "warning" else "error"
        if self.color:
            severity = f"{_SEVERITY_COLORS[severity]}{severity}{_ANSI_RESET}"

        lines = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]
        if diagnostic.span is not None:
            lines.append(f"  --> {_describe_span(diagnostic.span)}")

        notes = (
            ("helper", diagnostic.helper_name),
            ("received", diagnostic.received and self._clip(diagnostic.received)),
            ("help", diagnostic.hint and self._clip(diagnostic.hint)),
            ("note", diagnostic.help_url and f"see {diagnostic.help_url}"),
        )
        lines.extend(f"  = {label}: {text}" for label, text in notes if text)
        return "\n".join(lines)

    def _as_record(self, diagnostic: Diagnostic) -> dict[str, str | int]:
        record: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        span = diagnostic.span
        if span is not None:
            record.update(line=span.line, column=span.column, start=span.start, end=span.end)
            if span.module:
                record["module"] = span.module

        optional = {
            "helper_name": diagnostic.helper_name,
            "received": diagnostic.received and self._clip(diagnostic.received),
            "hint": diagnostic.hint and self._clip(diagnostic.hint),
            "help_url": diagnostic.help_url,
        }
        record.update({key: value for key, value in optional.items() if value})
        return record

    def _clip(self, text: str) -> str:
        if not self.sanitize or len(text) <= self.max_content_length:
            return text
        return f"{text[: self.max_content_length]}..."
