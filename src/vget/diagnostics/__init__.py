"""Diagnostic system for vget errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    ArgumentCountError,
    InvalidRootError,
    TemplateTransformError,
    VGetError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ArgumentCountError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidRootError",
    "OutputFormat",
    "SourceSpan",
    "TemplateTransformError",
    "VGetError",
]
