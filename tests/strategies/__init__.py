"""Hypothesis strategies for vget property-based testing.

Usage:
    from tests.strategies import path_expressions, shorthand_calls
    from tests.strategies.templates import placed_invocations
"""

from .templates import (
    IDENTIFIER_FIRST_CHARS,
    IDENTIFIER_REST_CHARS,
    INVOCATION_POSITIONS,
    helper_names,
    identifiers,
    key_expressions,
    non_path_expressions,
    path_expressions,
    placed_invocations,
    shorthand_calls,
    unrelated_calls,
)

__all__ = [
    "IDENTIFIER_FIRST_CHARS",
    "IDENTIFIER_REST_CHARS",
    "INVOCATION_POSITIONS",
    "helper_names",
    "identifiers",
    "key_expressions",
    "non_path_expressions",
    "path_expressions",
    "placed_invocations",
    "shorthand_calls",
    "unrelated_calls",
]
