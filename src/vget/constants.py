"""Shared constants for vget.

This module provides centralized configuration constants used across
the syntax, diagnostics and plugin packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Helper names: Identifiers the expansion pass matches and emits
- Expansion keys: Property names inserted by the expansion
- Depth limits: Recursion protection for traversal and dispatch

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Helper names
    "SHORTHAND_HELPER",
    "ACCESSOR_HELPER",
    # Expansion keys
    "VALIDATIONS_KEY",
    "ATTRS_KEY",
    # Argument shape
    "MIN_SHORTHAND_PARAMS",
    "MAX_SHORTHAND_PARAMS",
    # Depth limits
    "MAX_DEPTH",
]

# ============================================================================
# HELPER NAMES
# ============================================================================

# Shorthand helper expanded by the pass: {{v-get model 'isValid'}}
SHORTHAND_HELPER: str = "v-get"

# Generic two-argument property lookup understood by the template runtime.
ACCESSOR_HELPER: str = "get"

# ============================================================================
# EXPANSION KEYS
# ============================================================================

# model.validations
VALIDATIONS_KEY: str = "validations"

# model.validations.attrs
ATTRS_KEY: str = "attrs"

# ============================================================================
# ARGUMENT SHAPE
# ============================================================================

# (v-get root finalKey)
MIN_SHORTHAND_PARAMS: int = 2

# (v-get root midKey finalKey)
MAX_SHORTHAND_PARAMS: int = 3

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# A single limit is shared by the traversal utility, the printer and the
# expansion dispatch. Hand-written templates rarely nest sub-expressions
# more than a handful of levels; 100 levels indicates a malformed or
# programmatically constructed tree.
#
# ============================================================================

# Unified maximum depth for recursion protection.
# Used by: traverse(), ASTVisitor subclasses, VGetPass dispatch.
MAX_DEPTH: int = 100
