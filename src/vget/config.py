"""Configuration for the v-get expansion pass.

Provides a single frozen dataclass that encapsulates the names the pass
matches and emits. The defaults reproduce the ember-cp-validations
expansion; hosts with a differently named helper or accessor pass their
own instance to ``VGetTransform(config=...)``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from vget.constants import (
    ACCESSOR_HELPER,
    ATTRS_KEY,
    MAX_DEPTH,
    SHORTHAND_HELPER,
    VALIDATIONS_KEY,
)

__all__ = ["TransformConfig"]


@dataclass(frozen=True, slots=True)
class TransformConfig:
    """Immutable configuration for the v-get expansion pass.

    All fields have sensible defaults; ``TransformConfig()`` expands
    ``v-get`` into ``get`` chains through ``validations`` and ``attrs``.

    Attributes:
        helper_name: Shorthand helper matched by the pass (default: "v-get").
        accessor_name: Generic accessor emitted by the pass (default: "get").
        validations_key: Key of the first lookup (default: "validations").
        attrs_key: Key inserted for three-argument invocations (default: "attrs").
        max_depth: Maximum sub-expression nesting followed by the dispatch
            and by the default traversal (default: 100).

    Example:
        >>> config = TransformConfig(helper_name="validation-for")
        >>> transform = VGetTransform(config=config)
    """

    helper_name: str = SHORTHAND_HELPER
    accessor_name: str = ACCESSOR_HELPER
    validations_key: str = VALIDATIONS_KEY
    attrs_key: str = ATTRS_KEY
    max_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If a name is empty, if helper and accessor names
                coincide, or if max_depth is not positive.
        """
        for name in ("helper_name", "accessor_name", "validations_key", "attrs_key"):
            if not getattr(self, name):
                msg = f"{name} must be a non-empty string"
                raise ValueError(msg)
        if self.helper_name == self.accessor_name:
            # Expanded output would match again on a second pass.
            msg = f"helper_name and accessor_name must differ, both are {self.helper_name!r}"
            raise ValueError(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be positive, got {self.max_depth}"
            raise ValueError(msg)
