"""Compile-time AST plugins.

Each plugin rewrites a template AST in place before the host compiler
generates code from it.

Python 3.13+.
"""

from .v_get import NodeBuilder, VGetPass, VGetTransform, transform_template, unwrap_node

__all__ = [
    "NodeBuilder",
    "VGetPass",
    "VGetTransform",
    "transform_template",
    "unwrap_node",
]
