"""vget - compile-time expansion of the v-get validation helper.

Rewrites ``{{v-get model 'username' 'message'}}`` in a parsed Handlebars /
Glimmer template into the equivalent chain of generic ``get`` lookups, so
the template runtime never needs a v-get helper.

Public API:
    VGetTransform - AST plugin; transform(ast) rewrites in place
    transform_template - One-shot convenience wrapper
    TransformConfig - Helper/accessor names and depth limit
    print_template - Render an AST back to template source

Exceptions:
    VGetError - Base exception class
    TemplateTransformError - Base of rewrite failures
    ArgumentCountError - Invocation without 2 or 3 positional arguments
    InvalidRootError - Invocation whose first argument is not a path
    DepthLimitExceededError - Tree nests deeper than the configured limit

Submodules:
    vget.syntax.ast - AST node types (Template, MustacheStatement, SubExpression, ...)
    vget.syntax.builders - Node construction helpers
    vget.syntax.traverse - Callback-table traversal utility
    vget.diagnostics - Error types, diagnostic codes and formatting
"""

from .config import TransformConfig
from .core import DepthLimitExceededError
from .diagnostics import (
    ArgumentCountError,
    InvalidRootError,
    TemplateTransformError,
    VGetError,
)
from .plugins import VGetTransform, transform_template
from .syntax import print_template

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("vget")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArgumentCountError",
    "DepthLimitExceededError",
    "InvalidRootError",
    "TemplateTransformError",
    "TransformConfig",
    "VGetError",
    "VGetTransform",
    "__version__",
    "print_template",
    "transform_template",
]
