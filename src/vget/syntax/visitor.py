"""Visitor base class for template ASTs.

Subclasses define ``visit_<ClassName>`` methods (``visit_MustacheStatement``,
``visit_ElementNode``), the same naming as the stdlib ``ast.NodeVisitor``.
Node types without a method fall through to ``generic_visit``, which walks
every child node in dataclass field order. Field order is document order for
every node in ``vget.syntax.ast``.

ASTVisitor[T] is generic over the return type of visit methods; bare
ASTVisitor means T=ASTNode.

Python 3.13+.
"""

from collections.abc import Callable
from dataclasses import Field, fields
from typing import ClassVar

from vget.constants import MAX_DEPTH
from vget.core.depth_guard import DepthGuard

from .ast import ASTNode, Node

__all__ = ["ASTVisitor"]

_VISIT_PREFIX = "visit_"


class ASTVisitor[T = ASTNode]:
    """Depth-limited walk over a template AST.

    The mapping from node class name to ``visit_`` method is computed once
    per subclass; the bound method for each node type is then cached per
    instance.

    Example:
        >>> class ElementCounter(ASTVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.tags = []
        ...
        ...     def visit_ElementNode(self, node):
        ...         self.tags.append(node.tag)
        ...         return self.generic_visit(node)
        ...
        >>> counter = ElementCounter()
        >>> counter.visit(b.template([b.element("form", children=[b.element("button")])]))
        >>> counter.tags
        ['form', 'button']
    """

    __slots__ = ("_depth_guard", "_instance_dispatch_cache")

    # class name -> visit method name
    _class_visit_methods: ClassVar[dict[str, str]] = {}

    # shared across all visitors; node classes never change fields
    _fields_cache: ClassVar[dict[type[Node], tuple[Field[object], ...]]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {
            attr.removeprefix(_VISIT_PREFIX): attr
            for attr in dir(cls)
            if attr.startswith(_VISIT_PREFIX)
        }

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Create a visitor.

        Subclasses that define __init__ must call super().__init__(), which
        sets up the depth guard.

        Args:
            max_depth: Deepest nesting walked before DepthLimitExceededError
                (default: MAX_DEPTH)
        """
        self._depth_guard = DepthGuard(max_depth=MAX_DEPTH if max_depth is None else max_depth)
        self._instance_dispatch_cache: dict[type[Node], Callable[[Node], T]] = {}

    def visit(self, node: Node) -> T:
        """Call the ``visit_`` method for node's class, or generic_visit."""
        handler = self._instance_dispatch_cache.get(type(node))
        if handler is None:
            method_name = self._class_visit_methods.get(type(node).__name__)
            handler = self.generic_visit if method_name is None else getattr(self, method_name)
            self._instance_dispatch_cache[type(node)] = handler
        return handler(node)

    def _child_fields(self, node_type: type[Node]) -> tuple[Field[object], ...]:
        cached = ASTVisitor._fields_cache.get(node_type)
        if cached is None:
            cached = fields(node_type)  # type: ignore[arg-type]
            ASTVisitor._fields_cache[node_type] = cached
        return cached

    def generic_visit(self, node: Node) -> T:
        """Visit every child Node of node, one nesting level deeper.

        Children are read from each field at the time the field is reached,
        so a ``visit_`` method that replaces a later field (for example a
        rewritten ``params`` list) has the new value walked. Lists are
        copied before iteration: nodes appended during the walk are skipped.
        Non-node values (strings, flags, SourceSpan) are ignored.

        Returns:
            node itself

        Raises:
            DepthLimitExceededError: If nesting exceeds max_depth
        """
        with self._depth_guard:
            for fld in self._child_fields(type(node)):
                value = getattr(node, fld.name)
                children = tuple(value) if isinstance(value, list) else (value,)
                for child in children:
                    if isinstance(child, Node):
                        self.visit(child)

        return node  # type: ignore[return-value]  # T defaults to ASTNode
