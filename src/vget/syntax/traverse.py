"""Depth-first traversal driven by a table of per-kind callbacks.

Equivalent of the host compiler's ``syntax.traverse`` capability. Passes
register callbacks by node kind instead of subclassing ASTVisitor:

    traverse(template, {
        NodeKind.MUSTACHE_STATEMENT: on_mustache,
        "ElementNode": {"enter": on_element, "exit": after_element},
    })

A callback runs before the node's children are visited, so children that
the callback rewrites are the ones the walk descends into. Exit callbacks
run after all children.

Python 3.13+.
"""

from collections.abc import Callable, Mapping

from vget.enums import NodeKind

from .ast import Node
from .visitor import ASTVisitor

__all__ = ["NodeCallback", "TraverseFunction", "VisitorTable", "traverse"]

type NodeCallback = Callable[[Node], object]
type VisitorTable = Mapping[NodeKind | str, NodeCallback | Mapping[str, NodeCallback]]
type TraverseFunction = Callable[[Node, VisitorTable], object]

_HOOKS = frozenset({"enter", "exit"})


def _normalize_table(
    visitors: VisitorTable,
) -> tuple[dict[NodeKind, NodeCallback], dict[NodeKind, NodeCallback]]:
    """Split a visitor table into enter and exit callbacks keyed by NodeKind.

    Raises:
        ValueError: If a key is not a known node kind or a hook name is not
            "enter"/"exit"
    """
    enter: dict[NodeKind, NodeCallback] = {}
    exit_: dict[NodeKind, NodeCallback] = {}
    for key, handler in visitors.items():
        try:
            kind = NodeKind(key)
        except ValueError:
            msg = f"Unknown node kind in visitor table: {key!r}"
            raise ValueError(msg) from None

        if isinstance(handler, Mapping):
            unknown = set(handler) - _HOOKS
            if unknown:
                msg = f"Unknown traversal hook(s) for {kind}: {sorted(unknown)}"
                raise ValueError(msg)
            if "enter" in handler:
                enter[kind] = handler["enter"]
            if "exit" in handler:
                exit_[kind] = handler["exit"]
        else:
            enter[kind] = handler
    return enter, exit_


class _KindDispatchVisitor(ASTVisitor[Node]):
    """ASTVisitor that routes every node through the callback table."""

    __slots__ = ("_enter", "_exit")

    def __init__(
        self,
        enter: dict[NodeKind, NodeCallback],
        exit_: dict[NodeKind, NodeCallback],
        *,
        max_depth: int | None = None,
    ) -> None:
        super().__init__(max_depth=max_depth)
        self._enter = enter
        self._exit = exit_

    def visit(self, node: Node) -> Node:
        on_enter = self._enter.get(node.kind)
        if on_enter is not None:
            on_enter(node)
        self.generic_visit(node)
        on_exit = self._exit.get(node.kind)
        if on_exit is not None:
            on_exit(node)
        return node


def traverse(node: Node, visitors: VisitorTable, *, max_depth: int | None = None) -> None:
    """Walk ``node`` depth-first in document order, invoking per-kind callbacks.

    Args:
        node: Root of the (sub)tree to walk, usually a Template
        visitors: Mapping of node kind (NodeKind or its string value) to a
            callback, or to a mapping with "enter" and/or "exit" callbacks
        max_depth: Maximum nesting depth (default: MAX_DEPTH)

    Raises:
        ValueError: If the visitor table names an unknown node kind
        DepthLimitExceededError: If the tree nests deeper than max_depth
    """
    enter, exit_ = _normalize_table(visitors)
    _KindDispatchVisitor(enter, exit_, max_depth=max_depth).visit(node)
