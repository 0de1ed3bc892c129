"""Print template AST back to Handlebars source.

Converts AST nodes to template source code. Useful for:
- Inspecting what a compile-time pass produced
- Readable assertions in tests
- Debug logging of rewritten invocations

Output is normalized, not byte-identical to the original source: string
literals are always double-quoted and whitespace inside mustaches is
collapsed to single spaces.

Python 3.13+.
"""

import json

from .ast import (
    AttrNode,
    Block,
    BlockStatement,
    BooleanLiteral,
    CommentStatement,
    ConcatStatement,
    ElementModifierStatement,
    ElementNode,
    Hash,
    HashPair,
    MustacheCommentStatement,
    MustacheStatement,
    Node,
    NullLiteral,
    NumberLiteral,
    PathExpression,
    StringLiteral,
    SubExpression,
    Template,
    TextNode,
    UndefinedLiteral,
)
from .visitor import ASTVisitor

__all__ = ["PrintError", "TemplatePrinter", "print_template"]


class PrintError(ValueError):
    """Raised when a node cannot be rendered as template source.

    Common causes:
    - A call node with neither a path nor a legacy ``sexpr`` wrapper
    - Foreign objects placed in a children list by a buggy pass
    """


class TemplatePrinter(ASTVisitor):
    """Converts AST back to Handlebars source string.

    All printing state is local to the print() call; instances are reusable.

    Usage:
        >>> printer = TemplatePrinter()
        >>> printer.print(b.mustache("v-get", [b.path("model"), b.string("isValid")]))
        '{{v-get model "isValid"}}'
    """

    def print(self, node: Node) -> str:
        """Print any node (template, statement or expression) to source.

        Raises:
            PrintError: If the tree contains a node that cannot be rendered
            DepthLimitExceededError: If the tree nests deeper than max_depth
        """
        self._depth_guard.reset()
        output: list[str] = []
        self._print_node(node, output)
        return "".join(output)

    def _print_node(self, node: Node, output: list[str]) -> None:
        with self._depth_guard:
            match node:
                case Template(body=body) | Block(body=body):
                    for statement in body:
                        self._print_node(statement, output)
                case TextNode(chars=chars):
                    output.append(chars)
                case MustacheStatement():
                    output.append("{{{" if node.trusting else "{{")
                    self._print_call(node, output)
                    output.append("}}}" if node.trusting else "}}")
                case BlockStatement():
                    self._print_block(node, output)
                case ElementNode():
                    self._print_element(node, output)
                case ElementModifierStatement():
                    output.append("{{")
                    self._print_call(node, output)
                    output.append("}}")
                case AttrNode():
                    self._print_attr(node, output)
                case ConcatStatement(parts=parts):
                    for part in parts:
                        self._print_node(part, output)
                case CommentStatement(value=value):
                    output.append(f"<!--{value}-->")
                case MustacheCommentStatement(value=value):
                    output.append(f"{{{{!--{value}--}}}}")
                case SubExpression():
                    output.append("(")
                    self._print_call(node, output)
                    output.append(")")
                case PathExpression(original=original):
                    output.append(original)
                case StringLiteral(value=value):
                    output.append(json.dumps(value, ensure_ascii=False))
                case NumberLiteral(value=value):
                    output.append(str(value))
                case BooleanLiteral(value=value):
                    output.append("true" if value else "false")
                case NullLiteral():
                    output.append("null")
                case UndefinedLiteral():
                    output.append("undefined")
                case Hash():
                    self._print_hash(node, output)
                case HashPair(key=key, value=value):
                    output.append(f"{key}=")
                    self._print_node(value, output)
                case _:
                    msg = f"Cannot print {type(node).__name__} as template source"
                    raise PrintError(msg)

    def _print_call(
        self,
        node: MustacheStatement | BlockStatement | SubExpression | ElementModifierStatement,
        output: list[str],
    ) -> None:
        """Print 'path param... key=value...' without delimiters."""
        if isinstance(node, MustacheStatement | BlockStatement) and node.sexpr is not None:
            self._print_call(node.sexpr, output)
            return
        if node.path is None:
            msg = f"{type(node).__name__} has no path"
            raise PrintError(msg)

        self._print_node(node.path, output)
        for param in node.params:
            output.append(" ")
            self._print_node(param, output)
        if node.hash.pairs:
            output.append(" ")
            self._print_hash(node.hash, output)

    def _print_hash(self, node: Hash, output: list[str]) -> None:
        for i, pair in enumerate(node.pairs):
            if i > 0:
                output.append(" ")
            self._print_node(pair, output)

    def _print_block(self, node: BlockStatement, output: list[str]) -> None:
        output.append("{{#")
        self._print_call(node, output)
        if node.program.block_params:
            output.append(f" as |{' '.join(node.program.block_params)}|")
        output.append("}}")
        self._print_node(node.program, output)
        if node.inverse is not None:
            output.append("{{else}}")
            self._print_node(node.inverse, output)
        output.append("{{/")
        callee = node.sexpr.path if node.sexpr is not None else node.path
        if callee is not None:
            self._print_node(callee, output)
        output.append("}}")

    def _print_element(self, node: ElementNode, output: list[str]) -> None:
        output.append(f"<{node.tag}")
        for attr in node.attributes:
            output.append(" ")
            self._print_attr(attr, output)
        for modifier in node.modifiers:
            output.append(" ")
            self._print_node(modifier, output)
        if node.block_params:
            output.append(f" as |{' '.join(node.block_params)}|")
        if node.self_closing:
            output.append(" />")
            return
        output.append(">")
        for child in node.children:
            self._print_node(child, output)
        output.append(f"</{node.tag}>")

    def _print_attr(self, node: AttrNode, output: list[str]) -> None:
        match node.value:
            case TextNode(chars=""):
                # Valueless attribute: <input disabled>
                output.append(node.name)
            case TextNode(chars=chars):
                output.append(f'{node.name}="{chars}"')
            case ConcatStatement():
                output.append(f'{node.name}="')
                self._print_node(node.value, output)
                output.append('"')
            case _:
                output.append(f"{node.name}=")
                self._print_node(node.value, output)


def print_template(node: Node) -> str:
    """Print a template AST (or any node within one) to Handlebars source.

    Convenience function for TemplatePrinter().print().

    Example:
        >>> print_template(b.sexpr("get", [b.path("model"), b.string("validations")]))
        '(get model "validations")'
    """
    return TemplatePrinter().print(node)
