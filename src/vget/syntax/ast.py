"""Template AST (Abstract Syntax Tree) node definitions.

Mirrors the Glimmer/HTMLBars template AST that the host compiler hands to
compile-time plugins. Includes type guards as static methods (eliminates
circular imports).

Unlike a parse-only AST, nodes are mutable: compile-time plugins rewrite
them in place, and callers holding a reference to a node observe the
rewrite. A node is owned by exactly one parent.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field
from typing import ClassVar, TypeIs

from vget.diagnostics.codes import SourceSpan
from vget.enums import NodeKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Node",
    # Literals
    "StringLiteral",
    "NumberLiteral",
    "BooleanLiteral",
    "NullLiteral",
    "UndefinedLiteral",
    # Expressions
    "PathExpression",
    "SubExpression",
    "Hash",
    "HashPair",
    # Statements
    "MustacheStatement",
    "BlockStatement",
    "ElementModifierStatement",
    "CommentStatement",
    "MustacheCommentStatement",
    "ConcatStatement",
    "TextNode",
    # Markup
    "ElementNode",
    "AttrNode",
    # Containers
    "Block",
    "Template",
    # Type aliases
    "LiteralNode",
    "Expression",
    "Statement",
    "AttrValue",
    "ConcatPart",
    "CallNode",
    "ASTNode",
]

# ============================================================================
# BASE TYPES
# ============================================================================


class Node:
    """Base class of every template AST node.

    Subclasses declare their discriminator as the ``kind`` class attribute.
    Used by traversal code to tell child nodes apart from plain field values
    (strings, flags, source locations).
    """

    __slots__ = ()

    kind: ClassVar[NodeKind]


# ============================================================================
# LITERALS
# ============================================================================


@dataclass(slots=True)
class StringLiteral(Node):
    """String literal: 'isValid' or "isValid" """

    kind: ClassVar[NodeKind] = NodeKind.STRING_LITERAL

    value: str
    loc: SourceSpan | None = None


@dataclass(slots=True)
class NumberLiteral(Node):
    """Number literal: 42 or 3.14"""

    kind: ClassVar[NodeKind] = NodeKind.NUMBER_LITERAL

    value: int | float
    loc: SourceSpan | None = None


@dataclass(slots=True)
class BooleanLiteral(Node):
    """Boolean literal: true or false"""

    kind: ClassVar[NodeKind] = NodeKind.BOOLEAN_LITERAL

    value: bool
    loc: SourceSpan | None = None


@dataclass(slots=True)
class NullLiteral(Node):
    """Null literal: null"""

    kind: ClassVar[NodeKind] = NodeKind.NULL_LITERAL

    loc: SourceSpan | None = None


@dataclass(slots=True)
class UndefinedLiteral(Node):
    """Undefined literal: undefined"""

    kind: ClassVar[NodeKind] = NodeKind.UNDEFINED_LITERAL

    loc: SourceSpan | None = None


# ============================================================================
# EXPRESSIONS
# ============================================================================


@dataclass(slots=True)
class PathExpression(Node):
    """Reference to a bound value: model, model.details, this.user

    The original field preserves the dotted source text.
    """

    kind: ClassVar[NodeKind] = NodeKind.PATH_EXPRESSION

    original: str
    loc: SourceSpan | None = None

    @property
    def parts(self) -> list[str]:
        """Dotted segments of the path: "model.details" -> ["model", "details"]"""
        return self.original.split(".")

    @staticmethod
    def guard(expr: object) -> TypeIs["PathExpression"]:
        """Type guard for PathExpression (used to validate helper roots)."""
        return isinstance(expr, PathExpression)


@dataclass(slots=True)
class HashPair(Node):
    """Named argument: key=value"""

    kind: ClassVar[NodeKind] = NodeKind.HASH_PAIR

    key: str
    value: "Expression"
    loc: SourceSpan | None = None


@dataclass(slots=True)
class Hash(Node):
    """Named-argument collection of a call."""

    kind: ClassVar[NodeKind] = NodeKind.HASH

    pairs: list[HashPair] = field(default_factory=list)
    loc: SourceSpan | None = None


@dataclass(slots=True)
class SubExpression(Node):
    """Nested call: (helper arg key=value)

    Example:
        {{#if (v-get model 'isInvalid')}}
              ^^^^^^^^^^^^^^^^^^^^^^^^^
    """

    kind: ClassVar[NodeKind] = NodeKind.SUB_EXPRESSION

    path: "Expression"
    params: list["Expression"] = field(default_factory=list)
    hash: Hash = field(default_factory=Hash)
    loc: SourceSpan | None = None

    @staticmethod
    def guard(expr: object) -> TypeIs["SubExpression"]:
        """Type guard for SubExpression."""
        return isinstance(expr, SubExpression)


# ============================================================================
# STATEMENTS
# ============================================================================


@dataclass(slots=True)
class MustacheStatement(Node):
    """Call expression or interpolation: {{helper arg key=value}}

    Legacy shape:
        Pre-Glimmer parsers leave path/params/hash unset and wrap the call in
        a SubExpression stored in ``sexpr``. Current parsers never set
        ``sexpr``.
    """

    kind: ClassVar[NodeKind] = NodeKind.MUSTACHE_STATEMENT

    path: "Expression | None" = None
    params: list["Expression"] = field(default_factory=list)
    hash: Hash = field(default_factory=Hash)
    trusting: bool = False
    sexpr: SubExpression | None = None
    loc: SourceSpan | None = None

    @staticmethod
    def guard(stmt: object) -> TypeIs["MustacheStatement"]:
        """Type guard for MustacheStatement."""
        return isinstance(stmt, MustacheStatement)


@dataclass(slots=True)
class Block(Node):
    """Body of a block statement or of the template's inverse section."""

    kind: ClassVar[NodeKind] = NodeKind.BLOCK

    body: list["Statement"] = field(default_factory=list)
    block_params: list[str] = field(default_factory=list)
    loc: SourceSpan | None = None


@dataclass(slots=True)
class BlockStatement(Node):
    """Call-with-body statement.

    Example:
        {{#if (v-get model 'username' 'isInvalid')}}
          <div class="error">{{v-get model 'username' 'message'}}</div>
        {{else}}
          ok
        {{/if}}

    Legacy shape: as for MustacheStatement, the call may be wrapped in ``sexpr``.
    """

    kind: ClassVar[NodeKind] = NodeKind.BLOCK_STATEMENT

    path: "Expression | None" = None
    params: list["Expression"] = field(default_factory=list)
    hash: Hash = field(default_factory=Hash)
    program: Block = field(default_factory=Block)
    inverse: Block | None = None
    sexpr: SubExpression | None = None
    loc: SourceSpan | None = None


@dataclass(slots=True)
class ElementModifierStatement(Node):
    """Element modifier: <button {{on 'click' this.save}}>"""

    kind: ClassVar[NodeKind] = NodeKind.ELEMENT_MODIFIER_STATEMENT

    path: "Expression"
    params: list["Expression"] = field(default_factory=list)
    hash: Hash = field(default_factory=Hash)
    loc: SourceSpan | None = None


@dataclass(slots=True)
class TextNode(Node):
    """Plain text segment."""

    kind: ClassVar[NodeKind] = NodeKind.TEXT_NODE

    chars: str
    loc: SourceSpan | None = None


@dataclass(slots=True)
class ConcatStatement(Node):
    """Attribute value mixing text and mustaches.

    Example:
        <div class="form-group {{if (v-get model 'isInvalid') 'has-error'}}">
                   ^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^
    """

    kind: ClassVar[NodeKind] = NodeKind.CONCAT_STATEMENT

    parts: list["ConcatPart"] = field(default_factory=list)
    loc: SourceSpan | None = None


@dataclass(slots=True)
class CommentStatement(Node):
    """HTML comment: <!-- value -->"""

    kind: ClassVar[NodeKind] = NodeKind.COMMENT_STATEMENT

    value: str
    loc: SourceSpan | None = None


@dataclass(slots=True)
class MustacheCommentStatement(Node):
    """Mustache comment: {{!-- value --}}"""

    kind: ClassVar[NodeKind] = NodeKind.MUSTACHE_COMMENT_STATEMENT

    value: str
    loc: SourceSpan | None = None


# ============================================================================
# MARKUP
# ============================================================================


@dataclass(slots=True)
class AttrNode(Node):
    """Element attribute: name=value

    The value is a TextNode (static), a MustacheStatement (disabled={{x}})
    or a ConcatStatement (class="a {{b}}").
    """

    kind: ClassVar[NodeKind] = NodeKind.ATTR_NODE

    name: str
    value: "AttrValue"
    loc: SourceSpan | None = None


@dataclass(slots=True)
class ElementNode(Node):
    """Markup element.

    Example:
        <button type="submit" disabled={{v-get model 'isInvalid'}}>Submit</button>
    """

    kind: ClassVar[NodeKind] = NodeKind.ELEMENT_NODE

    tag: str
    attributes: list[AttrNode] = field(default_factory=list)
    modifiers: list[ElementModifierStatement] = field(default_factory=list)
    children: list["Statement"] = field(default_factory=list)
    block_params: list[str] = field(default_factory=list)
    self_closing: bool = False
    loc: SourceSpan | None = None

    @staticmethod
    def guard(stmt: object) -> TypeIs["ElementNode"]:
        """Type guard for ElementNode."""
        return isinstance(stmt, ElementNode)


# ============================================================================
# CONTAINERS
# ============================================================================


@dataclass(slots=True)
class Template(Node):
    """Root AST node of a compiled template."""

    kind: ClassVar[NodeKind] = NodeKind.TEMPLATE

    body: list["Statement"] = field(default_factory=list)
    block_params: list[str] = field(default_factory=list)
    loc: SourceSpan | None = None


# ============================================================================
# TYPE ALIASES
# ============================================================================

type LiteralNode = (
    StringLiteral | NumberLiteral | BooleanLiteral | NullLiteral | UndefinedLiteral
)
type Expression = PathExpression | SubExpression | LiteralNode
type Statement = (
    MustacheStatement
    | BlockStatement
    | ElementNode
    | TextNode
    | CommentStatement
    | MustacheCommentStatement
)
type AttrValue = TextNode | MustacheStatement | ConcatStatement
type ConcatPart = TextNode | MustacheStatement

# Nodes that carry a callee, positional params and a hash
type CallNode = MustacheStatement | SubExpression | BlockStatement | ElementModifierStatement

type ASTNode = (
    Template
    | Block
    | BlockStatement
    | MustacheStatement
    | ElementNode
    | ElementModifierStatement
    | AttrNode
    | ConcatStatement
    | TextNode
    | CommentStatement
    | MustacheCommentStatement
    | SubExpression
    | PathExpression
    | Hash
    | HashPair
    | StringLiteral
    | NumberLiteral
    | BooleanLiteral
    | NullLiteral
    | UndefinedLiteral
)
