"""Node construction helpers.

Equivalent of the host compiler's ``syntax.builders`` capability: short
factory functions for every template AST node, so plugins and tests never
spell out dataclass constructors with list/hash defaults by hand.

Builders accept either nodes or plain Python values where the template
source would be unambiguous:
- ``b.path("model")`` for a reference
- ``b.sexpr("get", [b.path("model"), b.string("validations")])``

Python 3.13+.
"""

from collections.abc import Iterable, Mapping

from vget.diagnostics.codes import SourceSpan

from .ast import (
    AttrNode,
    AttrValue,
    Block,
    BlockStatement,
    BooleanLiteral,
    CommentStatement,
    ConcatPart,
    ConcatStatement,
    ElementModifierStatement,
    ElementNode,
    Expression,
    Hash,
    HashPair,
    MustacheCommentStatement,
    MustacheStatement,
    NullLiteral,
    NumberLiteral,
    PathExpression,
    Statement,
    StringLiteral,
    SubExpression,
    Template,
    TextNode,
    UndefinedLiteral,
)

__all__ = ["Builders", "builders"]


class Builders:
    """Factory for template AST nodes.

    Stateless; a single shared instance is exported as ``builders``. Hosts
    that construct nodes differently (for example to attach synthetic
    source locations) subclass it and pass their instance to
    ``VGetTransform.transform(ast, builders=...)``.

    Example:
        >>> b = Builders()
        >>> node = b.mustache("v-get", [b.path("model"), b.string("isValid")])
        >>> node.path.original
        'v-get'
    """

    __slots__ = ()

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def path(self, original: str | PathExpression, loc: SourceSpan | None = None) -> PathExpression:
        """Build a reference: model, model.details"""
        if isinstance(original, PathExpression):
            return original
        return PathExpression(original=original, loc=loc)

    def string(self, value: str, loc: SourceSpan | None = None) -> StringLiteral:
        """Build a string literal."""
        return StringLiteral(value=value, loc=loc)

    def number(self, value: int | float, loc: SourceSpan | None = None) -> NumberLiteral:
        """Build a number literal."""
        return NumberLiteral(value=value, loc=loc)

    def boolean(self, value: bool, loc: SourceSpan | None = None) -> BooleanLiteral:
        """Build a boolean literal."""
        return BooleanLiteral(value=value, loc=loc)

    def null(self, loc: SourceSpan | None = None) -> NullLiteral:
        """Build a null literal."""
        return NullLiteral(loc=loc)

    def undefined(self, loc: SourceSpan | None = None) -> UndefinedLiteral:
        """Build an undefined literal."""
        return UndefinedLiteral(loc=loc)

    def pair(self, key: str, value: Expression, loc: SourceSpan | None = None) -> HashPair:
        """Build a named argument."""
        return HashPair(key=key, value=value, loc=loc)

    def hash(
        self,
        pairs: Iterable[HashPair] | Mapping[str, Expression] | None = None,
        loc: SourceSpan | None = None,
    ) -> Hash:
        """Build a named-argument collection from pairs or a key -> value mapping."""
        if pairs is None:
            return Hash(loc=loc)
        if isinstance(pairs, Mapping):
            return Hash(pairs=[self.pair(k, v) for k, v in pairs.items()], loc=loc)
        return Hash(pairs=list(pairs), loc=loc)

    def sexpr(
        self,
        path: str | PathExpression,
        params: Iterable[Expression] | None = None,
        hash: Hash | None = None,  # noqa: A002 - mirrors the node field name
        loc: SourceSpan | None = None,
    ) -> SubExpression:
        """Build a call expression: (path param... key=value...)"""
        return SubExpression(
            path=self.path(path),
            params=list(params or ()),
            hash=hash if hash is not None else self.hash(),
            loc=loc,
        )

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def mustache(
        self,
        path: str | Expression,
        params: Iterable[Expression] | None = None,
        hash: Hash | None = None,  # noqa: A002
        *,
        trusting: bool = False,
        loc: SourceSpan | None = None,
    ) -> MustacheStatement:
        """Build a mustache: {{path param... key=value...}}"""
        return MustacheStatement(
            path=self.path(path) if isinstance(path, str) else path,
            params=list(params or ()),
            hash=hash if hash is not None else self.hash(),
            trusting=trusting,
            loc=loc,
        )

    def block(
        self,
        path: str | PathExpression,
        params: Iterable[Expression] | None = None,
        hash: Hash | None = None,  # noqa: A002
        program: Block | Iterable[Statement] | None = None,
        inverse: Block | Iterable[Statement] | None = None,
        loc: SourceSpan | None = None,
    ) -> BlockStatement:
        """Build a block statement: {{#path params}}program{{else}}inverse{{/path}}"""
        return BlockStatement(
            path=self.path(path),
            params=list(params or ()),
            hash=hash if hash is not None else self.hash(),
            program=self.block_body(program),
            inverse=None if inverse is None else self.block_body(inverse),
            loc=loc,
        )

    def block_body(
        self,
        body: Block | Iterable[Statement] | None = None,
        block_params: Iterable[str] | None = None,
        loc: SourceSpan | None = None,
    ) -> Block:
        """Build a block body."""
        if isinstance(body, Block):
            return body
        return Block(body=list(body or ()), block_params=list(block_params or ()), loc=loc)

    def element_modifier(
        self,
        path: str | PathExpression,
        params: Iterable[Expression] | None = None,
        hash: Hash | None = None,  # noqa: A002
        loc: SourceSpan | None = None,
    ) -> ElementModifierStatement:
        """Build an element modifier: {{on 'click' this.save}}"""
        return ElementModifierStatement(
            path=self.path(path),
            params=list(params or ()),
            hash=hash if hash is not None else self.hash(),
            loc=loc,
        )

    def text(self, chars: str = "", loc: SourceSpan | None = None) -> TextNode:
        """Build a text node."""
        return TextNode(chars=chars, loc=loc)

    def concat(self, parts: Iterable[ConcatPart], loc: SourceSpan | None = None) -> ConcatStatement:
        """Build a concatenated attribute value."""
        return ConcatStatement(parts=list(parts), loc=loc)

    def comment(self, value: str, loc: SourceSpan | None = None) -> CommentStatement:
        """Build an HTML comment."""
        return CommentStatement(value=value, loc=loc)

    def mustache_comment(self, value: str, loc: SourceSpan | None = None) -> MustacheCommentStatement:
        """Build a mustache comment."""
        return MustacheCommentStatement(value=value, loc=loc)

    # ------------------------------------------------------------------
    # Markup
    # ------------------------------------------------------------------

    def attr(self, name: str, value: AttrValue, loc: SourceSpan | None = None) -> AttrNode:
        """Build an element attribute."""
        return AttrNode(name=name, value=value, loc=loc)

    def element(
        self,
        tag: str,
        *,
        attrs: Iterable[AttrNode] | None = None,
        modifiers: Iterable[ElementModifierStatement] | None = None,
        children: Iterable[Statement] | None = None,
        block_params: Iterable[str] | None = None,
        self_closing: bool = False,
        loc: SourceSpan | None = None,
    ) -> ElementNode:
        """Build a markup element."""
        return ElementNode(
            tag=tag,
            attributes=list(attrs or ()),
            modifiers=list(modifiers or ()),
            children=list(children or ()),
            block_params=list(block_params or ()),
            self_closing=self_closing,
            loc=loc,
        )

    def template(
        self,
        body: Iterable[Statement] | None = None,
        block_params: Iterable[str] | None = None,
        loc: SourceSpan | None = None,
    ) -> Template:
        """Build a template root."""
        return Template(body=list(body or ()), block_params=list(block_params or ()), loc=loc)


builders = Builders()
