"""Enumerations for vget type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a traversal table keyed by
``NodeKind.MUSTACHE_STATEMENT`` also matches the plain key ``"MustacheStatement"``.

Python 3.13+.
"""

from enum import StrEnum


class NodeKind(StrEnum):
    """Discriminator for template AST nodes.

    Values match the node class names (and the Glimmer ``type`` strings),
    so str(NodeKind.BLOCK_STATEMENT) == "BlockStatement".
    """

    TEMPLATE = "Template"
    """Root of a parsed template."""

    BLOCK = "Block"
    """Body of a block statement: the part between {{#if}} and {{/if}}"""

    BLOCK_STATEMENT = "BlockStatement"
    """Call-with-body statement: {{#if cond}}...{{/if}}"""

    MUSTACHE_STATEMENT = "MustacheStatement"
    """Call expression: {{helper arg key=value}}"""

    ELEMENT_NODE = "ElementNode"
    """Markup element: <div class="x">...</div>"""

    ELEMENT_MODIFIER_STATEMENT = "ElementModifierStatement"
    """Element modifier: <button {{on "click" this.save}}>"""

    SUB_EXPRESSION = "SubExpression"
    """Nested call: (helper arg)"""

    PATH_EXPRESSION = "PathExpression"
    """Reference: model.details"""

    STRING_LITERAL = "StringLiteral"
    """String literal: 'isValid'"""

    NUMBER_LITERAL = "NumberLiteral"
    """Number literal: 42"""

    BOOLEAN_LITERAL = "BooleanLiteral"
    """Boolean literal: true"""

    NULL_LITERAL = "NullLiteral"
    """Null literal: null"""

    UNDEFINED_LITERAL = "UndefinedLiteral"
    """Undefined literal: undefined"""

    HASH = "Hash"
    """Named-argument collection."""

    HASH_PAIR = "HashPair"
    """Named argument: key=value"""

    ATTR_NODE = "AttrNode"
    """Element attribute: disabled={{value}}"""

    CONCAT_STATEMENT = "ConcatStatement"
    """Mixed text/expression attribute value: class="a {{b}}" """

    TEXT_NODE = "TextNode"
    """Plain text."""

    COMMENT_STATEMENT = "CommentStatement"
    """HTML comment: <!-- ... -->"""

    MUSTACHE_COMMENT_STATEMENT = "MustacheCommentStatement"
    """Mustache comment: {{! ... }}"""


__all__ = [
    "NodeKind",
]
