"""Template syntax package.

Provides AST definitions, node builders, the visitor pattern, the
callback-table traversal utility, and a source printer. Separate from the
plugins so hosts can supply their own traversal and builders.

Python 3.13+.
"""

from .ast import (
    ASTNode,
    AttrNode,
    Block,
    BlockStatement,
    BooleanLiteral,
    CommentStatement,
    ConcatStatement,
    ElementModifierStatement,
    ElementNode,
    Expression,
    Hash,
    HashPair,
    MustacheCommentStatement,
    MustacheStatement,
    Node,
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
from .builders import Builders, builders
from .printer import PrintError, TemplatePrinter, print_template
from .traverse import traverse
from .visitor import ASTVisitor

__all__ = [
    "ASTNode",
    "ASTVisitor",
    "AttrNode",
    "Block",
    "BlockStatement",
    "BooleanLiteral",
    "Builders",
    "CommentStatement",
    "ConcatStatement",
    "ElementModifierStatement",
    "ElementNode",
    "Expression",
    "Hash",
    "HashPair",
    "MustacheCommentStatement",
    "MustacheStatement",
    "Node",
    "NullLiteral",
    "NumberLiteral",
    "PathExpression",
    "PrintError",
    "Statement",
    "StringLiteral",
    "SubExpression",
    "Template",
    "TemplatePrinter",
    "TextNode",
    "UndefinedLiteral",
    "builders",
    "print_template",
    "traverse",
]
