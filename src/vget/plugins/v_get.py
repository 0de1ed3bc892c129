"""Compile-time expansion of the ``v-get`` template helper.

Accessing validation information in templates is simple, but the path can be
quite long. Displaying the error ``message`` of the ``username`` attribute
looks like this::

    {{model.validations.attrs.username.message}}

The ``v-get`` helper shortens it. Access global model properties::

    {{v-get model 'isValid'}}

Access attribute-specific properties::

    {{v-get model 'username' 'message'}}

Access validations of a relationship::

    {{v-get model.details 'isValid'}}
    {{v-get model.details 'firstName' 'message'}}

Bound properties work as keys too::

    {{v-get model attr prop}}
    {{v-get model prop}}

The helper does not exist at runtime. This pass rewrites every invocation,
wherever it appears, into nested calls of the generic ``get`` helper::

    (v-get model 'isValid')
        -> (get (get model 'validations') 'isValid')
    (v-get model 'username' 'isValid')
        -> (get (get (get (get model 'validations') 'attrs') 'username') 'isValid')

Invocations are found in top-level mustaches, block parameters, named
arguments, element attribute values and concatenated attribute values::

    <form>
      {{input value=model.username placeholder="Username"}}
      {{#if (v-get model 'username' 'isInvalid')}}
        <div class="error">
          {{v-get model 'username' 'message'}}
        </div>
      {{/if}}

      <button type="submit" disabled={{v-get model 'isInvalid'}}>Submit</button>
    </form>

Python 3.13+.
"""

import logging
from functools import partial
from typing import Protocol

from vget.config import TransformConfig
from vget.constants import MAX_SHORTHAND_PARAMS, MIN_SHORTHAND_PARAMS
from vget.core.depth_guard import DepthGuard
from vget.diagnostics import ArgumentCountError, InvalidRootError
from vget.diagnostics.templates import ErrorTemplate
from vget.enums import NodeKind
from vget.syntax.ast import (
    BlockStatement,
    ConcatStatement,
    ElementNode,
    Expression,
    MustacheStatement,
    Node,
    PathExpression,
    StringLiteral,
    SubExpression,
)
from vget.syntax.builders import builders as default_builders
from vget.syntax.traverse import TraverseFunction
from vget.syntax.traverse import traverse as default_traverse

__all__ = [
    "NodeBuilder",
    "VGetPass",
    "VGetTransform",
    "transform_template",
    "unwrap_node",
]

logger = logging.getLogger(__name__)


class NodeBuilder(Protocol):
    """Node construction capability required by the pass.

    Satisfied by ``vget.syntax.builders.Builders`` and by any host builder
    exposing the same three factories.
    """

    def path(self, original: str) -> PathExpression: ...

    def string(self, value: str) -> StringLiteral: ...

    def sexpr(self, path: PathExpression, params: list[Expression]) -> SubExpression: ...


def unwrap_node(node: Node) -> Node:
    """Return the call a node represents, for pre- and post-Glimmer parsers.

    Pre-Glimmer parsers wrap the call of a mustache or block in a nested
    SubExpression (``node.sexpr``); current parsers store it on the node
    itself. All other nodes are returned unchanged.
    """
    match node:
        case MustacheStatement(sexpr=SubExpression() as inner) | BlockStatement(
            sexpr=SubExpression() as inner
        ):
            return inner
        case _:
            return node


class VGetPass:
    """State of a single expansion run over one template.

    Created per ``VGetTransform.transform()`` call, so transforms never
    share depth tracking or counters.

    Attributes:
        builders: Node construction capability
        config: Names matched and emitted
        expansions: Number of invocations rewritten so far
    """

    __slots__ = ("_depth_guard", "builders", "config", "expansions")

    def __init__(self, builders: NodeBuilder, config: TransformConfig) -> None:
        self.builders = builders
        self.config = config
        self.expansions = 0
        self._depth_guard = DepthGuard(max_depth=config.max_depth)

    def is_shorthand(self, node: Node) -> bool:
        """True if node is a call whose callee is the shorthand helper."""
        match node:
            case MustacheStatement(path=PathExpression(original=name)) | SubExpression(
                path=PathExpression(original=name)
            ):
                return name == self.config.helper_name
            case _:
                return False

    def process_node(self, node: Node) -> None:
        """Rewrite node if it is an invocation, then search its children.

        Raises:
            ArgumentCountError: If an invocation has other than 2 or 3 arguments
            InvalidRootError: If an invocation's first argument is not a path
            DepthLimitExceededError: If sub-expressions nest deeper than max_depth
        """
        with self._depth_guard:
            target = unwrap_node(node)

            # {{v-get model 'username' 'isValid'}}
            if node.kind in (NodeKind.MUSTACHE_STATEMENT, NodeKind.SUB_EXPRESSION) and (
                self.is_shorthand(target)
            ):
                self.transform_to_get(target)

            self.process_node_params(target)
            self.process_node_hash(target)
            self.process_node_attributes(target)

    def process_node_params(self, node: Node) -> None:
        """Search positional arguments.

        {{#if (v-get model 'username' 'isValid')}} {{/if}}
        """
        match node:
            case MustacheStatement(params=params) | BlockStatement(params=params) | SubExpression(
                params=params
            ):
                for param in params:
                    self._process_argument(param)
            case _:
                pass

    def process_node_hash(self, node: Node) -> None:
        """Search named-argument values.

        {{x-component prop=(v-get model 'isValid')}}
        """
        match node:
            case MustacheStatement(hash=hash_) | BlockStatement(hash=hash_) | SubExpression(
                hash=hash_
            ):
                for pair in hash_.pairs:
                    self._process_argument(pair.value)
            case _:
                pass

    def process_node_attributes(self, node: Node) -> None:
        """Search attribute values and concatenation parts.

        <button type="submit" disabled={{v-get model 'isInvalid'}}>Submit</button>
        <div class="form-group {{if (v-get model 'isInvalid') 'has-error'}}">
        """
        match node:
            case ElementNode(attributes=attributes):
                for attr in attributes:
                    self.process_node(attr.value)
            case ConcatStatement(parts=parts):
                for part in parts:
                    self.process_node(part)
            case _:
                pass

    def _process_argument(self, argument: Node) -> None:
        # Only sub-expressions can contain an invocation; paths and literals cannot.
        argument = unwrap_node(argument)
        if SubExpression.guard(argument):
            self.process_node(argument)

    def transform_to_get(self, node: Node) -> None:
        """Rewrite an invocation in place into nested accessor calls.

        Transform:
            (v-get model 'username' 'isValid')
                to (get (get (get (get model 'validations') 'attrs') 'username') 'isValid')
        OR
            (v-get model 'isValid') to (get (get model 'validations') 'isValid')

        The node keeps its identity and hash; only its path and params change.
        The original argument nodes are reused inside the new structure.

        Args:
            node: MustacheStatement or SubExpression calling the shorthand helper

        Raises:
            ArgumentCountError: If the invocation has fewer than 2 or more than 3
                positional arguments
            InvalidRootError: If the first positional argument is not a PathExpression
        """
        call = unwrap_node(node)
        if not isinstance(call, MustacheStatement | SubExpression):
            msg = f"Expected a call node, got {type(call).__name__}"
            raise TypeError(msg)

        config = self.config
        params = call.params
        num_params = len(params)

        if num_params < MIN_SHORTHAND_PARAMS:
            raise ArgumentCountError(
                ErrorTemplate.too_few_arguments(config.helper_name, num_params, call.loc)
            )
        if num_params > MAX_SHORTHAND_PARAMS:
            raise ArgumentCountError(
                ErrorTemplate.too_many_arguments(config.helper_name, num_params, call.loc)
            )
        if not PathExpression.guard(params[0]):
            raise InvalidRootError(
                ErrorTemplate.root_not_path(
                    config.helper_name, type(params[0]).__name__, call.loc
                )
            )

        b = self.builders

        # (get model 'validations')
        root = b.sexpr(b.path(config.accessor_name), [params[0], b.string(config.validations_key)])

        # (get (get (get model 'validations') 'attrs') 'username')
        if num_params == MAX_SHORTHAND_PARAMS:
            root = b.sexpr(b.path(config.accessor_name), [root, b.string(config.attrs_key)])
            root = b.sexpr(b.path(config.accessor_name), [root, params[1]])

        call.path = b.path(config.accessor_name)
        # (get root 'isValid')
        call.params = [root, params[-1]]

        self.expansions += 1
        logger.debug(
            "Expanded {{%s}} with %d arguments at %s",
            config.helper_name,
            num_params,
            call.loc if call.loc is not None else "<unknown location>",
        )


class VGetTransform:
    """AST plugin expanding ``v-get`` invocations into ``get`` chains.

    Stateless between calls; one instance can transform any number of
    templates. The traversal and node-construction capabilities are passed
    to ``transform()`` explicitly and default to this package's own.

    Example:
        >>> from vget.syntax.builders import builders as b
        >>> template = b.template([
        ...     b.mustache("v-get", [b.path("model"), b.string("isValid")]),
        ... ])
        >>> VGetTransform().transform(template) is template
        True
        >>> print_template(template)
        '{{get (get model "validations") "isValid"}}'

    Attributes:
        options: Host-supplied options, stored but not interpreted
        config: Names matched and emitted by the pass
    """

    __slots__ = ("config", "options")

    def __init__(self, options: object = None, *, config: TransformConfig | None = None) -> None:
        self.options = options
        self.config = config if config is not None else TransformConfig()

    def transform[T: Node](
        self,
        ast: T,
        *,
        traverse: TraverseFunction | None = None,
        builders: NodeBuilder | None = None,
    ) -> T:
        """Expand every shorthand invocation in ``ast`` in place.

        Visits every block statement, mustache and element in document order,
        including those nested in block bodies and element children.

        Args:
            ast: Template (or any subtree) produced by the host parser
            traverse: Host traversal utility taking (node, visitor_table);
                default: vget.syntax.traverse.traverse bounded by config.max_depth
            builders: Host node builders; default: vget.syntax.builders.builders

        Returns:
            The same ``ast`` instance, mutated

        Raises:
            ArgumentCountError: If an invocation has other than 2 or 3 arguments
            InvalidRootError: If an invocation's first argument is not a path
            DepthLimitExceededError: If the tree nests deeper than config.max_depth
        """
        if traverse is None:
            traverse = partial(default_traverse, max_depth=self.config.max_depth)
        vget_pass = VGetPass(
            builders if builders is not None else default_builders, self.config
        )

        traverse(
            ast,
            {
                NodeKind.BLOCK_STATEMENT: vget_pass.process_node,
                NodeKind.MUSTACHE_STATEMENT: vget_pass.process_node,
                NodeKind.ELEMENT_NODE: vget_pass.process_node,
            },
        )

        logger.debug(
            "%s pass expanded %d invocation(s)", self.config.helper_name, vget_pass.expansions
        )
        return ast


def transform_template[T: Node](
    ast: T, options: object = None, *, config: TransformConfig | None = None
) -> T:
    """Expand all ``v-get`` invocations in a template AST.

    Convenience function for VGetTransform(options, config=config).transform(ast).

    Example:
        >>> from vget.syntax.builders import builders as b
        >>> node = b.mustache("v-get", [b.path("model"), b.string("username"), b.string("message")])
        >>> print_template(transform_template(b.template([node])))
        '{{get (get (get (get model "validations") "attrs") "username") "message"}}'
    """
    return VGetTransform(options, config=config).transform(ast)
