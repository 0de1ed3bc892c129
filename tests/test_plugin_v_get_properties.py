"""Property-based tests for the v-get expansion."""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from tests.strategies import (
    non_path_expressions,
    path_expressions,
    placed_invocations,
    shorthand_calls,
    unrelated_calls,
)
from vget import transform_template
from vget.diagnostics import ArgumentCountError, InvalidRootError
from vget.syntax.ast import (
    Expression,
    MustacheStatement,
    PathExpression,
    StringLiteral,
    SubExpression,
)
from vget.syntax.builders import builders as b
from vget.syntax.printer import print_template


def _unwind(node: MustacheStatement | SubExpression) -> list[Expression]:
    """Follow a get chain down to its root, returning [root, key1, key2, ...]."""
    keys: list[Expression] = []
    current: Expression | MustacheStatement = node
    while isinstance(current, MustacheStatement | SubExpression):
        assert isinstance(current.path, PathExpression)
        assert current.path.original == "get"
        assert len(current.params) == 2
        keys.append(current.params[1])
        current = current.params[0]
    return [current, *reversed(keys)]


class TestExpansionRule:
    """Expansion output has the fixed shape for every root and key."""

    @given(shorthand_calls())
    def test_chain_shape(
        self, call: tuple[MustacheStatement | SubExpression, PathExpression, list[Expression]]
    ) -> None:
        node, root, keys = call
        container = node if isinstance(node, MustacheStatement) else b.mustache("t", [node])

        transform_template(b.template([container]))

        chain = _unwind(node)
        assert chain[0] is root
        validations = chain[1]
        assert isinstance(validations, StringLiteral)
        assert validations.value == "validations"
        if len(keys) == 1:
            assert len(chain) == 3
            assert chain[2] is keys[0]
        else:
            assert len(chain) == 5
            attrs = chain[2]
            assert isinstance(attrs, StringLiteral)
            assert attrs.value == "attrs"
            assert chain[3] is keys[0]
            assert chain[4] is keys[1]

    @given(path_expressions(), st.text(max_size=15))
    def test_two_argument_print(self, root: PathExpression, key: str) -> None:
        node = b.mustache("v-get", [root, b.string(key)])

        transform_template(b.template([node]))

        inner = b.sexpr("get", [b.path(root.original), b.string("validations")])
        expected = print_template(b.mustache("get", [inner, b.string(key)]))
        assert print_template(node) == expected


class TestPositions:
    """Every legal position is reached, siblings are untouched."""

    @given(placed_invocations())
    def test_invocation_found(
        self, placed: tuple[object, MustacheStatement | SubExpression, str]
    ) -> None:
        template, call, position = placed
        event(f"position={position}")

        transform_template(template)  # type: ignore[arg-type]

        assert isinstance(call.path, PathExpression)
        assert call.path.original == "get"

    @given(st.lists(unrelated_calls(), min_size=1, max_size=5))
    def test_unrelated_calls_unchanged(self, calls: list[MustacheStatement]) -> None:
        template = b.template(calls)
        before = print_template(template)
        snapshot = [(c.path, list(c.params)) for c in calls]

        transform_template(template)

        assert print_template(template) == before
        for node, (path, params) in zip(template.body, snapshot, strict=True):
            assert isinstance(node, MustacheStatement)
            assert node.path is path
            assert all(x is y for x, y in zip(node.params, params, strict=True))

    @given(placed_invocations())
    def test_idempotent(self, placed: tuple[object, MustacheStatement | SubExpression, str]) -> None:
        template, _, _ = placed
        transform_template(template)  # type: ignore[arg-type]
        once = print_template(template)  # type: ignore[arg-type]

        transform_template(template)  # type: ignore[arg-type]

        assert print_template(template) == once  # type: ignore[arg-type]


class TestValidationProperties:
    """Malformed invocations always raise."""

    @given(path_expressions(), st.sampled_from([0, 1, 4, 5]))
    def test_wrong_arity(self, root: PathExpression, count: int) -> None:
        params: list[Expression] = [root, *(b.string(f"k{i}") for i in range(count - 1))][:count]
        template = b.template([b.mustache("v-get", params)])

        with pytest.raises(ArgumentCountError):
            transform_template(template)

    @given(non_path_expressions(), st.integers(min_value=1, max_value=2))
    def test_non_path_root(self, root: Expression, key_count: int) -> None:
        params: list[Expression] = [root, *(b.string(f"k{i}") for i in range(key_count))]
        template = b.template([b.mustache("v-get", params)])

        with pytest.raises(InvalidRootError):
            transform_template(template)
