"""Tests for syntax.printer and syntax.builders."""

from __future__ import annotations

import pytest

from vget.core.depth_guard import DepthLimitExceededError
from vget.syntax.ast import (
    Block,
    BlockStatement,
    Hash,
    HashPair,
    MustacheStatement,
    PathExpression,
    StringLiteral,
    SubExpression,
)
from vget.syntax.builders import Builders
from vget.syntax.printer import PrintError, TemplatePrinter, print_template


class TestBuilders:
    """Node factories fill in list and hash defaults."""

    def test_path_passthrough(self, b: Builders) -> None:
        path = b.path("model.details")

        assert b.path(path) is path
        assert path.parts == ["model", "details"]

    def test_hash_from_mapping(self, b: Builders) -> None:
        value = b.path("model.username")
        node = b.hash({"value": value, "placeholder": b.string("Name")})

        assert [p.key for p in node.pairs] == ["value", "placeholder"]
        assert node.pairs[0].value is value

    def test_hash_from_pairs(self, b: Builders) -> None:
        pair = b.pair("value", b.path("x"))

        assert b.hash([pair]).pairs == [pair]
        assert b.hash().pairs == []

    def test_sexpr_defaults(self, b: Builders) -> None:
        node = b.sexpr("get")

        assert isinstance(node, SubExpression)
        assert isinstance(node.path, PathExpression)
        assert node.params == []
        assert isinstance(node.hash, Hash)
        assert node.hash.pairs == []

    def test_params_are_copied(self, b: Builders) -> None:
        params = [b.path("model")]
        node = b.mustache("v-get", params)

        params.append(b.string("late"))

        assert len(node.params) == 1

    def test_block_wraps_statement_lists(self, b: Builders) -> None:
        node = b.block("if", [b.path("x")], program=[b.text("yes")], inverse=[b.text("no")])

        assert isinstance(node, BlockStatement)
        assert isinstance(node.program, Block)
        assert isinstance(node.inverse, Block)
        assert node.program.body[0].chars == "yes"  # type: ignore[union-attr]

    def test_block_without_inverse(self, b: Builders) -> None:
        assert b.block("if", [b.path("x")]).inverse is None

    def test_block_body_passthrough(self, b: Builders) -> None:
        body = b.block_body([b.text("x")], block_params=["item"])

        assert b.block_body(body) is body
        assert body.block_params == ["item"]

    def test_node_kinds(self, b: Builders) -> None:
        assert b.mustache("x").kind == "MustacheStatement"
        assert b.sexpr("x").kind == "SubExpression"
        assert b.element("div").kind == "ElementNode"
        assert b.concat([]).kind == "ConcatStatement"

    def test_guards(self, b: Builders) -> None:
        assert PathExpression.guard(b.path("x"))
        assert not PathExpression.guard(b.string("x"))
        assert SubExpression.guard(b.sexpr("x"))
        assert MustacheStatement.guard(b.mustache("x"))
        assert not MustacheStatement.guard(b.sexpr("x"))


class TestPrinter:
    """Printing every node kind back to template source."""

    def test_mustache_with_params_and_hash(self, b: Builders) -> None:
        node = b.mustache(
            "input",
            hash=b.hash({"value": b.path("model.username"), "type": b.string("text")}),
        )

        assert print_template(node) == '{{input value=model.username type="text"}}'

    def test_trusting_mustache(self, b: Builders) -> None:
        assert print_template(b.mustache("html", trusting=True)) == "{{{html}}}"

    def test_sub_expression(self, b: Builders) -> None:
        node = b.sexpr("get", [b.path("model"), b.string("validations")])

        assert print_template(node) == '(get model "validations")'

    def test_literals(self, b: Builders) -> None:
        node = b.mustache(
            "h",
            [b.number(42), b.number(1.5), b.boolean(True), b.boolean(False), b.null(), b.undefined()],
        )

        assert print_template(node) == "{{h 42 1.5 true false null undefined}}"

    def test_string_escaping(self, b: Builders) -> None:
        assert print_template(b.string('say "hi"')) == '"say \\"hi\\""'
        assert print_template(b.string("naïve")) == '"naïve"'

    def test_block_with_inverse_and_block_params(self, b: Builders) -> None:
        node = b.block(
            "each",
            [b.path("model.errors")],
            program=b.block_body([b.mustache("error.message")], block_params=["error"]),
            inverse=[b.text("none")],
        )

        assert print_template(node) == (
            "{{#each model.errors as |error|}}{{error.message}}{{else}}none{{/each}}"
        )

    def test_element_with_attributes(self, b: Builders) -> None:
        node = b.element(
            "div",
            attrs=[
                b.attr("id", b.text("main")),
                b.attr("hidden", b.text("")),
                b.attr("title", b.mustache("t")),
                b.attr("class", b.concat([b.text("form-group "), b.mustache("cls")])),
            ],
            children=[b.text("hi")],
        )

        assert print_template(node) == (
            '<div id="main" hidden title={{t}} class="form-group {{cls}}">hi</div>'
        )

    def test_self_closing_element_with_modifier(self, b: Builders) -> None:
        node = b.element(
            "input",
            modifiers=[b.element_modifier("on", [b.string("input"), b.path("this.update")])],
            self_closing=True,
        )

        assert print_template(node) == '<input {{on "input" this.update}} />'

    def test_element_block_params(self, b: Builders) -> None:
        node = b.element("Form", block_params=["f"], children=[b.mustache("f.input")])

        assert print_template(node) == "<Form as |f|>{{f.input}}</Form>"

    def test_comments(self, b: Builders) -> None:
        template = b.template([b.comment(" html "), b.mustache_comment(" hbs ")])

        assert print_template(template) == "<!-- html -->{{!-- hbs --}}"

    def test_legacy_wrapper_printed_through(self) -> None:
        inner = SubExpression(path=PathExpression("v-get"), params=[PathExpression("model")])
        mustache = MustacheStatement(sexpr=inner)
        block = BlockStatement(sexpr=SubExpression(path=PathExpression("if"), params=[inner]))

        assert print_template(mustache) == "{{v-get model}}"
        assert print_template(block) == "{{#if (v-get model)}}{{/if}}"

    def test_call_without_path_rejected(self) -> None:
        with pytest.raises(PrintError, match="has no path"):
            print_template(MustacheStatement())

    def test_foreign_node_rejected(self, b: Builders) -> None:
        template = b.template()
        template.body.append(object())  # type: ignore[arg-type]

        with pytest.raises(PrintError, match="Cannot print object"):
            print_template(template)

    def test_hash_pair_printed_alone(self) -> None:
        pair = HashPair(key="k", value=StringLiteral("v"))

        assert print_template(pair) == 'k="v"'

    def test_printer_reusable(self, b: Builders) -> None:
        printer = TemplatePrinter()

        assert printer.print(b.path("a")) == "a"
        assert printer.print(b.path("b")) == "b"

    def test_depth_limit(self, b: Builders) -> None:
        node = b.sexpr("x")
        for _ in range(20):
            node = b.sexpr("x", [node])

        with pytest.raises(DepthLimitExceededError):
            TemplatePrinter(max_depth=10).print(node)
