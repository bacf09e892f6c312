"""Prop, slot and set-statement inference."""

from __future__ import annotations

from svelte2twig.ast.loader import load_component_ast
from svelte2twig.config import TranslationOptions
from svelte2twig.context import ComponentContextBuilder, component_name_from_path
from svelte2twig.diagnostics import PROP_UNRECOGNIZED, SLOT_DUPLICATE, SLOT_DYNAMIC, DiagnosticSink
from svelte2twig.models import PropSpec
from tests._fixtures.svelte_ast import (
    array,
    attr,
    binary,
    call,
    component_ast,
    element,
    export_let,
    fragment,
    ident,
    if_block,
    let,
    literal,
    mustache,
    obj,
    reactive,
    slot,
    text,
    with_offsets,
)


def _builder(sink: DiagnosticSink | None = None) -> ComponentContextBuilder:
    return ComponentContextBuilder(TranslationOptions(theme="mytheme"), sink)


def test_props_are_inferred_from_exported_lets() -> None:
    ast = load_component_ast(
        component_ast(
            fragment(),
            export_let("count", literal(0)),
            export_let("label", literal("Hi")),
            export_let("open", literal(False)),
            export_let("items", array(literal(1), literal(2))),
            export_let("config", obj()),
            export_let("title"),
            let("internal", literal(3)),
        )
    )
    props = _builder().infer_props(ast)
    assert props == {
        "count": PropSpec(type="number", default=0),
        "label": PropSpec(type="string", default="Hi"),
        "open": PropSpec(type="boolean", default=False),
        "items": PropSpec(type="array", default="[1, 2]"),
        "config": PropSpec(type="object"),
        "title": PropSpec(type="string"),
    }
    assert list(props) == ["count", "label", "open", "items", "config", "title"]


def test_props_are_absent_without_exports() -> None:
    builder = _builder()
    assert builder.infer_props(load_component_ast(component_ast(fragment()))) is None
    only_locals = component_ast(fragment(), let("x", literal(1)))
    assert builder.infer_props(load_component_ast(only_locals)) is None


def test_unrecognised_initializer_falls_back_to_source_text() -> None:
    source = "export let id = uid();"
    init = with_offsets(call(ident("uid")), source.index("uid"), source.index(";"))
    ast = load_component_ast(component_ast(fragment(), export_let("id", init)), source=source)
    sink = DiagnosticSink()

    props = _builder(sink).infer_props(ast)

    assert props == {"id": PropSpec(type="string", default="uid()")}
    assert len(sink.by_code(PROP_UNRECOGNIZED)) == 1


def test_slots_are_listed_in_document_order_with_duplicates() -> None:
    html = fragment(
        slot("header"),
        element("div", [], [slot(), if_block(ident("more"), [slot("header")])]),
    )
    sink = DiagnosticSink()

    slots = _builder(sink).collect_slots(load_component_ast(component_ast(html)).html)

    assert slots == ["header", "content", "header"]
    assert len(sink.by_code(SLOT_DUPLICATE)) == 1


def test_dynamic_slot_names_are_skipped() -> None:
    dynamic = {"type": "Slot", "attributes": [attr("name", [mustache(ident("n"))])], "children": []}
    sink = DiagnosticSink()

    ast = load_component_ast(component_ast(fragment(dynamic, slot("footer"))))
    slots = _builder(sink).collect_slots(ast.html)

    assert slots == ["footer"]
    assert len(sink.by_code(SLOT_DYNAMIC)) == 1


def test_set_statements_come_from_reactive_assignments_and_locals() -> None:
    ast = load_component_ast(
        component_ast(
            fragment(),
            export_let("variant", literal("primary")),
            reactive("classes", binary("+", literal("btn-"), ident("variant"))),
            let("size", literal("md"), kind="const"),
            reactive("size", literal("lg")),
        )
    )
    statements = _builder().collect_set_statements(ast.instance)
    assert statements == {"classes": '"btn-" + variant', "size": '"lg"'}


def test_only_reactive_labels_become_set_statements() -> None:
    ast = load_component_ast(
        component_ast(
            fragment(),
            reactive("total", literal(1), label="outer"),
            reactive("count", literal(2)),
        )
    )
    assert _builder().collect_set_statements(ast.instance) == {"count": "2"}


def test_build_prefers_override_name() -> None:
    ast = load_component_ast(component_ast(fragment(text("x"))))
    builder = _builder()

    assert builder.build(ast, "components/card/Card.svelte").name == "Card"
    context = builder.build(ast, "components/card/Card.svelte", {"name": "Fancy card"})
    assert context.name == "Fancy card"
    assert context.component == {"name": "Fancy card"}


def test_component_name_from_path() -> None:
    assert component_name_from_path("a/b/Button.svelte") == "Button"
    assert component_name_from_path("Button.svelte.json") == "Button"
    assert component_name_from_path("notes.txt") == "notes"
