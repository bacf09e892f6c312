"""Builders for Svelte ``parse()``-shaped dictionaries used across tests."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

Json = Dict[str, Any]


def ident(name: str) -> Json:
    return {"type": "Identifier", "name": name}


def literal(value: Any, raw: Optional[str] = None) -> Json:
    return {"type": "Literal", "value": value, "raw": raw if raw is not None else json.dumps(value)}


def text(data: str) -> Json:
    return {"type": "Text", "data": data}


def mustache(expression: Json) -> Json:
    return {"type": "MustacheTag", "expression": expression}


def raw_mustache(expression: Json) -> Json:
    return {"type": "RawMustacheTag", "expression": expression}


def attr(name: str, value: Any = True) -> Json:
    if isinstance(value, str):
        value = [text(value)]
    return {"type": "Attribute", "name": name, "value": value}


def shorthand(name: str) -> Json:
    return {"type": "AttributeShorthand", "expression": ident(name)}


def element(name: str, attributes: Sequence[Json] = (), children: Sequence[Json] = ()) -> Json:
    return {
        "type": "Element",
        "name": name,
        "attributes": list(attributes),
        "children": list(children),
    }


def fragment(*children: Json) -> Json:
    return {"type": "Fragment", "children": list(children)}


def slot(name: Optional[str] = None, children: Sequence[Json] = ()) -> Json:
    attributes = [attr("name", name)] if name is not None else []
    return {"type": "Slot", "name": "slot", "attributes": attributes, "children": list(children)}


def component(name: str, attributes: Sequence[Json] = (), children: Sequence[Json] = ()) -> Json:
    return {
        "type": "InlineComponent",
        "name": name,
        "attributes": list(attributes),
        "children": list(children),
    }


def if_block(expression: Json, children: Sequence[Json] = ()) -> Json:
    return {"type": "IfBlock", "expression": expression, "children": list(children)}


def each_block(
    expression: Json,
    context: Json,
    children: Sequence[Json] = (),
    index: Optional[str] = None,
) -> Json:
    node: Json = {
        "type": "EachBlock",
        "expression": expression,
        "context": context,
        "children": list(children),
    }
    if index is not None:
        node["index"] = index
    return node


def binary(operator: str, left: Json, right: Json) -> Json:
    return {"type": "BinaryExpression", "operator": operator, "left": left, "right": right}


def logical(operator: str, left: Json, right: Json) -> Json:
    return {"type": "LogicalExpression", "operator": operator, "left": left, "right": right}


def conditional(test: Json, consequent: Json, alternate: Json) -> Json:
    return {
        "type": "ConditionalExpression",
        "test": test,
        "consequent": consequent,
        "alternate": alternate,
    }


def unary(operator: str, argument: Json) -> Json:
    return {"type": "UnaryExpression", "operator": operator, "argument": argument, "prefix": True}


def member(obj: Json, prop: Json, computed: bool = False) -> Json:
    return {"type": "MemberExpression", "object": obj, "property": prop, "computed": computed}


def call(callee: Json, *arguments: Json) -> Json:
    return {"type": "CallExpression", "callee": callee, "arguments": list(arguments)}


def array(*elements: Json) -> Json:
    return {"type": "ArrayExpression", "elements": list(elements)}


def array_pattern(*names: str) -> Json:
    return {"type": "ArrayPattern", "elements": [ident(name) for name in names]}


def object_pattern(*names: str) -> Json:
    return {
        "type": "ObjectPattern",
        "properties": [prop(ident(name), ident(name), shorthand=True) for name in names],
    }


def prop(key: Json, value: Json, shorthand: bool = False) -> Json:
    return {"type": "Property", "key": key, "value": value, "shorthand": shorthand, "kind": "init"}


def spread(argument: Json) -> Json:
    return {"type": "SpreadElement", "argument": argument}


def obj(*properties: Json) -> Json:
    return {"type": "ObjectExpression", "properties": list(properties)}


def quasi(raw: str, start: Optional[int] = None) -> Json:
    node: Json = {"type": "TemplateElement", "value": {"raw": raw, "cooked": raw}}
    if start is not None:
        node["start"] = start
        node["end"] = start + len(raw)
    return node


def template_literal(quasis: List[Json], expressions: List[Json]) -> Json:
    return {"type": "TemplateLiteral", "quasis": quasis, "expressions": expressions}


def with_offsets(node: Json, start: int, end: int) -> Json:
    return {**node, "start": start, "end": end}


def declarator(name: str, init: Optional[Json] = None) -> Json:
    return {"type": "VariableDeclarator", "id": ident(name), "init": init}


def let(name: str, init: Optional[Json] = None, kind: str = "let") -> Json:
    return {"type": "VariableDeclaration", "kind": kind, "declarations": [declarator(name, init)]}


def export_let(name: str, init: Optional[Json] = None) -> Json:
    return {"type": "ExportNamedDeclaration", "declaration": let(name, init), "specifiers": []}


def reactive(name: str, value: Json, label: str = "$") -> Json:
    return {
        "type": "LabeledStatement",
        "label": ident(label),
        "body": {
            "type": "ExpressionStatement",
            "expression": {
                "type": "AssignmentExpression",
                "operator": "=",
                "left": ident(name),
                "right": value,
            },
        },
    }


def component_ast(html: Json, *statements: Json) -> Json:
    root: Json = {"html": html, "css": None, "instance": None, "module": None}
    if statements:
        root["instance"] = {
            "type": "Script",
            "context": "default",
            "content": {"type": "Program", "sourceType": "module", "body": list(statements)},
        }
    return root
