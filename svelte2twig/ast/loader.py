"""Build the immutable node model from Svelte's JSON AST."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .nodes import (
    ArrayExpression,
    ArrayPattern,
    AssignmentExpression,
    Attribute,
    AttributeShorthand,
    BinaryExpression,
    CallExpression,
    ComponentAst,
    ConditionalExpression,
    EachBlock,
    Element,
    ExportNamedDeclaration,
    ExpressionStatement,
    Fragment,
    Identifier,
    IfBlock,
    InlineComponent,
    LabeledStatement,
    Literal,
    LogicalExpression,
    MemberExpression,
    MustacheTag,
    Node,
    ObjectExpression,
    ObjectPattern,
    Program,
    Property,
    RawMustacheTag,
    Slot,
    SpreadElement,
    TemplateElement,
    TemplateLiteral,
    Text,
    UnaryExpression,
    UnknownNode,
    VariableDeclaration,
    VariableDeclarator,
)

Builder = Callable[[Mapping[str, Any]], Node]


def build_node(data: Any) -> Node:
    """Convert one JSON AST node into its node class."""
    if not isinstance(data, Mapping):
        return UnknownNode(type_name=type(data).__name__)
    type_name = str(data.get("type", ""))
    builder = _BUILDERS.get(type_name)
    if builder is None:
        return UnknownNode(type_name=type_name or "?", **_offsets(data))
    return builder(data)


def load_component_ast(data: Mapping[str, Any], source: Optional[str] = None) -> ComponentAst:
    """Convert the root object returned by Svelte's ``parse()``."""
    html_data = data.get("html")
    html = build_node(html_data) if html_data else Fragment()
    if not isinstance(html, Fragment):
        html = Fragment(children=(html,))

    instance = None
    instance_data = data.get("instance")
    if isinstance(instance_data, Mapping):
        content = instance_data.get("content")
        if isinstance(content, Mapping):
            program = build_node(content)
            if isinstance(program, Program):
                instance = program

    return ComponentAst(html=html, instance=instance, source=source)


def read_ast_file(path: Path) -> Dict[str, Any]:
    """Read a serialised Svelte AST from disk."""
    return json.loads(path.read_text(encoding="utf-8"))


def _offsets(data: Mapping[str, Any]) -> Dict[str, Optional[int]]:
    start = data.get("start")
    end = data.get("end")
    return {
        "start": start if isinstance(start, int) else None,
        "end": end if isinstance(end, int) else None,
    }


def _nodes(values: Any) -> Tuple[Node, ...]:
    if not isinstance(values, list):
        return ()
    # Array holes (``[a, , b]``) come through as null.
    return tuple(build_node(value) for value in values if value is not None)


def _optional(value: Any) -> Optional[Node]:
    return build_node(value) if value is not None else None


def _fragment(data: Mapping[str, Any]) -> Node:
    return Fragment(children=_nodes(data.get("children")), **_offsets(data))


def _element(data: Mapping[str, Any]) -> Node:
    return Element(
        name=str(data.get("name", "")),
        attributes=_nodes(data.get("attributes")),
        children=_nodes(data.get("children")),
        **_offsets(data),
    )


def _attribute(data: Mapping[str, Any]) -> Node:
    value = data.get("value", True)
    parts: Any = True if value is True else _nodes(value)
    return Attribute(name=str(data.get("name", "")), value=parts, **_offsets(data))


def _attribute_shorthand(data: Mapping[str, Any]) -> Node:
    return AttributeShorthand(expression=build_node(data.get("expression")), **_offsets(data))


def _text(data: Mapping[str, Any]) -> Node:
    return Text(data=str(data.get("data", "")), **_offsets(data))


def _mustache(data: Mapping[str, Any]) -> Node:
    return MustacheTag(expression=build_node(data.get("expression")), **_offsets(data))


def _raw_mustache(data: Mapping[str, Any]) -> Node:
    return RawMustacheTag(expression=build_node(data.get("expression")), **_offsets(data))


def _if_block(data: Mapping[str, Any]) -> Node:
    return IfBlock(
        expression=build_node(data.get("expression")),
        children=_nodes(data.get("children")),
        **_offsets(data),
    )


def _each_block(data: Mapping[str, Any]) -> Node:
    index = data.get("index")
    return EachBlock(
        expression=build_node(data.get("expression")),
        context=build_node(data.get("context")),
        children=_nodes(data.get("children")),
        index=str(index) if isinstance(index, str) and index else None,
        **_offsets(data),
    )


def _inline_component(data: Mapping[str, Any]) -> Node:
    return InlineComponent(
        name=str(data.get("name", "")),
        attributes=_nodes(data.get("attributes")),
        children=_nodes(data.get("children")),
        **_offsets(data),
    )


def _slot(data: Mapping[str, Any]) -> Node:
    return Slot(
        attributes=_nodes(data.get("attributes")),
        children=_nodes(data.get("children")),
        **_offsets(data),
    )


def _identifier(data: Mapping[str, Any]) -> Node:
    return Identifier(name=str(data.get("name", "")), **_offsets(data))


def _literal(data: Mapping[str, Any]) -> Node:
    value = data.get("value")
    raw = data.get("raw")
    if not isinstance(raw, str):
        raw = json.dumps(value)
    return Literal(value=value, raw=raw, **_offsets(data))


def _binary(data: Mapping[str, Any]) -> Node:
    return BinaryExpression(
        operator=str(data.get("operator", "")),
        left=build_node(data.get("left")),
        right=build_node(data.get("right")),
        **_offsets(data),
    )


def _logical(data: Mapping[str, Any]) -> Node:
    return LogicalExpression(
        operator=str(data.get("operator", "")),
        left=build_node(data.get("left")),
        right=build_node(data.get("right")),
        **_offsets(data),
    )


def _conditional(data: Mapping[str, Any]) -> Node:
    return ConditionalExpression(
        test=build_node(data.get("test")),
        consequent=build_node(data.get("consequent")),
        alternate=build_node(data.get("alternate")),
        **_offsets(data),
    )


def _unary(data: Mapping[str, Any]) -> Node:
    return UnaryExpression(
        operator=str(data.get("operator", "")),
        argument=build_node(data.get("argument")),
        **_offsets(data),
    )


def _call(data: Mapping[str, Any]) -> Node:
    return CallExpression(
        callee=build_node(data.get("callee")),
        arguments=_nodes(data.get("arguments")),
        **_offsets(data),
    )


def _member(data: Mapping[str, Any]) -> Node:
    return MemberExpression(
        object=build_node(data.get("object")),
        property=build_node(data.get("property")),
        computed=bool(data.get("computed", False)),
        **_offsets(data),
    )


def _array_expression(data: Mapping[str, Any]) -> Node:
    return ArrayExpression(elements=_nodes(data.get("elements")), **_offsets(data))


def _array_pattern(data: Mapping[str, Any]) -> Node:
    return ArrayPattern(elements=_nodes(data.get("elements")), **_offsets(data))


def _object_pattern(data: Mapping[str, Any]) -> Node:
    return ObjectPattern(properties=_nodes(data.get("properties")), **_offsets(data))


def _object_expression(data: Mapping[str, Any]) -> Node:
    return ObjectExpression(properties=_nodes(data.get("properties")), **_offsets(data))


def _property(data: Mapping[str, Any]) -> Node:
    return Property(
        key=build_node(data.get("key")),
        value=build_node(data.get("value")),
        **_offsets(data),
    )


def _spread(data: Mapping[str, Any]) -> Node:
    return SpreadElement(argument=build_node(data.get("argument")), **_offsets(data))


def _template_element(data: Mapping[str, Any]) -> Node:
    value = data.get("value") or {}
    raw = value.get("raw") if isinstance(value, Mapping) else None
    cooked = value.get("cooked") if isinstance(value, Mapping) else None
    return TemplateElement(
        raw=str(raw or ""),
        cooked=cooked if isinstance(cooked, str) else None,
        **_offsets(data),
    )


def _template_literal(data: Mapping[str, Any]) -> Node:
    quasis = [build_node(item) for item in data.get("quasis") or [] if item is not None]
    expressions = [build_node(item) for item in data.get("expressions") or [] if item is not None]
    return TemplateLiteral(segments=_interleave(quasis, expressions), **_offsets(data))


def _interleave(quasis: List[Node], expressions: List[Node]) -> Tuple[Node, ...]:
    segments = [*quasis, *expressions]
    if all(segment.start is not None for segment in segments):
        return tuple(sorted(segments, key=lambda segment: segment.start))
    # Without offsets fall back to the positional quasi/expression alternation.
    ordered: List[Node] = []
    for position, quasi in enumerate(quasis):
        ordered.append(quasi)
        if position < len(expressions):
            ordered.append(expressions[position])
    ordered.extend(expressions[len(quasis) :])
    return tuple(ordered)


def _assignment(data: Mapping[str, Any]) -> Node:
    return AssignmentExpression(
        operator=str(data.get("operator", "")),
        left=build_node(data.get("left")),
        right=build_node(data.get("right")),
        **_offsets(data),
    )


def _variable_declarator(data: Mapping[str, Any]) -> Node:
    return VariableDeclarator(
        id=build_node(data.get("id")),
        init=_optional(data.get("init")),
        **_offsets(data),
    )


def _variable_declaration(data: Mapping[str, Any]) -> Node:
    declarations = tuple(
        node
        for node in _nodes(data.get("declarations"))
        if isinstance(node, VariableDeclarator)
    )
    return VariableDeclaration(declarations=declarations, **_offsets(data))


def _export_named(data: Mapping[str, Any]) -> Node:
    return ExportNamedDeclaration(declaration=_optional(data.get("declaration")), **_offsets(data))


def _expression_statement(data: Mapping[str, Any]) -> Node:
    return ExpressionStatement(expression=build_node(data.get("expression")), **_offsets(data))


def _labeled(data: Mapping[str, Any]) -> Node:
    label = data.get("label")
    label_name = label.get("name") if isinstance(label, Mapping) else None
    return LabeledStatement(
        label=str(label_name or ""),
        body=build_node(data.get("body")),
        **_offsets(data),
    )


def _program(data: Mapping[str, Any]) -> Node:
    return Program(body=_nodes(data.get("body")), **_offsets(data))


_BUILDERS: Dict[str, Builder] = {
    "Fragment": _fragment,
    "Element": _element,
    "Attribute": _attribute,
    "AttributeShorthand": _attribute_shorthand,
    "Text": _text,
    "MustacheTag": _mustache,
    "RawMustacheTag": _raw_mustache,
    "IfBlock": _if_block,
    "EachBlock": _each_block,
    "InlineComponent": _inline_component,
    "Slot": _slot,
    "Identifier": _identifier,
    "Literal": _literal,
    "BinaryExpression": _binary,
    "LogicalExpression": _logical,
    "ConditionalExpression": _conditional,
    "UnaryExpression": _unary,
    "CallExpression": _call,
    "MemberExpression": _member,
    "ArrayExpression": _array_expression,
    "ArrayPattern": _array_pattern,
    "ObjectPattern": _object_pattern,
    "ObjectExpression": _object_expression,
    "Property": _property,
    "SpreadElement": _spread,
    "TemplateElement": _template_element,
    "TemplateLiteral": _template_literal,
    "AssignmentExpression": _assignment,
    "VariableDeclarator": _variable_declarator,
    "VariableDeclaration": _variable_declaration,
    "ExportNamedDeclaration": _export_named,
    "ExpressionStatement": _expression_statement,
    "LabeledStatement": _labeled,
    "Program": _program,
}


__all__ = ["build_node", "load_component_ast", "read_ast_file"]
