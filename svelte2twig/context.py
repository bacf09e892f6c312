"""Infer a component's props, slots and set statements from its AST."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .ast.nodes import (
    ArrayExpression,
    AssignmentExpression,
    ComponentAst,
    ExportNamedDeclaration,
    ExpressionStatement,
    Fragment,
    Identifier,
    LabeledStatement,
    Literal,
    Node,
    ObjectExpression,
    Program,
    Slot,
    VariableDeclaration,
    VariableDeclarator,
    walk,
)
from .config import TranslationOptions
from .diagnostics import PROP_UNRECOGNIZED, SLOT_DUPLICATE, SLOT_DYNAMIC, DiagnosticSink
from .models import ComponentContext, PropSpec
from .translate.errors import NodeTranslationFault
from .translate.naming import slot_name
from .translate.value import ValueTranslator

_COMPONENT_SUFFIXES = (".svelte.json", ".svelte")
REACTIVE_LABEL = "$"


def component_name_from_path(path: Path | str) -> str:
    """Return the component name implied by a ``.svelte`` (or AST dump) file name."""
    filename = Path(path).name
    for suffix in _COMPONENT_SUFFIXES:
        if filename.endswith(suffix) and len(filename) > len(suffix):
            return filename[: -len(suffix)]
    return Path(filename).stem


class ComponentContextBuilder:
    """Builds a ComponentContext from a parsed component and its optional override document."""

    def __init__(
        self,
        options: TranslationOptions,
        diagnostics: Optional[DiagnosticSink] = None,
        values: Optional[ValueTranslator] = None,
    ) -> None:
        self.options = options
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticSink()
        self.values = values if values is not None else ValueTranslator(options, self.diagnostics)

    def build(
        self,
        ast: ComponentAst,
        path: Path | str,
        override: Mapping[str, Any] | None = None,
    ) -> ComponentContext:
        component = dict(override or {})
        name = component.get("name")
        if not isinstance(name, str) or not name.strip():
            name = component_name_from_path(path)

        return ComponentContext(
            name=name,
            props=self.infer_props(ast),
            slots=self.collect_slots(ast.html),
            set_statements=self.collect_set_statements(ast.instance),
            component=component,
        )

    # -- props -------------------------------------------------------------

    def infer_props(self, ast: ComponentAst) -> Optional[Dict[str, PropSpec]]:
        """Infer props from exported ``let``/``const`` declarations; None when nothing is exported."""
        if ast.instance is None:
            return None
        props: Optional[Dict[str, PropSpec]] = None
        for statement in ast.instance.body:
            if not isinstance(statement, ExportNamedDeclaration):
                continue
            declaration = statement.declaration
            if not isinstance(declaration, VariableDeclaration):
                continue
            for declarator in declaration.declarations:
                if not isinstance(declarator.id, Identifier):
                    continue
                if props is None:
                    props = {}
                props[declarator.id.name] = self._infer_prop(declarator, ast)
        return props

    def _infer_prop(self, declarator: VariableDeclarator, ast: ComponentAst) -> PropSpec:
        init = declarator.init
        if init is None:
            return PropSpec(type="string")
        if isinstance(init, ArrayExpression):
            items = ", ".join(self._element_text(element, ast) for element in init.elements)
            return PropSpec(type="array", default=f"[{items}]")
        if isinstance(init, Literal):
            return _literal_prop(init)
        if isinstance(init, ObjectExpression):
            return PropSpec(type="object")

        name = declarator.id.name if isinstance(declarator.id, Identifier) else "?"
        self.diagnostics.info(
            PROP_UNRECOGNIZED,
            f"Prop '{name}' has an initializer of kind {init.kind}; treating it as a string.",
            init.kind,
        )
        return PropSpec(type="string", default=ast.source_text(init))

    def _element_text(self, element: Node, ast: ComponentAst) -> str:
        if isinstance(element, Literal):
            return element.raw
        source = ast.source_text(element)
        if source is not None:
            return source
        return self.values.translate(element)

    # -- slots -------------------------------------------------------------

    def collect_slots(self, html: Fragment) -> List[str]:
        """Return every slot identifier in document order, one entry per occurrence."""
        slots: List[str] = []
        for node in walk(html):
            if not isinstance(node, Slot):
                continue
            try:
                name = slot_name(node)
            except NodeTranslationFault as exc:
                self.diagnostics.warning(
                    SLOT_DYNAMIC, f"Skipping slot with a dynamic name: {exc}", node.kind
                )
                continue
            slots.append(name or self.options.default_slot_name)

        seen: set[str] = set()
        for name in slots:
            if name in seen:
                self.diagnostics.warning(
                    SLOT_DUPLICATE,
                    f'Slot "{name}" is declared more than once; component.yml lists it once.',
                    "Slot",
                )
            seen.add(name)
        return slots

    # -- set statements ----------------------------------------------------

    def collect_set_statements(self, program: Optional[Program]) -> Dict[str, str]:
        """Map reactive assignments and local declarations onto Twig ``set`` values."""
        statements: Dict[str, str] = {}
        if program is None:
            return statements
        for statement in program.body:
            if isinstance(statement, LabeledStatement):
                body = statement.body
                if statement.label != REACTIVE_LABEL or not isinstance(body, ExpressionStatement):
                    continue
                expression = body.expression
                if (
                    isinstance(expression, AssignmentExpression)
                    and expression.operator == "="
                    and isinstance(expression.left, Identifier)
                ):
                    statements[expression.left.name] = self.values.translate(expression.right)
            elif isinstance(statement, VariableDeclaration):
                for declarator in statement.declarations:
                    if isinstance(declarator.id, Identifier) and declarator.init is not None:
                        statements[declarator.id.name] = self.values.translate(declarator.init)
        return statements


def _literal_prop(init: Literal) -> PropSpec:
    value = init.value
    # bool is an int subclass, so it must be checked first.
    if isinstance(value, bool):
        return PropSpec(type="boolean", default=value)
    if isinstance(value, (int, float)):
        return PropSpec(type="number", default=value)
    if isinstance(value, str):
        return PropSpec(type="string", default=value)
    return PropSpec(type="string", default=init.raw)


__all__ = ["ComponentContextBuilder", "component_name_from_path"]
