"""Immutable node model for parsed Svelte components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Tuple, Union


@dataclass(frozen=True)
class Node:
    """Base class for every parsed construct."""

    start: Optional[int] = field(default=None, kw_only=True, compare=False)
    end: Optional[int] = field(default=None, kw_only=True, compare=False)

    @property
    def kind(self) -> str:
        return type(self).__name__


class TemplateNode(Node):
    """Markup and control-flow constructs of the render tree."""


class Expression(Node):
    """Script expressions and patterns embedded in markup or declarations."""


class Statement(Node):
    """Top-level script statements of the component instance."""


@dataclass(frozen=True)
class UnknownNode(Node):
    """Placeholder for node kinds outside the supported grammar."""

    type_name: str


# -- template nodes ---------------------------------------------------------


@dataclass(frozen=True)
class Fragment(TemplateNode):
    children: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class Element(TemplateNode):
    name: str
    attributes: Tuple[Node, ...] = ()
    children: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class Attribute(TemplateNode):
    """An attribute; ``value`` is ``True`` for boolean attributes, otherwise its parts."""

    name: str
    value: Union[bool, Tuple[Node, ...]] = True


@dataclass(frozen=True)
class AttributeShorthand(TemplateNode):
    expression: Expression


@dataclass(frozen=True)
class Text(TemplateNode):
    data: str


@dataclass(frozen=True)
class MustacheTag(TemplateNode):
    expression: Node


@dataclass(frozen=True)
class RawMustacheTag(TemplateNode):
    expression: Node


@dataclass(frozen=True)
class IfBlock(TemplateNode):
    expression: Node
    children: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class EachBlock(TemplateNode):
    expression: Node
    context: Node
    children: Tuple[Node, ...] = ()
    index: Optional[str] = None


@dataclass(frozen=True)
class InlineComponent(TemplateNode):
    name: str
    attributes: Tuple[Node, ...] = ()
    children: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class Slot(TemplateNode):
    attributes: Tuple[Node, ...] = ()
    children: Tuple[Node, ...] = ()


# -- expression nodes -------------------------------------------------------


@dataclass(frozen=True)
class Identifier(Expression):
    name: str


@dataclass(frozen=True)
class Literal(Expression):
    value: Any
    raw: str


@dataclass(frozen=True)
class BinaryExpression(Expression):
    operator: str
    left: Node
    right: Node


@dataclass(frozen=True)
class LogicalExpression(Expression):
    operator: str
    left: Node
    right: Node


@dataclass(frozen=True)
class ConditionalExpression(Expression):
    test: Node
    consequent: Node
    alternate: Node


@dataclass(frozen=True)
class UnaryExpression(Expression):
    operator: str
    argument: Node


@dataclass(frozen=True)
class CallExpression(Expression):
    callee: Node
    arguments: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class MemberExpression(Expression):
    object: Node
    property: Node
    computed: bool = False


@dataclass(frozen=True)
class ArrayExpression(Expression):
    elements: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class ArrayPattern(Expression):
    elements: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class ObjectPattern(Expression):
    properties: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class ObjectExpression(Expression):
    properties: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class Property(Expression):
    key: Node
    value: Node


@dataclass(frozen=True)
class SpreadElement(Expression):
    argument: Node


@dataclass(frozen=True)
class TemplateElement(Expression):
    """Static text segment of a template literal."""

    raw: str
    cooked: Optional[str] = None


@dataclass(frozen=True)
class TemplateLiteral(Expression):
    """Template literal whose text and expression segments are kept in source order."""

    segments: Tuple[Node, ...] = ()

    @property
    def quasis(self) -> Tuple[TemplateElement, ...]:
        return tuple(seg for seg in self.segments if isinstance(seg, TemplateElement))

    @property
    def expressions(self) -> Tuple[Node, ...]:
        return tuple(seg for seg in self.segments if not isinstance(seg, TemplateElement))


@dataclass(frozen=True)
class AssignmentExpression(Expression):
    operator: str
    left: Node
    right: Node


# -- script statements ------------------------------------------------------


@dataclass(frozen=True)
class VariableDeclarator(Statement):
    id: Node
    init: Optional[Node] = None


@dataclass(frozen=True)
class VariableDeclaration(Statement):
    declarations: Tuple[VariableDeclarator, ...] = ()


@dataclass(frozen=True)
class ExportNamedDeclaration(Statement):
    declaration: Optional[Node] = None


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    expression: Node


@dataclass(frozen=True)
class LabeledStatement(Statement):
    label: str
    body: Node


@dataclass(frozen=True)
class Program(Statement):
    body: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class ComponentAst:
    """Root of one parsed component: render tree, instance script and optional source."""

    html: Fragment
    instance: Optional[Program] = None
    source: Optional[str] = None

    def source_text(self, node: Node) -> Optional[str]:
        """Return the source slice covered by ``node`` when offsets and source are known."""
        if self.source is None or node.start is None or node.end is None:
            return None
        return self.source[node.start : node.end]


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and its render-tree descendants depth-first, in document order."""
    yield node
    for child in getattr(node, "children", ()):
        yield from walk(child)


__all__ = [
    "ArrayExpression",
    "ArrayPattern",
    "AssignmentExpression",
    "Attribute",
    "AttributeShorthand",
    "BinaryExpression",
    "CallExpression",
    "ComponentAst",
    "ConditionalExpression",
    "EachBlock",
    "Element",
    "Expression",
    "ExportNamedDeclaration",
    "ExpressionStatement",
    "Fragment",
    "Identifier",
    "IfBlock",
    "InlineComponent",
    "LabeledStatement",
    "Literal",
    "LogicalExpression",
    "MemberExpression",
    "MustacheTag",
    "Node",
    "ObjectExpression",
    "ObjectPattern",
    "Program",
    "Property",
    "RawMustacheTag",
    "Slot",
    "SpreadElement",
    "Statement",
    "TemplateElement",
    "TemplateLiteral",
    "TemplateNode",
    "Text",
    "UnaryExpression",
    "UnknownNode",
    "VariableDeclaration",
    "VariableDeclarator",
    "walk",
]
