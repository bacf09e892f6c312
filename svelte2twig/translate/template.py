"""Template-mode translation: Svelte markup and control flow to Twig text."""

from __future__ import annotations

from typing import Optional

from ..ast.nodes import (
    ArrayExpression,
    ArrayPattern,
    Attribute,
    AttributeShorthand,
    BinaryExpression,
    CallExpression,
    ConditionalExpression,
    EachBlock,
    Element,
    Fragment,
    Identifier,
    IfBlock,
    InlineComponent,
    Literal,
    LogicalExpression,
    MemberExpression,
    MustacheTag,
    Node,
    ObjectExpression,
    ObjectPattern,
    RawMustacheTag,
    Slot,
    TemplateElement,
    TemplateLiteral,
    Text,
    UnaryExpression,
)
from ..config import TranslationOptions
from ..diagnostics import SLOT_UNNAMED, DiagnosticSink
from .base import TERNARY_PRECEDENCE, Translator, binary_operator, operator_precedence
from .errors import UnsupportedConstructFault
from .naming import component_identifier, is_self_closing, loop_item_name, slot_name
from .value import ValueTranslator

_LOGICAL_KEYWORDS = {"&&": "and", "||": "or", "??": "??"}


class TemplateTranslator(Translator):
    """Renders render-tree nodes as Twig markup, delegating value contexts to ``values``."""

    logical_precedence = {
        operator: operator_precedence(keyword) for operator, keyword in _LOGICAL_KEYWORDS.items()
    }

    def __init__(
        self,
        options: TranslationOptions,
        diagnostics: Optional[DiagnosticSink] = None,
        *,
        values: Optional[ValueTranslator] = None,
    ) -> None:
        super().__init__(options, diagnostics)
        self.values = (
            values
            if values is not None
            else ValueTranslator(options, self.diagnostics, markup=self)
        )

    # -- markup ------------------------------------------------------------

    def visit_Fragment(self, node: Fragment) -> str:
        return self.translate_all(node.children)

    def visit_Text(self, node: Text) -> str:
        return node.data

    def visit_Element(self, node: Element) -> str:
        attributes = self.translate_nonempty(node.attributes, " ")
        opening = f"{node.name} {attributes}" if attributes else node.name
        if is_self_closing(node.name):
            return f"<{opening} />"
        return f"<{opening}>{self.translate_all(node.children)}</{node.name}>"

    def visit_Attribute(self, node: Attribute) -> str:
        if node.value is True:
            return node.name
        return f'{node.name}="{self.translate_all(node.value)}"'

    def visit_AttributeShorthand(self, node: AttributeShorthand) -> str:
        return f"{{{{ {self.translate(node.expression)} }}}}"

    def visit_MustacheTag(self, node: MustacheTag) -> str:
        if isinstance(node.expression, TemplateLiteral):
            return self.translate(node.expression)
        return f"{{{{ {self.translate(node.expression)} }}}}"

    def visit_RawMustacheTag(self, node: RawMustacheTag) -> str:
        return f"{{{{ {self.translate(node.expression)}|raw }}}}"

    # -- control flow ------------------------------------------------------

    def visit_IfBlock(self, node: IfBlock) -> str:
        condition = self.translate(node.expression)
        return f"{{% if {condition} %}}{self.translate_all(node.children)}{{% endif %}}"

    def visit_EachBlock(self, node: EachBlock) -> str:
        iterable = self.translate(node.expression)
        if isinstance(node.context, ArrayPattern):
            binding = self.translate(node.context)
        else:
            # Object patterns and bare identifiers collapse onto one synthesised name.
            binding = loop_item_name(iterable)
        body = self.translate_all(node.children)
        if node.index:
            body = f"{{% set {node.index} = loop.index0 %}}{body}"
        return f"{{% for {binding} in {iterable} %}}{body}{{% endfor %}}"

    def visit_Slot(self, node: Slot) -> str:
        name = slot_name(node)
        if name is None:
            name = self.options.default_slot_name
            self.diagnostics.warning(
                SLOT_UNNAMED,
                "The component has an unnamed slot which Twig cannot express. "
                f'Using the default slot name "{name}" as a fallback; '
                "set a name on the slot to avoid clashes in component.yml.",
                node.kind,
            )
        return f"{{% block {name} %}}{self.translate_all(node.children)}{{% endblock %}}"

    def visit_InlineComponent(self, node: InlineComponent) -> str:
        identifier = component_identifier(self.options.theme, node.name)
        arguments = self.values.translate_nonempty(node.attributes, ", ")
        if not node.children:
            return f"{{{{ include('{identifier}', {{{arguments}}}, with_context = false) }}}}"
        block = self.options.default_slot_name
        children = self.translate_all(node.children)
        return (
            f'{{% embed "{identifier}" with {{{arguments}}} only %}}'
            f"{{% block {block} %}}{children}{{% endblock %}}"
            "{% endembed %}"
        )

    # -- expressions -------------------------------------------------------

    def visit_Identifier(self, node: Identifier) -> str:
        return node.name

    def visit_Literal(self, node: Literal) -> str:
        return node.raw

    def visit_MemberExpression(self, node: MemberExpression) -> str:
        target = self.translate(node.object)
        if node.computed:
            return f"{target}[{self.translate(node.property)}]"
        return f"{target}.{self.translate(node.property)}"

    def visit_BinaryExpression(self, node: BinaryExpression) -> str:
        return self.binary(node.left, binary_operator(node.operator), node.right)

    def visit_LogicalExpression(self, node: LogicalExpression) -> str:
        keyword = _LOGICAL_KEYWORDS.get(node.operator)
        if keyword is None:
            raise UnsupportedConstructFault(node.operator)
        return self.binary(node.left, keyword, node.right)

    def visit_ConditionalExpression(self, node: ConditionalExpression) -> str:
        branch = TERNARY_PRECEDENCE + 1
        return (
            f"{self.operand(node.test, branch)} ? {self.values.operand(node.consequent, branch)}"
            f" : {self.values.operand(node.alternate, branch)}"
        )

    def visit_UnaryExpression(self, node: UnaryExpression) -> str:
        argument = self.operand(node.argument)
        if node.operator == "!":
            return f"not {argument}"
        if node.operator in {"-", "+"}:
            return f"{node.operator}{argument}"
        raise UnsupportedConstructFault(node.operator)

    def visit_CallExpression(self, node: CallExpression) -> str:
        if _is_object_entries(node.callee):
            # Twig loops iterate key/value pairs of a mapping natively.
            return self.translate_all(node.arguments, ", ")
        return f"{self.translate(node.callee)}({self.translate_all(node.arguments, ', ')})"

    def visit_ArrayPattern(self, node: ArrayPattern) -> str:
        return self.translate_all(node.elements, ", ")

    def visit_ObjectPattern(self, node: ObjectPattern) -> str:
        raise UnsupportedConstructFault("object destructuring")

    def visit_ArrayExpression(self, node: ArrayExpression) -> str:
        return self.values.translate(node)

    def visit_ObjectExpression(self, node: ObjectExpression) -> str:
        return self.values.translate(node)

    def visit_TemplateElement(self, node: TemplateElement) -> str:
        return node.raw

    def visit_TemplateLiteral(self, node: TemplateLiteral) -> str:
        if not node.expressions:
            return self.translate_all(node.segments)
        fragments = []
        for segment in node.segments:
            if isinstance(segment, TemplateElement):
                fragments.append(segment.raw)
            elif isinstance(segment, LogicalExpression) and segment.operator == "||":
                fragments.append(f"{{{{ {self.values.translate(segment)} }}}}")
            else:
                fragments.append(f"{{{{ {self.translate(segment)} }}}}")
        return "".join(fragment for fragment in fragments if fragment)


def _is_object_entries(callee: Node) -> bool:
    return (
        isinstance(callee, MemberExpression)
        and not callee.computed
        and isinstance(callee.object, Identifier)
        and callee.object.name == "Object"
        and isinstance(callee.property, Identifier)
        and callee.property.name == "entries"
    )


__all__ = ["TemplateTranslator"]
