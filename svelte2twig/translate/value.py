"""Value-mode translation: expressions rendered as Twig inline literals.

Used wherever an expression is embedded as an argument, e.g. the hash passed
to an included component. Twig hash literals have no boolean ``and``/``or``,
so ``a && b`` becomes the guard ``a ? b`` and ``a || b`` the fallback
``a|default(b)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ..ast.nodes import (
    ArrayExpression,
    ArrayPattern,
    Attribute,
    AttributeShorthand,
    BinaryExpression,
    CallExpression,
    ConditionalExpression,
    Identifier,
    Literal,
    LogicalExpression,
    MemberExpression,
    MustacheTag,
    Node,
    ObjectExpression,
    ObjectPattern,
    Property,
    RawMustacheTag,
    SpreadElement,
    TemplateElement,
    TemplateLiteral,
    Text,
    UnaryExpression,
)
from ..config import TranslationOptions
from ..diagnostics import DiagnosticSink
from .base import TERNARY_PRECEDENCE, Translator, binary_operator, operator_precedence
from .errors import UnsupportedConstructFault
from .naming import hash_key, quote

if TYPE_CHECKING:  # pragma: no cover
    from .template import TemplateTranslator


class ValueTranslator(Translator):
    """Renders expression nodes as Twig values; markup-shaped pieces go through ``markup``."""

    mode = "object literal"
    logical_precedence = {"&&": TERNARY_PRECEDENCE, "||": None, "??": operator_precedence("??")}

    def __init__(
        self,
        options: TranslationOptions,
        diagnostics: Optional[DiagnosticSink] = None,
        *,
        markup: Optional["TemplateTranslator"] = None,
    ) -> None:
        super().__init__(options, diagnostics)
        if markup is None:
            from .template import TemplateTranslator

            markup = TemplateTranslator(options, self.diagnostics, values=self)
        self.markup = markup

    # -- attributes and text -----------------------------------------------

    def visit_Attribute(self, node: Attribute) -> str:
        if node.value is True:
            return f"{hash_key(node.name)}: true"
        return f"{hash_key(node.name)}: {self.concat(node.value)}"

    def visit_AttributeShorthand(self, node: AttributeShorthand) -> str:
        return self.translate(node.expression)

    def visit_Text(self, node: Text) -> str:
        return quote(node.data)

    def visit_MustacheTag(self, node: MustacheTag) -> str:
        return self.translate(node.expression)

    def visit_RawMustacheTag(self, node: RawMustacheTag) -> str:
        return self.translate(node.expression)

    # -- scalars and access ------------------------------------------------

    def visit_Identifier(self, node: Identifier) -> str:
        return node.name

    def visit_Literal(self, node: Literal) -> str:
        return node.raw

    def visit_MemberExpression(self, node: MemberExpression) -> str:
        target = self.translate(node.object)
        if node.computed:
            return f"{target}[{self.translate(node.property)}]"
        return f"{target}.{self.translate(node.property)}"

    def visit_CallExpression(self, node: CallExpression) -> str:
        return f"{self.translate(node.callee)}({self.translate_all(node.arguments, ', ')})"

    # -- operators ---------------------------------------------------------

    def visit_BinaryExpression(self, node: BinaryExpression) -> str:
        return self.binary(node.left, binary_operator(node.operator), node.right)

    def visit_LogicalExpression(self, node: LogicalExpression) -> str:
        left = self.operand(node.left)
        if node.operator == "&&":
            return f"{left} ? {self.operand(node.right, TERNARY_PRECEDENCE + 1)}"
        if node.operator == "||":
            return f"{left}|default({self.translate(node.right)})"
        if node.operator == "??":
            context = operator_precedence("??") + 1
            return f"{left} ?? {self.operand(node.right, context)}"
        raise UnsupportedConstructFault(node.operator)

    def visit_ConditionalExpression(self, node: ConditionalExpression) -> str:
        branch = TERNARY_PRECEDENCE + 1
        return (
            f"{self.operand(node.test, branch)} ? {self.operand(node.consequent, branch)}"
            f" : {self.operand(node.alternate, branch)}"
        )

    def visit_UnaryExpression(self, node: UnaryExpression) -> str:
        argument = self.operand(node.argument)
        if node.operator == "!":
            return f"not {argument}"
        if node.operator in {"-", "+"}:
            return f"{node.operator}{argument}"
        raise UnsupportedConstructFault(node.operator)

    # -- structured literals -----------------------------------------------

    def visit_ArrayExpression(self, node: ArrayExpression) -> str:
        return f"[{self.translate_all(node.elements, ', ')}]"

    def visit_ArrayPattern(self, node: ArrayPattern) -> str:
        return self.markup.translate(node)

    def visit_ObjectPattern(self, node: ObjectPattern) -> str:
        raise UnsupportedConstructFault("object destructuring")

    def visit_Property(self, node: Property) -> str:
        if isinstance(node.key, Identifier):
            key = hash_key(node.key.name)
        else:
            key = self.translate(node.key)
        return f"{key}: {self.translate(node.value)}"

    def visit_SpreadElement(self, node: SpreadElement) -> str:
        return self.translate(node.argument)

    def visit_ObjectExpression(self, node: ObjectExpression) -> str:
        if not any(isinstance(prop, SpreadElement) for prop in node.properties):
            return f"{{{self.translate_all(node.properties, ', ')}}}"

        # Spreads keep source order: the first run seeds the value, every later
        # run (a spread source, or consecutive properties grouped in one hash)
        # is merged over it left to right so later keys win.
        runs = _spread_runs(node.properties)
        head_spread, head_nodes = runs[0]
        if head_spread:
            merged = self.operand(head_nodes[0].argument)
        else:
            merged = f"{{{self.translate_all(head_nodes, ', ')}}}"
        for is_spread, members in runs[1:]:
            if is_spread:
                merged += f"|merge({self.translate(members[0])})"
            else:
                merged += f"|merge({{{self.translate_all(members, ', ')}}})"
        return merged

    # -- template literals -------------------------------------------------

    def visit_TemplateElement(self, node: TemplateElement) -> str:
        text = node.cooked if node.cooked is not None else node.raw
        return quote(text) if text else ""

    def visit_TemplateLiteral(self, node: TemplateLiteral) -> str:
        if not node.expressions:
            text = "".join(
                quasi.cooked if quasi.cooked is not None else quasi.raw
                for quasi in node.quasis
            )
            return quote(text)
        return self.concat(node.segments)

    # -- helpers -----------------------------------------------------------

    def concat(self, parts: Sequence[Node]) -> str:
        """Join value fragments with Twig's ``~`` operator, parenthesising compound operands."""
        rendered: List[str] = []
        compound = len(parts) > 1
        for part in parts:
            text = self.operand(part) if compound else self.translate(part)
            if text and text != "''":
                rendered.append(text)
        if not rendered:
            return "''"
        return " ~ ".join(rendered)


def _spread_runs(properties: Sequence[Node]) -> List[Tuple[bool, List[Node]]]:
    runs: List[Tuple[bool, List[Node]]] = []
    for prop in properties:
        if isinstance(prop, SpreadElement):
            runs.append((True, [prop]))
        elif runs and not runs[-1][0]:
            runs[-1][1].append(prop)
        else:
            runs.append((False, [prop]))
    return runs


__all__ = ["ValueTranslator"]
