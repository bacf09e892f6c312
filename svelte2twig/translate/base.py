"""Shared visitor machinery for the template and value translators."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from ..ast.nodes import (
    BinaryExpression,
    ConditionalExpression,
    LogicalExpression,
    MustacheTag,
    Node,
    RawMustacheTag,
)
from ..config import TranslationOptions
from ..diagnostics import NODE_FAULT, DiagnosticSink
from .errors import UnsupportedConstructFault

_BINARY_OPERATORS = {
    "===": "==",
    "==": "==",
    "!==": "!=",
    "!=": "!=",
}

# Binding strength of Twig's binary operators; higher binds tighter.
TERNARY_PRECEDENCE = 0
FILTER_PRECEDENCE = 1000
_COMPARISON_PRECEDENCE = 20
_OPERATOR_PRECEDENCE = {
    "or": 10,
    "and": 15,
    "==": _COMPARISON_PRECEDENCE,
    "!=": _COMPARISON_PRECEDENCE,
    "<": _COMPARISON_PRECEDENCE,
    ">": _COMPARISON_PRECEDENCE,
    "<=": _COMPARISON_PRECEDENCE,
    ">=": _COMPARISON_PRECEDENCE,
    "in": _COMPARISON_PRECEDENCE,
    "+": 30,
    "-": 30,
    "~": 40,
    "*": 60,
    "/": 60,
    "%": 60,
    "**": 200,
    "??": 300,
}


def binary_operator(operator: str) -> str:
    """Map a JavaScript comparison operator onto its Twig spelling."""
    return _BINARY_OPERATORS.get(operator, operator)


def operator_precedence(operator: str) -> int:
    return _OPERATOR_PRECEDENCE.get(operator, _COMPARISON_PRECEDENCE)


class Translator:
    """Dispatches each node to a ``visit_<NodeClass>`` rule and isolates faults per node.

    A rule that raises yields an empty fragment for its own node only; the
    failure is recorded on the diagnostics sink and siblings keep rendering.
    Node kinds without a rule render as empty text.
    """

    mode = "twig"

    # Precedence of each JavaScript logical operator as this mode renders it;
    # ``None`` marks renderings that bind like a filter and never need wrapping.
    logical_precedence: Dict[str, Optional[int]] = {}

    def __init__(
        self,
        options: TranslationOptions,
        diagnostics: Optional[DiagnosticSink] = None,
    ) -> None:
        self.options = options
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticSink()

    def translate(self, node: Optional[Node]) -> str:
        if node is None:
            return ""
        rule = getattr(self, f"visit_{node.kind}", None)
        if rule is None:
            return ""
        try:
            return rule(node)
        except UnsupportedConstructFault:
            return ""
        except Exception as exc:
            self.diagnostics.error(
                NODE_FAULT,
                f"Error converting {node.kind} node to {self.mode}: {exc}",
                node.kind,
            )
            return ""

    def translate_all(self, nodes: Iterable[Node], separator: str = "") -> str:
        return separator.join(self.translate(node) for node in nodes)

    def translate_nonempty(self, nodes: Iterable[Node], separator: str) -> str:
        """Join translated nodes, dropping the ones that rendered empty."""
        return separator.join(text for text in (self.translate(node) for node in nodes) if text)

    # -- operator precedence -------------------------------------------------

    def precedence(self, node: Node) -> Optional[int]:
        """Return how tightly the rendering of ``node`` binds, or ``None`` for atoms."""
        if isinstance(node, (MustacheTag, RawMustacheTag)):
            return self.precedence(node.expression)
        if isinstance(node, ConditionalExpression):
            return TERNARY_PRECEDENCE
        if isinstance(node, BinaryExpression):
            return operator_precedence(binary_operator(node.operator))
        if isinstance(node, LogicalExpression):
            return self.logical_precedence.get(node.operator)
        return None

    def operand(self, node: Node, context: int = FILTER_PRECEDENCE) -> str:
        """Translate ``node``, parenthesised when it binds looser than ``context``.

        The default context is a filter or unary operator, so any compound
        expression gets wrapped.
        """
        text = self.translate(node)
        strength = self.precedence(node)
        if text and strength is not None and strength < context:
            return f"({text})"
        return text

    def binary(self, left: Node, operator: str, right: Node) -> str:
        """Render ``left operator right`` keeping the source grouping intact."""
        strength = operator_precedence(operator)
        if operator == "**":
            left_context, right_context = strength + 1, strength
        else:
            left_context, right_context = strength, strength + 1
        return (
            f"{self.operand(left, left_context)} {operator} "
            f"{self.operand(right, right_context)}"
        )


__all__ = [
    "FILTER_PRECEDENCE",
    "TERNARY_PRECEDENCE",
    "Translator",
    "binary_operator",
    "operator_precedence",
]
