from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Mapping

import pytest

from svelte2twig.ast.loader import build_node
from svelte2twig.ast.nodes import Node
from svelte2twig.config import TranslationOptions
from svelte2twig.diagnostics import DiagnosticSink
from svelte2twig.translate import TemplateTranslator, ValueTranslator, create_translators
from tests._fixtures.component_tree import ComponentTreeBuilder


@pytest.fixture
def options() -> TranslationOptions:
    """Translation options shared by translator tests."""
    return TranslationOptions(theme="mytheme")


@pytest.fixture
def sink() -> DiagnosticSink:
    return DiagnosticSink()


@pytest.fixture
def markup(options: TranslationOptions, sink: DiagnosticSink) -> TemplateTranslator:
    return create_translators(options, sink)[0]


@pytest.fixture
def values(markup: TemplateTranslator) -> ValueTranslator:
    return markup.values


@pytest.fixture
def twig(markup: TemplateTranslator) -> Callable[[Mapping[str, Any]], str]:
    """Translate a JSON AST node in template mode."""

    def _translate(data: Mapping[str, Any]) -> str:
        node: Node = build_node(data)
        return markup.translate(node)

    return _translate


@pytest.fixture
def value(values: ValueTranslator) -> Callable[[Mapping[str, Any]], str]:
    """Translate a JSON AST node in value mode."""

    def _translate(data: Mapping[str, Any]) -> str:
        return values.translate(build_node(data))

    return _translate


@pytest.fixture
def tree(tmp_path: Path) -> ComponentTreeBuilder:
    """Provide a reusable component tree rooted at the pytest tmp_path."""
    return ComponentTreeBuilder(tmp_path)
