"""Translate one parsed component into a Twig template and its metadata document."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .ast.loader import load_component_ast
from .ast.nodes import ComponentAst
from .config import TranslationOptions
from .context import ComponentContextBuilder
from .diagnostics import DiagnosticSink
from .metadata.serializer import MetadataSerializer
from .models import ComponentContext, ComponentResult
from .translate import TemplateTranslator, create_translators


def translate_component(
    data: Mapping[str, Any],
    *,
    path: Path | str,
    options: TranslationOptions,
    override: Optional[Mapping[str, Any]] = None,
    source: Optional[str] = None,
) -> ComponentResult:
    """Translate the Svelte ``parse()`` output ``data`` of the component at ``path``."""
    diagnostics = DiagnosticSink()
    markup, values = create_translators(options, diagnostics)
    ast = load_component_ast(data, source=source)

    builder = ComponentContextBuilder(options, diagnostics, values)
    context = builder.build(ast, path, override)
    template = render_template(ast, context, markup)
    metadata = MetadataSerializer().serialize(context)

    return ComponentResult(
        template=template,
        metadata=metadata,
        context=context,
        diagnostics=list(diagnostics.records),
    )


def render_template(ast: ComponentAst, context: ComponentContext, markup: TemplateTranslator) -> str:
    """Return the set statements followed by the translated render tree."""
    set_lines = [f"{{% set {name} = {value} %}}" for name, value in context.set_statements.items()]
    body = markup.translate(ast.html)
    return "\n".join(part for part in ("\n".join(set_lines), body) if part)


def result_payload(result: ComponentResult) -> Dict[str, Any]:
    """Return a JSON-serialisable view of a translation result."""
    return {
        "name": result.context.name,
        "template": result.template,
        "metadata": result.metadata,
        "slots": list(result.context.slots),
        "diagnostics": [
            {"level": record.level, "code": record.code, "message": record.message}
            for record in result.diagnostics
        ],
    }


__all__ = ["render_template", "result_payload", "translate_component"]
