"""Template-mode and value-mode translators from Svelte nodes to Twig."""

from __future__ import annotations

from typing import Optional, Tuple

from ..config import TranslationOptions
from ..diagnostics import DiagnosticSink
from .errors import NodeTranslationFault, UnsupportedConstructFault
from .template import TemplateTranslator
from .value import ValueTranslator


def create_translators(
    options: TranslationOptions,
    diagnostics: Optional[DiagnosticSink] = None,
) -> Tuple[TemplateTranslator, ValueTranslator]:
    """Return a linked template/value translator pair sharing one diagnostics sink."""
    markup = TemplateTranslator(options, diagnostics)
    return markup, markup.values


__all__ = [
    "NodeTranslationFault",
    "TemplateTranslator",
    "UnsupportedConstructFault",
    "ValueTranslator",
    "create_translators",
]
