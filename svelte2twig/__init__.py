"""Translate Svelte components into Twig templates and Drupal component definitions."""

from .config import ConfigError, TranslationOptions, TranslatorConfig, load_config
from .engine import translate_component
from .models import ComponentContext, ComponentResult, PropSpec

__version__ = "0.3.0"

__all__ = [
    "ComponentContext",
    "ComponentResult",
    "ConfigError",
    "PropSpec",
    "TranslationOptions",
    "TranslatorConfig",
    "load_config",
    "translate_component",
]
