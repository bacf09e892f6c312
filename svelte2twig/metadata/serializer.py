"""Render the Drupal single-directory-component metadata document."""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping

import yaml

from ..models import ComponentContext, PropSpec

SCHEMA_URL = (
    "https://git.drupalcode.org/project/drupal/-/raw/10.3.x/"
    "core/assets/schemas/v1/metadata.schema.json"
)

KEY_ORDER = (
    "$schema",
    "name",
    "description",
    "group",
    "status",
    "props",
    "slots",
    "libraryOverrides",
    "thirdPartySettings",
)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` over ``base``; mappings merge recursively, everything else is replaced."""
    merged = copy.deepcopy(dict(base))
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def order_keys(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Return ``document`` with known top-level keys first, in their canonical order."""
    ordered = {key: document[key] for key in KEY_ORDER if key in document}
    for key, value in document.items():
        if key not in ordered:
            ordered[key] = value
    return ordered


class MetadataSerializer:
    """Builds component metadata from an inferred context plus the user's override document."""

    def build(self, context: ComponentContext) -> Dict[str, Any]:
        document: Dict[str, Any] = {"$schema": SCHEMA_URL, "name": context.name}

        if context.props is not None:
            document["props"] = {
                "type": "object",
                "properties": {
                    name: _prop_schema(spec) for name, spec in context.props.items()
                },
            }

        if context.slots:
            # Repeated slot names collapse onto their first occurrence.
            document["slots"] = {name: {} for name in context.slots}

        return order_keys(deep_merge(document, context.component))

    def serialize(self, context: ComponentContext) -> str:
        return dump_yaml(self.build(context))


def dump_yaml(document: Mapping[str, Any]) -> str:
    return yaml.safe_dump(
        dict(document),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def _prop_schema(spec: PropSpec) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": spec.type}
    if spec.title:
        schema["title"] = spec.title
    if spec.default is not None:
        schema["default"] = spec.default
    if spec.enum:
        schema["enum"] = list(spec.enum)
    if spec.description:
        schema["description"] = spec.description
    return schema


__all__ = [
    "KEY_ORDER",
    "MetadataSerializer",
    "SCHEMA_URL",
    "deep_merge",
    "dump_yaml",
    "order_keys",
]
