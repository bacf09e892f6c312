"""Load user-authored ``*.component.yml`` documents that sit beside a component."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

from ..context import component_name_from_path
from ..logging import get_logger

logger = get_logger("metadata")


class OverrideError(RuntimeError):
    """Raised when a sidecar component.yml cannot be used."""


def override_path(component_path: Path) -> Path:
    """Return the sidecar ``<Name>.component.yml`` path for a component file."""
    return component_path.with_name(f"{component_name_from_path(component_path)}.component.yml")


def load_override(component_path: Path) -> Dict[str, Any]:
    """Return the sidecar document for ``component_path``, or an empty mapping when absent."""
    path = override_path(component_path)
    if not path.exists():
        return {}
    logger.debug("component.yml found at %s", path)
    return parse_override(path.read_text(encoding="utf-8"), source=path.name)


def parse_override(text: str, *, source: str = "component.yml") -> Dict[str, Any]:
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise OverrideError(f"Failed to parse {source}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise OverrideError(f"{source} must contain a mapping at the root")
    return loaded


__all__ = ["OverrideError", "load_override", "override_path", "parse_override"]
