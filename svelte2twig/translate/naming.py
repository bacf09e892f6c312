"""Identifier helpers shared by the translators and the context builder."""

from __future__ import annotations

import re
from typing import Optional

from ..ast.nodes import Attribute, Slot, Text
from .errors import NodeTranslationFault

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_NON_WORD = re.compile(r"\W+")
_HASH_KEY = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

SELF_CLOSING_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def is_self_closing(name: str) -> bool:
    """Return True for void HTML elements."""
    return name in SELF_CLOSING_TAGS


def component_identifier(theme: str, tag: str) -> str:
    """Return the namespaced Twig identifier of an embedded component, e.g. ``mytheme:my-widget``."""
    return f"{theme}:{_NON_ALNUM.sub('-', tag).lower()}"


def loop_item_name(expression_text: str) -> str:
    """Synthesise the loop variable used when an each-block context is not an array pattern."""
    stem = _NON_WORD.sub("_", expression_text).strip("_") or "loop"
    return f"{stem}_item"


def hash_key(name: str) -> str:
    """Return ``name`` usable as a Twig hash key, quoting it when it is not a plain name."""
    if _HASH_KEY.fullmatch(name):
        return name
    return quote(name)


def quote(text: str) -> str:
    """Return ``text`` as a single-quoted Twig string literal."""
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def slot_name(node: Slot) -> Optional[str]:
    """Return the static ``name`` attribute of a slot, or None for an unnamed slot."""
    for attribute in node.attributes:
        if not isinstance(attribute, Attribute) or attribute.name != "name":
            continue
        if attribute.value is True:
            return None
        parts = attribute.value
        if not all(isinstance(part, Text) for part in parts):
            raise NodeTranslationFault("slot names must be static text")
        name = "".join(part.data for part in parts).strip()
        return name or None
    return None


__all__ = [
    "SELF_CLOSING_TAGS",
    "component_identifier",
    "hash_key",
    "is_self_closing",
    "loop_item_name",
    "quote",
    "slot_name",
]
