"""Faults raised inside translation rules."""

from __future__ import annotations


class NodeTranslationFault(RuntimeError):
    """A rule could not translate its node; the node renders as empty text."""


class UnsupportedConstructFault(NodeTranslationFault):
    """A recognised construct with no Twig equivalent; rendered as empty text without a diagnostic."""


__all__ = ["NodeTranslationFault", "UnsupportedConstructFault"]
