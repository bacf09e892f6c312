"""Core data models shared across svelte2twig components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .diagnostics import Diagnostic


@dataclass(frozen=True)
class PropSpec:
    """Inferred schema of one component prop."""

    type: str
    default: Any = None
    title: Optional[str] = None
    description: Optional[str] = None
    enum: Optional[Tuple[Any, ...]] = None


@dataclass
class ComponentContext:
    """Everything inferred about one component's public interface."""

    name: str
    props: Optional[Dict[str, PropSpec]] = None
    slots: List[str] = field(default_factory=list)
    set_statements: Dict[str, str] = field(default_factory=dict)
    component: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ComponentResult:
    """Translated outputs of one component."""

    template: str
    metadata: str
    context: ComponentContext
    diagnostics: List[Diagnostic] = field(default_factory=list)
