"""Diagnostics collected while translating a component."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

SLOT_UNNAMED = "slot.unnamed"
SLOT_DUPLICATE = "slot.duplicate"
SLOT_DYNAMIC = "slot.dynamic"
NODE_FAULT = "node.fault"
PROP_UNRECOGNIZED = "prop.unrecognized-initializer"


@dataclass(frozen=True)
class Diagnostic:
    """A single message raised during translation."""

    level: int
    code: str
    message: str
    node_kind: Optional[str] = None


class DiagnosticSink:
    """Collects diagnostics so translation itself stays free of logging side effects."""

    def __init__(self) -> None:
        self.records: List[Diagnostic] = []

    def add(self, level: int, code: str, message: str, node_kind: str | None = None) -> None:
        self.records.append(Diagnostic(level=level, code=code, message=message, node_kind=node_kind))

    def info(self, code: str, message: str, node_kind: str | None = None) -> None:
        self.add(logging.INFO, code, message, node_kind)

    def warning(self, code: str, message: str, node_kind: str | None = None) -> None:
        self.add(logging.WARNING, code, message, node_kind)

    def error(self, code: str, message: str, node_kind: str | None = None) -> None:
        self.add(logging.ERROR, code, message, node_kind)

    def by_code(self, code: str) -> List[Diagnostic]:
        return [record for record in self.records if record.code == code]

    def __len__(self) -> int:
        return len(self.records)


__all__ = [
    "Diagnostic",
    "DiagnosticSink",
    "NODE_FAULT",
    "PROP_UNRECOGNIZED",
    "SLOT_DUPLICATE",
    "SLOT_DYNAMIC",
    "SLOT_UNNAMED",
]
