"""Acquire Svelte ASTs from sidecar dumps or the external Svelte compiler."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any, Callable, Dict, Sequence

from ..logging import get_logger
from .loader import read_ast_file

DEFAULT_PARSER_COMMAND: tuple[str, ...] = (
    "node",
    "-e",
    "const {parse}=require('svelte/compiler');"
    "const fs=require('fs');"
    "process.stdout.write(JSON.stringify(parse(fs.readFileSync(process.argv[1],'utf8'))));",
)


class ParserError(RuntimeError):
    """Raised when an AST cannot be produced for a component."""


class SvelteAstSource:
    """Returns the JSON AST of a component, preferring a ``<file>.json`` dump beside it."""

    def __init__(
        self,
        command: Sequence[str] | None = None,
        runner: Callable[[Sequence[str], Path], str] | None = None,
    ) -> None:
        self.command = tuple(command) if command else DEFAULT_PARSER_COMMAND
        self._runner = runner or self._default_runner
        self.logger = get_logger("parser")

    def load(self, component_path: Path) -> Dict[str, Any]:
        dump = self.dump_path(component_path)
        if dump.exists():
            self.logger.debug("Using AST dump %s", dump)
            try:
                data = read_ast_file(dump)
            except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
                raise ParserError(f"Unreadable AST dump {dump.name}: {exc}") from exc
            if not isinstance(data, dict):
                raise ParserError(f"AST dump {dump.name} does not hold a component AST")
            return data

        args = [*self.command, str(component_path)]
        self.logger.debug("Parsing %s with %s", component_path, self.command[0])
        try:
            output = self._runner(args, component_path.parent)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ParserError(f"Svelte parser failed for {component_path.name}: {exc}") from exc
        try:
            data = json.loads(output)
        except json.JSONDecodeError as exc:
            raise ParserError(f"Svelte parser returned invalid JSON for {component_path.name}") from exc
        if not isinstance(data, dict):
            raise ParserError(f"Svelte parser returned no AST for {component_path.name}")
        return data

    @staticmethod
    def dump_path(component_path: Path) -> Path:
        return component_path.with_name(f"{component_path.name}.json")

    @staticmethod
    def _default_runner(args: Sequence[str], cwd: Path) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=True,
        )
        return completed.stdout


__all__ = ["DEFAULT_PARSER_COMMAND", "ParserError", "SvelteAstSource"]
