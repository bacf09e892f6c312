"""AST acquisition from dumps and the external Svelte parser."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import List, Sequence

import pytest

from svelte2twig.ast.parser import DEFAULT_PARSER_COMMAND, ParserError, SvelteAstSource


class _RecordingRunner:
    def __init__(self, output: str = "", error: Exception | None = None) -> None:
        self.output = output
        self.error = error
        self.calls: List[List[str]] = []

    def __call__(self, args: Sequence[str], cwd: Path) -> str:
        self.calls.append(list(args))
        if self.error is not None:
            raise self.error
        return self.output


def test_dump_beside_component_is_preferred(tmp_path: Path) -> None:
    component = tmp_path / "Card.svelte"
    component.write_text("<p>hi</p>", encoding="utf-8")
    (tmp_path / "Card.svelte.json").write_text(json.dumps({"html": {"type": "Fragment"}}))
    runner = _RecordingRunner()

    data = SvelteAstSource(runner=runner).load(component)

    assert data == {"html": {"type": "Fragment"}}
    assert runner.calls == []


def test_parser_command_receives_component_path(tmp_path: Path) -> None:
    component = tmp_path / "Card.svelte"
    runner = _RecordingRunner(output='{"html": null}')

    data = SvelteAstSource(["svelte-ast", "--json"], runner=runner).load(component)

    assert data == {"html": None}
    assert runner.calls == [["svelte-ast", "--json", str(component)]]


def test_default_command_runs_node() -> None:
    assert SvelteAstSource().command == DEFAULT_PARSER_COMMAND
    assert DEFAULT_PARSER_COMMAND[0] == "node"


def test_parser_failures_raise_parser_error(tmp_path: Path) -> None:
    failure = subprocess.CalledProcessError(1, ["node"], stderr="ParseError")
    source = SvelteAstSource(runner=_RecordingRunner(error=failure))
    with pytest.raises(ParserError, match="Card.svelte"):
        source.load(tmp_path / "Card.svelte")

    missing = SvelteAstSource(runner=_RecordingRunner(error=FileNotFoundError("node")))
    with pytest.raises(ParserError):
        missing.load(tmp_path / "Card.svelte")


def test_invalid_parser_output_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ParserError, match="invalid JSON"):
        SvelteAstSource(runner=_RecordingRunner(output="<html>")).load(tmp_path / "A.svelte")
    with pytest.raises(ParserError, match="no AST"):
        SvelteAstSource(runner=_RecordingRunner(output="[]")).load(tmp_path / "A.svelte")


def test_unreadable_dump_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "Card.svelte.json").write_text("{", encoding="utf-8")
    with pytest.raises(ParserError, match="Unreadable AST dump"):
        SvelteAstSource(runner=_RecordingRunner()).load(tmp_path / "Card.svelte")

    (tmp_path / "Card.svelte.json").write_bytes(b'{"html": "\xff"}')
    with pytest.raises(ParserError, match="Unreadable AST dump"):
        SvelteAstSource(runner=_RecordingRunner()).load(tmp_path / "Card.svelte")

    (tmp_path / "Card.svelte.json").write_text("[]", encoding="utf-8")
    with pytest.raises(ParserError, match="does not hold a component AST"):
        SvelteAstSource(runner=_RecordingRunner()).load(tmp_path / "Card.svelte")
