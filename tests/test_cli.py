"""CLI parser and build command tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from svelte2twig.cli import _build_parser, main
from tests._fixtures.svelte_ast import component_ast, element, fragment, text


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()
    assert parser.parse_args(["--verbose", "build", "-i", "src"]).verbose is True
    assert parser.parse_args(["build", "-i", "src", "--verbose"]).verbose is True


def test_output_toggles_default_to_none() -> None:
    args = _build_parser().parse_args(["build", "-i", "src"])
    assert args.save_ast is None
    assert args.save_styles is None
    assert args.save_component_def is None


def test_output_toggles_accept_aliases_and_negation() -> None:
    args = _build_parser().parse_args(
        ["build", "-i", "src", "--save-ast", "--no-css", "--js", "-c", "-j", "3"]
    )
    assert args.save_ast is True
    assert args.save_styles is False
    assert args.save_scripts is True
    assert args.save_component_def is True
    assert args.jobs == 3


def test_serve_defaults() -> None:
    args = _build_parser().parse_args(["serve"])
    assert args.command == "serve"
    assert args.host == "127.0.0.1"
    assert args.port == 8000


def test_build_without_theme_exits_with_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["build", "-i", str(tmp_path), "-o", str(tmp_path / "out")])
    assert excinfo.value.code == 1
    assert "theme" in capsys.readouterr().err


def test_build_translates_components(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    component_dir = tmp_path / "src" / "components" / "alert"
    component_dir.mkdir(parents=True)
    (component_dir / "Alert.svelte").write_text("<div>Careful</div>", encoding="utf-8")
    (component_dir / "Alert.svelte.json").write_text(
        json.dumps(component_ast(fragment(element("div", [], [text("Careful")])))),
        encoding="utf-8",
    )
    output = tmp_path / "out"

    main(["build", "-i", str(tmp_path / "src"), "-o", str(output), "-t", "mytheme"])

    template = output / "twig" / "components" / "alert" / "Alert.twig"
    assert template.read_text(encoding="utf-8") == "<div>Careful</div>\n"
    assert (template.parent / "Alert.component.yml").exists()
    assert "Translated 1 of 1 components" in capsys.readouterr().out
