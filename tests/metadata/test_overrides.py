"""Sidecar component.yml loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from svelte2twig.metadata.overrides import (
    OverrideError,
    load_override,
    override_path,
    parse_override,
)


def test_override_path_sits_beside_component(tmp_path: Path) -> None:
    component = tmp_path / "Card.svelte"
    assert override_path(component) == tmp_path / "Card.component.yml"


def test_missing_override_is_empty(tmp_path: Path) -> None:
    assert load_override(tmp_path / "Card.svelte") == {}


def test_override_is_loaded(tmp_path: Path) -> None:
    (tmp_path / "Card.component.yml").write_text(
        "name: Card\nstatus: stable\n", encoding="utf-8"
    )
    assert load_override(tmp_path / "Card.svelte") == {"name": "Card", "status": "stable"}


def test_empty_documents_parse_to_empty_mapping() -> None:
    assert parse_override("") == {}
    assert parse_override("# only a comment\n") == {}


def test_non_mapping_root_is_rejected() -> None:
    with pytest.raises(OverrideError, match="mapping"):
        parse_override("- a\n- b\n")


def test_invalid_yaml_is_rejected() -> None:
    with pytest.raises(OverrideError, match="Failed to parse"):
        parse_override("props: [unclosed\n", source="Card.component.yml")
