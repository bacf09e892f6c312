"""Configuration loading for svelte2twig (.svelte2twig.yml and CLI overrides)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

import yaml

CONFIG_FILENAME = ".svelte2twig.yml"
DEFAULT_GLOB = "**/components/**/*.svelte"
DEFAULT_SLOT_NAME = "content"


class ConfigError(RuntimeError):
    """Raised when configuration is missing or cannot be parsed."""


@dataclass(frozen=True)
class TranslationOptions:
    """Immutable settings every translator receives."""

    theme: str
    default_slot_name: str = DEFAULT_SLOT_NAME


@dataclass
class OutputConfig:
    """Which artifacts are written next to the Twig templates."""

    save_ast: bool = False
    save_styles: bool = True
    save_scripts: bool = True
    save_component_def: bool = True


@dataclass
class TranslatorConfig:
    """Effective settings for one batch run."""

    input: Path
    output: Optional[Path] = None
    theme: Optional[str] = None
    default_slot_name: str = DEFAULT_SLOT_NAME
    glob: str = DEFAULT_GLOB
    outputs: OutputConfig = field(default_factory=OutputConfig)
    parser_command: List[str] = field(default_factory=list)
    jobs: int = 1

    def validate(self) -> "TranslatorConfig":
        """Raise ConfigError unless the configuration can drive a translation run."""
        if not self.theme or not self.theme.strip():
            raise ConfigError("A theme name is required to namespace components (--theme)")
        if self.output is None:
            raise ConfigError("An output directory is required (--output)")
        if not self.default_slot_name.strip():
            raise ConfigError("The default slot name must not be empty")
        if not self.input.is_dir():
            raise ConfigError(f"Input directory {self.input} does not exist")
        if self.jobs < 1:
            raise ConfigError("jobs must be a positive integer")
        return self

    @property
    def options(self) -> TranslationOptions:
        if not self.theme:
            raise ConfigError("A theme name is required to namespace components (--theme)")
        return TranslationOptions(theme=self.theme, default_slot_name=self.default_slot_name)

    def with_overrides(self, overrides: Mapping[str, Any]) -> "TranslatorConfig":
        """Return a copy with non-None values from ``overrides`` applied."""
        outputs = self.outputs
        output_changes = {
            key: bool(overrides[key])
            for key in ("save_ast", "save_styles", "save_scripts", "save_component_def")
            if overrides.get(key) is not None
        }
        if output_changes:
            outputs = replace(outputs, **output_changes)

        changes: Dict[str, Any] = {"outputs": outputs}
        if overrides.get("output") is not None:
            changes["output"] = Path(overrides["output"]).expanduser().resolve()
        for key in ("theme", "default_slot_name", "glob"):
            if overrides.get(key) is not None:
                changes[key] = str(overrides[key])
        if overrides.get("parser_command"):
            changes["parser_command"] = list(overrides["parser_command"])
        if overrides.get("jobs") is not None:
            changes["jobs"] = int(overrides["jobs"])
        return replace(self, **changes)


def load_config(input_dir: Path) -> TranslatorConfig:
    """Load ``.svelte2twig.yml`` from the input directory, falling back to defaults."""
    input_dir = input_dir.expanduser().resolve()
    config_file = input_dir / CONFIG_FILENAME
    if not config_file.exists():
        return TranslatorConfig(input=input_dir)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    outputs_data = _as_dict(data.get("outputs"))
    outputs = OutputConfig()
    if outputs_data:
        outputs = OutputConfig(
            save_ast=_pick_bool(outputs_data.get("save_ast"), outputs.save_ast),
            save_styles=_pick_bool(outputs_data.get("save_styles"), outputs.save_styles),
            save_scripts=_pick_bool(outputs_data.get("save_scripts"), outputs.save_scripts),
            save_component_def=_pick_bool(
                outputs_data.get("save_component_def"), outputs.save_component_def
            ),
        )

    output_str = _as_str(data.get("output"))
    output = (input_dir / output_str).resolve() if output_str else None

    parser_data = _as_dict(data.get("parser"))
    jobs = _as_int(data.get("jobs"))

    return TranslatorConfig(
        input=input_dir,
        output=output,
        theme=_as_str(data.get("theme")),
        default_slot_name=_as_str(data.get("default_slot_name")) or DEFAULT_SLOT_NAME,
        glob=_as_str(data.get("glob")) or DEFAULT_GLOB,
        outputs=outputs,
        parser_command=_as_str_list(parser_data.get("command")) if parser_data else [],
        jobs=jobs if jobs is not None else 1,
    )


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _pick_bool(value: Any, default: bool) -> bool:
    parsed = _as_bool(value)
    return default if parsed is None else parsed


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_GLOB",
    "DEFAULT_SLOT_NAME",
    "OutputConfig",
    "TranslationOptions",
    "TranslatorConfig",
    "load_config",
]
