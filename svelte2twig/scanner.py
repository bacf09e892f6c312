"""Component discovery and input-to-output path mapping."""

from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import List, Sequence

from .context import component_name_from_path

_EXCLUDED_DIRS = {
    ".git",
    ".svelte-kit",
    "node_modules",
    "__pycache__",
    "dist",
}

DEFAULT_EXCLUDES: tuple[str, ...] = ("*.stories.svelte",)


class ComponentScanner:
    """Finds Svelte components under an input directory."""

    def __init__(self, excludes: Sequence[str] = DEFAULT_EXCLUDES) -> None:
        self.excludes = tuple(excludes)

    def scan(self, root: Path, pattern: str) -> List[Path]:
        """Return matching component files sorted by path."""
        root = root.resolve()
        found: List[Path] = []
        for path in root.glob(pattern):
            if not path.is_file():
                continue
            rel_parts = path.relative_to(root).parts
            if any(part in _EXCLUDED_DIRS for part in rel_parts[:-1]):
                continue
            if any(fnmatchcase(path.name, exclude) for exclude in self.excludes):
                continue
            found.append(path)
        return sorted(found)

    def scan_assets(self, root: Path, suffix: str = ".scss") -> List[Path]:
        """Return static assets that live in component directories."""
        return [
            path
            for path in self.scan(root, f"**/components/**/*{suffix}")
            if path.suffix == suffix
        ]


@dataclass(frozen=True)
class OutputLayout:
    """Maps input component paths onto the generated files under ``<output>/twig``."""

    input: Path
    output: Path

    @property
    def twig_dir(self) -> Path:
        return self.output / "twig"

    @property
    def ast_dir(self) -> Path:
        return self.output / "ast"

    def _relative_dir(self, path: Path) -> Path:
        return path.resolve().parent.relative_to(self.input.resolve())

    def template_path(self, component: Path) -> Path:
        name = component_name_from_path(component)
        return self.twig_dir / self._relative_dir(component) / f"{name}.twig"

    def metadata_path(self, component: Path) -> Path:
        name = component_name_from_path(component)
        return self.twig_dir / self._relative_dir(component) / f"{name}.component.yml"

    def script_path(self, component: Path) -> Path:
        name = component_name_from_path(component)
        return self.twig_dir / self._relative_dir(component) / "src" / f"{name}.js"

    def asset_path(self, asset: Path) -> Path:
        return self.twig_dir / self._relative_dir(asset) / "src" / asset.name

    def ast_path(self, component: Path) -> Path:
        return self.ast_dir / f"{component.name}.json"


__all__ = ["ComponentScanner", "DEFAULT_EXCLUDES", "OutputLayout"]
