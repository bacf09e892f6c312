"""Copy component stylesheets next to the generated templates."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List

from .logging import get_logger
from .scanner import ComponentScanner, OutputLayout


def copy_styles(layout: OutputLayout, scanner: ComponentScanner | None = None) -> List[Path]:
    """Copy every component ``.scss`` file into the matching ``src/`` directory."""
    logger = get_logger("assets")
    scanner = scanner or ComponentScanner(excludes=())
    copied: List[Path] = []
    for asset in scanner.scan_assets(layout.input):
        target = layout.asset_path(asset)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(asset, target)
        except OSError as exc:
            logger.error("Error copying %s: %s", asset, exc)
            continue
        logger.debug("Copied %s to %s", asset, target)
        copied.append(target)
    return copied


__all__ = ["copy_styles"]
