"""Batch pipeline: discover components, translate each one, write the results."""

from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, cast

from .assets import copy_styles
from .ast.parser import ParserError, SvelteAstSource
from .behaviors import BehaviorScriptBuilder
from .config import TranslatorConfig
from .context import component_name_from_path
from .engine import translate_component
from .logging import get_logger, log_diagnostic
from .metadata.overrides import OverrideError, load_override
from .models import ComponentResult
from .postproc.whitespace import TwigWhitespaceNormalizer
from .scanner import ComponentScanner, OutputLayout


@dataclass
class FileOutcome:
    """What happened to one component during a run."""

    path: Path
    written: List[Path] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class RunSummary:
    """Aggregate result of a batch run."""

    outcomes: List[FileOutcome] = field(default_factory=list)
    assets: List[Path] = field(default_factory=list)

    @property
    def failed(self) -> List[FileOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    @property
    def translated(self) -> List[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.ok]


class Orchestrator:
    """Coordinates component translation for a whole input tree."""

    def __init__(
        self,
        scanner: ComponentScanner | None = None,
        ast_source: SvelteAstSource | None = None,
        normalizer: TwigWhitespaceNormalizer | None = None,
    ) -> None:
        self.scanner = scanner or ComponentScanner()
        self._ast_source = ast_source
        self.normalizer = normalizer or TwigWhitespaceNormalizer()
        self.logger = get_logger("orchestrator")

    def run(self, config: TranslatorConfig) -> RunSummary:
        """Translate every component matched by ``config``; per-file failures do not stop the batch."""
        config.validate()
        layout = OutputLayout(input=config.input, output=cast(Path, config.output))
        layout.output.mkdir(parents=True, exist_ok=True)
        ast_source = self._ast_source or SvelteAstSource(config.parser_command or None)
        behaviors = BehaviorScriptBuilder(config.options.theme)

        files = self.scanner.scan(config.input, config.glob)
        self.logger.info("Found %d components under %s", len(files), config.input)

        def _process(path: Path) -> FileOutcome:
            return self.process_file(path, config, layout, ast_source, behaviors)

        summary = RunSummary()
        if config.jobs > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=config.jobs) as pool:
                summary.outcomes = list(pool.map(_process, files))
        else:
            summary.outcomes = [_process(path) for path in files]

        if config.outputs.save_styles:
            summary.assets = copy_styles(layout)
            self.logger.debug("Copied %d stylesheets", len(summary.assets))

        self.logger.info(
            "Translated %d of %d components", len(summary.translated), len(summary.outcomes)
        )
        return summary

    def process_file(
        self,
        path: Path,
        config: TranslatorConfig,
        layout: OutputLayout,
        ast_source: SvelteAstSource,
        behaviors: BehaviorScriptBuilder,
    ) -> FileOutcome:
        outcome = FileOutcome(path=path)
        try:
            source = path.read_text(encoding="utf-8")
            data = ast_source.load(path)
            override = load_override(path)
        except (OSError, UnicodeDecodeError, ParserError, OverrideError) as exc:
            self.logger.error("Skipping %s: %s", path, exc)
            outcome.error = str(exc)
            return outcome

        try:
            result = translate_component(
                data,
                path=path,
                options=config.options,
                override=override,
                source=source,
            )
        except Exception as exc:  # pragma: no cover - defensive guard
            self.logger.exception("Translation failed for %s", path)
            outcome.error = str(exc)
            return outcome
        self._log_diagnostics(path, result)

        try:
            outcome.written.extend(
                self._write_outputs(path, config, layout, data, source, result, behaviors)
            )
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.error("Failed writing outputs for %s: %s", path, exc)
            outcome.error = str(exc)
        return outcome

    def _write_outputs(
        self,
        path: Path,
        config: TranslatorConfig,
        layout: OutputLayout,
        data: Dict[str, Any],
        source: str,
        result: ComponentResult,
        behaviors: BehaviorScriptBuilder,
    ) -> List[Path]:
        written: List[Path] = []

        if config.outputs.save_ast:
            ast_path = layout.ast_path(path)
            _write(ast_path, json.dumps(data, indent=2))
            self.logger.debug("Saving AST to %s", ast_path)
            written.append(ast_path)

        template_path = layout.template_path(path)
        _write(template_path, self.normalizer.normalize(result.template))
        self.logger.debug("Saving Twig to %s", template_path)
        written.append(template_path)

        if config.outputs.save_component_def:
            metadata_path = layout.metadata_path(path)
            _write(metadata_path, result.metadata)
            self.logger.debug("Saving component definition to %s", metadata_path)
            written.append(metadata_path)

        if config.outputs.save_scripts:
            script = self._component_script(path, data, source, result, behaviors)
            if script is not None:
                script_path = layout.script_path(path)
                _write(script_path, script)
                self.logger.debug("Saving JS to %s", script_path)
                written.append(script_path)

        return written

    def _component_script(
        self,
        path: Path,
        data: Dict[str, Any],
        source: str,
        result: ComponentResult,
        behaviors: BehaviorScriptBuilder,
    ) -> Optional[str]:
        """Return the component's own ``.js`` file followed by its behavior wrapper, if either exists."""
        js_path = path.with_name(f"{component_name_from_path(path)}.js")
        existing = js_path.read_text(encoding="utf-8") if js_path.exists() else None
        behavior = behaviors.build(result.context.name, data, source)
        parts = [part for part in (existing, behavior) if part]
        if not parts:
            return None
        return "\n".join(part.rstrip("\n") for part in parts) + "\n"

    def _log_diagnostics(self, path: Path, result: ComponentResult) -> None:
        for record in result.diagnostics:
            log_diagnostic(self.logger, path.name, record)


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


__all__ = ["FileOutcome", "Orchestrator", "RunSummary"]
