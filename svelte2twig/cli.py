"""CLI entrypoints for svelte2twig commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_output_toggles(parser: argparse.ArgumentParser) -> None:
    toggles = (
        ("--save-ast", None, "Save each component's AST as JSON under <output>/ast."),
        ("--save-styles", "--css", "Copy component SCSS files into the src directory."),
        ("--save-scripts", "--js", "Write component JS plus a Drupal behavior into the src directory."),
        ("--save-component-def", "-c", "Write a component.yml definition for each component."),
    )
    for flag, alias, help_text in toggles:
        names = [flag] if alias is None else [flag, alias]
        parser.add_argument(
            *names,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=help_text,
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svelte2twig",
        description="Translate Svelte components into Twig templates and component.yml definitions.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write the full debug log, diagnostics included, to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Translate every component under an input directory.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    build_parser.add_argument(
        "-i",
        "--input",
        required=True,
        help="Directory where the Svelte components are located.",
    )
    build_parser.add_argument(
        "-o",
        "--output",
        help="Directory where the results are saved.",
    )
    build_parser.add_argument(
        "-t",
        "--theme",
        help="Theme name used to namespace components.",
    )
    build_parser.add_argument(
        "-g",
        "--glob",
        help="Glob pattern, relative to the input directory, selecting component files.",
    )
    build_parser.add_argument(
        "--default-slot-name",
        help=(
            "Twig block name used for a component's unnamed default slot. "
            "Twig blocks require names while Svelte allows one nameless slot per component."
        ),
    )
    build_parser.add_argument(
        "--parser-command",
        help="Command that prints a component's Svelte AST as JSON; the file path is appended.",
    )
    build_parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help="Number of components translated in parallel.",
    )
    _add_output_toggles(build_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP translation service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for svelte2twig commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "build":
        try:
            config = load_config(Path(args.input)).with_overrides(
                {
                    "output": args.output,
                    "theme": args.theme,
                    "glob": args.glob,
                    "default_slot_name": args.default_slot_name,
                    "parser_command": args.parser_command.split() if args.parser_command else None,
                    "jobs": args.jobs,
                    "save_ast": args.save_ast,
                    "save_styles": args.save_styles,
                    "save_scripts": args.save_scripts,
                    "save_component_def": args.save_component_def,
                }
            )
            config.validate()
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")

        summary = Orchestrator().run(config)
        print(
            f"Translated {len(summary.translated)} of {len(summary.outcomes)} components "
            f"into {_relativize(config.output / 'twig')}"
        )
        if summary.failed:
            parser.exit(
                1,
                f"{len(summary.failed)} components failed. Run with --verbose for more details.\n",
            )
    elif args.command == "serve":
        from .service.app import run_service

        try:
            run_service(host=args.host, port=args.port)
        except RuntimeError as exc:
            parser.exit(1, f"{exc}\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
