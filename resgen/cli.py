"""CLI entrypoints for resgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .builder import ResourcesBuilder
from .config import ConfigError
from .discovery import ManifestError
from .generators import LocalizationError
from .logging import configure_logging
from .project import ProjectFiles


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


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the Flutter project root (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resgen",
        description="Generate typed Dart accessors for project assets and strings.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Generate r.dart from pubspec.yaml and r_options.yaml.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    _add_path_argument(build_parser)
    build_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated file instead of writing it.",
    )
    build_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when r_options.yaml is invalid instead of skipping generation.",
    )

    outputs_parser = subparsers.add_parser(
        "outputs",
        help="Print the generated file path declared to the host build system.",
    )
    _add_verbose_option(outputs_parser, suppress_default=True)
    _add_path_argument(outputs_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for resgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        files = ProjectFiles(args.path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")

    builder = ResourcesBuilder(files)

    if args.command == "build":
        dry_run = bool(getattr(args, "dry_run", False))
        try:
            outcome = builder.build(
                dry_run=dry_run,
                strict=bool(getattr(args, "strict", False)),
            )
        except ConfigError as exc:
            parser.exit(1, f"resgen build failed: {exc}\n")
        except (ManifestError, LocalizationError) as exc:
            parser.exit(1, f"resgen build failed: {exc}\nRun with --verbose for more details.\n")
        if outcome is None:
            print("Nothing generated")
        elif dry_run:
            sys.stdout.write(outcome.content)
        else:
            print(f"Generated {_relativize(outcome.path)}")
    elif args.command == "outputs":
        try:
            outputs = builder.declared_outputs()
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        for output in outputs:
            print(output)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
