"""CLI entrypoints for docbuild commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .builder import run_build
from .config import ConfigError, load_config
from .errors import BuildError
from .logging import configure_logging


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Also log copied files and directory traversal.",
    }
    kwargs["default"] = argparse.SUPPRESS if suppress_default else False
    parser.add_argument("-v", "--verbose", **kwargs)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docbuild",
        description="Build HTML documentation pages from a tree of Markdown files.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Convert the source tree into HTML pages with JSON metadata.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    build_parser.add_argument(
        "--config",
        default=".",
        help="Path to .docbuild.yml or the directory holding it (defaults to current directory).",
    )
    build_parser.add_argument("--source", help="Source directory of Markdown files.")
    build_parser.add_argument("--output", help="Destination directory for built pages.")
    build_parser.add_argument(
        "--base-url",
        dest="source_base_url",
        help="Prefix of the sourceFile link written into page metadata.",
    )
    build_parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write log lines to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docbuild commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=getattr(args, "log_file", None),
    )

    if args.command == "build":
        try:
            config = load_config(Path(args.config)).with_overrides(
                source_dir=args.source,
                output_dir=args.output,
                source_base_url=args.source_base_url,
            )
            summary = run_build(config)
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        except (BuildError, OSError) as exc:
            parser.exit(1, f"docbuild build failed: {exc}\nRun with --verbose for more details.\n")
        print(
            f"Built {summary.pages} pages and {summary.assets} files into "
            f"{_relativize(summary.output_dir)}"
        )
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
