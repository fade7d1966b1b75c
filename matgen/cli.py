"""CLI entrypoints for matgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import MatgenError
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


def _add_project_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the component library root (defaults to current directory).",
    )
    parser.add_argument(
        "-l",
        "--locale",
        dest="locales",
        action="append",
        default=None,
        help="Documentation locale to read; repeat to merge several (first is primary).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matgen",
        description="Generate low-code editor materials from component documentation.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print warnings and errors to the console.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write detailed logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Build material JSON files for every documented component.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_project_options(generate_parser)
    generate_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Directory for material files (overrides .matgen.yml).",
    )
    generate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build materials and list target files without writing them.",
    )

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Show how extracted tags map to documented components.",
    )
    _add_verbose_option(resolve_parser, suppress_default=True)
    _add_project_options(resolve_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for matgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
    )

    orchestrator = Orchestrator()

    if args.command == "generate":
        try:
            outcome = orchestrator.run(
                args.path,
                locales=args.locales,
                output_dir=args.output,
                dry_run=bool(args.dry_run),
            )
        except MatgenError as exc:
            parser.exit(1, f"matgen generate failed: {exc}\nRun with --verbose for more details.\n")
        if outcome.dry_run:
            print(f"{len(outcome.written)} materials would be written (dry-run):")
            for path in outcome.written:
                print(f"  {_relativize(path)}")
        else:
            print(f"{len(outcome.written)} materials written")
        if outcome.unresolved:
            print(f"Unresolved tags: {', '.join(outcome.unresolved)}")
    elif args.command == "resolve":
        try:
            result = orchestrator.resolve(args.path, locales=args.locales)
        except MatgenError as exc:
            parser.exit(1, f"matgen resolve failed: {exc}\nRun with --verbose for more details.\n")
        for resolution in result.resolutions:
            print(f"{resolution.tag}\t{resolution.component.title}\t{resolution.strategy}")
        for tag in result.unresolved:
            print(f"{tag}\t-\tunresolved")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
