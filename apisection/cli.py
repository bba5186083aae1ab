"""CLI entrypoints for apisection commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError
from .loader import InputError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Increase log verbosity for troubleshooting.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apisection",
        description="Render extracted type metadata into API reference markdown.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render",
        help="Render the Types section for an extraction output file.",
    )
    _add_verbose_option(render_parser, suppress_default=True)
    render_parser.add_argument("input", help="Path to the JSON type metadata.")
    render_parser.add_argument(
        "-o",
        "--output",
        help="Write to this file (replacing its managed block if present) instead of stdout.",
    )
    render_parser.add_argument(
        "--config",
        default=".",
        help="Path to .apisection.yml or the directory holding it (defaults to current directory).",
    )
    render_parser.add_argument("--title", help="Override the section heading.")

    serve_parser = subparsers.add_parser(
        "serve",
        help="Expose rendering over HTTP.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for apisection commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    if args.command == "render":
        try:
            orchestrator = Orchestrator.from_config_path(Path(args.config))
            outcome = orchestrator.run_render(
                Path(args.input),
                Path(args.output) if args.output else None,
                title=args.title,
            )
        except (ConfigError, InputError) as exc:
            parser.exit(1, f"{exc}\n")
        if outcome.path is None:
            sys.stdout.write(outcome.markdown)
        else:
            print(f"Types section written to {_relativize(outcome.path)}")
    elif args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
