"""CLI entry point for tasklist."""

import argparse
from pathlib import Path

from pydantic import ValidationError

from . import __version__
from .cli.output import error
from .config import Settings
from .logging import setup_logging
from .models import View


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="tasklist",
        description="Terminal task list backed by a key-value store",
    )
    parser.add_argument(
        "--storage",
        choices=["memory", "directory", "http"],
        default=None,
        help="Storage backend (default: directory)",
    )
    parser.add_argument(
        "--storage-dir",
        type=Path,
        default=None,
        help="Directory for the directory backend (default: ~/.local/share/tasklist)",
    )
    parser.add_argument(
        "--storage-url",
        default=None,
        help="Base URL of the key-value service for the http backend",
    )
    parser.add_argument(
        "--list",
        nargs="?",
        const=View.PENDING.value,
        default=None,
        choices=[v.value for v in View],
        metavar="VIEW",
        help="Print pending (default) or completed tasks and exit",
    )
    parser.add_argument(
        "--search",
        default="",
        help="Only list tasks whose title or description contains this text",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Build settings, letting CLI flags override env and config file."""
    settings_kwargs: dict = {}
    if args.storage:
        settings_kwargs["storage"] = args.storage
    if args.storage_dir:
        settings_kwargs["storage_dir"] = args.storage_dir
    if args.storage_url:
        settings_kwargs["storage_url"] = args.storage_url
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    try:
        settings = build_settings(args)
    except ValidationError as e:
        error(f"Invalid configuration: {e}")
        raise SystemExit(2) from e

    setup_logging(settings.verbose, settings.log_file)

    if args.list is not None:
        from .cli.list_tasks import run_list

        raise SystemExit(run_list(settings, View(args.list), args.search))

    # Import here so --list never pays for loading textual
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
