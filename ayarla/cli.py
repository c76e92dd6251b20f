"""Command line interface for managing dotfiles."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from ayarla.linker import link_manifest
from ayarla.preflight import PreflightError, checks

_VERSION = "0.1.0"

_DESCRIPTION = (
    "ayarla manages your dotfiles/settings.\n\n"
    "It links the files listed in the manifest.toml of a settings directory "
    "into your home directory."
)


def home_from_env() -> Path:
    """Return the home directory named by the HOME environment variable."""
    home = os.environ.get("HOME")
    if home is None:
        raise RuntimeError("environment variable not found: HOME")
    return Path(home)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``ayarla`` command."""
    parser = argparse.ArgumentParser(
        prog="ayarla",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")
    bootstrap = subparsers.add_parser(
        "bootstrap",
        aliases=["lan"],
        help="Bootstraps everything in your manifest within your settings directory",
    )
    bootstrap.set_defaults(command="bootstrap")
    bootstrap.add_argument("-s", "--settings-directory", required=True)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return the exit code."""
    try:
        home = home_from_env()
    except RuntimeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    args = build_parser().parse_args(argv)
    try:
        if args.command == "bootstrap":
            settings_dir_path, manifest = checks(args.settings_directory)
            link_manifest(home, settings_dir_path, manifest)
    except (PreflightError, OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())