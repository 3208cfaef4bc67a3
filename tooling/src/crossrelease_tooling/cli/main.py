"""Main CLI entry point for crossrelease."""

from __future__ import annotations

import logging
import os
import sys

from crossrelease_tooling.cli import build as build_cli
from crossrelease_tooling.cli import targets_cmd

LOG_ENV = "CROSSRELEASE_LOG"


def configure_logging(verbose: bool = False) -> None:
    """Root logging: DEBUG with -v, else level from CROSSRELEASE_LOG, else WARNING."""
    level = logging.WARNING
    env_level = os.environ.get(LOG_ENV, "").strip().upper()
    if verbose:
        level = logging.DEBUG
    elif env_level:
        level = logging.getLevelName(env_level)
        if not isinstance(level, int):
            print(f"Warning: ignoring invalid {LOG_ENV}={env_level}", file=sys.stderr)
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _usage() -> None:
    print("Usage: crossrelease [-v] <command> [args...]", file=sys.stderr)
    print("Commands:", file=sys.stderr)
    print(
        "  build    - Build every enabled target in order (cross build --release --target T)",
        file=sys.stderr,
    )
    print("  targets  - List the configured targets", file=sys.stderr)
    print("  init     - Write release-targets.yaml with the default target list", file=sys.stderr)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]
    # Everything after "--" belongs to the toolchain, -v included.
    sep = argv.index("--") if "--" in argv else len(argv)
    head, tail = argv[:sep], argv[sep:]
    verbose = any(a in ("-v", "--verbose") for a in head)
    argv = [a for a in head if a not in ("-v", "--verbose")] + tail
    configure_logging(verbose)

    if not argv:
        _usage()
        sys.exit(1)

    command, rest = argv[0], argv[1:]
    if command == "build":
        build_cli.run_build_argv(rest)
    elif command == "targets":
        targets_cmd.run_targets_argv(rest)
    elif command == "init":
        targets_cmd.run_init_argv(rest)
    elif command in ("-h", "--help", "help"):
        _usage()
        sys.exit(0)
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        _usage()
        sys.exit(1)


if __name__ == "__main__":
    main()
