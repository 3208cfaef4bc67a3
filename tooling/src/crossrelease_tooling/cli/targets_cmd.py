"""`crossrelease targets` and `crossrelease init`."""

from __future__ import annotations

import sys
from pathlib import Path

from crossrelease_tooling.errors import TargetConfigError
from crossrelease_tooling.targets import DEFAULT_CONFIG_NAME, resolve_config, write_default_config


def run_targets_argv(argv: list[str] | None = None) -> None:
    """List enabled targets, one per line. --all lists every entry with its status."""
    import argparse

    if argv is None:
        argv = sys.argv[2:]
    ap = argparse.ArgumentParser(
        prog="crossrelease targets",
        description="List the targets `crossrelease build` would build",
    )
    ap.add_argument(
        "--project-root",
        type=Path,
        default=Path.cwd(),
        help="Project root (default: cwd)",
    )
    ap.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Release config (default: <project-root>/release-targets.yaml if present)",
    )
    ap.add_argument("--all", action="store_true", help="Include disabled targets, with status")
    args = ap.parse_args(argv)

    try:
        cfg = resolve_config(args.project_root.resolve(), args.config)
    except TargetConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(2)
    for entry in cfg.targets:
        if args.all:
            print(f"{entry.triple}\t{'enabled' if entry.enabled else 'disabled'}")
        elif entry.enabled:
            print(entry.triple)
    sys.exit(0)


def run_init_argv(argv: list[str] | None = None) -> None:
    """Write release-targets.yaml with the built-in defaults. --force overwrites."""
    import argparse

    if argv is None:
        argv = sys.argv[2:]
    ap = argparse.ArgumentParser(
        prog="crossrelease init",
        description=f"Write {DEFAULT_CONFIG_NAME} with the default target list",
    )
    ap.add_argument(
        "--project-root",
        type=Path,
        default=Path.cwd(),
        help="Project root (default: cwd)",
    )
    ap.add_argument("--force", action="store_true", help="Overwrite an existing config")
    args = ap.parse_args(argv)

    path = args.project_root.resolve() / DEFAULT_CONFIG_NAME
    if not write_default_config(path, force=args.force):
        print(f"❌ {path} already exists (use --force to overwrite)", file=sys.stderr)
        sys.exit(1)
    print(f"✅ Wrote {path}")
    sys.exit(0)
