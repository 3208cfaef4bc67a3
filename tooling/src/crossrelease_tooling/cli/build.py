"""`crossrelease build` — build every enabled target with the cross toolchain."""

import sys
from pathlib import Path

from crossrelease_tooling.build import FAIL_FAST, KEEP_GOING
from crossrelease_tooling.build import run as run_build


def run_build_argv(argv: list[str] | None = None) -> None:
    """Parse argv and run the release build. Arguments after `--` go to the toolchain."""
    import argparse

    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []  # skip 'crossrelease build'
    extra: list[str] = []
    if "--" in argv:
        sep = argv.index("--")
        argv, extra = argv[:sep], argv[sep + 1 :]

    ap = argparse.ArgumentParser(
        prog="crossrelease build",
        description="Build release artifacts for each enabled target, in order",
    )
    ap.add_argument(
        "--project-root",
        type=Path,
        default=Path.cwd(),
        help="Project root; toolchain runs here (default: cwd)",
    )
    ap.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Release config (default: <project-root>/release-targets.yaml if present)",
    )
    ap.add_argument(
        "--target",
        dest="only",
        action="append",
        default=None,
        metavar="TRIPLE",
        help="Build only this target (repeatable)",
    )
    ap.add_argument(
        "--skip",
        action="append",
        default=None,
        metavar="TRIPLE",
        help="Do not build this target (repeatable)",
    )
    policy = ap.add_mutually_exclusive_group()
    policy.add_argument(
        "--keep-going",
        dest="policy",
        action="store_const",
        const=KEEP_GOING,
        help="Attempt every target, report all failures at the end",
    )
    policy.add_argument(
        "--fail-fast",
        dest="policy",
        action="store_const",
        const=FAIL_FAST,
        help="Stop at the first failed target (default)",
    )
    ap.add_argument("--toolchain", default=None, help="Toolchain command (default: cross)")
    ap.add_argument("--debug", action="store_true", help="Build without --release")
    ap.add_argument("--dry-run", action="store_true", help="Print commands, run nothing")
    args = ap.parse_args(argv)

    rc = run_build(
        args.project_root.resolve(),
        config_path=args.config,
        only=args.only,
        skip=args.skip,
        policy=args.policy,
        toolchain=args.toolchain,
        release=not args.debug,
        extra_args=extra or None,
        dry_run=args.dry_run,
    )
    sys.exit(rc)
