"""Build every enabled target in list order, one at a time, and report the outcome.

Policies:
- fail-fast (default): stop at the first failed target.
- keep-going: attempt every enabled target, then fail if any failed.

A missing toolchain aborts the run under either policy. Failed targets are
never retried.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import NamedTuple

from crossrelease_tooling.build.toolchain import (
    build_command,
    invoke_build,
    resolve_toolchain,
    toolchain_name,
)
from crossrelease_tooling.errors import (
    TargetConfigError,
    ToolchainInvocationFailure,
    ToolchainNotAvailableError,
)
from crossrelease_tooling.helpers import find_cargo_manifest, format_command
from crossrelease_tooling.targets import (
    FAIL_FAST,
    POLICIES,
    TargetEntry,
    enabled_targets,
    resolve_config,
    select_targets,
)

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BUILD_FAILED = 1
EXIT_CONFIG_ERROR = 2
EXIT_TOOLCHAIN_MISSING = 127


class TargetResult(NamedTuple):
    triple: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class BuildReport:
    """Outcome of one run: attempted targets in order, and the policy used."""

    def __init__(self, policy: str, results: list[TargetResult] | None = None) -> None:
        self.policy = policy
        self.results: list[TargetResult] = list(results or [])

    @property
    def attempted(self) -> list[str]:
        return [r.triple for r in self.results]

    @property
    def failed(self) -> list[str]:
        return [r.triple for r in self.results if not r.ok]

    @property
    def succeeded(self) -> list[str]:
        return [r.triple for r in self.results if r.ok]

    @property
    def state(self) -> str:
        return "failed" if self.failed else "succeeded"

    @property
    def exit_code(self) -> int:
        return EXIT_BUILD_FAILED if self.failed else EXIT_OK

    def raise_for_failures(self) -> None:
        """Raise ToolchainInvocationFailure naming every failed target, if any."""
        if self.failed:
            raise ToolchainInvocationFailure(self.failed)


def run_targets(
    entries: list[TargetEntry] | tuple[TargetEntry, ...],
    builder: Callable[[str], int],
    policy: str = FAIL_FAST,
) -> BuildReport:
    """Call builder(triple) for each enabled entry in order; builder returns an exit code.

    Disabled entries are skipped without any call. ToolchainNotAvailableError from
    builder propagates immediately regardless of policy.
    """
    if policy not in POLICIES:
        msg = f"Unknown policy {policy!r}; expected one of {', '.join(POLICIES)}"
        raise ValueError(msg)
    report = BuildReport(policy)
    for entry in entries:
        if not entry.enabled:
            continue
        rc = builder(entry.triple)
        report.results.append(TargetResult(entry.triple, rc))
        if rc != 0:
            log.debug("Target %s exited with %s", entry.triple, rc)
            if policy == FAIL_FAST:
                break
    return report


def _print_summary(report: BuildReport, skipped: list[str]) -> None:
    print("")
    print("Summary:")
    for r in report.results:
        mark = "✅" if r.ok else "❌"
        suffix = "" if r.ok else f" (exit {r.returncode})"
        print(f"  {mark} {r.triple}{suffix}")
    for triple in skipped:
        print(f"  ⏭️  {triple} (not attempted)")


def run(
    project_root: Path,
    config_path: Path | None = None,
    only: list[str] | None = None,
    skip: list[str] | None = None,
    policy: str | None = None,
    toolchain: str | None = None,
    release: bool = True,
    extra_args: list[str] | None = None,
    dry_run: bool = False,
) -> int:
    """Resolve config and targets, build each enabled target, print a summary. Returns exit code.

    0: all enabled targets built. 1: at least one target failed.
    2: bad config, policy, target name, or project root. 127: toolchain not available.
    """
    if not project_root.is_dir():
        print(f"❌ Project root is not a directory: {project_root}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    if not os.access(project_root, os.R_OK | os.X_OK):
        print(f"❌ Project root is not accessible: {project_root}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        cfg = resolve_config(project_root, config_path)
        entries = select_targets(cfg.targets, only=only, skip=skip)
    except TargetConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    policy = policy or cfg.policy
    if policy not in POLICIES:
        print(f"❌ Unknown policy: {policy}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    triples = enabled_targets(entries)
    name = toolchain_name(toolchain, cfg.toolchain)

    if dry_run:
        for triple in triples:
            cmd = build_command(name, triple, release=release, extra_args=extra_args)
            print(format_command(cmd))
        return EXIT_OK

    if not triples:
        print("Info:  No enabled targets; nothing to build.")
        return EXIT_OK

    try:
        toolchain_path = resolve_toolchain(name)
    except ToolchainNotAvailableError as e:
        print(f"❌ {e}. Install it or pass --toolchain.", file=sys.stderr)
        return EXIT_TOOLCHAIN_MISSING

    if find_cargo_manifest(project_root) is None:
        log.warning("No Cargo.toml in %s; the toolchain may fail for every target", project_root)

    mode = "release" if release else "debug"
    print(f"🔨 Building {len(triples)} target(s) with {name} ({mode}, {policy})")

    def builder(triple: str) -> int:
        print(f"🔨 {triple}")
        return invoke_build(
            toolchain_path,
            triple,
            release=release,
            project_root=project_root,
            extra_args=extra_args,
        )

    try:
        report = run_targets(entries, builder, policy=policy)
    except ToolchainNotAvailableError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_TOOLCHAIN_MISSING

    _print_summary(report, [t for t in triples if t not in report.attempted])
    try:
        report.raise_for_failures()
    except ToolchainInvocationFailure as e:
        print(f"❌ {e}", file=sys.stderr)
        return report.exit_code
    print(f"✅ Built {len(report.succeeded)} target(s)")
    return report.exit_code
