"""Cross toolchain resolution and per-target invocation.

The toolchain is an opaque command accepting `build [--release] --target <triple>`
(cross by default; cargo or cargo-zigbuild style wrappers work the same way).
Override with the config `toolchain:` key, --toolchain, or CROSSRELEASE_TOOLCHAIN.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from crossrelease_tooling.errors import ToolchainNotAvailableError
from crossrelease_tooling.targets.config import DEFAULT_TOOLCHAIN

log = logging.getLogger(__name__)

TOOLCHAIN_ENV = "CROSSRELEASE_TOOLCHAIN"


def toolchain_name(explicit: str | None = None, configured: str | None = None) -> str:
    """Pick the toolchain command: explicit flag, then env, then config, then 'cross'."""
    return explicit or os.environ.get(TOOLCHAIN_ENV) or configured or DEFAULT_TOOLCHAIN


def resolve_toolchain(name: str) -> str:
    """Return the absolute path of the toolchain binary. Raises ToolchainNotAvailableError."""
    path = shutil.which(name)
    if not path:
        raise ToolchainNotAvailableError(name, "not found in PATH")
    log.debug("Resolved toolchain %s -> %s", name, path)
    return path


def build_command(
    toolchain: str,
    target: str,
    release: bool = True,
    extra_args: list[str] | None = None,
) -> list[str]:
    """Command line for one target: <toolchain> build [--release] --target <triple> [extra...]."""
    cmd = [toolchain, "build"]
    if release:
        cmd.append("--release")
    cmd += ["--target", target]
    if extra_args:
        cmd += extra_args
    return cmd


def invoke_build(
    toolchain: str,
    target: str,
    release: bool = True,
    project_root: Path | None = None,
    extra_args: list[str] | None = None,
) -> int:
    """Run one target build and wait for it. Returns the child's exit code.

    No timeout: the call blocks until the toolchain exits. stdio is inherited.
    """
    cmd = build_command(toolchain, target, release=release, extra_args=extra_args)
    log.debug("Running %s (cwd=%s)", cmd, project_root)
    cwd = str(project_root) if project_root else None
    try:
        r = subprocess.run(cmd, cwd=cwd)
    except (FileNotFoundError, PermissionError) as e:
        # chdir failures name the cwd; only exec failures mean the toolchain is unusable.
        if cwd is not None and e.filename == cwd:
            raise
        raise ToolchainNotAvailableError(toolchain, str(e)) from e
    return r.returncode
