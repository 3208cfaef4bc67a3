"""Shared helpers for crossrelease_tooling (command text, project manifest lookup)."""

from __future__ import annotations

import shlex
from pathlib import Path


def format_command(cmd: list[str]) -> str:
    """Shell-quoted command line for display (dry-run, logs)."""
    return shlex.join(cmd)


def find_cargo_manifest(project_root: Path) -> Path | None:
    """project_root/Cargo.toml if it exists, else None."""
    manifest = project_root / "Cargo.toml"
    return manifest if manifest.is_file() else None
