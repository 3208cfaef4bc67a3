"""Release config loading (release-targets.yaml).

Config YAML format:
- targets: list of triples. Each item is either a string (enabled) or a mapping
  { triple: <str>, enabled: <bool, default true> }.
- toolchain (optional): build command, default "cross".
- policy (optional): fail-fast | keep-going, default fail-fast.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, NamedTuple

import yaml

from crossrelease_tooling.errors import TargetConfigError
from crossrelease_tooling.targets.model import (
    DEFAULT_TARGETS,
    FAIL_FAST,
    POLICIES,
    TargetEntry,
    check_triple,
)

log = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "release-targets.yaml"
DEFAULT_TOOLCHAIN = "cross"
DEFAULT_POLICY = FAIL_FAST


class ReleaseConfig(NamedTuple):
    targets: list[TargetEntry]
    toolchain: str = DEFAULT_TOOLCHAIN
    policy: str = DEFAULT_POLICY
    source: Path | None = None


def default_config() -> ReleaseConfig:
    return ReleaseConfig(targets=list(DEFAULT_TARGETS))


def _parse_entry(item: Any, index: int) -> TargetEntry:
    if isinstance(item, str):
        triple, enabled = item, True
    elif isinstance(item, dict):
        triple = item.get("triple")
        enabled = item.get("enabled", True)
        if not isinstance(enabled, bool):
            msg = f"targets[{index}]: 'enabled' must be true or false, got {enabled!r}"
            raise TargetConfigError(msg)
    else:
        msg = f"targets[{index}]: expected a string or mapping, got {type(item).__name__}"
        raise TargetConfigError(msg)
    return TargetEntry(check_triple(triple, f"targets[{index}]"), enabled)


def parse_targets(data: Any) -> list[TargetEntry]:
    """Parse the YAML 'targets' value into an ordered list of TargetEntry. Raises TargetConfigError."""
    if not isinstance(data, list):
        msg = "'targets' must be a list of target triples"
        raise TargetConfigError(msg)
    entries: list[TargetEntry] = []
    seen: set[str] = set()
    for i, item in enumerate(data):
        entry = _parse_entry(item, i)
        if entry.triple in seen:
            msg = f"Duplicate target triple: {entry.triple}"
            raise TargetConfigError(msg)
        seen.add(entry.triple)
        entries.append(entry)
    return entries


def load_targets_config(config_path: Path) -> ReleaseConfig:
    """Load and validate release config from YAML. Raises TargetConfigError."""
    if not config_path.is_file():
        msg = f"Config not found: {config_path}"
        raise TargetConfigError(msg)
    try:
        with config_path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        msg = f"Could not parse {config_path}: {e}"
        raise TargetConfigError(msg) from e
    if not isinstance(data, dict):
        msg = f"{config_path}: top level must be a mapping"
        raise TargetConfigError(msg)
    if "targets" not in data:
        msg = f"{config_path}: missing 'targets'"
        raise TargetConfigError(msg)

    toolchain = data.get("toolchain") or DEFAULT_TOOLCHAIN
    if not isinstance(toolchain, str):
        msg = f"{config_path}: 'toolchain' must be a string"
        raise TargetConfigError(msg)
    policy = data.get("policy") or DEFAULT_POLICY
    if policy not in POLICIES:
        msg = f"{config_path}: 'policy' must be one of {', '.join(POLICIES)}, got {policy!r}"
        raise TargetConfigError(msg)

    return ReleaseConfig(
        targets=parse_targets(data["targets"]),
        toolchain=toolchain,
        policy=policy,
        source=config_path,
    )


def resolve_config(project_root: Path, config_path: Path | None = None) -> ReleaseConfig:
    """Explicit config_path wins; else project_root/release-targets.yaml if present; else defaults."""
    if config_path is not None:
        path = config_path if config_path.is_absolute() else project_root / config_path
        return load_targets_config(path)
    candidate = project_root / DEFAULT_CONFIG_NAME
    if candidate.is_file():
        log.debug("Using release config %s", candidate)
        return load_targets_config(candidate)
    log.debug("No %s in %s; using built-in target list", DEFAULT_CONFIG_NAME, project_root)
    return default_config()


def render_default_config() -> str:
    """YAML text for the built-in defaults, disabled entries included."""
    data = {
        "toolchain": DEFAULT_TOOLCHAIN,
        "policy": DEFAULT_POLICY,
        "targets": [
            e.triple if e.enabled else {"triple": e.triple, "enabled": False}
            for e in DEFAULT_TARGETS
        ],
    }
    header = "# Targets built by `crossrelease build`, in order.\n"
    return header + yaml.safe_dump(data, sort_keys=False)


def write_default_config(path: Path, force: bool = False) -> bool:
    """Write the default config to path. Returns False (nothing written) if it exists and not force."""
    if path.exists() and not force:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_default_config())
    return True
