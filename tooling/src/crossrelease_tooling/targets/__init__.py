"""Target list: ordered target triples with enabled flags, build policies, and release-targets.yaml loading."""

from .config import (
    DEFAULT_CONFIG_NAME,
    DEFAULT_POLICY,
    DEFAULT_TOOLCHAIN,
    ReleaseConfig,
    load_targets_config,
    parse_targets,
    resolve_config,
    write_default_config,
)
from .model import (
    DEFAULT_TARGETS,
    FAIL_FAST,
    KEEP_GOING,
    POLICIES,
    TargetEntry,
    check_triple,
    enabled_targets,
    select_targets,
)

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "DEFAULT_POLICY",
    "DEFAULT_TARGETS",
    "DEFAULT_TOOLCHAIN",
    "FAIL_FAST",
    "KEEP_GOING",
    "POLICIES",
    "ReleaseConfig",
    "TargetEntry",
    "check_triple",
    "enabled_targets",
    "load_targets_config",
    "parse_targets",
    "resolve_config",
    "select_targets",
    "write_default_config",
]
