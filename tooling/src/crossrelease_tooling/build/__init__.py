"""Sequential multi-target release builds through the cross toolchain."""

from crossrelease_tooling.targets import FAIL_FAST, KEEP_GOING, POLICIES

from .orchestrator import BuildReport, TargetResult, run, run_targets
from .toolchain import build_command, invoke_build, resolve_toolchain, toolchain_name

__all__ = [
    "FAIL_FAST",
    "KEEP_GOING",
    "POLICIES",
    "BuildReport",
    "TargetResult",
    "build_command",
    "invoke_build",
    "resolve_toolchain",
    "run",
    "run_targets",
    "toolchain_name",
]
