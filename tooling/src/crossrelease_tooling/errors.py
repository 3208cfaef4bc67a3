"""Errors raised by crossrelease_tooling. The CLI layer maps them to exit codes."""

from __future__ import annotations


class CrossReleaseError(Exception):
    """Base class for crossrelease errors."""


class TargetConfigError(CrossReleaseError):
    """Target list or release config is missing or malformed."""


class ToolchainNotAvailableError(CrossReleaseError):
    """The cross-compilation toolchain binary cannot be located or executed."""

    def __init__(self, toolchain: str, detail: str | None = None) -> None:
        self.toolchain = toolchain
        msg = f"Toolchain '{toolchain}' not available"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class ToolchainInvocationFailure(CrossReleaseError):
    """One or more target builds returned a non-zero status."""

    def __init__(self, failed: list[str]) -> None:
        self.failed = list(failed)
        super().__init__("Build failed for target(s): " + ", ".join(self.failed))
