"""Pytest fixtures for crossrelease tooling tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _no_toolchain_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CROSSRELEASE_TOOLCHAIN / CROSSRELEASE_LOG from the outer shell out of tests."""
    monkeypatch.delenv("CROSSRELEASE_TOOLCHAIN", raising=False)
    monkeypatch.delenv("CROSSRELEASE_LOG", raising=False)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write release-targets.yaml under tmp_path. Returns its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "release-targets.yaml"
        path.write_text(text)
        return path

    return _write


class RecordingBuilder:
    """Fake builder: records each triple, returns the configured exit code (default 0)."""

    def __init__(self, codes: dict[str, int] | None = None) -> None:
        self.codes = codes or {}
        self.calls: list[str] = []

    def __call__(self, triple: str) -> int:
        self.calls.append(triple)
        return self.codes.get(triple, 0)


@pytest.fixture
def recording_builder() -> type[RecordingBuilder]:
    return RecordingBuilder
