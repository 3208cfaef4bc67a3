"""Tests for crossrelease_tooling.targets.config."""

from pathlib import Path

import pytest
import yaml

from crossrelease_tooling.errors import TargetConfigError
from crossrelease_tooling.targets import (
    DEFAULT_TARGETS,
    TargetEntry,
    load_targets_config,
    parse_targets,
    resolve_config,
    write_default_config,
)


class TestParseTargets:
    def test_strings_and_mappings(self) -> None:
        out = parse_targets(
            [
                "x86_64-unknown-linux-gnu",
                {"triple": "aarch64-apple-darwin", "enabled": False},
                {"triple": "x86_64-pc-windows-gnu"},
            ]
        )
        assert out == [
            TargetEntry("x86_64-unknown-linux-gnu", True),
            TargetEntry("aarch64-apple-darwin", False),
            TargetEntry("x86_64-pc-windows-gnu", True),
        ]

    def test_not_a_list_raises(self) -> None:
        with pytest.raises(TargetConfigError, match="must be a list"):
            parse_targets("x86_64-unknown-linux-gnu")

    def test_duplicate_triple_raises(self) -> None:
        with pytest.raises(TargetConfigError, match="Duplicate target triple"):
            parse_targets(["a", {"triple": "a", "enabled": False}])

    def test_empty_triple_raises(self) -> None:
        with pytest.raises(TargetConfigError, match=r"targets\[1\]"):
            parse_targets(["a", "  "])

    def test_padded_triple_rejected_not_stripped(self) -> None:
        with pytest.raises(TargetConfigError, match="leading or trailing whitespace"):
            parse_targets([" x86_64-unknown-linux-gnu"])

    def test_non_bool_enabled_raises(self) -> None:
        with pytest.raises(TargetConfigError, match="'enabled' must be true or false"):
            parse_targets([{"triple": "a", "enabled": "no"}])

    def test_wrong_item_type_raises(self) -> None:
        with pytest.raises(TargetConfigError, match="expected a string or mapping"):
            parse_targets([42])


class TestLoadTargetsConfig:
    def test_loads_all_keys(self, write_config) -> None:
        path = write_config(
            "toolchain: cargo\npolicy: keep-going\ntargets:\n  - a\n  - triple: b\n    enabled: false\n"
        )
        cfg = load_targets_config(path)
        assert cfg.toolchain == "cargo"
        assert cfg.policy == "keep-going"
        assert cfg.targets == [TargetEntry("a"), TargetEntry("b", False)]
        assert cfg.source == path

    def test_defaults_for_optional_keys(self, write_config) -> None:
        cfg = load_targets_config(write_config("targets: [a]\n"))
        assert cfg.toolchain == "cross"
        assert cfg.policy == "fail-fast"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(TargetConfigError, match="Config not found"):
            load_targets_config(tmp_path / "nope.yaml")

    def test_invalid_yaml_raises(self, write_config) -> None:
        with pytest.raises(TargetConfigError, match="Could not parse"):
            load_targets_config(write_config("targets: [a\n"))

    def test_missing_targets_raises(self, write_config) -> None:
        with pytest.raises(TargetConfigError, match="missing 'targets'"):
            load_targets_config(write_config("toolchain: cross\n"))

    def test_bad_policy_raises(self, write_config) -> None:
        with pytest.raises(TargetConfigError, match="'policy' must be one of"):
            load_targets_config(write_config("policy: sometimes\ntargets: [a]\n"))

    def test_policy_names_shared_with_orchestrator(self, write_config) -> None:
        from crossrelease_tooling.build import POLICIES

        for policy in POLICIES:
            cfg = load_targets_config(write_config(f"policy: {policy}\ntargets: [a]\n"))
            assert cfg.policy == policy


class TestResolveConfig:
    def test_defaults_when_no_file(self, tmp_path: Path) -> None:
        cfg = resolve_config(tmp_path)
        assert cfg.targets == list(DEFAULT_TARGETS)
        assert cfg.source is None

    def test_picks_up_project_file(self, tmp_path: Path, write_config) -> None:
        write_config("targets: [only-one]\n")
        assert resolve_config(tmp_path).targets == [TargetEntry("only-one")]

    def test_relative_explicit_path_is_under_project_root(self, tmp_path: Path) -> None:
        (tmp_path / "ci").mkdir()
        (tmp_path / "ci" / "targets.yaml").write_text("targets: [x]\n")
        cfg = resolve_config(tmp_path, Path("ci/targets.yaml"))
        assert cfg.targets == [TargetEntry("x")]


class TestWriteDefaultConfig:
    def test_written_config_round_trips_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "release-targets.yaml"
        assert write_default_config(path) is True
        assert load_targets_config(path).targets == list(DEFAULT_TARGETS)
        data = yaml.safe_load(path.read_text())
        assert {"triple": "aarch64-apple-darwin", "enabled": False} in data["targets"]

    def test_refuses_overwrite_without_force(self, tmp_path: Path) -> None:
        path = tmp_path / "release-targets.yaml"
        path.write_text("targets: [mine]\n")
        assert write_default_config(path) is False
        assert path.read_text() == "targets: [mine]\n"
        assert write_default_config(path, force=True) is True
        assert "x86_64-unknown-linux-gnu" in path.read_text()
