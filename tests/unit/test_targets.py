"""Unit tests for binding targets and configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from abi_bindgen.errors import ConfigurationError
from abi_bindgen.targets import DEFAULT_TARGETS, BindgenConfig, BindingTarget, default_config


class TestBindingTarget:
    """Tests for BindingTarget."""

    def test_candidates_primary_first(self) -> None:
        """Candidates list the primary path before fallbacks, in order."""
        target = BindingTarget(
            name="PoolManager",
            output="PoolManagerAbi.ts",
            primary="a.json",
            fallbacks=("b.json", "c.json"),
        )
        assert target.candidates == ("a.json", "b.json", "c.json")

    def test_export_name(self) -> None:
        """The export name is the output stem."""
        target = BindingTarget(name="T", output="TokenFactoryAbi.ts", primary="a.json")
        assert target.export_name == "TokenFactoryAbi"

    def test_rejects_invalid_output(self) -> None:
        """Outputs that cannot become a binding fail validation."""
        with pytest.raises(ValidationError, match="unsupported suffix"):
            BindingTarget(name="T", output="TokenFactoryAbi.json", primary="a.json")

    def test_rejects_unknown_fields(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            BindingTarget(name="T", output="A.ts", primary="a.json", extra="x")  # type: ignore[call-arg]


class TestDefaultTargets:
    """Tests for the built-in worklist."""

    def test_default_outputs(self) -> None:
        """TokenFactory and PoolManager bindings are generated by default."""
        assert [t.output for t in DEFAULT_TARGETS] == ["TokenFactoryAbi.ts", "PoolManagerAbi.ts"]

    def test_token_factory_primary(self) -> None:
        """TokenFactory comes from the project's own forge output."""
        assert DEFAULT_TARGETS[0].primary == "out/TokenFactory.sol/TokenFactory.json"
        assert DEFAULT_TARGETS[0].fallbacks == ()

    def test_pool_manager_fallback_order(self) -> None:
        """PoolManager fallbacks are tried in declared order."""
        pool = DEFAULT_TARGETS[1]
        assert pool.candidates == (
            "lib/hookmate/src/artifacts/V4PoolManager.sol",
            "lib/uniswap-hooks/lib/v4-core/out/PoolManager.sol/PoolManager.json",
            "out/PoolManager.sol/PoolManager.json",
            "lib/hookmate/src/artifacts/V4PoolManagerDeployer.sol",
        )
        assert pool.hint is not None
        assert "forge build" in pool.hint

    def test_default_config(self) -> None:
        """The default config writes to abis/."""
        config = default_config()
        assert config.output_dir == "abis"
        assert config.targets == DEFAULT_TARGETS


class TestBindgenConfigFromYaml:
    """Tests for BindgenConfig.from_yaml()."""

    def test_loads_targets(self, tmp_path: Path) -> None:
        """Targets and output_dir are read from YAML."""
        path = tmp_path / "bindgen.yaml"
        path.write_text(
            "output_dir: src/abis\n"
            "targets:\n"
            "  - name: BondingCurve\n"
            "    output: BondingCurveAbi.ts\n"
            "    primary: out/BondingCurve.sol/BondingCurve.json\n"
            "    fallbacks:\n"
            "      - artifacts/BondingCurve.json\n"
        )
        config = BindgenConfig.from_yaml(path)
        assert config.output_dir == "src/abis"
        assert len(config.targets) == 1
        assert config.targets[0].fallbacks == ("artifacts/BondingCurve.json",)

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        """An empty file keeps the built-in targets."""
        path = tmp_path / "bindgen.yaml"
        path.write_text("")
        assert BindgenConfig.from_yaml(path) == default_config()

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="not found"):
            BindgenConfig.from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """YAML syntax errors raise ConfigurationError."""
        path = tmp_path / "bindgen.yaml"
        path.write_text("targets: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            BindgenConfig.from_yaml(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        """A top-level list is rejected."""
        path = tmp_path / "bindgen.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            BindgenConfig.from_yaml(path)

    def test_validation_error_names_field(self, tmp_path: Path) -> None:
        """Validation failures point at the offending field."""
        path = tmp_path / "bindgen.yaml"
        path.write_text("targets:\n  - name: A\n    output: A.ts\n")
        with pytest.raises(ConfigurationError) as exc_info:
            BindgenConfig.from_yaml(path)
        assert exc_info.value.field_path == "targets.0.primary"

    def test_duplicate_outputs_rejected(self, tmp_path: Path) -> None:
        """Two targets cannot write the same binding."""
        path = tmp_path / "bindgen.yaml"
        path.write_text(
            "targets:\n"
            "  - {name: A, output: X.ts, primary: a.json}\n"
            "  - {name: B, output: X.ts, primary: b.json}\n"
        )
        with pytest.raises(ConfigurationError, match="duplicate output"):
            BindgenConfig.from_yaml(path)


class TestWithOutputDir:
    """Tests for overriding the bindings directory."""

    def test_replaces_output_dir(self) -> None:
        """The copy keeps the targets and swaps the directory."""
        config = default_config().with_output_dir("web/src/abis")
        assert config.output_dir == "web/src/abis"
        assert config.targets == DEFAULT_TARGETS

    def test_empty_output_dir_rejected(self) -> None:
        """An empty directory fails validation like a config file would."""
        with pytest.raises(ConfigurationError) as exc_info:
            default_config().with_output_dir("")
        assert exc_info.value.field_path == "output_dir"
        assert exc_info.value.file_path is None
