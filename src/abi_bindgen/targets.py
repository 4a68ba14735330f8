"""Binding targets and configuration.

A target names one contract, the binding file to produce, and the artifact
locations to try, primary first. The default worklist covers the project's
own TokenFactory build and the Uniswap v4 PoolManager shipped with the
vendored libraries. A YAML file can replace it:

    output_dir: abis
    targets:
      - name: TokenFactory
        output: TokenFactoryAbi.ts
        primary: out/TokenFactory.sol/TokenFactory.json
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from abi_bindgen.converter import DEFAULT_OUTPUT_DIR
from abi_bindgen.errors import BindingNameError, ConfigurationError
from abi_bindgen.render import constant_name


class BindingTarget(BaseModel):
    """One binding to generate.

    Attributes:
        name: Logical contract name (e.g. "PoolManager").
        output: Binding file name; its stem becomes the constant name.
        primary: Preferred artifact path, relative to the project root.
        fallbacks: Artifact paths tried in order when the primary fails.
        hint: Guidance shown when no candidate produced a binding.

    Example:
        >>> target = BindingTarget(
        ...     name="TokenFactory",
        ...     output="TokenFactoryAbi.ts",
        ...     primary="out/TokenFactory.sol/TokenFactory.json",
        ... )
        >>> target.candidates
        ('out/TokenFactory.sol/TokenFactory.json',)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Logical contract name")
    output: str = Field(..., min_length=1, description="Binding file name")
    primary: str = Field(..., min_length=1, description="Primary artifact path")
    fallbacks: tuple[str, ...] = Field(default=(), description="Fallback artifact paths")
    hint: str | None = Field(default=None, description="Guidance when all candidates fail")

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: str) -> str:
        """Reject output names that cannot become a binding."""
        try:
            constant_name(v)
        except BindingNameError as e:
            raise ValueError(e.reason) from e
        return v

    @property
    def candidates(self) -> tuple[str, ...]:
        """Artifact paths in the order they are tried."""
        return (self.primary, *self.fallbacks)

    @property
    def export_name(self) -> str:
        """Name of the constant exported by the binding."""
        return constant_name(self.output)


DEFAULT_TARGETS: tuple[BindingTarget, ...] = (
    BindingTarget(
        name="TokenFactory",
        output="TokenFactoryAbi.ts",
        primary="out/TokenFactory.sol/TokenFactory.json",
        hint="Try running: forge build",
    ),
    BindingTarget(
        name="PoolManager",
        output="PoolManagerAbi.ts",
        primary="lib/hookmate/src/artifacts/V4PoolManager.sol",
        fallbacks=(
            "lib/uniswap-hooks/lib/v4-core/out/PoolManager.sol/PoolManager.json",
            "out/PoolManager.sol/PoolManager.json",
            "lib/hookmate/src/artifacts/V4PoolManagerDeployer.sol",
        ),
        hint="Try running: cd lib/uniswap-hooks/lib/v4-core && forge build",
    ),
)


class BindgenConfig(BaseModel):
    """Worklist for a generation run.

    Attributes:
        output_dir: Bindings directory, relative to the project root.
        targets: Targets processed in order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    output_dir: str = Field(default=DEFAULT_OUTPUT_DIR, min_length=1, description="Bindings dir")
    targets: tuple[BindingTarget, ...] = Field(
        default=DEFAULT_TARGETS, description="Targets processed in order"
    )

    @field_validator("targets")
    @classmethod
    def validate_unique_outputs(cls, v: tuple[BindingTarget, ...]) -> tuple[BindingTarget, ...]:
        """Two targets writing the same file would overwrite each other."""
        seen: set[str] = set()
        for target in v:
            if target.output in seen:
                raise ValueError(f"duplicate output '{target.output}'")
            seen.add(target.output)
        return v

    @classmethod
    def from_yaml(cls, path: str | Path) -> BindgenConfig:
        """Load and validate a configuration file.

        Args:
            path: Path to the YAML file.

        Returns:
            Validated BindgenConfig. Missing keys keep their defaults.

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML,
                or fails validation.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError("Configuration file not found", file_path=str(path))

        try:
            with path.open("r", encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                "Invalid YAML", file_path=str(path), internal_details=str(e)
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration must be a mapping", file_path=str(path))

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise _configuration_error(e, file_path=str(path)) from e

    def with_output_dir(self, output_dir: str) -> BindgenConfig:
        """Return a copy writing bindings to ``output_dir``.

        Raises:
            ConfigurationError: If ``output_dir`` is not a valid directory setting.
        """
        try:
            return type(self).model_validate({**self.model_dump(), "output_dir": output_dir})
        except ValidationError as e:
            raise _configuration_error(e) from e


def _configuration_error(
    err: ValidationError, *, file_path: str | None = None
) -> ConfigurationError:
    first = err.errors()[0]
    field_path = ".".join(str(x) for x in first["loc"])
    return ConfigurationError(
        f"Invalid configuration: {first['msg']}",
        file_path=file_path,
        field_path=field_path or None,
        internal_details=str(err),
    )


def default_config() -> BindgenConfig:
    """Return the built-in worklist."""
    return BindgenConfig()
