"""abi-bindgen: ABI bindings from compiled contract artifacts.

This package provides:
- load_artifact: Read a compiled artifact and extract its ABI
- render_binding: Serialize an ABI into a TypeScript or Python constant
- convert / generate_binding: Artifact file in, binding file out
- BindingRunner: Primary-then-fallback generation over a target list
"""

from __future__ import annotations

__version__ = "0.1.0"

from abi_bindgen.artifact import Artifact, load_artifact
from abi_bindgen.converter import DEFAULT_OUTPUT_DIR, convert, generate_binding
from abi_bindgen.errors import (
    ArtifactError,
    ArtifactNotFoundError,
    ArtifactParseError,
    BindgenError,
    BindingNameError,
    BindingWriteError,
    ConfigurationError,
    MissingAbiError,
)
from abi_bindgen.models import (
    CandidateAttempt,
    CandidateOutcome,
    GenerationReport,
    TargetResult,
    TargetStatus,
)
from abi_bindgen.render import constant_name, render_binding
from abi_bindgen.runner import BindingRunner
from abi_bindgen.targets import DEFAULT_TARGETS, BindgenConfig, BindingTarget, default_config

__all__ = [
    "__version__",
    # Conversion
    "Artifact",
    "load_artifact",
    "render_binding",
    "constant_name",
    "convert",
    "generate_binding",
    "DEFAULT_OUTPUT_DIR",
    # Orchestration
    "BindingRunner",
    "BindingTarget",
    "BindgenConfig",
    "DEFAULT_TARGETS",
    "default_config",
    "GenerationReport",
    "TargetResult",
    "TargetStatus",
    "CandidateAttempt",
    "CandidateOutcome",
    # Errors
    "BindgenError",
    "ArtifactError",
    "ArtifactNotFoundError",
    "ArtifactParseError",
    "MissingAbiError",
    "BindingNameError",
    "BindingWriteError",
    "ConfigurationError",
]
