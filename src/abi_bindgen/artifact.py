"""Compiled contract artifact loading.

Reads the JSON documents a Solidity toolchain writes for each contract
(``out/<File>.sol/<Contract>.json`` for Foundry, ``artifacts/...`` for
Hardhat) and extracts the ABI array. The ABI is carried as opaque data:
entries are copied, never interpreted.
"""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

from abi_bindgen.errors import ArtifactNotFoundError, ArtifactParseError, MissingAbiError

logger = structlog.get_logger(__name__)

ABI_FIELD = "abi"


class Artifact(BaseModel):
    """A compiled contract artifact reduced to its ABI.

    Attributes:
        path: File the artifact was read from.
        abi: The interface-description array, verbatim.
        contract_name: ``contractName`` when the toolchain records one,
            otherwise the file stem.

    Example:
        >>> artifact = load_artifact("out/TokenFactory.sol/TokenFactory.json")
        >>> artifact.contract_name
        'TokenFactory'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Path = Field(..., description="Artifact file path")
    abi: list[Any] = Field(..., description="Interface-description array")
    contract_name: str = Field(..., min_length=1, description="Contract name")

    @property
    def entry_counts(self) -> dict[str, int]:
        """Count ABI entries per ``type`` tag, for logging."""
        counts: Counter[str] = Counter()
        for entry in self.abi:
            if isinstance(entry, dict):
                counts[str(entry.get("type", "function"))] += 1
            else:
                counts["unknown"] += 1
        return dict(sorted(counts.items()))


def read_document(path: Path | str) -> Any:
    """Read and parse a JSON document.

    Args:
        path: File to read.

    Returns:
        The parsed JSON value.

    Raises:
        ArtifactNotFoundError: If the file does not exist.
        ArtifactParseError: If the file cannot be read or is not valid JSON.
    """
    path = Path(path)
    if not path.exists():
        raise ArtifactNotFoundError(str(path))

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ArtifactParseError(str(path), internal_details=f"{type(e).__name__}: {e}") from e

    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ArtifactParseError(str(path), internal_details=str(e)) from e
    except ValueError as e:
        raise ArtifactParseError(str(path), reason=str(e)) from e
    except RecursionError as e:
        raise ArtifactParseError(
            str(path), reason="document nested too deeply", internal_details=str(e)
        ) from e


def extract_abi(document: Any, path: Path | str) -> list[Any]:
    """Pull the ABI array out of a parsed artifact.

    Args:
        document: Parsed artifact JSON.
        path: Artifact path, used in error messages.

    Returns:
        The ``abi`` array, unchanged.

    Raises:
        MissingAbiError: If the document has no ``abi`` field, the field is
            null, or it is not an array.
    """
    if not isinstance(document, dict):
        raise MissingAbiError(str(path), reason=f"document is a JSON {_json_type(document)}")

    abi = document.get(ABI_FIELD)
    if abi is None:
        raise MissingAbiError(str(path))
    if not isinstance(abi, list):
        raise MissingAbiError(str(path), reason=f"expected an array, got a JSON {_json_type(abi)}")
    return abi


def load_artifact(path: Path | str) -> Artifact:
    """Load a compiled contract artifact.

    Args:
        path: Path to the artifact JSON file.

    Returns:
        Artifact holding the verbatim ABI array.

    Raises:
        ArtifactNotFoundError: If the file does not exist.
        ArtifactParseError: If the file is not valid JSON.
        MissingAbiError: If the document has no usable ``abi`` array.
    """
    path = Path(path)
    document = read_document(path)
    abi = extract_abi(document, path)

    contract_name = document.get("contractName")
    if not isinstance(contract_name, str) or not contract_name:
        contract_name = path.stem

    artifact = Artifact(path=path, abi=abi, contract_name=contract_name)
    logger.debug(
        "artifact_loaded",
        path=str(path),
        contract=contract_name,
        entries=len(abi),
        entry_counts=artifact.entry_counts,
    )
    return artifact


def _reject_constant(name: str) -> Any:
    """Refuse NaN and Infinity, which Python's json accepts but JSON does not."""
    raise ValueError(f"{name} is not a JSON value")


def _json_type(value: Any) -> str:
    """Name a parsed value by its JSON type."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"
