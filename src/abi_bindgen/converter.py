"""Artifact-to-binding conversion.

``generate_binding`` reads one artifact, renders its ABI and writes the
binding file, raising typed errors. ``convert`` wraps it for the runner:
every failure is logged with context and reported as ``False``.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from abi_bindgen.artifact import load_artifact
from abi_bindgen.errors import ArtifactParseError, BindgenError, BindingWriteError
from abi_bindgen.render import render_binding

logger = structlog.get_logger(__name__)

# Bindings directory, relative to the project root
DEFAULT_OUTPUT_DIR = "abis"


def generate_binding(
    input_path: Path | str,
    output_name: str,
    output_dir: Path | str = DEFAULT_OUTPUT_DIR,
) -> Path:
    """Convert one compiled artifact into a binding file.

    The output directory is created if needed. Nothing is written unless
    the artifact loads and the binding renders.

    Args:
        input_path: Path to the compiled artifact JSON.
        output_name: Binding file name, e.g. ``TokenFactoryAbi.ts``.
        output_dir: Directory receiving the binding file.

    Returns:
        Path of the written binding.

    Raises:
        ArtifactNotFoundError: If ``input_path`` does not exist.
        ArtifactParseError: If the artifact is not valid JSON or is nested too deeply.
        MissingAbiError: If the artifact has no ``abi`` array.
        BindingNameError: If ``output_name`` cannot become a binding.
        BindingWriteError: If the directory or file cannot be written.

    Example:
        >>> generate_binding("out/TokenFactory.sol/TokenFactory.json", "TokenFactoryAbi.ts")
        PosixPath('abis/TokenFactoryAbi.ts')
    """
    artifact = load_artifact(input_path)
    try:
        content = render_binding(output_name, artifact.abi)
    except RecursionError as e:
        raise ArtifactParseError(
            str(artifact.path), reason="ABI nested too deeply", internal_details=str(e)
        ) from e

    output_path = Path(output_dir) / output_name
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps "\n" line endings on every platform
        with output_path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise BindingWriteError(
            str(output_path), internal_details=f"{type(e).__name__}: {e}"
        ) from e

    logger.info(
        "binding_written",
        source=str(artifact.path),
        output=str(output_path),
        entries=len(artifact.abi),
    )
    return output_path


def convert(
    input_path: Path | str,
    output_name: str,
    output_dir: Path | str = DEFAULT_OUTPUT_DIR,
) -> bool:
    """Convert one artifact, reporting the outcome as a flag.

    Args:
        input_path: Path to the compiled artifact JSON.
        output_name: Binding file name.
        output_dir: Directory receiving the binding file.

    Returns:
        True if the binding was written, False otherwise.
    """
    log = logger.bind(input=str(input_path), output=output_name)
    log.info("conversion_started")

    try:
        generate_binding(input_path, output_name, output_dir)
    except BindgenError as e:
        log.error("conversion_failed", error_type=type(e).__name__, reason=e.user_message)
        return False

    return True
