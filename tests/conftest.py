"""Shared test fixtures for abi-bindgen tests.

Provides CliRunner fixtures, sample ABIs and a factory for laying out
compiled artifacts the way Foundry writes them.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

TS_EXPORT_PATTERN = re.compile(r"^export const (\w+) = (.*) as const;\n$", re.DOTALL)
TS_BARE_KEY_PATTERN = re.compile(r"^(\s*)([A-Za-z_][A-Za-z0-9_]*): ", re.MULTILINE)


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Render structlog events to the current stdout, uncached."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner inside a temporary working directory."""
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def sample_abi() -> list[dict[str, Any]]:
    """Return a small ABI covering every entry kind and nested components."""
    return [
        {
            "type": "constructor",
            "inputs": [
                {
                    "name": "_poolManager",
                    "type": "address",
                    "internalType": "contract IPoolManager",
                }
            ],
            "stateMutability": "nonpayable",
        },
        {
            "type": "function",
            "name": "getPoolKey",
            "inputs": [{"name": "token", "type": "address", "internalType": "address"}],
            "outputs": [
                {
                    "name": "",
                    "type": "tuple",
                    "internalType": "struct PoolKey",
                    "components": [
                        {"name": "currency0", "type": "address", "internalType": "Currency"},
                        {"name": "fee", "type": "uint24", "internalType": "uint24"},
                        {"name": "hooks", "type": "address", "internalType": "contract IHooks"},
                    ],
                }
            ],
            "stateMutability": "view",
        },
        {
            "type": "event",
            "name": "TokenGraduated",
            "inputs": [
                {"name": "token", "type": "address", "indexed": True, "internalType": "address"},
                {"name": "usdtRaised", "type": "uint256", "indexed": False, "internalType": "uint256"},
            ],
            "anonymous": False,
        },
        {
            "type": "error",
            "name": "InsufficientLiquidity",
            "inputs": [],
        },
    ]


@pytest.fixture
def write_artifact() -> Callable[..., Path]:
    """Factory fixture writing an artifact JSON file.

    Returns:
        Function ``(path, abi=..., **extra) -> Path``. Pass ``document`` to
        write an arbitrary JSON value instead of ``{"abi": ...}``.
    """

    def _write(
        path: Path,
        abi: list[Any] | None = None,
        *,
        document: Any = None,
        **extra: Any,
    ) -> Path:
        if document is None:
            document = {"abi": abi if abi is not None else [], **extra}
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return path

    return _write


def parse_ts_binding(text: str) -> tuple[str, Any]:
    """Read a TypeScript binding back into ``(constant_name, value)``.

    Re-quotes the bare keys and parses the literal as JSON.
    """
    match = TS_EXPORT_PATTERN.match(text)
    assert match is not None, f"not a binding: {text[:80]!r}"
    name, literal = match.groups()
    return name, json.loads(TS_BARE_KEY_PATTERN.sub(r'\1"\2": ', literal))


@pytest.fixture
def parse_binding() -> Callable[[str], tuple[str, Any]]:
    """Return the TypeScript binding reader."""
    return parse_ts_binding
