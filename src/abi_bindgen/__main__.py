"""Allow ``python -m abi_bindgen``."""

from __future__ import annotations

from abi_bindgen.cli.main import cli

cli()
