"""CLI entry point for abi-bindgen.

Run with no arguments from a contracts project to regenerate the default
bindings into ``abis/``. Options only point the run elsewhere or swap in a
YAML worklist.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
import rich_click as rclick
from rich.markup import escape

from abi_bindgen import __version__
from abi_bindgen.cli import output
from abi_bindgen.cli.errors import handle_configuration_error, handle_file_not_found
from abi_bindgen.cli.output import print_report, set_no_color, success
from abi_bindgen.errors import ConfigurationError
from abi_bindgen.observability import configure_logging
from abi_bindgen.runner import BindingRunner
from abi_bindgen.targets import BindgenConfig, default_config

# Configure rich-click for better help formatting
rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True


@click.command("abi-bindgen", cls=rclick.RichCommand)
@click.version_option(version=__version__, prog_name="abi-bindgen")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
@click.option(
    "-r",
    "--root",
    "root",
    type=click.Path(),
    default=".",
    help="Contracts project root [default: .]",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(),
    default=None,
    help="YAML file replacing the built-in targets",
)
@click.option(
    "-o",
    "--output-dir",
    "output_dir",
    type=str,
    default=None,
    help="Bindings directory, relative to the root [default: abis]",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logs.")
def cli(root: str, config_path: str | None, output_dir: str | None, verbose: bool) -> None:
    """Generate ABI bindings from compiled contract artifacts.

    Reads each contract's build artifact, takes its `abi` array and writes
    it as a typed constant (`export const TokenFactoryAbi = [...] as const;`).

    When the primary artifact is missing or unusable, fallback locations are
    tried in order. Targets with no usable artifact are reported with a hint;
    the run itself still succeeds.

    Examples:

        abi-bindgen

        abi-bindgen --root contracts/

        abi-bindgen --config bindgen.yaml --output-dir src/abis
    """
    configure_logging(verbose=verbose, colors=not output.console.no_color and sys.stderr.isatty())

    root_path = Path(root)
    if not root_path.is_dir():
        handle_file_not_found(
            root,
            "Project root",
            "Run abi-bindgen from the contracts project, or use --root to point at it.",
        )

    if config_path is not None:
        if not Path(config_path).exists():
            handle_file_not_found(
                config_path,
                "Configuration file",
                "Omit --config to use the built-in targets.",
            )
        try:
            config = BindgenConfig.from_yaml(config_path)
        except ConfigurationError as e:
            handle_configuration_error(e)
    else:
        config = default_config()

    if output_dir is not None:
        try:
            config = config.with_output_dir(output_dir)
        except ConfigurationError as e:
            handle_configuration_error(e)

    report = BindingRunner(config, root=root_path).run()

    for result in report.results:
        if result.generated:
            success(f"Successfully written {escape(str(result.output_path))}")
    print_report(report)


if __name__ == "__main__":
    cli()
