"""Main CLI entry point for Helius."""

import click

from helius_cli.config import OUTPUT_FORMATS, load_config
from helius_cli.api.client import HeliusAPI


__version__ = "1.0.0"


@click.group()
@click.version_option(__version__, prog_name="helius")
@click.option(
    "--config", "-c",
    help="Path to config file",
    type=click.Path(exists=False)
)
@click.option(
    "--output", "-o",
    type=click.Choice(list(OUTPUT_FORMATS)),
    default=None,
    help="Output format (default: text)"
)
@click.pass_context
def cli(ctx: click.Context, config: str, output: str) -> None:
    """CLI tool for managing Helius webhooks."""
    ctx.ensure_object(dict)

    cfg = load_config(config)
    ctx.obj["config"] = cfg
    ctx.obj["config_path"] = config

    # CLI option > config > default
    ctx.obj["output"] = output or cfg.get("default_output", "text")

    # The key may still be empty; commands ask for it before calling the API
    ctx.obj["api"] = HeliusAPI.from_config(cfg)


@cli.command()
@click.pass_context
def setup(ctx: click.Context) -> None:
    """Set up CLI configuration."""
    ensure_api_key(ctx)
    output_success("Setup complete! You can now use the CLI.")


# Import and register command groups (must be after cli definition)
from helius_cli.commands.config_cmd import config_group
from helius_cli.commands.webhooks import webhooks
from helius_cli.formatters import output_success
from helius_cli.utils import ensure_api_key

cli.add_command(config_group, name="config")
cli.add_command(webhooks)


if __name__ == "__main__":
    cli()
