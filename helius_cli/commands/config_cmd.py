"""Configuration commands for Helius CLI."""

import click
import yaml

from helius_cli.config import (
    CONFIG_FILE,
    CONFIG_KEYS,
    OUTPUT_FORMATS,
    load_config,
    reset_config,
    set_config_value,
)
from helius_cli.formatters import output_info, output_success, output_warning
from helius_cli.utils import fail


def mask_api_key(key: str) -> str:
    """Mask an API key for display."""
    if not key:
        return ""
    if len(key) > 8:
        return f"{key[:4]}...{key[-4:]}"
    return "***"


@click.group(name="config")
def config_group() -> None:
    """Manage CLI configuration."""
    pass


@config_group.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show current configuration."""
    config_path = ctx.obj.get("config_path")
    config = ctx.obj.get("config") or load_config(config_path)

    display_config = config.copy()
    if display_config.get("api_key"):
        display_config["api_key"] = mask_api_key(display_config["api_key"])
    else:
        output_warning("API key is not set")

    output_info(f"Config file: {config_path or CONFIG_FILE}")
    click.echo(yaml.dump(display_config, default_flow_style=False))


@config_group.command(name="set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def set_value(ctx: click.Context, key: str, value: str) -> None:
    """Set a configuration value (api_key, base_url, rpc_url, default_output)."""
    if key not in CONFIG_KEYS:
        fail(
            f"Invalid configuration key: {key}",
            f"Valid keys are: {', '.join(CONFIG_KEYS)}",
        )
    if key == "default_output" and value not in OUTPUT_FORMATS:
        fail(
            f"Invalid output format: {value}",
            f"Valid formats are: {', '.join(OUTPUT_FORMATS)}",
        )

    file_path = set_config_value(key, value, ctx.obj.get("config_path"))
    shown = mask_api_key(value) if key == "api_key" else value
    output_success(f"Set {key} = {shown} in {file_path}")


@config_group.command()
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def reset(ctx: click.Context, yes: bool) -> None:
    """Reset configuration to defaults."""
    if not yes and not click.confirm(
        "Are you sure you want to reset all configuration to defaults?",
        default=False,
    ):
        output_warning("Reset cancelled")
        return

    file_path = reset_config(ctx.obj.get("config_path"))
    output_success(f"Configuration reset to defaults in {file_path}")
