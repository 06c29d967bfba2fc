"""Utility functions for Helius CLI."""

import functools
from typing import Optional

import click

from helius_cli.api.client import APIError, HeliusAPI, HeliusError
from helius_cli.config import load_config, set_config_value
from helius_cli.formatters import output_error, output_success, status


def ensure_api_key(ctx: click.Context) -> None:
    """Prompt for and save the API key if none is configured.

    The client on the context is refreshed from the saved configuration.
    """
    if ctx.obj["config"].get("api_key"):
        return

    click.echo("The Helius API key is not configured.", err=True)
    api_key = click.prompt(
        "Enter your Helius API key",
        hide_input=True,
        value_proc=_non_empty_key,
    )
    config_path = ctx.obj.get("config_path")
    file_path = set_config_value("api_key", api_key, config_path)
    output_success(f"API key saved to {file_path}")

    ctx.obj["config"] = load_config(config_path)
    ctx.obj["api"].refresh(ctx.obj["config"])


def _non_empty_key(value: str) -> str:
    value = value.strip()
    if not value:
        raise click.BadParameter("API key cannot be empty")
    return value


def get_api(ctx: click.Context) -> HeliusAPI:
    """Get the API client from context, asking for an API key if needed."""
    ensure_api_key(ctx)
    return ctx.obj["api"]


def fail(message: str, hint: Optional[str] = None) -> None:
    """Print an error (and optional hint) and exit with status 1."""
    output_error(message)
    if hint:
        click.echo(hint, err=True)
    raise click.exceptions.Exit(1)


def call_api(action: str, func, *args, progress: Optional[str] = None, **kwargs):
    """
    Execute an API call with a spinner and uniform error reporting.

    Args:
        action: Description used in the error message (e.g. "fetching webhooks").
        func: The API method to call.
        progress: Optional spinner text.

    Returns:
        The API method's result.
    """
    try:
        if progress:
            with status(progress):
                return func(*args, **kwargs)
        return func(*args, **kwargs)
    except APIError as e:
        output_error(f"Error {action}: {e.message}", e.response)
        raise click.exceptions.Exit(1)
    except HeliusError as e:
        output_error(f"Error {action}: {e.message}")
        raise click.exceptions.Exit(1)


def output_options(f):
    """Add -o/--output to a leaf command.

    When provided, this overrides the global -o set on the root ``helius``
    command before the wrapped command function runs.
    """
    @click.option(
        "-o", "--output", "cmd_output",
        type=click.Choice(["text", "json", "table"]),
        default=None,
        help="Output format (text, json, table)",
    )
    @functools.wraps(f)
    def wrapper(*args, cmd_output=None, **kwargs):
        ctx = click.get_current_context()
        if cmd_output is not None:
            ctx.obj["output"] = cmd_output
        return f(*args, **kwargs)
    return wrapper
