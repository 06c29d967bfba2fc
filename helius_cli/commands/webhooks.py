"""Webhook commands for Helius CLI."""

from typing import Optional

import click

from helius_cli.api.assets import AssetsAPI
from helius_cli.api.client import HeliusError
from helius_cli.api.webhooks import WebhooksAPI
from helius_cli.formatters import (
    output,
    output_error,
    output_info,
    output_success,
    output_warning,
)
from helius_cli.models import TXN_STATUS_OPTIONS, WEBHOOK_TYPES
from helius_cli.prompts import UserCancelled, confirm_or_cancel
from helius_cli.utils import call_api, fail, get_api, output_options
from helius_cli.workflow import (
    ValidationError,
    build_draft_from_options,
    build_update_from_options,
    prefill_addresses,
    prompt_for_draft,
)


@click.group()
@click.pass_context
def webhooks(ctx: click.Context) -> None:
    """Manage Helius webhooks."""
    pass


@webhooks.command(name="list")
@output_options
@click.pass_context
def list_webhooks(ctx: click.Context) -> None:
    """List all webhooks."""
    webhooks_api = WebhooksAPI(get_api(ctx))
    result = call_api(
        "fetching webhooks", webhooks_api.list, progress="Fetching webhooks..."
    )
    click.echo(f"Found {len(result)} webhooks", err=True)
    output(result, ctx.obj["output"], title="Webhooks")


@webhooks.command()
@click.argument("webhook_id")
@output_options
@click.pass_context
def get(ctx: click.Context, webhook_id: str) -> None:
    """Get webhook by ID."""
    webhooks_api = WebhooksAPI(get_api(ctx))
    result = call_api(
        "fetching webhook",
        webhooks_api.get,
        webhook_id,
        progress=f"Fetching webhook {webhook_id}...",
    )
    output(result, ctx.obj["output"])


@webhooks.command()
@click.option("--url", "-u", help="Webhook URL (required for non-interactive mode)")
@click.option(
    "--type", "-t", "webhook_type",
    help=f"Webhook type ({', '.join(WEBHOOK_TYPES)}; required for non-interactive mode)"
)
@click.option("--types", help="Transaction types (comma-separated list)")
@click.option("--addresses", help="Account addresses to monitor (comma-separated list)")
@click.option("--collection", help="NFT collection address whose NFTs should be monitored")
@click.option("--auth-header", "-a", help="Authorization header")
@click.option(
    "--status", "-s",
    help=f"Transaction status ({', '.join(TXN_STATUS_OPTIONS)})"
)
@click.option("--interactive", "-i", is_flag=True, help="Use interactive mode to create webhook")
@output_options
@click.pass_context
def create(
    ctx: click.Context,
    url: Optional[str],
    webhook_type: Optional[str],
    types: Optional[str],
    addresses: Optional[str],
    collection: Optional[str],
    auth_header: Optional[str],
    status: Optional[str],
    interactive: bool,
) -> None:
    """Create a new webhook."""
    api = get_api(ctx)
    assets_api = AssetsAPI(api)

    try:
        if interactive:
            prefilled = prefill_addresses(assets_api, addresses, collection)
            click.echo("\nCreate a new webhook:", err=True)
            draft = prompt_for_draft(assets_api, prefilled)
        else:
            draft = build_draft_from_options(
                assets_api,
                url=url,
                webhook_type=webhook_type,
                types=types,
                addresses=addresses,
                collection=collection,
                auth_header=auth_header,
                status=status,
            )
    except ValidationError as e:
        fail(e.message, e.hint)
    except HeliusError as e:
        fail(f"Error resolving collection: {e.message}")

    webhook = call_api(
        "creating webhook",
        WebhooksAPI(api).create,
        draft,
        progress="Creating webhook...",
    )
    output_info("Webhook created successfully")
    output(webhook, ctx.obj["output"])


@webhooks.command()
@click.argument("webhook_id")
@click.option("--url", "-u", help="New webhook URL")
@click.option("--type", "-t", "webhook_type", help="New webhook type")
@click.option("--types", help="Transaction types (comma-separated list)")
@click.option("--addresses", help="Account addresses to monitor (comma-separated list)")
@click.option("--auth-header", "-a", help="Authorization header")
@click.option("--status", "-s", help=f"Transaction status ({', '.join(TXN_STATUS_OPTIONS)})")
@output_options
@click.pass_context
def update(
    ctx: click.Context,
    webhook_id: str,
    url: Optional[str],
    webhook_type: Optional[str],
    types: Optional[str],
    addresses: Optional[str],
    auth_header: Optional[str],
    status: Optional[str],
) -> None:
    """Update webhook by ID."""
    try:
        changes = build_update_from_options(
            url=url,
            webhook_type=webhook_type,
            types=types,
            addresses=addresses,
            auth_header=auth_header,
            status=status,
        )
    except ValidationError as e:
        fail(e.message, e.hint)

    webhooks_api = WebhooksAPI(get_api(ctx))
    webhook = call_api(
        "updating webhook",
        webhooks_api.update,
        webhook_id,
        changes,
        progress=f"Updating webhook {webhook_id}...",
    )
    output_info(f"Webhook {webhook_id} updated")
    output(webhook, ctx.obj["output"])


@webhooks.command()
@click.argument("webhook_id")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete(ctx: click.Context, webhook_id: str, force: bool) -> None:
    """Delete webhook by ID."""
    webhooks_api = WebhooksAPI(get_api(ctx))

    if not force:
        try:
            confirm_or_cancel(f"Are you sure you want to delete webhook {webhook_id}?")
        except UserCancelled:
            output_warning("Deletion cancelled")
            return

    result = call_api(
        "deleting webhook",
        webhooks_api.delete,
        webhook_id,
        progress=f"Deleting webhook {webhook_id}...",
    )
    if result["success"]:
        output_success(f"Successfully deleted webhook {webhook_id}")
    else:
        output_error(f"Failed to delete webhook {webhook_id} (not confirmed by the service)")
        ctx.exit(1)
