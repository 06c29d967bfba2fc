"""Output formatting utilities for Helius CLI."""

import json
import sys
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.syntax import Syntax

from helius_cli.models import Webhook


console = Console()
error_console = Console(stderr=True)


def _plain(data: Any) -> Any:
    """Convert Webhook records (or lists of them) to wire-format dicts."""
    if isinstance(data, Webhook):
        return data.to_dict()
    if isinstance(data, list):
        return [_plain(item) for item in data]
    return data


def output(data: Any, format: str = "text", title: Optional[str] = None) -> None:
    """
    Output data in the specified format.

    Args:
        data: A Webhook, a list of Webhooks, or plain JSON data.
        format: Output format ('text', 'json' or 'table').
        title: Optional title for table output.
    """
    if format == "json":
        output_json(_plain(data))
    elif format == "table":
        output_table(_plain(data), title=title)
    elif format == "text":
        output_text(data)
    else:
        output_json(_plain(data))


def output_json(data: Any) -> None:
    """Output data as formatted JSON."""
    json_str = json.dumps(data, indent=2, default=str)
    if sys.stdout.isatty():
        syntax = Syntax(json_str, "json", theme="monokai", word_wrap=True)
        console.print(syntax)
    else:
        print(json_str)


def output_table(data: Any, title: Optional[str] = None) -> None:
    """
    Output data as a rich table.

    Args:
        data: A dict or list of dicts.
        title: Optional table title.
    """
    if data is None:
        console.print("[dim]No data[/dim]")
        return

    if isinstance(data, dict):
        data = [data]

    if not isinstance(data, list):
        console.print("[dim]Cannot display as table[/dim]")
        output_json(data)
        return

    if not data:
        console.print("[dim]No results[/dim]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")

    columns: list[str] = []
    for row in data:
        for col in row:
            if col not in columns:
                columns.append(col)
    for col in columns:
        table.add_column(col, overflow="fold")

    for row in data:
        values = []
        for col in columns:
            val = row.get(col, "")
            if isinstance(val, list) and all(isinstance(v, str) for v in val):
                val = ", ".join(val)
            elif isinstance(val, (dict, list)):
                val = json.dumps(val, default=str)
            elif val is None:
                val = ""
            else:
                val = str(val)
            # Long address lists make the table unreadable
            if len(val) > 50:
                val = val[:47] + "..."
            values.append(escape(val))
        table.add_row(*values)

    console.print(table)


def format_webhook(webhook: Webhook) -> str:
    """Format a webhook as rich markup, one field per line."""
    addresses = ", ".join(webhook.account_addresses) or "None"
    lines = [
        f"[bold]ID:[/bold] {escape(webhook.id)}",
        f"[bold]URL:[/bold] {escape(webhook.url)}",
        f"[bold]Type:[/bold] {escape(webhook.webhook_type)}",
        f"[bold]Transaction Types:[/bold] {escape(', '.join(webhook.transaction_types))}",
        f"[bold]Account Addresses:[/bold] {escape(addresses)}",
    ]
    if webhook.txn_status:
        lines.append(f"[bold]Transaction Status:[/bold] {escape(webhook.txn_status)}")
    if webhook.encoding:
        lines.append(f"[bold]Encoding:[/bold] {escape(webhook.encoding)}")
    if webhook.encoding_config:
        config = webhook.encoding_config
        lines.append(
            f"[bold]Encoding Config:[/bold] Format: {escape(str(config.get('format')))}, "
            f"Compression: {escape(str(config.get('compression')))}"
        )
    if webhook.auth_header:
        lines.append(f"[bold]Auth Header:[/bold] {escape(webhook.auth_header)}")
    return "\n".join(lines)


def output_text(data: Any) -> None:
    """Output webhooks as labelled fields; other data falls back to JSON."""
    if isinstance(data, Webhook):
        console.print(format_webhook(data))
    elif isinstance(data, list) and all(isinstance(w, Webhook) for w in data):
        if not data:
            console.print("[yellow]No webhooks found.[/yellow]")
        for index, webhook in enumerate(data, 1):
            console.print(f"\n[green]--- Webhook {index} ---[/green]")
            console.print(format_webhook(webhook))
    else:
        output_json(data)


def status(message: str):
    """Spinner shown on stderr while a request is in flight."""
    return error_console.status(message)


def output_error(message: str, details: Optional[Any] = None) -> None:
    """
    Output an error message.

    Args:
        message: Error message to display.
        details: Optional error details.
    """
    error_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    if details:
        error_console.print(f"[dim]{escape(json.dumps(details, indent=2, default=str))}[/dim]")


def output_success(message: str) -> None:
    """Output a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def output_warning(message: str) -> None:
    """Output a warning message."""
    error_console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def output_info(message: str) -> None:
    """Output an info message."""
    error_console.print(f"[bold blue]Info:[/bold blue] {escape(message)}")
