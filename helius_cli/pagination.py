"""Pagination utilities for Helius CLI."""

from typing import Callable

import click


def fetch_all_pages(
    api_method: Callable,
    limit: int = 1000,
    show_progress: bool = True,
    **api_kwargs
) -> list:
    """
    Fetch page-numbered results until a short page is returned.

    Pages are requested sequentially starting at page 1. A page holding
    exactly ``limit`` items means more may follow; a shorter, empty or
    missing page ends the loop. There is no page cap.

    Args:
        api_method: Callable returning one page of items for ``page``/``limit``.
        limit: Items requested per page (default: 1000).
        show_progress: Whether to show progress messages to stderr.
        **api_kwargs: Additional arguments to pass to the API method.

    Returns:
        All items from every page, in page order.

    Raises:
        ValueError: If limit is not positive.
    """
    if limit <= 0:
        raise ValueError("Limit must be positive")

    all_items: list = []
    page = 1

    while True:
        if show_progress:
            click.echo(f"Fetching page {page}...", err=True, nl=False)

        try:
            items = api_method(**api_kwargs, page=page, limit=limit)
        except Exception:
            if show_progress:
                click.echo(" x (error)", err=True)
            raise

        items = items or []
        all_items.extend(items)

        if show_progress:
            click.echo(f" ✓ ({len(all_items)} items)", err=True)

        if len(items) < limit:
            break

        page += 1

    return all_items
