"""Digital asset (DAS) lookups for Helius."""

from helius_cli.api.client import HeliusAPI
from helius_cli.pagination import fetch_all_pages


# Largest page size the getAssetsByGroup method accepts
PAGE_LIMIT = 1000


class AssetsAPI:
    """API client for the asset lookups used to build address lists."""

    def __init__(self, client: HeliusAPI):
        """
        Initialize the Assets API.

        Args:
            client: The base Helius API client.
        """
        self.client = client

    def get_assets_by_group(
        self,
        group_key: str,
        group_value: str,
        page: int = 1,
        limit: int = PAGE_LIMIT
    ) -> list[dict]:
        """
        Get one page of assets belonging to a group.

        Args:
            group_key: Grouping key (e.g. ``collection``).
            group_value: Group identifier.
            page: 1-based page number.
            limit: Items per page.

        Returns:
            The page's asset items (empty if the result is missing).
        """
        result = self.client.rpc(
            "getAssetsByGroup",
            {
                "groupKey": group_key,
                "groupValue": group_value,
                "page": page,
                "limit": limit,
            }
        )
        if not isinstance(result, dict):
            return []
        return result.get("items") or []

    def get_assets_by_collection(
        self,
        collection_address: str,
        limit: int = PAGE_LIMIT,
        show_progress: bool = False
    ) -> list[str]:
        """
        Get the address of every asset in an NFT collection.

        Args:
            collection_address: The collection's address.
            limit: Items per page.
            show_progress: Whether to print per-page progress to stderr.

        Returns:
            One address per asset, in the order the service returned them.
        """
        items = fetch_all_pages(
            self.get_assets_by_group,
            limit=limit,
            show_progress=show_progress,
            group_key="collection",
            group_value=collection_address,
        )
        return [item["id"] for item in items if isinstance(item, dict) and item.get("id")]
