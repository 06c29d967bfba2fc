"""Account address collection for new webhooks.

Addresses come from three sources and are always concatenated in the same
order: prefilled (already known), collection-derived (resolved from an NFT
collection and confirmed by the user), then manually entered. Duplicates are
preserved.
"""

from typing import Optional

from helius_cli.api.assets import AssetsAPI
from helius_cli.formatters import output_info, output_warning, status
from helius_cli.models import AddressDraft, AddressSource
from helius_cli import prompts


def parse_address_list(text: Optional[str]) -> list[str]:
    """
    Split a comma-separated address string.

    Args:
        text: Raw input such as ``"addr1, addr2"``.

    Returns:
        Trimmed, non-empty addresses in input order (empty for empty input).
    """
    if not text or not text.strip():
        return []
    return [a.strip() for a in text.split(",") if a.strip()]


def resolve_collection(assets_api: AssetsAPI, collection_address: str) -> list[str]:
    """Look up every asset address in a collection."""
    with status(f"Fetching NFTs in collection {collection_address}..."):
        return assets_api.get_assets_by_collection(collection_address)


def confirm_collection(addresses: list[str], collection_address: str) -> bool:
    """
    Ask whether resolved collection addresses should be tracked.

    Returns:
        True if the user accepted, False if they declined or there is
        nothing to include.
    """
    if not addresses:
        output_warning(f"No NFTs found in collection {collection_address}")
        return False

    try:
        prompts.confirm_or_cancel(
            f"Found {len(addresses)} NFTs in collection {collection_address}. "
            "Add them to the webhook addresses?",
            default=True,
        )
    except prompts.UserCancelled:
        output_info("Skipping collection addresses")
        return False
    return True


def add_collection(
    draft: AddressDraft,
    assets_api: AssetsAPI,
    collection_address: str
) -> AddressDraft:
    """
    Resolve a collection and, once confirmed, add its addresses to the draft.

    Lookup failures propagate to the caller.
    """
    addresses = resolve_collection(assets_api, collection_address)
    if not confirm_collection(addresses, collection_address):
        return draft
    return draft.add(AddressSource.COLLECTION, addresses)


def add_manual(draft: AddressDraft, text: Optional[str]) -> AddressDraft:
    """Add comma-separated, manually entered addresses to the draft."""
    return draft.add(AddressSource.MANUAL, parse_address_list(text))


def require_addresses(draft: AddressDraft) -> AddressDraft:
    """
    Prompt until the draft holds at least one address.

    Returns the draft unchanged when it already has addresses.
    """
    while not draft.addresses:
        output_warning("At least one account address is required")
        text = prompts.prompt_text(
            "Enter account addresses to monitor (comma-separated)",
            required=True,
            label="At least one account address",
        )
        draft = add_manual(draft, text)
    return draft
