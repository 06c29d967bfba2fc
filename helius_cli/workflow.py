"""Webhook creation workflow.

Builds a complete :class:`WebhookDraft` either from command-line options
(validated up front, failing fast) or by prompting the user. Submission is
left to the caller, which sends exactly one create request per draft.
"""

from typing import Optional

from helius_cli.api.assets import AssetsAPI
from helius_cli.api.client import HeliusError
from helius_cli.collector import (
    add_collection,
    add_manual,
    parse_address_list,
    require_addresses,
)
from helius_cli.formatters import output_warning
from helius_cli.models import (
    TRANSACTION_TYPES,
    TXN_STATUS_OPTIONS,
    WEBHOOK_TYPES,
    AddressDraft,
    AddressSource,
    WebhookDraft,
)
from helius_cli import prompts


SKIP_STATUS = "skip"


class ValidationError(Exception):
    """Exception raised for missing or invalid command-line input.

    Attributes:
        hint: Optional follow-up line telling the user how to fix the input.
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self.message)


def parse_transaction_types(text: str) -> list[str]:
    """
    Parse and validate a comma-separated transaction type list.

    Tokens are trimmed and upper-cased.

    Raises:
        ValidationError: If any token is not a known transaction type.
    """
    types = [t.strip().upper() for t in text.split(",") if t.strip()]
    for tx_type in types:
        if tx_type not in TRANSACTION_TYPES:
            raise ValidationError(
                f"Invalid transaction type: {tx_type}",
                hint=f"Valid types are: {', '.join(TRANSACTION_TYPES)}",
            )
    if not types:
        raise ValidationError("At least one transaction type is required")
    return types


def validate_webhook_type(webhook_type: str) -> str:
    if webhook_type not in WEBHOOK_TYPES:
        raise ValidationError(
            f"Invalid webhook type: {webhook_type}",
            hint=f"Valid types are: {', '.join(WEBHOOK_TYPES)}",
        )
    return webhook_type


def validate_status(status: Optional[str]) -> Optional[str]:
    if status and status not in TXN_STATUS_OPTIONS:
        raise ValidationError(
            f"Invalid transaction status: {status}",
            hint=f"Valid options are: {', '.join(TXN_STATUS_OPTIONS)}",
        )
    return status or None


def _require_option(value: Optional[str], label: str, option: str) -> None:
    if not value:
        raise ValidationError(
            f"{label} required for non-interactive mode",
            hint=f"Use {option} option or --interactive mode",
        )


def build_draft_from_options(
    assets_api: AssetsAPI,
    url: Optional[str],
    webhook_type: Optional[str],
    types: Optional[str],
    addresses: Optional[str] = None,
    collection: Optional[str] = None,
    auth_header: Optional[str] = None,
    status: Optional[str] = None,
) -> WebhookDraft:
    """
    Build a webhook draft from command-line options.

    Option checks run before any network call. A collection, when given,
    is resolved and confirmed before the address list is validated; its
    addresses come before ``addresses``.

    Raises:
        ValidationError: On missing or invalid input.
        HeliusError: If the collection lookup fails.
    """
    _require_option(url, "Webhook URL is", "--url")
    _require_option(webhook_type, "Webhook type is", "--type")
    _require_option(types, "Transaction types are", "--types")
    if not addresses and not collection:
        raise ValidationError(
            "Account addresses are required for non-interactive mode",
            hint="Use --addresses or --collection option or --interactive mode",
        )

    transaction_types = parse_transaction_types(types)
    validate_webhook_type(webhook_type)
    txn_status = validate_status(status)

    address_draft = AddressDraft()
    if collection:
        address_draft = add_collection(address_draft, assets_api, collection)
    address_draft = add_manual(address_draft, addresses)

    if not address_draft.addresses:
        raise ValidationError(
            "At least one account address is required",
            hint="Use --addresses or accept the collection addresses",
        )

    return WebhookDraft(
        url=url,
        webhook_type=webhook_type,
        transaction_types=tuple(transaction_types),
        account_addresses=tuple(address_draft.addresses),
        auth_header=auth_header or None,
        txn_status=txn_status,
    )


def build_update_from_options(
    url: Optional[str] = None,
    webhook_type: Optional[str] = None,
    types: Optional[str] = None,
    addresses: Optional[str] = None,
    auth_header: Optional[str] = None,
    status: Optional[str] = None,
) -> dict:
    """
    Build a partial update body from command-line options.

    Only the options that were given are included.

    Raises:
        ValidationError: If nothing was given or a value is invalid.
    """
    changes: dict = {}
    if url:
        changes["webhookURL"] = url
    if webhook_type:
        changes["webhookType"] = validate_webhook_type(webhook_type)
    if types:
        changes["transactionTypes"] = parse_transaction_types(types)
    if addresses is not None:
        parsed = parse_address_list(addresses)
        if not parsed:
            raise ValidationError("At least one account address is required")
        changes["accountAddresses"] = parsed
    if auth_header:
        changes["authHeader"] = auth_header
    if status:
        changes["txnStatus"] = validate_status(status)

    if not changes:
        raise ValidationError(
            "Nothing to update",
            hint="Use --url, --type, --types, --addresses, --auth-header or --status",
        )
    return changes


def prefill_addresses(
    assets_api: AssetsAPI,
    addresses: Optional[str] = None,
    collection: Optional[str] = None
) -> AddressDraft:
    """
    Collect addresses supplied on the command line before prompting.

    Both batches count as prefilled for the interactive flow. A failed
    collection lookup is reported and the flow continues without it.
    """
    draft = AddressDraft().add(AddressSource.PREFILLED, parse_address_list(addresses))
    if collection:
        try:
            draft = add_collection(draft, assets_api, collection)
        except HeliusError as e:
            output_warning(f"Could not fetch collection addresses: {e.message}")
    return draft


def _ask_url(draft: WebhookDraft) -> WebhookDraft:
    url = prompts.prompt_text("Enter the webhook URL", required=True, label="Webhook URL")
    return draft.with_(url=url)


def _ask_webhook_type(draft: WebhookDraft) -> WebhookDraft:
    webhook_type = prompts.prompt_choice("Select the webhook type", WEBHOOK_TYPES)
    return draft.with_(webhook_type=webhook_type)


def _ask_auth_header(draft: WebhookDraft) -> WebhookDraft:
    auth_header = prompts.prompt_text("Enter an authorization header (optional)")
    return draft.with_(auth_header=auth_header or None)


def _ask_status(draft: WebhookDraft) -> WebhookDraft:
    choice = prompts.prompt_choice(
        "Select transaction status to monitor",
        TXN_STATUS_OPTIONS + (SKIP_STATUS,),
        default="all",
    )
    return draft.with_(txn_status=None if choice == SKIP_STATUS else choice)


def _ask_transaction_types(draft: WebhookDraft) -> WebhookDraft:
    types = prompts.prompt_multi_choice(
        "Select transaction types to monitor", TRANSACTION_TYPES
    )
    return draft.with_(transaction_types=types)


def _ask_collection(addresses: AddressDraft, assets_api: AssetsAPI) -> AddressDraft:
    if addresses.addresses:
        return addresses
    if not prompts.confirm("Track the NFTs of a collection?", default=False):
        return addresses

    collection = prompts.prompt_text(
        "Enter the collection address", required=True, label="Collection address"
    )
    try:
        return add_collection(addresses, assets_api, collection)
    except HeliusError as e:
        output_warning(f"Could not fetch collection addresses: {e.message}")
        return addresses


def _ask_additional_addresses(addresses: AddressDraft) -> AddressDraft:
    if addresses.addresses:
        text = prompts.prompt_text(
            f"Enter additional account addresses (comma-separated, optional; "
            f"{len(addresses)} already added)"
        )
    else:
        text = prompts.prompt_text(
            "Enter account addresses to monitor (comma-separated)",
            required=True,
            label="At least one account address",
        )
    return add_manual(addresses, text)


def prompt_for_draft(
    assets_api: AssetsAPI,
    prefilled: Optional[AddressDraft] = None
) -> WebhookDraft:
    """
    Prompt the user for every webhook field.

    Args:
        assets_api: Used to resolve a collection if the user asks to track one.
        prefilled: Addresses already gathered from the command line. When
            present, the collection question is skipped.

    Returns:
        A complete draft with at least one account address.
    """
    draft = WebhookDraft()
    for stage in (
        _ask_url,
        _ask_webhook_type,
        _ask_auth_header,
        _ask_status,
        _ask_transaction_types,
    ):
        draft = stage(draft)

    addresses = prefilled or AddressDraft()
    addresses = _ask_collection(addresses, assets_api)
    addresses = _ask_additional_addresses(addresses)
    addresses = require_addresses(addresses)

    return draft.with_(account_addresses=addresses.addresses)
