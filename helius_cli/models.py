"""Webhook records, creation drafts and the enumerations they draw from."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional


TRANSACTION_TYPES = (
    "ANY",
    "NFT_SALE",
    "NFT_LISTING",
    "NFT_CANCEL_LISTING",
    "NFT_MINT",
    "NFT_AUCTION_CREATED",
    "NFT_BID",
    "NFT_AUCTION_COMPLETE",
    "SWAP",
    "SWAP_SOL",
    "SWAP_TOKEN",
    "TOKEN_MINT",
    "TOKEN_BURN",
    "TOKEN_TRANSFER",
    "SOL_TRANSFER",
    "STAKE",
    "STAKE_DELEGATION",
    "UNSTAKE",
    "VOTE",
    "UNKNOWN",
)

WEBHOOK_TYPES = (
    "raw",
    "rawDevnet",
    "enhanced",
    "enhancedDevnet",
    "discord",
    "discordDevnet",
)

TXN_STATUS_OPTIONS = ("all", "success", "failed")


def _normalize_status(value: Any) -> Optional[str]:
    """Collapse a status filter reported as a string or a list into one string."""
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value or None


@dataclass
class Webhook:
    """A webhook subscription as reported by the service."""

    id: str
    url: str
    webhook_type: str
    transaction_types: list[str] = field(default_factory=list)
    account_addresses: list[str] = field(default_factory=list)
    auth_header: Optional[str] = None
    txn_status: Optional[str] = None
    encoding: Optional[str] = None
    encoding_config: Optional[dict] = None

    @classmethod
    def from_api(cls, data: dict) -> "Webhook":
        """Build a Webhook from the service's JSON representation."""
        return cls(
            id=data.get("webhookID", ""),
            url=data.get("webhookURL", ""),
            webhook_type=data.get("webhookType", ""),
            transaction_types=list(data.get("transactionTypes") or []),
            account_addresses=list(data.get("accountAddresses") or []),
            auth_header=data.get("authHeader") or None,
            txn_status=_normalize_status(data.get("txnStatus")),
            encoding=data.get("encoding"),
            encoding_config=data.get("encoding_config"),
        )

    def to_dict(self) -> dict:
        """Return the service's wire representation, omitting empty optionals."""
        data = {
            "webhookID": self.id,
            "webhookURL": self.url,
            "webhookType": self.webhook_type,
            "transactionTypes": list(self.transaction_types),
            "accountAddresses": list(self.account_addresses),
        }
        optional = {
            "authHeader": self.auth_header,
            "txnStatus": self.txn_status,
            "encoding": self.encoding,
            "encoding_config": self.encoding_config,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data


class IncompleteDraftError(ValueError):
    """Raised when a draft is turned into a payload before it is complete."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Webhook draft is missing: {', '.join(missing)}")


@dataclass(frozen=True)
class WebhookDraft:
    """A webhook creation payload under construction.

    Workflow stages take a draft and return an updated copy via ``with_``.
    """

    url: Optional[str] = None
    webhook_type: Optional[str] = None
    transaction_types: tuple[str, ...] = ()
    account_addresses: tuple[str, ...] = ()
    auth_header: Optional[str] = None
    txn_status: Optional[str] = None

    def with_(self, **changes: Any) -> "WebhookDraft":
        """Return a copy of the draft with the given fields replaced."""
        for name in ("transaction_types", "account_addresses"):
            if name in changes:
                changes[name] = tuple(changes[name])
        return replace(self, **changes)

    def missing_fields(self) -> list[str]:
        """Names of the client-side required fields that are still unset."""
        missing = []
        if not self.url:
            missing.append("url")
        if not self.webhook_type:
            missing.append("webhook_type")
        if not self.transaction_types:
            missing.append("transaction_types")
        return missing

    def to_payload(self) -> dict:
        """
        Build the creation request body.

        The status filter is sent as a single string.

        Raises:
            IncompleteDraftError: If a required field is unset.
        """
        missing = self.missing_fields()
        if missing:
            raise IncompleteDraftError(missing)

        payload = {
            "webhookURL": self.url,
            "webhookType": self.webhook_type,
            "transactionTypes": list(self.transaction_types),
            "accountAddresses": list(self.account_addresses),
        }
        if self.auth_header:
            payload["authHeader"] = self.auth_header
        if self.txn_status:
            payload["txnStatus"] = self.txn_status
        return payload


class AddressSource(Enum):
    """Where a batch of account addresses came from, in merge order."""

    PREFILLED = "prefilled"
    COLLECTION = "collection"
    MANUAL = "manual"

    @property
    def rank(self) -> int:
        return list(AddressSource).index(self)


@dataclass(frozen=True)
class AddressBatch:
    source: AddressSource
    addresses: tuple[str, ...]


@dataclass(frozen=True)
class AddressDraft:
    """Addresses accumulated for a new webhook, grouped by source.

    Duplicates are kept as entered.
    """

    batches: tuple[AddressBatch, ...] = ()

    def add(self, source: AddressSource, addresses: list[str]) -> "AddressDraft":
        """Return a new draft with another batch appended."""
        if not addresses:
            return self
        batch = AddressBatch(source=source, addresses=tuple(addresses))
        return AddressDraft(batches=self.batches + (batch,))

    @property
    def addresses(self) -> list[str]:
        """All addresses: prefilled, then collection, then manual."""
        ordered = sorted(self.batches, key=lambda batch: batch.source.rank)
        return [address for batch in ordered for address in batch.addresses]

    def __len__(self) -> int:
        return sum(len(batch.addresses) for batch in self.batches)
