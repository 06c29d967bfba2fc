"""Tests for the webhook creation workflow."""

import pytest
from unittest.mock import MagicMock, patch

from helius_cli.api.assets import AssetsAPI
from helius_cli.api.client import TransportError
from helius_cli.models import AddressDraft, AddressSource, WebhookDraft
from helius_cli.prompts import UserCancelled
from helius_cli.workflow import (
    ValidationError,
    build_draft_from_options,
    build_update_from_options,
    parse_transaction_types,
    prefill_addresses,
    prompt_for_draft,
)


@pytest.fixture
def assets_api() -> MagicMock:
    return MagicMock(spec=AssetsAPI)


def _options(**overrides):
    options = {
        "url": "https://myapp.com/webhook",
        "webhook_type": "enhanced",
        "types": "NFT_SALE",
        "addresses": "addr1",
    }
    options.update(overrides)
    return options


class TestParseTransactionTypes:
    """Tests for transaction type parsing."""

    def test_uppercases_tokens(self):
        assert parse_transaction_types("nft_sale, Swap") == ["NFT_SALE", "SWAP"]

    def test_one_invalid_token_aborts(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_transaction_types("NFT_SALE,BOGUS")

        assert exc_info.value.message == "Invalid transaction type: BOGUS"
        assert "NFT_SALE" in exc_info.value.hint

    def test_empty_list(self):
        with pytest.raises(ValidationError):
            parse_transaction_types(" , ")


class TestBuildDraftFromOptions:
    """Tests for the non-interactive path."""

    @pytest.mark.parametrize("missing", ["url", "webhook_type", "types"])
    def test_missing_required_option(self, assets_api: MagicMock, missing: str):
        """Test that a missing option fails before any network call."""
        with pytest.raises(ValidationError) as exc_info:
            build_draft_from_options(assets_api, **_options(**{missing: None}))

        assert "required for non-interactive mode" in exc_info.value.message
        assets_api.get_assets_by_collection.assert_not_called()

    def test_missing_addresses_and_collection(self, assets_api: MagicMock):
        with pytest.raises(ValidationError) as exc_info:
            build_draft_from_options(assets_api, **_options(addresses=None))

        assert "Account addresses are required" in exc_info.value.message

    def test_builds_complete_draft(self, assets_api: MagicMock):
        draft = build_draft_from_options(
            assets_api,
            **_options(types="nft_sale,nft_listing", addresses="a1, a2"),
            auth_header="Bearer x",
            status="success",
        )

        assert draft == WebhookDraft(
            url="https://myapp.com/webhook",
            webhook_type="enhanced",
            transaction_types=("NFT_SALE", "NFT_LISTING"),
            account_addresses=("a1", "a2"),
            auth_header="Bearer x",
            txn_status="success",
        )

    def test_invalid_transaction_type(self, assets_api: MagicMock):
        with pytest.raises(ValidationError):
            build_draft_from_options(assets_api, **_options(types="NFT_SALE,BOGUS"))

    def test_invalid_webhook_type(self, assets_api: MagicMock):
        with pytest.raises(ValidationError) as exc_info:
            build_draft_from_options(assets_api, **_options(webhook_type="webhooky"))

        assert "Invalid webhook type" in exc_info.value.message

    def test_invalid_status(self, assets_api: MagicMock):
        with pytest.raises(ValidationError) as exc_info:
            build_draft_from_options(assets_api, **_options(), status="pending")

        assert "Invalid transaction status" in exc_info.value.message

    def test_collection_addresses_come_first(self, assets_api: MagicMock):
        assets_api.get_assets_by_collection.return_value = ["m1", "m2"]

        with patch("helius_cli.prompts.confirm_or_cancel") as mock_confirm:
            draft = build_draft_from_options(
                assets_api, **_options(addresses="extra"), collection="coll"
            )

        mock_confirm.assert_called_once()
        assert draft.account_addresses == ("m1", "m2", "extra")

    def test_collection_only(self, assets_api: MagicMock):
        assets_api.get_assets_by_collection.return_value = ["m1"]

        with patch("helius_cli.prompts.confirm_or_cancel"):
            draft = build_draft_from_options(
                assets_api, **_options(addresses=None), collection="coll"
            )

        assert draft.account_addresses == ("m1",)

    def test_declined_collection_without_addresses(self, assets_api: MagicMock):
        """Test that declining the only address source fails fast."""
        assets_api.get_assets_by_collection.return_value = ["m1"]

        with patch("helius_cli.prompts.confirm_or_cancel", side_effect=UserCancelled()):
            with pytest.raises(ValidationError) as exc_info:
                build_draft_from_options(
                    assets_api, **_options(addresses=None), collection="coll"
                )

        assert "At least one account address" in exc_info.value.message

    def test_collection_failure_propagates(self, assets_api: MagicMock):
        assets_api.get_assets_by_collection.side_effect = TransportError("down")

        with pytest.raises(TransportError):
            build_draft_from_options(assets_api, **_options(), collection="coll")

    @pytest.mark.parametrize("invalid", [
        {"types": "NFT_SALE,BOGUS"},
        {"webhook_type": "webhooky"},
        {"status": "pending"},
    ])
    def test_invalid_option_skips_collection_lookup(self, assets_api: MagicMock, invalid: dict):
        """Test that bad option values fail before the collection is fetched."""
        options = _options(addresses=None)
        options.update(invalid)

        with patch("helius_cli.prompts.confirm_or_cancel") as mock_confirm:
            with pytest.raises(ValidationError):
                build_draft_from_options(assets_api, **options, collection="coll")

        assets_api.get_assets_by_collection.assert_not_called()
        mock_confirm.assert_not_called()


class TestBuildUpdateFromOptions:
    """Tests for partial update bodies."""

    def test_only_given_fields(self):
        changes = build_update_from_options(url="https://new.com", types="swap")

        assert changes == {"webhookURL": "https://new.com", "transactionTypes": ["SWAP"]}

    def test_status_sent_as_string(self):
        assert build_update_from_options(status="failed") == {"txnStatus": "failed"}

    def test_nothing_to_update(self):
        with pytest.raises(ValidationError, match="Nothing to update"):
            build_update_from_options()

    def test_empty_addresses_rejected(self):
        with pytest.raises(ValidationError):
            build_update_from_options(addresses=" , ")


class TestPrefillAddresses:
    """Tests for command-line addresses in interactive mode."""

    def test_addresses_and_collection(self, assets_api: MagicMock):
        assets_api.get_assets_by_collection.return_value = ["m1"]

        with patch("helius_cli.prompts.confirm_or_cancel"):
            draft = prefill_addresses(assets_api, "a1", "coll")

        assert draft.addresses == ["a1", "m1"]

    def test_collection_failure_is_not_fatal(self, assets_api: MagicMock):
        assets_api.get_assets_by_collection.side_effect = TransportError("down")

        draft = prefill_addresses(assets_api, "a1", "coll")

        assert draft.addresses == ["a1"]


class TestPromptForDraft:
    """Tests for the interactive path."""

    @pytest.fixture
    def base_prompts(self):
        """Patch the field prompts shared by every interactive run."""
        with patch("helius_cli.prompts.prompt_choice", side_effect=["enhanced", "skip"]), \
             patch("helius_cli.prompts.prompt_multi_choice", return_value=["NFT_SALE"]):
            yield

    def test_full_flow_with_collection(self, assets_api: MagicMock, base_prompts):
        assets_api.get_assets_by_collection.return_value = ["B", "C"]
        text_answers = ["https://myapp.com/webhook", "Bearer x", "coll", "D,E"]

        with patch("helius_cli.prompts.prompt_text", side_effect=text_answers), \
             patch("helius_cli.prompts.confirm", return_value=True), \
             patch("helius_cli.prompts.confirm_or_cancel"):
            draft = prompt_for_draft(assets_api)

        assert draft.url == "https://myapp.com/webhook"
        assert draft.webhook_type == "enhanced"
        assert draft.auth_header == "Bearer x"
        assert draft.txn_status is None
        assert draft.transaction_types == ("NFT_SALE",)
        assert draft.account_addresses == ("B", "C", "D", "E")

    def test_prefilled_skips_collection_question(self, assets_api: MagicMock, base_prompts):
        prefilled = AddressDraft().add(AddressSource.PREFILLED, ["A"])

        with patch("helius_cli.prompts.prompt_text", side_effect=["https://x.com", "", ""]), \
             patch("helius_cli.prompts.confirm") as mock_confirm:
            draft = prompt_for_draft(assets_api, prefilled)

        mock_confirm.assert_not_called()
        assert draft.account_addresses == ("A",)
        assert draft.auth_header is None

    def test_collection_failure_continues(self, assets_api: MagicMock, base_prompts):
        """Test a failed lookup falls through to manual address entry."""
        assets_api.get_assets_by_collection.side_effect = TransportError("down")

        with patch("helius_cli.prompts.prompt_text",
                   side_effect=["https://x.com", "", "coll", "manual1"]), \
             patch("helius_cli.prompts.confirm", return_value=True):
            draft = prompt_for_draft(assets_api)

        assert draft.account_addresses == ("manual1",)

    def test_reprompts_when_no_addresses(self, assets_api: MagicMock, base_prompts):
        """Test that an empty address list is never submitted."""
        with patch("helius_cli.prompts.prompt_text",
                   side_effect=["https://x.com", "", ",", "Z"]) as mock_text, \
             patch("helius_cli.prompts.confirm", return_value=False):
            draft = prompt_for_draft(assets_api)

        assert mock_text.call_count == 4
        assert draft.account_addresses == ("Z",)

    def test_status_choice_kept(self, assets_api: MagicMock):
        with patch("helius_cli.prompts.prompt_choice", side_effect=["raw", "failed"]), \
             patch("helius_cli.prompts.prompt_multi_choice", return_value=["ANY"]), \
             patch("helius_cli.prompts.prompt_text", side_effect=["https://x.com", "", "a1"]), \
             patch("helius_cli.prompts.confirm", return_value=False):
            draft = prompt_for_draft(assets_api)

        assert draft.txn_status == "failed"
        assert draft.to_payload()["txnStatus"] == "failed"
