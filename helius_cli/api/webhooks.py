"""Webhook API client for Helius."""

from typing import Any

from helius_cli.api.client import APIError, HeliusAPI
from helius_cli.models import Webhook, WebhookDraft


def _webhook(data: Any, endpoint: str) -> Webhook:
    if not isinstance(data, dict):
        raise APIError(
            f"Unexpected response from {endpoint}: expected a webhook object",
            response=data
        )
    return Webhook.from_api(data)


class WebhooksAPI:
    """API client for webhook-related endpoints."""

    def __init__(self, client: HeliusAPI):
        """
        Initialize the Webhooks API.

        Args:
            client: The base Helius API client.
        """
        self.client = client

    def list(self) -> list[Webhook]:
        """
        List every webhook registered for the API key.

        Returns:
            The webhooks, as reported by the service.

        Raises:
            APIError: If the service does not answer with a list.
        """
        data = self.client.get("/webhooks")
        if not data:
            return []
        if not isinstance(data, list):
            raise APIError(
                "Unexpected response from /webhooks: expected a list of webhooks",
                response=data
            )
        return [_webhook(item, "/webhooks") for item in data]

    def get(self, webhook_id: str) -> Webhook:
        """
        Get a webhook by ID.

        Args:
            webhook_id: The webhook ID.

        Returns:
            The webhook record.
        """
        endpoint = f"/webhooks/{webhook_id}"
        return _webhook(self.client.get(endpoint), endpoint)

    def create(self, draft: WebhookDraft) -> Webhook:
        """
        Create a webhook.

        Args:
            draft: A complete webhook draft.

        Returns:
            The created webhook, including its service-assigned ID.
        """
        return _webhook(
            self.client.post("/webhooks", json=draft.to_payload()), "/webhooks"
        )

    def update(self, webhook_id: str, changes: dict) -> Webhook:
        """
        Update a webhook.

        Args:
            webhook_id: The webhook ID.
            changes: Wire-format fields to send; merging is left to the service.

        Returns:
            The updated webhook.
        """
        endpoint = f"/webhooks/{webhook_id}"
        return _webhook(self.client.put(endpoint, json=changes), endpoint)

    def delete(self, webhook_id: str) -> dict:
        """
        Delete a webhook.

        Args:
            webhook_id: The webhook ID.

        Returns:
            ``{"success": bool}``. A response without a ``success`` member
            counts as success.
        """
        data = self.client.delete(f"/webhooks/{webhook_id}")
        if not isinstance(data, dict):
            data = {}
        return {"success": bool(data.get("success", True))}
