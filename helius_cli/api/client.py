"""Base API client for Helius."""

from typing import Any, Mapping, Optional

import requests


class HeliusError(Exception):
    """Base class for every failure raised by the API client."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TransportError(HeliusError):
    """Raised when no response was received from the service."""


class RequestSetupError(HeliusError):
    """Raised when a request could not be built or sent."""


class APIError(HeliusError):
    """Exception raised for non-2xx responses and JSON-RPC errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[Any] = None,
        body: Optional[str] = None
    ):
        self.status_code = status_code
        self.response = response
        self.body = body
        super().__init__(message)


class HeliusAPI:
    """Base API client for the Helius REST and RPC endpoints."""

    BASE_URL = "https://api.helius.xyz/v0"
    RPC_URL = "https://mainnet.helius-rpc.com"
    RPC_REQUEST_ID = "helius-cli"

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        rpc_url: Optional[str] = None,
        timeout: int = 30
    ):
        """
        Initialize the Helius API client.

        Args:
            api_key: The API key, sent as the ``api-key`` query parameter.
            base_url: Optional custom REST base URL.
            rpc_url: Optional custom JSON-RPC endpoint.
            timeout: Request timeout in seconds (default: 30).
        """
        self.api_key = api_key
        self.base_url = base_url or self.BASE_URL
        self.rpc_url = rpc_url or self.RPC_URL
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
        })

    @classmethod
    def from_config(cls, config: Mapping[str, Any], **kwargs: Any) -> "HeliusAPI":
        """Build a client from a loaded configuration mapping."""
        return cls(
            api_key=config.get("api_key", ""),
            base_url=config.get("base_url"),
            rpc_url=config.get("rpc_url"),
            **kwargs
        )

    def refresh(self, config: Mapping[str, Any]) -> None:
        """Re-read credentials and endpoints from a configuration mapping."""
        self.api_key = config.get("api_key", "")
        self.base_url = config.get("base_url") or self.BASE_URL
        self.rpc_url = config.get("rpc_url") or self.RPC_URL

    def _send(
        self,
        method: str,
        url: str,
        json: Optional[Any] = None,
        **kwargs: Any
    ) -> Any:
        """
        Send one request and translate failures into HeliusError subclasses.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE).
            url: Absolute URL.
            json: JSON body for POST/PUT requests.
            **kwargs: Additional arguments for requests.

        Returns:
            Decoded JSON response, or an empty dict for an empty body.

        Raises:
            APIError: The service answered with a non-2xx status.
            TransportError: No response was received.
            RequestSetupError: The request could not be prepared or sent.
        """
        kwargs.setdefault("timeout", self.timeout)

        try:
            response = self.session.request(
                method,
                url,
                params={"api-key": self.api_key},
                json=json,
                **kwargs
            )
            response.raise_for_status()

        except requests.exceptions.HTTPError as e:
            raise self._api_error(e.response, url)

        except (
            requests.exceptions.ConnectionError,
            requests.exceptions.Timeout,
        ) as e:
            raise TransportError(f"No response received from API: {e}")

        except requests.exceptions.RequestException as e:
            raise RequestSetupError(f"Error setting up request: {e}")

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            raise APIError(
                f"API returned a non-JSON response (HTTP {response.status_code}): {url}",
                status_code=response.status_code,
                body=response.text[:500]
            )

    @staticmethod
    def _api_error(response: Optional[requests.Response], url: str) -> APIError:
        """Build an APIError that always includes the service's reason."""
        if response is None:
            return APIError(f"API request failed: {url}")

        error_response: Optional[Any] = None
        error_body: Optional[str] = None
        try:
            error_response = response.json()
        except ValueError:
            error_body = response.text

        status = response.status_code
        msg = f"API Error: {status} - {url}"
        if isinstance(error_response, dict):
            detail = (
                error_response.get("error")
                or error_response.get("message")
                or error_response.get("detail")
            )
            if detail:
                msg += f"\n  Reason: {detail}"
        elif error_body:
            msg += f"\n  Response: {error_body[:500]}"

        return APIError(
            msg,
            status_code=status,
            response=error_response,
            body=error_body
        )

    def _url(self, endpoint: str) -> str:
        """Join the REST base URL and an endpoint path."""
        return f"{self.base_url.rstrip('/')}{endpoint}"

    def get(self, endpoint: str, **kwargs: Any) -> Any:
        """Make a GET request."""
        return self._send("GET", self._url(endpoint), **kwargs)

    def post(self, endpoint: str, json: Optional[Any] = None, **kwargs: Any) -> Any:
        """Make a POST request."""
        return self._send("POST", self._url(endpoint), json=json, **kwargs)

    def put(self, endpoint: str, json: Optional[Any] = None, **kwargs: Any) -> Any:
        """Make a PUT request."""
        return self._send("PUT", self._url(endpoint), json=json, **kwargs)

    def delete(self, endpoint: str, **kwargs: Any) -> Any:
        """Make a DELETE request."""
        return self._send("DELETE", self._url(endpoint), **kwargs)

    def rpc(self, method: str, params: Any) -> Any:
        """
        Call a JSON-RPC method on the RPC endpoint.

        Args:
            method: RPC method name (e.g. ``getAssetsByGroup``).
            params: Method parameters.

        Returns:
            The ``result`` member of the RPC response (None if absent).

        Raises:
            APIError: If the response carries a JSON-RPC ``error`` member.
        """
        envelope = {
            "jsonrpc": "2.0",
            "id": self.RPC_REQUEST_ID,
            "method": method,
            "params": params,
        }
        data = self._send("POST", self.rpc_url, json=envelope)

        if isinstance(data, dict) and data.get("error"):
            error = data["error"]
            detail = error.get("message") if isinstance(error, dict) else error
            raise APIError(
                f"RPC Error: {method} - {detail}",
                status_code=200,
                response=data
            )

        return data.get("result") if isinstance(data, dict) else None
