"""Pytest fixtures and configuration for Helius CLI tests."""

import os
from pathlib import Path
from typing import Any, Generator
from unittest.mock import patch

import pytest
import yaml


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def temp_config_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary config directory."""
    config_dir = tmp_path / ".helius"
    config_dir.mkdir(parents=True)
    yield config_dir


@pytest.fixture
def temp_config_file(temp_config_dir: Path) -> Path:
    """Create a temporary config file with test values."""
    config_file = temp_config_dir / "config.yaml"
    config_data = {
        "api_key": "test_api_key_12345",
        "base_url": "https://api.helius.xyz/v0",
        "rpc_url": "https://mainnet.helius-rpc.com",
        "default_output": "text",
    }
    with open(config_file, "w") as f:
        yaml.safe_dump(config_data, f)
    return config_file


@pytest.fixture
def mock_env_vars() -> Generator[None, None, None]:
    """Set up mock environment variables."""
    env_vars = {
        "HELIUS_API_KEY": "env_api_key_67890",
        "HELIUS_BASE_URL": "https://custom.api.com/v0",
        "HELIUS_RPC_URL": "https://devnet.helius-rpc.com",
        "HELIUS_DEFAULT_OUTPUT": "json",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield


@pytest.fixture(autouse=True)
def clean_env() -> Generator[None, None, None]:
    """Remove Helius environment variables and skip .env loading."""
    env_vars_to_remove = [
        "HELIUS_API_KEY",
        "HELIUS_BASE_URL",
        "HELIUS_RPC_URL",
        "HELIUS_DEFAULT_OUTPUT",
    ]
    original = {k: os.environ.get(k) for k in env_vars_to_remove}
    for k in env_vars_to_remove:
        os.environ.pop(k, None)
    with patch("helius_cli.config.load_dotenv"):
        yield
    for k in env_vars_to_remove:
        os.environ.pop(k, None)
    for k, v in original.items():
        if v is not None:
            os.environ[k] = v


# =============================================================================
# Webhook Response Fixtures
# =============================================================================

@pytest.fixture
def webhook_payload() -> dict[str, Any]:
    """A webhook as returned by the service."""
    return {
        "webhookID": "a1b2c3d4-0000-1111-2222-333344445555",
        "webhookURL": "https://myapp.com/webhook",
        "webhookType": "enhanced",
        "transactionTypes": ["NFT_SALE", "NFT_LISTING"],
        "accountAddresses": [
            "M2mx93ekt1fmXSVkTrUL9xVFHkmME8HTUi5Cyc5aF7K",
        ],
        "authHeader": "Bearer secret",
        "txnStatus": "all",
    }


@pytest.fixture
def webhook_list_payload(webhook_payload: dict[str, Any]) -> list[dict[str, Any]]:
    """Two webhooks as returned by the list endpoint."""
    second = {
        "webhookID": "ffff0000-0000-1111-2222-333344445555",
        "webhookURL": "https://other.com/hook",
        "webhookType": "raw",
        "transactionTypes": ["ANY"],
        "accountAddresses": [],
        "txnStatus": ["failed"],
        "encoding": "jsonParsed",
        "encoding_config": {"format": "json", "compression": "none"},
    }
    return [webhook_payload, second]


# =============================================================================
# Asset Fixtures
# =============================================================================

def make_asset_page(start: int, count: int) -> dict[str, Any]:
    """Build one getAssetsByGroup result page."""
    return {
        "total": count,
        "limit": 1000,
        "page": 1,
        "items": [{"id": f"mint{i}", "interface": "V1_NFT"} for i in range(start, start + count)],
    }


@pytest.fixture
def asset_page():
    """Factory for getAssetsByGroup result pages."""
    return make_asset_page
