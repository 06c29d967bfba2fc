"""Configuration management for Helius CLI.

Settings live in ``~/.helius/config.yaml`` unless ``--config`` points
elsewhere. ``HELIUS_*`` environment variables (including ones from a
``.env`` file) win over the file.
"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv


CONFIG_DIR = Path.home() / ".helius"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

DEFAULT_CONFIG = {
    "api_key": "",
    "base_url": "https://api.helius.xyz/v0",
    "rpc_url": "https://mainnet.helius-rpc.com",
    "default_output": "text",
}

# Keys accepted by `helius config set`
CONFIG_KEYS = tuple(DEFAULT_CONFIG)

# HELIUS_API_KEY -> api_key, ...
ENV_VARS = {f"HELIUS_{key.upper()}": key for key in CONFIG_KEYS}

OUTPUT_FORMATS = ("text", "json", "table")


def _config_file(config_path: Optional[str]) -> Path:
    return Path(config_path) if config_path else CONFIG_FILE


def ensure_config_dir() -> Path:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return CONFIG_DIR


def load_config(config_path: Optional[str] = None) -> dict[str, Any]:
    """
    Build the effective settings.

    Defaults are overlaid by the YAML file (``config_path`` or the default
    file; a missing file is not an error), then by ``HELIUS_*`` variables.
    Empty variables are ignored.
    """
    load_dotenv()

    config = DEFAULT_CONFIG.copy()

    file_path = _config_file(config_path)
    if file_path.exists():
        with open(file_path) as f:
            config.update(yaml.safe_load(f) or {})

    for env_var, key in ENV_VARS.items():
        value = os.environ.get(env_var)
        if value:
            config[key] = value

    return config


def save_config(config: dict[str, Any], config_path: Optional[str] = None) -> Path:
    """Write ``config`` as YAML, creating the target's directory if needed."""
    file_path = _config_file(config_path)
    if config_path:
        file_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        ensure_config_dir()

    with open(file_path, "w") as f:
        yaml.safe_dump(config, f, default_flow_style=False)

    return file_path


def set_config_value(
    key: str,
    value: Any,
    config_path: Optional[str] = None
) -> Path:
    """
    Persist one setting.

    The file is rewritten from the effective settings, so values coming from
    the environment at the time of the call are saved too.

    Raises:
        KeyError: If ``key`` is not in CONFIG_KEYS.
    """
    if key not in CONFIG_KEYS:
        raise KeyError(key)
    config = load_config(config_path)
    config[key] = value
    return save_config(config, config_path)


def reset_config(config_path: Optional[str] = None) -> Path:
    return save_config(DEFAULT_CONFIG.copy(), config_path)
