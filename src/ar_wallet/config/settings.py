"""Library settings loaded from environment variables and config files.

Configuration is loaded from (highest priority first):
1. Environment variables (prefix: ``ARWALLET_``, nested via ``__``)
2. YAML config file (``ARWALLET_CONFIG_PATH`` env var or ``AppConfig.from_yaml``)
3. Defaults defined here
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ---------------------------------------------------------------------------
# Sub-config models
# ---------------------------------------------------------------------------


class GatewayConfig(BaseSettings):
    """Arweave HTTP gateway settings."""

    model_config = SettingsConfigDict(
        env_prefix="ARWALLET_GATEWAY__",
        case_sensitive=False,
    )

    url: str = Field(
        default="https://arweave.net",
        description="Base URL of the Arweave gateway or node",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")


class CryptoConfig(BaseSettings):
    """Symmetric encryption and key generation settings."""

    model_config = SettingsConfigDict(
        env_prefix="ARWALLET_CRYPTO__",
        case_sensitive=False,
    )

    pbkdf2_salt: str = "salt"
    pbkdf2_iterations: int = Field(default=100_000, ge=1)
    key_size: int = Field(default=4096, ge=2048, description="RSA modulus size in bits")


class MetricsConfig(BaseSettings):
    """Prometheus metrics settings."""

    model_config = SettingsConfigDict(
        env_prefix="ARWALLET_METRICS__",
        case_sensitive=False,
    )

    enabled: bool = True


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------


def _load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file and return its contents as a dict.

    Returns an empty dict if the file doesn't exist or is empty.
    """
    p = Path(path)
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    return data if isinstance(data, dict) else {}


class AppConfig(BaseSettings):
    """Top-level library configuration.

    Loads settings from environment variables (``ARWALLET_`` prefix),
    an optional YAML file, and built-in defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARWALLET_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    config_path: str = ""

    gateway: GatewayConfig = Field(default_factory=GatewayConfig)
    crypto: CryptoConfig = Field(default_factory=CryptoConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Merge YAML config file contents under the env var overrides."""
        config_path = values.get("config_path", "")
        if not config_path:
            return values
        yaml_data = _load_yaml(config_path)
        # YAML values serve as defaults; env vars (already in *values*) win.
        for key, val in yaml_data.items():
            if key not in values or values[key] is None:
                values[key] = val
            elif isinstance(val, dict) and isinstance(values.get(key), dict):
                values[key] = {**val, **values[key]}
        return values

    @classmethod
    def from_yaml(cls, path: str | Path) -> Self:
        """Construct ``AppConfig`` loading defaults from a YAML file.

        Environment variables still override YAML values.
        """
        return cls(config_path=str(path))
