"""Configuration management system using Pydantic v2 and YAML.

This module provides type-safe configuration loading with validation
for the Virtual Stylist.
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .exceptions import ConfigFileNotFoundError, ConfigurationError


SUPPORTED_PROVIDERS = ("glm", "kimi")


class LLMConfig(BaseModel):
    """Configuration for the chat-completion suggestion source."""

    base_url: str = Field(default="http://localhost:8000/api/ai", description="Base URL of the AI proxy")
    glm_api_key: Optional[str] = Field(default=None, description="API key for the GLM provider")
    kimi_api_key: Optional[str] = Field(default=None, description="API key for the Kimi provider")
    provider_order: list[str] = Field(default_factory=lambda: list(SUPPORTED_PROVIDERS), description="Provider preference order")
    temperature: float = Field(default=0.7, ge=0.0, le=2.0, description="Sampling temperature")
    timeout_seconds: float = Field(default=15.0, gt=0.0, description="Total timeout for one external call")

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate URL scheme and drop trailing slash."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip('/')

    @field_validator('provider_order')
    @classmethod
    def validate_provider_order(cls, v: list[str]) -> list[str]:
        """Ensure only known providers are listed, without repeats."""
        normalized = [p.lower() for p in v]
        unknown = [p for p in normalized if p not in SUPPORTED_PROVIDERS]
        if unknown:
            raise ValueError(f"Unknown providers {unknown}. Choose from: {list(SUPPORTED_PROVIDERS)}")
        if len(set(normalized)) != len(normalized):
            raise ValueError("provider_order must not repeat a provider")
        return normalized

    @model_validator(mode='after')
    def fill_keys_from_environment(self) -> 'LLMConfig':
        """Read API keys from GLM_API_KEY / KIMI_API_KEY when not set in YAML."""
        if not self.glm_api_key:
            self.glm_api_key = os.environ.get('GLM_API_KEY') or None
        if not self.kimi_api_key:
            self.kimi_api_key = os.environ.get('KIMI_API_KEY') or None
        return self

    def api_key_for(self, provider: str) -> Optional[str]:
        """Return the API key configured for a provider."""
        return {"glm": self.glm_api_key, "kimi": self.kimi_api_key}.get(provider)


class CatalogConfig(BaseModel):
    """Configuration for the product catalog."""

    path: Optional[str] = Field(default=None, description="Catalog JSON file. Bundled demo catalog when unset")
    current_product_id: str = Field(default="sku789", description="Product shown on the product page")


class CartConfig(BaseModel):
    """Configuration for the in-memory cart."""

    seed_product_ids: list[str] = Field(default_factory=list, description="Products placed in the cart at start-up")


class AppConfig(BaseModel):
    """Root configuration model containing all sub-configurations."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    cart: CartConfig = Field(default_factory=CartConfig)
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Choose from: {valid_levels}")
        return v_upper

    @classmethod
    def from_yaml(cls, path: Path | str) -> 'AppConfig':
        """Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigurationError: If the YAML cannot be parsed
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            try:
                config_dict = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Invalid YAML in {path}: {e}", context={"path": str(path)}
                ) from e

        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                "Configuration root must be a mapping", context={"path": str(path)}
            )

        return cls.model_validate(config_dict)


# Singleton pattern for configuration
_config: Optional[AppConfig] = None


def load_config(config_path: Optional[Path | str] = None) -> AppConfig:
    """Load and validate configuration from YAML file.

    Resolution order: explicit ``config_path``, then the STYLIST_CONFIG
    environment variable, then config/config.yaml in the project root.
    Only the implicit default may be absent, in which case built-in
    defaults are used.

    Args:
        config_path: Path to configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        ConfigFileNotFoundError: If a requested config file doesn't exist
        ValueError: If configuration is invalid
    """
    explicit = True
    if config_path is None:
        env_config_path = os.environ.get('STYLIST_CONFIG')
        if env_config_path:
            config_path = Path(env_config_path)
        else:
            project_root = Path(__file__).parent.parent.parent
            config_path = project_root / "config" / "config.yaml"
            explicit = False
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        if explicit:
            raise ConfigFileNotFoundError(
                f"Configuration file not found: {config_path}\n"
                f"Copy config/config.example.yaml and customize it, "
                f"or unset STYLIST_CONFIG to use defaults.",
                path=str(config_path),
            )
        return AppConfig()

    return AppConfig.from_yaml(config_path)


def get_config(config_path: Optional[Path | str] = None, reload: bool = False) -> AppConfig:
    """Get configuration instance (singleton pattern).

    Args:
        config_path: Path to configuration file (only used on first call or if reload=True)
        reload: Force reload of configuration

    Returns:
        Cached or newly loaded AppConfig instance
    """
    global _config

    if _config is None or reload:
        _config = load_config(config_path)

    return _config


def reset_config() -> None:
    """Reset cached configuration (useful for testing)."""
    global _config
    _config = None
