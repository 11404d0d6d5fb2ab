"""
Configuration management for the verification providers
"""

import copy
import logging
import os
from pathlib import Path
from typing import Dict, Any, List, Mapping, Optional

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    "providers": {
        "anthropic": {
            "api_key": "",
            "base_url": "https://api.anthropic.com",
            "model": "claude-3-5-sonnet-20241022"
        },
        "gemini": {
            "api_key": "",
            "base_url": "https://generativelanguage.googleapis.com",
            "model": "gemini-2.0-flash-exp"
        },
        "fetchai": {
            "api_key": "",
            "base_url": "https://agentverse.ai/api"
        },
        "brightdata": {
            "api_key": "",
            "base_url": "https://api.brightdata.com"
        },
        "lava_gateway": {
            "api_key": "",
            "base_url": "https://gateway.lavanet.xyz"
        }
    },
    "verification": {
        "timeout_seconds": 30,
        "max_concurrent_statements": 3
    }
}

# Environment variable -> dot path into the config tree
ENV_OVERRIDES = {
    "ANTHROPIC_API_KEY": "providers.anthropic.api_key",
    "ANTHROPIC_BASE_URL": "providers.anthropic.base_url",
    "ANTHROPIC_MODEL": "providers.anthropic.model",
    "GEMINI_API_KEY": "providers.gemini.api_key",
    "GEMINI_BASE_URL": "providers.gemini.base_url",
    "GEMINI_MODEL": "providers.gemini.model",
    "FETCHAI_API_KEY": "providers.fetchai.api_key",
    "FETCHAI_AGENTVERSE_URL": "providers.fetchai.base_url",
    "BRIGHTDATA_API_KEY": "providers.brightdata.api_key",
    "BRIGHTDATA_BASE_URL": "providers.brightdata.base_url",
    "LAVA_API_KEY": "providers.lava_gateway.api_key",
    "LAVA_BASE_URL": "providers.lava_gateway.base_url",
    "VERIFICATION_TIMEOUT_SECONDS": "verification.timeout_seconds",
}


class ProviderConfig(BaseModel):
    """Credential and endpoint for one external provider"""
    model_config = {"frozen": True}

    api_key: str = Field(default="", description="Provider credential, empty when not configured")
    base_url: str = Field(description="Provider base URL without trailing slash")
    model: Optional[str] = Field(None, description="Model name for LLM providers")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def endpoint(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"


def _provider(name: str) -> ProviderConfig:
    return ProviderConfig(**DEFAULT_CONFIG["providers"][name])


class VerificationConfig(BaseModel):
    """Read-only configuration consumed by the verification components"""
    model_config = {"frozen": True}

    anthropic: ProviderConfig = Field(default_factory=lambda: _provider("anthropic"))
    gemini: ProviderConfig = Field(default_factory=lambda: _provider("gemini"))
    fetchai: ProviderConfig = Field(default_factory=lambda: _provider("fetchai"))
    brightdata: ProviderConfig = Field(default_factory=lambda: _provider("brightdata"))
    lava_gateway: ProviderConfig = Field(default_factory=lambda: _provider("lava_gateway"))

    timeout_seconds: float = Field(default=30, gt=0)
    max_concurrent_statements: int = Field(default=3, ge=1)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "VerificationConfig":
        """Build configuration from defaults plus environment variables"""
        return ConfigManager(environ=environ).build_config()

    def providers(self) -> Dict[str, ProviderConfig]:
        return {
            "anthropic": self.anthropic,
            "gemini": self.gemini,
            "fetchai": self.fetchai,
            "brightdata": self.brightdata,
            "lava_gateway": self.lava_gateway,
        }

    def missing_configs(self) -> List[str]:
        """Names of providers whose credential is not set"""
        return [name for name, provider in self.providers().items() if not provider.is_configured]


class ConfigManager:
    """Merges defaults, an optional YAML file and environment variables"""

    def __init__(self,
                 config_path: Optional[Path] = None,
                 environ: Optional[Mapping[str, str]] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to YAML config file, if None uses defaults
            environ: Environment mapping, defaults to os.environ
        """
        self.config = copy.deepcopy(DEFAULT_CONFIG)

        if config_path and config_path.exists():
            self.load_config(config_path)
        elif config_path:
            logger.warning(f"Config file not found: {config_path}, using defaults")

        self.apply_environment(os.environ if environ is None else environ)

    def load_config(self, config_path: Path) -> None:
        """Load configuration from YAML file."""
        try:
            with open(config_path, 'r') as f:
                file_config = yaml.safe_load(f) or {}

            self.config = self._merge_configs(self.config, file_config)
            logger.info(f"Loaded configuration from {config_path}")

        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load config from {config_path}: {e}")

    def apply_environment(self, environ: Mapping[str, str]) -> None:
        """Override configured values with non-empty environment variables."""
        for var, key_path in ENV_OVERRIDES.items():
            value = environ.get(var)
            if value:
                self.set(key_path, value)

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key_path: Dot-separated path like 'providers.gemini.model'
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split('.')
        value = self.config

        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key_path: str, value: Any) -> None:
        """Set configuration value using dot notation."""
        keys = key_path.split('.')
        config = self.config

        for key in keys[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]

        config[keys[-1]] = value

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two configuration dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def build_config(self) -> VerificationConfig:
        """Validate the merged tree into a VerificationConfig."""
        # Unknown provider sections in a config file are ignored
        return VerificationConfig(
            **{name: ProviderConfig(**self.get(f"providers.{name}", {})) for name in DEFAULT_CONFIG["providers"]},
            **self.get("verification", {})
        )
