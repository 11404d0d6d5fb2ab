"""
Configuration and logging helpers
"""

from .config import ConfigManager, ProviderConfig, VerificationConfig
from .logging import setup_logging

__all__ = [
    "ConfigManager",
    "ProviderConfig",
    "VerificationConfig",
    "setup_logging",
]
