"""
Exception taxonomy for provider calls made during statement verification
"""

from typing import Optional


class VerificationError(Exception):
    """Base class for verification provider errors"""


class ConfigurationMissing(VerificationError):
    """A provider credential is absent"""


class ProviderRequestFailed(VerificationError):
    """Network error or non-success HTTP status from a provider"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ProviderResponseUnparseable(VerificationError):
    """Provider answered, but not in the expected shape"""
