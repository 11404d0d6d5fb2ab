"""
Base interface for verification agents
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import aiohttp

from ...utils.config import ProviderConfig
from ..errors import ConfigurationMissing, ProviderRequestFailed, ProviderResponseUnparseable
from ..models import AgentVerdict, Verdict

logger = logging.getLogger(__name__)

NOT_CONFIGURED_REASON = "API key not configured"


class VerificationAgent(ABC):
    """Abstract base class for verification agents"""

    def __init__(self, name: str, slug: Optional[str] = None):
        self.name = name
        self.logger = logger.getChild(slug or name)

    @abstractmethod
    async def verify(self, statement: str) -> AgentVerdict:
        """
        Verify a single statement

        Implementations never raise; every failure becomes an
        inconclusive verdict.

        Args:
            statement: The statement text to verify

        Returns:
            AgentVerdict with verdict, confidence and reasoning
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if this agent is properly configured

        Returns:
            True if the agent can call its provider, False otherwise
        """
        pass

    def create_unconfigured_verdict(self) -> AgentVerdict:
        return AgentVerdict(
            name=self.name,
            verdict=Verdict.INCONCLUSIVE,
            confidence=0.0,
            reasoning=NOT_CONFIGURED_REASON
        )

    def create_error_verdict(self, error_message: str) -> AgentVerdict:
        """
        Create a standardized error verdict

        Args:
            error_message: Error description

        Returns:
            Inconclusive AgentVerdict carrying the error as reasoning
        """
        return AgentVerdict(
            name=self.name,
            verdict=Verdict.INCONCLUSIVE,
            confidence=0.0,
            reasoning=f"Error: {error_message}"
        )


class ProviderClient:
    """Holds the HTTP session and credential for one external provider"""

    def __init__(self,
                 name: str,
                 slug: str,
                 provider: ProviderConfig,
                 timeout_seconds: float = 30):
        self.name = name
        self.logger = logger.getChild(slug)
        self.provider = provider
        self.timeout_seconds = timeout_seconds
        self.session: Optional[aiohttp.ClientSession] = None

    def is_available(self) -> bool:
        return self.provider.is_configured

    async def _ensure_session(self):
        """Ensure HTTP session is initialized"""
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
            self.session = aiohttp.ClientSession(timeout=timeout)

    async def _post_json(self,
                         url: str,
                         payload: Dict[str, Any],
                         headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """
        POST a JSON payload once and return the decoded JSON body

        Args:
            url: Absolute endpoint URL
            payload: JSON request body
            headers: Extra request headers

        Returns:
            Decoded JSON response

        Raises:
            ConfigurationMissing: provider credential is not set
            ProviderRequestFailed: network error, timeout or non-2xx status
            ProviderResponseUnparseable: body is not a JSON object
        """
        if not self.is_available():
            raise ConfigurationMissing(f"{self.name} API key not configured")

        await self._ensure_session()

        request_headers = {"Content-Type": "application/json"}
        request_headers.update(headers or {})

        self.logger.debug(f"POST {url.split('?')[0]}")
        start_time = time.time()

        try:
            async with self.session.post(url, json=payload, headers=request_headers) as response:
                processing_time = int((time.time() - start_time) * 1000)

                if response.status < 200 or response.status >= 300:
                    raise ProviderRequestFailed(
                        f"{self.name} API error: {response.reason or response.status}",
                        status=response.status
                    )

                try:
                    data = await response.json(content_type=None)
                except ValueError as e:
                    raise ProviderResponseUnparseable(f"{self.name} returned invalid JSON") from e

                self.logger.debug(f"Request successful in {processing_time}ms")
        except asyncio.TimeoutError as e:
            raise ProviderRequestFailed(f"request timed out after {self.timeout_seconds}s") from e
        except aiohttp.ClientError as e:
            raise ProviderRequestFailed(f"{self.name} request failed: {e}") from e

        if not isinstance(data, dict):
            raise ProviderResponseUnparseable(f"{self.name} returned {type(data).__name__}, expected object")
        return data

    async def close(self):
        """Close HTTP session"""
        if self.session and not self.session.closed:
            await self.session.close()

    async def __aenter__(self):
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


class HTTPVerificationAgent(ProviderClient, VerificationAgent):
    """Base class for agents backed by a single HTTP provider"""

    async def verify(self, statement: str) -> AgentVerdict:
        if not self.is_available():
            return self.create_unconfigured_verdict()

        try:
            return await self._verify_with_provider(statement)
        except Exception as e:
            self.logger.error(f"{self.name} verification error: {e}")
            return self.create_error_verdict(str(e) or e.__class__.__name__)

    @abstractmethod
    async def _verify_with_provider(self, statement: str) -> AgentVerdict:
        """Call the provider; may raise, verify() maps errors to a verdict"""
        pass
