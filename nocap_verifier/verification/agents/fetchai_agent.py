"""
Fetch.ai Agentverse verification agent
"""

from ...utils.config import ProviderConfig
from ..models import AgentVerdict, Verdict
from .base_agent import HTTPVerificationAgent

DEFAULT_CONFIDENCE = 0.8
DEFAULT_REASONING = "Fetch.ai agent verification"


class FetchAIAgent(HTTPVerificationAgent):
    """Sends the statement to an Agentverse fact-verification agent"""

    def __init__(self, provider: ProviderConfig, timeout_seconds: float = 30):
        super().__init__(
            name="Fetch.ai",
            slug="fetchai",
            provider=provider,
            timeout_seconds=timeout_seconds
        )

    async def _verify_with_provider(self, statement: str) -> AgentVerdict:
        data = await self._post_json(
            self.provider.endpoint("/v1/verify"),
            {
                "statement": statement,
                "task": "fact_verification",
            },
            headers={"Authorization": f"Bearer {self.provider.api_key}"}
        )

        # Provider answers pre-structured; falsy fields take the defaults
        return AgentVerdict(
            name=self.name,
            verdict=data.get("verdict") or Verdict.INCONCLUSIVE,
            confidence=data.get("confidence") or DEFAULT_CONFIDENCE,
            reasoning=data.get("reasoning") or DEFAULT_REASONING
        )
