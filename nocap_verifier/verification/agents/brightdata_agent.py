"""
Bright Data web search agent
"""

from ...utils.config import ProviderConfig
from ..models import AgentVerdict, Verdict
from .base_agent import HTTPVerificationAgent

NUM_RESULTS = 5
FOUND_CONFIDENCE = 0.75
NOT_FOUND_CONFIDENCE = 0.3


class BrightDataAgent(HTTPVerificationAgent):
    """
    Searches the web for the statement

    The search API has no verdict of its own: any result counts as
    support, no result is inconclusive.
    """

    def __init__(self, provider: ProviderConfig, timeout_seconds: float = 30):
        super().__init__(
            name="Bright Data",
            slug="brightdata",
            provider=provider,
            timeout_seconds=timeout_seconds
        )

    async def _verify_with_provider(self, statement: str) -> AgentVerdict:
        data = await self._post_json(
            self.provider.endpoint("/v1/search"),
            {
                "query": statement,
                "num_results": NUM_RESULTS,
            },
            headers={"Authorization": f"Bearer {self.provider.api_key}"}
        )

        results = data.get("results")
        has_results = isinstance(results, list) and len(results) > 0

        if has_results:
            return AgentVerdict(
                name=self.name,
                verdict=Verdict.TRUE,
                confidence=FOUND_CONFIDENCE,
                reasoning="Found supporting web sources"
            )
        return AgentVerdict(
            name=self.name,
            verdict=Verdict.INCONCLUSIVE,
            confidence=NOT_FOUND_CONFIDENCE,
            reasoning="No conclusive web sources found"
        )
