"""
Gemini (Google generateContent API) verification agent
"""

from urllib.parse import quote

from ...utils.config import ProviderConfig
from ..llm import build_fact_check_prompt, extract_gemini_text, parse_verdict_payload
from ..models import AgentVerdict
from .base_agent import HTTPVerificationAgent


class GeminiAgent(HTTPVerificationAgent):
    """Asks Gemini for a JSON verdict on the statement"""

    def __init__(self, provider: ProviderConfig, timeout_seconds: float = 30):
        super().__init__(
            name="Gemini (Google)",
            slug="gemini",
            provider=provider,
            timeout_seconds=timeout_seconds
        )
        self.generation_config = {
            "temperature": 0.1,
            "maxOutputTokens": 1024,
        }

    def _endpoint(self) -> str:
        # Gemini authenticates with a query parameter, not a header
        path = f"/v1beta/models/{self.provider.model}:generateContent"
        return f"{self.provider.endpoint(path)}?key={quote(self.provider.api_key, safe='')}"

    async def _verify_with_provider(self, statement: str) -> AgentVerdict:
        data = await self._post_json(
            self._endpoint(),
            {
                "contents": [
                    {"parts": [{"text": build_fact_check_prompt(statement)}]}
                ],
                "generationConfig": self.generation_config,
            }
        )

        result = parse_verdict_payload(extract_gemini_text(data))

        return AgentVerdict(
            name=self.name,
            verdict=result["verdict"],
            confidence=result.get("confidence") or 0.0,
            reasoning=result.get("reasoning")
        )
