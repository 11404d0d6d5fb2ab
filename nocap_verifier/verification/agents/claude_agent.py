"""
Claude (Anthropic Messages API) verification agent
"""

from ...utils.config import ProviderConfig
from ..llm import ANTHROPIC_VERSION, build_fact_check_prompt, extract_claude_text, parse_verdict_payload
from ..models import AgentVerdict
from .base_agent import HTTPVerificationAgent


class ClaudeAgent(HTTPVerificationAgent):
    """Asks Claude for a JSON verdict on the statement"""

    def __init__(self, provider: ProviderConfig, timeout_seconds: float = 30, max_tokens: int = 1024):
        super().__init__(
            name="Claude (Anthropic)",
            slug="claude",
            provider=provider,
            timeout_seconds=timeout_seconds
        )
        self.max_tokens = max_tokens

    async def _verify_with_provider(self, statement: str) -> AgentVerdict:
        data = await self._post_json(
            self.provider.endpoint("/v1/messages"),
            {
                "model": self.provider.model,
                "max_tokens": self.max_tokens,
                "messages": [
                    {"role": "user", "content": build_fact_check_prompt(statement)}
                ],
            },
            headers={
                "x-api-key": self.provider.api_key,
                "anthropic-version": ANTHROPIC_VERSION,
            }
        )

        result = parse_verdict_payload(extract_claude_text(data))

        return AgentVerdict(
            name=self.name,
            verdict=result["verdict"],
            confidence=result.get("confidence") or 0.0,
            reasoning=result.get("reasoning")
        )
