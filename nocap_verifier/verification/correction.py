"""
Correction synthesis for statements judged false
"""

import logging
from typing import List, Sequence

from ..utils.config import ProviderConfig
from .agents.base_agent import ProviderClient
from .llm import ANTHROPIC_VERSION, build_correction_prompt, extract_claude_text
from .models import AgentVerdict, Verdict

logger = logging.getLogger(__name__)

NO_CORRECTION_MESSAGE = (
    "The statement has been determined to be false, but specific corrections are unavailable."
)


def collect_false_reasonings(agents: Sequence[AgentVerdict]) -> List[str]:
    """Reasoning text from every agent that voted false, in agent order"""
    return [
        agent.reasoning
        for agent in agents
        if agent.verdict == Verdict.FALSE and agent.reasoning
    ]


class CorrectionSynthesizer(ProviderClient):
    """Turns false-agent reasoning into a short spoken correction"""

    def __init__(self, provider: ProviderConfig, timeout_seconds: float = 30, max_tokens: int = 512):
        super().__init__(
            name="Claude (Anthropic)",
            slug="correction",
            provider=provider,
            timeout_seconds=timeout_seconds
        )
        self.max_tokens = max_tokens

    async def synthesize(self, false_statement: str, agents: Sequence[AgentVerdict]) -> str:
        """
        Produce correct information for a false statement, never raising

        Args:
            false_statement: Statement the consensus judged false
            agents: Agent verdicts behind that consensus

        Returns:
            Synthesized correction, the first false-agent reasoning, or a
            generic message when no reasoning is available
        """
        reasonings = collect_false_reasonings(agents)

        if not reasonings:
            return NO_CORRECTION_MESSAGE

        if self.is_available():
            try:
                data = await self._post_json(
                    self.provider.endpoint("/v1/messages"),
                    {
                        "model": self.provider.model,
                        "max_tokens": self.max_tokens,
                        "messages": [
                            {"role": "user", "content": build_correction_prompt(false_statement, reasonings)}
                        ],
                    },
                    headers={
                        "x-api-key": self.provider.api_key,
                        "anthropic-version": ANTHROPIC_VERSION,
                    }
                )
                return extract_claude_text(data)
            except Exception as e:
                self.logger.error(f"Error generating correction: {e}")

        return f"Correction: {reasonings[0]}"
