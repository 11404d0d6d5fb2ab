"""Mock agents and config helpers for verification tests."""

import asyncio
from typing import List, Optional

from nocap_verifier.utils.config import ProviderConfig, VerificationConfig
from nocap_verifier.verification.agents import VerificationAgent
from nocap_verifier.verification.models import AgentVerdict, Verdict

AGENT_ORDER = ["Claude (Anthropic)", "Fetch.ai", "Gemini (Google)", "Bright Data"]


class StaticAgent(VerificationAgent):
    """Agent that answers with a fixed verdict after an optional delay."""

    def __init__(self, name: str, verdict: Verdict, confidence: float = 0.9,
                 reasoning: Optional[str] = None, delay_seconds: float = 0.0):
        super().__init__(name)
        self.verdict = verdict
        self.confidence = confidence
        self.reasoning = reasoning
        self.delay_seconds = delay_seconds
        self.calls: List[str] = []

    def is_available(self) -> bool:
        return True

    async def verify(self, statement: str) -> AgentVerdict:
        self.calls.append(statement)
        await asyncio.sleep(self.delay_seconds)
        return AgentVerdict(
            name=self.name,
            verdict=self.verdict,
            confidence=self.confidence,
            reasoning=self.reasoning
        )


class ExplodingAgent(VerificationAgent):
    """Agent that breaks its never-raise contract."""

    def __init__(self, name: str = "Exploding"):
        super().__init__(name)

    def is_available(self) -> bool:
        return True

    async def verify(self, statement: str) -> AgentVerdict:
        raise RuntimeError("agent crashed")


def static_agents(*verdicts: Verdict, reasoning: Optional[str] = None) -> List[StaticAgent]:
    """Build one StaticAgent per provider name, in provider order."""
    return [
        StaticAgent(name, verdict, reasoning=reasoning)
        for name, verdict in zip(AGENT_ORDER, verdicts)
    ]


def verdicts(*values: Verdict) -> List[AgentVerdict]:
    return [
        AgentVerdict(name=name, verdict=value, confidence=0.9)
        for name, value in zip(AGENT_ORDER, values)
    ]


def provider(name: str, api_key: str = "test-key") -> ProviderConfig:
    defaults = VerificationConfig().providers()[name]
    return defaults.model_copy(update={"api_key": api_key})


def configured(*names: str) -> VerificationConfig:
    """VerificationConfig with test keys for the named providers only."""
    return VerificationConfig(**{name: provider(name) for name in names})
