"""
Consensus resolution over agent verdicts
"""

import logging
from typing import Sequence

from ..utils.config import ProviderConfig
from .agents.base_agent import ProviderClient
from .models import AgentVerdict, ConsensusOutcome, Verdict

logger = logging.getLogger(__name__)

# Fraction of all agents that must agree; with four agents this means 3 of 4
CONSENSUS_THRESHOLD = 0.6


def calculate_local_consensus(agents: Sequence[AgentVerdict]) -> ConsensusOutcome:
    """
    Majority vote with a fixed agreement threshold

    An inconclusive outcome still reports the share of the largest
    bucket as its score.

    Args:
        agents: Agent verdicts to aggregate

    Returns:
        ConsensusOutcome with verdict and consensus score
    """
    total_votes = len(agents)
    if total_votes == 0:
        return ConsensusOutcome(verdict=Verdict.INCONCLUSIVE, consensus_score=0.0)

    false_count = sum(1 for a in agents if a.verdict == Verdict.FALSE)
    true_count = sum(1 for a in agents if a.verdict == Verdict.TRUE)
    inconclusive_count = sum(1 for a in agents if a.verdict == Verdict.INCONCLUSIVE)

    if false_count / total_votes >= CONSENSUS_THRESHOLD:
        return ConsensusOutcome(verdict=Verdict.FALSE, consensus_score=false_count / total_votes)
    elif true_count / total_votes >= CONSENSUS_THRESHOLD:
        return ConsensusOutcome(verdict=Verdict.TRUE, consensus_score=true_count / total_votes)

    return ConsensusOutcome(
        verdict=Verdict.INCONCLUSIVE,
        consensus_score=max(false_count, true_count, inconclusive_count) / total_votes
    )


class ConsensusResolver(ProviderClient):
    """Prefers the Lava gateway's consensus, votes locally otherwise"""

    def __init__(self, gateway: ProviderConfig, timeout_seconds: float = 30):
        super().__init__(
            name="Lava Gateway",
            slug="lava_gateway",
            provider=gateway,
            timeout_seconds=timeout_seconds
        )

    async def resolve(self, agents: Sequence[AgentVerdict]) -> ConsensusOutcome:
        """
        Aggregate agent verdicts into one consensus outcome, never raising

        Args:
            agents: Agent verdicts in provider order

        Returns:
            Gateway outcome when available, else the local vote
        """
        if not self.is_available():
            return calculate_local_consensus(agents)

        try:
            data = await self._post_json(
                self.provider.endpoint("/v1/consensus"),
                {
                    "agents": [
                        {"name": a.name, "verdict": a.verdict.value, "confidence": a.confidence}
                        for a in agents
                    ]
                },
                headers={"Authorization": f"Bearer {self.provider.api_key}"}
            )
            return ConsensusOutcome(verdict=data.get("verdict"), consensus_score=data.get("score"))
        except Exception as e:
            self.logger.warning(f"Lava Gateway consensus error, using local consensus: {e}")
            return calculate_local_consensus(agents)
