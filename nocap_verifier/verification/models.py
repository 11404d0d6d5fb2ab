"""
Verification models for agent verdicts, consensus and final results
"""

import uuid
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Verdict(str, Enum):
    """Ternary verdict shared by agents, the gateway and the local vote"""
    TRUE = "true"
    FALSE = "false"
    INCONCLUSIVE = "inconclusive"


class ConsensusLabel(str, Enum):
    """Consensus label reported on a verification result"""
    VERIFIED_TRUE = "verified_true"
    VERIFIED_FALSE = "verified_false"
    INCONCLUSIVE = "inconclusive"

    @classmethod
    def from_verdict(cls, verdict: Verdict) -> "ConsensusLabel":
        return _LABELS[verdict]


_LABELS = {
    Verdict.TRUE: ConsensusLabel.VERIFIED_TRUE,
    Verdict.FALSE: ConsensusLabel.VERIFIED_FALSE,
    Verdict.INCONCLUSIVE: ConsensusLabel.INCONCLUSIVE,
}


class AgentVerdict(BaseModel):
    """One agent's opinion about a statement"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Provider label")
    verdict: Verdict = Field(description="Agent verdict")
    confidence: float = Field(
        ge=0.0, le=1.0,
        description="Confidence in the verdict (0.0-1.0)"
    )
    reasoning: Optional[str] = Field(None, description="Brief explanation from the provider")


class ConsensusOutcome(BaseModel):
    """Aggregate judgment over all agent verdicts"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    verdict: Verdict
    consensus_score: float = Field(
        ge=0.0, le=1.0,
        alias="consensusScore",
        description="Fraction of agreeing votes, or the gateway-supplied score"
    )


class VerificationResult(BaseModel):
    """One completed verification of a statement"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    statement_id: str = Field(default_factory=lambda: str(uuid.uuid4()), alias="statementId")
    statement: str = Field(description="Statement text that was verified")
    is_false: bool = Field(alias="isFalse")
    consensus: ConsensusLabel
    correct_information: Optional[str] = Field(None, alias="correctInformation")
    agents: Tuple[AgentVerdict, ...] = Field(description="Agent verdicts in fixed provider order")
    lava_gateway_consensus: ConsensusOutcome = Field(alias="lavaGatewayConsensus")
    processing_time_ms: Optional[int] = Field(None, alias="processingTimeMs")

    @model_validator(mode="after")
    def _check_consistency(self) -> "VerificationResult":
        if self.is_false != (self.lava_gateway_consensus.verdict == Verdict.FALSE):
            raise ValueError("is_false must follow the consensus verdict")
        if self.consensus != ConsensusLabel.from_verdict(self.lava_gateway_consensus.verdict):
            raise ValueError("consensus label must follow the consensus verdict")
        if (self.correct_information is not None) != self.is_false:
            raise ValueError("correct_information is present only for false statements")
        return self

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict using the camelCase wire names"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
