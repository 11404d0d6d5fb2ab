"""
Statement verification: agents, consensus, correction and orchestration
"""

from .consensus import CONSENSUS_THRESHOLD, ConsensusResolver, calculate_local_consensus
from .correction import NO_CORRECTION_MESSAGE, CorrectionSynthesizer
from .errors import (
    ConfigurationMissing,
    ProviderRequestFailed,
    ProviderResponseUnparseable,
    VerificationError
)
from .models import AgentVerdict, ConsensusLabel, ConsensusOutcome, Verdict, VerificationResult
from .orchestrator import VerificationOrchestrator

__all__ = [
    "AgentVerdict",
    "ConsensusLabel",
    "ConsensusOutcome",
    "Verdict",
    "VerificationResult",
    "ConsensusResolver",
    "CorrectionSynthesizer",
    "VerificationOrchestrator",
    "calculate_local_consensus",
    "CONSENSUS_THRESHOLD",
    "NO_CORRECTION_MESSAGE",
    "VerificationError",
    "ConfigurationMissing",
    "ProviderRequestFailed",
    "ProviderResponseUnparseable",
]
