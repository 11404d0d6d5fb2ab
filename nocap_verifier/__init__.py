"""Multi-agent verification of spoken declarative statements."""

__version__ = "0.1.0"

from .statements import StatementQueue, StatementType, classify_statement_type
from .utils.config import VerificationConfig
from .verification import (
    AgentVerdict,
    ConsensusLabel,
    ConsensusOutcome,
    Verdict,
    VerificationOrchestrator,
    VerificationResult,
)

__all__ = [
    "AgentVerdict",
    "ConsensusLabel",
    "ConsensusOutcome",
    "Verdict",
    "VerificationOrchestrator",
    "VerificationResult",
    "VerificationConfig",
    "StatementQueue",
    "StatementType",
    "classify_statement_type",
]
