"""
Utterance classification and the speaker queue
"""

from .classifier import StatementClassifier, classify_statement_type
from .models import QueueItem, QueueStatus, StatementType, TranscriptionResult
from .speaker_queue import StatementQueue
from .transcript import Utterance, parse_utterances

__all__ = [
    "StatementClassifier",
    "classify_statement_type",
    "QueueItem",
    "QueueStatus",
    "StatementType",
    "TranscriptionResult",
    "StatementQueue",
    "Utterance",
    "parse_utterances",
]
