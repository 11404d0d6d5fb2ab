"""
Rule-based classification of transcribed utterances
"""

import re
from typing import Optional

from .models import StatementType, TranscriptionResult

QUESTION_PREFIXES = (
    "how ", "what ", "when ", "where ", "who ", "why ",
    "is ", "are ", "can ", "could ", "would ", "should ",
)

OPINION_MARKERS = (
    "i think", "i believe", "in my opinion", "i feel", "i prefer",
    "should be", "ought to",
)
OPINION_PREFIXES = ("i like", "i dislike")

DECLARATIVE_PREFIXES = ("the ", "it is", "this is", "that is")
DECLARATIVE_MARKERS = (" is ", " are ", " was ", " were ")

_DIGIT = re.compile(r"\d")


def classify_statement_type(text: str) -> StatementType:
    """
    Classify an utterance as question, opinion, declarative or other.

    Rules are checked in that order, so "I think the sky is green" is an
    opinion even though it contains " is ".
    """
    normalized = text.strip().lower()

    if normalized.endswith("?") or normalized.startswith(QUESTION_PREFIXES):
        return StatementType.QUESTION

    if any(marker in normalized for marker in OPINION_MARKERS) or normalized.startswith(OPINION_PREFIXES):
        return StatementType.OPINION

    # Numbers usually signal a factual claim
    if (normalized.startswith(DECLARATIVE_PREFIXES)
            or any(marker in normalized for marker in DECLARATIVE_MARKERS)
            or _DIGIT.search(normalized)):
        return StatementType.DECLARATIVE

    return StatementType.OTHER


class StatementClassifier:
    """Builds classified transcription records from raw utterances"""

    def __init__(self, transcription_confidence: float = 0.9):
        self.transcription_confidence = transcription_confidence

    def transcribe(self, text: str, speaker_id: str, timestamp: Optional[str] = None) -> TranscriptionResult:
        fields = {}
        if timestamp:
            fields["timestamp"] = timestamp
        return TranscriptionResult(
            text=text,
            speaker_id=speaker_id,
            statement_type=classify_statement_type(text),
            confidence=self.transcription_confidence,
            **fields
        )
