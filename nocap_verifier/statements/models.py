"""
Models for transcribed utterances and queued statements
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from ..verification.models import VerificationResult


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class StatementType(str, Enum):
    """Kind of utterance; only declarative statements get verified"""
    DECLARATIVE = "declarative"
    OPINION = "opinion"
    QUESTION = "question"
    OTHER = "other"


class TranscriptionResult(BaseModel):
    """A transcribed utterance with its classification"""
    text: str
    speaker_id: str
    timestamp: str = Field(default_factory=_utc_now_iso)
    statement_type: StatementType
    confidence: float = Field(default=0.9, ge=0.0, le=1.0, description="Transcription confidence")


class QueueStatus(str, Enum):
    """Processing status of a queued statement"""
    PENDING = "pending"
    PROCESSING = "processing"
    PROCESSED = "processed"
    FAILED = "failed"


class QueueItem(BaseModel):
    """A declarative statement waiting for, or done with, verification"""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    speaker_id: str
    statement_text: str
    statement_timestamp: str = Field(default_factory=_utc_now_iso)
    processing_status: QueueStatus = QueueStatus.PENDING
    result: Optional[VerificationResult] = None
    error: Optional[str] = None
