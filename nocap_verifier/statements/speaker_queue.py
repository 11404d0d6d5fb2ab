"""
Speaker queue that verifies declarative statements one at a time
"""

import asyncio
import logging
from typing import Awaitable, Callable, Dict, List, Optional

from ..verification.models import VerificationResult
from ..verification.orchestrator import VerificationOrchestrator
from .models import QueueItem, QueueStatus, StatementType, TranscriptionResult

logger = logging.getLogger(__name__)

Announcer = Callable[[str], Awaitable[None]]


class StatementQueue:
    """
    FIFO of declarative statements with a single verification worker

    Statements are verified strictly in submission order. When a statement
    comes back false with a correction, the correction text is handed to
    the announcer (typically a text-to-speech collaborator).
    """

    def __init__(self,
                 orchestrator: VerificationOrchestrator,
                 announcer: Optional[Announcer] = None):
        self.orchestrator = orchestrator
        self.announcer = announcer
        self.logger = logger.getChild("queue")

        self._items: Dict[str, QueueItem] = {}
        self._pending: "asyncio.Queue[str]" = asyncio.Queue()
        self._worker: Optional[asyncio.Task] = None

    @property
    def items(self) -> List[QueueItem]:
        """Snapshot of all items in submission order"""
        return list(self._items.values())

    @property
    def results(self) -> List[VerificationResult]:
        return [item.result for item in self._items.values() if item.result is not None]

    def get(self, item_id: str) -> Optional[QueueItem]:
        return self._items.get(item_id)

    def submit(self, statement_text: str, speaker_id: str = "UNKNOWN",
               statement_timestamp: Optional[str] = None) -> QueueItem:
        """Queue a statement for verification and return its pending item"""
        fields = {}
        if statement_timestamp:
            fields["statement_timestamp"] = statement_timestamp
        item = QueueItem(speaker_id=speaker_id, statement_text=statement_text, **fields)

        self._items[item.id] = item
        self._pending.put_nowait(item.id)
        self.logger.debug(f"Queued statement {item.id} from {speaker_id}")
        return item

    def handle_transcription(self, transcription: TranscriptionResult) -> Optional[QueueItem]:
        """Queue a transcription if it is declarative, otherwise ignore it"""
        if transcription.statement_type != StatementType.DECLARATIVE:
            return None
        return self.submit(
            transcription.text,
            speaker_id=transcription.speaker_id,
            statement_timestamp=transcription.timestamp
        )

    def start(self) -> None:
        """Start the worker task if it is not running"""
        if self._worker is None or self._worker.done():
            self._worker = asyncio.create_task(self._run(), name="statement_queue_worker")

    async def join(self) -> None:
        """Wait until every submitted statement has been processed"""
        await self._pending.join()

    async def stop(self) -> None:
        """Cancel the worker; unprocessed items stay pending"""
        if self._worker is None:
            return
        self._worker.cancel()
        try:
            await self._worker
        except asyncio.CancelledError:
            pass
        self._worker = None

    async def _run(self) -> None:
        while True:
            item_id = await self._pending.get()
            try:
                await self._process(item_id)
            finally:
                self._pending.task_done()

    async def _process(self, item_id: str) -> None:
        item = self._update(item_id, processing_status=QueueStatus.PROCESSING)

        try:
            result = await self.orchestrator.verify_statement(item.statement_text)
            self._update(item_id, result=result)

            if result.is_false and result.correct_information and self.announcer:
                await self.announcer(result.correct_information)

            self._update(item_id, processing_status=QueueStatus.PROCESSED)
        except Exception as e:
            self.logger.error(f"Failed to process statement {item_id}: {e}")
            self._update(item_id, processing_status=QueueStatus.FAILED, error=str(e))

    def _update(self, item_id: str, **changes) -> QueueItem:
        item = self._items[item_id].model_copy(update=changes)
        self._items[item_id] = item
        return item

    async def __aenter__(self):
        self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()
