import logging
import threading

from fastapi import UploadFile

from app.client.comparison_client import ComparisonClient
from app.errors import ComparisonError
from app.ui import state as transitions
from app.ui.state import Phase, Slot, ViewState
from app.utils.text_loader import load_document_from_upload

logger = logging.getLogger(__name__)

COMPARISON_FAILED = "Error comparing documents"


class ComparisonView:
    """
    Holds the page state for the single local user and applies actions to it.
    """

    def __init__(self, client: ComparisonClient):
        self.client = client
        self.state = ViewState()
        self._lock = threading.Lock()

    def _apply(self, transition, *args) -> ViewState:
        with self._lock:
            self.state = transition(self.state, *args)
            return self.state

    async def upload(self, slot: Slot, upload: UploadFile) -> ViewState:
        self._apply(transitions.upload_started)
        try:
            doc = await load_document_from_upload(upload)
        except ComparisonError as exc:
            logger.warning("File upload rejected for %s: %s", slot.value, exc.message)
            return self._apply(transitions.upload_rejected, exc.message)
        logger.info("Loaded %s into %s (%d chars)", doc.name, slot.value, len(doc.text))
        return self._apply(transitions.upload_accepted, slot, doc)

    def clear(self, slot: Slot) -> ViewState:
        return self._apply(transitions.slot_cleared, slot)

    def compare(self) -> ViewState:
        current = self._apply(transitions.compare_requested)
        if current.phase is not Phase.COMPARING:
            return current

        try:
            result = self.client.compare_documents(current.doc1.text, current.doc2.text)
        except ComparisonError as exc:
            logger.error("Comparison error: %s", exc.message)
            return self._apply(transitions.comparison_failed, exc.message)
        except Exception:
            logger.exception("Unexpected comparison error")
            return self._apply(transitions.comparison_failed, COMPARISON_FAILED)
        return self._apply(transitions.comparison_succeeded, result)
