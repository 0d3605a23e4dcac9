"""
View state for the comparison page.

The whole page is one immutable ``ViewState``; every user action is a
function returning the next state. Changing either document slot always
drops the comparison result, so a result on screen always belongs to the
documents on screen.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from app.models.comparison import ComparisonResult, DocumentInfo

MISSING_DOCUMENTS = "Please upload both documents"


class Slot(str, Enum):
    DOC1 = "doc1"
    DOC2 = "doc2"


class Phase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    COMPARING = "comparing"
    COMPARED = "compared"
    FAILED = "failed"


@dataclass(frozen=True)
class ViewState:
    doc1: Optional[DocumentInfo] = None
    doc2: Optional[DocumentInfo] = None
    phase: Phase = Phase.IDLE
    error: Optional[str] = None
    comparison: Optional[ComparisonResult] = None

    def document(self, slot: Slot) -> Optional[DocumentInfo]:
        return self.doc1 if slot is Slot.DOC1 else self.doc2

    @property
    def has_both_documents(self) -> bool:
        return bool(self.doc1 and self.doc1.text and self.doc2 and self.doc2.text)

    @property
    def can_compare(self) -> bool:
        return self.doc1 is not None and self.doc2 is not None and self.phase is not Phase.COMPARING


def _settled_phase(state: ViewState) -> Phase:
    if state.doc1 is None and state.doc2 is None:
        return Phase.IDLE
    return Phase.READY


def _with_slot(state: ViewState, slot: Slot, doc: Optional[DocumentInfo]) -> ViewState:
    field = "doc1" if slot is Slot.DOC1 else "doc2"
    return replace(state, **{field: doc})


def upload_started(state: ViewState) -> ViewState:
    return replace(state, phase=Phase.LOADING, error=None)


def upload_accepted(state: ViewState, slot: Slot, doc: DocumentInfo) -> ViewState:
    state = _with_slot(state, slot, doc)
    return replace(state, comparison=None, error=None, phase=_settled_phase(state))


def upload_rejected(state: ViewState, message: str) -> ViewState:
    # slots and any existing result stay as they were
    phase = Phase.COMPARED if state.comparison is not None else _settled_phase(state)
    return replace(state, error=message, phase=phase)


def slot_cleared(state: ViewState, slot: Slot) -> ViewState:
    state = _with_slot(state, slot, None)
    return replace(state, comparison=None, phase=_settled_phase(state))


def compare_requested(state: ViewState) -> ViewState:
    if not state.has_both_documents:
        return replace(state, error=MISSING_DOCUMENTS)
    return replace(state, phase=Phase.COMPARING, error=None)


def comparison_succeeded(state: ViewState, result: ComparisonResult) -> ViewState:
    return replace(state, phase=Phase.COMPARED, comparison=result, error=None)


def comparison_failed(state: ViewState, message: str) -> ViewState:
    return replace(state, phase=Phase.FAILED, comparison=None, error=message)
