from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import HTMLResponse, RedirectResponse

from app.client.comparison_client import ComparisonClient
from app.config import settings
from app.ui.page import render_page
from app.ui.state import Slot
from app.ui.view import ComparisonView

router = APIRouter()
# one view per process: the page serves a single local user
comparison_view = ComparisonView(ComparisonClient(settings.api_base_url))


def get_view() -> ComparisonView:
    return comparison_view


def back_to_page() -> RedirectResponse:
    return RedirectResponse("/", status_code=303)


@router.get("/", response_class=HTMLResponse)
def index(view: ComparisonView = Depends(get_view)):
    return HTMLResponse(render_page(view.state))


@router.post("/documents/{slot}")
async def upload_document(slot: Slot, file: UploadFile = File(...), view: ComparisonView = Depends(get_view)):
    await view.upload(slot, file)
    return back_to_page()


@router.post("/documents/{slot}/clear")
def clear_document(slot: Slot, view: ComparisonView = Depends(get_view)):
    view.clear(slot)
    return back_to_page()


@router.post("/compare")
def compare(view: ComparisonView = Depends(get_view)):
    view.compare()
    return back_to_page()
