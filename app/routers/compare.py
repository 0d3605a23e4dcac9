import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool

from app.errors import ComparisonError, ValidationError
from app.models.comparison import CompareRequest, DocumentInfo, ErrorResponse
from app.services.llm_service import LLMService
from app.utils.text_loader import load_document_from_upload

logger = logging.getLogger(__name__)

router = APIRouter()
# singleton; the OpenAI client is created on first use
llm = LLMService()


def get_llm_service() -> LLMService:
    return llm


def error_response(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def parse_compare_request(body: bytes) -> CompareRequest:
    try:
        return CompareRequest.model_validate_json(body)
    except PydanticValidationError as exc:
        raise ValidationError("Invalid request body", details=str(exc)) from exc


@router.post("/compare")
async def compare_documents(request: Request, service: LLMService = Depends(get_llm_service)):
    """
    Compare two documents and return the model's structured differences.
    The body is parsed here, after the credential check, so a missing key
    always answers 500.
    """
    try:
        service.ensure_configured()
        payload = parse_compare_request(await request.body())
        analysis = await run_in_threadpool(service.compare_documents, payload.doc1, payload.doc2)
    except ValidationError as exc:
        logger.warning("Rejected comparison request: %s", exc.message)
        return error_response(exc.status_code, exc.message, exc.details)
    except ComparisonError as exc:
        logger.error("Comparison failed: %s", exc.message)
        return error_response(exc.status_code, "Error comparing documents", exc.message)
    except Exception as exc:
        logger.exception("Unexpected error while comparing documents")
        return error_response(500, "Error comparing documents", str(exc) or "Unknown error")
    return JSONResponse(content=analysis)


@router.post("/extract", response_model=DocumentInfo)
async def extract_document(file: UploadFile = File(...)):
    """
    Return the text of an uploaded plain-text document.
    """
    try:
        return await load_document_from_upload(file)
    except ComparisonError as exc:
        logger.warning("Rejected upload %s: %s", file.filename, exc.message)
        return error_response(exc.status_code, exc.message, exc.details)
