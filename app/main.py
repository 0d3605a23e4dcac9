import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import settings
from app.routers import compare, ui

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Document Comparison",
    version="1.0",
    description="LLM-backed comparison of two text documents with inline highlighting."
)


@app.exception_handler(RequestValidationError)
async def invalid_request(request: Request, exc: RequestValidationError):
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": str(exc.errors())},
    )


@app.get("/status")
def status():
    return {
        "status": "running",
        "model": settings.model_id,
        "api_key_configured": bool(settings.openai_api_key),
    }

app.include_router(compare.router, prefix="/api")
app.include_router(ui.router)

logger.info("API key present: %s", bool(settings.openai_api_key))
