import logging
from typing import Any, Optional

import requests
from pydantic import ValidationError as ShapeError

from app.errors import ComparisonRequestError, InvalidResponseError
from app.models.comparison import ComparisonResult

logger = logging.getLogger(__name__)

COMPARE_PATH = "/api/compare"


class ComparisonClient:
    """
    HTTP client for the comparison endpoint.

    `session` may be anything with a requests-style ``post`` (a
    ``requests.Session`` by default, FastAPI's ``TestClient`` in tests).
    """

    def __init__(self, base_url: str, session: Optional[Any] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def compare_documents(self, doc1: str, doc2: str) -> ComparisonResult:
        try:
            resp = self.session.post(
                f"{self.base_url}{COMPARE_PATH}", json={"doc1": doc1, "doc2": doc2}
            )
        except requests.RequestException as exc:
            logger.error("Comparison request failed: %s", exc)
            raise ComparisonRequestError("Failed to compare documents", details=str(exc)) from exc

        data = self._read_json(resp)

        if resp.status_code >= 400:
            message = "Failed to compare documents"
            if isinstance(data, dict) and data.get("error"):
                message = data["error"]
            logger.error("Comparison service answered %s: %s", resp.status_code, message)
            details = data.get("details") if isinstance(data, dict) else None
            raise ComparisonRequestError(message, details=details)

        if not isinstance(data, dict) or not isinstance(data.get("differences"), list):
            raise InvalidResponseError("Invalid response format from API")

        try:
            return ComparisonResult.model_validate(data)
        except ShapeError as exc:
            logger.error("Comparison result failed shape check: %s", exc)
            raise InvalidResponseError("Invalid response format from API", details=str(exc)) from exc

    @staticmethod
    def _read_json(resp) -> Any:
        try:
            return resp.json()
        except ValueError:
            return None
