from fastapi import UploadFile

from app.errors import UnsupportedFormatError
from app.models.comparison import DocumentInfo

PLAIN_TEXT = "text/plain"


def media_type(content_type) -> str:
    """`text/plain; charset=utf-8` -> `text/plain`"""
    return (content_type or "").split(";")[0].strip().lower()


async def extract_text_from_upload(upload: UploadFile) -> str:
    """
    Read a FastAPI UploadFile as text. Only text/plain uploads are accepted;
    a leading BOM is dropped and bytes that are not valid UTF-8 are replaced
    rather than rejected.
    """
    if media_type(upload.content_type) != PLAIN_TEXT:
        raise UnsupportedFormatError(
            "Please upload a text file (.txt)",
            details=f"Unsupported media type: {upload.content_type or 'unknown'}",
        )
    contents = await upload.read()
    return contents.decode("utf-8-sig", errors="replace")


async def load_document_from_upload(upload: UploadFile) -> DocumentInfo:
    text = await extract_text_from_upload(upload)
    return DocumentInfo(text=text, name=upload.filename or "", type=upload.content_type)
