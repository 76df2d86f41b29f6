"""
Document text extraction for uploaded study material.

PDFs are read with PyMuPDF; plain-text and markdown files are read as
UTF-8. Uploads live in the upload directory only for as long as
extraction takes and are discarded right after.
"""

import asyncio
import os
import time
from pathlib import Path
from typing import Union

import fitz  # PyMuPDF

from utils.errors import DocumentExtractionError
from utils.monitoring import get_logger

logger = get_logger(__name__)

PDF_EXTENSION = ".pdf"
TEXT_EXTENSIONS = {".txt", ".md"}
ALLOWED_EXTENSIONS = {PDF_EXTENSION} | TEXT_EXTENSIONS


def upload_extension(original_filename: str) -> str:
    """Lowercased extension of an uploaded file; uploads without one are treated as PDFs."""
    return Path(original_filename or "").suffix.lower() or PDF_EXTENSION


def save_upload(content: bytes, original_filename: str, upload_dir: Union[str, Path]) -> Path:
    """
    Write an upload to disk under a millisecond-timestamp name.

    Args:
        content: Raw file bytes
        original_filename: Client-supplied name (only its extension is kept)
        upload_dir: Target directory, created if missing

    Returns:
        Path of the stored file
    """
    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)

    file_path = directory / f"{int(time.time() * 1000)}{upload_extension(original_filename)}"
    file_path.write_bytes(content)
    logger.info(f"Upload stored: {file_path.name}", size=len(content))
    return file_path


def discard_upload(file_path: Union[str, Path]):
    """Best-effort delete of a stored upload; failures are logged, not retried."""
    try:
        os.remove(file_path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.error(f"cleanup error: {e}", file=str(file_path))


def _extract_pdf(file_path: Path) -> str:
    try:
        with fitz.open(file_path) as doc:
            pages = [page.get_text() for page in doc]
    except Exception as e:
        raise DocumentExtractionError(
            f"Could not read PDF: {file_path.name}",
            file_name=file_path.name,
        ) from e
    return "\n".join(pages)


def extract_text(file_path: Union[str, Path]) -> str:
    """
    Extract plain text from a stored document.

    Args:
        file_path: Path to the document

    Returns:
        Document text (may be empty for image-only PDFs)

    Raises:
        FileNotFoundError: If the file does not exist
        DocumentExtractionError: If the document cannot be parsed
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Document not found: {file_path}")

    extension = file_path.suffix.lower()
    if extension in TEXT_EXTENSIONS:
        text = file_path.read_text(encoding="utf-8", errors="replace")
    else:
        text = _extract_pdf(file_path)

    logger.info(f"📄 Extracted {len(text)} characters from {file_path.name}")
    return text


async def extract_text_async(file_path: Union[str, Path]) -> str:
    """Run extract_text in a worker thread so the event loop stays free."""
    return await asyncio.to_thread(extract_text, file_path)
