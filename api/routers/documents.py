"""Documents Router - Upload a study document, get a summary and a quiz."""

import asyncio
from typing import Optional

from fastapi import APIRouter, File, UploadFile

from api.models import UploadResponse
from config import settings
from tools.study import (
    ALLOWED_EXTENSIONS,
    discard_upload,
    extract_text_async,
    save_upload,
    upload_extension,
)
from utils.core.llm import generate_response
from utils.errors import ValidationError, handle_errors
from utils.json_recovery import extract_json_array
from utils.monitoring import get_logger
from utils.prompts import build_mcq_prompt, build_summary_prompt

logger = get_logger(__name__)
router = APIRouter(prefix="", tags=["Documents"])

NO_SUMMARY = "No summary returned."


@router.post("/upload", response_model=UploadResponse)
@handle_errors("Failed to process PDF.")
async def upload_document(pdf: Optional[UploadFile] = File(None)):
    """
    Upload a document and generate a summary plus a multiple-choice quiz.

    Supported formats: PDF, TXT, MD

    The stored upload is removed as soon as its text has been extracted,
    whether or not extraction succeeded.
    """
    if pdf is None or not pdf.filename:
        raise ValidationError("No PDF uploaded", field="pdf")

    extension = upload_extension(pdf.filename)
    if extension not in ALLOWED_EXTENSIONS:
        raise ValidationError(
            f"Unsupported file type. Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}",
            field="pdf",
        )

    content = await pdf.read()
    if len(content) > settings.max_upload_size_bytes:
        raise ValidationError(
            f"File too large. Maximum size is {settings.max_upload_size_mb} MB",
            field="pdf",
        )

    file_path = await asyncio.to_thread(save_upload, content, pdf.filename, settings.upload_dir)
    try:
        text = await extract_text_async(file_path)
    finally:
        await asyncio.to_thread(discard_upload, file_path)

    if not text.strip():
        logger.warning("Uploaded document has no extractable text", file=pdf.filename)

    summary, raw_mcqs = await asyncio.gather(
        generate_response(build_summary_prompt(text), use_case="summary"),
        generate_response(build_mcq_prompt(text), use_case="quiz"),
    )
    mcqs = extract_json_array(raw_mcqs, label="MCQs")

    logger.info(f"✅ Processed upload: {len(mcqs)} questions", file=pdf.filename)
    return UploadResponse(summary=summary or NO_SUMMARY, mcqs=mcqs)
