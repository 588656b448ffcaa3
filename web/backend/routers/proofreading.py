#!/usr/bin/env python3
"""
Proofreading endpoints - import documents for page-by-page review.
"""

import logging
from fastapi import APIRouter, UploadFile, File, HTTPException, Request
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from core.config_loader import get_config
from ..models.responses import DocumentImportResponse
from ..services.import_service import get_document_importer, to_import_response

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/api/proofreading", tags=["proofreading"])


def add_rate_limit_handlers(app):
    """Add rate limit exception handlers to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={
            "success": False,
            "error": f"Rate limit exceeded: {exc.detail}",
            "type": "RateLimitExceeded"
        }
    )


@router.post(
    "/import",
    response_model=DocumentImportResponse,
    response_model_exclude_none=True
)
@limiter.limit(get_config().importer.rate_limit)
async def import_document(request: Request, file: UploadFile = File(...)):
    """
    Upload a document and split it into pages.
    Supports: .docx, .pdf, .txt

    DOCX page breaks and headings are kept; PDF page boundaries become page
    breaks. The file is processed in memory, never written to disk.
    """
    if not file.filename:
        raise HTTPException(status_code=400, detail="No file provided")

    importer = get_document_importer()

    if not importer.is_supported(file.filename):
        supported = ', '.join(importer.get_supported_formats())
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported file format. Supported formats: {supported}"
        )

    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="Empty file")

    max_bytes = get_config().importer.max_upload_bytes
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File size exceeds {max_bytes // (1024 * 1024)}MB limit"
        )

    document = importer.import_bytes(file.filename, content)

    logger.info(f"Imported {file.filename}: {len(document.pages)} pages")
    return to_import_response(document)
