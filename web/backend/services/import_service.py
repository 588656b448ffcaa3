#!/usr/bin/env python3
"""
Import service - turn uploaded documents into pages.
"""

import logging
from functools import lru_cache

from core.config_loader import get_config, get_segmenter_config
from etl.importer import DocumentImporter, ImportedDocument
from ..models.responses import DocumentImportResponse, PageResponse

logger = logging.getLogger(__name__)


@lru_cache()
def get_document_importer() -> DocumentImporter:
    config = get_config()
    return DocumentImporter(
        segmenter_config=get_segmenter_config(config),
        min_text_length=config.importer.min_text_length
    )


def to_import_response(document: ImportedDocument) -> DocumentImportResponse:
    """PDF imports also return the full extracted text."""
    return DocumentImportResponse(
        text=document.text if document.format == 'pdf' else None,
        pages=[PageResponse(title=page.title, content=page.content) for page in document.pages],
    )
