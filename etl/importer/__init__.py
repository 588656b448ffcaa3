#!/usr/bin/env python3
"""
Document Import Module - extract text from uploaded office documents and
split it into pages.

Handles:
- DOCX text + HTML rendering (headings, explicit page breaks)
- PDF text per page
- Plain text
"""
from etl.importer.errors import (
    DocumentImportError,
    UnsupportedFormatError,
    EmptyDocumentError,
    ScannedDocumentError,
    DocumentParseError,
)
from etl.importer.parser import DocumentImporter, ImportedDocument

__all__ = [
    'DocumentImporter',
    'ImportedDocument',
    'DocumentImportError',
    'UnsupportedFormatError',
    'EmptyDocumentError',
    'ScannedDocumentError',
    'DocumentParseError',
]
