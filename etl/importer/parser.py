"""
Multi-format Document Importer - extract text from uploads and split into pages.

Supports:
- Word Documents (.docx): text + HTML rendering, split into pages
- PDF (.pdf): text per PDF page, split into pages
- Plain Text (.txt): text, split into pages

Precondition checks (empty document, scanned PDF) happen here, before the
segmenter ever runs.
"""
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List

from docx import Document
from pypdf import PdfReader

from core.config_loader import SegmenterConfig
from core.segmenter import Page, split_into_pages
from etl.importer.docx_reader import read_docx
from etl.importer.errors import (
    UnsupportedFormatError,
    EmptyDocumentError,
    ScannedDocumentError,
    DocumentParseError,
)

logger = logging.getLogger(__name__)

SCANNED_PDF_MESSAGE = "This PDF appears to be scanned. Please upload a text-based PDF or DOCX."


@dataclass
class ImportedDocument:
    """Result of importing a document.

    Attributes:
        format: Detected file format ('docx', 'pdf', 'txt')
        text: Extracted plain text
        html: HTML rendering (DOCX only)
        pages: Segmented pages, never empty
        source_name: Original file name
    """
    format: str
    text: str
    pages: List[Page] = field(default_factory=list)
    html: Optional[str] = None
    source_name: str = ""


class DocumentImporter:
    """Import documents from multiple formats.

    Handles format detection, text extraction and segmentation. Raises a
    DocumentImportError subclass with a user-facing message on failure.
    """

    SUPPORTED_FORMATS = {
        '.docx', '.pdf', '.txt'
    }

    def __init__(
        self,
        segmenter_config: Optional[SegmenterConfig] = None,
        min_text_length: int = 10
    ):
        self.segmenter_config = segmenter_config or SegmenterConfig()
        self.min_text_length = min_text_length
        self.logger = logging.getLogger(__name__)

    def import_file(self, file_path: str) -> ImportedDocument:
        """Import a document from disk.

        Raises:
            FileNotFoundError: If file doesn't exist
            DocumentImportError: If format is unsupported or parsing fails
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"Document not found: {file_path}")

        return self.import_bytes(path.name, path.read_bytes())

    def import_bytes(self, filename: str, content: bytes) -> ImportedDocument:
        """Import an uploaded document.

        Args:
            filename: Original file name (used for format detection)
            content: Raw file bytes

        Returns:
            ImportedDocument with text and pages

        Raises:
            DocumentImportError: If format is unsupported, the file is empty
                or scanned, or parsing fails
        """
        ext = Path(filename or '').suffix.lower()

        if ext not in self.SUPPORTED_FORMATS:
            raise UnsupportedFormatError(
                "Unsupported file format. Please upload a .docx, .pdf or .txt file."
            )

        self.logger.info(f"Importing document {filename} (format: {ext}, {len(content)} bytes)")

        if ext == '.docx':
            return self._import_docx(filename, content)
        elif ext == '.pdf':
            return self._import_pdf(filename, content)
        return self._import_txt(filename, content)

    def _split(self, text: str, html: Optional[str] = None) -> List[Page]:
        return split_into_pages(text, html, self.segmenter_config)

    def _import_docx(self, filename: str, content: bytes) -> ImportedDocument:
        """Extract text and HTML from a DOCX file and split it into pages."""
        try:
            docx_content = read_docx(Document(io.BytesIO(content)))
        except Exception as e:
            self.logger.error(f"DOCX parsing error for {filename}: {e}")
            raise DocumentParseError(
                "Failed to parse DOCX file. Please ensure it is a valid .docx file."
            ) from e

        if not docx_content.text.strip():
            raise EmptyDocumentError("The DOCX file appears to be empty or could not be parsed.")

        pages = self._split(docx_content.text, docx_content.html)

        self.logger.debug(f"Imported DOCX {filename}: {len(pages)} pages")

        return ImportedDocument(
            format='docx',
            text=docx_content.text,
            html=docx_content.html,
            pages=pages,
            source_name=filename,
        )

    def _import_pdf(self, filename: str, content: bytes) -> ImportedDocument:
        """Extract text from all PDF pages.

        PDF page boundaries are passed to the segmenter as form feeds.
        """
        try:
            reader = PdfReader(io.BytesIO(content))
            page_count = len(reader.pages)
        except Exception as e:
            self.logger.error(f"PDF parsing error for {filename}: {e}")
            raise DocumentParseError(
                "Failed to parse PDF file. Please ensure it is a valid text-based PDF."
            ) from e

        pages_text = []
        for i, page in enumerate(reader.pages):
            try:
                page_text = page.extract_text()
            except Exception as e:
                self.logger.warning(f"Failed to extract text from page {i + 1}: {e}")
                continue
            if page_text and page_text.strip():
                pages_text.append(page_text.strip())

        text = '\n\n'.join(pages_text)

        if len(text.strip()) < self.min_text_length:
            self.logger.warning(
                f"No usable text extracted from PDF {filename} ({page_count} pages). "
                f"The PDF may be scanned images or have text extraction disabled."
            )
            raise ScannedDocumentError(SCANNED_PDF_MESSAGE)

        pages = self._split('\f'.join(pages_text))

        self.logger.debug(
            f"Imported PDF {filename} ({page_count} pages, {len(text)} chars extracted)"
        )

        return ImportedDocument(format='pdf', text=text, pages=pages, source_name=filename)

    def _import_txt(self, filename: str, content: bytes) -> ImportedDocument:
        try:
            text = content.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DocumentParseError(
                "File encoding issue. Ensure the text file is UTF-8 encoded."
            ) from e

        if not text.strip():
            raise EmptyDocumentError("The text file appears to be empty.")

        return ImportedDocument(format='txt', text=text, pages=self._split(text), source_name=filename)

    def is_supported(self, filename: str) -> bool:
        return Path(filename).suffix.lower() in self.SUPPORTED_FORMATS

    @classmethod
    def get_supported_formats(cls) -> list[str]:
        """Get list of supported file extensions."""
        return sorted(cls.SUPPORTED_FORMATS)
