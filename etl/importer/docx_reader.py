"""
DOCX reader - plain text plus a minimal HTML rendering of a Word document.

The plain text joins paragraphs with blank lines and marks explicit page
breaks with a form feed. The HTML rendering keeps what the segmenter can use:
``Title``/``Heading 1`` as h1, ``Heading 2`` as h2, and page breaks as
``<hr class="page-break"/>``.
"""
import html
import logging
from dataclasses import dataclass
from typing import List

from docx.document import Document as DocxDocument

logger = logging.getLogger(__name__)

PAGE_BREAK = '\f'
PAGE_BREAK_HTML = '<hr class="page-break"/>'
PAGE_BREAK_XPATH = './/w:br[@w:type="page"]'

HEADING_TAGS = {
    'title': 'h1',
    'heading 1': 'h1',
    'heading 2': 'h2',
}


@dataclass
class DocxContent:
    text: str
    html: str


def _heading_tag(paragraph) -> str:
    style = getattr(paragraph, 'style', None)
    name = (getattr(style, 'name', None) or '').lower()
    return HEADING_TAGS.get(name, 'p')


def _paragraph_blocks(paragraph) -> List[str]:
    """Split one paragraph into text blocks and PAGE_BREAK markers."""
    blocks: List[str] = []

    if paragraph.paragraph_format.page_break_before:
        blocks.append(PAGE_BREAK)

    if not paragraph._p.xpath(PAGE_BREAK_XPATH):
        blocks.append(paragraph.text.strip())
        return blocks

    current: List[str] = []
    for run in paragraph.runs:
        current.append(run.text)
        if run._r.xpath(PAGE_BREAK_XPATH):
            blocks.append(''.join(current).strip())
            blocks.append(PAGE_BREAK)
            current = []
    blocks.append(''.join(current).strip())
    return blocks


def read_docx(doc: DocxDocument) -> DocxContent:
    """Extract text and HTML from an opened python-docx Document."""
    text_parts: List[str] = []
    html_parts: List[str] = []

    def add(block: str, tag: str) -> None:
        if block == PAGE_BREAK:
            text_parts.append(PAGE_BREAK)
            html_parts.append(PAGE_BREAK_HTML)
        elif block:
            text_parts.append(block)
            html_parts.append(f"<{tag}>{html.escape(block)}</{tag}>")

    for paragraph in doc.paragraphs:
        tag = _heading_tag(paragraph)
        for block in _paragraph_blocks(paragraph):
            add(block, tag)

    # Also extract from tables (common in CVs and reports)
    for table in doc.tables:
        for row in table.rows:
            row_texts = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if row_texts:
                add(' '.join(row_texts), 'p')

    text = '\n\n'.join(text_parts)
    logger.debug(f"Read DOCX: {len(text_parts)} blocks, {text.count(PAGE_BREAK)} page breaks")

    return DocxContent(text=text, html='\n'.join(html_parts))
