#!/usr/bin/env python3
"""
Segmentation Service - split document text into pages.

Cascade, first strategy that produces pages wins:
1. Explicit page breaks (form feed characters in the text)
2. HTML page-break markers (elements with a ``page-break`` class)
3. Headings (HTML h1/h2 plus numbered text headings), only if > 1 page
4. Length-based fallback (~2000 characters per page)

Never returns an empty list: empty input yields one page with empty content.
"""

from typing import List, Optional
import logging

from core.config_loader import SegmenterConfig
from core.segmenter.headings import split_by_headings
from core.segmenter.length import split_by_length
from core.segmenter.markup import has_page_break_markers, split_on_page_breaks
from core.segmenter.models import Page

logger = logging.getLogger(__name__)

FORM_FEED = '\f'


def split_on_form_feeds(text: str) -> List[Page]:
    return [Page(content=part.strip()) for part in text.split(FORM_FEED) if part.strip()]


def split_into_pages(
    text: str,
    html: Optional[str] = None,
    config: Optional[SegmenterConfig] = None
) -> List[Page]:
    """
    Split extracted document text into an ordered list of pages.

    Args:
        text: Plain text extracted from the document
        html: Optional HTML rendering of the same document
        config: Segmenter tunables (defaults if not given)

    Returns:
        Non-empty list of Page
    """
    config = config or SegmenterConfig()
    text = text or ""

    if FORM_FEED in text:
        pages = split_on_form_feeds(text)
        if pages:
            logger.debug(f"Split on form feeds into {len(pages)} pages")
            return pages

    if html and has_page_break_markers(html):
        pages = [Page(content=fragment) for fragment in split_on_page_breaks(html)]
        if pages:
            logger.debug(f"Split on HTML page-break markers into {len(pages)} pages")
            return pages

    pages = split_by_headings(text, html, config)
    if len(pages) > 1:
        logger.debug(f"Split on headings into {len(pages)} pages")
        return pages

    pages = split_by_length(text, config)
    return pages or [Page(content=text.strip())]
