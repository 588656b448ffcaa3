#!/usr/bin/env python3
"""
HTML helpers for the segmenter.

The HTML companion comes from the document importer (or any converter that
renders Word styles as h1/h2 and page breaks as elements with a
``page-break`` class). Only a handful of patterns matter, so plain regexes
are enough.
"""

import html
import re
from typing import List, Tuple

PAGE_BREAK_PATTERN = re.compile(
    r'<p[^>]*class="[^"]*page-break[^"]*"[^>]*>'
    r'|<div[^>]*class="[^"]*page-break[^"]*"[^>]*>'
    r'|<hr[^>]*class="[^"]*page-break[^"]*"[^>]*>',
    re.IGNORECASE
)

HEADING_PATTERNS = (
    re.compile(r'<h1[^>]*>([^<]+)</h1>', re.IGNORECASE),
    re.compile(r'<h2[^>]*>([^<]+)</h2>', re.IGNORECASE),
)

TAG_PATTERN = re.compile(r'<[^>]+>')


def strip_tags(fragment: str) -> str:
    """Remove tags and decode entities."""
    return html.unescape(TAG_PATTERN.sub('', fragment)).strip()


def has_page_break_markers(markup: str) -> bool:
    return PAGE_BREAK_PATTERN.search(markup) is not None


def split_on_page_breaks(markup: str) -> List[str]:
    """Split HTML on page-break elements and return non-empty text fragments."""
    fragments = []
    for part in PAGE_BREAK_PATTERN.split(markup):
        text = strip_tags(part)
        if text:
            fragments.append(text)
    return fragments


def extract_headings(markup: str) -> List[Tuple[int, str]]:
    """
    Find h1/h2 headings in document order.

    Returns: list of (html_index, title) sorted by html_index
    """
    headings = []
    for pattern in HEADING_PATTERNS:
        for match in pattern.finditer(markup):
            title = html.unescape(match.group(1)).strip()
            if title:
                headings.append((match.start(), title))
    headings.sort(key=lambda h: h[0])
    return headings
