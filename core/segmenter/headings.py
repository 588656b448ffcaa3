#!/usr/bin/env python3
"""
Heading Detection - map headings to character offsets in the plain text.

Two sources are merged:
- HTML h1/h2 headings, located in the plain text by case-insensitive search
- Numbered text headings ("1. ", "Chapter 3", "PART 2", "SECTION 4")

Offsets are Python string indices (code points) into the plain text.

Titles are attached by offset, not by position in the page list: a page
gets a title only when it starts exactly at an HTML heading. Preamble text
before the first heading therefore stays untitled instead of borrowing the
first heading's title.
"""

import re
from typing import Dict, List, Optional
import logging

from core.config_loader import SegmenterConfig
from core.segmenter.markup import extract_headings
from core.segmenter.models import Page

logger = logging.getLogger(__name__)

NUMBERED_HEADING_PATTERN = re.compile(
    r'^(?:\d+\.\s+|Chapter\s+\d+|PART\s+\d+|SECTION\s+\d+)[^\n]{0,100}$',
    re.IGNORECASE | re.MULTILINE
)


def find_html_heading_offsets(text: str, markup: str) -> Dict[int, str]:
    """
    Locate HTML headings in the plain text.

    Headings are searched in document order, each one starting after the
    previous match, so a heading whose text also appears earlier in the body
    is not pinned to that earlier occurrence. Headings that cannot be found
    are skipped.

    Returns: {offset: title}
    """
    lowered = text.lower()
    offsets: Dict[int, str] = {}
    cursor = 0

    for _, title in extract_headings(markup):
        index = lowered.find(title.lower(), cursor)
        if index == -1:
            logger.debug(f"Heading not found in text: {title!r}")
            continue
        offsets.setdefault(index, title)
        cursor = index + len(title)

    return offsets


def find_text_heading_offsets(text: str, known: List[int], proximity: int) -> List[int]:
    """
    Find numbered/chapter/section headings in plain text.

    A match closer than ``proximity`` characters to an already accepted
    offset is treated as the same boundary and dropped.
    """
    accepted = list(known)
    found = []
    for match in NUMBERED_HEADING_PATTERN.finditer(text):
        position = match.start()
        if any(abs(existing - position) < proximity for existing in accepted):
            continue
        accepted.append(position)
        found.append(position)
    return found


def split_by_headings(
    text: str,
    markup: Optional[str],
    config: SegmenterConfig
) -> List[Page]:
    """
    Slice the text at heading offsets.

    Pages that begin at an HTML heading carry that heading's title; text
    before the first heading and pages started by numbered text headings are
    untitled.
    """
    titles = find_html_heading_offsets(text, markup) if markup else {}
    text_offsets = find_text_heading_offsets(text, sorted(titles), config.heading_proximity)

    offsets = sorted(set(titles) | set(text_offsets))
    if not offsets:
        return []

    pages: List[Page] = []
    last = 0

    def add_page(start: int, end: Optional[int]) -> None:
        content = text[start:end].strip()
        if content:
            pages.append(Page(content=content, title=titles.get(start)))

    for position in offsets:
        if position > last:
            add_page(last, position)
            last = position

    add_page(last, None)
    return pages
