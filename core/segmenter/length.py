#!/usr/bin/env python3
"""
Length-based fallback - cut unstructured text into ~2000 character pages.

Cut points are chosen, in order of preference, at a sentence end
(``.``/``!``/``?`` + whitespace + capital letter), a paragraph break, a
single newline, or exactly at the target offset.
"""

import re
from typing import List, Optional
import logging

from core.config_loader import SegmenterConfig
from core.segmenter.models import Page

logger = logging.getLogger(__name__)

SENTENCE_END_PATTERN = re.compile(r'[.!?]\s+[A-Z]')


def find_split_point(text: str, current: int, config: SegmenterConfig) -> int:
    """
    Pick the end offset (exclusive) of the chunk starting at ``current``.

    Caller guarantees more than ``config.max_length`` characters remain.
    """
    target = current + config.target_length
    limit = target + config.overshoot
    floor = current + config.min_length

    search_start = max(floor, target - config.sentence_window)
    search_end = min(target + config.sentence_window, len(text))

    # Last sentence boundary that does not overshoot; the cut lands on the capital letter
    best: Optional[int] = None
    for match in SENTENCE_END_PATTERN.finditer(text, search_start, search_end):
        position = match.end() - 1
        if position > limit:
            break
        best = position

    if best is not None:
        return best

    paragraph = text.rfind('\n\n', 0, limit + 2)
    if paragraph > floor:
        return paragraph + 2

    newline = text.rfind('\n', 0, limit + 1)
    if newline > floor:
        return newline + 1

    return target


def split_by_length(text: str, config: SegmenterConfig) -> List[Page]:
    if len(text) <= config.max_length:
        return [Page(content=text.strip())]

    pages: List[Page] = []
    current = 0

    while current < len(text):
        if len(text) - current <= config.max_length:
            content = text[current:].strip()
            if content:
                pages.append(Page(content=content))
            break

        split_at = find_split_point(text, current, config)
        content = text[current:split_at].strip()
        if content:
            pages.append(Page(content=content))
        current = split_at

    logger.debug(f"Length split produced {len(pages)} pages from {len(text)} chars")
    return pages
