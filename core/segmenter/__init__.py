#!/usr/bin/env python3
"""
Segmenter Module - split imported document text into logical pages.

Public API:
- split_into_pages: cascade of page-splitting strategies
- Page: dataclass for one page of output

- models.py: Page
- markup.py: HTML helpers (tag stripping, page-break markers, h1/h2 extraction)
- headings.py: Heading offset detection (HTML + numbered text headings)
- length.py: Length-based fallback at sentence/paragraph boundaries
- service.py: split_into_pages orchestrator
"""

from core.segmenter.models import Page
from core.segmenter.service import split_into_pages

__all__ = ['split_into_pages', 'Page']
