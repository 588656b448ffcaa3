#!/usr/bin/env python3
"""
Segmenter Models - Data structures for segmentation output.
"""

from typing import Any, Dict, Optional
from dataclasses import dataclass


@dataclass
class Page:
    """One logical page of an imported document."""
    content: str
    title: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'content': self.content}
        if self.title is not None:
            data['title'] = self.title
        return data
