#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from typing import Optional
from datetime import datetime, timezone


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string.
    
    Args:
        dt: Datetime object.
    
    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    return dt.isoformat()


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
