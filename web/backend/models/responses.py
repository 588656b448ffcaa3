#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional

from core.cv import CvData
from core.guidance.models import NextBestAction


class ApiResponse(BaseModel):
    """Serialized with camelCase keys, the shape the frontend expects."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CvReviewResponse(ApiResponse):
    """Score breakdown for a CV."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "ok": True,
                "score": 72,
                "completionScore": 50,
                "qualityScore": 22,
                "level": "Good",
                "topFixes": ["Add 1 more skill (currently 11, aim for 12+)"],
                "isGated": False,
                "gateMessage": None
            }
        }
    )

    ok: bool = True
    score: int = Field(ge=0, le=100)
    completion_score: int = Field(ge=0, le=60)
    quality_score: int = Field(ge=0, le=40)
    level: str
    top_fixes: List[str]
    is_gated: bool
    gate_message: Optional[str] = None


class Readiness(ApiResponse):
    """Readiness summary shown next to a saved CV."""
    score: int = Field(ge=0, le=100)
    level: str
    top_fixes: List[str]
    last_updated: str


class CvLatestResponse(ApiResponse):
    ok: bool = True
    has_cv: bool
    cv: Optional[CvData] = None
    readiness: Optional[Readiness] = None


class CvRecordResponse(BaseModel):
    """A stored CV row."""
    id: int
    user_id: str
    title: str
    data: Dict[str, Any]
    created_at: Optional[str]
    updated_at: Optional[str]


class CvUpsertResponse(BaseModel):
    ok: bool = True
    cv: CvRecordResponse


class PageResponse(BaseModel):
    title: Optional[str] = None
    content: str


class DocumentImportResponse(BaseModel):
    """Imported document split into pages.

    ``text`` is only set for PDFs.
    """
    ok: bool = True
    text: Optional[str] = None
    pages: List[PageResponse]


class NextActionResponse(BaseModel):
    ok: bool = True
    action: Optional[NextBestAction] = None


class HealthResponse(BaseModel):
    status: str
    service: str
