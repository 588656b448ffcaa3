#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, Optional

from core.guidance.models import CareerAnswers


class ApiRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CvReviewRequest(ApiRequest):
    """Request to score a CV without saving it."""
    cv_data: Optional[Dict[str, Any]] = Field(
        None,
        description="CV as produced by the CV builder (camelCase keys)"
    )


class CvUpsertRequest(ApiRequest):
    """Request to save the user's CV."""
    title: Optional[str] = Field(None, description="CV title, defaults to 'My CV'")
    data: Optional[Dict[str, Any]] = Field(None, description="CV data object")


class DirectionReasonsRequest(ApiRequest):
    """Request to explain why a career direction fits the user."""
    direction_id: str = Field(..., min_length=1, description="Catalog id, snake_case or kebab-case")
    answers: CareerAnswers = Field(default_factory=CareerAnswers)
