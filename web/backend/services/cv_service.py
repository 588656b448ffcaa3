#!/usr/bin/env python3
"""
CV service - business logic for scoring and storing CVs.
"""

import logging
from typing import Any, Dict, Optional

from core.cv import normalize_cv_data
from core.scorer import compute_cv_score
from database.repositories import CvRepository
from ..models.responses import (
    CvReviewResponse,
    CvLatestResponse,
    CvRecordResponse,
    Readiness
)
from ..utils import safe_datetime_iso, utc_now_iso
from ..exceptions import InvalidCvPayloadException

logger = logging.getLogger(__name__)


def review_cv(cv_data: Optional[Dict[str, Any]]) -> CvReviewResponse:
    """
    Score a CV sent by the builder.

    Raises:
        InvalidCvPayloadException: If no CV data was sent.
    """
    if cv_data is None:
        raise InvalidCvPayloadException("CV data is required")

    result = compute_cv_score(normalize_cv_data(cv_data))

    return CvReviewResponse(
        score=result.score,
        completion_score=result.completion_score,
        quality_score=result.quality_score,
        level=result.level.value,
        top_fixes=result.fixes,
        is_gated=result.is_gated,
        gate_message=result.gate_message,
    )


class CvService:
    """Service for reading and saving the user's CV."""

    def __init__(self, repo: CvRepository):
        self.repo = repo

    def get_latest(self, user_id: str) -> CvLatestResponse:
        """
        Load the user's latest CV with its readiness score.

        Returns ``has_cv=False`` (not an error) when nothing is saved yet.
        """
        record = self.repo.get_latest_for_user(user_id)

        if record is None:
            logger.info(f"No saved CV for user {user_id}")
            return CvLatestResponse(has_cv=False)

        cv = normalize_cv_data(record.data)
        result = compute_cv_score(cv)

        readiness = Readiness(
            score=result.score,
            level=result.level.value,
            top_fixes=result.fixes,
            last_updated=safe_datetime_iso(record.updated_at) or utc_now_iso(),
        )

        return CvLatestResponse(has_cv=True, cv=cv, readiness=readiness)

    def save(
        self,
        user_id: str,
        data: Optional[Dict[str, Any]],
        title: Optional[str] = None
    ) -> CvRecordResponse:
        """
        Create or overwrite the user's CV.

        Raises:
            InvalidCvPayloadException: If no CV data was sent.
        """
        if data is None:
            raise InvalidCvPayloadException("CV data is required")

        record = self.repo.upsert_for_user(user_id, data, title=title)

        return CvRecordResponse(
            id=record.id,
            user_id=record.user_id,
            title=record.title,
            data=record.data,
            created_at=safe_datetime_iso(record.created_at),
            updated_at=safe_datetime_iso(record.updated_at),
        )
