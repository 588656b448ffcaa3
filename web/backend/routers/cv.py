#!/usr/bin/env python3
"""
CV endpoints - review, load and save the user's CV.
"""

import logging
from fastapi import APIRouter, Depends

from database.uow import cv_uow
from ..dependencies import get_current_user_id
from ..models.requests import CvReviewRequest, CvUpsertRequest
from ..models.responses import CvReviewResponse, CvLatestResponse, CvUpsertResponse
from ..services.cv_service import CvService, review_cv

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cv", tags=["cv"])


@router.post("/review", response_model=CvReviewResponse)
def review_cv_endpoint(body: CvReviewRequest):
    """
    Score a CV without saving it.

    Returns the 0-100 score, its completion/quality parts, the level and up
    to 5 prioritized fixes. Incomplete CVs are capped at 15 (``isGated``).
    """
    return review_cv(body.cv_data)


@router.get("/get-latest", response_model=CvLatestResponse)
def get_latest_cv(user_id: str = Depends(get_current_user_id)):
    """
    Get the latest saved CV for the authenticated user with its readiness score.
    """
    with cv_uow() as repo:
        return CvService(repo).get_latest(user_id)


@router.post("/upsert", response_model=CvUpsertResponse)
def upsert_cv(body: CvUpsertRequest, user_id: str = Depends(get_current_user_id)):
    """
    Create or update the CV of the authenticated user (one CV per user).
    """
    with cv_uow() as repo:
        cv = CvService(repo).save(user_id, body.data, title=body.title)

    logger.info(f"Saved CV for user {user_id}")
    return CvUpsertResponse(cv=cv)
