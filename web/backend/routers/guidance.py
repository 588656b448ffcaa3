#!/usr/bin/env python3
"""
Guidance endpoints - next best action, career direction links and reasons.
"""

from typing import Optional
from fastapi import APIRouter, Query

from core.guidance import (
    get_next_best_action,
    get_action_urls,
    build_reasons,
    get_micro_status,
)
from core.guidance.models import (
    GuidanceState,
    ActionUrls,
    ReasonsResult,
    MicroStatus,
)
from ..models.requests import DirectionReasonsRequest
from ..models.responses import NextActionResponse

router = APIRouter(prefix="/api/guidance", tags=["guidance"])

PHASE_PATTERN = "^(CLASSIFY|PATH|RESULT|classification|assessment|recommendation)$"


@router.post("/next-action", response_model=NextActionResponse)
def next_action(state: GuidanceState):
    """
    Suggest the single most useful next step.

    ``action`` is null on pages that carry their own guidance
    (interview, build-your-path).
    """
    return NextActionResponse(action=get_next_best_action(state))


@router.get("/action-urls/{catalog_id}", response_model=ActionUrls)
def action_urls(
    catalog_id: str,
    direction_title: Optional[str] = Query(default=None, description="Human readable direction title")
):
    """
    Get the job finder and build-your-path links for a career direction.
    """
    return get_action_urls(catalog_id, direction_title)


@router.post("/reasons", response_model=ReasonsResult)
def direction_reasons(payload: DirectionReasonsRequest):
    """Explain why a career direction fits: 3 bullets and up to 4 chips."""
    return build_reasons(payload.answers, payload.direction_id)


@router.get("/micro-status", response_model=MicroStatus)
def micro_status(
    phase: str = Query(..., pattern=PHASE_PATTERN),
    next_question_id: Optional[str] = Query(default=None, description="Question about to be asked")
):
    return get_micro_status(phase, next_question_id)
