#!/usr/bin/env python3
"""
Next Best Action - pick the single most useful next step for the user.

Priority order:
1) interview / build-your-path pages -> no global guidance (they have their own)
2) no base CV -> CREATE_CV
3) job details page with a job:
   not tailored -> TAILOR_CV
   no cover letter -> GENERATE_COVER
   submitted but not interview trained -> TRAIN_INTERVIEW
   otherwise -> READY_TO_APPLY
4) anywhere else -> FIND_JOBS
"""

from typing import Optional
import logging

from core.guidance.models import GuidanceState, NextAction, NextBestAction, PageContext

logger = logging.getLogger(__name__)

SELF_GUIDED_PAGES = frozenset({PageContext.INTERVIEW, PageContext.BUILD_YOUR_PATH})

CREATE_CV = NextBestAction(
    action=NextAction.CREATE_CV,
    title="Start with your CV",
    message="You don't have a base CV yet. Let's create one first.",
    cta_label="Create CV",
)

TAILOR_CV = NextBestAction(
    action=NextAction.TAILOR_CV,
    title="Tailor CV Now",
    message="Your CV is not tailored to this job yet. Tailoring increases your chances.",
    cta_label="Tailor CV Now",
)

GENERATE_COVER = NextBestAction(
    action=NextAction.GENERATE_COVER,
    title="Generate Cover Letter",
    message="A tailored cover letter can make you stand out. Let's generate one for this job.",
    cta_label="Generate Cover Letter",
)

TRAIN_INTERVIEW = NextBestAction(
    action=NextAction.TRAIN_INTERVIEW,
    title="Train Interview",
    message="Let's prepare answers for this job so you feel confident in interviews.",
    cta_label="Train Interview",
)

APPLICATION_SUBMITTED = NextBestAction(
    action=NextAction.READY_TO_APPLY,
    title="Application submitted",
    message="Great job. Track it in your dashboard and keep training.",
    cta_label="Open Dashboard",
)

READY_TO_APPLY = NextBestAction(
    action=NextAction.READY_TO_APPLY,
    title="Apply for this job",
    message="Your documents look ready. Apply now and track it in your dashboard.",
    cta_label="Apply for this job",
)

FIND_JOBS = NextBestAction(
    action=NextAction.FIND_JOBS,
    title="Want job matches?",
    message="Start in Job Finder to discover opportunities that match your CV.",
    cta_label="Find Jobs",
)


def _job_workflow_action(state: GuidanceState) -> NextBestAction:
    if not state.is_cv_tailored:
        return TAILOR_CV
    if not state.has_cover_letter:
        return GENERATE_COVER
    # Interview training unlocks once the application is in
    if state.application_submitted and not state.interview_trained:
        return TRAIN_INTERVIEW
    if state.application_submitted:
        return APPLICATION_SUBMITTED
    return READY_TO_APPLY


def get_next_best_action(state: GuidanceState) -> Optional[NextBestAction]:
    """
    Compute the next best action for the user's current state.

    Returns:
        NextBestAction, or None on pages that run their own guidance
    """
    if state.page in SELF_GUIDED_PAGES:
        return None

    if not state.has_base_cv:
        action = CREATE_CV
    elif state.page == PageContext.JOB_DETAILS and state.job_id:
        action = _job_workflow_action(state)
    else:
        action = FIND_JOBS

    logger.debug(f"Next best action on {state.page.value}: {action.action.value}")
    return action.model_copy()
