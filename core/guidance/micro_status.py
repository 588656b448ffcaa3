#!/usr/bin/env python3
"""
Career assistant micro status - the one-line "what I'm doing now" message.

Describes only what the assistant is about to ask, never a conclusion it has
not reached.
"""

from typing import Dict, Optional, Tuple, Union

from core.guidance.models import AssistantPhase, MicroStatus

# Older clients send the long phase names
PHASE_ALIASES: Dict[str, AssistantPhase] = {
    'CLASSIFY': AssistantPhase.CLASSIFY,
    'classification': AssistantPhase.CLASSIFY,
    'PATH': AssistantPhase.PATH,
    'assessment': AssistantPhase.PATH,
    'RESULT': AssistantPhase.RESULT,
    'recommendation': AssistantPhase.RESULT,
}

CLASSIFY_STATUS = MicroStatus(
    line="Got it, I'll ask a couple of quick basics to place you on the right path.",
    chips=["Quick triage"],
)
RESULT_STATUS = MicroStatus(
    line="Summarising your situation and building your options…",
    chips=["Work Now", "Improve Later"],
)
DEFAULT_PATH_STATUS = MicroStatus(line="Selecting next question…")

_QUESTION_STATUS: Dict[Tuple[str, ...], MicroStatus] = {
    ('language', 'people_comfort'): MicroStatus(
        line="Checking communication & customer comfort…", chips=["Customer-facing"]),
    ('transport',): MicroStatus(line="Checking travel options…", chips=["Transport"]),
    ('training_openness',): MicroStatus(
        line="Seeing if short licences could open better options…",
        chips=["Improve later", "Licences"]),
    ('physical_ability',): MicroStatus(
        line="Checking physical requirements…", chips=["Low physical strain"]),
    ('goal_gate',): MicroStatus(line="Understanding what you're looking for…"),
    ('priorities',): MicroStatus(line="Identifying what matters most to you…"),
    ('experience_field',): MicroStatus(line="Understanding your background…"),
    ('education_level', 'education_field'): MicroStatus(line="Reviewing your qualifications…"),
    ('change_reason',): MicroStatus(line="Understanding why you're looking to change…"),
    ('move_away',): MicroStatus(line="Checking location flexibility…"),
    ('strengths', 'transferable_strengths'): MicroStatus(line="Identifying your strengths…"),
    ('study_status', 'work_during_study'): MicroStatus(line="Checking study situation…"),
    ('current_role_type',): MicroStatus(line="Understanding your current role…"),
    ('adjustment_goal',): MicroStatus(line="Identifying what you want to adjust…"),
    ('pressure_source',): MicroStatus(line="Understanding current challenges…"),
    ('change_level',): MicroStatus(line="Assessing how much change you're open to…"),
    ('trade_type',): MicroStatus(line="Identifying specific trade…"),
    ('warehouse_focus',): MicroStatus(
        line="Checking warehouse experience type…", chips=["Night shifts"]),
}

QUESTION_STATUS: Dict[str, MicroStatus] = {
    question_id: status
    for question_ids, status in _QUESTION_STATUS.items()
    for question_id in question_ids
}


def normalize_phase(phase: Union[str, AssistantPhase]) -> AssistantPhase:
    """Map short and long phase names; anything unrecognised is RESULT."""
    if isinstance(phase, AssistantPhase):
        return phase
    return PHASE_ALIASES.get(phase, AssistantPhase.RESULT)


def get_micro_status(
    phase: Union[str, AssistantPhase],
    next_question_id: Optional[str] = None
) -> MicroStatus:
    """
    Status line and keyword chips for the assistant's current step.

    Args:
        phase: CLASSIFY / PATH / RESULT (or classification / assessment /
            recommendation)
        next_question_id: Question about to be asked, None when moving to
            results
    """
    phase = normalize_phase(phase)

    if phase == AssistantPhase.CLASSIFY:
        return CLASSIFY_STATUS.model_copy(deep=True)

    if phase == AssistantPhase.RESULT or next_question_id is None:
        return RESULT_STATUS.model_copy(deep=True)

    return QUESTION_STATUS.get(next_question_id, DEFAULT_PATH_STATUS).model_copy(deep=True)
