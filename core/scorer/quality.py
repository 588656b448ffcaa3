#!/usr/bin/env python3
"""
Quality Score - how well the filled-in CV reads (0-40).

- Summary length band: 15
- Action-oriented language: 10
- ATS readability (name, dates, enough experience): 10
- Additional sections: 1.25 each, up to 5
"""

from typing import List, Tuple
import logging

from core.scorer.completion import summary_points
from core.scorer.signals import CvSignals

logger = logging.getLogger(__name__)

ACTION_VERBS: Tuple[str, ...] = (
    'led', 'managed', 'developed', 'created', 'improved', 'achieved',
    'designed', 'implemented', 'optimized', 'delivered', 'executed', 'built',
    'launched', 'established', 'increased', 'reduced', 'transformed',
    'collaborated', 'analyzed', 'resolved',
)

ADDITIONAL_SECTION_POINTS = 1.25
ADDITIONAL_SECTIONS_CAP = 5.0


def contains_action_verb(text: str) -> bool:
    """Case-insensitive substring check against ACTION_VERBS."""
    lower = text.lower()
    return any(verb in lower for verb in ACTION_VERBS)


def has_action_language(signals: CvSignals) -> bool:
    if signals.summary and contains_action_verb(signals.summary):
        return True
    return any(
        contains_action_verb(bullet)
        for exp in signals.qualifying_experience
        for bullet in exp.bullets
    )


def _score_action_language(signals: CvSignals, fixes: List[str]) -> int:
    if has_action_language(signals):
        return 10
    if signals.experience_count > 0 or signals.summary_word_count >= 20:
        fixes.append('Add more action-oriented language (e.g., "led", "developed", "achieved")')
        return 5
    return 0


def _score_ats_readability(signals: CvSignals, fixes: List[str]) -> int:
    has_dates = any(exp.start_date or exp.end_date for exp in signals.qualifying_experience)

    if signals.has_name and has_dates and signals.experience_count >= 2:
        return 10
    if signals.has_name and has_dates:
        return 7
    if signals.has_name:
        fixes.append("Add dates to work experience for better ATS parsing")
        return 4
    fixes.append("Ensure your full name is present")
    return 0


def _score_additional_sections(signals: CvSignals, fixes: List[str]) -> float:
    if signals.additional_sections == 0 and signals.experience_count >= 2:
        fixes.append("Consider adding projects, certifications, or languages")
    return min(ADDITIONAL_SECTIONS_CAP, signals.additional_sections * ADDITIONAL_SECTION_POINTS)


def calculate_quality_score(signals: CvSignals) -> Tuple[float, List[str]]:
    """
    Calculate the quality sub-score.

    The result can be fractional (additional sections add 1.25 each);
    rounding happens in the orchestrator.

    Returns: (quality_score, fixes)
    """
    fixes: List[str] = []

    score = (
        summary_points(signals.summary_word_count) +
        _score_action_language(signals, fixes) +
        _score_ats_readability(signals, fixes) +
        _score_additional_sections(signals, fixes)
    )

    return score, fixes
