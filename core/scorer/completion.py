#!/usr/bin/env python3
"""
Completion Score - how much of the CV is filled in (0-60).

Each contributor adds points independently and appends a fix when it is
below its best band:

- Summary length: 15
- Qualifying experience entries: 15
- Real bullets per experience: 10
- Skills: 10
- Contact details: 5
- Education: 5
"""

from typing import List, Tuple
import logging

from core.scorer.signals import CvSignals

logger = logging.getLogger(__name__)

SUMMARY_TARGET_MIN = 60
SUMMARY_TARGET_MAX = 100


def summary_points(word_count: int) -> int:
    """Summary length points for quality scoring.

    Summaries past the target fall into the 40-59 band here, while
    completion scoring treats them as stubs.
    """
    if SUMMARY_TARGET_MIN <= word_count <= SUMMARY_TARGET_MAX:
        return 15
    if word_count >= 40:
        return 10
    if word_count >= 20:
        return 5
    return 0


def _score_summary(word_count: int, fixes: List[str]) -> int:
    if SUMMARY_TARGET_MIN <= word_count <= SUMMARY_TARGET_MAX:
        return 15
    if word_count >= 40:
        fixes.append(f"Expand summary to 60-100 words (currently {word_count})")
        return 10
    if word_count >= 20:
        fixes.append(f"Summary too short - expand to 60-100 words (currently {word_count})")
        return 5
    if word_count > 0:
        fixes.append(f"Add a professional summary (60-100 words recommended, currently {word_count})")
        return 2
    fixes.append("Add a professional summary (60-100 words)")
    return 0


def _score_experience(signals: CvSignals, fixes: List[str]) -> int:
    count = signals.experience_count
    if count >= 2:
        return 15
    if count == 1:
        fixes.append("Add at least one more work experience")
        return 8
    fixes.append("Add at least 2 work experiences")
    return 0


def _score_bullets(signals: CvSignals, fixes: List[str]) -> int:
    # Only meaningful once there is something to put bullets under
    if signals.experience_count == 0:
        return 0

    avg = signals.average_bullets
    if avg >= 3:
        return 10
    if avg >= 2:
        fixes.append(f"Add more bullet points per experience (avg: {avg:.1f}, target: 3+)")
        return 7
    if avg >= 1:
        fixes.append(f"Add more bullet points per experience (avg: {avg:.1f}, target: 3+)")
        return 4
    fixes.append(f"Add bullet points to each experience (avg: {avg:.1f})")
    return 0


def _score_skills(skills_count: int, fixes: List[str]) -> int:
    if skills_count >= 10:
        return 10

    fixes.append(f"Add more skills (currently {skills_count}, target: 10+)")
    if skills_count >= 6:
        return 7
    if skills_count >= 3:
        return 4
    return 0


def _score_contact(signals: CvSignals, fixes: List[str]) -> int:
    if signals.has_email and signals.has_phone:
        return 5
    if signals.has_email or signals.has_phone:
        if not signals.has_email:
            fixes.append("Add your email address")
        if not signals.has_phone:
            fixes.append("Add your phone number")
        return 2
    fixes.append("Add your email address and phone number")
    return 0


def _score_education(signals: CvSignals, fixes: List[str]) -> int:
    if signals.has_education:
        return 5
    fixes.append("Add your education details")
    return 0


def calculate_completion_score(signals: CvSignals) -> Tuple[int, List[str]]:
    """
    Calculate the completion sub-score.

    Returns: (completion_score, fixes)
    """
    fixes: List[str] = []

    score = (
        _score_summary(signals.summary_word_count, fixes) +
        _score_experience(signals, fixes) +
        _score_bullets(signals, fixes) +
        _score_skills(signals.skills_count, fixes) +
        _score_contact(signals, fixes) +
        _score_education(signals, fixes)
    )

    return score, fixes
