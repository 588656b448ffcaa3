#!/usr/bin/env python3
"""
CV Scoring Service - orchestrates signal extraction, sub-scores and the
completion gate.

Formula:
- score = completion (0-60) + quality (0-40), clamped to 0-100
- Completion gate: if summary < 20 real words, no qualifying experience,
  or fewer than 3 real skills, the CV is gated and the score is capped at 15
- Level: >= 80 Strong, >= 55 Good, otherwise Needs Improvement
"""

import math
from typing import List, Optional
import logging

from core.cv.schema import CvData
from core.scorer.models import CvScoreResult, ScoreLevel
from core.scorer.signals import CvSignals, extract_signals
from core.scorer.completion import calculate_completion_score
from core.scorer.quality import calculate_quality_score

logger = logging.getLogger(__name__)

GATE_SCORE_CAP = 15
GATE_MIN_SUMMARY_WORDS = 20
GATE_MIN_SKILLS = 3
GATE_MESSAGE = "Incomplete CV - fill basics to unlock full score"

MAX_FIXES = 5
ESSENTIAL_FIX_KEYWORDS = ('summary', 'experience', 'skills')


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def is_gated(signals: CvSignals) -> bool:
    """Whether essentials are missing and the score must be capped."""
    return (
        signals.summary_word_count < GATE_MIN_SUMMARY_WORDS or
        signals.experience_count == 0 or
        signals.skills_count < GATE_MIN_SKILLS
    )


def level_for_score(score: int) -> ScoreLevel:
    if score >= 80:
        return ScoreLevel.STRONG
    if score >= 55:
        return ScoreLevel.GOOD
    return ScoreLevel.NEEDS_IMPROVEMENT


def prioritize_fixes(fixes: List[str], limit: int = MAX_FIXES) -> List[str]:
    """Move fixes about missing essentials to the front, keep order otherwise.

    Keyword matching is case-sensitive: "Summary too short ..." is not
    treated as essential, "Expand summary ..." is.
    """
    def is_essential(fix: str) -> bool:
        return any(keyword in fix for keyword in ESSENTIAL_FIX_KEYWORDS)

    essential = [f for f in fixes if is_essential(f)]
    other = [f for f in fixes if not is_essential(f)]
    return (essential + other)[:limit]


def compute_cv_score(cv: Optional[CvData]) -> CvScoreResult:
    """
    Compute the readiness score for a CV.

    Total function: a missing or empty CV scores 0 and is gated.

    Args:
        cv: Structured CV data (None is treated as an empty CV)

    Returns:
        CvScoreResult with score, sub-scores, level and up to five fixes
    """
    signals = extract_signals(cv or CvData())

    completion, completion_fixes = calculate_completion_score(signals)
    quality, quality_fixes = calculate_quality_score(signals)

    completion_score = _clamp(completion, 0, 60)
    quality_score = _clamp(_round_half_up(quality), 0, 40)
    score = _clamp(completion_score + quality_score, 0, 100)

    gated = is_gated(signals)
    if gated:
        # Ceiling, not a multiplier: totals already under the cap pass through
        score = min(score, GATE_SCORE_CAP)

    result = CvScoreResult(
        score=score,
        completion_score=completion_score,
        quality_score=quality_score,
        level=level_for_score(score),
        fixes=prioritize_fixes(completion_fixes + quality_fixes),
        is_gated=gated,
        gate_message=GATE_MESSAGE if gated else None,
    )

    logger.debug(
        f"CV score {result.score} (completion={completion_score}, quality={quality_score}, "
        f"gated={gated})"
    )
    return result
