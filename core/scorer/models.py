#!/usr/bin/env python3
"""
Scoring Models - Data structures for CV scoring results.
"""

from enum import Enum
from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field


class ScoreLevel(str, Enum):
    STRONG = "Strong"
    GOOD = "Good"
    NEEDS_IMPROVEMENT = "Needs Improvement"


@dataclass
class CvScoreResult:
    """Complete CV score with sub-scores, level and prioritized fixes."""
    score: int = 0
    completion_score: int = 0
    quality_score: int = 0
    level: ScoreLevel = ScoreLevel.NEEDS_IMPROVEMENT
    fixes: List[str] = field(default_factory=list)
    is_gated: bool = False
    gate_message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'completionScore': self.completion_score,
            'qualityScore': self.quality_score,
            'level': self.level.value,
            'fixes': list(self.fixes),
            'isGated': self.is_gated,
            'gateMessage': self.gate_message,
        }
