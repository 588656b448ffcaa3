#!/usr/bin/env python3
"""
Scoring Module - deterministic CV readiness scoring.

Public API:
- compute_cv_score: score a CvData (0-100) with completion gate
- CvScoreResult: dataclass for the scoring result
- ScoreLevel: Strong / Good / Needs Improvement

The scoring module is split into focused, single-responsibility modules:

- models.py: Data structures (CvScoreResult, ScoreLevel)
- signals.py: Placeholder detection, word/bullet counting, CvSignals
- completion.py: Completion sub-score (0-60)
- quality.py: Quality sub-score (0-40)
- service.py: compute_cv_score orchestrator (gate, clamping, fix ordering)
"""

from core.scorer.models import CvScoreResult, ScoreLevel
from core.scorer.service import compute_cv_score

__all__ = ['compute_cv_score', 'CvScoreResult', 'ScoreLevel']
