#!/usr/bin/env python3
"""
Guidance Module - rule-based "what should I do next" logic.

Public API:
- get_next_best_action: next step for the user's page context
- get_action_urls: job finder / build-your-path links for a career direction
- build_reasons: why a career direction fits the user's answers
- get_micro_status: career assistant status line for the current step
"""

from core.guidance.models import (
    GuidanceState,
    NextAction,
    NextBestAction,
    PageContext,
    ActionUrls,
    CareerAnswers,
    ReasonsResult,
    AssistantPhase,
    MicroStatus,
)
from core.guidance.next_action import get_next_best_action
from core.guidance.action_map import get_action_urls
from core.guidance.reasons import build_reasons
from core.guidance.micro_status import get_micro_status

__all__ = [
    'GuidanceState',
    'NextAction',
    'NextBestAction',
    'PageContext',
    'ActionUrls',
    'CareerAnswers',
    'ReasonsResult',
    'AssistantPhase',
    'MicroStatus',
    'get_next_best_action',
    'get_action_urls',
    'build_reasons',
    'get_micro_status',
]
