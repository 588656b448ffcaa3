#!/usr/bin/env python3
"""
Career direction reasons - short "why this fits you" bullets and chips.

Pure rules over the career assistant answers and the direction id; no AI.
Direction ids are matched by keyword after normalizing to kebab-case, so
``warehouse_logistics``, ``warehouse-logistics`` and ``Warehouse-Logistics``
all count as a warehouse direction.
"""

from typing import List, Optional
import logging

from core.guidance.models import CareerAnswers, ReasonsResult

logger = logging.getLogger(__name__)

MAX_BULLETS = 3
MAX_CHIPS = 4

DEFAULT_BULLETS = [
    'Entry-friendly option in the UK',
    'Fits your current preferences',
    'A practical next step',
]

PRIORITY_BULLETS = [
    ('stability', 'More stable shifts and consistent work'),
    ('flexibility', 'Flexible scheduling options available'),
    ('physical_ease', 'Lower physical strain requirements'),
    ('better_income', 'Better earning potential in this field'),
]

CUSTOMER_FACING = ('hospitality', 'front', 'care', 'support')
SIMPLE_COMMUNICATION = ('warehouse', 'cleaning', 'cleaner', 'security')
DRIVING = ('driving', 'transport')
NON_PHYSICAL = ('office', 'admin', 'digital', 'security')
LICENCE_BASED = ('security', 'driving', 'construction')
SIDE_INCOME = ('hospitality', 'cleaning', 'warehouse')
LOW_STRAIN = ('warehouse', 'cleaning', 'office', 'admin')
HANDS_ON = ('construction', 'maintenance')
NIGHT_SHIFTS = ('warehouse', 'logistics')
FAST_ENTRY = ('warehouse', 'cleaning', 'hospitality', 'security')

TRAINING_OPEN = ('yes_short', 'maybe_depends')


def normalize_direction_id(direction_id: str) -> str:
    return direction_id.lower().replace('_', '-')


def _mentions(direction: str, keywords) -> bool:
    return any(keyword in direction for keyword in keywords)


def _builds_on_experience(experience_field: Optional[str], direction: str) -> bool:
    if not experience_field:
        return False
    return (
        ('hospitality' in experience_field and 'hospitality' in direction) or
        ('warehouse' in experience_field and 'warehouse' in direction) or
        ('trades' in experience_field and _mentions(direction, HANDS_ON))
    )


def _bullets(answers: CareerAnswers, direction: str) -> List[str]:
    bullets = [text for priority, text in PRIORITY_BULLETS if priority in answers.priorities]

    if answers.people_comfort == 'comfortable' and _mentions(direction, CUSTOMER_FACING):
        bullets.append('Matches your comfort with customers')

    if answers.language == 'basic' and _mentions(direction, SIMPLE_COMMUNICATION):
        bullets.append('Simple communication requirements')

    if (answers.transport in ('car', 'van_professional', 'licence_no_car')
            and _mentions(direction, DRIVING)):
        bullets.append('Fits your transport access')

    if answers.physical_ability == 'prefer_non_physical' and _mentions(direction, NON_PHYSICAL):
        bullets.append('Lower physical strain')

    if answers.training_openness in TRAINING_OPEN and _mentions(direction, LICENCE_BASED):
        bullets.append('Short training unlocks better opportunities')

    if answers.goal_gate == 'side_income' and _mentions(direction, SIDE_INCOME):
        bullets.append('Flexible shifts for side income')

    if _builds_on_experience(answers.experience_field, direction):
        bullets.append('Builds on your existing experience')

    return bullets


def _chips(answers: CareerAnswers, direction: str) -> List[str]:
    chips: List[str] = []

    if (answers.physical_ability in ('prefer_non_physical', 'light_physical')
            and _mentions(direction, LOW_STRAIN)):
        chips.append('Low physical strain')

    if (answers.people_comfort in ('comfortable', 'okay_sometimes')
            and _mentions(direction, CUSTOMER_FACING)):
        chips.append('Customer-facing')

    if answers.goal_gate == 'side_income' and _mentions(direction, SIDE_INCOME):
        chips.append('Flexible shifts')

    if answers.training_openness in TRAINING_OPEN:
        licence_keywords = ('security',) + DRIVING + ('construction',)
        chips.append('Licence-based' if _mentions(direction, licence_keywords) else 'Improve later')

    if answers.driving_interest == 'yes' and _mentions(direction, DRIVING):
        chips.append('Driving')

    if answers.language == 'basic' and _mentions(direction, ('warehouse', 'cleaning', 'security')):
        chips.append('Simple English')

    if answers.experience_field in ('trades', 'construction_labour') and _mentions(direction, HANDS_ON):
        chips.append('Hands-on')

    if answers.transport in ('car', 'van_professional') and _mentions(direction, DRIVING):
        chips.append('Transport-friendly')

    if _mentions(direction, NIGHT_SHIFTS):
        chips.append('Night shifts')

    if _mentions(direction, FAST_ENTRY):
        chips.append('Fast entry')

    return chips


def _unique(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


def build_reasons(answers: Optional[CareerAnswers], direction_id: str) -> ReasonsResult:
    """
    Explain why a career direction suits the user.

    Args:
        answers: Career assistant answers (None means nothing answered yet)
        direction_id: Catalog id in snake_case or kebab-case

    Returns:
        ReasonsResult with exactly 3 bullets (padded with generic reasons)
        and up to 4 chips, both deduplicated in rule order
    """
    answers = answers or CareerAnswers()
    direction = normalize_direction_id(direction_id)

    bullets = _unique(_bullets(answers, direction))
    # Padding picks the default at the current length, so one matched bullet
    # is followed by the second and third defaults
    while len(bullets) < MAX_BULLETS:
        bullets.append(DEFAULT_BULLETS[len(bullets)])

    chips = _unique(_chips(answers, direction))

    logger.debug(f"Built reasons for {direction}: {len(bullets)} bullets, {len(chips)} chips")
    return ReasonsResult(bullets=bullets[:MAX_BULLETS], chips=chips[:MAX_CHIPS])
