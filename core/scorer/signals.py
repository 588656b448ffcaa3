#!/usr/bin/env python3
"""
CV Signals - placeholder detection and the counts both sub-scores share.

Placeholder text is template/filler content ("your email", "lorem ipsum",
anything under 10 characters) that must not earn points.
"""

from typing import List, Tuple
from dataclasses import dataclass, field
import logging

from core.cv.schema import CvData, ExperienceEntry

logger = logging.getLogger(__name__)

PLACEHOLDER_PHRASES: Tuple[str, ...] = (
    'i work hard',
    'i am good',
    'lorem ipsum',
    'enter your',
    'add your',
    'your name',
    'your email',
    'your phone',
    'example',
    'sample',
    'test',
    'placeholder',
)

# Phrases only mark text as placeholder when the whole text is this short
PLACEHOLDER_PHRASE_MAX_LENGTH = 30
PLACEHOLDER_MIN_LENGTH = 10
MIN_BULLET_WORDS = 5


def is_placeholder(text: str) -> bool:
    """Check if text is empty, very short, or short template text."""
    if not text or not text.strip():
        return True

    lower = text.strip().lower()

    if len(lower) < PLACEHOLDER_PHRASE_MAX_LENGTH:
        if any(phrase in lower for phrase in PLACEHOLDER_PHRASES):
            return True

    return len(lower) < PLACEHOLDER_MIN_LENGTH


def count_real_words(text: str) -> int:
    """Count words of real (non-placeholder) text."""
    if not text or is_placeholder(text):
        return 0
    return len(text.split())


def count_real_bullets(bullets: List[str]) -> int:
    """Count bullets with at least five words that are not placeholders."""
    return len([
        b for b in bullets or []
        if len(b.split()) >= MIN_BULLET_WORDS and not is_placeholder(b)
    ])


def is_qualifying_experience(entry: ExperienceEntry) -> bool:
    """An experience counts if it has a real bullet or a real title and company."""
    if count_real_bullets(entry.bullets) > 0:
        return True
    return not is_placeholder(entry.job_title) and not is_placeholder(entry.company)


@dataclass
class CvSignals:
    """Derived counts used by completion, quality and the gate."""
    summary: str = ""
    summary_word_count: int = 0
    qualifying_experience: List[ExperienceEntry] = field(default_factory=list)
    total_real_bullets: int = 0
    skills_count: int = 0
    has_email: bool = False
    has_phone: bool = False
    has_name: bool = False
    has_education: bool = False
    additional_sections: int = 0

    @property
    def experience_count(self) -> int:
        return len(self.qualifying_experience)

    @property
    def average_bullets(self) -> float:
        if not self.qualifying_experience:
            return 0.0
        return self.total_real_bullets / self.experience_count


def count_additional_sections(cv: CvData) -> int:
    """Count optional sections with at least one non-placeholder item."""
    projects = [
        p for p in cv.projects or []
        if not is_placeholder(p.name) or not is_placeholder(p.description)
    ]
    certifications = [c for c in cv.certifications or [] if not is_placeholder(c)]
    publications = [p for p in cv.publications or [] if not is_placeholder(p.title)]
    languages = [l for l in cv.languages or [] if not is_placeholder(l)]

    return sum(1 for section in (projects, certifications, publications, languages) if section)


def extract_signals(cv: CvData) -> CvSignals:
    summary = cv.summary.strip()
    qualifying = [exp for exp in cv.experience if is_qualifying_experience(exp)]
    info = cv.personal_info

    signals = CvSignals(
        summary=summary,
        summary_word_count=count_real_words(summary),
        qualifying_experience=qualifying,
        total_real_bullets=sum(count_real_bullets(exp.bullets) for exp in qualifying),
        skills_count=len([s for s in cv.skills if s.strip() and not is_placeholder(s)]),
        has_email=not is_placeholder(info.email),
        has_phone=not is_placeholder(info.phone),
        has_name=not is_placeholder(info.full_name),
        has_education=any(
            not is_placeholder(edu.degree) or not is_placeholder(edu.school)
            for edu in cv.education
        ),
        additional_sections=count_additional_sections(cv),
    )

    logger.debug(
        f"CV signals: summary_words={signals.summary_word_count}, "
        f"experience={signals.experience_count}, skills={signals.skills_count}"
    )
    return signals
