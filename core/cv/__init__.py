#!/usr/bin/env python3
"""
CV Module - structured CV data and boundary normalization.

Public API:
- CvData and its section models (schema.py)
- normalize_cv_data: reconcile raw stored JSON into CvData (normalizer.py)
"""

from core.cv.schema import (
    CvData,
    PersonalInfo,
    ExperienceEntry,
    EducationEntry,
    ProjectEntry,
    PublicationEntry,
)
from core.cv.normalizer import normalize_cv_data

__all__ = [
    'CvData',
    'PersonalInfo',
    'ExperienceEntry',
    'EducationEntry',
    'ProjectEntry',
    'PublicationEntry',
    'normalize_cv_data',
]
