"""
CV Normalizer - reconcile raw stored CV JSON into a validated CvData.

Stored CV rows were written by several versions of the builder, so the same
information can arrive under ``personalInfo`` or ``personal_info``, lists can
be missing or replaced by other JSON types, and list items can be malformed.
This module is the single place where that mess is resolved; everything
downstream (scoring, API responses) only ever sees ``CvData``.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic.alias_generators import to_camel

from core.cv.schema import (
    CvData,
    PersonalInfo,
    ExperienceEntry,
    EducationEntry,
    ProjectEntry,
    PublicationEntry,
)

logger = logging.getLogger(__name__)

PERSONAL_INFO_FIELDS = ('full_name', 'email', 'phone', 'location', 'linkedin', 'website')


def _as_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _pick(sources: List[Mapping[str, Any]], field: str) -> str:
    """First non-empty string for ``field`` (camelCase or snake_case) across sources."""
    for source in sources:
        for key in (to_camel(field), field):
            text = _as_str(source.get(key))
            if text:
                return text
    return ""


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _entry_fields(entry: Mapping[str, Any], model) -> Dict[str, Any]:
    """Keep only string-ish scalar fields of ``entry`` known to ``model``."""
    fields = {}
    for name, info in model.model_fields.items():
        if info.annotation is not str:
            continue
        raw = entry.get(to_camel(name), entry.get(name))
        if raw is not None:
            fields[name] = _as_str(raw)
    return fields


def _normalize_experience(value: Any) -> List[ExperienceEntry]:
    entries = []
    for item in value if isinstance(value, list) else []:
        if not isinstance(item, Mapping):
            continue
        fields = _entry_fields(item, ExperienceEntry)
        entry_id = item.get('id')
        entries.append(ExperienceEntry(
            id=_as_str(entry_id) or None,
            is_current=item.get('isCurrent', item.get('is_current')) is True,
            bullets=_string_list(item.get('bullets')),
            **fields,
        ))
    return entries


def _normalize_entries(value: Any, model) -> List[Any]:
    if not isinstance(value, list):
        return []
    return [model(**_entry_fields(item, model)) for item in value if isinstance(item, Mapping)]


def _optional_entries(value: Any, model) -> Optional[List[Any]]:
    return _normalize_entries(value, model) if isinstance(value, list) else None


def _optional_strings(value: Any) -> Optional[List[str]]:
    return _string_list(value) if isinstance(value, list) else None


def normalize_cv_data(raw: Optional[Mapping[str, Any]]) -> CvData:
    """
    Build a CvData from arbitrary stored JSON.

    Personal info prefers ``personalInfo`` and falls back field by field to
    ``personal_info``. Wrong-typed sections become empty (required sections)
    or ``None`` (optional sections). Never raises.

    Args:
        raw: Decoded JSON object (or None)

    Returns:
        Validated CvData
    """
    data = _as_mapping(raw)
    if raw is not None and not isinstance(raw, Mapping):
        logger.warning(f"Ignoring non-object CV payload of type {type(raw).__name__}")

    sources = [_as_mapping(data.get('personalInfo')), _as_mapping(data.get('personal_info'))]
    personal_info = PersonalInfo(**{field: _pick(sources, field) for field in PERSONAL_INFO_FIELDS})

    summary = data.get('summary')

    return CvData(
        personal_info=personal_info,
        summary=summary if isinstance(summary, str) else "",
        experience=_normalize_experience(data.get('experience')),
        education=_normalize_entries(data.get('education'), EducationEntry),
        skills=_string_list(data.get('skills')),
        projects=_optional_entries(data.get('projects'), ProjectEntry),
        languages=_optional_strings(data.get('languages')),
        certifications=_optional_strings(data.get('certifications')),
        publications=_optional_entries(data.get('publications'), PublicationEntry),
    )
