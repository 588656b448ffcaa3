#!/usr/bin/env python3
"""
Career direction action URLs.

Maps a career direction catalog id (snake_case, or the kebab-case direction
id used in URLs) to the job finder query and the build-your-path page.
"""

from typing import Dict, Optional
from urllib.parse import quote

from core.guidance.models import ActionUrls

# Same unreserved set as the browser's encodeURIComponent
URI_COMPONENT_SAFE = "!'()*"

ACTION_MAP: Dict[str, ActionUrls] = {
    "warehouse_logistics": ActionUrls(
        job_finder_url="/jobs?query=warehouse%20operative",
        build_path_url="/build-your-path/warehouse-logistics",
    ),
    "security_facilities": ActionUrls(
        job_finder_url="/jobs?query=security%20sia",
        build_path_url="/build-your-path/security-facilities",
    ),
    "cleaning": ActionUrls(
        job_finder_url="/jobs?query=cleaner",
        build_path_url="/build-your-path/cleaning",
    ),
    "hospitality_front": ActionUrls(
        job_finder_url="/jobs?query=hospitality%20front%20of%20house",
        build_path_url="/build-your-path/hospitality-front",
    ),
    "care_support": ActionUrls(
        job_finder_url="/jobs?query=care%20support",
        build_path_url="/build-your-path/care-support",
    ),
    "driving_transport": ActionUrls(
        job_finder_url="/jobs?query=driver%20delivery",
        build_path_url="/build-your-path/driving-transport",
    ),
    "maintenance_facilities": ActionUrls(
        job_finder_url="/jobs?query=maintenance%20facilities",
        build_path_url="/build-your-path/maintenance-facilities",
    ),
    "office_admin_support": ActionUrls(
        job_finder_url="/jobs?query=admin%20assistant",
        build_path_url="/build-your-path/office-admin",
    ),
    "digital_ai_adjacent": ActionUrls(
        job_finder_url="/jobs?query=junior%20digital%20support",
        build_path_url="/build-your-path/digital-ai-adjacent",
    ),
    "construction_trades": ActionUrls(
        job_finder_url="/jobs?query=construction%20labour",
        build_path_url="/build-your-path/construction-trades",
    ),
}


def get_action_urls(catalog_id: str, direction_title: Optional[str] = None) -> ActionUrls:
    """
    Get action URLs for a catalog id with a safe fallback.

    Tries the exact id, then the kebab-case id converted to snake_case, then
    builds URLs from the direction title (or the id itself).
    """
    mapped = ACTION_MAP.get(catalog_id) or ACTION_MAP.get(catalog_id.replace('-', '_'))
    if mapped:
        return mapped.model_copy()

    query = direction_title if direction_title else catalog_id.replace('-', ' ')
    return ActionUrls(
        job_finder_url=f"/jobs?query={quote(query, safe=URI_COMPONENT_SAFE)}",
        build_path_url=f"/build-your-path?tag={quote(catalog_id, safe=URI_COMPONENT_SAFE)}",
    )
