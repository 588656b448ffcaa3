#!/usr/bin/env python3
"""
Guidance Models - user state in, suggested action out.
"""

from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class PageContext(str, Enum):
    DASHBOARD = "dashboard"
    JOB_DETAILS = "job-details"
    JOB_FINDER = "job-finder"
    CV_BUILDER = "cv-builder"
    COVER = "cover"
    INTERVIEW = "interview"
    BUILD_YOUR_PATH = "build-your-path"
    UNKNOWN = "unknown"


class NextAction(str, Enum):
    CREATE_CV = "CREATE_CV"
    TAILOR_CV = "TAILOR_CV"
    GENERATE_COVER = "GENERATE_COVER"
    TRAIN_INTERVIEW = "TRAIN_INTERVIEW"
    READY_TO_APPLY = "READY_TO_APPLY"
    FIND_JOBS = "FIND_JOBS"


class GuidanceModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GuidanceState(GuidanceModel):
    """Where the user is and what they have already done."""
    page: PageContext = PageContext.UNKNOWN
    job_id: Optional[str] = None
    job_title: Optional[str] = None
    company: Optional[str] = None

    # to_camel would give "hasBaseCv"; the frontend sends "hasBaseCV"
    has_base_cv: bool = Field(default=False, alias="hasBaseCV")
    is_cv_tailored: bool = Field(default=False, alias="isCVTailored")
    has_cover_letter: bool = False
    interview_trained: bool = False
    application_submitted: bool = False

    cv_score: Optional[int] = Field(default=None, ge=0, le=100)


class NextBestAction(GuidanceModel):
    action: NextAction
    title: str
    message: str
    cta_label: str
    secondary_cta_label: Optional[str] = None


class ActionUrls(GuidanceModel):
    job_finder_url: str
    build_path_url: str


class CareerAnswers(GuidanceModel):
    """Career assistant answers that drive direction reasons.

    Keys arrive snake_case from the assistant (``people_comfort``), camelCase
    is accepted too. Unknown answers are ignored and wrong-typed ones are
    treated as unanswered. Values are free-form codes such as ``basic`` or
    ``van_professional``.
    """

    priorities: List[str] = Field(default_factory=list)
    people_comfort: Optional[str] = None
    language: Optional[str] = None
    transport: Optional[str] = None
    physical_ability: Optional[str] = None
    training_openness: Optional[str] = None
    goal_gate: Optional[str] = None
    driving_interest: Optional[str] = None
    experience_field: Optional[str] = None

    @field_validator("priorities", mode="before")
    @classmethod
    def _priorities_list(cls, value: Any) -> List[str]:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]

    @field_validator(
        "people_comfort", "language", "transport", "physical_ability",
        "training_openness", "goal_gate", "driving_interest", "experience_field",
        mode="before"
    )
    @classmethod
    def _code_or_none(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None


class ReasonsResult(GuidanceModel):
    """Why a career direction fits: exactly 3 bullets and at most 4 chips."""
    bullets: List[str] = Field(default_factory=list)
    chips: List[str] = Field(default_factory=list)


class AssistantPhase(str, Enum):
    CLASSIFY = "CLASSIFY"
    PATH = "PATH"
    RESULT = "RESULT"


class MicroStatus(GuidanceModel):
    line: str
    chips: List[str] = Field(default_factory=list)
