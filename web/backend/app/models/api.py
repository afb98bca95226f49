"""Pydantic models for API request/response serialization.

These models mirror the moderasi dataclasses and provide the camelCase
JSON shapes the showcase frontend consumes.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Content / image checks
# ---------------------------------------------------------------------------


class ContentCheckRequest(BaseModel):
    """Title and description of a showcase project."""

    title: str = ""
    description: str = ""


class ModerationResultResponse(BaseModel):
    """Mirrors moderasi.moderation.models.ModerationResult."""

    is_clean: bool = Field(alias="isClean")
    violations: list[str] = Field(default_factory=list)
    severity: str = "low"
    blocked_words: list[str] = Field(default_factory=list, alias="blockedWords")
    message: str = ""

    model_config = {"populate_by_name": True}


class ImageCheckRequest(BaseModel):
    filename: str


class ImageCheckResponse(BaseModel):
    filename: str
    acceptable: bool


# ---------------------------------------------------------------------------
# Submission gate
# ---------------------------------------------------------------------------


class SubmissionRequest(BaseModel):
    """A project about to be published."""

    title: str = ""
    description: str = ""
    image_filename: Optional[str] = Field(default=None, alias="imageFilename")
    subject_id: str = Field(default="", alias="subjectId")

    model_config = {"populate_by_name": True}


class SubmissionDecisionResponse(BaseModel):
    """Returned when a submission is allowed or held for review."""

    action: str
    severity: str = "low"
    violations: list[str] = Field(default_factory=list)
    message: str = ""


class SubmissionRejectedResponse(BaseModel):
    """Body of a 400 response for a blocked submission."""

    error: str
    message: str = ""
    violations: list[str] = Field(default_factory=list)
    severity: str = "high"


# ---------------------------------------------------------------------------
# Events, stats, catalog
# ---------------------------------------------------------------------------


class ModerationEventResponse(BaseModel):
    """Mirrors moderasi.moderation.models.ModerationEvent."""

    id: str
    timestamp: str
    scope: str
    action: str
    severity: str
    violations: list[str] = Field(default_factory=list)
    blocked_words: list[str] = Field(default_factory=list, alias="blockedWords")
    subject_id: str = Field(default="", alias="subjectId")

    model_config = {"populate_by_name": True}


class ModerationStatsResponse(BaseModel):
    flagged_content: int = Field(default=0, alias="flaggedContent")
    total_events: int = Field(default=0, alias="totalEvents")

    model_config = {"populate_by_name": True}


class CategoryResponse(BaseModel):
    """One row of the keyword catalog."""

    id: str
    label: str
    severity_rule: str = Field(alias="severityRule")
    keyword_count: int = Field(alias="keywordCount")

    model_config = {"populate_by_name": True}
