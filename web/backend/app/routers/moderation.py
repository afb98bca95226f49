"""Moderation router -- content checks, the submission gate and the event log.

Prefix: ``/api/moderation``
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from moderasi.config import ModerationSettings, load_settings
from moderasi.moderation import get_violation_message, moderate_content, moderate_image_filename
from moderasi.moderation.catalog import CATALOG
from moderasi.moderation.event_log import ModerationEventLog
from moderasi.moderation.gate import SubmissionGate
from moderasi.moderation.models import EnforcementAction
from web.backend.app.models.api import (
    CategoryResponse,
    ContentCheckRequest,
    ImageCheckRequest,
    ImageCheckResponse,
    ModerationEventResponse,
    ModerationResultResponse,
    ModerationStatsResponse,
    SubmissionDecisionResponse,
    SubmissionRejectedResponse,
    SubmissionRequest,
)

router = APIRouter(prefix="/api/moderation", tags=["moderation"])

# ---------------------------------------------------------------------------
# Gate singleton
# ---------------------------------------------------------------------------

_gate: SubmissionGate | None = None


def _get_gate() -> SubmissionGate:
    global _gate
    if _gate is None:
        settings = load_settings()
        _gate = SubmissionGate(settings, ModerationEventLog(settings.event_dir))
    return _gate


def reset_gate_for_tests(settings: Optional[ModerationSettings] = None) -> None:
    """Drop the shared gate; the next request rebuilds it from ``settings``."""
    global _gate
    if settings is None:
        _gate = None
        return
    _gate = SubmissionGate(settings, ModerationEventLog(settings.event_dir))


def _event_log() -> ModerationEventLog:
    return _get_gate().event_log


# =========================================================================
# Checks
# =========================================================================


@router.post("/content", response_model=ModerationResultResponse)
async def check_content(request: ContentCheckRequest):
    """Moderate a title and description without recording anything."""
    result = moderate_content(request.title, request.description)
    return ModerationResultResponse(**result.to_dict(), message=get_violation_message(result))


@router.post("/image", response_model=ImageCheckResponse)
async def check_image(request: ImageCheckRequest):
    """Pre-check an image filename before upload."""
    return ImageCheckResponse(
        filename=request.filename,
        acceptable=moderate_image_filename(request.filename),
    )


@router.post(
    "/submissions",
    response_model=SubmissionDecisionResponse,
    responses={400: {"model": SubmissionRejectedResponse}},
)
async def review_submission(request: SubmissionRequest):
    """Run a submission through the gate.

    Blocked submissions get a 400 whose body carries ``error``,
    ``message``, ``violations`` and ``severity``.
    """
    decision = _get_gate().review(
        request.title,
        request.description,
        image_filename=request.image_filename,
        subject_id=request.subject_id,
    )

    if decision.action == EnforcementAction.BLOCK:
        return JSONResponse(status_code=400, content=decision.to_payload())

    return SubmissionDecisionResponse(
        action=decision.action.value,
        severity=decision.severity.value,
        violations=decision.violations,
        message=decision.message,
    )


# =========================================================================
# Event log / dashboard
# =========================================================================


@router.get("/events", response_model=list[ModerationEventResponse])
async def list_events(
    scope: Optional[str] = Query(None),
    action: Optional[str] = Query(None),
    severity: Optional[str] = Query(None),
    limit: int = Query(100, ge=1, le=1000),
):
    """Recent gate decisions, newest first."""
    events = _event_log().get_events(
        scope=scope, action=action, severity=severity, limit=limit
    )
    return [ModerationEventResponse(**asdict(e)) for e in events]


@router.get("/stats", response_model=ModerationStatsResponse)
async def stats():
    """Counts for the admin dashboard."""
    log = _event_log()
    return ModerationStatsResponse(
        flagged_content=log.count_flagged(),
        total_events=log.count_all(),
    )


@router.get("/catalog", response_model=list[CategoryResponse])
async def list_categories():
    """Categories with their labels, severity rule and keyword count."""
    return [
        CategoryResponse(
            id=category.value,
            label=category.label,
            severity_rule=category.severity_rule.value,
            keyword_count=len(keywords),
        )
        for category, keywords in CATALOG.items()
    ]
