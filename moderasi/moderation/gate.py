"""Submission gate that turns verdicts into allow / flag / block decisions.

The gate is what the showcase publish flow calls. Blocked decisions carry
the error codes the frontend already understands.
"""

from __future__ import annotations

import logging
from typing import Optional

from moderasi.config import ModerationSettings
from moderasi.moderation.engine import moderate_content, moderate_image_filename
from moderasi.moderation.event_log import ModerationEventLog
from moderasi.moderation.messages import IMAGE_REJECTED_MESSAGE, get_violation_message
from moderasi.moderation.models import EnforcementAction, SubmissionDecision

logger = logging.getLogger(__name__)

CONTENT_ERROR = "Content moderation failed"
IMAGE_ERROR = "Image filename contains inappropriate content"


class SubmissionGate:
    """Moderates showcase submissions according to ``settings``."""

    def __init__(
        self,
        settings: Optional[ModerationSettings] = None,
        event_log: Optional[ModerationEventLog] = None,
    ) -> None:
        self.settings = settings or ModerationSettings()
        self.event_log = event_log

    def review(
        self,
        title: str,
        description: str,
        image_filename: Optional[str] = None,
        subject_id: str = "",
    ) -> SubmissionDecision:
        """Moderate a submission and return the decision."""
        if not self.settings.enabled:
            return SubmissionDecision(action=EnforcementAction.ALLOW)

        if image_filename and not moderate_image_filename(image_filename):
            decision = SubmissionDecision(
                action=EnforcementAction.BLOCK,
                scope="image",
                message=IMAGE_REJECTED_MESSAGE,
                error=IMAGE_ERROR,
            )
        else:
            decision = self._review_content(title, description)

        if decision.action != EnforcementAction.ALLOW:
            logger.info(
                "Submission %s: action=%s scope=%s severity=%s violations=%s",
                subject_id or "-",
                decision.action.value,
                decision.scope,
                decision.severity.value,
                ", ".join(decision.violations) or "-",
            )
        self._record(decision, subject_id)
        return decision

    def _review_content(self, title: str, description: str) -> SubmissionDecision:
        result = moderate_content(title, description)
        if result.is_clean:
            return SubmissionDecision(action=EnforcementAction.ALLOW, result=result)

        action = self.settings.action_for(result.severity)
        return SubmissionDecision(
            action=action,
            result=result,
            message=get_violation_message(result),
            error=CONTENT_ERROR if action == EnforcementAction.BLOCK else "",
        )

    def _record(self, decision: SubmissionDecision, subject_id: str) -> None:
        if self.event_log is None:
            return
        if decision.action == EnforcementAction.ALLOW and not self.settings.record_allowed:
            return
        self.event_log.record(decision, subject_id=subject_id)
