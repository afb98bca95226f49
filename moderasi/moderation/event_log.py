"""Moderation event log.

Gate decisions are persisted as newline-delimited JSON in daily files
(``YYYY-MM-DD.jsonl``) under ``~/.moderasi/events/`` by default. Only the
verdict is stored, never the submitted text.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from moderasi.moderation.models import EnforcementAction, ModerationEvent, SubmissionDecision

_FLAGGED_ACTIONS = {EnforcementAction.FLAG.value, EnforcementAction.BLOCK.value}


class ModerationEventLog:
    """File-based JSON log of moderation decisions."""

    def __init__(self, base_dir: Optional[str | Path] = None) -> None:
        self._base_dir = Path(base_dir) if base_dir else Path.home() / ".moderasi" / "events"
        self._base_dir.mkdir(parents=True, exist_ok=True)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _log_file_for_date(self, dt: datetime) -> Path:
        return self._base_dir / f"{dt.strftime('%Y-%m-%d')}.jsonl"

    def _read_all_events(self) -> list[ModerationEvent]:
        events: list[ModerationEvent] = []
        for path in sorted(self._base_dir.glob("*.jsonl")):
            try:
                text = path.read_text(encoding="utf-8")
            except OSError:
                continue
            for line in text.splitlines():
                if not line.strip():
                    continue
                try:
                    events.append(ModerationEvent(**json.loads(line)))
                except (json.JSONDecodeError, TypeError):
                    continue
        return events

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def record(self, decision: SubmissionDecision, subject_id: str = "") -> ModerationEvent:
        """Append a decision to today's log file and return the event."""
        now = datetime.now(timezone.utc)
        result = decision.result
        event = ModerationEvent(
            id=uuid.uuid4().hex[:16],
            timestamp=now.isoformat(),
            scope=decision.scope,
            action=decision.action.value,
            severity=decision.severity.value,
            violations=decision.violations,
            blocked_words=list(result.blocked_words) if result is not None else [],
            subject_id=subject_id,
        )
        with self._log_file_for_date(now).open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(asdict(event)) + "\n")
        return event

    def get_events(
        self,
        *,
        scope: Optional[str] = None,
        action: Optional[str] = None,
        severity: Optional[str] = None,
        subject_id: Optional[str] = None,
        limit: int = 200,
    ) -> list[ModerationEvent]:
        """Return filtered events, newest first."""
        events = self._read_all_events()

        if scope:
            events = [e for e in events if e.scope == scope]
        if action:
            events = [e for e in events if e.action == action]
        if severity:
            events = [e for e in events if e.severity == severity]
        if subject_id:
            events = [e for e in events if e.subject_id == subject_id]

        # Newest first; equal timestamps keep reverse write order.
        events.reverse()
        events.sort(key=lambda e: e.timestamp, reverse=True)
        return events[:limit]

    def count_flagged(self) -> int:
        """Number of decisions that flagged or blocked a submission."""
        return sum(1 for e in self._read_all_events() if e.action in _FLAGGED_ACTIONS)

    def count_all(self) -> int:
        return len(self._read_all_events())
