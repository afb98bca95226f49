"""Tests for the submission gate and the moderation event log."""

import json
import tempfile
from pathlib import Path

from moderasi.config import ModerationSettings
from moderasi.moderation.event_log import ModerationEventLog
from moderasi.moderation.gate import CONTENT_ERROR, IMAGE_ERROR, SubmissionGate
from moderasi.moderation.models import EnforcementAction, Severity


def _gate(**overrides) -> SubmissionGate:
    tmpdir = tempfile.mkdtemp()
    settings = ModerationSettings(event_dir=Path(tmpdir), **overrides)
    return SubmissionGate(settings, ModerationEventLog(settings.event_dir))


# --- Gate Tests ---


def test_clean_submission_allowed_and_not_recorded():
    gate = _gate()
    decision = gate.review("Aplikasi Belajar Matematika", "Belajar sambil bermain")
    assert decision.action == EnforcementAction.ALLOW
    assert decision.allowed
    assert decision.message == ""
    assert gate.event_log.count_all() == 0


def test_high_severity_blocked_with_frontend_payload():
    gate = _gate()
    decision = gate.review("Proyek b0k3p", "", subject_id="proj-1")
    assert decision.action == EnforcementAction.BLOCK
    assert not decision.allowed
    payload = decision.to_payload()
    assert payload["error"] == CONTENT_ERROR == "Content moderation failed"
    assert payload["violations"] == ["Konten Pornografi"]
    assert payload["severity"] == "high"
    assert payload["message"].startswith("Konten Anda mengandung Konten Pornografi")


def test_medium_severity_blocked_by_default():
    decision = _gate().review("main judi", "")
    assert decision.action == EnforcementAction.BLOCK
    assert decision.severity == Severity.MEDIUM


def test_low_severity_flagged():
    decision = _gate().review("dasar bodoh", "")
    assert decision.action == EnforcementAction.FLAG
    assert decision.allowed
    assert decision.error == ""
    assert decision.message.endswith("sopan dan profesional.")


def test_custom_actions():
    gate = _gate(actions={
        Severity.HIGH: EnforcementAction.FLAG,
        Severity.MEDIUM: EnforcementAction.ALLOW,
        Severity.LOW: EnforcementAction.ALLOW,
    })
    assert gate.review("bokep", "").action == EnforcementAction.FLAG
    assert gate.review("main judi", "").action == EnforcementAction.ALLOW


def test_bad_image_filename_blocked_before_text():
    gate = _gate()
    decision = gate.review("Aplikasi Belajar", "", image_filename="xxx_video.mp4")
    assert decision.action == EnforcementAction.BLOCK
    assert decision.scope == "image"
    payload = decision.to_payload()
    assert payload["error"] == IMAGE_ERROR
    assert payload["violations"] == []
    assert payload["severity"] == "high"


def test_good_image_filename_falls_through_to_text():
    decision = _gate().review("Aplikasi Belajar", "", image_filename="profile_photo.jpg")
    assert decision.action == EnforcementAction.ALLOW
    assert decision.scope == "content"


def test_disabled_gate_allows_everything():
    gate = _gate(enabled=False)
    decision = gate.review("bokep", "", image_filename="xxx.png")
    assert decision.action == EnforcementAction.ALLOW
    assert decision.result is None
    assert gate.event_log.count_all() == 0


def test_record_allowed():
    gate = _gate(record_allowed=True)
    gate.review("Aplikasi Belajar", "")
    events = gate.event_log.get_events()
    assert len(events) == 1
    assert events[0].action == "allow"


def test_gate_without_event_log():
    gate = SubmissionGate()
    assert gate.review("bokep", "").action == EnforcementAction.BLOCK


# --- Event Log Tests ---


def test_decisions_recorded_without_text():
    gate = _gate()
    gate.review("Proyek b0k3p", "deskripsi rahasia", subject_id="proj-1")
    gate.review("dasar bodoh", "", subject_id="proj-2")

    events = gate.event_log.get_events()
    assert [e.subject_id for e in events] == ["proj-2", "proj-1"]
    blocked = gate.event_log.get_events(action="block")
    assert len(blocked) == 1
    assert blocked[0].blocked_words == ["bokep"]
    assert blocked[0].severity == "high"
    assert blocked[0].scope == "content"

    raw = "".join(p.read_text() for p in gate.event_log.base_dir.glob("*.jsonl"))
    assert "rahasia" not in raw


def test_event_filters_and_counts():
    gate = _gate()
    gate.review("bokep", "", subject_id="a")
    gate.review("aman", "", image_filename="nude.png", subject_id="b")
    gate.review("dasar bodoh", "", subject_id="c")
    gate.review("Aplikasi Belajar", "", subject_id="d")

    log = gate.event_log
    assert log.count_all() == 3
    assert log.count_flagged() == 3
    assert [e.subject_id for e in log.get_events(scope="image")] == ["b"]
    assert [e.subject_id for e in log.get_events(severity="low")] == ["c"]
    assert [e.subject_id for e in log.get_events(subject_id="a")] == ["a"]
    assert len(log.get_events(limit=2)) == 2


def test_corrupt_lines_skipped():
    tmpdir = Path(tempfile.mkdtemp())
    log = ModerationEventLog(tmpdir)
    (tmpdir / "2024-01-01.jsonl").write_text(
        "not json\n"
        + json.dumps({"unexpected": "shape"})
        + "\n\n"
        + json.dumps({
            "id": "abc",
            "timestamp": "2024-01-01T00:00:00+00:00",
            "scope": "content",
            "action": "flag",
            "severity": "low",
        })
        + "\n"
    )
    events = log.get_events()
    assert len(events) == 1
    assert events[0].id == "abc"
    assert events[0].violations == []
    assert log.count_flagged() == 1
