"""Data models for the content moderation system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Severity(Enum):
    """How serious a verdict is. Only ever escalates: low, medium, high."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SeverityRule(Enum):
    """How a match in a category moves the running severity."""

    NONE = "none"  # leave unchanged
    ESCALATE = "escalate"  # low -> medium, otherwise unchanged
    CRITICAL = "critical"  # always high

    def apply(self, current: Severity) -> Severity:
        if self is SeverityRule.CRITICAL:
            return Severity.HIGH
        if self is SeverityRule.ESCALATE and current is Severity.LOW:
            return Severity.MEDIUM
        return current


class Category(Enum):
    """Content-policy violation classes."""

    SARA = "sara"
    PORNOGRAPHY = "pornography"
    VIOLENCE = "violence"
    HATE_SPEECH = "hate_speech"
    DRUGS = "drugs"
    GAMBLING = "gambling"

    @property
    def label(self) -> str:
        """User-facing label, shown verbatim in violation messages."""
        return _CATEGORY_LABELS[self]

    @property
    def severity_rule(self) -> SeverityRule:
        return _CATEGORY_RULES[self]


_CATEGORY_LABELS = {
    Category.SARA: "SARA (Suku, Agama, Ras, Antar-golongan)",
    Category.PORNOGRAPHY: "Konten Pornografi",
    Category.VIOLENCE: "Konten Kekerasan",
    Category.HATE_SPEECH: "Ujaran Kebencian",
    Category.DRUGS: "Konten Narkoba",
    Category.GAMBLING: "Konten Judi",
}

_CATEGORY_RULES = {
    Category.SARA: SeverityRule.ESCALATE,
    Category.PORNOGRAPHY: SeverityRule.CRITICAL,
    Category.VIOLENCE: SeverityRule.CRITICAL,
    Category.HATE_SPEECH: SeverityRule.NONE,
    Category.DRUGS: SeverityRule.CRITICAL,
    Category.GAMBLING: SeverityRule.ESCALATE,
}


@dataclass(frozen=True)
class ModerationResult:
    """Verdict for a single piece of submitted text."""

    is_clean: bool
    violations: tuple[str, ...] = ()  # category labels, first-detection order
    severity: Severity = Severity.LOW
    blocked_words: tuple[str, ...] = ()  # original catalog keywords

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire shape used by the showcase frontend."""
        return {
            "isClean": self.is_clean,
            "violations": list(self.violations),
            "severity": self.severity.value,
            "blockedWords": list(self.blocked_words),
        }


class EnforcementAction(Enum):
    """What the publish workflow does with a submission."""

    ALLOW = "allow"
    FLAG = "flag"  # publish held for manual review
    BLOCK = "block"


@dataclass
class SubmissionDecision:
    """Outcome of running a submission through the gate."""

    action: EnforcementAction
    scope: str = "content"  # "content" | "image"
    result: Optional[ModerationResult] = None
    message: str = ""
    error: str = ""

    @property
    def allowed(self) -> bool:
        return self.action != EnforcementAction.BLOCK

    @property
    def severity(self) -> Severity:
        if self.result is not None:
            return self.result.severity
        return Severity.HIGH if self.action == EnforcementAction.BLOCK else Severity.LOW

    @property
    def violations(self) -> list[str]:
        return list(self.result.violations) if self.result is not None else []

    def to_payload(self) -> dict[str, Any]:
        """Error body returned to the client for a rejected submission."""
        return {
            "error": self.error,
            "message": self.message,
            "violations": self.violations,
            "severity": self.severity.value,
        }


@dataclass
class ModerationEvent:
    """A single recorded gate decision. Never holds the submitted text."""

    id: str
    timestamp: str
    scope: str
    action: str
    severity: str
    violations: list[str] = field(default_factory=list)
    blocked_words: list[str] = field(default_factory=list)
    subject_id: str = ""
