"""User-facing (Indonesian) explanations for moderation verdicts."""

from __future__ import annotations

from moderasi.moderation.models import ModerationResult, Severity

_SEVERITY_MESSAGES = {
    Severity.HIGH: (
        "Konten Anda mengandung {violations} yang sangat tidak pantas dan "
        "melanggar kebijakan platform. Silakan revisi konten Anda."
    ),
    Severity.MEDIUM: (
        "Konten Anda mengandung {violations} yang tidak sesuai dengan kebijakan "
        "platform. Mohon gunakan bahasa yang lebih sopan dan inklusif."
    ),
    Severity.LOW: (
        "Konten Anda mengandung {violations}. Mohon gunakan bahasa yang lebih "
        "sopan dan profesional."
    ),
}

FALLBACK_MESSAGE = (
    "Konten Anda mengandung kata-kata yang tidak pantas. Silakan revisi konten Anda."
)

IMAGE_REJECTED_MESSAGE = (
    "Nama file gambar mengandung konten yang tidak pantas. Silakan ganti nama file Anda."
)


def get_violation_message(result: ModerationResult) -> str:
    """Return the sentence shown to the user, or ``""`` for clean content."""
    if result.is_clean:
        return ""

    template = _SEVERITY_MESSAGES.get(result.severity)
    if template is None:
        return FALLBACK_MESSAGE
    return template.format(violations=", ".join(result.violations))
