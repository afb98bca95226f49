"""Content moderation for showcase submissions.

This package provides:
- A fixed keyword catalog for six policy categories
- Obfuscation-resistant keyword matching (leetspeak, spaced letters)
- Severity aggregation and Indonesian user-facing messages
- A submission gate with configurable enforcement and an event log
"""

from moderasi.moderation.engine import moderate_content, moderate_image_filename, moderate_text
from moderasi.moderation.messages import get_violation_message
from moderasi.moderation.models import Category, ModerationResult, Severity

__all__ = [
    "Category",
    "ModerationResult",
    "Severity",
    "get_violation_message",
    "moderate_content",
    "moderate_image_filename",
    "moderate_text",
]
