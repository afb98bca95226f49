"""moderasi — content moderation for the youth showcase platform."""

__version__ = "0.1.0"

from moderasi.moderation import (  # noqa: E402
    Category,
    ModerationResult,
    Severity,
    get_violation_message,
    moderate_content,
    moderate_image_filename,
)

__all__ = [
    "Category",
    "ModerationResult",
    "Severity",
    "__version__",
    "get_violation_message",
    "moderate_content",
    "moderate_image_filename",
]
