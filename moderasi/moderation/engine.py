"""Content moderation engine: keyword and variant scanning.

Every catalog keyword is expanded into its obfuscation variants (see
:mod:`moderasi.moderation.variants`). Submitted text is normalized and a
keyword counts as found when any variant occurs in it as a plain
substring. No word boundaries are applied, so short keywords also match
inside longer words ("tai" in "detail"); over-blocking is accepted.

The dotted and hyphenated forms ("p.i.l. .k.o.p.l.o") are additionally
matched against a copy of the text that keeps ``.`` and ``-``. Every other
variant only sees the alphanumeric-only form.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from moderasi.moderation.catalog import KEYWORD_CATEGORIES, image_terms, iter_keywords
from moderasi.moderation.models import ModerationResult, Severity
from moderasi.moderation.normalizer import normalize_preserving_separators, normalize_text
from moderasi.moderation.variants import generate_variations, separated_variations

logger = logging.getLogger(__name__)

# Warm the variant cache; the catalog never changes after import.
VARIANT_TABLE: dict[str, tuple[str, ...]] = {
    keyword: generate_variations(keyword) for keyword in iter_keywords()
}
SEPARATED_TABLE: dict[str, tuple[str, ...]] = {
    keyword: tuple(separated_variations(keyword)) for keyword in iter_keywords()
}


def _variants(keyword: str) -> tuple[str, ...]:
    cached = VARIANT_TABLE.get(keyword)
    return cached if cached is not None else generate_variations(keyword)


def _separated(keyword: str) -> tuple[str, ...]:
    cached = SEPARATED_TABLE.get(keyword)
    return cached if cached is not None else tuple(separated_variations(keyword))


def _prepare(text: str) -> tuple[str, Optional[str]]:
    """Return the normalized text and, when it differs, the separator-keeping copy."""
    primary = normalize_text(text)
    separated = normalize_preserving_separators(text)
    return primary, (separated if separated != primary else None)


def _contains_keyword(keyword: str, primary: str, separated: Optional[str]) -> bool:
    if any(variant in primary for variant in _variants(keyword)):
        return True
    if separated is None:
        return False
    return any(form in separated for form in _separated(keyword))


def find_keywords(text: str, keywords: Iterable[str]) -> list[str]:
    """Return the keywords (in the given order) that occur in ``text``."""
    primary, separated = _prepare(text)
    return [kw for kw in keywords if _contains_keyword(kw, primary, separated)]


def moderate_text(text: str) -> ModerationResult:
    """Scan a single string against the full catalog."""
    violations: list[str] = []
    blocked_words: list[str] = []
    severity = Severity.LOW

    for keyword in find_keywords(text, iter_keywords()):
        blocked_words.append(keyword)
        for category in KEYWORD_CATEGORIES[keyword]:
            violations.append(category.label)
            severity = category.severity_rule.apply(severity)
        logger.debug("Matched keyword %r (severity now %s)", keyword, severity.value)

    unique_violations = tuple(dict.fromkeys(violations))
    return ModerationResult(
        is_clean=not unique_violations,
        violations=unique_violations,
        severity=severity,
        blocked_words=tuple(dict.fromkeys(blocked_words)),
    )


def moderate_content(title: str, description: str) -> ModerationResult:
    """Moderate a submission's title and description together."""
    return moderate_text(f"{title} {description}")


def moderate_image_filename(filename: str) -> bool:
    """Return True when ``filename`` carries no pornographic/violent term."""
    return not find_keywords(filename, image_terms())
