"""Text normalization applied before keyword scanning."""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
# Keeps the separators used by dotted and hyphenated spellings.
_NON_ALNUM_OR_SEPARATOR = re.compile(r"[^a-z0-9\s.\-]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lowercase, turn punctuation into spaces, collapse whitespace, trim.

    The result only contains ``[a-z0-9 ]`` with single spaces between
    tokens. Never fails; ``""`` normalizes to ``""``.
    """
    lowered = _NON_ALNUM.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", lowered).strip()


def normalize_preserving_separators(text: str) -> str:
    """Like :func:`normalize_text` but keeps ``.`` and ``-``.

    Dotted and hyphenated spellings ("b.o.m", "b-o-m") can only match text
    that still carries those characters.
    """
    lowered = _NON_ALNUM_OR_SEPARATOR.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", lowered).strip()
