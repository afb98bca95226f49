"""Obfuscation variants for catalog keywords.

A keyword such as ``bokep`` is also caught when written ``b0k3p`` or
``b o k e p``. Substitutions are applied one letter class at a time, each
replacing *every* occurrence of the letter, so a keyword with several
substitutable letters expands combinatorially.
"""

from __future__ import annotations

from functools import lru_cache

# Processed in this order.
LEET_SUBSTITUTIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("a", ("4", "@")),
    ("e", ("3",)),
    ("i", ("1", "!")),
    ("o", ("0",)),
    ("s", ("5", "$")),
    ("t", ("7",)),
    ("g", ("9",)),
)

SPACING_SEPARATORS: tuple[str, ...] = (" ", ".", "-")


def leet_variations(word: str) -> list[str]:
    """Return ``word`` plus every leetspeak combination of it."""
    current = [word]
    for letter, substitutes in LEET_SUBSTITUTIONS:
        expanded: list[str] = []
        for variation in current:
            expanded.append(variation)
            for sub in substitutes:
                expanded.append(variation.replace(letter, sub))
        current = list(dict.fromkeys(expanded))
    return current


def spaced_variations(word: str) -> list[str]:
    """``bom`` -> ``b o m``, ``b.o.m``, ``b-o-m``."""
    return [sep.join(word) for sep in SPACING_SEPARATORS]


def separated_variations(word: str) -> list[str]:
    """The spaced forms that keep a visible separator (``b.o.m``, ``b-o-m``)."""
    return [sep.join(word) for sep in SPACING_SEPARATORS if not sep.isspace()]


@lru_cache(maxsize=None)
def generate_variations(word: str) -> tuple[str, ...]:
    """All forms treated as an occurrence of ``word``, de-duplicated.

    Order: the literal word, its spaced forms, then the leetspeak forms.
    Spaced forms are built from the literal word only.
    """
    forms = [word, *spaced_variations(word), *leet_variations(word)]
    return tuple(dict.fromkeys(forms))
