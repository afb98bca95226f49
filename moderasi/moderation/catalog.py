"""Keyword catalog: the fixed Indonesian/English term lists per category.

Keywords are lowercase. Multi-word entries are matched as whole phrases
(with a single space between words). The catalog is built once at import
and never mutated.
"""

from __future__ import annotations

from types import MappingProxyType

from moderasi.moderation.models import Category

SARA_KEYWORDS: tuple[str, ...] = (
    # Religious intolerance
    "kafir", "murtad", "sesat", "bid'ah", "syirik",
    # Ethnic/racial slurs
    "cina babi", "pribumi", "aseng", "inlander", "totok",
    # Regional discrimination
    "kampungan", "ndeso", "udik",
    # Political extremism
    "khilafah", "radikal islam", "teroris muslim",
)

PORNOGRAPHY_KEYWORDS: tuple[str, ...] = (
    "bokep", "porn", "sex", "bugil", "telanjang", "porno",
    "masturbasi", "onani", "orgasme", "penetrasi",
    "oral sex", "anal sex", "threesome", "gangbang",
    "escort", "prostitusi", "pelacur", "gigolo",
    "pijat plus", "happy ending", "body to body",
)

VIOLENCE_KEYWORDS: tuple[str, ...] = (
    "bunuh", "pembunuhan", "membunuh", "teroris", "terorisme",
    "bom", "meledakkan", "menyiksa", "penyiksaan",
    "pemerkosaan", "memperkosa", "kekerasan", "sadis",
    "mutilasi", "pembantaian", "genosida",
)

HATE_SPEECH_KEYWORDS: tuple[str, ...] = (
    "bangsat", "anjing", "babi", "monyet", "kera",
    "bodoh", "tolol", "idiot", "goblok", "dungu",
    "tai", "kontol", "memek", "ngentot", "jancok",
    "bangke", "sialan", "brengsek", "keparat",
)

DRUGS_KEYWORDS: tuple[str, ...] = (
    "narkoba", "ganja", "marijuana", "kokain", "heroin",
    "ekstasi", "shabu", "putaw", "pil koplo",
    "tramadol", "xanax", "rohypnol", "dealer",
    "bandar narkoba", "jualan narkoba",
)

GAMBLING_KEYWORDS: tuple[str, ...] = (
    "judi", "slot online", "poker online", "togel",
    "bandar bola", "taruhan", "casino online",
    "jackpot", "maxwin", "rtp slot", "gacor",
    "deposit pulsa", "withdraw mudah",
)

# Scan order matters: it decides the order violations are reported in.
CATALOG: MappingProxyType[Category, tuple[str, ...]] = MappingProxyType({
    Category.SARA: SARA_KEYWORDS,
    Category.PORNOGRAPHY: PORNOGRAPHY_KEYWORDS,
    Category.VIOLENCE: VIOLENCE_KEYWORDS,
    Category.HATE_SPEECH: HATE_SPEECH_KEYWORDS,
    Category.DRUGS: DRUGS_KEYWORDS,
    Category.GAMBLING: GAMBLING_KEYWORDS,
})

# Extra filename terms; not tied to any category.
IMAGE_EXTRA_TERMS: tuple[str, ...] = ("nude", "naked", "xxx", "adult")

IMAGE_CATEGORIES: tuple[Category, ...] = (Category.PORNOGRAPHY, Category.VIOLENCE)


def _build_index() -> dict[str, tuple[Category, ...]]:
    index: dict[str, list[Category]] = {}
    for category, keywords in CATALOG.items():
        for keyword in keywords:
            index.setdefault(keyword, []).append(category)
    return {keyword: tuple(categories) for keyword, categories in index.items()}


# keyword -> categories it is listed under, in catalog order
KEYWORD_CATEGORIES: MappingProxyType[str, tuple[Category, ...]] = MappingProxyType(
    _build_index()
)


def iter_keywords() -> list[str]:
    """Every distinct catalog keyword, in scan order."""
    return list(KEYWORD_CATEGORIES)


def image_terms() -> list[str]:
    """Terms checked by the filename pre-check, in scan order."""
    terms: list[str] = []
    for category in IMAGE_CATEGORIES:
        terms.extend(CATALOG[category])
    terms.extend(IMAGE_EXTRA_TERMS)
    return list(dict.fromkeys(terms))
