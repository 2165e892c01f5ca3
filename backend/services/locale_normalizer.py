"""Canonicalize free-text location strings into province lookup keys.

Source data mixes Turkish and ASCII spellings ("İstanbul / Sarıyer",
"ISTANBUL", "istanbul-kadikoy", "Eskişehir, TR"), so keys are built by
folding case and diacritics and keeping only the leading place name.
"""

import re
import unicodedata

REFERENCE_CITY = "istanbul"

# Place names precede qualifiers: "Bursa / Nilüfer", "Izmir - Bornova"
_SEGMENT_SEPARATORS = re.compile(r"[\\/|,;:\-–—]")

# Dotless ı does not decompose under NFD, so it is mapped explicitly
_TURKISH_ASCII = str.maketrans({
    "ı": "i",
    "ğ": "g",
    "ü": "u",
    "ş": "s",
    "ö": "o",
    "ç": "c",
})


def fold_text(text: str | None) -> str:
    """Lower-case, strip diacritics and collapse whitespace.

    Lower-casing the dotted capital İ yields "i" + U+0307; NFD plus removal of
    combining marks drops that dot along with the other Turkish accents.
    """
    if not text:
        return ""
    lowered = text.strip().lower().translate(_TURKISH_ASCII)
    decomposed = unicodedata.normalize("NFD", lowered)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return " ".join(stripped.translate(_TURKISH_ASCII).split())


def _leading_key(raw: str) -> str:
    """Folded form of the first segment that survives folding, or ``""``."""
    for segment in _SEGMENT_SEPARATORS.split(raw):
        key = fold_text(segment)
        if key:
            return key
    return ""


def normalize(raw: str | None) -> str | None:
    """Return the canonical lookup key for a location string.

    Returns ``None`` for missing input or input that folds to nothing
    (blanks, stray combining marks). Anything mentioning the
    reference city (districts included) maps to the reference key. Never
    raises: odd input degrades to a best-effort key.
    """
    if raw is None or not str(raw).strip():
        return None
    raw = str(raw)

    if REFERENCE_CITY in fold_text(raw):
        return REFERENCE_CITY

    # Separator-only input ("---") keeps its folded form, which maps to itself
    return _leading_key(raw) or fold_text(raw) or None
