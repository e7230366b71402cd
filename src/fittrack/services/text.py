"""Diacritic and case folding for Turkish food text."""

_TURKISH_FOLD = str.maketrans(
    {
        "ı": "i",
        "İ": "i",
        "I": "i",
        "ş": "s",
        "Ş": "s",
        "ç": "c",
        "Ç": "c",
        "ğ": "g",
        "Ğ": "g",
        "ü": "u",
        "Ü": "u",
        "ö": "o",
        "Ö": "o",
    }
)


def normalize(text: str) -> str:
    """Lower-case text and strip Turkish diacritics for matching."""
    # Translate before lower(): "İ".lower() yields "i" plus a combining dot.
    return text.translate(_TURKISH_FOLD).lower().replace("̇", "")
