"""Text canonicalization shared by every keyword test."""

import re
import unicodedata


def normalize(text: str) -> str:
    """Lowercase, strip diacritics, collapse whitespace and trim."""
    decomposed = unicodedata.normalize("NFD", text.lower())
    no_accents = "".join(char for char in decomposed if unicodedata.category(char) != "Mn")
    # Trim last: dropping marks can expose whitespace at either end.
    return re.sub(r"\s+", " ", no_accents).strip()
