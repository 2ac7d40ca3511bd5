"""Text processing helpers shared by the journal analyzers."""

import re

_NON_WORD_RE = re.compile(r"[^\w\s]")


def normalize_entry(text: str) -> str:
    """Trim and lowercase an entry so that casing and padding don't matter."""
    if not text or not isinstance(text, str):
        return ""
    return text.strip().lower()


def extract_keywords(
    text: str,
    min_word_length: int = 3,
    stop_words: frozenset[str] | set[str] | None = None,
) -> list[str]:
    """Extract keywords (words above min length, stripped of punctuation).

    Punctuation is replaced by spaces before splitting, so ``"tea,coffee"``
    yields two words.
    """
    if not text or not isinstance(text, str):
        return []
    text = _NON_WORD_RE.sub(" ", text.lower())
    words = [w for w in text.split() if len(w) >= min_word_length]
    if stop_words:
        words = [w for w in words if w not in stop_words]
    return words
