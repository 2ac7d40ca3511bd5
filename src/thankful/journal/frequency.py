"""Frequency analytics: most repeated entries and most used words.

Rankings are sorted by count, highest first. Ties keep the order in which
the values were first seen while walking the journal day by day.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping

from thankful.core.utils.text import extract_keywords, normalize_entry

from .models import RankedItem

DEFAULT_ENTRIES_LIMIT = 5
DEFAULT_WORDS_LIMIT = 10
DEFAULT_MIN_WORD_LENGTH = 3

# Function words that say nothing about what someone is grateful for.
STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "for", "with", "to", "of", "in", "on", "at",
        "is", "are", "was", "were", "be", "been", "have", "has", "had", "do", "does", "did",
        "will", "would", "could", "should", "may", "might", "can", "this", "that", "these", "those",
        "i", "you", "he", "she", "it", "we", "they", "my", "your", "his", "her", "its", "our", "their",
        "me", "him", "us", "them", "am", "so", "if", "as", "up", "out", "off", "over", "under", "again",
        "then", "than", "when", "where", "why", "how", "all", "each", "both", "few", "more", "most",
        "other", "some", "such", "no", "nor", "not", "only", "own", "same", "very", "what", "which",
        "who", "whom", "whose", "about", "into", "through", "during", "before", "after", "above",
        "below", "between", "among", "around", "against", "along", "across", "behind", "beyond",
        "within", "without", "throughout", "toward", "towards", "upon",
    }
)  # fmt: skip


def _rank(counts: Counter, limit: int) -> list[RankedItem]:
    if limit <= 0:
        return []
    # most_common() is stable for equal counts: insertion order wins.
    return [RankedItem(value, count) for value, count in counts.most_common(limit)]


def most_frequent_entries(
    entries: Mapping[str, list[str]],
    limit: int = DEFAULT_ENTRIES_LIMIT,
) -> list[RankedItem]:
    """Most repeated entries, compared trimmed and lowercased.

    The ranked value is the normalized (lowercased) text.
    """
    counts: Counter = Counter()
    for items in entries.values():
        for item in items:
            normalized = normalize_entry(item)
            if normalized:
                counts[normalized] += 1
    return _rank(counts, limit)


def most_frequent_words(
    entries: Mapping[str, list[str]],
    limit: int = DEFAULT_WORDS_LIMIT,
    min_word_length: int = DEFAULT_MIN_WORD_LENGTH,
    stop_words: frozenset[str] = STOP_WORDS,
) -> list[RankedItem]:
    """Most used content words across all entries.

    Punctuation becomes whitespace, then words shorter than
    ``min_word_length`` and stop words are dropped.
    """
    counts: Counter = Counter()
    for items in entries.values():
        for item in items:
            counts.update(extract_keywords(item, min_word_length=min_word_length, stop_words=stop_words))
    return _rank(counts, limit)
