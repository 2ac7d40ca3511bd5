"""Configuration dataclasses for journal insights.

These are pure data containers with sensible defaults. Build them from
the hierarchical ``Config`` with :meth:`InsightsConfig.from_config`, or
pass values directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from thankful.core.config import Config


@dataclass
class InsightsConfig:
    """Settings for the frequency analyzers.

    Attributes:
        frequent_entries_limit: How many top entries to report.
        frequent_words_limit: How many top words to report.
        min_word_length: Shorter tokens are ignored in word counts.
    """

    frequent_entries_limit: int = 5
    frequent_words_limit: int = 10
    min_word_length: int = 3

    @classmethod
    def from_config(cls, config: Config) -> InsightsConfig:
        defaults = cls()
        return cls(
            frequent_entries_limit=config.get_int("insights.frequent_entries_limit", defaults.frequent_entries_limit),
            frequent_words_limit=config.get_int("insights.frequent_words_limit", defaults.frequent_words_limit),
            min_word_length=config.get_int("insights.min_word_length", defaults.min_word_length),
        )
