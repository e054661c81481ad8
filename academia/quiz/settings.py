"""
Settings for the quiz generation engine.

All vocabulary lists, thresholds and weights used by the analyzer,
scorer, synthesizer and assembler live in a single immutable
GenerationSettings value so that concurrent generation runs never
share mutable state.
"""
from dataclasses import dataclass, replace
from typing import FrozenSet, Tuple


STOP_WORDS = frozenset([
    "a", "about", "above", "after", "again", "against", "all", "am", "an", "and", "any", "are", "aren't", "as", "at",
    "be", "because", "been", "before", "being", "below", "between", "both", "but", "by", "can't", "cannot", "could",
    "couldn't", "did", "didn't", "do", "does", "doesn't", "doing", "don't", "down", "during", "each", "few", "for",
    "from", "further", "had", "hadn't", "has", "hasn't", "have", "haven't", "having", "he", "he'd", "he'll", "he's",
    "her", "here", "here's", "hers", "herself", "him", "himself", "his", "how", "how's", "i", "i'd", "i'll", "i'm",
    "i've", "if", "in", "into", "is", "isn't", "it", "it's", "its", "itself", "let's", "me", "more", "most", "mustn't",
    "my", "myself", "no", "nor", "not", "of", "off", "on", "once", "only", "or", "other", "ought", "our", "ours",
    "ourselves", "out", "over", "own", "same", "shan't", "she", "she'd", "she'll", "she's", "should", "shouldn't",
    "so", "some", "such", "than", "that", "that's", "the", "their", "theirs", "them", "themselves", "then", "there",
    "there's", "these", "they", "they'd", "they'll", "they're", "they've", "this", "those", "through", "to", "too",
    "under", "until", "up", "very", "was", "wasn't", "we", "we'd", "we'll", "we're", "we've", "were", "weren't",
    "what", "what's", "when", "when's", "where", "where's", "which", "while", "who", "who's", "whom", "why", "why's",
    "with", "won't", "would", "wouldn't", "you", "you'd", "you'll", "you're", "you've", "your", "yours", "yourself",
    "yourselves",
    # Course filler that says nothing about the subject matter
    "topic", "assignment", "page", "chapter", "section", "following", "created", "generated",
])

DEFINITION_MARKERS = (
    "is known as",
    "refers to",
    "refers",
    "means",
    "is a type of",
    "is defined as",
    "called",
)

DISCOURSE_CONNECTIVES = (
    "however",
    "therefore",
    "also",
    "but",
    "and",
    "so",
    "typically",
    "usually",
)


@dataclass(frozen=True)
class GenerationSettings:
    """Immutable configuration for one quiz generation engine."""

    stop_words: FrozenSet[str] = STOP_WORDS
    definition_markers: Tuple[str, ...] = DEFINITION_MARKERS
    discourse_connectives: Tuple[str, ...] = DISCOURSE_CONNECTIVES

    # Concept extraction
    min_word_length: int = 3
    bigram_min_count: int = 1  # a bigram must occur more often than this
    bigram_weight: int = 2
    top_concept_limit: int = 40

    # Sentence scoring
    min_sentence_words: int = 6
    max_sentence_words: int = 40
    definition_boost: float = 1.5

    # Question synthesis
    mcq_share: float = 0.6
    true_false_share: float = 0.3
    mcq_distractor_count: int = 3
    blank: str = "_______"

    # Draft assembly
    target_question_count: int = 10
    min_question_count: int = 5
    min_context_length: int = 200

    @classmethod
    def from_config(cls, cfg) -> "GenerationSettings":
        """Build settings from the application Config object."""
        return cls(
            bigram_min_count=cfg.QUIZ_BIGRAM_MIN_COUNT,
            bigram_weight=cfg.QUIZ_BIGRAM_WEIGHT,
            top_concept_limit=cfg.QUIZ_TOP_CONCEPT_LIMIT,
            target_question_count=cfg.QUIZ_TARGET_QUESTION_COUNT,
            min_question_count=cfg.QUIZ_MIN_QUESTION_COUNT,
            min_context_length=cfg.QUIZ_MIN_CONTEXT_LENGTH,
        )

    def with_overrides(self, **changes) -> "GenerationSettings":
        return replace(self, **changes)
