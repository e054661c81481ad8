"""
Text analysis for quiz generation.

Tokenizes course text, counts unigrams and bigrams outside the stop-word
set, and normalizes the counts into a concept-score map.
"""
import re
from collections import Counter
from typing import Dict, List, Optional

from academia.quiz.settings import GenerationSettings


SANITIZE_PATTERN = re.compile(r"[^a-z0-9\s-]")
NON_ALNUM_PATTERN = re.compile(r"[^a-z0-9]")
# Sentence end followed by whitespace and a capital letter. Abbreviations such
# as "e.g. the" are not split because a lowercase word follows them.
SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+(?=[A-Z])")


class TextAnalyzer:
    """Concept extraction and sentence segmentation over plain text."""

    def __init__(self, settings: Optional[GenerationSettings] = None):
        self.settings = settings or GenerationSettings()

    @staticmethod
    def sanitize(text: str) -> str:
        return SANITIZE_PATTERN.sub("", text.lower()).strip()

    @staticmethod
    def get_sentences(text: str) -> List[str]:
        return SENTENCE_BOUNDARY.split(text)

    @staticmethod
    def _tokens(text: str) -> List[str]:
        return [NON_ALNUM_PATTERN.sub("", token.lower()) for token in text.split()]

    def get_words(self, text: str) -> List[str]:
        """Lowercased alphanumeric tokens, dropping anything shorter than min_word_length."""
        return [word for word in self._tokens(text) if len(word) >= self.settings.min_word_length]

    def _is_content_word(self, word: str) -> bool:
        return len(word) >= self.settings.min_word_length and word not in self.settings.stop_words

    def compute_term_frequency(self, text: str) -> Counter:
        """Raw unigram counts, stop words excluded."""
        return Counter(word for word in self.get_words(text) if word not in self.settings.stop_words)

    def compute_bigrams(self, text: str) -> Counter:
        """
        Raw counts of adjacent word pairs, e.g. "machine learning".

        Pairs are taken from the unfiltered token stream, so a short word or
        stop word between two content words breaks the pair.
        """
        words = self._tokens(text)
        bigrams = Counter()
        for first, second in zip(words, words[1:]):
            if self._is_content_word(first) and self._is_content_word(second):
                bigrams[f"{first} {second}"] += 1
        return bigrams

    def extract_key_concepts(self, text: str) -> Dict[str, float]:
        """
        Score unigrams and frequent bigrams, normalized so the strongest
        concept scores 1.0.
        """
        combined: Dict[str, float] = dict(self.compute_term_frequency(text))

        for phrase, count in self.compute_bigrams(text).items():
            if count > self.settings.bigram_min_count:
                combined[phrase] = count * self.settings.bigram_weight

        max_frequency = max(max(combined.values(), default=1), 1)
        return {concept: count / max_frequency for concept, count in combined.items()}

    def top_concepts(self, concept_scores: Dict[str, float], limit: Optional[int] = None) -> List[str]:
        """Concepts ordered by descending score, first-seen order on ties."""
        if limit is None:
            limit = self.settings.top_concept_limit
        ranked = sorted(concept_scores.items(), key=lambda item: item[1], reverse=True)
        return [concept for concept, _ in ranked[:limit]]
