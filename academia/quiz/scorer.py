"""
Sentence ranking for quiz generation.
"""
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from academia.quiz.analyzer import TextAnalyzer
from academia.quiz.settings import GenerationSettings


@dataclass(frozen=True)
class ScoredSentence:
    text: str
    score: float


class SentenceScorer:
    """
    Ranks candidate sentences by concept density.

    A sentence scores the sum of the concept scores it contains, divided by
    its word count, boosted when it reads like a definition. Sentences that
    are too short, too long, open with a discourse connective or ask a
    question score zero and are left out of the ranking.
    """

    def __init__(self, analyzer: TextAnalyzer, settings: Optional[GenerationSettings] = None):
        self.analyzer = analyzer
        self.settings = settings or analyzer.settings
        # Whole words only: "Software" and "Android" do not count as "so" and "and"
        connectives = "|".join(re.escape(word) for word in self.settings.discourse_connectives)
        self._connective_pattern = re.compile(rf"^(?:{connectives})\b", re.IGNORECASE)

    def is_eligible(self, sentence: str, word_count: int) -> bool:
        if word_count < self.settings.min_sentence_words or word_count > self.settings.max_sentence_words:
            return False
        if self._connective_pattern.match(sentence):
            return False
        if "?" in sentence:
            return False
        return True

    def score(self, sentence: str, concept_scores: Dict[str, float]) -> ScoredSentence:
        clean_sentence = sentence.strip()
        word_count = len(self.analyzer.get_words(clean_sentence))
        if not self.is_eligible(clean_sentence, word_count):
            return ScoredSentence(clean_sentence, 0.0)

        lower_sentence = clean_sentence.lower()
        total = sum(value for concept, value in concept_scores.items() if concept in lower_sentence)

        if any(marker in lower_sentence for marker in self.settings.definition_markers):
            total *= self.settings.definition_boost

        return ScoredSentence(clean_sentence, total / word_count)

    def rank(self, sentences: Iterable[str], concept_scores: Dict[str, float]) -> List[ScoredSentence]:
        """Positive-scoring sentences, best first."""
        scored = [self.score(sentence, concept_scores) for sentence in sentences]
        kept = [item for item in scored if item.score > 0]
        return sorted(kept, key=lambda item: item.score, reverse=True)
