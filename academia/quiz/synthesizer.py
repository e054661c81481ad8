"""
Question synthesis from ranked sentences.

Each accepted sentence is turned into one question by blanking (or
swapping) its strongest unused concept:

- MCQ (60%): blank the concept, offer it alongside three distractors
- TRUE_FALSE (30%): the sentence as-is, or with the concept swapped for a distractor
- SHORT_ANSWER (10%): blank the concept, expect the concept back
"""
import random
import re
from typing import Dict, List, Optional, Set

from academia.quiz.questions import Question, QuestionType
from academia.quiz.settings import GenerationSettings


class QuestionSynthesizer:
    """Builds one question from one sentence."""

    def __init__(self, settings: Optional[GenerationSettings] = None, rng: Optional[random.Random] = None):
        self.settings = settings or GenerationSettings()
        self.rng = rng or random.Random()

    def choose_type(self) -> QuestionType:
        roll = self.rng.random()
        if roll < self.settings.mcq_share:
            return QuestionType.MCQ
        if roll < self.settings.mcq_share + self.settings.true_false_share:
            return QuestionType.TRUE_FALSE
        return QuestionType.SHORT_ANSWER

    @staticmethod
    def candidate_concepts(sentence: str, concept_scores: Dict[str, float],
                           top_concepts: List[str], used_concepts: Set[str]) -> List[str]:
        """Unused top concepts found in the sentence, phrases first, then by score."""
        lower_sentence = sentence.lower()
        candidates = [
            concept for concept in top_concepts
            if concept in lower_sentence and concept not in used_concepts
        ]
        return sorted(
            candidates,
            key=lambda concept: (0 if " " in concept else 1, -concept_scores.get(concept, 0)),
        )

    def distractor_pool(self, concept: str, top_concepts: List[str]) -> List[str]:
        """Top concepts unrelated to `concept` (neither contains the other), shuffled."""
        pool = [
            other for other in top_concepts
            if other != concept and other not in concept and concept not in other
        ]
        self.rng.shuffle(pool)
        return pool

    @staticmethod
    def _concept_pattern(concept: str):
        return re.compile(re.escape(concept), re.IGNORECASE)

    def synthesize(self, sentence: str, concept_scores: Dict[str, float],
                   top_concepts: List[str], used_concepts: Set[str]) -> Optional[Question]:
        """
        Build a question from `sentence`, or return None if it yields none.

        The chosen concept is added to `used_concepts` even when the question
        is abandoned, so the same concept is never retried on a later sentence.
        """
        candidates = self.candidate_concepts(sentence, concept_scores, top_concepts, used_concepts)
        if not candidates:
            return None

        concept = candidates[0]
        used_concepts.add(concept)

        question_type = self.choose_type()
        if question_type == QuestionType.MCQ:
            return self.multiple_choice(sentence, concept, top_concepts)
        if question_type == QuestionType.TRUE_FALSE:
            return self.true_false(sentence, concept, top_concepts)
        return self.short_answer(sentence, concept)

    def multiple_choice(self, sentence: str, concept: str, top_concepts: List[str]) -> Optional[Question]:
        distractors = self.distractor_pool(concept, top_concepts)[:self.settings.mcq_distractor_count]
        if len(distractors) < self.settings.mcq_distractor_count:
            return None

        pattern = self._concept_pattern(concept)
        match = pattern.search(sentence)
        display_answer = match.group(0) if match else concept

        options = distractors + [display_answer]
        self.rng.shuffle(options)
        return Question.multiple_choice(
            pattern.sub(self.settings.blank, sentence),
            options,
            display_answer,
            concept,
        )

    def true_false(self, sentence: str, concept: str, top_concepts: List[str]) -> Optional[Question]:
        if self.rng.random() > 0.5:
            return Question.true_false(f"True or False: {sentence}", True, concept)

        pool = self.distractor_pool(concept, top_concepts)
        if not pool:
            return None
        distractor = pool[0]
        false_sentence = self._concept_pattern(concept).sub(lambda _match: distractor, sentence)
        return Question.true_false(f"True or False: {false_sentence}", False, concept)

    def short_answer(self, sentence: str, concept: str) -> Question:
        blanked = self._concept_pattern(concept).sub(self.settings.blank, sentence)
        return Question.short_answer(blanked, concept, concept)
