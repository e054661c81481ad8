"""
Quiz draft assembly.

Assembly is a small state machine over the ranked sentences:

    ACCUMULATING --(target reached or sentences exhausted)--> DONE

`step` is pure: it takes the current state and returns the next state plus
the question emitted by that step, if any.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, List, Optional, Sequence, Tuple

from academia.quiz.analyzer import TextAnalyzer
from academia.quiz.questions import Question, fallback_questions
from academia.quiz.scorer import ScoredSentence, SentenceScorer
from academia.quiz.settings import GenerationSettings
from academia.quiz.synthesizer import QuestionSynthesizer


class AssemblyPhase(Enum):
    ACCUMULATING = "accumulating"
    DONE = "done"


@dataclass(frozen=True)
class AssemblyState:
    phase: AssemblyPhase = AssemblyPhase.ACCUMULATING
    cursor: int = 0
    questions: Tuple[Question, ...] = ()
    used_concepts: FrozenSet[str] = field(default_factory=frozenset)


class QuizDraftAssembler:
    """Turns a context corpus into an ordered list of draft questions."""

    def __init__(self, settings: Optional[GenerationSettings] = None,
                 analyzer: Optional[TextAnalyzer] = None,
                 scorer: Optional[SentenceScorer] = None,
                 synthesizer: Optional[QuestionSynthesizer] = None):
        self.settings = settings or GenerationSettings()
        self.analyzer = analyzer or TextAnalyzer(self.settings)
        self.scorer = scorer or SentenceScorer(self.analyzer, self.settings)
        self.synthesizer = synthesizer or QuestionSynthesizer(self.settings)

    def step(self, ranked_sentences: Sequence[ScoredSentence], state: AssemblyState,
             concept_scores: dict, top_concepts: List[str]) -> Tuple[AssemblyState, Optional[Question]]:
        if state.phase == AssemblyPhase.DONE:
            return state, None
        if len(state.questions) >= self.settings.target_question_count or state.cursor >= len(ranked_sentences):
            return replace(state, phase=AssemblyPhase.DONE), None

        used_concepts = set(state.used_concepts)
        question = self.synthesizer.synthesize(
            ranked_sentences[state.cursor].text, concept_scores, top_concepts, used_concepts
        )
        questions = state.questions + (question,) if question else state.questions
        next_state = AssemblyState(
            phase=AssemblyPhase.ACCUMULATING,
            cursor=state.cursor + 1,
            questions=questions,
            used_concepts=frozenset(used_concepts),
        )
        if len(questions) >= self.settings.target_question_count:
            next_state = replace(next_state, phase=AssemblyPhase.DONE)
        return next_state, question

    def top_up(self, questions: List[Question]) -> List[Question]:
        """Pad a thin draft with fallback questions up to min_question_count."""
        missing = self.settings.min_question_count - len(questions)
        if missing <= 0:
            return questions
        return questions + fallback_questions()[:missing]

    def assemble(self, text: str) -> List[Question]:
        concept_scores = self.analyzer.extract_key_concepts(text)
        top_concepts = self.analyzer.top_concepts(concept_scores)
        ranked_sentences = self.scorer.rank(self.analyzer.get_sentences(text), concept_scores)

        state = AssemblyState()
        while state.phase != AssemblyPhase.DONE:
            state, _ = self.step(ranked_sentences, state, concept_scores, top_concepts)

        return self.top_up(list(state.questions))
