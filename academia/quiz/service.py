"""
Quiz generation service.

Entry point for generating a draft quiz for a subject. The draft is not
saved; callers review it and persist the finalized list themselves.
"""
import random
from typing import List, Optional

from flask import current_app

from academia.quiz.assembler import QuizDraftAssembler
from academia.quiz.context import RecordSource, SqlAlchemyRecordSource, SubjectContextAggregator
from academia.quiz.errors import SubjectNotFoundError
from academia.quiz.questions import Question, fallback_questions
from academia.quiz.settings import GenerationSettings
from academia.quiz.synthesizer import QuestionSynthesizer


class QuizGeneratorService:
    """Service class for generating quiz drafts from subject material."""

    def __init__(self, settings: Optional[GenerationSettings] = None,
                 source: Optional[RecordSource] = None,
                 upload_dir: Optional[str] = None,
                 rng: Optional[random.Random] = None):
        self.settings = settings or current_app.config.get("QUIZ_SETTINGS") or GenerationSettings()
        self.source = source or SqlAlchemyRecordSource()
        self.upload_dir = upload_dir or current_app.config.get("UPLOAD_DIR", "uploads")
        self.rng = rng

    def generate_quiz_draft(self, subject_id: int) -> List[Question]:
        """
        Generate a draft quiz for a subject.

        Args:
            subject_id: ID of the subject

        Returns:
            Ordered list of questions; the fixed fallback questions when the
            subject has too little text to generate from

        Raises:
            SubjectNotFoundError: If the subject does not exist
        """
        if not self.source.subject_exists(subject_id):
            raise SubjectNotFoundError(subject_id)

        aggregator = SubjectContextAggregator(self.source, self.upload_dir)
        context_text = aggregator.aggregate(subject_id)

        if not context_text or len(context_text) < self.settings.min_context_length:
            current_app.logger.info(
                f"[QuizGen] Subject {subject_id}: context too short ({len(context_text)} chars), using fallback questions"
            )
            return fallback_questions()

        synthesizer = QuestionSynthesizer(self.settings, self.rng or random.Random())
        assembler = QuizDraftAssembler(self.settings, synthesizer=synthesizer)
        questions = assembler.assemble(context_text)

        generated = sum(1 for question in questions if question.concept)
        current_app.logger.info(
            f"[QuizGen] Subject {subject_id}: {len(questions)} questions "
            f"({generated} generated, {len(questions) - generated} fallback) from {len(context_text)} chars"
        )
        return questions
