"""
Question records produced by the quiz generator.

Supports three question types:
- MCQ: four options, exactly one of which is the correct answer
- TRUE_FALSE: options are always ["True", "False"]
- SHORT_ANSWER: free text answer, no options
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Union


class QuestionType(str, Enum):
    MCQ = "MCQ"
    TRUE_FALSE = "TRUE_FALSE"
    SHORT_ANSWER = "SHORT_ANSWER"


TRUE_FALSE_OPTIONS = ("True", "False")


@dataclass
class Question:
    """
    A generated quiz question.

    `concept` is the concept the question was built from. It is kept for
    de-duplication and is never serialized.
    """
    type: QuestionType
    text: str
    correct_answer: str
    options: Optional[List[str]] = None
    concept: Optional[str] = field(default=None, compare=False)

    @classmethod
    def multiple_choice(cls, text: str, options: List[str], correct_answer: str, concept: str) -> "Question":
        return cls(QuestionType.MCQ, text, correct_answer, list(options), concept)

    @classmethod
    def true_false(cls, text: str, is_true: bool, concept: Optional[str] = None) -> "Question":
        answer = TRUE_FALSE_OPTIONS[0] if is_true else TRUE_FALSE_OPTIONS[1]
        return cls(QuestionType.TRUE_FALSE, text, answer, list(TRUE_FALSE_OPTIONS), concept)

    @classmethod
    def short_answer(cls, text: str, correct_answer: str, concept: Optional[str] = None) -> "Question":
        return cls(QuestionType.SHORT_ANSWER, text, correct_answer, None, concept)

    def to_dict(self, include_answer: bool = True) -> dict:
        data = {
            'text': self.text,
            'type': self.type.value,
        }
        if self.options is not None:
            data['options'] = list(self.options)
        if include_answer:
            data['correctAnswer'] = self.correct_answer
        return data


def fallback_questions() -> List[Question]:
    """Fixed questions used when the course material is too thin to generate from."""
    return [
        Question.short_answer(
            "What is the primary goal of this subject?",
            "To understand the core concepts.",
        ),
        Question.true_false(
            "The content provided was insufficient to generate specific questions. True or False?",
            True,
        ),
    ]


def redact_answers(questions: Iterable[Union[Question, dict]]) -> List[dict]:
    """
    Serialize questions without their correct answers.

    Used when serving an unattempted quiz to a student. Accepts Question
    objects or already-serialized dicts.
    """
    redacted = []
    for question in questions:
        if isinstance(question, Question):
            redacted.append(question.to_dict(include_answer=False))
        else:
            redacted.append({key: value for key, value in question.items() if key != 'correctAnswer'})
    return redacted
