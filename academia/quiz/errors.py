class QuizGenerationError(Exception):
    """Raised when a quiz draft cannot be generated at all."""


class SubjectNotFoundError(QuizGenerationError):
    """Raised when the requested subject does not exist."""

    def __init__(self, subject_id, message=None):
        self.subject_id = subject_id
        self.message = message or f"Subject not found: {subject_id}"
        super().__init__(self.message)
