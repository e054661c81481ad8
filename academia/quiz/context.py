"""
Subject context aggregation.

Collects the titles, descriptions and attachment text of every assignment
and class material in a subject into one corpus string.
"""
from typing import Callable, Iterable, Optional, Protocol

from flask import current_app

from academia.common.file_utils import resolve_upload_path
from academia.quiz.document_processor import DocumentProcessor


class ContextRecord(Protocol):
    """The narrow shape the aggregator reads from any record."""
    id: int
    title: str
    description: Optional[str]

    @property
    def attachment_path(self) -> Optional[str]: ...


class RecordSource(Protocol):
    def subject_exists(self, subject_id: int) -> bool: ...

    def assignments(self, subject_id: int) -> Iterable[ContextRecord]: ...

    def materials(self, subject_id: int) -> Iterable[ContextRecord]: ...


class SqlAlchemyRecordSource:
    """Reads subject records from the database."""

    def subject_exists(self, subject_id: int) -> bool:
        from academia import db
        from academia.records.models import Subject
        return db.session.get(Subject, subject_id) is not None

    def assignments(self, subject_id: int):
        from academia.records.models import Assignment
        return Assignment.query.filter_by(subject_id=subject_id).order_by(Assignment.id).all()

    def materials(self, subject_id: int):
        from academia.records.models import ClassMaterial
        return ClassMaterial.query.filter_by(subject_id=subject_id).order_by(ClassMaterial.id).all()


class SubjectContextAggregator:
    """Builds the text corpus quiz questions are generated from."""

    def __init__(self, source: RecordSource, upload_dir: str,
                 extract_text: Optional[Callable[[str], str]] = None):
        self.source = source
        self.upload_dir = upload_dir
        self.extract_text = extract_text or DocumentProcessor.extract_text

    def aggregate(self, subject_id: int) -> str:
        full_text = ""
        for kind, records in (
            ("assignment", self.source.assignments(subject_id)),
            ("class material", self.source.materials(subject_id)),
        ):
            for record in records:
                full_text += self._record_text(kind, record)
        return full_text

    def _record_text(self, kind: str, record: ContextRecord) -> str:
        """
        "{title}. ", then "{description} " and "{attachment text} " when present,
        then a newline. An attachment that yields no text adds nothing, not
        even the trailing space.
        """
        text = f"{record.title}. "
        if record.description:
            text += f"{record.description} "

        if record.attachment_path:
            file_text = self._attachment_text(kind, record)
            if file_text:
                text += f"{file_text} "
        return text + "\n"

    def _attachment_text(self, kind: str, record: ContextRecord) -> str:
        """Text of a record's attachment; failures are logged and contribute nothing."""
        try:
            full_path = resolve_upload_path(self.upload_dir, record.attachment_path)
            if full_path is None:
                current_app.logger.warning(
                    f"[QuizGen] Skipping {kind} {record.id}: unsafe attachment path {record.attachment_path}"
                )
                return ""
            current_app.logger.info(f"[QuizGen] Processing {kind} file: {full_path}")
            return self.extract_text(full_path)
        except Exception as e:
            current_app.logger.error(f"[QuizGen] Failed to read attachment for {kind} {record.id}: {str(e)}")
            return ""
