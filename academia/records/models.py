from datetime import datetime

from academia import db


class Subject(db.Model):
    """Model for subjects taught within a program."""
    __tablename__ = "subjects"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, index=True)
    code = db.Column(db.String(50), nullable=True, unique=True)
    description = db.Column(db.Text, nullable=True)
    semester = db.Column(db.Integer, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<Subject {self.name}>"


class Assignment(db.Model):
    """Model for assignments posted to a subject."""
    __tablename__ = "assignments"

    id = db.Column(db.Integer, primary_key=True)
    subject_id = db.Column(db.Integer, db.ForeignKey("subjects.id", ondelete='CASCADE'), nullable=False, index=True)
    teacher_id = db.Column(db.Integer, nullable=True, index=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    attachment_url = db.Column(db.String(500), nullable=True)  # e.g. /uploads/assignments/<file>
    due_date = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    # Relationships
    subject = db.relationship("Subject", backref=db.backref("assignments", cascade="all, delete-orphan"))

    __table_args__ = (
        db.Index('ix_assignments_subject_created', 'subject_id', 'created_at'),
    )

    @property
    def attachment_path(self):
        return self.attachment_url

    def __repr__(self) -> str:
        return f"<Assignment {self.title} (subject={self.subject_id})>"


class ClassMaterial(db.Model):
    """Model for class materials uploaded to a subject."""
    __tablename__ = "class_materials"

    id = db.Column(db.Integer, primary_key=True)
    subject_id = db.Column(db.Integer, db.ForeignKey("subjects.id", ondelete='CASCADE'), nullable=False, index=True)
    teacher_id = db.Column(db.Integer, nullable=True, index=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    file_url = db.Column(db.String(500), nullable=True)  # e.g. /uploads/materials/<file>
    file_type = db.Column(db.String(100), nullable=True)  # MIME type
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    # Relationships
    subject = db.relationship("Subject", backref=db.backref("materials", cascade="all, delete-orphan"))

    __table_args__ = (
        db.Index('ix_class_materials_subject_created', 'subject_id', 'created_at'),
    )

    @property
    def attachment_path(self):
        return self.file_url

    def __repr__(self) -> str:
        return f"<ClassMaterial {self.title} (subject={self.subject_id})>"
