from datetime import datetime, timezone
from cyberlearn_app.core.extensions import db


class Lesson(db.Model):
    """
    A reading unit of the course.
    Created and deleted only through the admin API; read-only for learners.
    """
    __tablename__ = 'lessons'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'content': self.content,
            'created': self.created.isoformat() if self.created else None,
        }

    def __repr__(self):
        return f"<Lesson {self.id}: {self.title}>"


class Question(db.Model):
    """Multiple choice question with exactly four options."""
    __tablename__ = 'questions'

    id = db.Column(db.Integer, primary_key=True)
    question = db.Column(db.Text, nullable=False)
    options = db.Column(db.JSON, nullable=False)  # ordered list of 4 strings
    correct = db.Column(db.Integer, nullable=False)  # index into options
    created = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'id': self.id,
            'question': self.question,
            'options': list(self.options or []),
            'correct': self.correct,
            'created': self.created.isoformat() if self.created else None,
        }

    def __repr__(self):
        return f"<Question {self.id}>"
