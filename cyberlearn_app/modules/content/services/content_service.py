# File: cyberlearn_app/modules/content/services/content_service.py
# Read-all / create / delete over lessons and questions.

from datetime import datetime, timezone

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from cyberlearn_app.core.error_handlers import NotFoundError, StoreError
from cyberlearn_app.core.extensions import db
from cyberlearn_app.core.signals import content_created, content_deleted
from cyberlearn_app.models import Lesson, Question
from ..logics.validators import validate_lesson_payload, validate_question_payload

MIN_RECORD_ID = -(2 ** 63)
MAX_RECORD_ID = 2 ** 63 - 1


def _preview(text: str, length: int = 50) -> str:
    return text if len(text) <= length else f"{text[:length]}..."


class ContentService:
    """
    Cổng truy cập dữ liệu bài học và câu hỏi.
    Every mutation is a single commit; failures roll back and surface as StoreError.
    """

    @staticmethod
    def list_content() -> dict:
        """All lessons and questions in id order, stamped with the read time."""
        try:
            lessons = Lesson.query.order_by(Lesson.id).all()
            questions = Question.query.order_by(Question.id).all()
        except SQLAlchemyError as exc:
            current_app.logger.error(f"Error fetching content: {exc}")
            raise StoreError('Failed to retrieve content')

        current_app.logger.info(
            f"Content requested - {len(lessons)} lessons, {len(questions)} questions"
        )
        return {
            'lessons': [lesson.to_dict() for lesson in lessons],
            'questions': [question.to_dict() for question in questions],
            'timestamp': datetime.now(timezone.utc).isoformat(),
        }

    @staticmethod
    def create_lesson(title, content) -> dict:
        title, content = validate_lesson_payload(title, content)
        lesson = Lesson(title=title, content=content)
        try:
            db.session.add(lesson)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.error(f"Error adding lesson: {exc}")
            raise StoreError('Failed to add lesson')

        current_app.logger.info(f"New lesson added: {lesson.title} (ID: {lesson.id})")
        content_created.send(None, content_type='lesson', content_id=lesson.id, title=lesson.title)
        return lesson.to_dict()

    @staticmethod
    def delete_lesson(lesson_id: int) -> dict:
        lesson = ContentService._get_or_raise(Lesson, lesson_id, 'Lesson')
        deleted = lesson.to_dict()
        try:
            db.session.delete(lesson)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.error(f"Error deleting lesson: {exc}")
            raise StoreError('Failed to delete lesson')

        current_app.logger.info(f"Lesson deleted: {deleted['title']} (ID: {lesson_id})")
        content_deleted.send(None, content_type='lesson', content_id=lesson_id)
        return deleted

    @staticmethod
    def create_question(question, options, correct) -> dict:
        text, options, correct = validate_question_payload(question, options, correct)
        record = Question(question=text, options=options, correct=correct)
        try:
            db.session.add(record)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.error(f"Error adding question: {exc}")
            raise StoreError('Failed to add question')

        current_app.logger.info(f"New question added: {_preview(record.question)} (ID: {record.id})")
        content_created.send(None, content_type='question', content_id=record.id, title=record.question)
        return record.to_dict()

    @staticmethod
    def delete_question(question_id: int) -> dict:
        record = ContentService._get_or_raise(Question, question_id, 'Question')
        deleted = record.to_dict()
        try:
            db.session.delete(record)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.error(f"Error deleting question: {exc}")
            raise StoreError('Failed to delete question')

        current_app.logger.info(f"Question deleted: {_preview(deleted['question'])} (ID: {question_id})")
        content_deleted.send(None, content_type='question', content_id=question_id)
        return deleted

    @staticmethod
    def _get_or_raise(model, record_id: int, label: str):
        # Integer primary keys are signed 64-bit on every supported backend
        if not MIN_RECORD_ID <= record_id <= MAX_RECORD_ID:
            raise NotFoundError(f'{label} not found', resource=label.lower())
        try:
            record = db.session.get(model, record_id)
        except SQLAlchemyError as exc:
            current_app.logger.error(f"Error loading {label.lower()} {record_id}: {exc}")
            raise StoreError(f'Failed to load {label.lower()}')
        if record is None:
            raise NotFoundError(f'{label} not found', resource=label.lower())
        return record
