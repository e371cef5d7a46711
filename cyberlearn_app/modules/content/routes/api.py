# File: cyberlearn_app/modules/content/routes/api.py
from flask import request, jsonify

from .. import content_bp as blueprint
from ..logics.validators import parse_record_id
from ..services.content_service import ContentService


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@blueprint.route('/content', methods=['GET'])
def get_content():
    """Trả về toàn bộ bài học và câu hỏi."""
    return jsonify(ContentService.list_content())


@blueprint.route('/lessons', methods=['POST'])
def create_lesson():
    data = _json_body()
    lesson = ContentService.create_lesson(data.get('title'), data.get('content'))
    return jsonify({
        'success': True,
        'message': 'Lesson added successfully',
        'lesson': lesson,
    }), 201


@blueprint.route('/lessons/<lesson_id>', methods=['DELETE'])
def delete_lesson(lesson_id):
    deleted = ContentService.delete_lesson(parse_record_id(lesson_id, 'lesson'))
    return jsonify({
        'success': True,
        'message': 'Lesson deleted successfully',
        'deleted': deleted,
    })


@blueprint.route('/questions', methods=['POST'])
def create_question():
    data = _json_body()
    question = ContentService.create_question(
        data.get('question'),
        data.get('options'),
        data.get('correct'),
    )
    return jsonify({
        'success': True,
        'message': 'Question added successfully',
        'question': question,
    }), 201


@blueprint.route('/questions/<question_id>', methods=['DELETE'])
def delete_question(question_id):
    deleted = ContentService.delete_question(parse_record_id(question_id, 'question'))
    return jsonify({
        'success': True,
        'message': 'Question deleted successfully',
        'deleted': deleted,
    })
