"""
Content assembly: interleave lessons with quizzes.
Pure logic, no I/O.
"""

import math
from typing import Any, Dict, List, Sequence

from ..schemas import ContentItem, LessonItem, QuestionData, QuizItem


def questions_per_quiz(question_count: int, lesson_count: int) -> int:
    """Share of questions each lesson's quiz receives (ceiling division)."""
    if lesson_count <= 0 or question_count <= 0:
        return 0
    return math.ceil(question_count / lesson_count)


def build_content_sequence(
    lessons: Sequence[Dict[str, Any]],
    questions: Sequence[Dict[str, Any]],
) -> List[ContentItem]:
    """
    Build the LESSON > QUIZ > LESSON > QUIZ display sequence.

    Questions are sliced sequentially in chunks of ceil(Q / L); a lesson whose
    slice is empty gets no quiz. An empty lesson list yields an empty sequence,
    which the caller treats as fatal.
    """
    sequence: List[ContentItem] = []
    if not lessons:
        return sequence

    parsed_questions = [QuestionData.from_dict(q) for q in questions or []]
    chunk = questions_per_quiz(len(parsed_questions), len(lessons))

    for index, lesson in enumerate(lessons):
        if not isinstance(lesson, dict):
            raise ValueError(f"Lesson must be an object, got {type(lesson).__name__}")
        sequence.append(LessonItem(
            id=lesson.get('id'),
            title=lesson['title'],
            content=lesson['content'],
        ))

        if not chunk:
            continue
        start = index * chunk
        lesson_questions = parsed_questions[start:start + chunk]
        if lesson_questions:
            sequence.append(QuizItem(
                title=f"Quiz: {lesson['title']}",
                questions=tuple(lesson_questions),
            ))

    return sequence


def count_items(sequence: Sequence[ContentItem]) -> Dict[str, int]:
    """Lesson/quiz totals for the course summary."""
    lessons = sum(1 for item in sequence if item.kind == 'lesson')
    quizzes = sum(1 for item in sequence if item.kind == 'quiz')
    return {'total_items': len(sequence), 'lesson_count': lessons, 'quiz_count': quizzes}
