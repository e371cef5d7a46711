"""
View models for the learner engine.

Every builder is a pure function of state; a ``Renderer`` receives the
resulting dict after each transition and decides how to show it.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Sequence

from .engine.assembly import count_items
from .engine.navigation import NavigationState
from .engine.quiz import (
    FINISHED,
    SHOWING_FEEDBACK,
    QuizResult,
    QuizState,
    classify_performance,
    option_marks,
    score_percentage,
)
from .schemas import ContentItem, LessonItem, QuizItem, option_letter

logger = logging.getLogger(__name__)

NEXT_LABEL = 'Next →'
COMPLETE_LABEL = 'Complete'


def build_navigation_view(navigation: NavigationState) -> Dict[str, Any]:
    return {
        'step_label': f"{navigation.current_step + 1} / {navigation.total_steps}",
        'progress_percent': round(navigation.progress_percent, 2),
        'previous_disabled': navigation.is_first,
        'next_label': COMPLETE_LABEL if navigation.is_last else NEXT_LABEL,
    }


def build_lesson_view(lesson: LessonItem) -> Dict[str, Any]:
    return {
        'type': 'lesson',
        'id': lesson.id,
        'title': lesson.title,
        'content': lesson.content,
    }


def build_quiz_view(quiz: QuizItem, state: QuizState, auto_advance_ms: Optional[int] = None) -> Dict[str, Any]:
    view: Dict[str, Any] = {
        'type': 'quiz',
        'title': quiz.title,
        'question_count': state.question_count,
        'score': state.score,
    }

    if state.phase == FINISHED:
        result = state.result
        view['result'] = {
            'score': result.score,
            'question_count': result.question_count,
            'percentage': result.percentage,
            'tier': result.tier.name,
            'css_class': result.tier.css_class,
            'message': result.tier.message,
            'summary': f"{result.score} / {result.question_count} ({result.percentage}%)",
        }
        return view

    question = quiz.questions[state.current_question_index]
    marks = option_marks(state, question)
    showing_feedback = state.phase == SHOWING_FEEDBACK

    view.update({
        'question_number': state.current_question_index + 1,
        'heading': f"Question {state.current_question_index + 1} of {state.question_count}",
        'question': question.question,
        'options': [
            {
                'index': index,
                'label': f"{option_letter(index)}. {text}",
                'mark': marks[index],
                'disabled': state.inputs_locked,
            }
            for index, text in enumerate(question.options)
        ],
        'submit_visible': state.selected is not None and not state.inputs_locked,
        'next_question_visible': showing_feedback and not state.is_last_question and auto_advance_ms is None,
        'finish_visible': showing_feedback and state.is_last_question and auto_advance_ms is None,
        'feedback': None,
    })
    if showing_feedback:
        view['feedback'] = {
            'correct': state.last_correct,
            'heading': 'Correct!' if state.last_correct else 'Incorrect',
            'text': question.feedback_for(state.last_correct),
        }
        if auto_advance_ms is not None:
            view['auto_advance_ms'] = auto_advance_ms
    return view


def build_completion_view(
    items: Sequence[ContentItem],
    quiz_results: Optional[Mapping[int, QuizResult]] = None,
) -> Dict[str, Any]:
    """Course summary; the overall score covers quizzes that were finished."""
    view: Dict[str, Any] = {'type': 'completion', 'title': 'Congratulations!'}
    view.update(count_items(items))

    results = list((quiz_results or {}).values())
    if results:
        score = sum(result.score for result in results)
        question_count = sum(result.question_count for result in results)
        percentage = score_percentage(score, question_count)
        view['overall'] = {
            'score': score,
            'question_count': question_count,
            'percentage': percentage,
            'tier': classify_performance(percentage).name,
        }
    return view


def build_error_view(message: str) -> Dict[str, Any]:
    return {'type': 'error', 'message': message, 'action': 'reload'}


class Renderer(ABC):
    """Observer of learner state; replaceable per front end."""

    @abstractmethod
    def render(self, view: Dict[str, Any]) -> None:
        ...

    @abstractmethod
    def prompt(self, message: str) -> None:
        """Show a transient message (e.g. submit without a selection)."""


class LoggingRenderer(Renderer):
    """Default renderer: writes each view to the log."""

    def render(self, view: Dict[str, Any]) -> None:
        logger.info("Render %s: %s", view.get('type'), view.get('title') or view.get('message'))
        logger.debug("View payload: %r", view)

    def prompt(self, message: str) -> None:
        logger.info("Prompt: %s", message)
