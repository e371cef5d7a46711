"""
Quiz state machine.

Phases::

    awaiting_selection --SelectOption--> awaiting_submit --Submit--> showing_feedback
    showing_feedback --Advance--> awaiting_selection (next question) | finished
    any --Retake--> awaiting_selection (question 0, everything cleared)

``reduce_quiz`` is pure; ``SelectionRequiredError`` is raised instead of
returning a changed state when an answer is submitted with nothing selected.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Sequence

from ..exceptions import SelectionRequiredError
from ..schemas import QuestionData

AWAITING_SELECTION = 'awaiting_selection'
AWAITING_SUBMIT = 'awaiting_submit'
SHOWING_FEEDBACK = 'showing_feedback'
FINISHED = 'finished'

MARK_SELECTED = 'selected'
MARK_CORRECT = 'correct'
MARK_INCORRECT = 'incorrect'


@dataclass(frozen=True)
class PerformanceTier:
    name: str
    min_percentage: int
    message: str
    css_class: str


PERFORMANCE_TIERS = (
    PerformanceTier('excellent', 90, 'Excellent work! You have mastered this topic.', 'score-excellent'),
    PerformanceTier('good', 70, 'Good job! You have a solid understanding.', 'score-good'),
    PerformanceTier('fair', 50, 'Fair performance. Consider reviewing the material.', 'score-fair'),
    PerformanceTier('poor', 0, 'You may want to review the lesson material again.', 'score-poor'),
)


def round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def score_percentage(score: int, question_count: int) -> int:
    if question_count <= 0:
        return 0
    return round_half_up(100 * score / question_count)


def classify_performance(percentage: int) -> PerformanceTier:
    for tier in PERFORMANCE_TIERS:
        if percentage >= tier.min_percentage:
            return tier
    return PERFORMANCE_TIERS[-1]


@dataclass(frozen=True)
class QuizResult:
    score: int
    question_count: int
    percentage: int
    tier: PerformanceTier


@dataclass(frozen=True)
class QuizState:
    question_count: int
    current_question_index: int = 0
    score: int = 0
    answers: Dict[int, int] = field(default_factory=dict)
    attempts: Dict[int, int] = field(default_factory=dict)
    selected: Optional[int] = None
    phase: str = AWAITING_SELECTION
    last_correct: Optional[bool] = None
    result: Optional[QuizResult] = None

    @property
    def is_finished(self) -> bool:
        return self.phase == FINISHED

    @property
    def inputs_locked(self) -> bool:
        return self.phase in (SHOWING_FEEDBACK, FINISHED)

    @property
    def is_last_question(self) -> bool:
        return self.current_question_index >= self.question_count - 1


class QuizEvent:
    """Marker base for quiz events."""


@dataclass(frozen=True)
class SelectOption(QuizEvent):
    index: int


@dataclass(frozen=True)
class Submit(QuizEvent):
    pass


@dataclass(frozen=True)
class Advance(QuizEvent):
    pass


@dataclass(frozen=True)
class Retake(QuizEvent):
    pass


def start_quiz(question_count: int) -> QuizState:
    if question_count < 1:
        raise ValueError('A quiz needs at least one question')
    return QuizState(question_count=question_count)


def reduce_quiz(state: QuizState, event: QuizEvent, questions: Sequence[QuestionData]) -> QuizState:
    """Apply one quiz event and return the new state."""
    if isinstance(event, Retake):
        return start_quiz(state.question_count)

    if isinstance(event, SelectOption):
        if state.inputs_locked:
            return state
        question = questions[state.current_question_index]
        if not 0 <= event.index < len(question.options):
            raise ValueError(f'Option index {event.index} out of range')
        return replace(state, selected=event.index, phase=AWAITING_SUBMIT)

    if isinstance(event, Submit):
        if state.inputs_locked:
            return state
        if state.selected is None:
            raise SelectionRequiredError()
        return _submit(state, questions[state.current_question_index])

    if isinstance(event, Advance):
        if state.phase != SHOWING_FEEDBACK:
            return state
        if state.is_last_question:
            return _finish(state)
        return replace(
            state,
            current_question_index=state.current_question_index + 1,
            selected=None,
            phase=AWAITING_SELECTION,
            last_correct=None,
        )

    raise TypeError(f'Unknown quiz event: {event!r}')


def _submit(state: QuizState, question: QuestionData) -> QuizState:
    index = state.current_question_index
    is_correct = state.selected == question.correct

    answers = dict(state.answers)
    answers[index] = state.selected
    attempts = dict(state.attempts)
    attempts[index] = attempts.get(index, 0) + 1

    return replace(
        state,
        score=state.score + (1 if is_correct else 0),
        answers=answers,
        attempts=attempts,
        phase=SHOWING_FEEDBACK,
        last_correct=is_correct,
    )


def _finish(state: QuizState) -> QuizState:
    percentage = score_percentage(state.score, state.question_count)
    result = QuizResult(
        score=state.score,
        question_count=state.question_count,
        percentage=percentage,
        tier=classify_performance(percentage),
    )
    return replace(state, phase=FINISHED, selected=None, result=result)


def option_marks(state: QuizState, question: QuestionData) -> List[Optional[str]]:
    """
    Render mark per option for the current question.

    Before submission only the pending choice is marked ``selected``. Once
    feedback is shown the correct option is always ``correct`` and a wrong
    selection is ``incorrect``; nothing else is marked.
    """
    marks: List[Optional[str]] = [None] * len(question.options)
    if state.phase == SHOWING_FEEDBACK:
        marks[question.correct] = MARK_CORRECT
        if state.selected is not None and state.selected != question.correct:
            marks[state.selected] = MARK_INCORRECT
    elif state.selected is not None and state.phase == AWAITING_SUBMIT:
        marks[state.selected] = MARK_SELECTED
    return marks
