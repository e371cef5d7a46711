"""
Tests for the Learner Controller

Tests cover:
- Loading and the error view
- Navigation and keyboard bindings
- Manual and timed quiz advance
- Stale advance timers
- Course completion summary
- Progress snapshot restore
"""

import json

import pytest

from cyberlearn_app.core.signals import course_completed, quiz_completed
from cyberlearn_app.modules.learner.config import LearnerConfig
from cyberlearn_app.modules.learner.controller import LearnerController
from cyberlearn_app.modules.learner.engine.assembly import build_content_sequence
from cyberlearn_app.modules.learner.engine.quiz import AWAITING_SELECTION, SHOWING_FEEDBACK
from cyberlearn_app.modules.learner.engine.scheduling import AdvanceScheduler, ScheduledTask
from cyberlearn_app.modules.learner.exceptions import ContentUnavailableError
from cyberlearn_app.modules.learner.rendering import Renderer
from cyberlearn_app.modules.learner.services.content_source import ContentSource
from cyberlearn_app.modules.learner.services.progress_store import ProgressSnapshotStore


LESSONS = [
    {'id': 1, 'title': 'CIA Triad', 'content': 'Confidentiality, Integrity, Availability'},
    {'id': 2, 'title': 'Non-Repudiation', 'content': 'Nobody can deny it'},
]

QUESTIONS = [
    {'id': 1, 'question': 'Q1', 'options': ['a', 'b', 'c', 'd'], 'correct': 0},
    {'id': 2, 'question': 'Q2', 'options': ['a', 'b', 'c', 'd'], 'correct': 1},
    {'id': 3, 'question': 'Q3', 'options': ['a', 'b', 'c', 'd'], 'correct': 2},
]


class StubSource(ContentSource):
    def __init__(self, items=None, error=None):
        self.items = items
        self.error = error
        self.calls = 0

    def load(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.items


class RecordingRenderer(Renderer):
    def __init__(self):
        self.views = []
        self.prompts = []

    def render(self, view):
        self.views.append(view)

    def prompt(self, message):
        self.prompts.append(message)

    @property
    def last(self):
        return self.views[-1]


class FakeTask(ScheduledTask):
    def __init__(self, delay_ms, callback):
        self.delay_ms = delay_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.callback()


class ManualScheduler(AdvanceScheduler):
    """Records tasks; the test decides when they fire."""

    def __init__(self):
        self.tasks = []
        self.shut_down = False

    def schedule(self, delay_ms, callback):
        task = FakeTask(delay_ms, callback)
        self.tasks.append(task)
        return task

    def shutdown(self):
        self.shut_down = True


def make_controller(advance_mode='manual', items=None, progress_store=None):
    if items is None:
        items = build_content_sequence(LESSONS, QUESTIONS)
    renderer = RecordingRenderer()
    scheduler = ManualScheduler()
    controller = LearnerController(
        StubSource(items),
        config=LearnerConfig(advance_mode=advance_mode),
        renderer=renderer,
        scheduler=scheduler,
        progress_store=progress_store,
    )
    return controller, renderer, scheduler


def answer(controller, index):
    controller.select_option(index)
    return controller.submit_answer()


class TestLoading:

    def test_load_renders_first_lesson(self):
        controller, renderer, _ = make_controller()
        controller.load()

        view = renderer.last
        assert view['content']['type'] == 'lesson'
        assert view['content']['title'] == 'CIA Triad'
        assert view['navigation']['step_label'] == '1 / 4'
        assert view['navigation']['previous_disabled'] is True
        assert view['navigation']['next_label'] == 'Next →'
        assert controller.source.calls == 1

    def test_empty_content_renders_error(self):
        controller, renderer, _ = make_controller(items=[])
        with pytest.raises(ContentUnavailableError):
            controller.load()
        assert renderer.last == {
            'type': 'error',
            'message': 'No content available. Please contact the administrator.',
            'action': 'reload',
        }
        assert controller.navigation is None

    def test_source_failure_renders_error(self):
        renderer = RecordingRenderer()
        controller = LearnerController(
            StubSource(error=ContentUnavailableError('Failed to load content. Please refresh the page.')),
            renderer=renderer,
        )
        with pytest.raises(ContentUnavailableError):
            controller.load()
        assert renderer.last['message'] == 'Failed to load content. Please refresh the page.'

    def test_actions_before_load(self):
        controller, _, _ = make_controller()
        with pytest.raises(RuntimeError):
            controller.next()


class TestNavigation:

    def test_next_enters_quiz(self):
        controller, renderer, _ = make_controller()
        controller.load()
        controller.next()

        content = renderer.last['content']
        assert content['type'] == 'quiz'
        assert content['title'] == 'Quiz: CIA Triad'
        assert content['heading'] == 'Question 1 of 2'
        assert [o['label'] for o in content['options']] == ['A. a', 'B. b', 'C. c', 'D. d']
        assert content['submit_visible'] is False

    def test_previous_at_start_renders_nothing(self):
        controller, renderer, _ = make_controller()
        controller.load()
        rendered = len(renderer.views)
        controller.previous()
        assert len(renderer.views) == rendered

    def test_keyboard(self):
        controller, renderer, _ = make_controller()
        controller.load()

        assert controller.handle_key('End') is True
        assert controller.navigation.current_step == 3
        assert renderer.last['navigation']['next_label'] == 'Complete'
        assert controller.handle_key('ArrowLeft') is True
        assert controller.navigation.current_step == 2
        assert controller.handle_key('Home') is True
        assert controller.navigation.current_step == 0
        assert controller.handle_key('ArrowRight') is True
        assert controller.navigation.current_step == 1
        assert controller.handle_key('Enter') is False

    def test_leaving_quiz_discards_progress(self):
        controller, _, _ = make_controller()
        controller.load()
        controller.next()
        answer(controller, 0)
        controller.previous()
        controller.next()
        assert controller.quiz.phase == AWAITING_SELECTION
        assert controller.quiz.score == 0

    def test_quiz_actions_on_lesson_step(self):
        controller, _, _ = make_controller()
        controller.load()
        with pytest.raises(RuntimeError):
            controller.select_option(0)


class TestManualQuiz:

    def test_submit_without_selection_prompts(self):
        controller, renderer, _ = make_controller()
        controller.load()
        controller.next()

        assert controller.submit_answer() is False
        assert renderer.prompts == ['Please select an answer before submitting.']
        assert controller.quiz.phase == AWAITING_SELECTION

    def test_feedback_view(self):
        controller, renderer, scheduler = make_controller()
        controller.load()
        controller.next()
        assert answer(controller, 2) is True

        content = renderer.last['content']
        assert [o['mark'] for o in content['options']] == ['correct', None, 'incorrect', None]
        assert all(o['disabled'] for o in content['options'])
        assert content['feedback'] == {
            'correct': False,
            'heading': 'Incorrect',
            'text': 'The correct answer is: A. a',
        }
        assert content['next_question_visible'] is True
        assert content['finish_visible'] is False
        assert scheduler.tasks == []

    def test_finish_and_retake(self):
        controller, renderer, _ = make_controller()
        controller.load()
        controller.next()
        answer(controller, 0)
        controller.next_question()
        answer(controller, 3)
        assert renderer.last['content']['finish_visible'] is True
        controller.next_question()

        result = renderer.last['content']['result']
        assert result['summary'] == '1 / 2 (50%)'
        assert result['tier'] == 'fair'
        assert result['css_class'] == 'score-fair'

        controller.retake_quiz()
        assert controller.quiz.current_question_index == 0
        assert controller.quiz.score == 0
        assert controller.navigation.current_step == 1

    def test_quiz_completed_signal(self):
        received = []

        def on_quiz_completed(sender, **kwargs):
            received.append(kwargs)

        controller, _, _ = make_controller()
        controller.load()
        controller.jump_to_end()
        with quiz_completed.connected_to(on_quiz_completed):
            answer(controller, 2)
            controller.next_question()

        assert received == [{
            'title': 'Quiz: Non-Repudiation',
            'score': 1,
            'question_count': 1,
            'percentage': 100,
            'tier': 'excellent',
        }]


class TestTimedAdvance:

    def test_timer_advances_question(self):
        controller, renderer, scheduler = make_controller('timed(2500)')
        controller.load()
        controller.next()
        answer(controller, 0)

        assert len(scheduler.tasks) == 1
        assert scheduler.tasks[0].delay_ms == 2500
        content = renderer.last['content']
        assert content['auto_advance_ms'] == 2500
        assert content['next_question_visible'] is False

        scheduler.tasks[0].fire()
        assert controller.quiz.current_question_index == 1
        assert controller.quiz.phase == AWAITING_SELECTION

    def test_timer_finishes_quiz(self):
        controller, _, scheduler = make_controller('timed')
        controller.load()
        controller.jump_to_end()
        answer(controller, 2)
        assert scheduler.tasks[0].delay_ms == 3000

        scheduler.tasks[0].fire()
        assert controller.quiz.is_finished

    def test_navigation_cancels_pending_timer(self):
        controller, _, scheduler = make_controller('timed')
        controller.load()
        controller.next()
        answer(controller, 0)
        task = scheduler.tasks[0]

        controller.previous()
        assert task.cancelled
        # A timer that slipped through anyway must not touch the new step
        task.fire()
        assert controller.navigation.current_step == 0
        assert controller.quiz is None

    def test_stale_timer_after_retake(self):
        controller, _, scheduler = make_controller('timed')
        controller.load()
        controller.next()
        answer(controller, 0)
        stale = scheduler.tasks[0]

        controller.retake_quiz()
        assert stale.cancelled
        answer(controller, 1)
        assert controller.quiz.phase == SHOWING_FEEDBACK

        stale.fire()
        assert controller.quiz.phase == SHOWING_FEEDBACK
        assert controller.quiz.current_question_index == 0

        scheduler.tasks[-1].fire()
        assert controller.quiz.current_question_index == 1

    def test_manual_next_cancels_timer(self):
        controller, _, scheduler = make_controller('timed')
        controller.load()
        controller.next()
        answer(controller, 0)
        controller.next_question()
        assert scheduler.tasks[0].cancelled

        scheduler.tasks[0].fire()
        assert controller.quiz.current_question_index == 1

    def test_close_shuts_down_scheduler(self):
        controller, _, scheduler = make_controller('timed')
        controller.load()
        controller.close()
        assert scheduler.shut_down


class TestCompletion:

    def play_through(self, controller):
        controller.load()
        controller.next()
        answer(controller, 0)   # correct
        controller.next_question()
        answer(controller, 1)   # correct
        controller.next_question()
        controller.continue_learning()
        controller.next()
        answer(controller, 0)   # wrong
        controller.next_question()
        controller.continue_learning()

    def test_completion_summary(self):
        controller, renderer, _ = make_controller()
        received = []

        def on_course_completed(sender, **kwargs):
            received.append(kwargs)

        with course_completed.connected_to(on_course_completed):
            self.play_through(controller)

        content = renderer.last['content']
        assert content['type'] == 'completion'
        assert content['title'] == 'Congratulations!'
        assert content['lesson_count'] == 2
        assert content['quiz_count'] == 2
        assert content['overall'] == {'score': 2, 'question_count': 3, 'percentage': 67, 'tier': 'fair'}
        assert received == [{'total_items': 4, 'lesson_count': 2, 'quiz_count': 2}]
        assert controller.view == renderer.last

    def test_completion_without_quizzes(self):
        items = build_content_sequence(LESSONS, [])
        controller, renderer, _ = make_controller(items=items)
        controller.load()
        controller.next()
        controller.next()
        content = renderer.last['content']
        assert content['type'] == 'completion'
        assert 'overall' not in content

    def test_restart(self):
        controller, renderer, _ = make_controller()
        self.play_through(controller)
        controller.restart()

        assert controller.navigation.current_step == 0
        assert not controller.navigation.completed
        assert controller.quiz_results == {}
        assert renderer.last['content']['type'] == 'lesson'


class TestProgressSnapshot:

    def test_restores_matching_snapshot(self):
        storage = {'cyberlearn.progress': json.dumps({'currentStep': 2, 'totalSteps': 4, 'timestamp': 'x'})}
        controller, renderer, _ = make_controller(progress_store=ProgressSnapshotStore(storage))
        controller.load()
        assert controller.navigation.current_step == 2
        assert renderer.last['content']['title'] == 'Non-Repudiation'

    def test_ignores_snapshot_for_other_sequence(self):
        storage = {'cyberlearn.progress': json.dumps({'currentStep': 2, 'totalSteps': 7, 'timestamp': 'x'})}
        controller, _, _ = make_controller(progress_store=ProgressSnapshotStore(storage))
        controller.load()
        assert controller.navigation.current_step == 0

    def test_saves_on_every_step(self):
        storage = {}
        controller, _, _ = make_controller(progress_store=ProgressSnapshotStore(storage))
        controller.load()
        controller.next()
        snapshot = json.loads(storage['cyberlearn.progress'])
        assert snapshot['currentStep'] == 1
        assert snapshot['totalSteps'] == 4
