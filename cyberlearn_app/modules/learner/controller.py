# File: cyberlearn_app/modules/learner/controller.py
"""
Learner Controller
==================
Owns one learner session: the content sequence, the navigation state and the
state of the quiz on screen. Transitions go through the pure reducers in
``engine``; after each one the controller hands a fresh view to its renderer.

Lifecycle::

    controller = LearnerController(source, config)
    controller.load()                 # one fetch, then everything is in memory
    controller.next() / previous() / handle_key('End') ...
    controller.select_option(1); controller.submit_answer(); controller.next_question()
    controller.close()
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

from cyberlearn_app.core.signals import course_completed, quiz_completed

from .config import LearnerConfig
from .engine.assembly import count_items
from .engine.navigation import (
    KEY_BINDINGS,
    JumpToEnd,
    JumpToStart,
    NavigationEvent,
    NavigationState,
    Next,
    Previous,
    Restart,
    reduce_navigation,
    start_navigation,
)
from .engine.quiz import (
    Advance,
    QuizEvent,
    QuizResult,
    QuizState,
    Retake,
    SelectOption,
    Submit,
    SHOWING_FEEDBACK,
    reduce_quiz,
    start_quiz,
)
from .engine.scheduling import AdvanceScheduler, AdvanceTicket, APSchedulerAdvanceScheduler, ScheduledTask
from .exceptions import ContentUnavailableError, SelectionRequiredError
from .rendering import (
    LoggingRenderer,
    Renderer,
    build_completion_view,
    build_error_view,
    build_lesson_view,
    build_navigation_view,
    build_quiz_view,
)
from .schemas import ContentItem, QuizItem
from .services.content_source import ContentSource
from .services.progress_store import ProgressSnapshotStore

logger = logging.getLogger(__name__)


class LearnerController:
    """Single-session controller for lesson/quiz navigation."""

    def __init__(
        self,
        source: ContentSource,
        config: Optional[LearnerConfig] = None,
        renderer: Optional[Renderer] = None,
        scheduler: Optional[AdvanceScheduler] = None,
        progress_store: Optional[ProgressSnapshotStore] = None,
    ):
        self.source = source
        self.config = config or LearnerConfig()
        self.renderer = renderer or LoggingRenderer()
        self.progress_store = progress_store
        self._scheduler = scheduler
        self._lock = threading.RLock()

        self.items: List[ContentItem] = []
        self.navigation: Optional[NavigationState] = None
        self.quiz: Optional[QuizState] = None
        self.quiz_results: Dict[int, QuizResult] = {}  # step -> latest finished attempt
        self._quiz_epoch = 0
        self._pending_task: Optional[ScheduledTask] = None

    # ── loading ──────────────────────────────────────────────────────

    def load(self) -> None:
        """Fetch content once and display the first (or restored) step."""
        with self._lock:
            try:
                items = self.source.load()
                if not items:
                    raise ContentUnavailableError()
            except ContentUnavailableError as exc:
                logger.error("Failed to initialize learner: %s", exc.message)
                self.renderer.render(build_error_view(exc.message))
                raise

            self.items = list(items)
            self.quiz_results = {}
            start_step = 0
            if self.progress_store is not None:
                restored = self.progress_store.restore(len(self.items))
                if restored is not None:
                    logger.info("Restored progress at step %d", restored + 1)
                    start_step = restored
            self.navigation = start_navigation(len(self.items), start_step)
            self._enter_step()
            logger.info("Learner initialized with %d content items", len(self.items))

    # ── navigation ───────────────────────────────────────────────────

    @property
    def current_item(self) -> Optional[ContentItem]:
        if self.navigation is None:
            return None
        return self.items[self.navigation.current_step]

    def next(self) -> None:
        self._navigate(Next())

    def previous(self) -> None:
        self._navigate(Previous())

    def jump_to_start(self) -> None:
        self._navigate(JumpToStart())

    def jump_to_end(self) -> None:
        self._navigate(JumpToEnd())

    def restart(self) -> None:
        self._navigate(Restart())

    def handle_key(self, key: str) -> bool:
        """Keyboard navigation; returns False for keys with no binding."""
        event_class = KEY_BINDINGS.get(key)
        if event_class is None:
            return False
        self._navigate(event_class())
        return True

    def continue_learning(self) -> None:
        """Leave a finished quiz and move on."""
        self._navigate(Next())

    def _navigate(self, event: NavigationEvent) -> None:
        with self._lock:
            self._require_loaded()
            before = self.navigation
            after = reduce_navigation(before, event)
            self.navigation = after
            if isinstance(event, Restart):
                self.quiz_results.clear()

            if after.completed and not before.completed:
                self._cancel_pending()
                totals = count_items(self.items)
                logger.info("Course completed!")
                course_completed.send(self, **totals)
                self.renderer.render(self._compose(build_completion_view(self.items, self.quiz_results)))
                return

            reentered = isinstance(event, (JumpToStart, JumpToEnd, Restart))
            if after != before or reentered:
                self._enter_step()
                logger.debug("Navigated to step %d", after.current_step + 1)

    def _enter_step(self) -> None:
        self._cancel_pending()
        item = self.current_item
        if isinstance(item, QuizItem):
            self._quiz_epoch += 1
            self.quiz = start_quiz(len(item.questions))
            logger.info("Starting quiz: %s with %d questions", item.title, len(item.questions))
        else:
            self.quiz = None
        if self.progress_store is not None:
            self.progress_store.save(self.navigation)
        self._render()

    # ── quiz ─────────────────────────────────────────────────────────

    def select_option(self, index: int) -> None:
        self._quiz_transition(SelectOption(index))

    def submit_answer(self) -> bool:
        """Submit the pending choice; False when nothing was evaluated."""
        try:
            return self._quiz_transition(Submit())
        except SelectionRequiredError as exc:
            self.renderer.prompt(exc.message)
            return False

    def next_question(self) -> None:
        self._quiz_transition(Advance())

    def retake_quiz(self) -> None:
        with self._lock:
            self._require_quiz()
            self._quiz_epoch += 1
            self._quiz_transition(Retake())

    def _quiz_transition(self, event: QuizEvent) -> bool:
        with self._lock:
            quiz_item = self._require_quiz()
            before = self.quiz
            after = reduce_quiz(before, event, quiz_item.questions)
            if after is before:
                return False

            if not isinstance(event, Submit):
                self._cancel_pending()
            self.quiz = after

            if isinstance(event, Submit):
                logger.info(
                    "Answer submitted: %s, Correct: %s",
                    before.selected, after.last_correct,
                )
                if self.config.is_timed:
                    self._schedule_advance()
            elif after.is_finished and not before.is_finished:
                result = after.result
                self.quiz_results[self.navigation.current_step] = result
                logger.info(
                    "Quiz completed! Score: %d/%d (%d%%)",
                    result.score, result.question_count, result.percentage,
                )
                quiz_completed.send(
                    self,
                    title=quiz_item.title,
                    score=result.score,
                    question_count=result.question_count,
                    percentage=result.percentage,
                    tier=result.tier.name,
                )
            self._render()
            return True

    # ── timed advance ────────────────────────────────────────────────

    @property
    def scheduler(self) -> AdvanceScheduler:
        if self._scheduler is None:
            self._scheduler = APSchedulerAdvanceScheduler()
        return self._scheduler

    def _current_ticket(self) -> Optional[AdvanceTicket]:
        if self.quiz is None or self.navigation is None:
            return None
        return AdvanceTicket(
            quiz_epoch=self._quiz_epoch,
            step=self.navigation.current_step,
            question_index=self.quiz.current_question_index,
        )

    def _schedule_advance(self) -> None:
        self._cancel_pending()
        ticket = self._current_ticket()
        self._pending_task = self.scheduler.schedule(
            self.config.advance_delay_ms,
            lambda: self._on_advance_timer(ticket),
        )

    def _on_advance_timer(self, ticket: AdvanceTicket) -> None:
        with self._lock:
            if self.navigation is None or self.navigation.completed:
                return
            if ticket != self._current_ticket() or self.quiz.phase != SHOWING_FEEDBACK:
                logger.debug("Stale advance timer %r ignored", ticket)
                return
            self._pending_task = None
            self._quiz_transition(Advance())

    def _cancel_pending(self) -> None:
        if self._pending_task is not None:
            self._pending_task.cancel()
        self._pending_task = None

    # ── rendering ────────────────────────────────────────────────────

    @property
    def view(self) -> Dict[str, Any]:
        """View model of what is currently on screen."""
        with self._lock:
            self._require_loaded()
            if self.navigation.completed:
                return self._compose(build_completion_view(self.items, self.quiz_results))
            item = self.current_item
            if isinstance(item, QuizItem):
                delay = self.config.advance_delay_ms if self.config.is_timed else None
                return self._compose(build_quiz_view(item, self.quiz, auto_advance_ms=delay))
            return self._compose(build_lesson_view(item))

    def _compose(self, content: Dict[str, Any]) -> Dict[str, Any]:
        return {'navigation': build_navigation_view(self.navigation), 'content': content}

    def _render(self) -> None:
        self.renderer.render(self.view)

    # ── helpers ──────────────────────────────────────────────────────

    def _require_loaded(self) -> None:
        if self.navigation is None:
            raise RuntimeError('Content has not been loaded')

    def _require_quiz(self) -> QuizItem:
        self._require_loaded()
        item = self.current_item
        if self.navigation.completed or not isinstance(item, QuizItem) or self.quiz is None:
            raise RuntimeError('No quiz is active on the current step')
        return item

    def close(self) -> None:
        with self._lock:
            self._cancel_pending()
            if self._scheduler is not None:
                self._scheduler.shutdown()
