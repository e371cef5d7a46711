# File: cyberlearn_app/modules/learner/engine/scheduling.py
"""
Advance Scheduling
==================
Timed quiz advance runs one delayed callback per answered question.

The controller never trusts a callback blindly: every task carries an
``AdvanceTicket`` captured at schedule time, and the callback is a no-op
unless that ticket still matches the live quiz state.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdvanceTicket:
    """Identity of the question a timer was scheduled for."""

    quiz_epoch: int
    step: int
    question_index: int


class ScheduledTask(ABC):
    @abstractmethod
    def cancel(self) -> None:
        """Cancel the task; a task that already ran is left alone."""


class AdvanceScheduler(ABC):
    """Contract for anything that can run a callback after a delay."""

    @abstractmethod
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        ...

    def shutdown(self) -> None:
        """Release background resources."""


class _APSchedulerTask(ScheduledTask):
    def __init__(self, scheduler: BackgroundScheduler, job_id: str):
        self._scheduler = scheduler
        self._job_id = job_id

    def cancel(self) -> None:
        try:
            self._scheduler.remove_job(self._job_id)
        except JobLookupError:
            # Already fired or removed
            pass


class APSchedulerAdvanceScheduler(AdvanceScheduler):
    """One-shot ``date`` jobs on an APScheduler ``BackgroundScheduler``."""

    def __init__(self, scheduler: Optional[BackgroundScheduler] = None):
        self._scheduler = scheduler or BackgroundScheduler(timezone=timezone.utc)
        self._owns_scheduler = scheduler is None

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        if not self._scheduler.running:
            self._scheduler.start()
        run_date = datetime.now(timezone.utc) + timedelta(milliseconds=delay_ms)
        job = self._scheduler.add_job(callback, trigger='date', run_date=run_date)
        logger.debug("Scheduled quiz advance job %s in %d ms", job.id, delay_ms)
        return _APSchedulerTask(self._scheduler, job.id)

    def shutdown(self) -> None:
        if self._owns_scheduler and self._scheduler.running:
            self._scheduler.shutdown(wait=False)
