import threading

from cyberlearn_app.modules.learner.engine.scheduling import APSchedulerAdvanceScheduler


def test_callback_runs_after_delay():
    fired = threading.Event()
    scheduler = APSchedulerAdvanceScheduler()
    try:
        scheduler.schedule(10, fired.set)
        assert fired.wait(timeout=5)
    finally:
        scheduler.shutdown()


def test_cancelled_task_never_runs():
    fired = threading.Event()
    scheduler = APSchedulerAdvanceScheduler()
    try:
        task = scheduler.schedule(500, fired.set)
        task.cancel()
        task.cancel()
        assert not fired.wait(timeout=1)
    finally:
        scheduler.shutdown()
