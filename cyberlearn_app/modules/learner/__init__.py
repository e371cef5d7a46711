"""
Learner engine: lesson/quiz navigation driven entirely from in-memory state.

Framework-agnostic; no Flask imports. The server is only reached through a
``ContentSource``.
"""

from .config import LearnerConfig
from .controller import LearnerController
from .exceptions import ContentUnavailableError, SelectionRequiredError
from .services.content_source import build_content_source


def create_learner(config=None, renderer=None, storage=None, session=None) -> LearnerController:
    """Wire a controller from configuration."""
    from .services.progress_store import ProgressSnapshotStore

    config = config or LearnerConfig.from_env()
    progress_store = ProgressSnapshotStore(storage, key=config.snapshot_key) if storage is not None else None
    return LearnerController(
        build_content_source(config, session=session),
        config=config,
        renderer=renderer,
        progress_store=progress_store,
    )


__all__ = [
    "ContentUnavailableError",
    "LearnerConfig",
    "LearnerController",
    "SelectionRequiredError",
    "create_learner",
]
