"""Best-effort progress snapshot in session-scoped storage."""

import json
import logging
from datetime import datetime, timezone
from typing import MutableMapping, Optional

from ..engine.navigation import NavigationState

logger = logging.getLogger(__name__)


class ProgressSnapshotStore:
    """
    Keeps ``{currentStep, totalSteps, timestamp}`` under one key of a
    session-scoped mapping. Storage failures are logged and ignored; a
    snapshot is restored only when ``totalSteps`` matches the fresh sequence.
    """

    def __init__(self, storage: Optional[MutableMapping[str, str]] = None, key: str = 'cyberlearn.progress'):
        self.storage = storage if storage is not None else {}
        self.key = key

    def save(self, state: NavigationState) -> None:
        snapshot = {
            'currentStep': state.current_step,
            'totalSteps': state.total_steps,
            'timestamp': datetime.now(timezone.utc).isoformat(),
        }
        try:
            self.storage[self.key] = json.dumps(snapshot)
        except (TypeError, ValueError, OSError) as exc:
            logger.warning("Could not save progress snapshot: %s", exc)

    def restore(self, total_steps: int) -> Optional[int]:
        """Return the saved step if it belongs to a sequence of this length."""
        try:
            raw = self.storage.get(self.key)
            if raw is None:
                return None
            snapshot = json.loads(raw)
            saved_total = int(snapshot['totalSteps'])
            saved_step = int(snapshot['currentStep'])
        except (KeyError, TypeError, ValueError, OSError) as exc:
            logger.warning("Discarding unreadable progress snapshot: %s", exc)
            return None

        if saved_total != total_steps or not 0 <= saved_step < total_steps:
            logger.debug("Progress snapshot for %d steps ignored (now %d)", saved_total, total_steps)
            return None
        return saved_step

    def clear(self) -> None:
        self.storage.pop(self.key, None)
