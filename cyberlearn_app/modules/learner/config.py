# File: cyberlearn_app/modules/learner/config.py

import os
import re
from dataclasses import dataclass
from typing import Optional, Tuple

ADVANCE_MANUAL = 'manual'
ADVANCE_TIMED = 'timed'

SOURCE_REMOTE = 'remote'
SOURCE_EMBEDDED = 'embedded'

DEFAULT_ADVANCE_DELAY_MS = 3000

_TIMED_PATTERN = re.compile(r'^timed(?:\((\d+)\))?$')


def parse_advance_mode(raw: str) -> Tuple[str, Optional[int]]:
    """
    Parse ``"manual"``, ``"timed"`` or ``"timed(2500)"``.

    Returns (mode, delay_ms); delay is None when not given.
    """
    value = (raw or '').strip().lower()
    if value == ADVANCE_MANUAL:
        return ADVANCE_MANUAL, None
    match = _TIMED_PATTERN.match(value)
    if match:
        return ADVANCE_TIMED, int(match.group(1)) if match.group(1) else None
    raise ValueError(f"Unsupported advance mode: {raw!r}")


@dataclass
class LearnerConfig:
    """
    Cấu hình mặc định cho engine học viên.
    """
    content_source: str = SOURCE_REMOTE
    api_base_url: str = 'http://localhost:3000'
    content_path: str = '/api/content'
    request_timeout: float = 10.0
    advance_mode: str = ADVANCE_MANUAL
    advance_delay_ms: int = DEFAULT_ADVANCE_DELAY_MS
    embedded_deck_path: Optional[str] = None
    snapshot_key: str = 'cyberlearn.progress'

    def __post_init__(self):
        if self.content_source not in (SOURCE_REMOTE, SOURCE_EMBEDDED):
            raise ValueError(f"Unsupported content source: {self.content_source!r}")
        mode, delay = parse_advance_mode(self.advance_mode)
        self.advance_mode = mode
        if delay is not None:
            self.advance_delay_ms = delay
        if self.advance_delay_ms < 0:
            raise ValueError('advance_delay_ms must not be negative')

    @property
    def is_timed(self) -> bool:
        return self.advance_mode == ADVANCE_TIMED

    @property
    def content_url(self) -> str:
        return self.api_base_url.rstrip('/') + '/' + self.content_path.lstrip('/')

    @classmethod
    def from_env(cls) -> 'LearnerConfig':
        """Build a config from ``LEARNER_*`` environment variables."""
        return cls(
            content_source=os.environ.get('LEARNER_CONTENT_SOURCE', SOURCE_REMOTE),
            api_base_url=os.environ.get('LEARNER_API_BASE_URL', 'http://localhost:3000'),
            request_timeout=float(os.environ.get('LEARNER_REQUEST_TIMEOUT', 10.0)),
            advance_mode=os.environ.get('LEARNER_ADVANCE_MODE', ADVANCE_MANUAL),
            embedded_deck_path=os.environ.get('LEARNER_EMBEDDED_DECK') or None,
        )
