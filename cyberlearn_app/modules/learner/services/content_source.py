"""
Content sources for the learner engine.

``RemoteContentSource`` fetches lessons and questions from ``GET /api/content``
and interleaves them. ``EmbeddedContentSource`` reads a fixed slide deck whose
quiz data ships with the package. Both return the display sequence.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from typing import List, Optional

import requests

from ..config import LearnerConfig, SOURCE_EMBEDDED
from ..engine.assembly import build_content_sequence
from ..exceptions import ContentUnavailableError
from ..schemas import ContentItem, LessonItem, QuestionData, QuizItem

logger = logging.getLogger(__name__)

DEFAULT_DECK_PATH = os.path.join(os.path.dirname(__file__), '..', 'data', 'embedded_deck.json')

LOAD_FAILED_MESSAGE = 'Failed to load content. Please refresh the page.'


class ContentSource(ABC):
    @abstractmethod
    def load(self) -> List[ContentItem]:
        """Return the ordered content sequence (may be empty)."""


class RemoteContentSource(ContentSource):
    """Fetches ``{lessons, questions}`` once over HTTP."""

    def __init__(self, url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def load(self) -> List[ContentItem]:
        logger.info("Fetching content from %s", self.url)
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            logger.error("Error loading content: %s", exc)
            raise ContentUnavailableError(LOAD_FAILED_MESSAGE) from exc
        except ValueError as exc:
            logger.error("Content response is not valid JSON: %s", exc)
            raise ContentUnavailableError(LOAD_FAILED_MESSAGE) from exc

        if not isinstance(data, dict):
            raise ContentUnavailableError(LOAD_FAILED_MESSAGE)
        lessons = data.get('lessons') or []
        questions = data.get('questions') or []
        try:
            sequence = build_content_sequence(lessons, questions)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.error("Malformed content payload: %s", exc)
            raise ContentUnavailableError(LOAD_FAILED_MESSAGE) from exc

        logger.info("Loaded %d content items, %d quiz questions", len(sequence), len(questions))
        return sequence


class EmbeddedContentSource(ContentSource):
    """Fixed slide deck with embedded quiz data."""

    def __init__(self, deck_path: Optional[str] = None):
        self.deck_path = deck_path or DEFAULT_DECK_PATH

    def load(self) -> List[ContentItem]:
        try:
            with open(self.deck_path, encoding='utf-8') as handle:
                deck = json.load(handle)
        except (OSError, ValueError) as exc:
            logger.error("Could not read slide deck %s: %s", self.deck_path, exc)
            raise ContentUnavailableError(LOAD_FAILED_MESSAGE) from exc

        try:
            if not isinstance(deck, dict):
                raise ValueError(f"Deck must be an object, got {type(deck).__name__}")
            sequence = [self._parse_item(raw) for raw in deck.get('items', [])]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.error("Malformed slide deck %s: %s", self.deck_path, exc)
            raise ContentUnavailableError(LOAD_FAILED_MESSAGE) from exc

        logger.info("Loaded %d slides from embedded deck", len(sequence))
        return sequence

    @staticmethod
    def _parse_item(raw: dict) -> ContentItem:
        kind = raw.get('type')
        if kind == 'lesson':
            return LessonItem(id=raw.get('id'), title=raw['title'], content=raw['content'])
        if kind == 'quiz':
            questions = tuple(QuestionData.from_dict(q) for q in raw['questions'])
            if not questions:
                raise ValueError(f"Quiz {raw.get('title')!r} has no questions")
            return QuizItem(title=raw['title'], questions=questions)
        raise ValueError(f"Unknown slide type: {kind!r}")


def build_content_source(config: LearnerConfig, session: Optional[requests.Session] = None) -> ContentSource:
    """Pick the content source named by ``config.content_source``."""
    if config.content_source == SOURCE_EMBEDDED:
        return EmbeddedContentSource(config.embedded_deck_path)
    return RemoteContentSource(config.content_url, timeout=config.request_timeout, session=session)
