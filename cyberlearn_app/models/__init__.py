"""Database models package for CyberLearn."""

from ..core.extensions import db

from .content import Lesson, Question

__all__ = ["db", "Lesson", "Question"]
