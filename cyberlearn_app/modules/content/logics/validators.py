"""
Payload validation for lesson and question mutations.
Pure logic, no Database access.
"""

from typing import Any, List, Optional, Tuple

from cyberlearn_app.core.error_handlers import ValidationError

OPTION_COUNT = 4


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_lesson_payload(title: Any, content: Any) -> Tuple[str, str]:
    """Return trimmed (title, content) or raise ValidationError."""
    if title is None or content is None or title == '' or content == '':
        raise ValidationError('Title and content are required')
    if _is_blank(title) or _is_blank(content):
        raise ValidationError('Title and content cannot be empty')
    return title.strip(), content.strip()


def validate_question_payload(question: Any, options: Any, correct: Any) -> Tuple[str, List[str], int]:
    """
    Return trimmed (question, options, correct) or raise ValidationError.

    ``correct`` must be a real integer; JSON ``true``/``1.0`` are rejected.
    """
    if not question or not options or correct is None:
        raise ValidationError('Question, options, and correct answer are required')

    if _is_blank(question):
        raise ValidationError('Question text cannot be empty')

    if not isinstance(options, list) or len(options) != OPTION_COUNT:
        raise ValidationError(f'Exactly {OPTION_COUNT} options are required')

    if isinstance(correct, bool) or not isinstance(correct, int) or not 0 <= correct < OPTION_COUNT:
        raise ValidationError(f'Correct answer must be an integer between 0 and {OPTION_COUNT - 1}')

    if any(_is_blank(option) for option in options):
        raise ValidationError('All options must have content')

    return question.strip(), [option.strip() for option in options], correct


def parse_record_id(raw_id: Optional[str], label: str) -> int:
    """Parse a path segment into an integer id."""
    try:
        return int(str(raw_id).strip())
    except (TypeError, ValueError):
        raise ValidationError(f'Invalid {label} ID')
