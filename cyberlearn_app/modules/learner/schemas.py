from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

OPTION_LETTERS = 'ABCD'
OPTION_COUNT = 4


def option_letter(index: int) -> str:
    return OPTION_LETTERS[index] if 0 <= index < len(OPTION_LETTERS) else str(index + 1)


@dataclass(frozen=True)
class QuestionData:
    """A multiple choice question as the learner sees it."""
    question: str
    options: Tuple[str, ...]
    correct: int
    id: Optional[int] = None
    feedback_correct: Optional[str] = None
    feedback_incorrect: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'QuestionData':
        """Raises ValueError unless there are 4 options and ``correct`` indexes one."""
        if not isinstance(data, dict):
            raise ValueError(f"Question must be an object, got {type(data).__name__}")
        options = tuple(data['options'])
        correct = data['correct']
        if len(options) != OPTION_COUNT:
            raise ValueError(f"Question needs exactly {OPTION_COUNT} options, got {len(options)}")
        if isinstance(correct, bool) or not isinstance(correct, int) or not 0 <= correct < OPTION_COUNT:
            raise ValueError(f"Correct answer index out of range: {correct!r}")
        return cls(
            id=data.get('id'),
            question=data['question'],
            options=options,
            correct=correct,
            feedback_correct=data.get('feedback_correct'),
            feedback_incorrect=data.get('feedback_incorrect'),
        )

    @property
    def correct_option_text(self) -> str:
        return self.options[self.correct]

    def feedback_for(self, is_correct: bool) -> str:
        if is_correct:
            return self.feedback_correct or 'Well done!'
        if self.feedback_incorrect:
            return self.feedback_incorrect
        return f"The correct answer is: {option_letter(self.correct)}. {self.correct_option_text}"


@dataclass(frozen=True)
class LessonItem:
    id: Optional[int]
    title: str
    content: str
    kind: str = 'lesson'


@dataclass(frozen=True)
class QuizItem:
    title: str
    questions: Tuple[QuestionData, ...]
    kind: str = 'quiz'


ContentItem = Union[LessonItem, QuizItem]
