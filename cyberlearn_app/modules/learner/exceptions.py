"""Errors raised by the learner engine."""


class LearnerError(Exception):
    """Base class for learner engine errors."""


class ContentUnavailableError(LearnerError):
    """Loading produced no content items; the learner has to reload the page."""

    def __init__(self, message: str = 'No content available. Please contact the administrator.'):
        self.message = message
        super().__init__(message)


class SelectionRequiredError(LearnerError):
    """An answer was submitted before any option was selected."""

    def __init__(self, message: str = 'Please select an answer before submitting.'):
        self.message = message
        super().__init__(message)
