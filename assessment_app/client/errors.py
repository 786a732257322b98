class QuizClientError(Exception):
    """Base class for errors raised by the quiz client."""


class LoadError(QuizClientError):
    """Questions could not be fetched; the quiz must not start."""


class SubmissionError(QuizClientError):
    """Answers could not be submitted; quiz state is kept for a retry."""


class QuizFlowError(QuizClientError):
    """An operation was called in a phase that does not allow it."""
