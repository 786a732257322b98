"""HTTP client for the assessment API with quiz navigation state."""

from .controller import QuizController, QuizPhase, QuizState
from .errors import LoadError, QuizClientError, QuizFlowError, SubmissionError

__all__ = [
    "LoadError",
    "QuizClientError",
    "QuizController",
    "QuizFlowError",
    "QuizPhase",
    "QuizState",
    "SubmissionError",
]
