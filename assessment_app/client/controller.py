# File: assessment_app/client/controller.py
# Quiz client: owns the in-memory quiz state and talks to the assessment API.

import enum
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import requests

from assessment_app.modules.assessment.schemas import SanitizedQuestion, SubmissionResult
from .errors import LoadError, QuizFlowError, SubmissionError
from .view import QuestionView, ResultsView, render_question, render_results

logger = logging.getLogger(__name__)


class QuizPhase(enum.Enum):
    WELCOME = 'welcome'
    QUIZ = 'quiz'
    RESULTS = 'results'


@dataclass
class QuizState:
    """Everything one quiz run needs; discarded on retry."""
    questions: List[SanitizedQuestion] = field(default_factory=list)
    current_index: int = 0
    answers: Dict[int, List[int]] = field(default_factory=dict)
    phase: QuizPhase = QuizPhase.WELCOME
    result: Optional[SubmissionResult] = None

    @property
    def current_question(self) -> SanitizedQuestion:
        return self.questions[self.current_index]

    def selection(self, question_index: int) -> List[int]:
        return list(self.answers.get(question_index, []))


class QuizController:
    """
    Client-side quiz flow: Welcome -> Quiz -> Results -> Welcome.

    Transition methods only touch ``self.state`` and can be bound to any UI
    (the console runner, or tests driving it directly).
    """

    def __init__(self, base_url: str = 'http://localhost:5000', session=None, timeout: float = 10):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout
        self.state = QuizState()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _require_phase(self, phase: QuizPhase, action: str) -> None:
        if self.state.phase is not phase:
            raise QuizFlowError(f"Cannot {action} while in {self.state.phase.value} phase")

    # ------------------------------------------------------------------
    # Network
    # ------------------------------------------------------------------
    def load_questions(self) -> List[SanitizedQuestion]:
        """Fetch the sanitized question list. Raises ``LoadError``; state is untouched."""
        try:
            response = self.session.get(self._url('/api/questions'), timeout=self.timeout)
        except requests.RequestException as exc:
            raise LoadError(f"Could not reach the server: {exc}") from exc

        if not response.ok:
            raise LoadError(f"Failed to load questions (HTTP {response.status_code})")
        try:
            data = response.json()
        except ValueError as exc:
            raise LoadError("Server returned an invalid question list") from exc

        raw_questions = data.get('questions') if isinstance(data, dict) else None
        if not isinstance(raw_questions, list):
            raise LoadError("Server response has no question list")
        try:
            return [SanitizedQuestion.from_dict(raw) for raw in raw_questions]
        except (AttributeError, TypeError) as exc:
            raise LoadError("Server returned a malformed question") from exc

    def start(self) -> None:
        """Fetch questions and enter the quiz at question 0."""
        self._require_phase(QuizPhase.WELCOME, 'start a quiz')
        questions = self.load_questions()
        if not questions:
            raise LoadError("The server has no questions to ask")

        self.state = QuizState(questions=questions, phase=QuizPhase.QUIZ)
        logger.info("Quiz started with %d questions", len(questions))

    def submit(self) -> SubmissionResult:
        """Send the answers for grading. On failure raises ``SubmissionError`` and keeps state."""
        self._require_phase(QuizPhase.QUIZ, 'submit')
        payload = {'answers': self.build_submission_payload()}
        try:
            response = self.session.post(self._url('/api/submit'), json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            raise SubmissionError(f"Could not reach the server: {exc}") from exc

        if not response.ok:
            raise SubmissionError(f"Submission failed (HTTP {response.status_code})")
        try:
            result = SubmissionResult.from_dict(response.json())
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            raise SubmissionError("Server returned an invalid result") from exc

        self.state.result = result
        self.state.phase = QuizPhase.RESULTS
        logger.info("Submitted: %d/%d", result.score, result.total)
        return result

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------
    def record_selection(self, question_index: int, option_index: int, checked: bool) -> List[int]:
        """Apply one input change and return the resulting selection for the question."""
        self._require_phase(QuizPhase.QUIZ, 'record a selection')
        if not 0 <= question_index < len(self.state.questions):
            raise ValueError(f"No question at index {question_index}")
        question = self.state.questions[question_index]
        if not 0 <= option_index < len(question.options):
            raise ValueError(f"Question {question_index} has no option {option_index}")

        if question.multiple:
            selected = set(self.state.answers.get(question_index, []))
            if checked:
                selected.add(option_index)
            else:
                selected.discard(option_index)
            selection = sorted(selected)
        else:
            selection = [option_index] if checked else []

        self.state.answers[question_index] = selection
        return list(selection)

    def toggle_option(self, option_index: int) -> List[int]:
        """Flip one option of the current question, like clicking its input."""
        current = self.state.current_index
        checked = option_index not in self.state.answers.get(current, [])
        return self.record_selection(current, option_index, checked)

    def go_next(self) -> bool:
        self._require_phase(QuizPhase.QUIZ, 'navigate')
        if self.state.current_index < len(self.state.questions) - 1:
            self.state.current_index += 1
            return True
        return False

    def go_previous(self) -> bool:
        self._require_phase(QuizPhase.QUIZ, 'navigate')
        if self.state.current_index > 0:
            self.state.current_index -= 1
            return True
        return False

    def build_submission_payload(self) -> List[List[int]]:
        """One entry per question; skipped questions become empty lists."""
        return [self.state.selection(index) for index in range(len(self.state.questions))]

    def retry(self) -> None:
        """Leave the results and go back to the welcome screen with fresh answers."""
        self._require_phase(QuizPhase.RESULTS, 'retry')
        self.state = QuizState(questions=self.state.questions, phase=QuizPhase.WELCOME)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def render_current(self) -> QuestionView:
        self._require_phase(QuizPhase.QUIZ, 'render a question')
        return render_question(self.state.questions, self.state.current_index, self.state.answers)

    def render_results(self) -> ResultsView:
        self._require_phase(QuizPhase.RESULTS, 'render results')
        return render_results(self.state.result)
