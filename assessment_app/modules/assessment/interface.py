# modules/assessment/interface.py
from typing import Any, List

from flask import current_app

from assessment_app.core.bootstrap import QUESTION_BANK_EXTENSION
from .schemas import QuestionBank, SanitizedQuestion, SubmissionResult


class AssessmentInterface:
    """
    Public entry point of the assessment module for routes and other modules.
    """

    @staticmethod
    def get_question_bank() -> QuestionBank:
        """Question bank loaded by the app factory."""
        return current_app.extensions[QUESTION_BANK_EXTENSION]

    @staticmethod
    def get_public_questions() -> List[SanitizedQuestion]:
        from .logics.question_bank import sanitize_questions
        return sanitize_questions(AssessmentInterface.get_question_bank())

    @staticmethod
    def grade(answers: Any) -> SubmissionResult:
        from .logics.grading import grade_submission
        return grade_submission(AssessmentInterface.get_question_bank().questions, answers)
