"""Pure view models for the quiz client.

Nothing here performs I/O: each function maps quiz state to plain data that a
front end (the console runner, or anything else) can draw.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

from assessment_app.modules.assessment.schemas import SanitizedQuestion, SubmissionResult

NONE_SELECTED = 'None selected'


@dataclass(frozen=True)
class OptionView:
    index: int
    letter: str
    label: str
    input_id: str
    input_name: str
    checked: bool


@dataclass(frozen=True)
class QuestionView:
    progress: str
    topic: str
    text: str
    code: Optional[str]
    input_type: str  # "radio" | "checkbox"
    options: Tuple[OptionView, ...]
    can_go_previous: bool
    show_next: bool
    show_submit: bool


@dataclass(frozen=True)
class ResultItemView:
    heading: str
    code: Optional[str]
    is_correct: bool
    badge: str
    user_answer: str
    correct_answer: str
    explanation: str


@dataclass(frozen=True)
class ResultsView:
    scoreline: str
    items: Tuple[ResultItemView, ...]


def option_letter(index: int) -> str:
    return chr(65 + index)


def format_answers(options: Sequence[str], indices: Sequence[int]) -> str:
    """``A) first; C) third`` or ``None selected``."""
    if not indices:
        return NONE_SELECTED
    parts = []
    for index in indices:
        label = options[index] if 0 <= index < len(options) else '?'
        parts.append(f"{option_letter(index)}) {label}")
    return '; '.join(parts)


def render_question(
    questions: Sequence[SanitizedQuestion],
    current_index: int,
    answers: Mapping[int, Sequence[int]],
) -> QuestionView:
    question = questions[current_index]
    selected = set(answers.get(current_index, ()))
    last_index = len(questions) - 1

    options = tuple(
        OptionView(
            index=index,
            letter=option_letter(index),
            label=label,
            input_id=f"q{current_index}_opt{index}",
            input_name=f"q_{current_index}",
            checked=index in selected,
        )
        for index, label in enumerate(question.options)
    )
    return QuestionView(
        progress=f"Question {current_index + 1} of {len(questions)}",
        topic=f"Topic: {question.topic}" if question.topic else '',
        text=question.text,
        code=question.code or None,
        input_type='checkbox' if question.multiple else 'radio',
        options=options,
        can_go_previous=current_index > 0,
        show_next=current_index < last_index,
        show_submit=current_index == last_index,
    )


def render_results(result: SubmissionResult) -> ResultsView:
    percent = int(result.percent + 0.5)
    items = tuple(
        ResultItemView(
            heading=f"Q{number}. {detail.question}",
            code=detail.code or None,
            is_correct=detail.is_correct,
            badge='Correct' if detail.is_correct else 'Incorrect',
            user_answer=format_answers(detail.options, detail.user),
            correct_answer=format_answers(detail.options, detail.correct),
            explanation=detail.explanation,
        )
        for number, detail in enumerate(result.detail, start=1)
    )
    return ResultsView(
        scoreline=f"Your Score: {result.score} / {result.total} ({percent}%)",
        items=items,
    )
