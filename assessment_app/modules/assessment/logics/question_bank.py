# File: assessment_app/modules/assessment/logics/question_bank.py
# Loads and validates the canonical question bank, and produces the
# answer-stripped view sent to clients.

import json
import logging
from typing import Any, Dict, Iterable, List

from assessment_app.core.error_handlers import QuestionSourceLoadError
from ..schemas import Question, QuestionBank, SanitizedQuestion

logger = logging.getLogger(__name__)


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_question(raw: Dict[str, Any], position: int, source: str = None) -> Question:
    """Build a ``Question`` from its JSON form, enforcing the answer-key invariants."""

    def fail(reason: str):
        raise QuestionSourceLoadError(
            f"Question #{position + 1} is invalid: {reason}",
            source=source,
            position=position,
        )

    if not isinstance(raw, dict):
        fail("expected an object")

    text = raw.get('text')
    if not isinstance(text, str) or not text.strip():
        fail("'text' must be a non-empty string")

    options = raw.get('options')
    if not isinstance(options, list) or not options:
        fail("'options' must be a non-empty list")
    if not all(isinstance(option, str) for option in options):
        fail("every option must be a string")

    correct = raw.get('correct')
    if not isinstance(correct, list) or not correct:
        fail("'correct' must be a non-empty list of option indices")
    if not all(_is_index(index) for index in correct):
        fail("'correct' may only contain integers")
    out_of_range = [index for index in correct if not 0 <= index < len(options)]
    if out_of_range:
        fail(f"'correct' indices {out_of_range} are outside 0..{len(options) - 1}")

    correct_indices = tuple(sorted(set(correct)))
    multiple = bool(raw.get('multiple'))
    if not multiple and len(correct_indices) != 1:
        fail("a single-select question needs exactly one correct index")

    for optional_text in ('topic', 'code', 'explanation'):
        value = raw.get(optional_text)
        if value is not None and not isinstance(value, str):
            fail(f"'{optional_text}' must be a string")

    return Question(
        id=raw.get('id'),
        topic=raw.get('topic') or '',
        text=text,
        code=raw.get('code') or '',
        options=tuple(options),
        multiple=multiple,
        correct=correct_indices,
        explanation=raw.get('explanation') or '',
    )


def parse_question_bank(data: Any, source: str = None) -> QuestionBank:
    """Validate decoded JSON: a list of questions or ``{"questions": [...]}``."""
    if isinstance(data, dict) and 'questions' in data:
        data = data['questions']
    if not isinstance(data, list):
        raise QuestionSourceLoadError(
            "Question source must be a JSON list of questions",
            source=source,
        )

    questions = tuple(parse_question(raw, position, source) for position, raw in enumerate(data))
    if not questions:
        logger.warning("Question source %s contains no questions", source or '<memory>')
    return QuestionBank(questions=questions, source=source)


def load_question_bank(path: str) -> QuestionBank:
    """Read the canonical question bank from ``path``.

    Any problem (missing file, bad JSON, invalid question) raises
    ``QuestionSourceLoadError``; nothing partial is returned.
    """
    try:
        with open(path, 'r', encoding='utf-8') as handle:
            data = json.load(handle)
    except FileNotFoundError as exc:
        raise QuestionSourceLoadError(f"Question source not found: {path}", source=path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise QuestionSourceLoadError(f"Question source unreadable: {exc}", source=path) from exc
    except json.JSONDecodeError as exc:
        raise QuestionSourceLoadError(
            f"Question source is not valid JSON (line {exc.lineno}, column {exc.colno})",
            source=path,
        ) from exc

    return parse_question_bank(data, source=path)


def sanitize_questions(questions: Iterable[Question]) -> List[SanitizedQuestion]:
    """Strip ``correct`` and ``explanation``; order and other fields are kept."""
    return [question.sanitized() for question in questions]
