# File: assessment_app/modules/assessment/logics/grading.py
# Stateless grading of a submitted answer payload against the question bank.

import logging
from typing import Any, List, Optional, Sequence, Tuple

from ..schemas import GradingDetail, Question, SubmissionResult

logger = logging.getLogger(__name__)


def _coerce_index(value: Any) -> Optional[int]:
    """Return ``value`` as an int, or None when it is not an integer-like value."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.isdecimal():
            return int(stripped)
    return None


def normalize_selection(entry: Any, option_count: int) -> Tuple[int, ...]:
    """
    Turn one submitted entry into a sorted tuple of distinct, in-range option indices.

    A non-sequence entry yields an empty selection. Items that are not integers
    (or integral numbers / digit strings) or fall outside ``[0, option_count)``
    are dropped.
    """
    if not isinstance(entry, (list, tuple)):
        if entry is not None:
            logger.debug("Malformed answer entry %r treated as unanswered", entry)
        return ()

    indices = set()
    for item in entry:
        index = _coerce_index(item)
        if index is None or not 0 <= index < option_count:
            logger.debug("Discarded answer item %r (options: %d)", item, option_count)
            continue
        indices.add(index)
    return tuple(sorted(indices))


def compute_percent(score: int, total: int) -> float:
    if total == 0:
        return 0.0
    return score / total * 100


def grade_question(question: Question, entry: Any) -> GradingDetail:
    submitted = normalize_selection(entry, len(question.options))
    return GradingDetail(
        question=question.text,
        code=question.code,
        options=question.options,
        user=submitted,
        correct=question.correct,
        is_correct=set(submitted) == set(question.correct),
        explanation=question.explanation,
        topic=question.topic,
    )


def grade_submission(questions: Sequence[Question], answers: Any) -> SubmissionResult:
    """
    Grade ``answers`` against ``questions`` by position.

    Missing entries count as unanswered, extra entries are ignored and a
    non-list payload grades every question as unanswered. The question bank is
    never modified.
    """
    if not isinstance(answers, (list, tuple)):
        if answers is not None:
            logger.debug("Submission payload %r is not a list; grading as unanswered", type(answers).__name__)
        answers = ()

    details: List[GradingDetail] = []
    for position, question in enumerate(questions):
        entry = answers[position] if position < len(answers) else None
        details.append(grade_question(question, entry))

    score = sum(1 for detail in details if detail.is_correct)
    total = len(details)
    return SubmissionResult(
        score=score,
        total=total,
        percent=compute_percent(score, total),
        detail=tuple(details),
    )
