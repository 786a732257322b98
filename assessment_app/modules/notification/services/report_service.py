"""
Report Service.

Formats a graded submission into the administrator email: subject line,
HTML body (Jinja template) and a plain-text alternative.
"""

import math
from typing import Any, Mapping, Sequence

from flask import render_template

from assessment_app.modules.assessment.schemas import ClientInfo, SubmissionResult
from ..schemas import SubmissionReport

NO_ANSWER = '—'


def rounded_percent(percent: float) -> int:
    """Round half up, the way the score is shown to people."""
    return int(math.floor(percent + 0.5))


def format_letters(indices: Sequence[int]) -> str:
    """``[0, 2]`` -> ``"A, C"``; empty -> ``NO_ANSWER``."""
    return ', '.join(chr(65 + index) for index in indices) or NO_ANSWER


def build_subject(result: SubmissionResult) -> str:
    return f"Assessment Result – {result.score}/{result.total} ({rounded_percent(result.percent)}%)"


def build_text_body(result: SubmissionResult, client_info: ClientInfo, title: str) -> str:
    lines = [
        title,
        '',
        f"Score: {result.score} / {result.total} ({rounded_percent(result.percent)}%)",
        f"Time: {client_info.submitted_at.isoformat()}",
        f"Client: IP {client_info.ip}, UA {client_info.user_agent}",
        '',
    ]
    for number, detail in enumerate(result.detail, start=1):
        mark = 'correct' if detail.is_correct else 'incorrect'
        topic = f" [{detail.topic}]" if detail.topic else ''
        lines.append(f"{number}.{topic} {detail.question}")
        lines.append(f"   User: {format_letters(detail.user)} | Correct: {format_letters(detail.correct)} | {mark}")
        if detail.explanation:
            lines.append(f"   {detail.explanation}")
    return '\n'.join(lines)


def build_report(
    result: SubmissionResult,
    client_info: ClientInfo,
    config: Mapping[str, Any],
) -> SubmissionReport:
    """Render the report. Needs an application context for the HTML template."""
    title = config.get('REPORT_TITLE') or 'Assessment – Submission'
    rows = [
        {
            'number': number,
            'topic': detail.topic,
            'question': detail.question,
            'user': format_letters(detail.user),
            'correct': format_letters(detail.correct),
            'is_correct': detail.is_correct,
            'explanation': detail.explanation,
        }
        for number, detail in enumerate(result.detail, start=1)
    ]
    html_body = render_template(
        'email/submission_report.html',
        title=title,
        result=result,
        percent=rounded_percent(result.percent),
        client_info=client_info,
        rows=rows,
    )
    sender_name = config.get('MAIL_SENDER_NAME') or 'Assessment'
    return SubmissionReport(
        sender=f'"{sender_name}" <{config.get("MAIL_USERNAME")}>',
        recipient=config.get('ADMIN_EMAIL'),
        subject=build_subject(result),
        html_body=html_body,
        text_body=build_text_body(result, client_info, title),
    )
