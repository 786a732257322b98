# File: assessment_app/modules/assessment/routes/api.py
from datetime import datetime, timezone

from flask import request, jsonify, current_app

from assessment_app.core.signals import submission_graded
from .. import assessment_bp as blueprint
from ..interface import AssessmentInterface
from ..schemas import ClientInfo


def _client_info() -> ClientInfo:
    forwarded = request.headers.get('X-Forwarded-For', '')
    ip = forwarded.split(',')[0].strip() if forwarded else (request.remote_addr or '')
    return ClientInfo(
        ip=ip,
        user_agent=request.headers.get('User-Agent') or 'unknown',
    )


@blueprint.route('/health', methods=['GET'])
def health():
    return jsonify({'ok': True, 'time': datetime.now(timezone.utc).isoformat()})


@blueprint.route('/questions', methods=['GET'])
def get_questions():
    questions = AssessmentInterface.get_public_questions()
    return jsonify({'questions': [question.to_dict() for question in questions]})


@blueprint.route('/submit', methods=['POST'])
def submit_answers():
    data = request.get_json(silent=True)
    answers = data.get('answers') if isinstance(data, dict) else None

    result = AssessmentInterface.grade(answers)
    client_info = _client_info()
    current_app.logger.info(
        f"Graded submission from {client_info.ip}: {result.score}/{result.total}"
    )

    try:
        submission_graded.send(current_app._get_current_object(), result=result, client_info=client_info)
    except Exception as e:
        current_app.logger.error(f"submission_graded handler failed: {e}", exc_info=True)

    return jsonify(result.to_dict())
