import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from assessment_app import create_app
from assessment_app.config import Config

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'fixtures')


class TestConfig(Config):
    TESTING = True
    QUESTIONS_PATH = os.path.join(FIXTURES_DIR, 'questions.json')
    LOG_LEVEL = 'WARNING'
    LOG_DIR = None
    LOG_JSON = False
    NOTIFICATION_ENABLED = False
    NOTIFICATION_ASYNC = False
    NOTIFICATION_TRANSPORT = 'smtp'
    ADMIN_EMAIL = 'admin@example.com'
    MAIL_USERNAME = 'quiz@example.com'
    MAIL_PASSWORD = 'app-password'
    MAIL_API_URL = None
    MAIL_API_KEY = None


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def questions(app):
    from assessment_app.modules.assessment.interface import AssessmentInterface
    return AssessmentInterface.get_question_bank().questions
