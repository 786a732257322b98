# File: assessment_app/config.py
# Application configuration loaded from the environment (and .env when present).

import os

from dotenv import load_dotenv

load_dotenv()

# Project root: assessment_app/ sits directly below it.
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DEFAULT_QUESTIONS_PATH = os.path.join(BASE_DIR, 'questions.json')

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    raw_value = os.environ.get(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in _TRUE_VALUES


def env_int(name: str, default: int) -> int:
    raw_value = os.environ.get(name)
    try:
        return int(raw_value)
    except (TypeError, ValueError):
        return default


class Config:
    """Configuration for the assessment Flask app."""

    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-replace-in-production'

    # Canonical question bank (with answers), read once at startup
    QUESTIONS_PATH = os.environ.get('QUESTIONS_PATH') or DEFAULT_QUESTIONS_PATH

    # Submissions are small JSON documents
    MAX_CONTENT_LENGTH = 1024 * 1024

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR')
    LOG_JSON = env_flag('LOG_JSON', False)

    # Email report sent after each graded submission
    NOTIFICATION_ENABLED = env_flag('NOTIFICATION_ENABLED', True)
    NOTIFICATION_ASYNC = env_flag('NOTIFICATION_ASYNC', True)
    NOTIFICATION_TRANSPORT = os.environ.get('NOTIFICATION_TRANSPORT', 'smtp').lower()

    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')
    MAIL_SENDER_NAME = os.environ.get('MAIL_SENDER_NAME', 'C Assessment')
    REPORT_TITLE = os.environ.get('REPORT_TITLE', 'C Concepts Assessment – Submission')

    MAIL_USERNAME = os.environ.get('MAIL_USERNAME') or os.environ.get('GMAIL_USER')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD') or os.environ.get('GMAIL_PASS')
    MAIL_TIMEOUT = env_int('MAIL_TIMEOUT', 10)

    SMTP_HOST = os.environ.get('SMTP_HOST', 'smtp.gmail.com')
    SMTP_PORT = env_int('SMTP_PORT', 465)
    SMTP_USE_SSL = env_flag('SMTP_USE_SSL', True)

    MAIL_API_URL = os.environ.get('MAIL_API_URL')
    MAIL_API_KEY = os.environ.get('MAIL_API_KEY')
