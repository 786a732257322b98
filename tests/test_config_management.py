import json
import logging
import os

import pytest

from assessment_app.config import env_flag, env_int
from assessment_app.core.logging_config import PACKAGE_LOGGER, setup_logging


@pytest.mark.parametrize('raw,expected', [
    ('1', True), ('true', True), ('YES', True), (' on ', True),
    ('0', False), ('false', False), ('', False), ('maybe', False),
])
def test_env_flag_parses_common_spellings(monkeypatch, raw, expected):
    monkeypatch.setenv('ASSESSMENT_TEST_FLAG', raw)
    assert env_flag('ASSESSMENT_TEST_FLAG') is expected


def test_env_flag_default_when_unset(monkeypatch):
    monkeypatch.delenv('ASSESSMENT_TEST_FLAG', raising=False)
    assert env_flag('ASSESSMENT_TEST_FLAG', True) is True


def test_env_int_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv('ASSESSMENT_TEST_PORT', 'not-a-port')
    assert env_int('ASSESSMENT_TEST_PORT', 465) == 465
    monkeypatch.setenv('ASSESSMENT_TEST_PORT', '587')
    assert env_int('ASSESSMENT_TEST_PORT', 465) == 587


def test_app_uses_test_config(app):
    assert app.config['TESTING'] is True
    assert app.config['MAX_CONTENT_LENGTH'] == 1024 * 1024
    assert app.config['QUESTIONS_PATH'].endswith(os.path.join('fixtures', 'questions.json'))


def test_setup_logging_writes_rotating_file(tmp_path):
    logger = setup_logging(log_level='DEBUG', log_dir=str(tmp_path))
    try:
        logger.getChild('tests').debug('hello from tests')
        for handler in logger.handlers:
            handler.flush()
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.DEBUG
        log_file = tmp_path / 'assessment.log'
        assert 'hello from tests' in log_file.read_text(encoding='utf-8')
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()


def test_setup_logging_json_format(tmp_path):
    logger = setup_logging(log_level='INFO', log_dir=str(tmp_path), json_format=True)
    try:
        logger.getChild('tests').info('structured line')
        for handler in logger.handlers:
            handler.flush()
        last_line = (tmp_path / 'assessment.log').read_text(encoding='utf-8').splitlines()[-1]
        record = json.loads(last_line)
        assert record['level'] == 'INFO'
        assert record['message'] == 'structured line'
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()


def test_configure_logging_passes_log_json(app, monkeypatch):
    from assessment_app.core import bootstrap

    calls = []
    monkeypatch.setattr(bootstrap, 'setup_logging', lambda **kwargs: calls.append(kwargs))
    app.config['LOG_JSON'] = True
    bootstrap.configure_logging(app)
    assert calls == [{'log_level': 'WARNING', 'log_dir': None, 'json_format': True}]
