"""
Tests for loading the canonical question bank

Tests cover:
- Parsing and normalization of valid question files
- Fail-fast behaviour for missing or malformed sources
- Sanitized (answer-free) view
"""

import json

import pytest

from assessment_app import create_app
from assessment_app.core.error_handlers import QuestionSourceLoadError
from assessment_app.modules.assessment.logics.question_bank import (
    load_question_bank,
    parse_question_bank,
    sanitize_questions,
)
from conftest import TestConfig


def _write(tmp_path, data, name='questions.json'):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding='utf-8')
    return str(path)


def _question(**overrides):
    raw = {
        'text': 'Pick one',
        'options': ['a', 'b', 'c'],
        'correct': [0],
    }
    raw.update(overrides)
    return raw


class TestLoadQuestionBank:
    """Loading questions from disk."""

    def test_loads_fixture_in_order(self, questions):
        assert [q.text for q in questions] == [
            'Which option is correct?',
            'Select every true statement.',
            'What does this print?',
        ]

    def test_defaults_for_optional_fields(self, questions):
        third = questions[2]
        assert third.id is None
        assert third.multiple is False
        assert third.code == 'printf("%d", 1 << 3);'
        assert questions[0].code == ''

    def test_correct_indices_are_sorted(self, questions):
        assert questions[1].correct == (0, 2)

    def test_duplicate_correct_indices_collapse(self, tmp_path):
        path = _write(tmp_path, [_question(correct=[1, 1])])
        bank = load_question_bank(path)
        assert bank.questions[0].correct == (1,)

    def test_accepts_wrapped_question_list(self, tmp_path):
        path = _write(tmp_path, {'questions': [_question()]})
        assert len(load_question_bank(path)) == 1

    def test_empty_list_is_allowed(self, tmp_path):
        path = _write(tmp_path, [])
        assert len(load_question_bank(path)) == 0

    def test_multiple_is_coerced_to_bool(self, tmp_path):
        path = _write(tmp_path, [_question(multiple=1, correct=[0, 2])])
        assert load_question_bank(path).questions[0].multiple is True


class TestQuestionSourceFailures:
    """Any problem with the source aborts loading."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(QuestionSourceLoadError) as excinfo:
            load_question_bank(str(tmp_path / 'nope.json'))
        assert 'not found' in excinfo.value.message

    def test_invalid_json(self, tmp_path):
        path = tmp_path / 'broken.json'
        path.write_text('[{"text": ', encoding='utf-8')
        with pytest.raises(QuestionSourceLoadError):
            load_question_bank(str(path))

    def test_wrong_top_level_shape(self):
        with pytest.raises(QuestionSourceLoadError):
            parse_question_bank({'text': 'not a list'})

    @pytest.mark.parametrize('overrides', [
        {'text': ''},
        {'options': []},
        {'options': ['a', 2]},
        {'correct': []},
        {'correct': [3]},
        {'correct': [-1]},
        {'correct': [True]},
        {'correct': ['1']},
        {'correct': [0, 1]},
        {'explanation': 42},
    ])
    def test_invalid_question_is_rejected(self, overrides):
        with pytest.raises(QuestionSourceLoadError):
            parse_question_bank([_question(**overrides)])

    def test_error_names_position(self):
        with pytest.raises(QuestionSourceLoadError) as excinfo:
            parse_question_bank([_question(), _question(correct=[9])], source='bank.json')
        assert excinfo.value.position == 1
        assert 'Question #2' in excinfo.value.message
        assert excinfo.value.details == {'source': 'bank.json', 'position': 1}

    def test_create_app_aborts_on_bad_source(self, tmp_path):
        class BrokenConfig(TestConfig):
            QUESTIONS_PATH = str(tmp_path / 'missing.json')

        with pytest.raises(QuestionSourceLoadError):
            create_app(BrokenConfig)


class TestSanitize:
    """The client-visible view never carries the answer key."""

    def test_strips_answer_key_and_explanation(self, questions):
        for sanitized in sanitize_questions(questions):
            data = sanitized.to_dict()
            assert 'correct' not in data
            assert 'explanation' not in data

    def test_keeps_order_and_fields(self, questions):
        sanitized = sanitize_questions(questions)
        assert [s.text for s in sanitized] == [q.text for q in questions]
        assert sanitized[1].to_dict() == {
            'id': 'q-static',
            'topic': 'Storage',
            'text': 'Select every true statement.',
            'code': '',
            'options': ['first', 'second', 'third', 'fourth'],
            'multiple': True,
        }
