# tests/test_use_case.py
"""
Unit tests for the RealizeSentence use case and its wiring.
"""

from unittest.mock import MagicMock

import pytest
from structlog.testing import capture_logs

from realizer.core.domain.constituent import Group, Word
from realizer.core.domain.exceptions import DomainError, InvalidClauseError
from realizer.core.domain.features import Category, ClauseFeatures, InterrogativeType
from realizer.core.domain.models import ClauseSpec, Sentence
from realizer.core.ports import SentenceEngine
from realizer.core.use_cases.realize_sentence import RealizeSentence


@pytest.fixture
def mock_engine():
    """Returns a mock implementation of the sentence engine port."""
    engine = MagicMock(spec=SentenceEngine)
    engine.lang_code = "en"
    engine.realize.return_value = Group(Category.LIST, members=[Word(Category.CANNED_TEXT, text="hi")])
    engine.format.return_value = "Hi."
    return engine


def test_execute_returns_sentence(engine, john_kisses_mary) -> None:
    sentence = RealizeSentence(engine).execute(john_kisses_mary)

    assert isinstance(sentence, Sentence)
    assert sentence.text == "John kisses Mary."
    assert sentence.lang_code == "en"
    assert sentence.debug_info is None
    assert sentence.generation_time_ms >= 0.0


def test_debug_info_has_tokens(engine, john_kisses_mary) -> None:
    john_kisses_mary.features.interrogative_type = InterrogativeType.YES_NO

    sentence = RealizeSentence(engine).execute(john_kisses_mary, debug=True)

    assert sentence.text == "Does John kiss Mary?"
    assert sentence.debug_info == {"tokens": ["does", "John", "kiss", "Mary"], "interrogative": True}


def test_missing_verb_is_invalid(mock_engine) -> None:
    with pytest.raises(InvalidClauseError):
        RealizeSentence(mock_engine).execute(ClauseSpec(subjects=["John"]))
    mock_engine.realize.assert_not_called()


def test_passive_without_object_is_invalid(mock_engine) -> None:
    clause = ClauseSpec(subjects=["John"], verb="kiss", features=ClauseFeatures(passive=True))
    with pytest.raises(InvalidClauseError):
        RealizeSentence(mock_engine).execute(clause)


def test_unexpected_errors_are_wrapped_and_logged(mock_engine, john_kisses_mary) -> None:
    mock_engine.realize.side_effect = RuntimeError("boom")

    with capture_logs() as logs:
        with pytest.raises(DomainError) as excinfo:
            RealizeSentence(mock_engine).execute(john_kisses_mary)

    assert "boom" in excinfo.value.message
    assert [e["event"] for e in logs] == ["realization_started", "realization_failed"]
    assert logs[-1]["log_level"] == "error"


def test_success_is_logged(mock_engine, john_kisses_mary) -> None:
    with capture_logs() as logs:
        RealizeSentence(mock_engine).execute(john_kisses_mary)

    events = [e["event"] for e in logs]
    assert events == ["realization_started", "realization_success"]
    assert logs[-1]["text_preview"] == "Hi."


def test_container_builds_use_case(container) -> None:
    use_case = container.realize_sentence_use_case()

    assert isinstance(use_case, RealizeSentence)
    assert use_case.engine is container.english_engine()


def test_container_engine_can_be_overridden(container, mock_engine, john_kisses_mary) -> None:
    container.english_engine.override(mock_engine)

    sentence = container.realize_sentence_use_case().execute(john_kisses_mary)

    assert sentence.text == "Hi."
    mock_engine.realize.assert_called_once()
