# tests/test_api_cli.py
"""
Tests for the frontend API (nlg.api) and the clause-cli command.
"""

import json

import pytest

from nlg import api
from nlg.cli_frontend import main
from realizer.core.domain.exceptions import UnsupportedLanguageError
from realizer.core.domain.models import ClauseSpec

CLAUSE_JSON = {
    "subjects": ["John"],
    "verb": "kiss",
    "object": "Mary",
    "features": {"interrogative_type": "yes_no"},
}


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------


def test_realise_accepts_a_dict() -> None:
    result = api.realise(CLAUSE_JSON)

    assert result.text == "Does John kiss Mary?"
    assert result.lang == "en"
    assert isinstance(result.clause, ClauseSpec)
    assert result.debug_info is None


def test_generate_with_clause_spec_and_debug() -> None:
    clause = ClauseSpec(subjects=["Mary"], verb="dance")

    result = api.generate("en", clause, debug=True)

    assert result.text == "Mary dances."
    assert result.debug_info["tokens"] == ["Mary", "dances"]


def test_nested_phrase_specs_from_json() -> None:
    payload = {
        "subjects": [{"head": "you", "pronominal": True, "person": "second"}],
        "verb": "give",
        "indirect_object": {"head": "she", "pronominal": True, "gender": "feminine"},
        "object": {"head": "letter", "determiner": "the"},
        "complements": [{"preposition": "in", "complement": {"head": "park", "determiner": "the"}}],
        "features": {"tense": "past"},
    }
    assert api.realise(payload).text == "You gave her the letter in the park."


def test_session_caches_engines() -> None:
    session = api.NLGSession(preload_langs=["en"])
    first = session._get_use_case("en")

    assert session._get_use_case("en") is first


def test_unsupported_language() -> None:
    with pytest.raises(UnsupportedLanguageError):
        api.NLGSession().realise(CLAUSE_JSON, lang="tlh")


def test_supported_languages() -> None:
    assert api.supported_languages() == ["en"]


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def test_cli_realise_prints_sentence(tmp_path, capsys) -> None:
    path = tmp_path / "clause.json"
    path.write_text(json.dumps(CLAUSE_JSON), encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", "WARNING", "realise", "--input", str(path)])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == "Does John kiss Mary?"


def test_cli_debug_goes_to_stderr(tmp_path, capsys) -> None:
    path = tmp_path / "clause.json"
    path.write_text(json.dumps(CLAUSE_JSON), encoding="utf-8")

    with pytest.raises(SystemExit):
        main(["--log-level", "WARNING", "realise", "-i", str(path), "--debug"])

    captured = capsys.readouterr()
    assert captured.out.strip() == "Does John kiss Mary?"
    assert "[DEBUG]" in captured.err
    assert '"does"' in captured.err


def test_cli_rejects_invalid_json(tmp_path) -> None:
    path = tmp_path / "clause.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["realise", "--input", str(path)])

    assert "invalid JSON" in str(excinfo.value.code)


def test_cli_reports_domain_errors(tmp_path) -> None:
    path = tmp_path / "clause.json"
    path.write_text(json.dumps({"subjects": ["John"]}), encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", "WARNING", "realise", "--input", str(path)])

    assert "Invalid clause" in str(excinfo.value.code)
