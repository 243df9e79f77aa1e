# tests/test_lexicon_loader.py
"""
tests/test_lexicon_loader.py
----------------------------

Smoke tests for the lexicon loader and the English word factory.

These tests assume that:

- Lexicon JSON files live under:  data/lexicon/
- Files follow the "lemmas" schema:

    {
      "_meta": { ... },
      "lemmas": {
        "<pos>:<lemma>": { "lemma": ..., "pos": ..., ... },
        ...
      }
    }
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from lexicon.index import (
    LexemeNotFound,
    LexiconNotFound,
    available_languages,
    build_index,
    load_lexicon,
)
from realizer.adapters.english.lexicon import EnglishLexicalFactory, EnglishVerbClassifier
from realizer.core.domain.exceptions import LexemeNotFoundError
from realizer.core.domain.features import Category
from realizer.core.domain.models import VerbPhraseSpec


def test_load_lexicon_en_basic(en_index) -> None:
    """English lexicon should load and contain the core verbs."""
    assert en_index.lang_code == "en"
    assert en_index.meta.get("language") == "en"

    give = en_index.get_or_raise("verb:give")
    assert give.pos == "VERB"
    assert give.forms["past"] == "gave"

    assert en_index.get("verb:be").data["copular"] is True


def test_lookup_is_case_insensitive_and_filters_pos(en_index) -> None:
    assert [lx.key for lx in en_index.lookup("Frankly")] == ["adv:frankly"]
    assert {lx.pos for lx in en_index.lookup("dance")} == {"VERB", "NOUN"}
    assert [lx.key for lx in en_index.lookup("dance", pos="NOUN")] == ["noun:dance"]


def test_en_is_available() -> None:
    assert "en" in available_languages()


def test_load_lexicon_unknown_language_raises() -> None:
    with pytest.raises(LexiconNotFound):
        load_lexicon("xx")


def test_get_or_raise_unknown_key(en_index) -> None:
    with pytest.raises(LexemeNotFound):
        en_index.get_or_raise("verb:flibbertigibbet")


def test_load_from_custom_directory(tmp_path: Path) -> None:
    payload = {
        "_meta": {"language": "zz"},
        "lemmas": {"verb:blorp": {"lemma": "blorp", "pos": "VERB"}, "bad": "not a dict"},
        "entries": {"blorps": {"lemma": "blorp", "pos": "VERB"}},
    }
    (tmp_path / "zz_lexicon.json").write_text(json.dumps(payload), encoding="utf-8")

    index = load_lexicon("zz", tmp_path, use_cache=False)

    assert set(index.entries) == {"verb:blorp", "blorps"}
    assert len(index.lookup("blorp")) == 2
    assert index.get("blorps").data["surface"] == "blorps"


def test_build_index_derives_lemma_from_key() -> None:
    index = build_index("zz", {"lemmas": {"noun:thing": {"pos": "NOUN"}}})
    assert index.get("noun:thing").lemma == "thing"


# ---------------------------------------------------------------------------
# Word factory
# ---------------------------------------------------------------------------


def test_create_word_picks_category_from_lexicon(en_index) -> None:
    factory = EnglishLexicalFactory(en_index)

    word = factory.create_word("frankly")
    assert word.category is Category.ADVERB
    assert word.features["sentence_modifier"] is True

    assert factory.create_word("dance").category is Category.VERB
    assert factory.create_word("dance", Category.NOUN).category is Category.NOUN


def test_create_word_uses_proper_name_spelling(en_index) -> None:
    word = EnglishLexicalFactory(en_index).create_word("john")
    assert word.text == "John"
    assert word.category is Category.NOUN


def test_unknown_word_falls_back_or_raises_in_strict_mode(en_index) -> None:
    word = EnglishLexicalFactory(en_index).create_word("zzyzx")
    assert word.category is Category.ANY
    assert word.text == "zzyzx"

    with pytest.raises(LexemeNotFoundError):
        EnglishLexicalFactory(en_index, strict=True).create_word("zzyzx")


def test_copula_classifier(en_index) -> None:
    classifier = EnglishVerbClassifier(en_index)

    assert classifier.is_copular("be") is True
    assert classifier.is_copular(VerbPhraseSpec(verb="be")) is True
    assert classifier.is_copular("kiss") is False
    assert classifier.is_copular(None) is False
