"""
lexicon/index.py

Access layer for per-language lexica stored in JSON under:

    data/lexicon/{lang_code}_lexicon.json

The realizer only needs a few things from a lexicon: the part of speech
of a lemma, a handful of flags (copula, sentence adverb) and the
irregular forms that the inflection helpers cannot derive. Files use the
"lemmas" layout:

    {
      "_meta": {...},
      "lemmas": {
        "verb:give": {
          "lemma": "give",
          "pos": "VERB",
          "forms": {"past": "gave", "past_participle": "given"}
        },
        "adv:frankly": {"lemma": "frankly", "pos": "ADV", "sentence_modifier": true}
      }
    }

Keys are "<pos>:<lemma>" so that one lemma may have several parts of
speech ("verb:dance", "noun:dance"). A flat "entries" table
(surface -> bundle) is accepted as well.

Entries are normalised into:

    Lexeme(language="en", key="verb:give", lemma="give", pos="VERB", data={...})
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class LexiconError(Exception):
    """Base exception for lexicon-related problems."""


class LexiconNotFound(LexiconError):
    """Raised when a {lang}_lexicon.json file cannot be located."""


class LexemeNotFound(LexiconError):
    """Raised when a specific lexeme key cannot be found in a lexicon."""


# ---------------------------------------------------------------------------
# Core data model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Lexeme:
    """
    Normalised view of a lexicon entry.

    Attributes:
        language:
            Language code (e.g. "en").

        key:
            Stable internal key, unique within a language
            (e.g. "verb:give").

        lemma:
            Citation form used for lookup ("give").

        pos:
            Coarse part-of-speech label: "NOUN", "PROPN", "VERB", "AUX",
            "MODAL", "ADJ", "ADV", "PRON", "ADP", "DET", "CCONJ", "SCONJ".
            May be None if the source does not specify one.

        data:
            Original entry payload (shallow copy): irregular ``forms``,
            ``copular``, ``sentence_modifier``, ``number``...
    """

    language: str
    key: str
    lemma: str
    pos: Optional[str] = None
    data: Mapping[str, Any] = field(default_factory=dict)

    @property
    def forms(self) -> Mapping[str, str]:
        forms = self.data.get("forms")
        return forms if isinstance(forms, dict) else {}


# ---------------------------------------------------------------------------
# Lexicon index
# ---------------------------------------------------------------------------


class LexiconIndex:
    """
    In-memory index for a single language's lexicon.

    Typically constructed via `load_lexicon(lang_code)`.

        lex = load_lexicon("en")
        lex.get("verb:give").forms["past"]   # "gave"
        lex.lookup("Frankly")                # [Lexeme(... "adv:frankly" ...)]
    """

    def __init__(
        self,
        lang_code: str,
        meta: Mapping[str, Any],
        entries: Mapping[str, Lexeme],
    ) -> None:
        self.lang_code = lang_code
        self.meta: Dict[str, Any] = dict(meta)
        self._entries: Dict[str, Lexeme] = dict(entries)

        # Lower-cased lemma -> lexemes, in file order.
        self._by_lemma: Dict[str, List[Lexeme]] = {}
        for lexeme in self._entries.values():
            self._by_lemma.setdefault(lexeme.lemma.lower(), []).append(lexeme)

    @property
    def entries(self) -> Mapping[str, Lexeme]:
        """All lexemes keyed by `key`."""
        return self._entries

    # Lookup helpers ------------------------------------------------------

    def get(self, key: str) -> Optional[Lexeme]:
        """Return the Lexeme with the given key, or None if missing."""
        return self._entries.get(key)

    def get_or_raise(self, key: str) -> Lexeme:
        """
        Like `get`, but raises LexemeNotFound if the key is unknown.
        """
        if key not in self._entries:
            raise LexemeNotFound(
                f"Lexeme '{key}' not found in language '{self.lang_code}'."
            )
        return self._entries[key]

    def lookup(self, lemma: str, pos: Optional[str] = None) -> List[Lexeme]:
        """
        All lexemes for a lemma (case-insensitive), optionally restricted
        to one part of speech.
        """
        found = self._by_lemma.get(lemma.lower(), [])
        if pos is None:
            return list(found)
        return [lx for lx in found if lx.pos == pos]


# ---------------------------------------------------------------------------
# Loading and normalisation
# ---------------------------------------------------------------------------

# Simple in-process cache to avoid re-reading the same JSON files.
_CACHE: Dict[str, LexiconIndex] = {}


def _project_root() -> Path:
    """
    Infer the project root as the parent of this file's directory.

        <root>/
            lexicon/
                index.py   <-- this file
            data/
                lexicon/
                    en_lexicon.json
    """
    return Path(__file__).resolve().parent.parent


def default_lexicon_dir() -> Path:
    return _project_root() / "data" / "lexicon"


def available_languages(lexicon_dir: Optional[Path] = None) -> List[str]:
    """
    Language codes for which a JSON lexicon exists, sorted.
    """
    directory = Path(lexicon_dir) if lexicon_dir is not None else default_lexicon_dir()
    if not directory.exists():
        return []

    langs = set()
    for path in directory.glob("*_lexicon.json"):
        code = path.name.split("_", 1)[0]
        if code:
            langs.add(code)
    return sorted(langs)


def load_lexicon(
    lang_code: str,
    lexicon_dir: Optional[Path] = None,
    *,
    use_cache: bool = True,
) -> LexiconIndex:
    """
    Load and normalise the lexicon for a given language.

    Args:
        lang_code:
            Language code such as "en".

        lexicon_dir:
            Directory holding the ``*_lexicon.json`` files. Defaults to
            ``data/lexicon`` under the project root.

        use_cache:
            If True (default), keep a process-local cache per language.

    Raises:
        LexiconNotFound: if the JSON file does not exist.
    """
    directory = Path(lexicon_dir) if lexicon_dir is not None else default_lexicon_dir()
    cache_key = f"{lang_code}@{directory}"
    if use_cache and cache_key in _CACHE:
        return _CACHE[cache_key]

    path = directory / f"{lang_code}_lexicon.json"
    if not path.exists():
        raise LexiconNotFound(
            f"No lexicon file found for language '{lang_code}' "
            f"(expected at {path})."
        )

    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    index = build_index(lang_code, raw)

    if use_cache:
        _CACHE[cache_key] = index
    return index


def build_index(lang_code: str, raw: Mapping[str, Any]) -> LexiconIndex:
    """
    Normalise a JSON payload into a LexiconIndex.

    Non-dict entries are skipped. Keys other than ``lemmas`` / ``entries``
    / ``_meta`` are ignored.
    """
    meta = raw.get("_meta") or raw.get("meta") or {}
    entries: Dict[str, Lexeme] = {}

    # 1. "lemmas": { "<pos>:<lemma>" -> feature bundle }
    lemmas = raw.get("lemmas")
    if isinstance(lemmas, dict):
        for key, entry in lemmas.items():
            if not isinstance(entry, dict):
                continue
            entries[key] = Lexeme(
                language=lang_code,
                key=key,
                lemma=str(entry.get("lemma") or key.split(":", 1)[-1]),
                pos=entry.get("pos"),
                data=dict(entry),
            )

    # 2. "entries": { surface -> feature bundle }
    surface_entries = raw.get("entries")
    if isinstance(surface_entries, dict):
        for surface, entry in surface_entries.items():
            if not isinstance(entry, dict):
                continue
            data = dict(entry)
            data.setdefault("surface", surface)
            entries[surface] = Lexeme(
                language=lang_code,
                key=surface,
                lemma=str(entry.get("lemma") or surface),
                pos=entry.get("pos"),
                data=data,
            )

    return LexiconIndex(lang_code=lang_code, meta=meta, entries=entries)
