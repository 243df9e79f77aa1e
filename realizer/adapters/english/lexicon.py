# realizer/adapters/english/lexicon.py
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

import structlog

from lexicon.index import Lexeme, LexiconIndex
from realizer.core.domain.constituent import Constituent, Word
from realizer.core.domain.exceptions import LexemeNotFoundError
from realizer.core.domain.features import Category
from realizer.core.domain.models import VerbPhraseSpec
from realizer.core.ports import LexicalFactory, VerbPhraseClassifier

logger = structlog.get_logger()

# Lexicon POS labels -> word categories
POS_CATEGORIES: Dict[str, Category] = {
    "NOUN": Category.NOUN,
    "PROPN": Category.NOUN,
    "VERB": Category.VERB,
    "AUX": Category.VERB,
    "MODAL": Category.MODAL,
    "ADJ": Category.ADJECTIVE,
    "ADV": Category.ADVERB,
    "PRON": Category.PRONOUN,
    "ADP": Category.PREPOSITION,
    "DET": Category.DETERMINER,
    "CCONJ": Category.CONJUNCTION,
    "SCONJ": Category.COMPLEMENTISER,
}

# Entry keys that describe the entry itself rather than the word.
_ENTRY_KEYS = ("lemma", "pos", "surface")


class EnglishLexicalFactory(LexicalFactory):
    """
    Builds words from the English JSON lexicon.

    Known words get their lexicon category (unless the caller asks for a
    specific one) and the entry's features: irregular ``forms``,
    ``copular``, ``sentence_modifier``... Unknown words become plain words
    of the requested category, or raise in strict mode.
    """

    def __init__(self, index: LexiconIndex, strict: bool = False):
        self.index = index
        self.strict = strict

    @property
    def lang_code(self) -> str:
        return self.index.lang_code

    def lexeme_for(self, text: str, category: Category = Category.ANY) -> Optional[Lexeme]:
        candidates = self.index.lookup(text)
        if not candidates:
            return None
        if category is not Category.ANY:
            for lexeme in candidates:
                if POS_CATEGORIES.get(lexeme.pos or "") is category:
                    return lexeme
        return candidates[0]

    def create_word(self, text: str, category: Category = Category.ANY) -> Word:
        lexeme = self.lexeme_for(text, category)
        if lexeme is None:
            if self.strict:
                raise LexemeNotFoundError(text, self.lang_code)
            logger.debug("lexeme_not_found", text=text, category=category.value)
            return Word(category, text=text, base=text)

        if category is Category.ANY:
            category = POS_CATEGORIES.get(lexeme.pos or "", Category.ANY)

        features: Dict[str, Any] = {k: v for k, v in lexeme.data.items() if k not in _ENTRY_KEYS}
        # Proper names keep their lexicon spelling.
        surface = lexeme.lemma if lexeme.pos == "PROPN" else text
        return Word(category, features=features, text=surface, base=lexeme.lemma)

    def forms_of(self, lemma: str, category: Category) -> Mapping[str, str]:
        """Irregular forms recorded for ``lemma``; empty when regular or unknown."""
        lexeme = self.lexeme_for(lemma, category)
        if lexeme is None:
            return {}
        return lexeme.forms


class EnglishVerbClassifier(VerbPhraseClassifier):
    """Copula detection from the lexicon's ``copular`` flag."""

    def __init__(self, index: LexiconIndex):
        self.index = index

    def is_copular(self, verb: Union[str, VerbPhraseSpec, Constituent, None]) -> bool:
        lemma = _lemma_of(verb)
        if not lemma:
            return False
        return any(lx.data.get("copular") is True for lx in self.index.lookup(lemma))


def _lemma_of(verb: Union[str, VerbPhraseSpec, Constituent, None]) -> Optional[str]:
    if verb is None:
        return None
    if isinstance(verb, str):
        return verb
    if isinstance(verb, VerbPhraseSpec):
        return verb.verb
    for word in verb.iter_words():
        if word.category is Category.VERB:
            return word.base or word.text
    return None


__all__ = ["POS_CATEGORIES", "EnglishLexicalFactory", "EnglishVerbClassifier"]
