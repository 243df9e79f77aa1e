"""
ENGLISH LANGUAGE ENGINE
-----------------------
Sentence renderer for English clauses.

This module orchestrates the generation of sentences by:
1. Loading the English lexicon and building the English collaborators
   (word factory, copula classifier, phrase realizer, "do" builder).
2. Delegating word order to `syntax.clause.ClauseRealizer`.
3. Applying orthography: token joining, capitalisation and the final
   punctuation mark.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from lexicon.index import LexiconIndex, load_lexicon
from realizer.adapters.english.lexicon import EnglishLexicalFactory, EnglishVerbClassifier
from realizer.adapters.english.phrases import EnglishAuxiliaryBuilder, EnglishPhraseRealizer
from realizer.core.domain.constituent import Constituent, Group
from realizer.core.domain.context import RealizationContext
from realizer.core.domain.models import ClauseSpec
from realizer.core.ports import SentenceEngine
from syntax.clause import ClauseRealizer

LANG_CODE = "en"

# Tokens written without a space before them.
_ATTACHED_PUNCTUATION = {",", ";", ":"}


class EnglishEngine(SentenceEngine):
    """
    Realizes a ClauseSpec as an English sentence.

        engine = EnglishEngine()
        engine.render(ClauseSpec(subjects=["John"], verb="kiss", object="Mary"))
        # "John kisses Mary."
    """

    lang_code = LANG_CODE

    def __init__(
        self,
        index: Optional[LexiconIndex] = None,
        *,
        lexicon_dir: Optional[Path] = None,
        strict: bool = False,
    ):
        # 1. Lexicon and collaborators
        self.index = index or load_lexicon(LANG_CODE, lexicon_dir)
        self.lexicon = EnglishLexicalFactory(self.index, strict=strict)
        self.classifier = EnglishVerbClassifier(self.index)
        self.phrases = EnglishPhraseRealizer(self.lexicon, self.classifier)
        self.auxiliaries = EnglishAuxiliaryBuilder(self.lexicon)

        # 2. Word order
        self.clauses = ClauseRealizer(self.lexicon, self.phrases, self.classifier, self.auxiliaries)

    def realize(self, clause: ClauseSpec, context: Optional[RealizationContext] = None) -> Group:
        """The ordered constituents of ``clause``, before orthography."""
        return self.clauses.realize(clause, context=context)

    def format(self, tree: Constituent, context: RealizationContext) -> str:
        return format_sentence(tree, context)

    def render(self, clause: ClauseSpec) -> str:
        context = RealizationContext()
        tree = self.realize(clause, context)
        return self.format(tree, context)


# ---------------------------------------------------------------------------
# Orthography
# ---------------------------------------------------------------------------


def join_tokens(tokens: List[str]) -> str:
    text = ""
    for token in tokens:
        if not text:
            text = token
        elif token in _ATTACHED_PUNCTUATION:
            text += token
        else:
            text += " " + token
    return text


def format_sentence(tree: Constituent, context: RealizationContext) -> str:
    """
    Join the leaves of ``tree`` into a sentence.

    The first character is upper-cased and the sentence ends with "?" for
    questions, "." otherwise.
    """
    text = join_tokens(tree.tokens()).strip()
    if not text:
        return ""
    text = text[0].upper() + text[1:]
    return text + ("?" if context.interrogative else ".")
