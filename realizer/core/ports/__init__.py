# realizer/core/ports/__init__.py
"""
Core Ports (Interfaces).

This package defines the abstract base classes that the language adapters
must implement. The clause realization core only ever talks to these
interfaces: it never builds a word form, an inflected verb group or a
noun phrase on its own.
"""

from abc import ABC, abstractmethod
from typing import FrozenSet, Optional, Union

from realizer.core.domain.constituent import Constituent, Word
from realizer.core.domain.context import Agreement, RealizationContext
from realizer.core.domain.features import (
    Category,
    DiscourseFunction,
    NumberAgreement,
    Person,
    Tense,
)
from realizer.core.domain.models import (
    ClauseSpec,
    NounPhraseSpec,
    PrepositionalPhraseSpec,
    VerbPhraseSpec,
)

# =========================================================
# 1. LEXICAL PORTS
# =========================================================

class LexicalFactory(ABC):
    """
    Port for turning surface text into word constituents.
    """
    @abstractmethod
    def create_word(self, text: str, category: Category = Category.ANY) -> Word:
        """
        Build a word for ``text``.

        With ``Category.ANY`` the factory picks the category from its
        lexicon; unknown text yields a word of category ANY.
        """
        pass


class VerbPhraseClassifier(ABC):
    """
    Port answering questions about verbs.
    """
    @abstractmethod
    def is_copular(self, verb: Union[str, VerbPhraseSpec, Constituent, None]) -> bool:
        """True when the verb is a copula ("be")."""
        pass

# =========================================================
# 2. CONSTRUCTION PORTS
# =========================================================

class AuxiliaryBuilder(ABC):
    """
    Port for synthesizing the "do" auxiliary used by do-support.
    """
    @abstractmethod
    def build_do(
        self,
        tense: Tense,
        person: Person,
        number: NumberAgreement,
    ) -> Constituent:
        """Return a verb phrase headed by "do" inflected for the given agreement."""
        pass


class PhraseRealizer(ABC):
    """
    Port for realizing the phrases a clause is assembled from.
    """
    @abstractmethod
    def realize_noun_phrase(
        self,
        spec: Union[NounPhraseSpec, str],
        function: Optional[DiscourseFunction] = None,
    ) -> Constituent:
        pass

    @abstractmethod
    def realize_verb_phrase(
        self,
        clause: ClauseSpec,
        verb: VerbPhraseSpec,
        *,
        agreement: Agreement,
        do_support: bool = False,
        omit: FrozenSet[DiscourseFunction] = frozenset(),
    ) -> Constituent:
        """
        Realize the verb group with its objects and complements.

        ``do_support`` means a "do" auxiliary already carries tense and
        agreement, so the main verb stays bare. Functions in ``omit`` are
        gapped (questioned) and must not be realized.
        """
        pass

    @abstractmethod
    def realize_prepositional_phrase(
        self,
        spec: PrepositionalPhraseSpec,
        function: Optional[DiscourseFunction] = None,
    ) -> Constituent:
        pass

    @abstractmethod
    def realize_text(
        self,
        text: str,
        function: Optional[DiscourseFunction] = None,
    ) -> Constituent:
        """Canned text, kept verbatim."""
        pass

# =========================================================
# 3. ENGINE PORTS
# =========================================================

class SentenceEngine(ABC):
    """
    Port for a complete language engine (realization + orthography).
    """
    lang_code: str

    @abstractmethod
    def realize(self, clause: ClauseSpec, context: Optional[RealizationContext] = None) -> Constituent:
        """Ordered constituents of the clause."""
        pass

    @abstractmethod
    def format(self, tree: Constituent, context: RealizationContext) -> str:
        """Turn realized constituents into sentence text."""
        pass

# =========================================================
# EXPORTS
# =========================================================
__all__ = [
    "LexicalFactory",
    "VerbPhraseClassifier",
    "AuxiliaryBuilder",
    "PhraseRealizer",
    "SentenceEngine",
]
