# realizer/core/domain/features.py
"""
Closed feature vocabulary for clause realization.

Everything the realization core branches on lives here as an enumeration
or as a field of :class:`ClauseFeatures`. Features a caller may want to
attach beyond that fixed set go into ``ClauseFeatures.extra``.

Absence matters: every field of ``ClauseFeatures`` is optional, and an
unset value (``None``) is distinct from an explicit ``False``. Use
``flag()`` when the distinction does not matter and ``is_set()`` when
it does.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Categories and discourse functions
# ---------------------------------------------------------------------------


class Category(str, Enum):
    """What kind of syntactic unit a constituent is."""

    # Lexical categories
    NOUN = "noun"
    VERB = "verb"
    MODAL = "modal"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    PREPOSITION = "preposition"
    DETERMINER = "determiner"
    CONJUNCTION = "conjunction"
    COMPLEMENTISER = "complementiser"
    SYMBOL = "symbol"
    ANY = "any"

    # Phrase categories
    CLAUSE = "clause"
    NOUN_PHRASE = "noun_phrase"
    VERB_PHRASE = "verb_phrase"
    PREPOSITIONAL_PHRASE = "prepositional_phrase"
    ADJECTIVE_PHRASE = "adjective_phrase"
    ADVERB_PHRASE = "adverb_phrase"
    CANNED_TEXT = "canned_text"

    # Aggregate
    LIST = "list"

    @property
    def is_lexical(self) -> bool:
        return self in _LEXICAL_CATEGORIES

    @property
    def is_verbal(self) -> bool:
        """True for the categories a split subject may follow."""
        return self in (Category.VERB, Category.VERB_PHRASE)


_LEXICAL_CATEGORIES = frozenset(
    {
        Category.NOUN,
        Category.VERB,
        Category.MODAL,
        Category.ADJECTIVE,
        Category.ADVERB,
        Category.PRONOUN,
        Category.PREPOSITION,
        Category.DETERMINER,
        Category.CONJUNCTION,
        Category.COMPLEMENTISER,
        Category.SYMBOL,
        Category.ANY,
    }
)


class DiscourseFunction(str, Enum):
    """The role a constituent plays inside its parent."""

    SUBJECT = "subject"
    VERB_PHRASE = "verb_phrase"
    OBJECT = "object"
    INDIRECT_OBJECT = "indirect_object"
    COMPLEMENT = "complement"
    FRONT_MODIFIER = "front_modifier"
    PRE_MODIFIER = "pre_modifier"
    POST_MODIFIER = "post_modifier"
    CUE_PHRASE = "cue_phrase"
    AUXILIARY = "auxiliary"
    HEAD = "head"
    SPECIFIER = "specifier"


# ---------------------------------------------------------------------------
# Agreement and verb-group features
# ---------------------------------------------------------------------------


class Tense(str, Enum):
    PAST = "past"
    PRESENT = "present"
    FUTURE = "future"


class Person(str, Enum):
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


class NumberAgreement(str, Enum):
    SINGULAR = "singular"
    PLURAL = "plural"


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"


class Form(str, Enum):
    NORMAL = "normal"
    INFINITIVE = "infinitive"
    BARE_INFINITIVE = "bare_infinitive"
    IMPERATIVE = "imperative"


class InterrogativeType(str, Enum):
    """
    The sixteen question types a clause can be realized as.

    ``keyword`` is the wh-word (or words) that opens the question; yes/no
    questions have none.
    """

    YES_NO = "yes_no"
    WHO_SUBJECT = "who_subject"
    WHO_OBJECT = "who_object"
    WHO_INDIRECT_OBJECT = "who_indirect_object"
    WHAT_SUBJECT = "what_subject"
    WHAT_OBJECT = "what_object"
    WHICH = "which"
    WHOSE = "whose"
    HOW = "how"
    HOW_PREDICATE = "how_predicate"
    HOW_MANY = "how_many"
    HOW_ADJECTIVE = "how_adjective"
    HOW_COME = "how_come"
    WHY = "why"
    WHEN = "when"
    WHERE = "where"

    @property
    def keyword(self) -> Optional[str]:
        return _KEYWORDS.get(self)


_KEYWORDS: Dict[InterrogativeType, str] = {
    InterrogativeType.WHO_SUBJECT: "who",
    InterrogativeType.WHO_OBJECT: "who",
    InterrogativeType.WHO_INDIRECT_OBJECT: "who",
    InterrogativeType.WHAT_SUBJECT: "what",
    InterrogativeType.WHAT_OBJECT: "what",
    InterrogativeType.WHICH: "which",
    InterrogativeType.WHOSE: "whose",
    InterrogativeType.HOW: "how",
    InterrogativeType.HOW_PREDICATE: "how",
    InterrogativeType.HOW_MANY: "how many",
    InterrogativeType.HOW_ADJECTIVE: "how",
    InterrogativeType.HOW_COME: "how come",
    InterrogativeType.WHY: "why",
    InterrogativeType.WHEN: "when",
    InterrogativeType.WHERE: "where",
}


# ---------------------------------------------------------------------------
# Clause feature record
# ---------------------------------------------------------------------------


class ClauseFeatures(BaseModel):
    """
    Typed feature record for one clause.

    Unset fields mean "default": present tense, active voice, affirmative,
    no aspect, no modal, declarative. ``person`` / ``number`` are only set
    when the caller wants to force agreement; otherwise agreement is
    derived from the surface subject.
    """

    model_config = ConfigDict(validate_assignment=True)

    tense: Optional[Tense] = None
    person: Optional[Person] = None
    number: Optional[NumberAgreement] = None
    negated: Optional[bool] = None
    passive: Optional[bool] = None
    perfect: Optional[bool] = None
    progressive: Optional[bool] = None
    modal: Optional[str] = None
    form: Optional[Form] = None
    interrogative_type: Optional[InterrogativeType] = None

    # Open extension map for features the core never branches on.
    extra: Dict[str, Any] = Field(default_factory=dict)

    def is_set(self, name: str) -> bool:
        return getattr(self, name) is not None

    def flag(self, name: str) -> bool:
        """Boolean view of a tri-state feature; unset reads as False."""
        return bool(getattr(self, name) or False)

    @property
    def effective_tense(self) -> Tense:
        return self.tense or Tense.PRESENT

    @property
    def effective_form(self) -> Form:
        return self.form or Form.NORMAL

    @property
    def has_auxiliary(self) -> bool:
        """Modal, perfect, progressive or future: the verb group already has an auxiliary."""
        return (
            self.modal is not None
            or self.flag("perfect")
            or self.flag("progressive")
            or self.effective_tense is Tense.FUTURE
        )


__all__ = [
    "Category",
    "DiscourseFunction",
    "Tense",
    "Person",
    "NumberAgreement",
    "Gender",
    "Form",
    "InterrogativeType",
    "ClauseFeatures",
]
