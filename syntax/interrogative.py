# syntax/interrogative.py
"""
Interrogative dispatch.

Each question type maps to a fixed recipe: which wh-keyword(s) open the
clause, whether a "do" auxiliary is synthesized, and whether the subject
must be pulled out and later split into the verb group ("Will John
kiss?"). The table below is total over :class:`InterrogativeType`.

The dispatcher writes keywords and auxiliaries into the output and
reports everything else through an :class:`InterrogativeOutcome`; it
never edits the clause it is given.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, Optional

import structlog

from realizer.core.domain.constituent import Constituent, Group
from realizer.core.domain.context import Agreement
from realizer.core.domain.features import (
    Category,
    DiscourseFunction,
    InterrogativeType,
    Tense,
)
from realizer.core.domain.models import ClauseSpec, VerbPhraseSpec
from realizer.core.ports import AuxiliaryBuilder, LexicalFactory, VerbPhraseClassifier
from syntax.auxiliary import add_do_auxiliary, has_auxiliary

logger = structlog.get_logger()

SubjectRealizer = Callable[[ClauseSpec], Optional[Constituent]]


# ---------------------------------------------------------------------------
# Recipe table
# ---------------------------------------------------------------------------


class Recipe(str, Enum):
    YES_NO = "yes_no"
    SUBJECT_QUESTION = "subject_question"   # keyword replaces the subject
    OBJECT_QUESTION = "object_question"     # keyword + do or split subject
    KEYWORD_ONLY = "keyword_only"
    KEYWORD_WITH_DO = "keyword_with_do"     # keyword + unconditional do


RECIPES: Dict[InterrogativeType, Recipe] = {
    InterrogativeType.YES_NO: Recipe.YES_NO,
    InterrogativeType.WHO_SUBJECT: Recipe.SUBJECT_QUESTION,
    InterrogativeType.WHAT_SUBJECT: Recipe.SUBJECT_QUESTION,
    InterrogativeType.HOW_PREDICATE: Recipe.SUBJECT_QUESTION,
    InterrogativeType.WHO_OBJECT: Recipe.OBJECT_QUESTION,
    InterrogativeType.WHO_INDIRECT_OBJECT: Recipe.OBJECT_QUESTION,
    InterrogativeType.WHAT_OBJECT: Recipe.OBJECT_QUESTION,
    InterrogativeType.HOW: Recipe.OBJECT_QUESTION,
    InterrogativeType.WHY: Recipe.OBJECT_QUESTION,
    InterrogativeType.WHEN: Recipe.OBJECT_QUESTION,
    InterrogativeType.WHERE: Recipe.OBJECT_QUESTION,
    InterrogativeType.HOW_MANY: Recipe.KEYWORD_WITH_DO,
    InterrogativeType.WHICH: Recipe.KEYWORD_WITH_DO,
    InterrogativeType.WHOSE: Recipe.KEYWORD_WITH_DO,
    InterrogativeType.HOW_ADJECTIVE: Recipe.KEYWORD_ONLY,
    InterrogativeType.HOW_COME: Recipe.KEYWORD_ONLY,
}

# Questioned functions that must not be realized in place.
GAPS: Dict[InterrogativeType, FrozenSet[DiscourseFunction]] = {
    InterrogativeType.WHO_OBJECT: frozenset({DiscourseFunction.OBJECT}),
    InterrogativeType.WHAT_OBJECT: frozenset({DiscourseFunction.OBJECT}),
    InterrogativeType.WHO_INDIRECT_OBJECT: frozenset({DiscourseFunction.INDIRECT_OBJECT}),
}

TRAILING_PREPOSITIONS: Dict[InterrogativeType, str] = {
    InterrogativeType.WHO_INDIRECT_OBJECT: "to",
}

# Keyword tokens are pronouns, except the quantifier of "how many".
_KEYWORD_CATEGORIES: Dict[str, Category] = {
    "many": Category.ADVERB,
}


def suppresses_subject(qtype: Optional[InterrogativeType]) -> bool:
    """True when the wh-keyword takes the subject's place ("Who kisses Mary?")."""
    return qtype is not None and RECIPES.get(qtype) is Recipe.SUBJECT_QUESTION


@dataclass
class InterrogativeOutcome:
    """What the dispatcher decided, beyond what it already wrote to the output."""

    split_subject: Optional[Constituent] = None
    do_support: bool = False
    subject_suppressed: bool = False
    gapped: FrozenSet[DiscourseFunction] = frozenset()
    trailing_preposition: Optional[str] = None


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


class InterrogativeDispatcher:
    """Applies the recipe of a clause's interrogative type."""

    def __init__(
        self,
        lexicon: LexicalFactory,
        classifier: VerbPhraseClassifier,
        auxiliaries: AuxiliaryBuilder,
        realize_subject: SubjectRealizer,
    ):
        self._lexicon = lexicon
        self._classifier = classifier
        self._auxiliaries = auxiliaries
        self._realize_subject = realize_subject
        self._handlers = {
            Recipe.YES_NO: self._yes_no,
            Recipe.SUBJECT_QUESTION: self._subject_question,
            Recipe.OBJECT_QUESTION: self._object_question,
            Recipe.KEYWORD_ONLY: self._keyword_only,
            Recipe.KEYWORD_WITH_DO: self._keyword_with_do,
        }

    def dispatch(
        self,
        clause: ClauseSpec,
        verb: VerbPhraseSpec,
        output: Group,
        agreement: Agreement,
    ) -> InterrogativeOutcome:
        qtype = clause.features.interrogative_type
        recipe = RECIPES.get(qtype) if qtype is not None else None
        if recipe is None:
            logger.debug("interrogative_noop", interrogative_type=qtype)
            return InterrogativeOutcome()

        outcome = self._handlers[recipe](qtype, clause, verb, output, agreement)
        outcome.gapped = GAPS.get(qtype, frozenset())
        outcome.trailing_preposition = TRAILING_PREPOSITIONS.get(qtype)

        logger.debug(
            "interrogative_dispatched",
            interrogative_type=qtype.value,
            recipe=recipe.value,
            do_support=outcome.do_support,
            split=outcome.split_subject is not None,
        )
        return outcome

    # -- recipes --------------------------------------------------------

    def _yes_no(self, qtype, clause, verb, output, agreement) -> InterrogativeOutcome:
        features = clause.features
        blocked = (
            self._classifier.is_copular(verb)
            or features.flag("progressive")
            or features.modal is not None
            or features.effective_tense is Tense.FUTURE
            or features.flag("negated")
            or features.flag("passive")
        )
        if not blocked:
            add_do_auxiliary(output, self._auxiliaries, features, agreement)
            return InterrogativeOutcome(do_support=True)
        return InterrogativeOutcome(split_subject=self._realize_subject(clause))

    def _subject_question(self, qtype, clause, verb, output, agreement) -> InterrogativeOutcome:
        self._add_keyword(qtype, output)
        return InterrogativeOutcome(subject_suppressed=True)

    def _object_question(self, qtype, clause, verb, output, agreement) -> InterrogativeOutcome:
        features = clause.features
        self._add_keyword(qtype, output)
        if not has_auxiliary(features) and not self._classifier.is_copular(verb):
            add_do_auxiliary(output, self._auxiliaries, features, agreement)
            return InterrogativeOutcome(do_support=True)
        if not features.flag("passive"):
            return InterrogativeOutcome(split_subject=self._realize_subject(clause))
        return InterrogativeOutcome()

    def _keyword_only(self, qtype, clause, verb, output, agreement) -> InterrogativeOutcome:
        self._add_keyword(qtype, output)
        return InterrogativeOutcome()

    def _keyword_with_do(self, qtype, clause, verb, output, agreement) -> InterrogativeOutcome:
        self._add_keyword(qtype, output)
        add_do_auxiliary(output, self._auxiliaries, clause.features, agreement)
        return InterrogativeOutcome(do_support=True)

    # -- helpers --------------------------------------------------------

    def _add_keyword(self, qtype: InterrogativeType, output: Group) -> None:
        for token in (qtype.keyword or "").split():
            category = _KEYWORD_CATEGORIES.get(token, Category.PRONOUN)
            output.append(self._lexicon.create_word(token, category))


__all__ = [
    "Recipe",
    "RECIPES",
    "GAPS",
    "TRAILING_PREPOSITIONS",
    "InterrogativeOutcome",
    "InterrogativeDispatcher",
    "suppresses_subject",
]
