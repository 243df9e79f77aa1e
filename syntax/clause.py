# syntax/clause.py
"""
Clause realization.

Turns a :class:`ClauseSpec` into an ordered LIST of surface constituents:

    cue phrase, front modifiers,
    [wh-keyword(s), "do" auxiliary]      questions only
    subject                              front, or split into the verb group
    verb phrase (verbs, objects, complements)
    "by" + logical subject               passive only
    post modifiers
    trailing preposition                 who-indirect-object questions

Word forms, noun phrases and verb groups come from the phrase realizer;
this module only decides order and placement.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from realizer.core.domain.constituent import Constituent, Group, Word
from realizer.core.domain.context import Agreement, RealizationContext
from realizer.core.domain.exceptions import InvalidClauseError
from realizer.core.domain.features import (
    Category,
    DiscourseFunction,
    Form,
    NumberAgreement,
    Person,
)
from realizer.core.domain.models import (
    ClauseSpec,
    ModifierInput,
    NounInput,
    NounPhraseSpec,
    PrepositionalPhraseSpec,
    VerbPhraseSpec,
)
from realizer.core.ports import (
    AuxiliaryBuilder,
    LexicalFactory,
    PhraseRealizer,
    VerbPhraseClassifier,
)
from syntax.interrogative import (
    InterrogativeDispatcher,
    InterrogativeOutcome,
    suppresses_subject,
)
from syntax.relocation import relocate_subject

logger = structlog.get_logger()

_SUBJECTLESS_FORMS = (Form.INFINITIVE, Form.IMPERATIVE)


class ClauseRealizer:
    """Orders the parts of one clause."""

    def __init__(
        self,
        lexicon: LexicalFactory,
        phrases: PhraseRealizer,
        classifier: VerbPhraseClassifier,
        auxiliaries: AuxiliaryBuilder,
    ):
        self.lexicon = lexicon
        self.phrases = phrases
        self.dispatcher = InterrogativeDispatcher(
            lexicon,
            classifier,
            auxiliaries,
            realize_subject=self.realize_subject,
        )

    def realize(
        self,
        clause: ClauseSpec,
        verb: Optional[VerbPhraseSpec] = None,
        context: Optional[RealizationContext] = None,
    ) -> Group:
        context = context if context is not None else RealizationContext()
        verb = verb or clause.verb_phrase()
        if verb is None:
            raise InvalidClauseError("clause has no verb")

        features = clause.features
        qtype = features.interrogative_type
        output = Group(Category.LIST)

        if qtype is not None:
            context.mark_interrogative()

        agreement = self.resolve_agreement(clause)

        if clause.cue_phrase:
            output.append(self.phrases.realize_text(clause.cue_phrase, DiscourseFunction.CUE_PHRASE))
        self._add_modifiers(output, clause.front_modifiers, DiscourseFunction.FRONT_MODIFIER)

        outcome = InterrogativeOutcome()
        if qtype is not None:
            outcome = self.dispatcher.dispatch(clause, verb, output, agreement)

        subject_index = len(output)
        self._add_subject(clause, output, outcome)

        output.append(
            self.phrases.realize_verb_phrase(
                clause,
                verb,
                agreement=agreement,
                do_support=outcome.do_support,
                omit=outcome.gapped,
            )
        )

        if outcome.split_subject is not None:
            if not relocate_subject(output, outcome.split_subject):
                output.insert(subject_index, outcome.split_subject)

        if features.flag("passive"):
            by_phrase = self._by_phrase(clause.subjects)
            if by_phrase is not None:
                output.append(by_phrase)

        self._add_modifiers(output, clause.post_modifiers, DiscourseFunction.POST_MODIFIER)

        if outcome.trailing_preposition:
            output.append(self.lexicon.create_word(outcome.trailing_preposition, Category.PREPOSITION))

        logger.debug(
            "clause_realized",
            verb=verb.verb,
            interrogative_type=qtype.value if qtype else None,
            size=len(output),
        )
        return output

    # ------------------------------------------------------------------
    # Subjects
    # ------------------------------------------------------------------

    def realize_subject(self, clause: ClauseSpec) -> Optional[Constituent]:
        """The surface subject, tagged SUBJECT, or None when the clause has none."""
        if clause.relative_function is DiscourseFunction.SUBJECT:
            return None
        if clause.features.effective_form in _SUBJECTLESS_FORMS:
            return None
        subjects = clause.surface_subjects()
        if not subjects:
            return None
        if len(subjects) == 1:
            return self.phrases.realize_noun_phrase(subjects[0], DiscourseFunction.SUBJECT)
        return self._coordinate(subjects, DiscourseFunction.SUBJECT)

    def _add_subject(self, clause: ClauseSpec, output: Group, outcome: InterrogativeOutcome) -> None:
        if outcome.subject_suppressed or outcome.split_subject is not None:
            return
        subject = self.realize_subject(clause)
        if subject is None:
            return
        if clause.features.interrogative_type is not None and relocate_subject(output, subject):
            return
        output.append(subject)

    def resolve_agreement(self, clause: ClauseSpec) -> Agreement:
        """
        Person/number for the finite verb.

        Explicit clause features win. Otherwise the surface subject decides:
        coordinated subjects are plural, a single noun phrase spec brings
        its own person/number, plain text is third person singular.
        """
        features = clause.features
        person: Optional[Person] = features.person
        number: Optional[NumberAgreement] = features.number

        if person is None or number is None:
            derived = Agreement()
            if not suppresses_subject(features.interrogative_type):
                derived = _agreement_of(clause.surface_subjects())
            person = person or derived.person
            number = number or derived.number

        return Agreement(person=person, number=number)

    # ------------------------------------------------------------------
    # Passive and coordination
    # ------------------------------------------------------------------

    def _by_phrase(self, subjects: List[NounInput]) -> Optional[Constituent]:
        if not subjects:
            return None
        if len(subjects) == 1:
            spec = PrepositionalPhraseSpec(preposition="by", complement=subjects[0])
            return self.phrases.realize_prepositional_phrase(spec, DiscourseFunction.COMPLEMENT)
        return Group(
            Category.PREPOSITIONAL_PHRASE,
            discourse_function=DiscourseFunction.COMPLEMENT,
            members=[
                self.lexicon.create_word("by", Category.PREPOSITION),
                self._coordinate(subjects, DiscourseFunction.COMPLEMENT),
            ],
        )

    def _coordinate(self, specs: List[NounInput], function: DiscourseFunction) -> Group:
        """'A, B and C' as one noun phrase; the conjuncts stay untagged."""
        members: List[Constituent] = []
        last = len(specs) - 1
        for index, spec in enumerate(specs):
            if index == last:
                members.append(self.lexicon.create_word("and", Category.CONJUNCTION))
            elif index > 0:
                members.append(Word(Category.SYMBOL, text=","))
            # Realized with the coordination's function for pronoun case,
            # then untagged: only the coordination itself is the subject.
            conjunct = self.phrases.realize_noun_phrase(spec, function)
            conjunct.discourse_function = None
            members.append(conjunct)
        return Group(
            Category.NOUN_PHRASE,
            features={"coordinated": True},
            discourse_function=function,
            members=members,
        )

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    def _add_modifiers(
        self,
        output: Group,
        modifiers: List[ModifierInput],
        function: DiscourseFunction,
    ) -> None:
        for modifier in modifiers:
            if isinstance(modifier, str):
                output.append(self.phrases.realize_text(modifier, function))
            else:
                output.append(modifier.with_function(function))


def _agreement_of(subjects: List[NounInput]) -> Agreement:
    if not subjects:
        return Agreement()
    if len(subjects) > 1:
        persons = {s.effective_person for s in subjects if isinstance(s, NounPhraseSpec)}
        person = Person.THIRD
        for candidate in (Person.FIRST, Person.SECOND):
            if candidate in persons:
                person = candidate
                break
        return Agreement(person=person, number=NumberAgreement.PLURAL)
    subject = subjects[0]
    if isinstance(subject, NounPhraseSpec):
        return Agreement(person=subject.effective_person, number=subject.effective_number)
    return Agreement()


__all__ = ["ClauseRealizer"]
