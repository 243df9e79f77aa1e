# tests/test_clause_realizer.py
"""
Tests for clause-level ordering: subjects, verb phrase, passive,
modifiers, and the interplay with the interrogative recipes.
"""

from typing import Iterator
from unittest.mock import MagicMock

import pytest

from realizer.core.domain.constituent import Constituent, Group, Word
from realizer.core.domain.context import RealizationContext
from realizer.core.domain.exceptions import InvalidClauseError
from realizer.core.domain.features import (
    Category,
    ClauseFeatures,
    DiscourseFunction,
    Form,
    InterrogativeType,
    NumberAgreement,
    Person,
    Tense,
)
from realizer.core.domain.models import ClauseSpec, NounPhraseSpec
from realizer.core.ports import (
    AuxiliaryBuilder,
    LexicalFactory,
    PhraseRealizer,
    VerbPhraseClassifier,
)
from syntax.clause import ClauseRealizer
from syntax.modifiers import add_modifier


def _walk(node: Constituent) -> Iterator[Constituent]:
    yield node
    for child in node.children or []:
        yield from _walk(child)


def _subject_count(tree: Constituent) -> int:
    return sum(1 for n in _walk(tree) if n.has_function(DiscourseFunction.SUBJECT))


# ---------------------------------------------------------------------------
# Declaratives
# ---------------------------------------------------------------------------


def test_declarative_order(clauses, john_kisses_mary) -> None:
    tree = clauses.realize(john_kisses_mary)

    assert tree.category is Category.LIST
    assert tree.tokens() == ["John", "kisses", "Mary"]
    assert [m.discourse_function for m in tree.members] == [
        DiscourseFunction.SUBJECT,
        DiscourseFunction.VERB_PHRASE,
    ]


def test_cue_phrase_and_modifier_slots(clauses, lexicon, john_kisses_mary) -> None:
    john_kisses_mary.cue_phrase = "however"
    add_modifier(john_kisses_mary, "frankly", lexicon)
    add_modifier(john_kisses_mary, "quickly", lexicon)
    add_modifier(john_kisses_mary, "in the end", lexicon)

    tree = clauses.realize(john_kisses_mary)

    assert tree.tokens() == ["however", "frankly", "John", "quickly", "kisses", "Mary", "in the end"]
    assert tree.members[0].has_function(DiscourseFunction.CUE_PHRASE)
    assert tree.members[1].has_function(DiscourseFunction.FRONT_MODIFIER)
    assert tree.members[-1].has_function(DiscourseFunction.POST_MODIFIER)


def test_modifiers_are_copied_into_the_output(clauses, lexicon, john_kisses_mary) -> None:
    add_modifier(john_kisses_mary, "quickly", lexicon)
    original = john_kisses_mary.pre_modifiers[0]

    clauses.realize(john_kisses_mary)
    clauses.realize(john_kisses_mary)

    assert original.discourse_function is None


def test_coordinated_subjects_are_plural(clauses) -> None:
    clause = ClauseSpec(subjects=["John", "Mary", "Julia"], verb="dance")
    tree = clauses.realize(clause)

    assert tree.tokens() == ["John", ",", "Mary", "and", "Julia", "dance"]
    assert _subject_count(tree) == 1


def test_explicit_agreement_wins(clauses) -> None:
    clause = ClauseSpec(
        subjects=["John"],
        verb="be",
        complements=["happy"],
        features=ClauseFeatures(person=Person.FIRST, number=NumberAgreement.SINGULAR),
    )
    assert clauses.realize(clause).tokens() == ["John", "am", "happy"]


def test_passive_fronts_object_and_adds_by_phrase(clauses, john_kisses_mary) -> None:
    john_kisses_mary.features.passive = True
    tree = clauses.realize(john_kisses_mary)

    assert tree.tokens() == ["Mary", "is", "kissed", "by", "John"]
    assert tree.members[0].has_function(DiscourseFunction.SUBJECT)


def test_passive_pronoun_in_by_phrase_is_accusative(clauses) -> None:
    clause = ClauseSpec(
        subjects=[NounPhraseSpec(head="he", pronominal=True, gender="masculine")],
        verb="give",
        object=NounPhraseSpec(head="letter", determiner="the"),
        features=ClauseFeatures(passive=True, tense=Tense.PAST),
    )
    assert clauses.realize(clause).tokens() == ["the", "letter", "was", "given", "by", "him"]


def test_infinitive_clause_has_no_subject(clauses) -> None:
    clause = ClauseSpec(subjects=["John"], verb="dance", features=ClauseFeatures(form=Form.INFINITIVE))
    tree = clauses.realize(clause)

    assert tree.tokens() == ["to", "dance"]
    assert _subject_count(tree) == 0


def test_negated_imperative(clauses) -> None:
    clause = ClauseSpec(
        subjects=["you"],
        verb="dance",
        features=ClauseFeatures(form=Form.IMPERATIVE, negated=True),
    )
    assert clauses.realize(clause).tokens() == ["do", "not", "dance"]


def test_relative_subject_is_not_realized(clauses, john_kisses_mary) -> None:
    john_kisses_mary.relative_function = DiscourseFunction.SUBJECT
    assert clauses.realize(john_kisses_mary).tokens() == ["kisses", "Mary"]


def test_clause_without_verb_is_rejected(clauses) -> None:
    with pytest.raises(InvalidClauseError):
        clauses.realize(ClauseSpec(subjects=["John"]))


def test_verb_argument_overrides_clause_verb(clauses, john_kisses_mary) -> None:
    tree = clauses.realize(john_kisses_mary, john_kisses_mary.verb_phrase().model_copy(update={"verb": "chase"}))
    assert tree.tokens() == ["John", "chases", "Mary"]


# ---------------------------------------------------------------------------
# Questions
# ---------------------------------------------------------------------------


def test_question_marks_context(clauses, john_kisses_mary) -> None:
    john_kisses_mary.features.interrogative_type = InterrogativeType.YES_NO
    context = RealizationContext()

    clauses.realize(john_kisses_mary, context=context)

    assert context.interrogative is True


def test_declarative_leaves_context_alone(clauses, john_kisses_mary) -> None:
    context = RealizationContext()
    clauses.realize(john_kisses_mary, context=context)
    assert context.interrogative is False


@pytest.mark.parametrize(
    "features, expected",
    [
        ({}, ["does", "John", "kiss", "Mary"]),
        ({"tense": Tense.PAST}, ["did", "John", "kiss", "Mary"]),
        ({"tense": Tense.FUTURE}, ["will", "John", "kiss", "Mary"]),
        ({"negated": True}, ["does", "John", "not", "kiss", "Mary"]),
        ({"progressive": True}, ["is", "John", "kissing", "Mary"]),
        ({"passive": True}, ["is", "Mary", "kissed", "by", "John"]),
        ({"modal": "can", "perfect": True}, ["can", "John", "have", "kissed", "Mary"]),
    ],
)
def test_yes_no_questions(clauses, features, expected) -> None:
    clause = ClauseSpec(
        subjects=["John"],
        verb="kiss",
        object="Mary",
        features=ClauseFeatures(interrogative_type=InterrogativeType.YES_NO, **features),
    )
    tree = clauses.realize(clause)

    assert tree.tokens() == expected
    assert _subject_count(tree) == 1


def test_who_subject_agrees_in_third_singular(clauses) -> None:
    clause = ClauseSpec(
        subjects=[NounPhraseSpec(head="you", pronominal=True, person=Person.SECOND)],
        verb="kiss",
        object="Mary",
        features=ClauseFeatures(interrogative_type=InterrogativeType.WHO_SUBJECT),
    )
    tree = clauses.realize(clause)

    assert tree.tokens() == ["who", "kisses", "Mary"]
    assert _subject_count(tree) == 0


def test_who_object_question_gaps_the_object(clauses, john_kisses_mary) -> None:
    john_kisses_mary.features.interrogative_type = InterrogativeType.WHO_OBJECT
    assert clauses.realize(john_kisses_mary).tokens() == ["who", "does", "John", "kiss"]


def test_who_indirect_object_question_ends_with_to(clauses, man_gives_woman_flower) -> None:
    man_gives_woman_flower.features.interrogative_type = InterrogativeType.WHO_INDIRECT_OBJECT
    man_gives_woman_flower.features.tense = Tense.PAST

    tree = clauses.realize(man_gives_woman_flower)

    assert tree.tokens() == ["who", "did", "the", "man", "give", "the", "flower", "to"]
    assert tree.members[-1].category is Category.PREPOSITION


def test_how_come_keeps_subject_in_front(clauses, john_kisses_mary) -> None:
    john_kisses_mary.features.interrogative_type = InterrogativeType.HOW_COME
    assert clauses.realize(john_kisses_mary).tokens() == ["how", "come", "John", "kisses", "Mary"]


@pytest.mark.parametrize(
    "qtype, keywords",
    [
        (InterrogativeType.WHICH, ["which"]),
        (InterrogativeType.WHOSE, ["whose"]),
        (InterrogativeType.HOW_MANY, ["how", "many"]),
    ],
)
def test_future_do_support_says_will_once(clauses, john_kisses_mary, qtype, keywords) -> None:
    john_kisses_mary.features.interrogative_type = qtype
    john_kisses_mary.features.tense = Tense.FUTURE

    tokens = clauses.realize(john_kisses_mary).tokens()

    assert tokens == keywords + ["will", "John", "do", "kiss", "Mary"]
    assert tokens.count("will") == 1


def test_where_question_with_copula(clauses) -> None:
    clause = ClauseSpec(
        subjects=["John"],
        verb="be",
        features=ClauseFeatures(interrogative_type=InterrogativeType.WHERE, tense=Tense.PAST),
    )
    assert clauses.realize(clause).tokens() == ["where", "was", "John"]


def test_split_subject_falls_back_to_subject_position_without_verb() -> None:
    subject = Group(
        Category.NOUN_PHRASE,
        discourse_function=DiscourseFunction.SUBJECT,
        members=[Word(Category.NOUN, text="John")],
    )
    phrases = MagicMock(spec=PhraseRealizer)
    phrases.realize_noun_phrase.return_value = subject
    phrases.realize_verb_phrase.return_value = Word(Category.CANNED_TEXT, text="blah")
    classifier = MagicMock(spec=VerbPhraseClassifier)
    classifier.is_copular.return_value = True

    realizer = ClauseRealizer(
        MagicMock(spec=LexicalFactory),
        phrases,
        classifier,
        MagicMock(spec=AuxiliaryBuilder),
    )
    clause = ClauseSpec(
        subjects=["John"],
        verb="be",
        features=ClauseFeatures(interrogative_type=InterrogativeType.YES_NO),
    )

    tree = realizer.realize(clause)

    assert tree.tokens() == ["John", "blah"]
    assert tree.members[0] is subject
