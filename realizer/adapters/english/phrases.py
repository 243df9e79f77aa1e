# realizer/adapters/english/phrases.py
"""
English phrase realization.

Builds noun phrases, prepositional phrases and verb phrases as
constituent trees. Inflection is delegated to ``morphology.english``;
irregular forms come from the lexicon.

Verb groups are built as a chain, each element fixing the form of the
next one:

    modal / "will"   -> next is bare        (will kiss)
    have  (perfect)  -> past participle     (has kissed)
    be    (progr.)   -> present participle  (is kissing)
    be    (passive)  -> past participle     (is kissed)
    main verb

The first element is finite unless a "do" auxiliary already carries
tense (questions) or the clause is non-finite.
"""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, List, Optional, Tuple, Union

from morphology import english as emorph
from realizer.adapters.english.lexicon import EnglishLexicalFactory
from realizer.core.domain.constituent import Constituent, Group, Word
from realizer.core.domain.context import Agreement
from realizer.core.domain.features import (
    Category,
    DiscourseFunction,
    Form,
    NumberAgreement,
    Person,
    Tense,
)
from realizer.core.domain.models import (
    ClauseSpec,
    ModifierInput,
    NounPhraseSpec,
    PrepositionalPhraseSpec,
    VerbPhraseSpec,
)
from realizer.core.ports import AuxiliaryBuilder, PhraseRealizer, VerbPhraseClassifier

# Functions whose pronouns take the accusative ("her", "them").
_ACCUSATIVE_FUNCTIONS = frozenset(
    {
        DiscourseFunction.OBJECT,
        DiscourseFunction.INDIRECT_OBJECT,
        DiscourseFunction.COMPLEMENT,
    }
)

# Phrase category for a bare single-word phrase, by word category.
_PHRASE_OF = {
    Category.ADJECTIVE: Category.ADJECTIVE_PHRASE,
    Category.ADVERB: Category.ADVERB_PHRASE,
}

# Verb chain roles
MODAL = "modal"
DO = "do"
PERFECT = "perfect"
PROGRESSIVE = "progressive"
PASSIVE = "passive"
MAIN = "main"


def _verb_word(lemma: str, text: str, role: str, finite: bool) -> Word:
    return Word(
        Category.VERB,
        features={
            "auxiliary": role != MAIN,
            "finite": finite,
            "modal": role == MODAL,
            "role": role,
        },
        text=text,
        base=lemma,
    )


class EnglishPhraseRealizer(PhraseRealizer):

    def __init__(self, lexicon: EnglishLexicalFactory, classifier: VerbPhraseClassifier):
        self.lexicon = lexicon
        self.classifier = classifier

    # ------------------------------------------------------------------
    # Noun phrases
    # ------------------------------------------------------------------

    def realize_noun_phrase(
        self,
        spec: Union[NounPhraseSpec, str],
        function: Optional[DiscourseFunction] = None,
    ) -> Constituent:
        if isinstance(spec, str):
            return self._text_phrase(spec, function)
        if spec.pronominal:
            return self._pronoun(spec, function)

        person = spec.effective_person
        number = spec.effective_number

        head = self.lexicon.create_word(spec.head, Category.NOUN)
        head.discourse_function = DiscourseFunction.HEAD
        if number is NumberAgreement.PLURAL:
            head.text = emorph.plural(head.text, self.lexicon.forms_of(spec.head, Category.NOUN))

        adjectives: List[Constituent] = []
        for adjective in spec.adjectives:
            word = self.lexicon.create_word(adjective, Category.ADJECTIVE)
            word.discourse_function = DiscourseFunction.PRE_MODIFIER
            adjectives.append(word)

        members: List[Constituent] = []
        if spec.determiner:
            determiner = spec.determiner
            if determiner.lower() in ("a", "an"):
                following = adjectives[0] if adjectives else head
                determiner = emorph.choose_indefinite_article(following.text)
            word = self.lexicon.create_word(determiner, Category.DETERMINER)
            word.discourse_function = DiscourseFunction.SPECIFIER
            members.append(word)

        members.extend(adjectives)
        members.append(head)
        members.extend(
            self.realize_text(text, DiscourseFunction.POST_MODIFIER) for text in spec.post_modifiers
        )

        return Group(
            Category.NOUN_PHRASE,
            features={"person": person, "number": number},
            discourse_function=function,
            members=members,
        )

    def _pronoun(self, spec: NounPhraseSpec, function: Optional[DiscourseFunction]) -> Group:
        person = spec.effective_person
        number = spec.effective_number
        case = "accusative" if function in _ACCUSATIVE_FUNCTIONS else "nominative"
        text = emorph.pronoun(
            person.value,
            number.value,
            spec.gender.value if spec.gender else None,
            case,
        )
        word = Word(
            Category.PRONOUN,
            features={"case": case},
            discourse_function=DiscourseFunction.HEAD,
            text=text,
            base=emorph.pronoun(person.value, number.value, spec.gender.value if spec.gender else None),
        )
        return Group(
            Category.NOUN_PHRASE,
            features={"person": person, "number": number, "pronominal": True},
            discourse_function=function,
            members=[word],
        )

    def _text_phrase(self, text: str, function: Optional[DiscourseFunction]) -> Group:
        if not text.strip() or any(ch.isspace() for ch in text.strip()):
            return Group(
                Category.NOUN_PHRASE,
                discourse_function=function,
                members=[Word(Category.CANNED_TEXT, text=text.strip())],
            )
        word = self.lexicon.create_word(text.strip(), Category.ANY)
        word.discourse_function = DiscourseFunction.HEAD
        return Group(
            _PHRASE_OF.get(word.category, Category.NOUN_PHRASE),
            discourse_function=function,
            members=[word],
        )

    # ------------------------------------------------------------------
    # Prepositional phrases and canned text
    # ------------------------------------------------------------------

    def realize_prepositional_phrase(
        self,
        spec: PrepositionalPhraseSpec,
        function: Optional[DiscourseFunction] = None,
    ) -> Constituent:
        preposition = self.lexicon.create_word(spec.preposition, Category.PREPOSITION)
        complement = self.realize_noun_phrase(spec.complement, DiscourseFunction.COMPLEMENT)
        return Group(
            Category.PREPOSITIONAL_PHRASE,
            discourse_function=function,
            members=[preposition, complement],
        )

    def realize_text(
        self,
        text: str,
        function: Optional[DiscourseFunction] = None,
    ) -> Constituent:
        return Word(Category.CANNED_TEXT, discourse_function=function, text=text)

    # ------------------------------------------------------------------
    # Verb phrases
    # ------------------------------------------------------------------

    def realize_verb_phrase(
        self,
        clause: ClauseSpec,
        verb: VerbPhraseSpec,
        *,
        agreement: Agreement,
        do_support: bool = False,
        omit: FrozenSet[DiscourseFunction] = frozenset(),
    ) -> Constituent:
        features = clause.features
        members = self._verb_group(clause, verb, agreement, do_support)

        if verb.particle:
            members.append(self.lexicon.create_word(verb.particle, Category.PREPOSITION))

        gapped = set(omit)
        if clause.relative_function is not None:
            gapped.add(clause.relative_function)
        if features.flag("passive"):
            # The object has been promoted to subject.
            gapped.add(DiscourseFunction.OBJECT)

        if clause.indirect_object is not None and DiscourseFunction.INDIRECT_OBJECT not in gapped:
            members.append(
                self.realize_noun_phrase(clause.indirect_object, DiscourseFunction.INDIRECT_OBJECT)
            )
        if clause.object is not None and DiscourseFunction.OBJECT not in gapped:
            members.append(self.realize_noun_phrase(clause.object, DiscourseFunction.OBJECT))

        for complement in clause.complements:
            if isinstance(complement, PrepositionalPhraseSpec):
                members.append(
                    self.realize_prepositional_phrase(complement, DiscourseFunction.COMPLEMENT)
                )
            else:
                members.append(self.realize_noun_phrase(complement, DiscourseFunction.COMPLEMENT))

        return Group(
            Category.VERB_PHRASE,
            features={
                "tense": features.effective_tense,
                "person": agreement.person,
                "number": agreement.number,
            },
            discourse_function=DiscourseFunction.VERB_PHRASE,
            members=members,
        )

    def _verb_chain(
        self,
        clause: ClauseSpec,
        verb: VerbPhraseSpec,
        finite: bool,
        do_support: bool = False,
    ) -> List[Tuple[str, str]]:
        features = clause.features
        form = features.effective_form

        chain: List[Tuple[str, str]] = []
        if features.modal:
            chain.append((features.modal, MODAL))
        elif features.effective_tense is Tense.FUTURE and form is Form.NORMAL and not do_support:
            # Under do-support the "will" comes with the do auxiliary.
            chain.append(("will", MODAL))
        if features.flag("perfect"):
            chain.append(("have", PERFECT))
        if features.flag("progressive"):
            chain.append(("be", PROGRESSIVE))
        if features.flag("passive"):
            chain.append(("be", PASSIVE))
        chain.append((verb.verb, MAIN))

        if features.flag("negated"):
            lone_verb = len(chain) == 1 and not self.classifier.is_copular(verb)
            if (finite and lone_verb) or form is Form.IMPERATIVE:
                # "does not kiss", "do not dance"
                chain.insert(0, ("do", DO))
        return chain

    def _verb_group(
        self,
        clause: ClauseSpec,
        verb: VerbPhraseSpec,
        agreement: Agreement,
        do_support: bool,
    ) -> List[Constituent]:
        features = clause.features
        form = features.effective_form
        finite = form is Form.NORMAL and not do_support
        chain = self._verb_chain(clause, verb, finite, do_support)

        verbs: List[Constituent] = []
        previous: Optional[str] = None
        for index, (lemma, role) in enumerate(chain):
            is_finite = finite and index == 0
            if is_finite:
                text = self._finite_form(lemma, role, features.effective_tense, agreement)
            elif previous is None:
                text = lemma
            else:
                text = self._nonfinite_form(lemma, previous)
            verbs.append(_verb_word(lemma, text, role, is_finite))
            previous = role

        main = verbs[-1]
        sequence = verbs[:-1] + [self._modifier(m) for m in clause.pre_modifiers] + [main]

        if form is Form.INFINITIVE:
            sequence.insert(0, self.lexicon.create_word("to", Category.PREPOSITION))

        if features.flag("negated"):
            negation = self.lexicon.create_word("not", Category.ADVERB)
            if do_support or form in (Form.INFINITIVE, Form.BARE_INFINITIVE):
                sequence.insert(0, negation)
            else:
                sequence.insert(sequence.index(verbs[0]) + 1, negation)

        return sequence

    def _finite_form(self, lemma: str, role: str, tense: Tense, agreement: Agreement) -> str:
        if role == MODAL:
            return lemma
        forms = self.lexicon.forms_of(lemma, Category.VERB)
        person, number = agreement.person.value, agreement.number.value
        if tense is Tense.PAST:
            return emorph.past_form(lemma, person, number, forms)
        return emorph.present_form(lemma, person, number, forms)

    def _nonfinite_form(self, lemma: str, previous: str) -> str:
        forms = self.lexicon.forms_of(lemma, Category.VERB)
        if previous in (PERFECT, PASSIVE):
            return emorph.past_participle(lemma, forms)
        if previous == PROGRESSIVE:
            return emorph.present_participle(lemma, forms)
        return lemma

    def _modifier(self, modifier: ModifierInput) -> Constituent:
        if isinstance(modifier, str):
            return self.realize_text(modifier, DiscourseFunction.PRE_MODIFIER)
        return modifier.with_function(DiscourseFunction.PRE_MODIFIER)


class EnglishAuxiliaryBuilder(AuxiliaryBuilder):
    """The "do" of do-support: does / do / did, or "will do" in the future."""

    def __init__(self, lexicon: EnglishLexicalFactory):
        self.lexicon = lexicon

    def build_do(self, tense: Tense, person: Person, number: NumberAgreement) -> Constituent:
        forms = self.lexicon.forms_of("do", Category.VERB)
        if tense is Tense.FUTURE:
            members: List[Constituent] = [
                _verb_word("will", "will", MODAL, True),
                _verb_word("do", "do", DO, False),
            ]
        elif tense is Tense.PAST:
            members = [_verb_word("do", emorph.past_form("do", person.value, number.value, forms), DO, True)]
        else:
            members = [_verb_word("do", emorph.present_form("do", person.value, number.value, forms), DO, True)]

        features: Dict[str, Any] = {"auxiliary": True, "tense": tense}
        return Group(Category.VERB_PHRASE, features=features, members=members)


__all__ = ["EnglishPhraseRealizer", "EnglishAuxiliaryBuilder"]
