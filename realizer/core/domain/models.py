# realizer/core/domain/models.py
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from realizer.core.domain.constituent import Constituent
from realizer.core.domain.features import (
    ClauseFeatures,
    DiscourseFunction,
    Gender,
    NumberAgreement,
    Person,
)

# -----------------------------
# Phrase specifications
# -----------------------------


class NounPhraseSpec(BaseModel):
    """
    Abstract noun phrase.

    Pronominal phrases ignore ``head`` at realization time: the pronoun is
    chosen from person / number / gender and the phrase's function (case).
    """
    head: str
    determiner: Optional[str] = None
    pronominal: bool = False
    person: Optional[Person] = None
    number: Optional[NumberAgreement] = None
    gender: Optional[Gender] = None
    adjectives: List[str] = Field(default_factory=list)
    post_modifiers: List[str] = Field(default_factory=list)

    @property
    def effective_person(self) -> Person:
        return self.person or Person.THIRD

    @property
    def effective_number(self) -> NumberAgreement:
        return self.number or NumberAgreement.SINGULAR


class VerbPhraseSpec(BaseModel):
    """Main verb of a clause (lemma), with an optional particle ("give up")."""
    verb: str
    particle: Optional[str] = None


class PrepositionalPhraseSpec(BaseModel):
    preposition: str
    complement: Union[NounPhraseSpec, str]


NounInput = Union[NounPhraseSpec, str]
ComplementInput = Union[PrepositionalPhraseSpec, NounPhraseSpec, str]
ModifierInput = Union[Constituent, str]


# -----------------------------
# Modifier slots
# -----------------------------


class ModifierSlot(str, Enum):
    """The three attachment points for clause modifiers."""
    FRONT = "front"   # before everything else ("Frankly, ...")
    PRE = "pre"       # right before the main verb ("... quickly left")
    POST = "post"     # after the complements ("... in the end")


# -----------------------------
# Clause
# -----------------------------


class ClauseSpec(BaseModel):
    """
    Abstract clause handed to the realizer.

    Strings are accepted wherever a phrase is expected: a single word is
    looked up in the lexicon, anything longer is kept as canned text.
    Modifier slots hold either text or already-realized constituents and
    are filled through ``syntax.modifiers.add_modifier``.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    subjects: List[NounInput] = Field(default_factory=list)
    verb: Optional[Union[VerbPhraseSpec, str]] = None
    object: Optional[NounInput] = None
    indirect_object: Optional[NounInput] = None
    complements: List[ComplementInput] = Field(default_factory=list)
    features: ClauseFeatures = Field(default_factory=ClauseFeatures)

    front_modifiers: List[ModifierInput] = Field(default_factory=list)
    pre_modifiers: List[ModifierInput] = Field(default_factory=list)
    post_modifiers: List[ModifierInput] = Field(default_factory=list)

    cue_phrase: Optional[str] = None

    # Function already bound by an enclosing relative clause gap
    relative_function: Optional[DiscourseFunction] = None

    def verb_phrase(self) -> Optional[VerbPhraseSpec]:
        if self.verb is None:
            return None
        if isinstance(self.verb, str):
            return VerbPhraseSpec(verb=self.verb)
        return self.verb

    def slot(self, slot: ModifierSlot) -> List[ModifierInput]:
        if slot is ModifierSlot.FRONT:
            return self.front_modifiers
        if slot is ModifierSlot.PRE:
            return self.pre_modifiers
        return self.post_modifiers

    def surface_subjects(self) -> List[NounInput]:
        """Subjects as they surface: a passive clause promotes its object."""
        if self.features.flag("passive"):
            return [self.object] if self.object is not None else []
        return list(self.subjects)


# -----------------------------
# Output
# -----------------------------


class Sentence(BaseModel):
    """The realized sentence."""
    text: str
    lang_code: str

    # Debug info provided by the engine (e.g. the token sequence)
    debug_info: Optional[Dict[str, Any]] = None

    generation_time_ms: float = 0.0


__all__ = [
    "NounPhraseSpec",
    "VerbPhraseSpec",
    "PrepositionalPhraseSpec",
    "NounInput",
    "ComplementInput",
    "ModifierInput",
    "ModifierSlot",
    "ClauseSpec",
    "Sentence",
]
