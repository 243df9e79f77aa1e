# realizer/core/domain/context.py
from __future__ import annotations

from dataclasses import dataclass

from realizer.core.domain.features import NumberAgreement, Person


@dataclass(frozen=True)
class Agreement:
    """
    Person/number a finite verb agrees with.

    Resolved once per clause: explicit clause features win, otherwise the
    surface subject decides.
    """

    person: Person = Person.THIRD
    number: NumberAgreement = NumberAgreement.SINGULAR


@dataclass
class RealizationContext:
    """
    Formatting hints gathered while realizing one sentence.

    The engine creates a context per sentence and hands it down to the
    clause realizer. Realization writes into it (e.g. "this sentence is a
    question"); the formatter reads it afterwards. Nothing here points
    back up the tree.
    """

    interrogative: bool = False

    def mark_interrogative(self) -> None:
        self.interrogative = True
