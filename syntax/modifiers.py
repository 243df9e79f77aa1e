# syntax/modifiers.py
"""
Modifier placement.

Decides which of the clause's three modifier slots a modifier goes to:

    FRONT  sentence adverbs ("Frankly ...")
    PRE    plain adverbs and adverb phrases, right before the main verb
    POST   everything else, after the complements

Multi-word text is never analysed; it is kept verbatim as a post-modifier.
"""

from __future__ import annotations

from typing import Optional, Union

import structlog

from realizer.core.domain.constituent import Constituent, Group, Word
from realizer.core.domain.features import Category
from realizer.core.domain.models import ClauseSpec, ModifierSlot
from realizer.core.ports import LexicalFactory

logger = structlog.get_logger()


def add_modifier(
    clause: ClauseSpec,
    modifier: Union[str, Constituent, None],
    lexicon: LexicalFactory,
) -> Optional[ModifierSlot]:
    """Attach ``modifier`` to ``clause`` and return the slot it went to."""
    if modifier is None:
        return None

    if isinstance(modifier, str):
        if not modifier or any(ch.isspace() for ch in modifier):
            return _place(clause, ModifierSlot.POST, modifier)
        modifier = lexicon.create_word(modifier, Category.ANY)

    slot = resolve_slot(modifier)
    return _place(clause, slot, modifier)


def resolve_slot(modifier: Constituent) -> ModifierSlot:
    """Slot for an already built constituent."""
    # Adverb phrases are pre-verbal even when headed by a sentence adverb.
    if modifier.category is Category.ADVERB_PHRASE:
        return ModifierSlot.PRE

    word = _as_single_word(modifier)
    if word is not None and word.category is Category.ADVERB:
        if word.features.get("sentence_modifier"):
            return ModifierSlot.FRONT
        return ModifierSlot.PRE

    return ModifierSlot.POST


def _as_single_word(node: Constituent) -> Optional[Word]:
    if isinstance(node, Word):
        return node
    if isinstance(node, Group) and len(node) == 1 and isinstance(node.members[0], Word):
        return node.members[0]
    return None


def _place(clause: ClauseSpec, slot: ModifierSlot, modifier: Union[str, Constituent]) -> ModifierSlot:
    clause.slot(slot).append(modifier)
    logger.debug("modifier_placed", slot=slot.value, kind=type(modifier).__name__)
    return slot


__all__ = ["add_modifier", "resolve_slot"]
