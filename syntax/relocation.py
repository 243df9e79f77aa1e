# syntax/relocation.py
"""
Subject relocation ("split the verb group").

Questions with an auxiliary put the subject between the first verb and
the rest of the verb group: "Will John kiss Mary?". ``relocate_subject``
finds that position in the realized output and moves the subject there.

The search is bounded: insertion anchors are looked for at the top level
and one level down, and an already placed subject is looked for at most
two levels below the top.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Tuple

import structlog

from realizer.core.domain.constituent import Constituent
from realizer.core.domain.exceptions import ContractViolationError
from realizer.core.domain.features import Category, DiscourseFunction

logger = structlog.get_logger()

# (owner, anchor): insert right after ``anchor`` inside ``owner``.
InsertionPoint = Tuple[Constituent, Constituent]

_SUBJECT_SEARCH_DEPTH = 2


def relocate_subject(output: Constituent, subject: Optional[Constituent]) -> bool:
    """
    Move the clause subject right after the first verb of the verb group.

    Returns False, leaving ``output`` untouched, when there is no verb to
    attach to. A subject already present in ``output`` is taken out of its
    current place and used instead of ``subject``.
    """
    point = find_insertion_point(output)
    if point is None:
        logger.debug("subject_relocation_skipped", reason="no_verb_anchor")
        return False

    displaced = _displace_subject(output)
    if displaced is not None:
        subject = displaced
    if subject is None:
        return False

    owner, anchor = point
    _insert_after(owner, anchor, subject)
    logger.debug(
        "subject_relocated",
        anchor=anchor.category.value,
        displaced=displaced is not None,
    )
    return True


def find_insertion_point(output: Constituent) -> Optional[InsertionPoint]:
    """Where a split subject would go, without moving anything."""
    top_level = _candidates(output.children or [])

    for node in top_level:
        if node.has_function(DiscourseFunction.VERB_PHRASE) or node.category is Category.VERB_PHRASE:
            verb = _first_verbal(node.children or [])
            if verb is not None:
                return node, verb
            return output, node

    for node in top_level:
        verb = _first_verbal(node.children or [])
        if verb is not None:
            return node, verb

    return None


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------


def _candidates(nodes: List[Constituent]) -> List[Constituent]:
    return [n for n in nodes if not n.has_function(DiscourseFunction.SUBJECT)]


def _first_verbal(nodes: List[Constituent]) -> Optional[Constituent]:
    for node in _candidates(nodes):
        if node.category.is_verbal:
            return node
    return None


def _displace_subject(output: Constituent) -> Optional[Constituent]:
    """Breadth-first search for a SUBJECT-tagged node; take it out of its owner."""
    queue: Deque[Tuple[Constituent, int]] = deque([(output, 0)])
    while queue:
        owner, depth = queue.popleft()
        children = owner.children or []
        for index, child in enumerate(children):
            if child.has_function(DiscourseFunction.SUBJECT):
                return _take(owner, index)
        if depth >= _SUBJECT_SEARCH_DEPTH:
            continue
        for child in children:
            # Tagged top-level constituents (objects, modifiers...) own
            # their own subjects, if any.
            if depth == 0 and child.discourse_function is not None:
                continue
            if child.children:
                queue.append((child, depth + 1))
    return None


def _take(owner: Constituent, index: int) -> Constituent:
    children = owner.children
    if children is None:
        raise ContractViolationError(f"'{owner.category.value}' has no children to take from")
    node = children[index]
    owner.replace_children(children[:index] + children[index + 1:])
    return node


def _insert_after(owner: Constituent, anchor: Constituent, node: Constituent) -> None:
    children = owner.children or []
    for index, child in enumerate(children):
        if child is anchor:
            owner.replace_children(children[: index + 1] + [node] + children[index + 1:])
            return
    raise ContractViolationError(
        f"insertion anchor '{anchor.category.value}' is no longer a child of '{owner.category.value}'"
    )


__all__ = ["relocate_subject", "find_insertion_point"]
