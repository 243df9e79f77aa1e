# realizer/core/domain/constituent.py
"""
Constituent tree nodes.

A realized clause is a tree of two node kinds:

    Word   a leaf carrying one surface token (possibly canned multi-word text)
    Group  a phrase of some category, or a LIST aggregate, with ordered members

Both carry a ``category``, an open ``features`` mapping and an optional
``discourse_function`` telling what role the node plays in its parent.

Ownership is strict: a node lives in exactly one child list. Groups never
patch their member list in place; ``take``/``insert``/``append`` build a
new list and swap it in, so anybody holding an old ``children`` snapshot
keeps a consistent (if stale) view.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional

from realizer.core.domain.exceptions import ContractViolationError
from realizer.core.domain.features import Category, DiscourseFunction


@dataclass(eq=False)
class Constituent(ABC):
    """Common base of ``Word`` and ``Group``. Never instantiated directly."""

    category: Category
    features: Dict[str, Any] = field(default_factory=dict)
    discourse_function: Optional[DiscourseFunction] = None

    @property
    def children(self) -> Optional[List["Constituent"]]:
        """Snapshot of the child list, or None for leaves."""
        return None

    def replace_children(self, children: Iterable["Constituent"]) -> None:
        raise ContractViolationError(
            f"{type(self).__name__} '{self.category.value}' cannot hold children"
        )

    def has_function(self, function: DiscourseFunction) -> bool:
        return self.discourse_function is function

    @abstractmethod
    def iter_words(self) -> Iterator["Word"]:
        """Leaves in surface order."""

    def tokens(self) -> List[str]:
        """Surface texts of all leaves, depth first."""
        return [word.text for word in self.iter_words() if word.text]

    def clone(self) -> "Constituent":
        return copy.deepcopy(self)

    def with_function(self, function: DiscourseFunction) -> "Constituent":
        """Return a copy of this node tagged with ``function``."""
        node = self.clone()
        node.discourse_function = function
        return node


@dataclass(eq=False)
class Word(Constituent):
    """A leaf: one realized token."""

    text: str = ""
    base: Optional[str] = None

    def iter_words(self) -> Iterator["Word"]:
        yield self


@dataclass(eq=False)
class Group(Constituent):
    """A phrase or list whose members are moved in and out wholesale."""

    members: List[Constituent] = field(default_factory=list)

    @property
    def children(self) -> Optional[List[Constituent]]:
        return list(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def replace_children(self, children: Iterable[Constituent]) -> None:
        self.members = list(children)

    def take(self, index: int) -> Constituent:
        """Move the child at ``index`` out of this group and return it."""
        node = self.members[index]
        self.members = self.members[:index] + self.members[index + 1:]
        return node

    def insert(self, index: int, node: Constituent) -> None:
        self.members = self.members[:index] + [node] + self.members[index:]

    def append(self, node: Constituent) -> None:
        self.members = self.members + [node]

    def extend(self, nodes: Iterable[Constituent]) -> None:
        self.members = self.members + list(nodes)

    def iter_words(self) -> Iterator[Word]:
        for member in self.members:
            yield from member.iter_words()


__all__ = ["Constituent", "Word", "Group"]
