# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================

"""
Character-linked graphs built from string sets.

Every string becomes a node; a node links to every node of the same set whose
first character equals its own last character.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence


class ChainNode:
    """A single string in a ChainGraph."""

    __slots__ = ("value", "_children")

    def __init__(self, value: str):
        self.value = value
        self._children: tuple[ChainNode, ...] = ()

    @property
    def first_char(self) -> str:
        return self.value[0]

    @property
    def last_char(self) -> str:
        return self.value[-1]

    @property
    def children(self) -> tuple[ChainNode, ...]:
        """Nodes starting with this node's last character (may include self)."""
        return self._children

    @property
    def is_self_linked(self) -> bool:
        return self.first_char == self.last_char

    def __repr__(self) -> str:
        return f"ChainNode({self.value!r})"


class ChainGraph:
    """
    Nodes of one string set bucketed by leading character.

    Buckets keep the set's iteration order, and buckets themselves are ordered
    by the first appearance of their character. Children are resolved once in
    `from_strings` and never change afterwards.
    """

    def __init__(self, buckets: dict[str, tuple[ChainNode, ...]]):
        self._buckets = buckets

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> ChainGraph:
        grouped: dict[str, list[ChainNode]] = {}
        for value in strings:
            node = ChainNode(value)
            grouped.setdefault(node.first_char, []).append(node)

        buckets = {char: tuple(nodes) for char, nodes in grouped.items()}
        for nodes in buckets.values():
            for node in nodes:
                # A missing bucket leaves the node as a dead end.
                node._children = buckets.get(node.last_char, ())
        return cls(buckets)

    @classmethod
    def empty(cls) -> ChainGraph:
        return cls({})

    def starting_with(self, char: str) -> tuple[ChainNode, ...]:
        return self._buckets.get(char, ())

    def characters(self) -> list[str]:
        return list(self._buckets)

    def nodes(self) -> Iterator[ChainNode]:
        for nodes in self._buckets.values():
            yield from nodes

    def __len__(self) -> int:
        return sum(len(nodes) for nodes in self._buckets.values())

    def __repr__(self) -> str:
        return f"ChainGraph(nodes={len(self)}, characters={self.characters()!r})"


def content_key(strings: Iterable[str]) -> frozenset[str]:
    """Order-independent identity of a string set."""
    return frozenset(strings)


@dataclass
class GraphEntry:
    """A graph shared by every input set with the same content."""

    key: frozenset[str]
    graph: ChainGraph
    instances: list[int] = field(default_factory=list)

    @property
    def duplicated(self) -> bool:
        return len(self.instances) > 1

    @property
    def representative(self) -> int:
        return self.instances[0]


def build_catalog(sets: Sequence[Sequence[str]]) -> list[GraphEntry]:
    """
    Build one graph per distinct set content.

    Entries are ordered by the first input position holding their content.
    Later sets with the same content are recorded as extra instances instead
    of getting their own graph.
    """
    entries: dict[frozenset[str], GraphEntry] = {}
    for position, strings in enumerate(sets):
        key = content_key(strings)
        entry = entries.get(key)
        if entry is None:
            entry = GraphEntry(key=key, graph=ChainGraph.from_strings(strings))
            entries[key] = entry
        entry.instances.append(position)
    return list(entries.values())
