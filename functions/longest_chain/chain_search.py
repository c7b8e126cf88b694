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
Longest chain search over a collection of string sets.

A chain is a sequence of distinct strings where every string starts with the
character the previous one ends with. Strings are taken from one set, with a
single allowed switch into a second set, e.g. for the sets

    foo oomph hgf
    hij jkl jkm lmn
    abc cde cdf fuf fgh

there are several longest chains of seven strings, among them

    abc cdf fuf fgh | hij jkl lmn
    abc cdf fuf fgh | hgf foo oomph

and the search returns whichever it meets first.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from longest_chain.chain_graph import ChainGraph, ChainNode, GraphEntry, build_catalog

logger = logging.getLogger(__name__)


class ChainSearchTimeout(RuntimeError):
    """Raised when a search runs past its deadline."""


@dataclass(frozen=True)
class Chain:
    """
    Result of a search.

    `switch_index` is the position of the first string taken from the second
    set, or None when the whole chain comes from one set. `first_set` and
    `second_set` are positions in the solver input.
    """

    strings: tuple[str, ...] = ()
    switch_index: Optional[int] = None
    first_set: Optional[int] = None
    second_set: Optional[int] = None

    def __len__(self) -> int:
        return len(self.strings)

    def as_list(self) -> list[str]:
        return list(self.strings)


EMPTY_CHAIN = Chain()


class _PairSearch:
    """Two-phase backtracking search for one ordered pair of graphs."""

    def __init__(self, second: ChainGraph, deadline: Optional[float]):
        self.second = second
        self.deadline = deadline
        self.steps = 0

    def _tick(self) -> None:
        self.steps += 1
        if self.deadline is not None and time.monotonic() > self.deadline:
            raise ChainSearchTimeout(
                f"Longest chain search timed out after {self.steps} steps"
            )

    def search_first(self, node: ChainNode, visited: dict[str, None]) -> Chain:
        """Extend `visited` (ending at `node`) in the first graph or switch."""
        self._tick()
        visited[node.value] = None
        try:
            best = EMPTY_CHAIN
            for child in node.children:
                if child is node or child.value in visited:
                    continue
                found = self.search_first(child, visited)
                if len(found) > len(best):
                    best = found

            for start in self.second.starting_with(node.last_char):
                if start.value in visited:
                    continue
                found = self.search_second(visited, start, {})
                if len(found) > len(best):
                    best = found

            if not best:
                best = Chain(tuple(visited))
            return best
        finally:
            del visited[node.value]

    def search_second(
        self, prefix: dict[str, None], node: ChainNode, visited: dict[str, None]
    ) -> Chain:
        """Extend the chain in the second graph after a fixed first-graph prefix."""
        self._tick()
        visited[node.value] = None
        try:
            best = EMPTY_CHAIN
            for child in node.children:
                if child is node or child.value in visited or child.value in prefix:
                    continue
                found = self.search_second(prefix, child, visited)
                if len(found) > len(best):
                    best = found

            if not best:
                best = Chain(tuple(prefix) + tuple(visited), switch_index=len(prefix))
            return best
        finally:
            del visited[node.value]


def find_longest_chain(
    first: ChainGraph, second: ChainGraph, deadline: Optional[float] = None
) -> Chain:
    """
    Find the longest chain starting in `first` with at most one switch to `second`.

    Pass an empty graph as `second` to search `first` alone. `deadline` is a
    `time.monotonic()` value after which ChainSearchTimeout is raised.
    """
    search = _PairSearch(second, deadline)
    best = EMPTY_CHAIN
    # No chain can be longer than every node of both graphs.
    limit = len(first) + len(second)
    for node in first.nodes():
        found = search.search_first(node, {})
        if len(found) > len(best):
            best = found
            if len(best) == limit:
                break
    logger.debug(
        "Pair search finished in %d steps, best length %d", search.steps, len(best)
    )
    return best


def _attribute(chain: Chain, first: GraphEntry, second: Optional[GraphEntry]) -> Chain:
    if not chain:
        return chain
    second_set = None
    if chain.switch_index is not None and second is not None:
        # A duplicated set paired with itself switches into its next instance.
        second_set = second.instances[1] if second is first else second.representative
    return dataclasses.replace(
        chain, first_set=first.representative, second_set=second_set
    )


def solve_chain(
    sets: Iterable[Sequence[str]], timeout: Optional[float] = None
) -> Chain:
    """
    Find the longest chain over all string sets.

    Sets are visited in input order; among chains of equal length the first
    one found wins. `timeout` bounds the whole solve in seconds.
    """
    sets = [tuple(strings) for strings in sets]
    if not sets:
        return EMPTY_CHAIN

    deadline = time.monotonic() + timeout if timeout is not None else None
    catalog = build_catalog(sets)

    if len(sets) == 1:
        entry = catalog[0]
        best = _attribute(
            find_longest_chain(entry.graph, ChainGraph.empty(), deadline), entry, None
        )
        logger.info("Solved single set: chain length %d", len(best))
        return best

    best = EMPTY_CHAIN
    pairs = 0
    for first in catalog:
        for second in catalog:
            # Switching into an identical graph only helps when the content
            # was uploaded more than once.
            if second is first and not first.duplicated:
                continue
            pairs += 1
            chain = find_longest_chain(first.graph, second.graph, deadline)
            logger.debug(
                "Sets %d -> %d: chain length %d",
                first.representative,
                second.representative,
                len(chain),
            )
            if len(chain) > len(best):
                best = _attribute(chain, first, second)

    logger.info(
        "Solved %d sets (%d distinct, %d pairs): chain length %d",
        len(sets),
        len(catalog),
        pairs,
        len(best),
    )
    return best


def solve(
    sets: Iterable[Sequence[str]], timeout: Optional[float] = None
) -> list[str]:
    """Return the longest chain over `sets` as a list of strings."""
    return solve_chain(sets, timeout=timeout).as_list()
