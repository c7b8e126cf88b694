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

"""Longest chain solver over uploaded string sets."""

from longest_chain.chain_graph import ChainGraph, ChainNode, build_catalog
from longest_chain.chain_search import (
    Chain,
    ChainSearchTimeout,
    find_longest_chain,
    solve,
    solve_chain,
)

__all__ = [
    "Chain",
    "ChainGraph",
    "ChainNode",
    "ChainSearchTimeout",
    "build_catalog",
    "find_longest_chain",
    "solve",
    "solve_chain",
]
