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

import unittest

from longest_chain.chain_graph import (
    ChainGraph,
    ChainNode,
    build_catalog,
    content_key,
)


class ChainNodeTest(unittest.TestCase):

    def test_first_and_last_characters(self):
        node = ChainNode("oomph")
        self.assertEqual(node.first_char, "o")
        self.assertEqual(node.last_char, "h")
        self.assertFalse(node.is_self_linked)

    def test_single_character_node_is_self_linked(self):
        node = ChainNode("a")
        self.assertEqual(node.first_char, "a")
        self.assertEqual(node.last_char, "a")
        self.assertTrue(node.is_self_linked)

    def test_children_empty_before_graph_is_built(self):
        self.assertEqual(ChainNode("abc").children, ())


class ChainGraphTest(unittest.TestCase):

    def test_buckets_keep_set_order(self):
        graph = ChainGraph.from_strings(["cde", "abc", "cdf", "fuf", "fgh"])
        self.assertEqual(graph.characters(), ["c", "a", "f"])
        self.assertEqual(
            [node.value for node in graph.starting_with("c")], ["cde", "cdf"]
        )
        self.assertEqual(
            [node.value for node in graph.nodes()],
            ["cde", "cdf", "abc", "fuf", "fgh"],
        )
        self.assertEqual(len(graph), 5)

    def test_children_follow_last_character(self):
        graph = ChainGraph.from_strings(["abc", "cde", "cdf", "fuf", "fgh"])
        (abc,) = graph.starting_with("a")
        self.assertEqual([child.value for child in abc.children], ["cde", "cdf"])

        cde, cdf = graph.starting_with("c")
        self.assertEqual(cde.children, ())
        self.assertEqual([child.value for child in cdf.children], ["fuf", "fgh"])

    def test_children_share_nodes_with_buckets(self):
        graph = ChainGraph.from_strings(["ab", "ba"])
        (ab,) = graph.starting_with("a")
        (ba,) = graph.starting_with("b")
        self.assertIs(ab.children[0], ba)
        self.assertIs(ba.children[0], ab)

    def test_self_linked_node_lists_itself(self):
        graph = ChainGraph.from_strings(["fuf", "fgh"])
        fuf, fgh = graph.starting_with("f")
        self.assertEqual(fuf.children, (fuf, fgh))
        self.assertEqual(fgh.children, ())

    def test_missing_bucket_lookup(self):
        graph = ChainGraph.from_strings(["abc"])
        self.assertEqual(graph.starting_with("z"), ())

    def test_empty_graph(self):
        graph = ChainGraph.empty()
        self.assertEqual(len(graph), 0)
        self.assertEqual(list(graph.nodes()), [])
        self.assertEqual(graph.starting_with("a"), ())


class BuildCatalogTest(unittest.TestCase):

    def test_content_key_ignores_order(self):
        self.assertEqual(content_key(["a", "b", "c"]), content_key(["c", "a", "b"]))
        self.assertNotEqual(content_key(["a", "b"]), content_key(["a", "b", "c"]))

    def test_distinct_sets_get_their_own_graph(self):
        catalog = build_catalog([["foo", "oomph"], ["hij", "jkl"]])
        self.assertEqual(len(catalog), 2)
        self.assertEqual([entry.instances for entry in catalog], [[0], [1]])
        self.assertFalse(any(entry.duplicated for entry in catalog))

    def test_duplicate_content_reuses_graph(self):
        catalog = build_catalog(
            [["a", "b", "c"], ["xy"], ["c", "b", "a"], ["a", "b", "c"]]
        )
        self.assertEqual(len(catalog), 2)
        first, second = catalog
        self.assertEqual(first.instances, [0, 2, 3])
        self.assertTrue(first.duplicated)
        self.assertEqual(first.representative, 0)
        self.assertEqual(second.instances, [1])
        self.assertFalse(second.duplicated)

    def test_graph_built_from_first_instance_order(self):
        catalog = build_catalog([["b", "a"], ["a", "b"]])
        (entry,) = catalog
        self.assertEqual(entry.graph.characters(), ["b", "a"])

    def test_empty_input(self):
        self.assertEqual(build_catalog([]), [])


if __name__ == "__main__":
    unittest.main()
