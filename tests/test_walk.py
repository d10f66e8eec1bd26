from __future__ import annotations

import unittest

from obsidianhtml.node import Element, Node, Text
from obsidianhtml.walk import WalkAction, walk


def _tree() -> Node:
    return Node(
        children=[
            Element("div", {"id": "a"}, [Element("p", {"id": "a1"}, [Text("x")]), Element("p", {"id": "a2"})]),
            Text("\n"),
            Element("div", {"id": "b"}),
        ]
    )


class TestWalk(unittest.TestCase):
    def test_visits_elements_depth_first_in_order(self) -> None:
        seen: list[str] = []
        walk(_tree(), lambda node, index, parent: seen.append(node.attrs["id"]))
        assert seen == ["a", "a1", "a2", "b"]

    def test_passes_index_and_parent(self) -> None:
        root = _tree()
        calls: list[tuple[str, int | None, Node | None]] = []
        walk(root, lambda node, index, parent: calls.append((node.attrs["id"], index, parent)))
        assert calls[0] == ("a", 0, root)
        assert calls[3] == ("b", 2, root)
        assert calls[1][2] is root.children[0]

    def test_text_filter_and_root_visit(self) -> None:
        root = _tree()
        texts: list[str] = []
        walk(root, lambda node, index, parent: texts.append(node.data), test="text")
        assert texts == ["x", "\n"]

        visited: list[tuple[str, int | None]] = []
        walk(root, lambda node, index, parent: visited.append((node.name, index)), test=None)
        assert visited[0] == ("#document-fragment", None)
        assert len(visited) == 7

    def test_predicate_filter(self) -> None:
        seen: list[str] = []
        walk(_tree(), lambda node, index, parent: seen.append(node.attrs["id"]), test=lambda n: n.name == "p")
        assert seen == ["a1", "a2"]

    def test_unknown_test_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            walk(_tree(), lambda node, index, parent: None, test="comment")

    def test_no_matches_means_no_calls(self) -> None:
        calls: list[Node] = []
        walk(Node(children=[Text("only text")]), lambda node, index, parent: calls.append(node))
        assert calls == []

    def test_removing_current_node_does_not_skip_next_sibling(self) -> None:
        root = Node(children=[Element("img", {"id": str(i)}) for i in range(4)])
        seen: list[str] = []

        def visit(node, index, parent):
            seen.append(node.attrs["id"])
            if node.attrs["id"] in {"0", "1"}:
                parent.remove_child(node)

        walk(root, visit)
        assert seen == ["0", "1", "2", "3"]
        assert [n.attrs["id"] for n in root.children] == ["2", "3"]

    def test_replacement_is_not_visited_or_descended(self) -> None:
        root = Node(children=[Element("img", {"id": "1"}), Element("img", {"id": "2"})])
        seen: list[str] = []

        def visit(node, index, parent):
            seen.append(f"{node.name}#{node.attrs.get('id', '')}")
            if node.name == "img":
                parent.replace_child(Element("figure", children=[Element("img", {"id": "inner"})]), node)

        walk(root, visit)
        assert seen == ["img#1", "img#2"]
        assert [n.name for n in root.children] == ["figure", "figure"]

    def test_wrapping_with_new_siblings_does_not_revisit(self) -> None:
        code = Element("code", children=[Text("graph")])
        root = Node(children=[Element("pre", children=[code])])
        seen: list[str] = []

        def visit(node, index, parent):
            seen.append(node.name)
            if node.name == "code":
                parent.replace_children([Element("button"), node, Element("div")])

        walk(root, visit)
        assert seen == ["pre", "code", "div"]

    def test_reordering_visited_sibling_after_current_does_not_revisit(self) -> None:
        a = Element("div", {"id": "a"}, [Element("i", {"id": "i"})])
        b = Element("div", {"id": "b"})
        root = Node(children=[a, b])
        seen: list[str] = []

        def visit(node, index, parent):
            seen.append(node.attrs["id"])
            if node is b:
                parent.replace_children([b, a])

        walk(root, visit)
        assert seen == ["a", "i", "b"]
        assert root.children == [b, a]

    def test_moving_visited_node_to_the_end_does_not_revisit(self) -> None:
        a, b, c = (Element("p", {"id": name}) for name in "abc")
        root = Node(children=[a, b, c])
        seen: list[str] = []

        def visit(node, index, parent):
            seen.append(node.attrs["id"])
            if node is b:
                parent.append_child(a)

        walk(root, visit)
        assert seen == ["a", "b", "c"]
        assert root.children == [b, c, a]

    def test_removing_later_sibling_is_respected(self) -> None:
        root = Node(children=[Element("blockquote"), Text("\n"), Element("p"), Element("hr")])
        seen: list[str] = []

        def visit(node, index, parent):
            seen.append(node.name)
            if node.name == "blockquote":
                parent.remove_child(parent.children[index + 2])

        walk(root, visit)
        assert seen == ["blockquote", "hr"]

    def test_skip_does_not_descend(self) -> None:
        seen: list[str] = []

        def visit(node, index, parent):
            seen.append(node.attrs["id"])
            if node.attrs["id"] == "a":
                return WalkAction.SKIP
            return None

        walk(_tree(), visit)
        assert seen == ["a", "b"]

    def test_exit_stops_the_walk(self) -> None:
        seen: list[str] = []

        def visit(node, index, parent):
            seen.append(node.attrs["id"])
            if node.attrs["id"] == "a1":
                return WalkAction.EXIT
            return WalkAction.CONTINUE

        walk(_tree(), visit)
        assert seen == ["a", "a1"]
