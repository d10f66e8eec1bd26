from __future__ import annotations

import unittest

from obsidianhtml.node import Element, Node, Text


class TestNode(unittest.TestCase):
    def test_constructor_adopts_children(self) -> None:
        text = Text("hi")
        p = Element("p", {"class": ["a"]}, [text])
        assert text.parent is p
        assert p.children == [text]
        assert p.attrs == {"class": ["a"]}

    def test_empty_name_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Node("")

    def test_element_rejects_container_names(self) -> None:
        with self.assertRaises(ValueError):
            Element("#text")

    def test_text_cannot_have_children(self) -> None:
        with self.assertRaises(ValueError):
            Text("x").append_child(Text("y"))

    def test_append_moves_node_between_parents(self) -> None:
        child = Element("span")
        first = Element("div", children=[child])
        second = Element("div")
        second.append_child(child)
        assert first.children == []
        assert second.children == [child]
        assert child.parent is second

    def test_append_rejects_cycles(self) -> None:
        outer = Element("div")
        inner = Element("div")
        outer.append_child(inner)
        with self.assertRaises(ValueError):
            inner.append_child(outer)
        with self.assertRaises(ValueError):
            outer.append_child(outer)

    def test_insert_before_and_after(self) -> None:
        b = Element("b")
        parent = Element("p", children=[b])
        a = Element("a")
        c = Element("i")
        parent.insert_before(a, b)
        parent.insert_after(c, b)
        assert [n.name for n in parent.children] == ["a", "b", "i"]

    def test_insert_with_unknown_reference_is_ignored(self) -> None:
        parent = Element("p")
        parent.insert_before(Element("a"), Element("b"))
        assert parent.children == []

    def test_insert_child_at_appends_when_out_of_range(self) -> None:
        parent = Element("ul", children=[Element("li")])
        last = parent.insert_child_at(10, Element("li", {"id": "last"}))
        assert parent.children[-1] is last
        first = parent.insert_child_at(0, Element("li", {"id": "first"}))
        assert parent.children[0] is first

    def test_remove_child_detaches(self) -> None:
        child = Text("x")
        parent = Element("p", children=[child])
        parent.remove_child(child)
        assert parent.children == []
        assert child.parent is None

    def test_replace_child_keeps_position(self) -> None:
        old = Element("img")
        parent = Element("p", children=[Text("a"), old, Text("b")])
        new = Element("iframe")
        parent.replace_child(new, old)
        assert parent.children[1] is new
        assert new.parent is parent
        assert old.parent is None

    def test_replace_children_can_reuse_existing_child(self) -> None:
        code = Element("code")
        pre = Element("pre", children=[code])
        pre.replace_children([Element("button"), code, Element("div")])
        assert [n.name for n in pre.children] == ["button", "code", "div"]
        assert all(n.parent is pre for n in pre.children)

    def test_index_of_uses_identity(self) -> None:
        a = Text("same")
        b = Text("same")
        parent = Element("p", children=[a, b])
        assert parent.index_of(b) == 1
        assert parent.index_of(Text("same")) == -1

    def test_to_test_format(self) -> None:
        root = Node(
            children=[
                Element("p", {"id": "x", "class": ["a", "b"], "hidden": True, "disabled": False}, [Text("hi")]),
            ]
        )
        assert root.to_test_format() == '| <p>\n|   class="a b"\n|   hidden=""\n|   id="x"\n|   "hi"'
