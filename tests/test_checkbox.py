from __future__ import annotations

import unittest

from obsidianhtml.checkbox import checkbox
from obsidianhtml.node import Element, Node, Text


def _task(*, checked: bool = False, attrs: dict | None = None) -> Element:
    box_attrs: dict = {"type": "checkbox", "disabled": True}
    if checked:
        box_attrs["checked"] = True
    li_attrs = {"class": ["task-list-item"]}
    li_attrs.update(attrs or {})
    return Element("li", li_attrs, [Element("input", box_attrs), Text(" task")])


class TestCheckbox(unittest.TestCase):
    def test_checkbox_is_enabled_and_restyled(self) -> None:
        box = Element("input", {"type": "checkbox", "disabled": True, "class": "old", "name": "x"})
        checkbox(Node(children=[box]))
        assert box.attrs["disabled"] is False
        assert box.attrs["class"] == ["checkbox-toggle"]
        assert box.attrs["name"] == "x"
        assert "checked" not in box.attrs

    def test_checked_state_is_kept(self) -> None:
        box = Element("input", {"type": "checkbox", "checked": "", "disabled": ""})
        checkbox(Node(children=[box]))
        assert box.attrs["checked"] == ""
        assert box.attrs["disabled"] is False

    def test_other_inputs_are_untouched(self) -> None:
        field = Element("input", {"type": "text", "disabled": True})
        checkbox(Node(children=[field]))
        assert field.attrs == {"type": "text", "disabled": True}

    def test_task_items_get_state(self) -> None:
        unchecked = _task()
        checked = _task(checked=True)
        checkbox(Node(children=[Element("ul", {"class": "contains-task-list"}, [unchecked, checked])]))

        assert unchecked.attrs["data-task"] == ""
        assert unchecked.attrs["class"] == ["task-list-item"]
        assert checked.attrs["data-task"] == "x"
        assert checked.attrs["class"] == ["task-list-item", "is-checked"]

    def test_checked_class_is_not_duplicated(self) -> None:
        item = _task(checked=True, attrs={"class": "task-list-item is-checked"})
        checkbox(Node(children=[item]))
        assert item.attrs["class"] == ["task-list-item", "is-checked"]

    def test_override_character_wins_and_is_removed(self) -> None:
        for char in ("?", " ", "-"):
            item = _task(checked=True, attrs={"data-task-char": char})
            checkbox(Node(children=[item]))
            assert item.attrs["data-task"] == char
            assert "data-task-char" not in item.attrs
            assert "is-checked" in item.attrs["class"]

    def test_non_task_items_are_untouched(self) -> None:
        plain = Element("li", children=[Element("input", {"type": "checkbox"})])
        no_box = Element("li", {"class": ["task-list-item"]}, [Text("no box")])
        nested = Element("li", {"class": ["task-list-item"]}, [Element("p", children=[Element("input", {"type": "checkbox"})])])
        checkbox(Node(children=[plain, no_box, nested]))
        assert "data-task" not in plain.attrs
        assert no_box.attrs == {"class": ["task-list-item"]}
        assert "data-task" not in nested.attrs
