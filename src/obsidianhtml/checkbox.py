"""Interactive checkboxes and task-list item state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .predicates import attr_equals, class_tokens, has_class, is_flag_set, is_tag
from .walk import walk

if TYPE_CHECKING:
    from .node import Node
    from .transforms import NodeCallback, ReportCallback

CHECKBOX_CLASS = "checkbox-toggle"
TASK_ITEM_CLASS = "task-list-item"
CHECKED_CLASS = "is-checked"
TASK_CHAR_ATTR = "data-task-char"
TASK_ATTR = "data-task"


def _is_checkbox(node: object) -> bool:
    return is_tag(node, "input") and attr_equals(node, "type", "checkbox")


def checkbox(
    root: Node,
    *,
    callback: NodeCallback | None = None,
    report: ReportCallback | None = None,
) -> None:
    def _enable(node: Node, index: int | None, parent: Node | None) -> None:
        if not _is_checkbox(node):
            return
        node.attrs["disabled"] = False
        node.attrs["class"] = [CHECKBOX_CLASS]
        if callback is not None:
            callback(node)
        if report is not None:
            report("Enabled checkbox <input>", node=node)

    def _mark_task(node: Node, index: int | None, parent: Node | None) -> None:
        if not is_tag(node, "li") or not has_class(node, TASK_ITEM_CLASS):
            return
        box = next((child for child in node.children if _is_checkbox(child)), None)
        if box is None:
            return

        checked = is_flag_set(box, "checked")
        override = node.attrs.pop(TASK_CHAR_ATTR, None)
        if isinstance(override, str):
            task_char = override
        else:
            task_char = "x" if checked else ""

        classes = class_tokens(node.attrs.get("class"))
        if checked and CHECKED_CLASS not in classes:
            classes.append(CHECKED_CLASS)
        node.attrs["class"] = classes
        node.attrs[TASK_ATTR] = task_char
        if callback is not None:
            callback(node)
        if report is not None:
            report(f"Marked task item with data-task={task_char!r}", node=node)

    walk(root, _enable)
    walk(root, _mark_task)
