"""Expand controls around mermaid diagram code blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .node import Element
from .predicates import has_class, is_tag
from .walk import walk

if TYPE_CHECKING:
    from .node import Node
    from .transforms import NodeCallback, ReportCallback

DIAGRAM_CLASS = "mermaid"

_ARROW_PATH = (
    "M3.72 3.72a.75.75 0 011.06 1.06L2.56 7h10.88l-2.22-2.22a.75.75 0 011.06-1.06l3.5 3.5a.75.75 0 010 "
    "1.06l-3.5 3.5a.75.75 0 11-1.06-1.06l2.22-2.22H2.56l2.22 2.22a.75.75 0 11-1.06 1.06l-3.5-3.5a.75.75 "
    "0 010-1.06l3.5-3.5z"
)


def expand_button() -> Element:
    return Element(
        "button",
        {
            "class": ["expand-button"],
            "aria-label": "Expand mermaid diagram",
            "data-view-component": True,
        },
        [
            Element(
                "svg",
                {"width": 16, "height": 16, "viewBox": "0 0 16 16", "fill": "currentColor"},
                [Element("path", {"d": _ARROW_PATH})],
            )
        ],
    )


def mermaid_container() -> Element:
    return Element(
        "div",
        {"id": "mermaid-container", "role": "dialog"},
        [Element("div", {"id": "mermaid-space"}, [Element("div", {"class": ["mermaid-content"]})])],
    )


def mermaid_expand(
    root: Node,
    *,
    callback: NodeCallback | None = None,
    report: ReportCallback | None = None,
) -> None:
    """Surround each ``code.mermaid`` with [button, code, container].

    Not idempotent: running it again adds another button and container.
    """

    def _visit(node: Node, index: int | None, parent: Node | None) -> None:
        if not is_tag(node, "code") or not has_class(node, DIAGRAM_CLASS):
            return
        if parent is None:
            return
        parent.insert_before(expand_button(), node)
        parent.insert_after(mermaid_container(), node)
        if callback is not None:
            callback(node)
        if report is not None:
            report("Added mermaid expand controls", node=node)

    walk(root, _visit)
