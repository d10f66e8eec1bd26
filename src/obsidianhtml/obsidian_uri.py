"""Mark ``obsidian://`` links for client-side handling."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .predicates import add_class, is_tag
from .walk import walk

if TYPE_CHECKING:
    from .node import Node
    from .transforms import NodeCallback, ReportCallback

SCHEME = "obsidian://"
URI_CLASS = "obsidian-uri"
URI_ATTR = "data-obsidian-uri"


def obsidian_uri(
    root: Node,
    *,
    callback: NodeCallback | None = None,
    report: ReportCallback | None = None,
) -> None:
    def _visit(node: Node, index: int | None, parent: Node | None) -> None:
        if not is_tag(node, "a"):
            return
        href = node.attrs.get("href")
        if not isinstance(href, str) or not href.startswith(SCHEME):
            return
        added = add_class(node, URI_CLASS)
        changed = added or node.attrs.get(URI_ATTR) != href
        node.attrs[URI_ATTR] = href
        if changed:
            if callback is not None:
                callback(node)
            if report is not None:
                report(f"Annotated obsidian link {href}", node=node)

    walk(root, _visit)
