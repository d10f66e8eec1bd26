"""Resolve trailing ``^block-id`` markers into element ids."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .predicates import is_element, is_tag, is_text
from .store import BlockStore
from .walk import walk

if TYPE_CHECKING:
    from .node import Element, Node
    from .transforms import NodeCallback, ReportCallback

BLOCK_REFERENCE_RE = re.compile(r"\^([-_A-Za-z0-9]+)\Z")
INLINE_TAGS = ("p", "li")
BLOCK_TAGS = ("blockquote",)


def block_references(
    root: Node,
    store: BlockStore | None = None,
    *,
    callback: NodeCallback | None = None,
    report: ReportCallback | None = None,
) -> BlockStore:
    if store is None:
        store = BlockStore()

    def _assign(element: Element, block_id: str) -> None:
        store.assign(element, block_id)
        if callback is not None:
            callback(element)
        if report is not None:
            report(f"Assigned block id '{block_id}' to <{element.name}>", node=element)

    def _visit(node: Node, index: int | None, parent: Node | None) -> None:
        if is_tag(node, *BLOCK_TAGS):
            _resolve_block_marker(node, index, parent, _assign, report)
            return
        if is_tag(node, *INLINE_TAGS):
            _resolve_inline_marker(node, index, parent, _assign)

    walk(root, _visit)
    store.tree = root
    return store


def _resolve_block_marker(node, index, parent, assign, report) -> None:
    # <blockquote/>, one separator node, then <p>^id</p>.
    if parent is None or index is None:
        return
    marker_index = index + 2
    if marker_index >= len(parent.children):
        return
    marker = parent.children[marker_index]
    if not is_tag(marker, "p") or not marker.children:
        return
    first = marker.children[0]
    if not is_text(first):
        return
    match = BLOCK_REFERENCE_RE.search(first.data)
    if match is None:
        return

    parent.remove_child(marker)
    if report is not None:
        report("Removed block reference paragraph", node=marker)
    assign(node, match.group(1))


def _resolve_inline_marker(node, index, parent, assign) -> None:
    if not node.children:
        return
    last = node.children[-1]
    if not is_text(last):
        return
    match = BLOCK_REFERENCE_RE.search(last.data)
    if match is None:
        return

    block_id = match.group(1)
    stripped = last.data[: match.start()].rstrip()
    if stripped:
        last.data = stripped
        assign(node, block_id)
        return

    # A marker on its own line names the block above it.
    node.remove_child(last)
    if parent is not None:
        start = index if index is not None else 0
        for i in range(start - 1, -1, -1):
            sibling = parent.children[i]
            if is_element(sibling):
                assign(sibling, block_id)
                return
    assign(node, block_id)
