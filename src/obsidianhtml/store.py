"""Per-document side-channel store for block references."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .node import Element, Node


class BlockStore:
    """Block id to element map plus the final tree.

    When bound to a file's ``data`` bag the same objects are visible there as
    ``data["blocks"]`` and ``data["html_ast"]``.
    """

    __slots__ = ("_data", "blocks")

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data if data is not None else {}
        blocks = self._data.get("blocks")
        if not isinstance(blocks, dict):
            blocks = {}
            self._data["blocks"] = blocks
        self.blocks: dict[str, Element] = blocks

    @property
    def tree(self) -> Node | None:
        return self._data.get("html_ast")

    @tree.setter
    def tree(self, root: Node | None) -> None:
        self._data["html_ast"] = root

    def assign(self, element: Element, block_id: str) -> None:
        """Give ``element`` the id and record it; last writer wins."""
        element.attrs["id"] = block_id
        self.blocks[block_id] = element

    def transfer(self, old: Element, new: Element) -> None:
        """Move ``old``'s id, and its block map entry if it owns one, to ``new``."""
        block_id = old.attrs.get("id")
        if not isinstance(block_id, str):
            return
        new.attrs["id"] = block_id
        if self.blocks.get(block_id) is old:
            self.blocks[block_id] = new

    def __repr__(self) -> str:
        return f"BlockStore(blocks={sorted(self.blocks)})"


def ensure_block_store(file: Any) -> BlockStore:
    """Store living in ``file.data``, created on first use."""
    data = getattr(file, "data", None)
    if data is None:
        data = {}
        file.data = data
    return BlockStore(data)
