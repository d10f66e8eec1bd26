"""Mutable, parent-linked node tree shared by every pass."""

from __future__ import annotations

from typing import Union

AttrValue = Union[str, bool, int, float, list[str]]


class Node:
    """A container node.

    Used directly for the tree root (``#document-fragment``); ``Element``
    and ``Text`` specialise it.
    - name: tag name, or ``#document-fragment`` / ``#text``
    - attrs: attribute bag (string, boolean, number or list of strings)
    - children: ordered child nodes
    - parent: owning node, or None for the root
    """

    __slots__ = ("attrs", "children", "name", "parent")

    def __init__(
        self,
        name: str = "#document-fragment",
        attrs: dict[str, AttrValue] | None = None,
        children: list[Node] | None = None,
    ) -> None:
        if not name:
            raise ValueError("Empty name passed to Node constructor")
        self.name = name
        self.attrs: dict[str, AttrValue] = dict(attrs) if attrs else {}
        self.children: list[Node] = []
        self.parent: Node | None = None
        if children:
            for child in children:
                self.append_child(child)

    def __repr__(self) -> str:
        return f"Node({self.name!r}, children={len(self.children)})"

    def _adopt(self, child: Node) -> None:
        if isinstance(self, Text):
            raise ValueError("Text nodes cannot have children")
        if self._would_create_circular_reference(child):
            raise ValueError(f"Adding {child.name} as child of {self.name} would create circular reference")
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self

    def _would_create_circular_reference(self, child: Node) -> bool:
        current: Node | None = self
        while current is not None:
            if current is child:
                return True
            current = current.parent
        return False

    def index_of(self, child: Node) -> int:
        """Position of ``child`` by identity, or -1."""
        for i, candidate in enumerate(self.children):
            if candidate is child:
                return i
        return -1

    def append_child(self, child: Node) -> Node:
        self._adopt(child)
        self.children.append(child)
        return child

    def insert_child_at(self, index: int, child: Node) -> Node:
        """Insert a child at the specified index (appends when out of range)."""
        self._adopt(child)
        if index < 0 or index >= len(self.children):
            self.children.append(child)
        else:
            self.children.insert(index, child)
        return child

    def insert_before(self, new_node: Node, reference_node: Node) -> None:
        if self.index_of(reference_node) < 0:
            return
        self._adopt(new_node)
        self.children.insert(self.index_of(reference_node), new_node)

    def insert_after(self, new_node: Node, reference_node: Node) -> None:
        if self.index_of(reference_node) < 0:
            return
        self._adopt(new_node)
        self.children.insert(self.index_of(reference_node) + 1, new_node)

    def remove_child(self, child: Node) -> None:
        idx = self.index_of(child)
        if idx < 0:
            return
        del self.children[idx]
        child.parent = None

    def replace_child(self, new_node: Node, old_node: Node) -> None:
        """Put ``new_node`` where ``old_node`` is; ``old_node`` is detached."""
        if new_node is old_node or self.index_of(old_node) < 0:
            return
        self._adopt(new_node)
        idx = self.index_of(old_node)
        self.children[idx] = new_node
        old_node.parent = None

    def replace_children(self, nodes: list[Node]) -> None:
        """Swap the whole child sequence for ``nodes``."""
        for child in self.children:
            child.parent = None
        self.children = []
        for node in nodes:
            self.append_child(node)

    def to_test_format(self, indent: int = 0) -> str:
        if self.name == "#document-fragment":
            return "\n".join(child.to_test_format(0) for child in self.children)
        result = f"| {' ' * indent}<{self.name}>"
        for key, value in sorted(self.attrs.items()):
            if isinstance(value, list):
                value = " ".join(value)
            elif value is True:
                value = ""
            elif value is False:
                continue
            result += f'\n| {" " * (indent + 2)}{key}="{value}"'
        if self.children:
            parts = [result]
            parts.extend(child.to_test_format(indent + 2) for child in self.children)
            return "\n".join(parts)
        return result


class Element(Node):
    __slots__ = ()

    def __init__(
        self,
        name: str,
        attrs: dict[str, AttrValue] | None = None,
        children: list[Node] | None = None,
    ) -> None:
        if name.startswith("#"):
            raise ValueError(f"Invalid element name: {name!r}")
        super().__init__(name, attrs, children)

    def __repr__(self) -> str:
        return f"Element(<{self.name}>, children={len(self.children)})"


class Text(Node):
    __slots__ = ("data",)

    def __init__(self, data: str = "") -> None:
        super().__init__("#text")
        self.data = data

    def __repr__(self) -> str:
        return f"Text({self.data[:30]!r})"

    def to_test_format(self, indent: int = 0) -> str:
        return f'| {" " * indent}"{self.data}"'
