"""Node-shape tests shared by the passes.

Class lists may be stored as a list, a whitespace-separated string, or be
absent; every reader goes through ``class_tokens``/``class_list`` so the
passes never see the difference.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .node import Element, Node, Text

if TYPE_CHECKING:
    from .node import AttrValue


def is_element(node: object) -> bool:
    return isinstance(node, Element)


def is_text(node: object) -> bool:
    return isinstance(node, Text)


def has_children(node: object) -> bool:
    return isinstance(node, Node) and not isinstance(node, Text) and bool(node.children)


def is_tag(node: object, *names: str) -> bool:
    """Element whose tag name is one of ``names``."""
    return isinstance(node, Element) and node.name in names


def class_tokens(value: AttrValue | None) -> list[str]:
    """Raw class tokens in stored order, duplicates kept."""
    if value is None or value is False or value is True:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if str(v)]
    return [str(value)]


def class_list(node: Node) -> list[str]:
    """Ordered, de-duplicated class list of ``node``."""
    out: list[str] = []
    for token in class_tokens(node.attrs.get("class")):
        if token not in out:
            out.append(token)
    return out


def has_class(node: object, name: str) -> bool:
    return isinstance(node, Element) and name in class_tokens(node.attrs.get("class"))


def add_class(node: Node, name: str) -> bool:
    """Append ``name`` unless present; stores the canonical list form.

    Returns True when the class was added.
    """
    classes = class_list(node)
    if name in classes:
        node.attrs["class"] = classes
        return False
    classes.append(name)
    node.attrs["class"] = classes
    return True


def get_attr(node: Node, name: str) -> AttrValue | None:
    return node.attrs.get(name)


def has_attr(node: object, name: str) -> bool:
    return isinstance(node, Element) and name in node.attrs


def attr_equals(node: object, name: str, value: AttrValue) -> bool:
    return isinstance(node, Element) and node.attrs.get(name) == value


def is_flag_set(node: Node, name: str) -> bool:
    """Boolean attribute test: present and not explicitly False."""
    value = node.attrs.get(name)
    return value is not None and value is not False
