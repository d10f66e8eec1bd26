"""HTML serialization for the node model."""

# ruff: noqa: PERF401

from __future__ import annotations

from typing import TYPE_CHECKING

from .node import Text

if TYPE_CHECKING:
    from .node import AttrValue, Node

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})


def _escape_text(text: str | None) -> str:
    if not text:
        return ""
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _choose_attr_quote(value: str) -> str:
    if '"' in value and "'" not in value:
        return "'"
    return '"'


def _escape_attr_value(value: str, quote_char: str) -> str:
    value = value.replace("&", "&amp;")
    if quote_char == '"':
        return value.replace('"', "&quot;")
    return value.replace("'", "&#39;")


def _attr_to_string(value: AttrValue) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)


def serialize_start_tag(name: str, attrs: dict[str, AttrValue] | None) -> str:
    """Start tag; True attributes are minimized, False/None ones omitted."""
    parts: list[str] = ["<", name]
    for key, value in (attrs or {}).items():
        if value is None or value is False:
            continue
        if value is True:
            parts.extend([" ", key])
            continue
        if isinstance(value, (list, tuple)) and not value:
            continue
        value_str = _attr_to_string(value)
        quote = _choose_attr_quote(value_str)
        parts.extend([" ", key, "=", quote, _escape_attr_value(value_str, quote), quote])
    parts.append(">")
    return "".join(parts)


def serialize_end_tag(name: str) -> str:
    return f"</{name}>"


def to_html(node: Node) -> str:
    """Convert node to HTML string."""
    if node.name == "#document-fragment":
        return "".join(_node_to_html(child, raw=False) for child in node.children)
    return _node_to_html(node, raw=False)


def _node_to_html(node: Node, *, raw: bool) -> str:
    if isinstance(node, Text):
        return node.data if raw else _escape_text(node.data)

    name = node.name
    if name.startswith("#"):
        return "".join(_node_to_html(child, raw=raw) for child in node.children)

    open_tag = serialize_start_tag(name, node.attrs)
    if name in VOID_ELEMENTS:
        return open_tag

    child_raw = name in RAW_TEXT_ELEMENTS
    parts = [open_tag]
    for child in node.children:
        parts.append(_node_to_html(child, raw=child_raw))
    parts.append(serialize_end_tag(name))
    return "".join(parts)
