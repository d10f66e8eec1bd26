"""Parse HTML fragments into the node model.

Parsing is delegated to justhtml; its tree is copied into ``Node`` objects.
Comments and doctypes are dropped.
"""

from __future__ import annotations

from typing import Any

from justhtml import JustHTML

from .node import Element, Node, Text


def parse_fragment(markup: str) -> list[Node]:
    """Top-level nodes of ``markup`` parsed as a body fragment."""
    doc = JustHTML(markup, fragment=True)
    return _convert_children(doc.root)


def _convert_children(source: Any) -> list[Node]:
    children = source.children or []
    template_content = getattr(source, "template_content", None)
    if template_content is not None:
        children = [*children, *(template_content.children or [])]

    out: list[Node] = []
    for child in children:
        name = child.name
        if name == "#text":
            out.append(Text(child.data or ""))
            continue
        if name.startswith("#"):
            # Nested document containers only contribute their content.
            if name in {"#document", "#document-fragment"}:
                out.extend(_convert_children(child))
            continue
        if name == "!doctype":
            continue
        element = Element(name, _convert_attrs(child.attrs))
        for grandchild in _convert_children(child):
            element.append_child(grandchild)
        out.append(element)
    return out


def _convert_attrs(attrs: dict[str, str | None] | None) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in (attrs or {}).items():
        if key == "class":
            out[key] = (value or "").split()
        elif value is None:
            out[key] = True
        else:
            out[key] = value
    return out
