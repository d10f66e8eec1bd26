"""Depth-first tree walk that tolerates mutation by the visitor.

The walk never caches child positions. After every visit it locates the
visited node again by identity and continues from there:

- node still in its parent: descend into it, then move to the next sibling;
- node replaced or removed: resume at the sibling that followed it before
  the visit, so replacements are not visited and no sibling is skipped;
- node already visited and moved further along: skipped, subtree included.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .node import Node, Text

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Protocol

    class Visitor(Protocol):
        def __call__(self, node: Node, index: int | None, parent: Node | None) -> WalkAction | None: ...

    WalkTest = str | Callable[[Node], bool] | None


class _StrEnum(str, Enum):
    """Backport of enum.StrEnum (Python 3.11+)."""


class WalkAction(_StrEnum):
    CONTINUE = "continue"
    SKIP = "skip"
    EXIT = "exit"


def _compile_test(test: WalkTest) -> Callable[[Node], bool]:
    if test is None:
        return lambda node: True
    if callable(test):
        return test
    if test == "element":
        return lambda node: not isinstance(node, Text) and not node.name.startswith("#")
    if test == "text":
        return lambda node: isinstance(node, Text)
    raise ValueError(f"Unknown walk test: {test!r}")


def walk(root: Node, visitor: Visitor, test: WalkTest = "element") -> None:
    """Call ``visitor(node, index, parent)`` for every matching node.

    Order is parent before children, left to right. The root is visited with
    ``index=None`` and ``parent=None`` when it matches. ``test`` is
    ``"element"``, ``"text"``, a predicate, or None for every node.
    """
    matches = _compile_test(test)
    if matches(root):
        action = visitor(root, None, None)
        if action is WalkAction.EXIT or action is WalkAction.SKIP:
            return
    if not isinstance(root, Text):
        _walk_children(root, visitor, matches)


def _walk_children(parent: Node, visitor: Visitor, matches: Callable[[Node], bool]) -> bool:
    # Identities already handled under this parent; a visitor that reorders
    # the child list must not bring them round again.
    visited: set[int] = set()
    i = 0
    while i < len(parent.children):
        children = parent.children
        node = children[i]
        if id(node) in visited:
            i += 1
            continue
        visited.add(id(node))
        following = children[i + 1] if i + 1 < len(children) else None

        action = None
        if matches(node):
            action = visitor(node, i, parent)
            if action is WalkAction.EXIT:
                return False

        children = parent.children
        position = i if i < len(children) and children[i] is node else parent.index_of(node)
        if position < 0:
            # Removed or replaced.
            if following is None:
                return True
            resume = parent.index_of(following)
            i = resume if resume >= 0 else i
            continue

        if action is not WalkAction.SKIP and not isinstance(node, Text) and node.children:
            if not _walk_children(node, visitor, matches):
                return False
            children = parent.children
            if not (position < len(children) and children[position] is node):
                position = parent.index_of(node)
                if position < 0:
                    resume = parent.index_of(following) if following is not None else -1
                    if resume < 0:
                        return True
                    i = resume
                    continue

        i = position + 1
    return True
