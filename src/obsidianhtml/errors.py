"""Diagnostics collected while passes run."""

from __future__ import annotations

from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Node


class TransformError:
    """A recoverable problem a pass worked around."""

    __slots__ = ("category", "code", "message", "node")

    def __init__(self, code, message=None, node=None, category="transform"):
        self.code = code
        self.message = message or code
        self.node = node
        self.category = category

    def __repr__(self):
        return f"TransformError({self.code!r})"

    def __str__(self):
        if self.message != self.code:
            return f"{self.code} - {self.message}"
        return self.code

    def __eq__(self, other):
        if not isinstance(other, TransformError):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    __hash__ = None  # Unhashable since we define __eq__


_ERROR_SINK: ContextVar[list[TransformError] | None] = ContextVar("obsidianhtml_error_sink", default=None)


def emit_error(
    code: str,
    *,
    node: Node | None = None,
    category: str = "transform",
    message: str | None = None,
) -> None:
    """Record a TransformError in the active sink.

    Errors are appended to the sink installed by ``apply_passes``. If no sink
    is active, this is a no-op.
    """

    sink = _ERROR_SINK.get()
    if sink is None:
        return

    sink.append(
        TransformError(
            str(code),
            message=str(message) if message is not None else str(code),
            node=node,
            category=str(category),
        )
    )
