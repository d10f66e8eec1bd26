"""Run the Obsidian passes over one document tree."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from .options import ObsidianOptions
from .store import BlockStore, ensure_block_store
from .transforms import apply_passes, passes_from_options

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from .errors import TransformError
    from .node import Node
    from .oembed import PostLookup
    from .transforms import Pass, ReportCallback


class ObsidianHTML:
    """Ordered, individually togglable Obsidian passes.

    ``options`` is an ``ObsidianOptions`` or a plain mapping of toggles.
    ``passes`` replaces the default pass list entirely when given.

    After ``run`` the block id map is available as ``store.blocks`` (and in
    ``file.data["blocks"]`` when a file object was passed). ``store`` only
    tracks the latest run started on this instance; concurrent runs should
    read their blocks from their own ``file`` or pass their own ``store``.
    """

    def __init__(
        self,
        options: ObsidianOptions | Mapping[str, Any] | None = None,
        *,
        passes: list[Pass] | None = None,
        lookup: PostLookup | None = None,
        parse: Callable[[str], list[Node]] | None = None,
        report: ReportCallback | None = None,
    ) -> None:
        if not isinstance(options, ObsidianOptions):
            options = ObsidianOptions.from_mapping(options)
        self.options = options
        if passes is None:
            passes = passes_from_options(options, lookup=lookup, parse=parse, report=report)
        self.passes: list[Pass] = list(passes)
        self.store: BlockStore | None = None

    async def run(
        self,
        tree: Node,
        file: Any | None = None,
        *,
        store: BlockStore | None = None,
        errors: list[TransformError] | None = None,
    ) -> Node:
        """Mutate ``tree`` in place and return it."""
        if store is None:
            store = ensure_block_store(file) if file is not None else BlockStore()
        self.store = store
        await apply_passes(tree, self.passes, store=store, errors=errors)
        return tree

    def run_sync(
        self,
        tree: Node,
        file: Any | None = None,
        *,
        store: BlockStore | None = None,
        errors: list[TransformError] | None = None,
    ) -> Node:
        return asyncio.run(self.run(tree, file, store=store, errors=errors))
