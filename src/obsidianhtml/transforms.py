"""Pass specs and the sequential pass runner.

Each pass is described by a small frozen spec object (with ``enabled``,
``callback`` and ``report`` like every other transform); ``apply_passes``
runs enabled specs one at a time, in list order, over a single tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .block_references import block_references
from .checkbox import checkbox
from .errors import _ERROR_SINK
from .fragment import parse_fragment
from .mermaid import mermaid_expand
from .obsidian_uri import obsidian_uri
from .oembed import OEmbedClient
from .options import ObsidianOptions
from .store import BlockStore
from .tweet import tweet_embed
from .youtube import youtube_embed

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, Protocol

    from .errors import TransformError
    from .node import Node
    from .oembed import PostLookup

    class NodeCallback(Protocol):
        def __call__(self, node: Node) -> None: ...

    class ReportCallback(Protocol):
        def __call__(self, msg: str, *, node: Any | None = None) -> None: ...


@dataclass(frozen=True, slots=True)
class BlockReferences:
    enabled: bool
    callback: NodeCallback | None
    report: ReportCallback | None

    def __init__(
        self,
        *,
        enabled: bool = True,
        callback: NodeCallback | None = None,
        report: ReportCallback | None = None,
    ) -> None:
        object.__setattr__(self, "enabled", bool(enabled))
        object.__setattr__(self, "callback", callback)
        object.__setattr__(self, "report", report)


@dataclass(frozen=True, slots=True)
class YouTubeEmbed:
    enabled: bool
    callback: NodeCallback | None
    report: ReportCallback | None

    def __init__(
        self,
        *,
        enabled: bool = True,
        callback: NodeCallback | None = None,
        report: ReportCallback | None = None,
    ) -> None:
        object.__setattr__(self, "enabled", bool(enabled))
        object.__setattr__(self, "callback", callback)
        object.__setattr__(self, "report", report)


@dataclass(frozen=True, slots=True)
class TweetEmbed:
    """Embed tweets through an oEmbed lookup.

    ``lookup`` defaults to an ``OEmbedClient`` against publish.twitter.com;
    ``parse`` turns the returned markup into nodes.
    """

    lookup: PostLookup
    parse: Callable[[str], list[Node]]
    enabled: bool
    callback: NodeCallback | None
    report: ReportCallback | None

    def __init__(
        self,
        *,
        lookup: PostLookup | None = None,
        parse: Callable[[str], list[Node]] | None = None,
        enabled: bool = True,
        callback: NodeCallback | None = None,
        report: ReportCallback | None = None,
    ) -> None:
        object.__setattr__(self, "lookup", lookup if lookup is not None else OEmbedClient())
        object.__setattr__(self, "parse", parse if parse is not None else parse_fragment)
        object.__setattr__(self, "enabled", bool(enabled))
        object.__setattr__(self, "callback", callback)
        object.__setattr__(self, "report", report)


@dataclass(frozen=True, slots=True)
class Checkbox:
    enabled: bool
    callback: NodeCallback | None
    report: ReportCallback | None

    def __init__(
        self,
        *,
        enabled: bool = True,
        callback: NodeCallback | None = None,
        report: ReportCallback | None = None,
    ) -> None:
        object.__setattr__(self, "enabled", bool(enabled))
        object.__setattr__(self, "callback", callback)
        object.__setattr__(self, "report", report)


@dataclass(frozen=True, slots=True)
class MermaidExpand:
    enabled: bool
    callback: NodeCallback | None
    report: ReportCallback | None

    def __init__(
        self,
        *,
        enabled: bool = True,
        callback: NodeCallback | None = None,
        report: ReportCallback | None = None,
    ) -> None:
        object.__setattr__(self, "enabled", bool(enabled))
        object.__setattr__(self, "callback", callback)
        object.__setattr__(self, "report", report)


@dataclass(frozen=True, slots=True)
class ObsidianUri:
    enabled: bool
    callback: NodeCallback | None
    report: ReportCallback | None

    def __init__(
        self,
        *,
        enabled: bool = True,
        callback: NodeCallback | None = None,
        report: ReportCallback | None = None,
    ) -> None:
        object.__setattr__(self, "enabled", bool(enabled))
        object.__setattr__(self, "callback", callback)
        object.__setattr__(self, "report", report)


Pass = BlockReferences | YouTubeEmbed | TweetEmbed | Checkbox | MermaidExpand | ObsidianUri

_PASS_CLASSES: tuple[type[object], ...] = (
    BlockReferences,
    YouTubeEmbed,
    TweetEmbed,
    Checkbox,
    MermaidExpand,
    ObsidianUri,
)


def passes_from_options(
    options: ObsidianOptions | None = None,
    *,
    lookup: PostLookup | None = None,
    parse: Callable[[str], list[Node]] | None = None,
    report: ReportCallback | None = None,
) -> list[Pass]:
    """The fixed pass sequence, with each pass toggled by ``options``."""
    if options is None:
        options = ObsidianOptions()
    return [
        BlockReferences(enabled=options.block_references, report=report),
        YouTubeEmbed(enabled=options.youtube_embed, report=report),
        TweetEmbed(enabled=options.tweet_embed, lookup=lookup, parse=parse, report=report),
        Checkbox(enabled=options.checkbox, report=report),
        MermaidExpand(enabled=options.mermaid, report=report),
        ObsidianUri(enabled=options.obsidian_uri, report=report),
    ]


async def apply_passes(
    root: Node,
    passes: list[Pass] | tuple[Pass, ...],
    *,
    store: BlockStore | None = None,
    errors: list[TransformError] | None = None,
) -> None:
    """Run enabled passes over ``root`` one after another.

    ``store`` receives block ids (a fresh one is used when omitted).
    ``errors`` collects TransformError records emitted by the passes.
    """
    if store is None:
        store = BlockStore()
    token = _ERROR_SINK.set(errors)
    try:
        for p in passes:
            if not isinstance(p, _PASS_CLASSES):
                raise TypeError(f"Unsupported pass: {type(p).__name__}")
            if not p.enabled:
                continue
            if isinstance(p, BlockReferences):
                block_references(root, store, callback=p.callback, report=p.report)
            elif isinstance(p, YouTubeEmbed):
                youtube_embed(root, store, callback=p.callback, report=p.report)
            elif isinstance(p, TweetEmbed):
                await tweet_embed(root, p.lookup, store, parse=p.parse, callback=p.callback, report=p.report)
            elif isinstance(p, Checkbox):
                checkbox(root, callback=p.callback, report=p.report)
            elif isinstance(p, MermaidExpand):
                mermaid_expand(root, callback=p.callback, report=p.report)
            else:
                obsidian_uri(root, callback=p.callback, report=p.report)
    finally:
        _ERROR_SINK.reset(token)
