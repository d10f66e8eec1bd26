"""Replace tweet image links with embedded posts.

Runs in two phases. Matching images are collected first without touching
the tree; then every oEmbed lookup runs concurrently. Once all of them have
settled the replacements are applied in document order, so the result does
not depend on which lookup finished first.
"""

from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import emit_error
from .fragment import parse_fragment
from .node import Element, Text
from .oembed import OEmbedResult
from .predicates import add_class, is_element, is_tag
from .store import BlockStore
from .walk import walk

if TYPE_CHECKING:
    from collections.abc import Callable

    from .node import Node
    from .oembed import PostLookup
    from .transforms import NodeCallback, ReportCallback

TWEET_RE = re.compile(r"^https://(twitter\.com|x\.com|mobile\.twitter\.com)/([^/]+)/status/(\d+)\Z")
EMBED_CLASSES = ("external-embed", "twitter")


@dataclass(slots=True)
class TweetMatch:
    node: Element
    parent: Node
    index: int
    src: str
    user: str


def find_tweets(root: Node) -> list[TweetMatch]:
    """Matching images in document order; the tree is not modified."""
    matches: list[TweetMatch] = []

    def _visit(node: Node, index: int | None, parent: Node | None) -> None:
        if not is_tag(node, "img") or parent is None or index is None:
            return
        src = node.attrs.get("src")
        if not isinstance(src, str):
            return
        match = TWEET_RE.match(src)
        if match is None:
            return
        matches.append(TweetMatch(node=node, parent=parent, index=index, src=src, user=match.group(2)))

    walk(root, _visit)
    return matches


def fallback_embed(src: str, user: str) -> Element:
    return Element(
        "blockquote",
        {"class": list(EMBED_CLASSES)},
        [Element("a", {"href": src}, [Text(f"Tweet by @{user}")])],
    )


def rich_embed(markup: str, parse: Callable[[str], list[Node]] = parse_fragment) -> Element:
    """First top-level element of ``markup``, or a div around all of it."""
    nodes = parse(markup)
    embed = next((node for node in nodes if is_element(node)), None)
    if embed is None:
        embed = Element("div", children=nodes)
    elif embed.parent is not None:
        embed.parent.remove_child(embed)
    for name in EMBED_CLASSES:
        add_class(embed, name)
    return embed


async def tweet_embed(
    root: Node,
    lookup: PostLookup,
    store: BlockStore | None = None,
    *,
    parse: Callable[[str], list[Node]] = parse_fragment,
    callback: NodeCallback | None = None,
    report: ReportCallback | None = None,
) -> None:
    if store is None:
        store = BlockStore()
    matches = find_tweets(root)
    if not matches:
        return

    results = await asyncio.gather(*(lookup(match.src) for match in matches), return_exceptions=True)

    for match, result in zip(matches, results):
        replacement = _build_replacement(match, result, parse)
        if match.node.parent is not match.parent:
            continue
        match.parent.replace_child(replacement, match.node)
        store.transfer(match.node, replacement)
        if callback is not None:
            callback(replacement)
        if report is not None:
            if isinstance(result, OEmbedResult) and result.author_name:
                report(f"Embedded tweet by {result.author_name} ({match.src})", node=replacement)
            else:
                report(f"Embedded tweet {match.src}", node=replacement)


def _build_replacement(
    match: TweetMatch,
    result: OEmbedResult | BaseException | None,
    parse: Callable[[str], list[Node]],
) -> Element:
    if isinstance(result, BaseException):
        emit_error("oembed-lookup-failed", node=match.node, message=f"{match.src}: {result!r}")
        return fallback_embed(match.src, match.user)
    if result is None:
        emit_error("oembed-lookup-failed", node=match.node, message=match.src)
        return fallback_embed(match.src, match.user)
    if not result.html.strip():
        emit_error("oembed-empty-markup", node=match.node, message=match.src)
        return fallback_embed(match.src, match.user)
    return rich_embed(result.html, parse)
