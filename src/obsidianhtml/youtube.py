"""Replace YouTube image links with embedded players."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .node import Element
from .predicates import is_tag
from .store import BlockStore
from .walk import walk

if TYPE_CHECKING:
    from .node import Node
    from .transforms import NodeCallback, ReportCallback

VIDEO_RE = re.compile(r"^.*(youtu.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*")
PLAYLIST_RE = re.compile(r"[?&]list=([^#?&]*)")
EMBED_BASE = "https://www.youtube.com/embed/"
VIDEO_ID_LENGTH = 11


def youtube_embed_url(src: str) -> str | None:
    """Embed URL for a YouTube link, or None when it names no video or playlist."""
    video_match = VIDEO_RE.match(src)
    playlist_match = PLAYLIST_RE.search(src)
    video_id = video_match.group(2) if video_match else None
    playlist_id = playlist_match.group(1) if playlist_match else None

    if video_id is not None and len(video_id) != VIDEO_ID_LENGTH:
        video_id = None
    if not video_id and not playlist_id:
        return None
    if video_id and playlist_id:
        return f"{EMBED_BASE}{video_id}?list={playlist_id}"
    if video_id:
        return f"{EMBED_BASE}{video_id}"
    return f"{EMBED_BASE}videoseries?list={playlist_id}"


def embed_frame(src: str) -> Element:
    return Element(
        "iframe",
        {
            "class": ["external-embed", "youtube"],
            "allow": "fullscreen",
            "frameborder": 0,
            "width": "600px",
            "src": src,
        },
    )


def youtube_embed(
    root: Node,
    store: BlockStore | None = None,
    *,
    callback: NodeCallback | None = None,
    report: ReportCallback | None = None,
) -> None:
    """Swap YouTube images for players; an image id moves to its player."""
    if store is None:
        store = BlockStore()

    def _visit(node: Node, index: int | None, parent: Node | None) -> None:
        if not is_tag(node, "img"):
            return
        src = node.attrs.get("src")
        if not isinstance(src, str):
            return
        embed_src = youtube_embed_url(src)
        if embed_src is None or parent is None:
            return

        frame = embed_frame(embed_src)
        parent.replace_child(frame, node)
        store.transfer(node, frame)
        if callback is not None:
            callback(frame)
        if report is not None:
            report(f"Embedded YouTube player for {src}", node=frame)

    walk(root, _visit)
