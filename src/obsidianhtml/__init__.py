from .block_references import block_references
from .checkbox import checkbox
from .errors import TransformError, emit_error
from .fragment import parse_fragment
from .mermaid import mermaid_expand
from .node import Element, Node, Text
from .obsidian_uri import obsidian_uri
from .oembed import OEmbedClient, OEmbedResult
from .options import ObsidianOptions
from .pipeline import ObsidianHTML
from .serialize import to_html
from .store import BlockStore, ensure_block_store
from .transforms import (
    BlockReferences,
    Checkbox,
    MermaidExpand,
    ObsidianUri,
    TweetEmbed,
    YouTubeEmbed,
    apply_passes,
    passes_from_options,
)
from .tweet import tweet_embed
from .walk import WalkAction, walk
from .youtube import youtube_embed

__all__ = [
    "BlockReferences",
    "BlockStore",
    "Checkbox",
    "Element",
    "MermaidExpand",
    "Node",
    "OEmbedClient",
    "OEmbedResult",
    "ObsidianHTML",
    "ObsidianOptions",
    "ObsidianUri",
    "Text",
    "TransformError",
    "TweetEmbed",
    "WalkAction",
    "YouTubeEmbed",
    "apply_passes",
    "block_references",
    "checkbox",
    "emit_error",
    "ensure_block_store",
    "mermaid_expand",
    "obsidian_uri",
    "parse_fragment",
    "passes_from_options",
    "to_html",
    "tweet_embed",
    "walk",
    "youtube_embed",
]
