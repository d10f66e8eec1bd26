"""Pass toggles."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

# Option names used by the rehype plugin configuration.
_CAMEL_CASE_KEYS = {
    "blockReferences": "block_references",
    "youTubeEmbed": "youtube_embed",
    "tweetEmbed": "tweet_embed",
    "checkbox": "checkbox",
    "mermaid": "mermaid",
    "obsidianUri": "obsidian_uri",
}


@dataclass(frozen=True, slots=True)
class ObsidianOptions:
    """One flag per pass; every pass is enabled by default."""

    block_references: bool = True
    youtube_embed: bool = True
    tweet_embed: bool = True
    checkbox: bool = True
    mermaid: bool = True
    obsidian_uri: bool = True

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> ObsidianOptions:
        """Build options from user config.

        Accepts snake_case or camelCase keys. Unknown keys are ignored and
        None leaves the default in place.
        """
        if not values:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, bool] = {}
        for key, value in values.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known or value is None:
                continue
            kwargs[name] = bool(value)
        return cls(**kwargs)
