"""oEmbed lookups for social posts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from typing import Protocol

    class PostLookup(Protocol):
        async def __call__(self, url: str) -> OEmbedResult | None: ...


OEMBED_ENDPOINT = "https://publish.twitter.com/oembed"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True, slots=True)
class OEmbedResult:
    html: str
    author_name: str


class OEmbedClient:
    """Fetch rich post markup from an oEmbed endpoint.

    Every failure (transport error, non-2xx status, unparseable body) comes
    back as None; callers do not need to tell them apart.

    Pass ``client`` to share an ``httpx.AsyncClient``; otherwise one is opened
    per lookup with ``transport`` and ``timeout``.
    """

    def __init__(
        self,
        *,
        endpoint: str = OEMBED_ENDPOINT,
        timeout: float | None = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self._client = client
        self._transport = transport

    async def __call__(self, url: str) -> OEmbedResult | None:
        return await self.fetch(url)

    async def fetch(self, url: str) -> OEmbedResult | None:
        params = {"url": url, "omit_script": "true", "dnt": "true"}
        try:
            if self._client is not None:
                response = await self._client.get(self.endpoint, params=params, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                    response = await client.get(self.endpoint, params=params)
        except httpx.HTTPError:
            return None

        if not response.is_success:
            return None
        try:
            payload = response.json()
        except ValueError:
            return None
        return parse_oembed_payload(payload)


def parse_oembed_payload(payload: object) -> OEmbedResult | None:
    if not isinstance(payload, dict):
        return None
    html = payload.get("html")
    if not isinstance(html, str):
        return None
    author_name = payload.get("author_name")
    return OEmbedResult(html=html, author_name=author_name if isinstance(author_name, str) else "")
