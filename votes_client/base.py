"""Base HTTP client for the functions API."""

from typing import Any

import httpx
from loguru import logger

from votes_client.config import ClientConfig
from votes_client.errors import ApiStatusError


async def safe_text(resp: httpx.Response) -> str:
    """Response body as text, or an empty string if it cannot be read."""
    try:
        await resp.aread()
        return resp.text
    except Exception as e:
        logger.debug("Could not read error body: {}", e)
        return ""


class BaseClient:
    """Base async HTTP client: one request per call, no retries."""

    def __init__(self, config: ClientConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._request_count = 0
        logger.info("{}: base={}", self.__class__.__name__, config.trimmed_base)

    async def __aenter__(self):
        kwargs: dict[str, Any] = {}
        if self.config.timeout is not None:
            kwargs["timeout"] = self.config.timeout
        self._client = httpx.AsyncClient(transport=self._transport, **kwargs)
        return self

    async def __aexit__(self, *_):
        logger.info("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        tag: str,
        method: str,
        url: str,
        payload: dict | None = None,
        with_body: bool = True,
    ) -> Any:
        """Send one request and decode the JSON answer.

        The body is streamed so that a failed read on a non-2xx answer still
        yields ApiStatusError (with empty body text). Transport errors from
        httpx propagate as they are.
        """
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} is not open, use 'async with'")

        self._request_count += 1
        headers = {"Content-Type": "application/json"} if payload is not None else None
        request = self._client.build_request(method, url, json=payload, headers=headers)
        resp = await self._client.send(request, stream=True)
        try:
            logger.debug("{} {} -> {}", method, tag, resp.status_code)
            if not resp.is_success:
                body = await safe_text(resp) if with_body else None
                raise ApiStatusError(tag, resp.status_code, body)
            await resp.aread()
            return resp.json()
        finally:
            await resp.aclose()
