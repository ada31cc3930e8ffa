"""HTTP transport built on httpx."""

import logging

import httpx

from ..errors import TransportError
from .base import HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient:
    """Sends JSON requests with httpx.

    A fresh AsyncClient is opened per request, so the client holds no
    connection state between calls.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._transport = transport

    async def request(
        self,
        method: str,
        url: str,
        json: dict | None = None,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        """Send a request and return the response, whatever its status."""
        logger.debug("%s %s", method, url)
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.request(method, url, json=json, headers=headers)
        except httpx.RequestError as e:
            logger.error("No response from %s %s: %s", method, url, e)
            raise TransportError(str(e)) from e

        try:
            data = response.json()
        except ValueError:
            # Empty or non-JSON body
            data = None

        logger.debug("%s %s -> %d", method, url, response.status_code)
        return HttpResponse(status=response.status_code, data=data)
