from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from .config import MediaSettings, build_http_client
from .exceptions import ErrorCause, MediaFetchError, PermanentError
from .models import Document
from .urls import rendition_url

_log = logging.getLogger(__name__)


class MediaClient:
    """
    Fetches rendered TTNINJS documents from the media API.

    A document URI such as ``http://tt.se/media/text/abc`` is rewritten to
    ``https://<host>/media/text/abc.json`` and the JSON rendition is decoded
    into a Document.

    Errors:
    - PermanentError (see ErrorCause) when the request can never succeed as given
    - MediaFetchError for everything else (network failures, unexpected statuses);
      these may succeed on retry. The client itself never retries.

    Configuration is fixed at construction and the client keeps no state between
    calls, so one instance can serve concurrent tasks.
    """

    def __init__(self, logger: logging.Logger, client: httpx.AsyncClient, host: str) -> None:
        self._logger = logger
        self._client = client
        self._host = host

    @classmethod
    def from_settings(
        cls,
        settings: MediaSettings,
        *,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "MediaClient":
        """
        Build a client from settings.

        Without ``client`` an AsyncClient is created from the settings; the caller
        owns it and must close it with ``await media.client.aclose()``.
        """
        return cls(
            logger if logger is not None else _log,
            client if client is not None else build_http_client(settings),
            settings.host,
        )

    @property
    def host(self) -> str:
        return self._host

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def get_rendered_document(
        self,
        doc_uri: str,
        _reserved: Optional[bytes] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Document:
        """
        Fetch and decode the rendered document for doc_uri.

        Cancel the calling task (or use asyncio.wait_for) to abort an in-flight
        request; ``timeout`` sets a per-request deadline in seconds on top of the
        client's own. The second positional argument is reserved and ignored.
        """
        try:
            url = rendition_url(doc_uri, self._host)
        except ValueError as e:
            raise PermanentError(f"invalid document URI: {e}", ErrorCause.INVALID_URI) from e

        try:
            request = self._client.build_request(
                "GET",
                url,
                timeout=httpx.USE_CLIENT_DEFAULT if timeout is None else timeout,
            )
        except (httpx.InvalidURL, ValueError) as e:
            raise PermanentError(f"create request: {e}", ErrorCause.INVALID_URI) from e

        self._logger.debug("Fetching rendered document: %s", url)
        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise MediaFetchError(f"perform request: {e!r}") from e
        self._logger.debug("Media API responded with %s for %s", response.status_code, url)

        try:
            document = await self._read_document(response)
        except BaseException:
            await self._close(response, suppress=True)
            raise
        await self._close(response)
        return document

    async def _read_document(self, response: httpx.Response) -> Document:
        if response.status_code == httpx.codes.NOT_FOUND:
            raise PermanentError("document could not be found", ErrorCause.NOT_FOUND)
        if response.status_code != httpx.codes.OK:
            raise MediaFetchError(
                f"media API responded with: {response.status_code} {response.reason_phrase}"
            )

        try:
            payload = await response.aread()
        except (httpx.HTTPError, httpx.StreamError, OSError) as e:
            raise MediaFetchError(f"read media response: {e!r}") from e

        try:
            return Document.model_validate_json(payload)
        except ValidationError as e:
            raise PermanentError(f"unmarshal document: {e}", ErrorCause.INVALID_DOC) from e

    async def _close(self, response: httpx.Response, *, suppress: bool = False) -> None:
        # With suppress set an earlier error is already propagating and takes precedence.
        try:
            await response.aclose()
        except (httpx.HTTPError, httpx.StreamError, OSError) as e:
            if not suppress:
                raise MediaFetchError(f"close media response body: {e!r}") from e
            self._logger.warning("Failed to close media response body: %r", e)
