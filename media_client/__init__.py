"""
media_client

A small client that fetches rendered news documents (TTNINJS JSON) from a media API.

Core ideas:
- Input: a public document URI, e.g. http://tt.se/media/text/231107-oktobervader-1d76cbf0
- Process: rewrite to https://<media host>/<path>.json → GET → status check → decode
- Output: Document (headline, associations, renditions, ...)

Example
-------
import asyncio
import logging

import httpx
from media_client import MediaClient, is_permanent

async def main():
    async with httpx.AsyncClient(timeout=10) as http:
        media = MediaClient(logging.getLogger("media"), http, "media.example.com")
        doc = await media.get_rendered_document(
            "http://tt.se/media/text/231107-oktobervader-1d76cbf0", None)
        print(doc.headline)
        for key, assoc in doc.associations.items():
            print(key, len(assoc.renditions))

asyncio.run(main())
"""
from .config import MediaSettings, build_http_client, configure_logging, __version__
from .core import MediaClient
from .exceptions import (
    ConfigError,
    ErrorCause,
    MediaFetchError,
    PermanentError,
    is_permanent,
    permanent_cause,
)
from .models import Association, Document, Rendition

__all__ = [
    "Association",
    "ConfigError",
    "Document",
    "ErrorCause",
    "MediaClient",
    "MediaFetchError",
    "MediaSettings",
    "PermanentError",
    "Rendition",
    "build_http_client",
    "configure_logging",
    "is_permanent",
    "permanent_cause",
    "__version__",
]
