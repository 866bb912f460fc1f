"""Thumbnail Service - upload-then-reference-by-key and key-to-URL resolution.

Invariants:
    - Keys are `<prefix>/<uuid4 hex>`; a key is generated fresh per upload
    - Uploads never overwrite an existing object
    - resolve_thumbnail_url(None or "") is None: no thumbnail is rendered
    - Posts store the key; URLs exist only at render time

Design Decisions:
    - Blocking storage SDK calls run in a worker thread (asyncio.to_thread)
      so the event loop stays responsive while an upload is in flight
"""

import asyncio
import logging
import uuid

from inkwell.core.domain_types import ThumbnailKey
from inkwell.core.errors import StorageError
from inkwell.infrastructure.storage import StorageClient

logger = logging.getLogger(__name__)


def generate_thumbnail_key(prefix: str = "private") -> ThumbnailKey:
    return ThumbnailKey(f"{prefix.strip('/')}/{uuid.uuid4()}")


async def upload_thumbnail(
    storage: StorageClient,
    data: bytes,
    content_type: str = "application/octet-stream",
    prefix: str = "private",
    cache_control: str | None = "max-age=3600",
) -> ThumbnailKey:
    """Upload image bytes under a new key and return the key to store on the post."""
    if not data:
        raise StorageError("No file selected")
    key = generate_thumbnail_key(prefix)
    stored = await asyncio.to_thread(
        storage.upload, key, data, content_type, cache_control, False,
    )
    logger.info("Thumbnail uploaded", extra={"storage_key": stored})
    return ThumbnailKey(stored)


def resolve_thumbnail_url(storage: StorageClient, key: str | None) -> str | None:
    if not key or not key.strip():
        return None
    return storage.public_url(key)
