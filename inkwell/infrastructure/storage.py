"""
Object storage abstraction for post thumbnails (S3-compatible) and in-memory testing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol
from urllib.parse import quote

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from inkwell.config import Settings
from inkwell.core.errors import StorageError

logger = logging.getLogger(__name__)

_ALREADY_EXISTS = "The resource already exists"


class StorageClient(Protocol):
    """Defines the operations the thumbnail flow needs from object storage."""

    def upload(
        self,
        key: str,
        data: bytes,
        content_type: str = "application/octet-stream",
        cache_control: str | None = None,
        overwrite: bool = False,
    ) -> str:
        ...

    def public_url(self, key: str) -> str:
        ...

    def get_bytes(self, key: str) -> bytes:
        ...


@dataclass
class StoredObject:
    data: bytes
    content_type: str
    cache_control: str | None = None


@dataclass
class InMemoryStorageClient:
    """Test double for storage interactions."""

    bucket: str = "post-thumbnail"
    base_url: str = "https://example.test/storage/v1/object/public"
    stored_objects: dict[str, StoredObject] = field(default_factory=dict)

    def upload(
        self,
        key: str,
        data: bytes,
        content_type: str = "application/octet-stream",
        cache_control: str | None = None,
        overwrite: bool = False,
    ) -> str:
        if not overwrite and key in self.stored_objects:
            raise StorageError(_ALREADY_EXISTS, key)
        self.stored_objects[key] = StoredObject(data, content_type, cache_control)
        return key

    def public_url(self, key: str) -> str:
        return f"{self.base_url}/{self.bucket}/{quote(key)}"

    def get_bytes(self, key: str) -> bytes:
        stored = self.stored_objects.get(key)
        if stored is None:
            raise StorageError("Object not found", key)
        return stored.data


@dataclass
class S3StorageClient:
    """
    S3-compatible storage client (the hosted provider's S3 endpoint).

    Uploads use a conditional put (If-None-Match: *) so an existing key is
    never overwritten unless overwrite=True.
    """

    bucket: str
    endpoint_url: str
    public_base_url: str
    access_key_id: str
    secret_access_key: str
    region: str = "us-east-1"

    def __post_init__(self):
        # Path-style addressing: provider endpoints do not serve bucket subdomains.
        config = Config(
            s3={"addressing_style": "path"},
            signature_version="s3v4",
        )
        self._client = boto3.client(
            "s3",
            endpoint_url=self.endpoint_url,
            region_name=self.region,
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
            config=config,
        )

    def upload(
        self,
        key: str,
        data: bytes,
        content_type: str = "application/octet-stream",
        cache_control: str | None = None,
        overwrite: bool = False,
    ) -> str:
        params = {
            "Bucket": self.bucket,
            "Key": key,
            "Body": data,
            "ContentType": content_type,
        }
        if cache_control:
            params["CacheControl"] = cache_control
        if not overwrite:
            params["IfNoneMatch"] = "*"
        try:
            self._client.put_object(**params)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "")
            if code in ("PreconditionFailed", "412"):
                raise StorageError(_ALREADY_EXISTS, key)
            message = e.response.get("Error", {}).get("Message") or code or str(e)
            logger.error(f"Thumbnail upload failed: {message}", extra={"storage_key": key})
            raise StorageError(message, key)
        except BotoCoreError as e:
            logger.error(f"Storage unreachable: {e}", extra={"storage_key": key})
            raise StorageError(str(e), key)
        return key

    def public_url(self, key: str) -> str:
        return f"{self.public_base_url.rstrip('/')}/{self.bucket}/{quote(key)}"

    def get_bytes(self, key: str) -> bytes:
        try:
            response = self._client.get_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            raise StorageError(
                e.response.get("Error", {}).get("Message") or "Object not found", key,
            )
        return response["Body"].read()


def build_storage_client(settings: Settings) -> S3StorageClient:
    """Build the thumbnail bucket client from the storage section of Settings."""
    return S3StorageClient(
        bucket=settings.thumbnail_bucket,
        endpoint_url=settings.resolved_storage_endpoint_url,
        public_base_url=settings.resolved_storage_public_base_url,
        access_key_id=settings.storage_access_key_id,
        secret_access_key=settings.storage_secret_access_key,
        region=settings.storage_region,
    )
