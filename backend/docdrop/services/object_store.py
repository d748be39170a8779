from __future__ import annotations

from typing import Any, Protocol

import boto3

from docdrop.core.config import Settings, get_settings
from docdrop.core.lazy import Lazy


class ObjectStore(Protocol):
    def put_object(self, bucket: str, key: str, body: bytes, content_type: str) -> None: ...


class S3ObjectStore:
    """Writes objects with a single PutObject call; errors propagate to the caller."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def put_object(self, bucket: str, key: str, body: bytes, content_type: str) -> None:
        self._client.put_object(Bucket=bucket, Key=key, Body=body, ContentType=content_type)


def create_s3_client(settings: Settings) -> Any:
    return boto3.client(
        "s3",
        region_name=settings.aws_region,
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
        endpoint_url=settings.s3_endpoint_url or None,
    )


def build_public_url(settings: Settings, key: str) -> str:
    if settings.public_base_url:
        return f"{settings.public_base_url.rstrip('/')}/{key}"
    return f"https://{settings.aws_s3_bucket}.s3.{settings.aws_region}.amazonaws.com/{key}"


_object_store: Lazy[ObjectStore] = Lazy(lambda: S3ObjectStore(create_s3_client(get_settings())))


def get_object_store() -> ObjectStore:
    return _object_store.get()
