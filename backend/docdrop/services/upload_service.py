from __future__ import annotations

import logging
import time
from datetime import UTC, datetime

from docdrop.core.config import Settings
from docdrop.core.errors import UploadFailure
from docdrop.schemas.uploads import UploadRecord
from docdrop.services.document_store import DocumentStore
from docdrop.services.object_store import ObjectStore, build_public_url

log = logging.getLogger(__name__)

UPLOADS_COLLECTION = "uploads"


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def build_upload_key(filename: str, now_ms: int) -> str:
    # No sanitizing and no collision check: same name in the same millisecond overwrites.
    return f"{now_ms}-{filename}"


def store_upload(
    object_store: ObjectStore,
    document_store: DocumentStore,
    settings: Settings,
    filename: str,
    content_type: str,
    payload: bytes,
) -> UploadRecord:
    key = build_upload_key(filename, _now_ms())

    try:
        object_store.put_object(settings.aws_s3_bucket, key, payload, content_type)
    except Exception as exc:
        log.exception("Object store write failed for key %s", key)
        raise UploadFailure() from exc

    record = UploadRecord(
        filename=filename,
        storage_url=build_public_url(settings, key),
        uploaded_at=datetime.now(UTC),
    )

    try:
        document_store.insert_one(UPLOADS_COLLECTION, record.model_dump())
    except Exception as exc:
        # The object stays in the bucket without a metadata record.
        log.exception("Metadata write failed for key %s; stored object is orphaned", key)
        raise UploadFailure() from exc

    log.info("Stored upload %s (%d bytes) as %s", filename, len(payload), key)
    return record
