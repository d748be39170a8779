import logging

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from docdrop.core.config import Settings, get_settings
from docdrop.core.errors import MethodNotAllowed, NoFileProvided, UploadError, UploadFailure
from docdrop.schemas.uploads import UploadResponse
from docdrop.services.document_store import DocumentStore, get_document_store
from docdrop.services.object_store import ObjectStore, get_object_store
from docdrop.services.upload_service import store_upload

log = logging.getLogger(__name__)

router = APIRouter(prefix="")

# Every method is routed here so the 405 body matches the other error bodies.
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
DEFAULT_CONTENT_TYPE = "application/octet-stream"


@router.api_route("/upload", methods=ROUTED_METHODS, response_model=UploadResponse)
async def upload(
    request: Request,
    settings: Settings = Depends(get_settings),
    object_store: ObjectStore = Depends(get_object_store),
    document_store: DocumentStore = Depends(get_document_store),
) -> UploadResponse:
    if request.method != "POST":
        raise MethodNotAllowed()

    try:
        # Spool files are closed when the form context exits.
        async with request.form() as form:
            parts = form.getlist("file")
            upload_file = parts[0] if parts else None
            if not isinstance(upload_file, UploadFile) or not upload_file.filename:
                raise NoFileProvided()

            filename = upload_file.filename
            content_type = upload_file.content_type or DEFAULT_CONTENT_TYPE
            payload = await upload_file.read()

        record = await run_in_threadpool(
            store_upload,
            object_store,
            document_store,
            settings,
            filename,
            content_type,
            payload,
        )
    except UploadError:
        raise
    except Exception as exc:
        log.exception("Failed to process upload request")
        raise UploadFailure() from exc

    return UploadResponse(message="File uploaded successfully", url=record.storage_url)
