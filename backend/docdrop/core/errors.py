from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from docdrop.schemas.uploads import ErrorResponse


class UploadError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Error processing file upload"
    headers: dict[str, str] | None = None

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MethodNotAllowed(UploadError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    message = "Method not allowed"
    headers = {"Allow": "POST"}


class NoFileProvided(UploadError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "No file uploaded"


class UploadFailure(UploadError):
    """Storage or metadata write failed; the client is not told which."""


async def upload_error_handler(request: Request, exc: UploadError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(),
        headers=exc.headers,
    )


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Render router-level 405s with the same body as the upload route.

    Methods the upload route does not list never reach it, so the router
    raises on their behalf. POST is the only method any POST route here accepts.
    """
    if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED:
        return await http_exception_handler(request, exc)

    allow = (exc.headers or {}).get("Allow", "")
    if "POST" in {method.strip() for method in allow.split(",")}:
        headers = dict(MethodNotAllowed.headers)
    else:
        headers = exc.headers
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=MethodNotAllowed.message).model_dump(),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UploadError, upload_error_handler)
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
