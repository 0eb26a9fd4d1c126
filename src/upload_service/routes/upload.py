from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from python_multipart.multipart import parse_options_header
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import FormData, UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from ..models import NO_FILE_UPLOADED, UploadResponse
from ..storage import InvalidFilename, safe_filename, save_upload

router = APIRouter(tags=["upload"])

logger = logging.getLogger(__name__)

UPLOAD_FAILED = "Upload failed"

# The handler reads the raw form itself, so the multipart body has to be
# described by hand; ``AudioUpload`` is published by ``server.create_app``.
UPLOAD_REQUEST_BODY = {
    "description": "Upload an audio file",
    "required": True,
    "content": {
        "multipart/form-data": {
            "schema": {"$ref": "#/components/schemas/AudioUpload"}
        }
    },
}


def first_file_field(form: FormData) -> UploadFile | None:
    """Вернуть первое поле формы, у которого указано имя файла.

    Fields are scanned in the order they were sent; everything after the
    first file field is ignored.
    """
    for _name, value in form.multi_items():
        if isinstance(value, UploadFile) and value.filename is not None:
            return value
    return None


async def _ensure_multipart_complete(request: Request) -> None:
    """Fail if a multipart body never reached its closing delimiter.

    Starlette drops an unfinished trailing part without complaint, which
    would turn a cut-off upload into an empty form.
    """
    content_type, params = parse_options_header(request.headers.get("content-type", ""))
    boundary = params.get(b"boundary")
    if content_type != b"multipart/form-data" or not boundary:
        return
    body = await request.body()
    if b"--" + boundary + b"--" not in body:
        raise MultiPartException("Multipart body ended before its closing boundary")


async def _read_form(request: Request) -> FormData:
    try:
        await _ensure_multipart_complete(request)
        return await request.form()
    except (MultiPartException, StarletteHTTPException) as exc:
        logger.exception("Failed to parse upload body")
        raise HTTPException(status_code=500, detail=UPLOAD_FAILED) from exc


@router.post(
    "/upload",
    response_model=UploadResponse,
    response_description="File uploaded successfully",
    openapi_extra={"requestBody": UPLOAD_REQUEST_BODY},
)
async def upload_audio(request: Request) -> UploadResponse:
    """Сохранить первый файл из multipart-формы в каталог загрузок."""
    settings = request.app.state.settings
    form = await _read_form(request)
    try:
        upload = first_file_field(form)
        if upload is None:
            logger.info("Upload request carried no file field")
            return UploadResponse(saved=NO_FILE_UPLOADED)

        try:
            filename = safe_filename(upload.filename)
        except InvalidFilename as exc:
            logger.warning("Rejected upload: %s", exc)
            raise HTTPException(status_code=400, detail="Invalid filename") from exc

        try:
            data = await upload.read()
            saved = await run_in_threadpool(
                save_upload, settings.upload_dir, filename, data
            )
        except Exception as exc:
            logger.exception("Upload failed for %s", filename)
            raise HTTPException(status_code=500, detail=UPLOAD_FAILED) from exc
    finally:
        await form.close()

    logger.info("Saved upload %s (%d bytes)", saved, len(data))
    return UploadResponse(saved=saved)
