# =============================================================================
# app/routers/files.py - File Upload and Download
# =============================================================================
# Saves multipart uploads to disk and sends the bundled sample file back
# as an attachment.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import FileResponse, PlainTextResponse

from app.dependencies import SettingsDep
from app.exceptions import FileTooLargeError
from core.services.storage_service import StorageService

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/upload", response_class=PlainTextResponse)
async def upload_file(
    file: Annotated[UploadFile, File(description="File to upload")],
    settings: SettingsDep,
):
    """
    Save an uploaded file into the upload directory.

    This endpoint:
    1. Reads the multipart "file" field
    2. Rejects files above MAX_UPLOAD_SIZE_MB
    3. Writes the file under its own basename
    """
    content = await file.read()
    file_size_bytes = len(content)

    if file_size_bytes > settings.max_upload_size_bytes:
        raise FileTooLargeError(file_size_bytes / (1024 * 1024), settings.MAX_UPLOAD_SIZE_MB)

    StorageService.save_file(settings.UPLOAD_DIR, file.filename, content)

    return "Uploaded successfully"


@router.get("/download")
async def download_file(settings: SettingsDep):
    """
    Send the bundled sample file as an attachment named file.txt.
    """
    return FileResponse(
        settings.download_file,
        filename="file.txt",
        media_type="text/plain",
    )
