# =============================================================================
# core/services/storage_service.py - Local Disk Storage Operations
# =============================================================================
# Handles writing uploaded files to the upload directory.
# =============================================================================

import logging
from pathlib import Path, PurePosixPath, PureWindowsPath

from app.exceptions import InvalidFilenameError

logger = logging.getLogger(__name__)


class StorageService:
    """
    Service for local file storage.

    Uploaded files are written flat into one directory, keyed by the
    client-supplied filename.
    """

    @staticmethod
    def safe_filename(filename: str | None) -> str:
        """
        Reduce a client-supplied filename to its final path component.

        Both "/" and "\\" separators are stripped, so "../../etc/passwd"
        becomes "passwd" and "C:\\temp\\file.txt" becomes "file.txt".

        Raises:
            InvalidFilenameError: If nothing usable is left
        """
        if not filename:
            raise InvalidFilenameError(filename)

        name = PureWindowsPath(PurePosixPath(filename).name).name
        if name in ("", ".", ".."):
            raise InvalidFilenameError(filename)
        return name

    @staticmethod
    def save_file(directory: Path, filename: str | None, content: bytes) -> Path:
        """
        Write content to directory/<basename of filename>.

        The directory is created if missing and an existing file with the
        same name is overwritten.

        Args:
            directory: Destination directory
            filename: Client-supplied filename
            content: File bytes

        Returns:
            Path the file was written to
        """
        name = StorageService.safe_filename(filename)

        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_bytes(content)

        logger.info(f"Saved upload: {path} ({len(content)} bytes)")
        return path
