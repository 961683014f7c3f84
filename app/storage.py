"""Upload Store: the local directory that holds uploaded media."""

import logging
import re
import time
from pathlib import Path, PurePosixPath
from typing import Optional
from urllib.parse import urlparse

import anyio
from litestar.datastructures import UploadFile

logger = logging.getLogger("Wishwell.storage")

CHUNK_SIZE = 1024 * 1024
_WHITESPACE = re.compile(r"\s+")


class UploadStore:
    """
    Flat directory of uploaded files, published under ``public_prefix``.

    Filenames are derived from the upload time and the client's filename,
    not from content, and files are never removed by the application.
    """

    def __init__(self, directory: Path, public_prefix: str = "/uploads") -> None:
        self.directory = Path(directory)
        self.public_prefix = "/" + public_prefix.strip("/")

    def ensure_directory(self) -> None:
        if not self.directory.exists():
            logger.info(f"Creating upload directory {self.directory}")
        self.directory.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def generate_filename(original: Optional[str], now: Optional[float] = None) -> str:
        """Build '<epoch millis>-<basename>' with whitespace runs turned into '_'."""
        millis = int((time.time() if now is None else now) * 1000)
        # Clients may send Windows paths, so treat both separators alike
        basename = PurePosixPath((original or "").replace("\\", "/")).name
        basename = _WHITESPACE.sub("_", basename.strip())
        if basename in ("", ".", ".."):
            basename = "upload"
        return f"{millis}-{basename}"

    async def save(self, upload: UploadFile) -> str:
        """Stream ``upload`` to disk and return the stored filename."""
        filename = self.generate_filename(upload.filename)
        target = self.directory / filename

        async with await anyio.open_file(target, "wb") as out:
            while True:
                chunk = await upload.read(CHUNK_SIZE)
                if not chunk:
                    break
                await out.write(chunk)
        await upload.close()

        logger.debug(f"Stored upload {upload.filename!r} as {filename}")
        return filename

    def public_url(self, base_url: str, filename: str) -> str:
        """Absolute URL under which ``filename`` is served."""
        return f"{base_url.rstrip('/')}{self.public_prefix}/{filename}"

    def path_for(self, reference: str) -> Path:
        """On-disk path for a stored URL or bare filename (basename only)."""
        name = PurePosixPath(urlparse(reference).path).name
        return self.directory / name

    def resolve(self, reference: str) -> Optional[Path]:
        """Like ``path_for`` but ``None`` when the file is not on disk."""
        path = self.path_for(reference)
        if not path.name or not path.is_file():
            return None
        return path
