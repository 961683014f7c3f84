"""Pre-built frontend bundle (SPA) with index.html fallback for unmatched GETs."""

import logging
from pathlib import Path
from typing import Callable, Optional

from litestar import Request
from litestar.exceptions import NotFoundException
from litestar.response import File, Response
from litestar.status_codes import HTTP_404_NOT_FOUND

from app.errors import handle_http_exception

logger = logging.getLogger("Wishwell.frontend")

BANNER = "Backend running"
FRONTEND_MISSING = "Frontend not built yet. Run 'npm run build' in frontend."


def bundle_file(frontend_dir: Path, asset: Optional[str]) -> Optional[Path]:
    """Existing file inside the bundle for ``asset``, never escaping the bundle."""
    if not asset:
        return None
    root = frontend_dir.resolve()
    candidate = (root / asset.lstrip("/")).resolve()
    if candidate == root or not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate


def frontend_response(frontend_dir: Path, asset: Optional[str]) -> Response:
    """
    Answer a GET for ``asset`` from the bundle.

    Bundle files are served as-is; anything else gets index.html. Without a
    built bundle the root shows the liveness banner and other paths a 404.
    """
    bundled = bundle_file(frontend_dir, asset)
    if bundled is not None:
        return File(path=bundled, content_disposition_type="inline")

    index = frontend_dir / "index.html"
    if index.is_file():
        return File(path=index, media_type="text/html", content_disposition_type="inline")

    if not asset or asset == "/":
        return Response(content=BANNER, media_type="text/plain")

    logger.debug(f"No frontend bundle at {frontend_dir}, 404 for {asset}")
    return Response(content=FRONTEND_MISSING, media_type="text/plain", status_code=HTTP_404_NOT_FOUND)


def make_not_found_handler(frontend_dir: Path) -> Callable[[Request, NotFoundException], Response]:
    """
    404 handler: unmatched GETs fall through to the frontend, like the
    catch-all route does, even under prefixes such as /api or /video.
    """
    def handle_not_found(request: Request, exc: NotFoundException) -> Response:
        if request.method == "GET":
            return frontend_response(frontend_dir, request.url.path)
        return handle_http_exception(request, exc)

    return handle_not_found
