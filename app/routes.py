from pathlib import Path
from typing import List

from litestar.static_files import create_static_files_router
from litestar.types import ControllerRouterHandler

from app.home.routes import routes as routes_home
from app.api import WishesController, VideoController, FeedbackController


def build_routes(upload_dir: Path) -> List[ControllerRouterHandler]:
    """Route table; the upload directory is mounted at /uploads."""
    return [
        WishesController,
        VideoController,
        FeedbackController,
        create_static_files_router(
            path="/uploads",
            directories=[upload_dir],
            name="uploads",
            include_in_schema=False,
        ),
        *routes_home,
    ]
