"""Wish API endpoints: create, fetch, list and stream video."""

import logging
from datetime import datetime
from typing import List, Optional

from litestar import Controller, Request, get, post
from litestar.datastructures import UploadFile
from litestar.response import File
from litestar.status_codes import HTTP_200_OK
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.errors import FileMissingError, NotFoundError, StorageError, ValidationError
from app.models import MAX_IMAGES, Wish, as_utc
from app.repositories import wishes as wish_repo
from app.storage import UploadStore
from app.utils import get_public_base_url
from app.utils.logging import debug_log, error_log

logger = logging.getLogger("Wishwell.wishes")

REQUIRED_FIELDS = ("name", "message", "sender")
MAX_VIDEOS = 1


# --- Response Schemas ---

class WishResponse(BaseModel):
    """Public fields of a wish."""
    id: str
    name: str
    message: str
    sender: str
    images: List[str]
    video: Optional[str]
    createdAt: datetime

    @classmethod
    def from_wish(cls, wish: Wish) -> "WishResponse":
        return cls(
            id=str(wish.id),
            name=wish.name,
            message=wish.message,
            sender=wish.sender,
            images=list(wish.images or []),
            video=wish.video,
            createdAt=as_utc(wish.created_at),
        )


class WishCreatedResponse(WishResponse):
    """Created wish plus the frontend link to share."""
    link: str


# --- Helper Functions ---

def _uploads(form, field: str) -> List[UploadFile]:
    """File parts submitted under ``field``, skipping empty file inputs."""
    return [
        value for value in form.getall(field, [])
        if isinstance(value, UploadFile) and value.filename
    ]


def _text(form, field: str) -> str:
    value = form.get(field)
    return value.strip() if isinstance(value, str) else ""


# --- Controllers ---

class WishesController(Controller):
    """API endpoints for wishes."""

    path = "/api"
    tags = ["wishes"]

    @post("/wish", status_code=HTTP_200_OK)
    async def create_wish(
        self,
        request: Request,
        session: AsyncSession,
        settings: Settings,
        upload_store: UploadStore,
    ) -> WishCreatedResponse:
        """Create a wish from a multipart form with optional images and video."""
        form = await request.form()
        fields = {name: _text(form, name) for name in REQUIRED_FIELDS}
        if not all(fields.values()):
            raise ValidationError("name, message & sender are required")

        images = _uploads(form, "images")
        videos = _uploads(form, "video")
        if len(images) > MAX_IMAGES:
            raise ValidationError(f"At most {MAX_IMAGES} images are allowed")
        if len(videos) > MAX_VIDEOS:
            raise ValidationError("Only one video is allowed")
        debug_log("Wish form from %s: %d images, %d videos", fields["sender"], len(images), len(videos))

        base_url = get_public_base_url(request)
        # Files hit the disk before the document is inserted; a failed insert leaves them orphaned
        image_urls = [
            upload_store.public_url(base_url, await upload_store.save(upload))
            for upload in images
        ]
        video_url = None
        if videos:
            video_url = upload_store.public_url(base_url, await upload_store.save(videos[0]))

        try:
            wish = await wish_repo.create_wish(
                session,
                images=image_urls,
                video=video_url,
                **fields,
            )
        except StorageError as e:
            error_log(
                "Failed to create wish",
                exc=e,
                context={"sender": fields["sender"], "images": len(image_urls), "video": bool(video_url)},
            )
            raise

        logger.info(f"Wish {wish.id} created by {wish.sender} ({len(image_urls)} images, video={bool(video_url)})")
        response = WishResponse.from_wish(wish)
        return WishCreatedResponse(link=settings.share_link(response.id), **response.model_dump())

    @get("/wish/{wish_id:str}")
    async def get_wish(self, wish_id: str, session: AsyncSession) -> WishResponse:
        """Get a single wish by id."""
        wish = await wish_repo.get_wish(session, wish_id)
        return WishResponse.from_wish(wish)

    @get("/wishes")
    async def list_wishes(self, session: AsyncSession) -> List[WishResponse]:
        """List all wishes, newest first."""
        wishes = await wish_repo.list_wishes(session)
        return [WishResponse.from_wish(w) for w in wishes]


class VideoController(Controller):
    """Streams the video attached to a wish."""

    path = "/video"
    tags = ["wishes"]

    @get("/{wish_id:str}", media_type="video/mp4")
    async def stream_video(
        self,
        wish_id: str,
        session: AsyncSession,
        upload_store: UploadStore,
    ) -> File:
        """Send the wish's video file as ``video/mp4`` (no range support)."""
        wish = await wish_repo.get_wish(session, wish_id)
        if not wish.video:
            raise NotFoundError("Video not found")

        path = upload_store.resolve(wish.video)
        if path is None:
            logger.warning(f"Wish {wish.id} references missing video {wish.video}")
            raise FileMissingError("File missing")

        return File(
            path=path,
            media_type="video/mp4",
            content_disposition_type="inline",
        )
