import logging
from typing import Optional

from litestar import Litestar
from litestar.di import Provide
from litestar.exceptions import NotFoundException
from litestar.plugins.sqlalchemy import SQLAlchemyAsyncConfig, SQLAlchemyInitPlugin
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.config import Settings
from app.cors import build_cors_config, make_cors_gate
from app.errors import EXCEPTION_HANDLERS, StorageError
from app.frontend import make_not_found_handler
from app.models import Base
from app.routes import build_routes
from app.storage import UploadStore
from app.utils.logging import set_debug

logger = logging.getLogger("Wishwell")


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )


def create_app(settings: Optional[Settings] = None) -> Litestar:
    """
    Application factory.

    Startup order is: verify the database connection, create the upload
    directory, then accept requests. A database that cannot be reached
    aborts startup.
    """
    settings = settings or Settings.from_env()
    upload_store = UploadStore(settings.upload_dir)
    set_debug(settings.debug)

    logger.info(f"Starting app in {'DEBUG' if settings.debug else 'PRODUCTION'} mode")
    logger.debug(f"Database URL: {settings.database_url}")

    # --- SQLAlchemy config
    db_config = SQLAlchemyAsyncConfig(
        connection_string=settings.database_url,
        session_dependency_key="session",
        metadata=Base.metadata,
        create_all=settings.create_all,
    )

    async def connect_store() -> None:
        try:
            async with db_config.get_engine().connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logger.critical(f"Database connection error: {e}")
            raise StorageError("Could not connect to the database") from e
        logger.info("Database connected")

    def ensure_upload_dir() -> None:
        upload_store.ensure_directory()

    def provide_settings() -> Settings:
        return settings

    def provide_upload_store() -> UploadStore:
        return upload_store

    return Litestar(
        route_handlers=build_routes(settings.upload_dir),
        debug=settings.debug,
        plugins=[SQLAlchemyInitPlugin(db_config)],
        dependencies={
            "settings": Provide(provide_settings, sync_to_thread=False),
            "upload_store": Provide(provide_upload_store, sync_to_thread=False),
        },
        cors_config=build_cors_config(settings),
        before_request=make_cors_gate(settings),
        exception_handlers={
            **EXCEPTION_HANDLERS,
            NotFoundException: make_not_found_handler(settings.frontend_dir),
        },
        on_startup=[connect_store, ensure_upload_dir],
        request_max_body_size=settings.max_upload_size,
    )


def run() -> None:
    """Serve the app with uvicorn on HOST:PORT."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)


# --- App init
settings = Settings.from_env()
configure_logging(settings.debug)
app = create_app(settings)
