"""FastAPI application serving the index page and its static assets."""
import logging
from typing import Optional

import anyio
from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse

from pageserve.config import Settings
from pageserve.static import StaticAssetsMiddleware

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for ``settings``.

    Static files are looked up before any route, so a file in the static
    directory shadows a route with the same path. ``/`` itself never names a
    file and always reaches the index handler.
    """
    if settings is None:
        settings = Settings()

    # No docs or schema routes: anything other than a static file or "/" is a 404.
    app = FastAPI(title="pageserve", docs_url=None, redoc_url=None, openapi_url=None)
    app.add_middleware(StaticAssetsMiddleware, directory=settings.static_dir)

    index_file = settings.index_file
    if not index_file.is_file():
        logger.warning("Index document %s does not exist", index_file)

    @app.api_route("/", methods=["GET", "HEAD"], response_class=FileResponse)
    async def home():
        """Serve the index document."""
        if not await anyio.to_thread.run_sync(index_file.is_file):
            logger.error("Index document %s is missing", index_file)
            raise HTTPException(status_code=404)
        return FileResponse(index_file, media_type="text/html")

    return app
