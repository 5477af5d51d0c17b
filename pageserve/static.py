"""Static file serving that falls through to the router when nothing matches."""
import logging
import stat
from pathlib import Path
from typing import Union

import anyio
from starlette.exceptions import HTTPException
from starlette.staticfiles import StaticFiles
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)


class StaticAssetsMiddleware:
    """Serve regular files under ``directory`` ahead of any route.

    Requests that don't name an existing file (directories, missing files,
    paths outside the directory, malformed paths, methods other than
    GET/HEAD) are handed to the wrapped app untouched.
    """

    def __init__(self, app: ASGIApp, directory: Union[str, Path]) -> None:
        self.app = app
        self.directory = Path(directory)
        # check_dir=False: a missing directory just means nothing matches
        self.files = StaticFiles(directory=self.directory, check_dir=False)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] in ("GET", "HEAD"):
            if await self.has_file(scope):
                try:
                    await self.files(scope, receive, send)
                    return
                except HTTPException as exc:
                    # Raised before anything is sent, e.g. the file went away
                    # between the check and the response.
                    logger.debug("Static file for %r vanished: %s", scope["path"], exc.detail)
        await self.app(scope, receive, send)

    async def has_file(self, scope: Scope) -> bool:
        try:
            path = self.files.get_path(scope)
            # lookup_path refuses anything resolving outside the directory
            _, stat_result = await anyio.to_thread.run_sync(self.files.lookup_path, path)
        except (OSError, ValueError) as exc:
            # ValueError: embedded NUL byte
            logger.debug("Static lookup for %r failed: %s", scope["path"], exc)
            return False
        return stat_result is not None and stat.S_ISREG(stat_result.st_mode)
