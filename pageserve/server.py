"""Process entry point: resolve settings, bind, serve."""
import copy
import logging
import sys
from typing import Any, Dict, Optional

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from pageserve.app import create_app
from pageserve.config import ConfigError, Settings

logger = logging.getLogger(__name__)

# uvicorn's own logging setup, with the project's loggers on its default handler
LOG_CONFIG: Dict[str, Any] = copy.deepcopy(LOGGING_CONFIG)
LOG_CONFIG["loggers"]["pageserve"] = {
    "handlers": ["default"],
    "level": "INFO",
    "propagate": False,
}


class Server(uvicorn.Server):
    """uvicorn server that announces itself once its socket is bound."""

    def __init__(self, config: uvicorn.Config, settings: Settings) -> None:
        super().__init__(config)
        self.settings = settings

    async def startup(self, sockets=None) -> None:
        # A bind failure never returns from here: uvicorn logs it and exits 1.
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Server running at %s", self.bound_port)

    @property
    def bound_port(self) -> int:
        """Port the listener actually got; differs from the setting when it is 0."""
        sockets = [sock for server in self.servers for sock in server.sockets]
        return sockets[0].getsockname()[1] if sockets else self.settings.port


def build_server(settings: Settings) -> Server:
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=LOG_CONFIG,
    )
    return Server(config, settings)


def main(environ: Optional[Dict[str, str]] = None) -> None:
    try:
        settings = Settings.from_env(environ)
    except ConfigError as exc:
        sys.exit(f"Invalid configuration: {exc}")
    build_server(settings).run()
