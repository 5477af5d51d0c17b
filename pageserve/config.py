"""Process configuration, resolved once from the environment."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

PACKAGE_ROOT = Path(__file__).parent
STATIC_DIR = PACKAGE_ROOT / "public"
INDEX_FILE = PACKAGE_ROOT / "views" / "index.html"

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"


class ConfigError(ValueError):
    """Raised when an environment value cannot be used."""


def parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {value!r}") from None
    if not 0 <= port <= 65535:
        raise ConfigError(f"PORT must be between 0 and 65535, got {port}")
    return port


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    static_dir: Path = STATIC_DIR
    index_file: Path = INDEX_FILE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``PORT`` and ``HOST``.

        Unset or empty variables fall back to the defaults.
        """
        if environ is None:
            environ = os.environ
        port = environ.get("PORT", "").strip()
        host = environ.get("HOST", "").strip()
        return cls(
            port=parse_port(port) if port else DEFAULT_PORT,
            host=host or DEFAULT_HOST,
        )
