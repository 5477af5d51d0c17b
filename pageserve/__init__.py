"""Serve one HTML page and its static assets."""
from pageserve.app import create_app
from pageserve.config import Settings

__all__ = ["create_app", "Settings"]
__version__ = "1.0.0"
