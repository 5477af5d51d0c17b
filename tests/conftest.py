import pytest
from fastapi.testclient import TestClient

from pageserve import create_app
from pageserve.config import Settings

from .sitedata import INDEX_BYTES, SECRET_BYTES, STYLE_BYTES


@pytest.fixture
def site(tmp_path):
    """A static directory, an index document and a file outside both."""
    public = tmp_path / "public"
    public.mkdir()
    (public / "style.css").write_bytes(STYLE_BYTES)
    views = tmp_path / "views"
    views.mkdir()
    (views / "index.html").write_bytes(INDEX_BYTES)
    (tmp_path / "secret.txt").write_bytes(SECRET_BYTES)
    return tmp_path


@pytest.fixture
def settings(site):
    return Settings(static_dir=site / "public", index_file=site / "views" / "index.html")


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as client:
        yield client
