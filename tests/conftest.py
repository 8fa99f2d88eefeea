import pytest

from vbump.main import create_app
from vbump.services.file_provider import FileProvider
from vbump.services.version_store import VersionStore


@pytest.fixture()
def datadir(tmp_path):
    d = tmp_path / "data"
    d.mkdir()
    return d


@pytest.fixture()
def store(datadir):
    return VersionStore(FileProvider(datadir))


@pytest.fixture()
def client(store):
    app = create_app(store)
    app.config["TESTING"] = True
    return app.test_client()
