import os

import pytest

from vbump.core.errors import CorruptState, InvalidProject, StorageError
from vbump.services.file_provider import FileProvider, MemoryProvider, check_project


def test_missing_datadir(tmp_path):
    with pytest.raises(StorageError):
        FileProvider(tmp_path / "nope")


def test_datadir_must_be_a_directory(tmp_path):
    f = tmp_path / "file"
    f.write_text("x")
    with pytest.raises(StorageError):
        FileProvider(f)


def test_load_absent_and_store(datadir):
    p = FileProvider(datadir)
    assert p.load("proj") is None
    p.store("proj", "1.2.3")
    assert p.load("proj") == "1.2.3"
    assert (datadir / "proj").read_text(encoding="utf-8") == "1.2.3\n"
    # no temp file left behind
    assert sorted(os.listdir(datadir)) == ["proj"]


def test_store_overwrites(datadir):
    p = FileProvider(datadir)
    p.store("proj", "5.0.0")
    p.store("proj", "0.1.0")
    assert p.load("proj") == "0.1.0"


def test_store_io_error_is_storage_error(datadir):
    p = FileProvider(datadir)
    # a directory where the record should be makes os.replace fail
    (datadir / "proj").mkdir()
    with pytest.raises(StorageError) as exc:
        p.store("proj", "1.0.0")
    assert isinstance(exc.value.__cause__, OSError)
    # the failed write leaves no temp file behind
    assert sorted(os.listdir(datadir)) == ["proj"]


def test_load_non_utf8_is_corrupt_state(datadir):
    (datadir / "proj").write_bytes(b"\xff\xfe\n")
    with pytest.raises(CorruptState) as exc:
        FileProvider(datadir).load("proj")
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


@pytest.mark.parametrize("name", ["my-app", "App_2", "lib.core", "0"])
def test_valid_project_names(name):
    assert check_project(name) == name


@pytest.mark.parametrize("name", ["", "../etc", "-x", "a b", "ü", None])
def test_invalid_project_names(name):
    with pytest.raises(InvalidProject):
        check_project(name)


def test_memory_provider():
    p = MemoryProvider({"a": "1.0.0"})
    assert p.load("a") == "1.0.0"
    assert p.load("b") is None
    p.store("b", "0.0.1")
    assert p.load("b") == "0.0.1"
    with pytest.raises(InvalidProject):
        p.load("../a")
