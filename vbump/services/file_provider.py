# vbump/services/file_provider.py
from __future__ import annotations

import os
import re
import threading
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from vbump.core.errors import CorruptState, InvalidProject, StorageError


# one path segment: no separators, no "..", no hidden files
_PROJECT_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]{0,127}")


def check_project(project: str) -> str:
    if not isinstance(project, str) or not _PROJECT_RE.fullmatch(project):
        raise InvalidProject(f"invalid project name {project!r}")
    if project.endswith(".tmp"):
        raise InvalidProject(f"invalid project name {project!r} (reserved suffix)")
    return project


class Provider(Protocol):
    def load(self, project: str) -> Optional[str]:
        ...

    def store(self, project: str, text: str) -> None:
        ...


class FileProvider:
    """
    One file per project under datadir, holding the version text.
    store() writes to <file>.tmp and replaces, so readers never see a half write.
    Callers serialize writes for the same project.
    """

    def __init__(self, datadir: Union[str, Path]):
        self.datadir = Path(datadir)
        if not self.datadir.is_dir():
            raise StorageError(f"datadir does not exist or is not a directory: {self.datadir}")

    def _path(self, project: str) -> Path:
        return self.datadir / check_project(project)

    def load(self, project: str) -> Optional[str]:
        path = self._path(project)
        try:
            return path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            raise CorruptState(f"stored version for {project!r} is not utf-8 text") from e
        except OSError as e:
            raise StorageError(f"load {project} failed: {e}") from e

    def store(self, project: str, text: str) -> None:
        path = self._path(project)
        tmp = path.with_name(path.name + ".tmp")
        try:
            tmp.write_text(text + "\n", encoding="utf-8")
            os.replace(tmp, path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise StorageError(f"store {project} failed: {e}") from e


class MemoryProvider:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def load(self, project: str) -> Optional[str]:
        check_project(project)
        with self._lock:
            return self._data.get(project)

    def store(self, project: str, text: str) -> None:
        check_project(project)
        with self._lock:
            self._data[project] = text
