# vbump/services/version_store.py
from __future__ import annotations

import threading
from typing import Dict, Optional

from vbump.core import semver
from vbump.core.errors import CorruptState, InvalidFormat, NotFound
from vbump.core.semver import Element, SemanticVersion
from vbump.services.file_provider import Provider, check_project
from vbump.services.logger import get_logger

logger = get_logger(__name__)


class VersionStore:
    """
    Current semantic version per project, on top of a Provider.

    set/bump run load -> transition -> store under a per-project lock, so
    concurrent calls on one project never lose an update. Different projects
    use different locks. Transient bumps never touch the provider.
    """

    def __init__(self, provider: Provider):
        self.provider = provider
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, project: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(project, threading.Lock())

    def _load(self, project: str) -> Optional[SemanticVersion]:
        raw = self.provider.load(project)
        if raw is None:
            return None
        try:
            return semver.parse(raw)
        except InvalidFormat as e:
            logger.error("corrupt version record", project=project, stored=raw)
            raise CorruptState(f"stored version for {project!r} is corrupt: {raw!r}") from e

    # ---- persisted ----

    def get_version(self, project: str) -> str:
        check_project(project)
        current = self._load(project)
        if current is None:
            raise NotFound(f"no version recorded for project {project!r}")
        return semver.format_version(current)

    def set_version(self, project: str, text: str) -> str:
        check_project(project)
        new = semver.parse(text)
        out = semver.format_version(new)
        with self._lock_for(project):
            self.provider.store(project, out)
        return out

    def bump(self, project: str, element: Element) -> str:
        check_project(project)
        with self._lock_for(project):
            current = self._load(project)
            if current is None:
                # absent project starts at 0.0.0
                current = semver.ZERO
            new = semver.bump(current, element)
            out = semver.format_version(new)
            self.provider.store(project, out)
        return out

    def bump_major(self, project: str) -> str:
        return self.bump(project, "major")

    def bump_minor(self, project: str) -> str:
        return self.bump(project, "minor")

    def bump_patch(self, project: str) -> str:
        return self.bump(project, "patch")

    # ---- transient ----

    @staticmethod
    def bump_transient(text: str, element: Element) -> str:
        return semver.format_version(semver.bump(semver.parse(text), element))

    def bump_transient_minor(self, text: str) -> str:
        return self.bump_transient(text, "minor")

    def bump_transient_patch(self, text: str) -> str:
        return self.bump_transient(text, "patch")
