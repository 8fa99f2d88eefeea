# vbump/services/client.py
from __future__ import annotations

from urllib.parse import quote

import requests


DEFAULT_BASE_URL = "http://localhost:8080"


class VbumpClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout_sec: int = 10):
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout_sec = timeout_sec

    def _call(self, method: str, *segments: str) -> str:
        path = "/".join(quote(s, safe="") for s in segments)
        url = f"{self.base_url}/{path}"
        try:
            r = requests.request(method, url, timeout=self.timeout_sec)
            r.raise_for_status()
            return r.text.strip()
        except Exception as e:
            raise RuntimeError(f"vbump {method} /{path} failed: {e}") from e

    def bump(self, project: str, element: str) -> str:
        if element not in ("major", "minor", "patch"):
            raise ValueError("element must be one of: major, minor, patch")
        return self._call("POST", element, project)

    def get_version(self, project: str) -> str:
        return self._call("GET", "version", project)

    def set_version(self, project: str, version: str) -> str:
        return self._call("POST", "version", project, version)

    def bump_transient(self, version: str, element: str) -> str:
        """Only minor and patch exist in transient mode."""
        if element not in ("minor", "patch"):
            raise ValueError("transient element must be one of: minor, patch")
        return self._call("POST", "transient", element, version)
