import pytest
import requests

from tools import bump_version
from vbump.services.client import VbumpClient


class _FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


@pytest.fixture()
def calls(monkeypatch):
    seen = []

    def fake_request(method, url, timeout):
        seen.append((method, url, timeout))
        return _FakeResponse("0.0.1\n")

    monkeypatch.setattr(requests, "request", fake_request)
    return seen


def test_bump_posts_to_element_route(calls):
    c = VbumpClient("http://vbump:8080/", timeout_sec=3)
    assert c.bump("my-app", "patch") == "0.0.1"
    assert calls == [("POST", "http://vbump:8080/patch/my-app", 3)]


def test_other_routes(calls):
    c = VbumpClient("http://vbump")
    c.get_version("p")
    c.set_version("p", "1.2.3")
    c.bump_transient("1.2.3", "minor")
    assert [(m, u) for m, u, _ in calls] == [
        ("GET", "http://vbump/version/p"),
        ("POST", "http://vbump/version/p/1.2.3"),
        ("POST", "http://vbump/transient/minor/1.2.3"),
    ]


def test_unknown_element():
    c = VbumpClient()
    with pytest.raises(ValueError):
        c.bump("p", "build")
    with pytest.raises(ValueError):
        c.bump_transient("1.0.0", "major")


def test_http_error_is_runtime_error(monkeypatch):
    monkeypatch.setattr(requests, "request", lambda method, url, timeout: _FakeResponse("", 404))
    with pytest.raises(RuntimeError) as exc:
        VbumpClient("http://vbump").get_version("missing")
    assert isinstance(exc.value.__cause__, requests.HTTPError)


def test_tool_writes_version_file(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(requests, "request", lambda method, url, timeout: _FakeResponse("2.4.0\n"))
    out = tmp_path / "version.txt"
    assert bump_version.main(["minor", "my-app", "--url", "http://vbump", "--file", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "2.4.0\n"
    assert capsys.readouterr().out.strip() == "2.4.0"


def test_tool_reports_failure(monkeypatch, tmp_path):
    def boom(method, url, timeout):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(requests, "request", boom)
    out = tmp_path / "version.txt"
    assert bump_version.main(["patch", "my-app", "--file", str(out)]) == 1
    assert not out.exists()
