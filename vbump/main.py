# vbump/main.py
from __future__ import annotations

import sys
from typing import List, Optional

from flask import Flask, Response, jsonify

from vbump.config import load_settings
from vbump.core.errors import (
    CorruptState,
    InvalidFormat,
    InvalidProject,
    NotFound,
    StorageError,
    VersionError,
)
from vbump.services.file_provider import FileProvider
from vbump.services.logger import configure_logging, get_logger
from vbump.services.metrics import record_bump, render_latest
from vbump.services.version_store import VersionStore

logger = get_logger(__name__)

_STATUS = {
    InvalidFormat: 422,
    InvalidProject: 400,
    NotFound: 404,
    CorruptState: 500,
    StorageError: 500,
}


def _status_for(err: VersionError) -> int:
    for cls in type(err).__mro__:
        if cls in _STATUS:
            return _STATUS[cls]
    return 500


def _text(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def create_app(store: VersionStore) -> Flask:
    app = Flask(__name__)

    @app.errorhandler(VersionError)
    def on_version_error(err: VersionError):
        status = _status_for(err)
        if status >= 500:
            logger.error("request failed", error=err.code, detail=str(err), status=status)
        else:
            logger.warning("request rejected", error=err.code, detail=str(err), status=status)
        return jsonify({"ok": False, "error": err.code, "detail": str(err)}), status

    @app.get("/")
    def root():
        return _text("hello from vbump!")

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    @app.get("/metrics")
    def metrics():
        body, content_type = render_latest()
        return Response(body, status=200, content_type=content_type)

    def _bump(project: str, element: str) -> Response:
        version = store.bump(project, element)
        record_bump(project, element)
        logger.info(f"bump {element} version", version=version, project=project)
        return _text(version)

    @app.post("/major/<project>")
    def on_major(project: str):
        return _bump(project, "major")

    @app.post("/minor/<project>")
    def on_minor(project: str):
        return _bump(project, "minor")

    @app.post("/patch/<project>")
    def on_patch(project: str):
        return _bump(project, "patch")

    @app.post("/version/<project>/<version>")
    def on_set_version(project: str, version: str):
        out = store.set_version(project, version)
        logger.info("set version explicitly", version=out, project=project)
        return _text(out)

    @app.get("/version/<project>")
    def on_get_version(project: str):
        out = store.get_version(project)
        logger.info("get version", version=out, project=project)
        return _text(out)

    @app.post("/transient/minor/<version>")
    def on_transient_minor(version: str):
        out = store.bump_transient_minor(version)
        logger.info("bump transient minor version", version=out)
        return _text(out)

    @app.post("/transient/patch/<version>")
    def on_transient_patch(version: str):
        out = store.bump_transient_patch(version)
        logger.info("bump transient patch version", version=out)
        return _text(out)

    return app


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings(argv)
    configure_logging(settings.log_level, json_logs=settings.json_logs)
    logger.info("Server is starting...")

    try:
        provider = FileProvider(settings.datadir)
    except StorageError as e:
        logger.error("could not open datadir", datadir=settings.datadir, detail=str(e))
        return 1

    app = create_app(VersionStore(provider))

    logger.info("Server is ready to handle requests", listen=settings.listen)
    app.run(host=settings.host, port=settings.port, threaded=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
