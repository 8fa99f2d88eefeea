# vbump/config.py
from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple


DEFAULT_LISTEN = ":8080"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env(name: str, default: str = "") -> str:
    return (os.getenv(name, default) or "").strip()


def _bool_env(name: str, default: str = "0") -> bool:
    return _env(name, default).lower() in {"1", "true", "yes", "y", "on"}


def parse_listen(addr: str) -> Tuple[str, int]:
    """":8080" -> ("0.0.0.0", 8080), "127.0.0.1:9000" -> ("127.0.0.1", 9000)"""
    host, sep, port_s = (addr or "").strip().rpartition(":")
    if not sep or not port_s.isdigit():
        raise ValueError(f"invalid listen address {addr!r}, expected [host]:port")
    port = int(port_s)
    if not 0 < port < 65536:
        raise ValueError(f"invalid port in listen address {addr!r}")
    return (host or "0.0.0.0"), port


@dataclass(frozen=True)
class Settings:
    datadir: str
    listen: str = DEFAULT_LISTEN
    log_level: str = "INFO"
    json_logs: bool = True

    @property
    def host(self) -> str:
        return parse_listen(self.listen)[0]

    @property
    def port(self) -> int:
        return parse_listen(self.listen)[1]


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="vbump", description="Semantic version bump service.")
    p.add_argument("-l", "--listen", default=None, help=f"Address to listen on (default {DEFAULT_LISTEN}).")
    p.add_argument("-d", "--datadir", default=None, help="Directory path for storing version files (must exist).")
    p.add_argument("--log-level", default=None)
    p.add_argument("--console-logs", action="store_true", help="Human readable logs instead of JSON.")
    return p


def load_settings(argv: Optional[List[str]] = None) -> Settings:
    """Environment first (VBUMP_*), command line flags override."""
    parser = _parser()
    args = parser.parse_args(argv)

    datadir = args.datadir or _env("VBUMP_DATADIR")
    if not datadir:
        parser.error("--datadir (or VBUMP_DATADIR) is required")

    listen = args.listen or _env("VBUMP_LISTEN", DEFAULT_LISTEN) or DEFAULT_LISTEN
    try:
        parse_listen(listen)
    except ValueError as e:
        parser.error(str(e))

    log_level = (args.log_level or _env("VBUMP_LOG_LEVEL", "INFO") or "INFO").upper()
    if log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {log_level!r}, expected one of: {', '.join(LOG_LEVELS)}")

    return Settings(
        datadir=datadir,
        listen=listen,
        log_level=log_level,
        json_logs=False if args.console_logs else _bool_env("VBUMP_JSON_LOGS", "1"),
    )
