# tools/bump_version.py
# usage: python tools/bump_version.py patch my-project [--url http://vbump:8080] [--file version.txt]
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from vbump.services.client import DEFAULT_BASE_URL, VbumpClient


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="bump_version")
    p.add_argument("element", choices=["major", "minor", "patch"])
    p.add_argument("project")
    p.add_argument("--url", default=(os.getenv("VBUMP_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL).strip())
    p.add_argument("--file", default="version.txt")
    args = p.parse_args(argv)

    try:
        nv = VbumpClient(args.url).bump(args.project, args.element)
    except RuntimeError as e:
        print(e, file=sys.stderr)
        return 1

    Path(args.file).write_text(nv + "\n", encoding="utf-8")
    print(nv)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
