# vbump/core/semver.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from vbump.core.errors import InvalidFormat


Element = Literal["major", "minor", "patch"]
ELEMENTS = ("major", "minor", "patch")

# ASCII digits only; \d would also match other unicode digits
_SEMVER_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")

# each component is capped at MAX_DIGITS significant digits, well below
# the interpreter limit on int/str conversion
MAX_DIGITS = 64
MAX_COMPONENT = 10 ** MAX_DIGITS - 1


@dataclass(frozen=True, order=True)
class SemanticVersion:
    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in ELEMENTS:
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int) or v < 0:
                raise InvalidFormat(f"{name} must be a non-negative int, got {v!r}")
            if v > MAX_COMPONENT:
                raise InvalidFormat(f"{name} exceeds {MAX_DIGITS} digits")

    def __str__(self) -> str:
        return format_version(self)


ZERO = SemanticVersion(0, 0, 0)


def parse(text: str) -> SemanticVersion:
    """
    Parse "major.minor.patch".
    Pre-release / build suffixes, whitespace and signs are rejected.
    Leading zeros are accepted and dropped: "01.2.3" -> 1.2.3
    """
    if not isinstance(text, str):
        raise InvalidFormat(f"version must be a string, got {type(text).__name__}")

    m = _SEMVER_RE.fullmatch(text)
    if not m:
        raise InvalidFormat(f"invalid version {text!r}, expected major.minor.patch")

    # leading zeros count towards the interpreter limit too
    groups = [g.lstrip("0") or "0" for g in m.groups()]
    if any(len(g) > MAX_DIGITS for g in groups):
        raise InvalidFormat(f"invalid version {text[:32]!r}..., components are limited to {MAX_DIGITS} digits")

    major, minor, patch = (int(g) for g in groups)
    return SemanticVersion(major, minor, patch)


def format_version(v: SemanticVersion) -> str:
    return f"{v.major}.{v.minor}.{v.patch}"


def bump_major(v: SemanticVersion) -> SemanticVersion:
    return SemanticVersion(v.major + 1, 0, 0)


def bump_minor(v: SemanticVersion) -> SemanticVersion:
    return SemanticVersion(v.major, v.minor + 1, 0)


def bump_patch(v: SemanticVersion) -> SemanticVersion:
    return SemanticVersion(v.major, v.minor, v.patch + 1)


_BUMPS = {
    "major": bump_major,
    "minor": bump_minor,
    "patch": bump_patch,
}


def bump(v: SemanticVersion, element: Element) -> SemanticVersion:
    fn = _BUMPS.get(element)
    if fn is None:
        raise ValueError(f"element must be one of: {', '.join(ELEMENTS)}")
    return fn(v)
