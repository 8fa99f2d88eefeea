# vbump/services/metrics.py
from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, Counter, generate_latest


# exposed as vbump_bumps_total
NUMBER_OF_BUMPS = Counter(
    "vbump_bumps",
    "Number of bumps tracked by vbump, labelled with projectname and semVer element",
    ["project", "element"],
)


def record_bump(project: str, element: str) -> None:
    NUMBER_OF_BUMPS.labels(project=project, element=element).inc()


def bump_count(project: str, element: str) -> float:
    value = REGISTRY.get_sample_value(
        "vbump_bumps_total", {"project": project, "element": element}
    )
    return value or 0.0


def render_latest() -> tuple[bytes, str]:
    return generate_latest(REGISTRY), CONTENT_TYPE_LATEST
