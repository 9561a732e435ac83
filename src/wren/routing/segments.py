"""Path segmentation and segment classification.

A path is split on ``/`` after stripping leading and trailing slashes.
The root path segments to ``[""]``, whose single empty segment is
classified as ``ROOT``.
"""

import re
from enum import Enum

PARAM_RE = re.compile(r"^:(.+)")
SPLAT = "*"

_EDGE_SLASHES_RE = re.compile(r"^/+|/+$")


class SegmentKind(Enum):
    """What a single pattern segment matches."""

    ROOT = "root"
    DYNAMIC = "dynamic"
    SPLAT = "splat"
    STATIC = "static"


def strip_slashes(path: str) -> str:
    """Remove every leading and trailing ``/``."""
    return _EDGE_SLASHES_RE.sub("", path)


def segmentize(path: str) -> list[str]:
    """Split *path* into segments.

    Examples::

        "/users/:id/"  -> ["users", ":id"]
        "files/*"      -> ["files", "*"]
        "/"            -> [""]
    """
    return strip_slashes(path).split("/")


def is_root_segment(segment: str) -> bool:
    return segment == ""


def is_dynamic(segment: str) -> bool:
    return PARAM_RE.match(segment) is not None


def is_splat(segment: str) -> bool:
    return segment == SPLAT


def param_name(segment: str) -> str | None:
    """Return the parameter name of a ``:name`` segment, else ``None``."""
    m = PARAM_RE.match(segment)
    return m.group(1) if m else None


def classify(segment: str) -> SegmentKind:
    if is_root_segment(segment):
        return SegmentKind.ROOT
    if is_dynamic(segment):
        return SegmentKind.DYNAMIC
    if is_splat(segment):
        return SegmentKind.SPLAT
    return SegmentKind.STATIC


def starts_with(string: str, search: str) -> bool:
    return string[: len(search)] == search
