"""Total ordering over three-component semantic version strings."""

from __future__ import annotations

UNKNOWN_VERSION = "unknown"

_SIGNIFICANT_PARTS = 3


def _parts(version: str) -> list[int]:
    parts: list[int] = []
    for raw in version.split(".")[:_SIGNIFICANT_PARTS]:
        try:
            parts.append(int(raw))
        except ValueError:
            parts.append(0)
    parts.extend([0] * (_SIGNIFICANT_PARTS - len(parts)))
    return parts


def compare_versions(a: str, b: str) -> int:
    """Compare two versions, returning -1, 0 or 1.

    Only the first three dot-separated components count; missing or
    non-numeric components are zero.  An empty or ``"unknown"`` version on
    either side compares equal to anything.
    """
    if not a or not b or a == UNKNOWN_VERSION or b == UNKNOWN_VERSION:
        return 0

    for left, right in zip(_parts(a), _parts(b)):
        if left > right:
            return 1
        if left < right:
            return -1
    return 0
