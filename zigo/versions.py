"""Ordering of compiler version strings such as ``0.12.0-dev.1127+32bc07767``."""

from __future__ import annotations

import re
from collections.abc import Iterable

_COMPONENTS = 4
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _simplify(version: str) -> str:
    version = version.replace("-dev", "", 1)
    head, sep, _ = version.rpartition("+")
    return head if sep else version


def _to_int(part: str) -> int:
    return int(part) if _INTEGER.fullmatch(part) else 0


def version_key(version: str) -> tuple[int, int, int, int]:
    """Return a sortable four-number key for ``version``.

    The ``-dev`` marker and the trailing ``+hash`` are dropped; parts that are
    not integers count as zero. More than four parts is an error.
    """
    parts = _simplify(version).split(".")
    if len(parts) > _COMPONENTS:
        raise ValueError(f"too many version components: {version!r}")
    numbers = [_to_int(part) for part in parts]
    numbers.extend([0] * (_COMPONENTS - len(numbers)))
    return (numbers[0], numbers[1], numbers[2], numbers[3])


def cmp_version(a: str, b: str) -> int:
    """Compare two versions, returning -1, 0 or 1."""
    key_a, key_b = version_key(a), version_key(b)
    return (key_a > key_b) - (key_a < key_b)


def sort_versions(versions: Iterable[str]) -> list[str]:
    """Return the versions in ascending order."""
    return sorted(versions, key=version_key)