"""Release index lookup, tarball retrieval and archive extraction."""

from __future__ import annotations

import json
import os
import shutil
import tarfile
import urllib.request
import zipfile
from pathlib import Path
from typing import Any

from .config import ZigoError
from .download import download

INDEX_URL = "https://ziglang.org/download/index.json"


def get_index(url: str | None = None) -> dict[str, dict[str, Any]]:
    """Download and decode the release index (``INDEX_URL`` by default)."""
    try:
        with urllib.request.urlopen(url or INDEX_URL) as response:
            raw = response.read()
    except (OSError, ValueError) as exc:
        raise ZigoError(f"failed to get index.json: {exc}") from exc
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise ZigoError(f"failed to decode index.json: {exc}") from exc
    if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
        raise ZigoError("failed to decode index.json: unexpected structure")
    return data


def select_tarball(
    index: dict[str, dict[str, Any]], version: str, dist: str
) -> tuple[str, str, str]:
    """Return ``(url, shasum, resolved_version)`` for ``version`` on ``dist``."""
    release = index.get(version)
    if release is None:
        raise ZigoError(f"Version: {version} Not found")
    entry = release.get(dist)
    if not isinstance(entry, dict):
        raise ZigoError(f"Unsupported dist: {dist}")
    resolved = release.get("version") if version == "master" else version
    values = (entry.get("tarball"), entry.get("shasum"), resolved)
    if not all(isinstance(value, str) for values_item in [values] for value in values_item):
        raise ZigoError(f"Malformed index entry for {version} on {dist}")
    return values


def fetch(
    version: str, dist: str, cache_dir: str | os.PathLike[str]
) -> tuple[Path, str]:
    """Download the tarball of ``version`` and return its path and resolved version."""
    url, shasum, resolved = select_tarball(get_index(), version, dist)
    return download(url, shasum, cache_dir), resolved


def _members(archive: Path):
    """Yield ``(name, is_dir, opener)`` for each entry of the archive."""
    if zipfile.is_zipfile(archive):
        with zipfile.ZipFile(archive) as bundle:
            for info in bundle.infolist():
                yield info.filename, info.is_dir(), lambda i=info: bundle.open(i)
    elif tarfile.is_tarfile(archive):
        with tarfile.open(archive) as tar:
            for member in tar:
                if member.isdir() or member.isfile():
                    yield member.name, member.isdir(), lambda m=member: tar.extractfile(m)
    else:
        raise ZigoError(f"Failed to create extractor: unsupported archive {archive}")


def extract(archive: str | os.PathLike[str], dest: str | os.PathLike[str]) -> None:
    """Unpack ``archive`` into ``dest``, dropping the archive's top directory.

    On failure ``dest`` is removed and :class:`ZigoError` is raised.
    """
    archive, dest = Path(archive), Path(dest)
    if not archive.is_file():
        raise ZigoError(f"Failed to open archive: {archive}")
    try:
        for name, is_dir, opener in _members(archive):
            parts = name.rstrip("/").split("/")
            if len(parts) < 2:
                if is_dir:
                    continue
                raise ZigoError(f"invalid file name: {name}")
            rest = [part for part in parts[1:] if part not in ("", ".")]
            if ".." in rest:
                raise ZigoError(f"unsafe file name: {name}")
            target = dest.joinpath(*rest)
            if is_dir:
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            with opener() as source, target.open("wb") as out:
                shutil.copyfileobj(source, out)
            target.chmod(0o755)
    except ZigoError as exc:
        if str(exc).startswith("Failed to create extractor"):
            raise
        shutil.rmtree(dest, ignore_errors=True)
        raise ZigoError(f"Failed to extract archive: {exc}") from exc
    except (OSError, EOFError, tarfile.TarError, zipfile.BadZipFile) as exc:
        shutil.rmtree(dest, ignore_errors=True)
        raise ZigoError(f"Failed to extract archive: {exc}") from exc