"""Cached, checksum-verified downloads with a progress line."""

from __future__ import annotations

import hashlib
import os
import time
import urllib.request
from pathlib import Path

from .config import ZigoError
from .printer import highlight_info

_CHUNK = 64 * 1024


def decor(size: float) -> str:
    """Format a byte count with a binary unit."""
    for unit, scale in (("B", 1), ("KiB", 1024), ("MiB", 1024**2)):
        if size < scale * 1024:
            return f"{size / scale:.2f} {unit}"
    return f"{size / 1024**3:.2f} GiB"


def format_progress(done: float, total: float, bps: float) -> str:
    """Return the carriage-return prefixed progress line."""
    ratio = done / total if total > 0 else 0.0
    return (
        f"\rprogress: {decor(done)} / {decor(total)} | "
        f"{ratio * 100:.1f} % | {decor(bps)}/s {' ':>6}"
    )


def _digest(path: Path) -> bytes:
    digest = hashlib.sha256()
    with path.open("rb") as stream:
        for block in iter(lambda: stream.read(_CHUNK), b""):
            digest.update(block)
    return digest.digest()


def _fetch_to(url: str, target: Path) -> None:
    started = last = time.monotonic()
    done = 0
    with urllib.request.urlopen(url) as response, target.open("wb") as out:
        total = int(response.headers.get("Content-Length") or 0)
        for block in iter(lambda: response.read(_CHUNK), b""):
            out.write(block)
            done += len(block)
            now = time.monotonic()
            if now - last >= 0.1:
                last = now
                print(format_progress(done, total, done / (now - started)), end="")
    elapsed = time.monotonic() - started
    bps = done / elapsed if elapsed > 0 else 0.0
    print(format_progress(done, total or done, bps))


def download(url: str, checksum: str, cache_dir: str | os.PathLike[str]) -> Path:
    """Download ``url`` into ``cache_dir`` and return the file's path.

    A cached file is reused when it matches ``checksum``; a malformed
    checksum is ignored.
    """
    filename = url.split("/")[-1]
    target = Path(cache_dir) / filename
    try:
        expected = bytes.fromhex(checksum) if checksum.strip() == checksum else None
    except ValueError:
        expected = None
    expected = expected or None

    if target.is_file() and (expected is None or _digest(target) == expected):
        highlight_info(f"Load cache from {target}")
        return target

    highlight_info(f"Downloading {filename}...")
    print(f"url: {url}")
    print(f"save to: {target}")
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        _fetch_to(url, target)
    except (OSError, ValueError) as exc:
        target.unlink(missing_ok=True)
        raise ZigoError(f"Failed to download file: {exc}") from exc

    if expected is not None and _digest(target) != expected:
        target.unlink(missing_ok=True)
        raise ZigoError("Failed to download file: checksum mismatch")

    highlight_info("Done.")
    return target