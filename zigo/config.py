"""Location of the installation directory, its state file and the cache."""

from __future__ import annotations

import os
import platform
import sys
from dataclasses import dataclass
from pathlib import Path

_ARCH_NAMES = {"amd64": "x86_64", "amd64p32": "x86", "arm64": "aarch64"}


class ZigoError(Exception):
    """A failure that stops the current command."""


@dataclass
class Config:
    """The installation directory together with the current and master versions."""

    path: Path
    current: str = ""
    master: str = ""

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    @property
    def config_file(self) -> Path:
        return self.path / "config"

    def save(self) -> None:
        """Write the current and master versions to the config file."""
        try:
            self.config_file.write_text(
                f"{self.current}\n{self.master}", encoding="utf-8", newline=""
            )
        except OSError as exc:
            raise ZigoError(f"Failed to modify config file: {exc}") from exc


def default_zigo_path() -> Path:
    """Return ``$ZIGO_PATH`` or ``~/.zig``."""
    env = os.environ.get("ZIGO_PATH")
    if env:
        return Path(env)
    try:
        return Path.home() / ".zig"
    except RuntimeError as exc:
        raise ZigoError("Failed to get user's home directory") from exc


def load_config(path: str | os.PathLike[str]) -> Config:
    """Read the state kept in ``path``, creating the directory and file if needed."""
    config = Config(Path(path))
    file = config.config_file
    try:
        config.path.mkdir(parents=True, exist_ok=True)
        if not file.exists():
            file.write_text("\n", encoding="utf-8", newline="")
            return config
        lines = file.read_text(encoding="utf-8", newline="").split("\n")
    except OSError as exc:
        raise ZigoError(f"Failed to set up config file: {exc}") from exc
    if len(lines) >= 2:
        config.current, config.master = lines[0], lines[1]
    return config


def dist_info(machine: str, system: str) -> str:
    """Return the ``<arch>-<os>`` name used by the download index."""
    arch = machine.lower()
    os_name = system.lower()
    if os_name == "darwin":
        os_name = "macos"
    return f"{_ARCH_NAMES.get(arch, arch)}-{os_name}"


def current_dist_info() -> str:
    """Return the distribution name of the running machine."""
    return dist_info(platform.machine(), platform.system())


def _user_cache_dir() -> Path:
    if sys.platform == "win32":
        base = os.environ.get("LOCALAPPDATA")
    elif sys.platform == "darwin":
        home = os.environ.get("HOME")
        base = os.path.join(home, "Library", "Caches") if home else None
    else:
        home = os.environ.get("HOME")
        base = os.environ.get("XDG_CACHE_HOME") or (
            os.path.join(home, ".cache") if home else None
        )
    if not base:
        raise ZigoError("Failed to get user's cache directory")
    return Path(base)


def cache_dir() -> Path:
    """Return the download cache directory, creating it if needed."""
    directory = _user_cache_dir() / "zigo"
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ZigoError(f"Failed to create cache directory: {exc}") from exc
    return directory