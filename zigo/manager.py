"""Management of the installed compiler versions."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from .config import Config, ZigoError
from .fetch import extract, fetch
from .printer import highlight_info, warn
from .versions import sort_versions


def _remove_path(path: Path) -> None:
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)


class Manager:
    """Installs, selects and removes compilers kept in the config's directory."""

    def __init__(
        self, config: Config, dist: str, cache_dir: str | os.PathLike[str]
    ) -> None:
        self.config = config
        self.dist = dist
        self.cache_dir = Path(cache_dir)
        self.root = config.path

    def installed_versions(self) -> list[str]:
        """Return the installed versions in ascending order."""
        try:
            names = [e.name for e in self.root.iterdir() if e.name not in ("current", "config")]
            return sort_versions(names)
        except (OSError, ValueError) as exc:
            raise ZigoError(f"Failed to read zig directory: {exc}") from exc

    def list_lines(self) -> list[str]:
        """Return the listing lines; the current version is marked with ``*``."""
        versions = self.installed_versions()
        if not versions:
            return []
        cfg = self.config
        lines = []
        if cfg.master:
            lines.append(f"{'*' if cfg.current == 'master' else ' '} master => {cfg.master}")
        lines.extend(f"{'*' if v == cfg.current else ' '} {v}" for v in versions)
        return lines

    def _link(self, version: str) -> None:
        dst, src = self.root / "current", self.root / version
        try:
            _remove_path(dst)
            os.symlink(src, dst, target_is_directory=True)
        except OSError as exc:
            raise ZigoError(f"Failed to create symlink from {src} to {dst}: {exc}") from exc

    def use(self, version: str) -> None:
        """Make an installed version (or ``master``) the default."""
        cfg = self.config
        is_master = version == "master"
        if is_master:
            version = cfg.master
        elif version == cfg.current:
            return
        if version not in self.installed_versions():
            raise ZigoError(f"Version: {version} Not found")
        self._link(version)
        if is_master:
            highlight_info(f"Using master => {cfg.master}")
            cfg.current = "master"
        else:
            highlight_info(f"Using {version}")
            cfg.current = version
        cfg.save()

    def install(self, version: str, as_default: bool) -> None:
        """Download and unpack ``version`` unless present; optionally use it."""
        installed = self.installed_versions()
        is_master = version == "master"
        if not is_master and version in installed:
            if as_default:
                self.use(version)
            return
        archive, resolved = fetch(version, self.dist, self.cache_dir)
        fresh = resolved not in installed
        if fresh:
            label = f"master => {resolved}" if is_master else resolved
            highlight_info(f"Installing {label}... ")
            extract(archive, self.root / resolved)
        if as_default:
            if is_master:
                self.config.master = resolved
            self.use(version)
        if fresh:
            highlight_info("Done.")

    def remove(self, version: str, force: bool) -> None:
        """Delete an installed version; the one in use needs ``force``."""
        cfg = self.config
        if version in (cfg.current, cfg.master) and not force:
            raise ZigoError("Cannot remove the version you are using.")
        if version == "master":
            if not cfg.master:
                raise ZigoError("Version: master Not found")
            target, label = cfg.master, f"master => {cfg.master}"
        else:
            if version not in self.installed_versions():
                raise ZigoError(f"Version: {version} Not found")
            target, label = version, version
        highlight_info(f"Removing {label}... ")
        try:
            _remove_path(self.root / target)
        except OSError as exc:
            raise ZigoError(str(exc)) from exc
        if cfg.current in (version, "master" if version == "master" else version):
            cfg.current = ""
            try:
                _remove_path(self.root / "current")
            except OSError:
                pass
        if version == "master" or cfg.master == version:
            cfg.master = ""
        cfg.save()

    def clean(self) -> list[str]:
        """Remove development versions that are neither master nor current."""
        cfg = self.config
        removed = []
        for version in self.installed_versions():
            if "dev" in version and version not in (cfg.master, cfg.current):
                try:
                    self.remove(version, False)
                except ZigoError as exc:
                    warn(str(exc))
                    continue
                removed.append(version)
        highlight_info("Done.")
        return removed