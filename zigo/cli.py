"""Command line entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from termcolor import colored

from .config import Config, ZigoError, cache_dir, current_dist_info, default_zigo_path, load_config
from .manager import Manager
from .printer import error, highlight_info, warn

VERSION = "2.0.1"

_SUB_COMMANDS = (
    ("fetch <version>", "Download the specified version of zig compiler"),
    ("use <version>", "Set the specific installed version as default"),
    ("ls, list", "List installed compiler versions"),
    ("rm <version> [-f]", "Remove the specified compiler, -f means force"),
    ("clean", "Clean up unused dev version compilers"),
    ("help, -h", "Print help message"),
)


def help_text(zigo_path: str | os.PathLike[str]) -> str:
    """Return the help message."""
    lines = [
        colored(f"zigo {VERSION} (Download and manage Zig compilers)", "red", attrs=["bold"]),
        f"zigo path: {zigo_path}",
        "",
        colored("Root Command:", "green"),
        f"  {'zigo <version>':<22} Download the specified version of zig compiler"
        " and set it as default",
        "",
        colored("Sub Commands:", "green"),
    ]
    lines.extend(f"  {usage:<22} {text}" for usage, text in _SUB_COMMANDS)
    return "\n".join(lines)


def _dispatch(config: Config, args: list[str]) -> None:
    command, rest = args[0], args[1:]
    if command in ("help", "-h"):
        print(help_text(config.path))
        return
    manager = Manager(config, current_dist_info(), cache_dir())
    if command in ("use", "fetch"):
        if not rest:
            print(f"Usage: zigo {command} <version>")
        elif command == "use":
            manager.use(rest[0])
        else:
            manager.install(rest[0], False)
    elif command in ("list", "ls"):
        lines = manager.list_lines() or []
        if not lines:
            highlight_info("No installed versions")
        for line in lines:
            print(line)
    elif command in ("remove", "rm"):
        if not rest:
            print("Usage: zigo remove|rm <version>")
        elif len(rest) > 2:
            warn(f"Undefined argument: [{' '.join(rest[1:])}]")
        elif len(rest) == 2 and rest[1] not in ("--force", "-f"):
            warn(f"Undefined argument: {rest[1]}")
        else:
            manager.remove(rest[0], len(rest) == 2)
            highlight_info("Done.")
    elif command == "clean":
        manager.clean()
    else:
        manager.install(command, True)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = load_config(default_zigo_path())
        if args:
            _dispatch(config, args)
        else:
            print(help_text(config.path))
    except ZigoError as exc:
        print()
        error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())