"""Coloured console output helpers."""

from __future__ import annotations

from termcolor import colored

_ERROR_STYLE = ("red", ["bold"])
_INFO_STYLE = ("green", None)
_WARN_STYLE = ("yellow", None)


def _paint(text: str, style: tuple[str, list[str] | None]) -> str:
    color, attrs = style
    return colored(text, color, attrs=attrs)


def _labelled(label: str, msg: str, style: tuple[str, list[str] | None]) -> None:
    print(_paint(label, style) + msg, flush=True)


def error(msg: str) -> None:
    """Print ``msg`` behind a red ``ERRO:`` label."""
    _labelled("ERRO: ", msg, _ERROR_STYLE)


def info(msg: str) -> None:
    """Print ``msg`` behind a green ``INFO:`` label."""
    _labelled("INFO: ", msg, _INFO_STYLE)


def warn(msg: str) -> None:
    """Print ``msg`` behind a yellow ``WARN:`` label."""
    _labelled("WARN: ", msg, _WARN_STYLE)


def highlight_error(msg: str) -> None:
    """Print the whole line in bold red."""
    print(_paint(msg, _ERROR_STYLE), flush=True)


def highlight_info(msg: str) -> None:
    """Print the whole line in green."""
    print(_paint(msg, _INFO_STYLE), flush=True)


def highlight_warn(msg: str) -> None:
    """Print the whole line in yellow."""
    print(_paint(msg, _WARN_STYLE), flush=True)