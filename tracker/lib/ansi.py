import re
from collections.abc import Callable
from dataclasses import dataclass

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


@dataclass(frozen=True)
class Theme:
    red: str = "\033[38;5;203m"
    green: str = "\033[38;5;114m"
    yellow: str = "\033[38;5;221m"
    indigo: str = "\033[38;5;99m"
    gray: str = "\033[38;5;245m"
    white: str = "\033[38;5;252m"
    muted: str = "\033[90m"  # secondary text
    bold: str = "\033[1m"
    strikethrough: str = "\033[9m"
    reset: str = "\033[0m"


DARK = Theme()
LIGHT = Theme(
    red="\033[38;5;160m",
    green="\033[38;5;28m",
    yellow="\033[38;5;136m",
    indigo="\033[38;5;55m",
    gray="\033[38;5;242m",
    white="\033[38;5;235m",
    muted="\033[38;5;244m",
)
THEMES: dict[str, Theme] = {"dark": DARK, "light": LIGHT}

_active: Theme = LIGHT


def use(theme: Theme | str) -> None:
    global _active
    _active = THEMES[theme] if isinstance(theme, str) else theme


_COLORS = {"red", "green", "yellow", "indigo", "gray", "white", "muted"}


def __getattr__(name: str) -> Callable[[str], str]:
    if name in _COLORS:

        def _wrap(text: str) -> str:
            return f"{getattr(_active, name)}{text}{_active.reset}"

        _wrap.__name__ = name
        return _wrap
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def bold(text: str) -> str:
    return f"{_active.bold}{text}{_active.reset}"


def strikethrough(text: str) -> str:
    return f"{_active.strikethrough}{text}{_active.reset}"


def strip(text: str) -> str:
    return _ANSI_RE.sub("", text)
