"""
Terminal capability detection

Works out which in-band image protocol the hosting terminal can display inside an fzf preview,
and how large the terminal is. Only the environment and the terminal size ioctl are consulted;
no helper program is spawned.

Precedence (first match wins):
    1. WezTerm              -> chafa speaking the iTerm2 protocol (needs chafa)
    2. Kitty                -> kitty icat
    3. iTerm2               -> imgcat
    4. chafa on the PATH    -> chafa with its default output
    5. otherwise            -> no image, the preview echoes the file name

WezTerm understands the iTerm2 protocol but 'wezterm imgcat' never finishes loading inside an fzf
preview (wezterm/wezterm#6088, junegunn/fzf#3646), so it is routed through chafa instead. Revisit
the first rule once that is fixed upstream.
"""

import os
import shutil
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum


FALLBACK_SIZE = (80, 24)


class Capability(Enum):
    WEZTERM_CHAFA = "wezterm-chafa"
    KITTY = "kitty"
    ITERM2 = "iterm2"
    CHAFA = "chafa"
    NONE = "none"


@dataclass(frozen=True)
class TerminalProfile:
    columns: int
    rows: int
    capability: Capability


def is_wezterm(environ: Mapping = None) -> bool:
    environ = os.environ if environ is None else environ
    return (
        environ.get("TERM_PROGRAM") == "WezTerm"
        or "WEZTERM_EXECUTABLE" in environ
    )


def is_kitty(environ: Mapping = None) -> bool:
    environ = os.environ if environ is None else environ
    return environ.get("TERM") == "xterm-kitty" or "KITTY_WINDOW_ID" in environ


def detect_capability(
    environ: Mapping = None, which: Callable = shutil.which
) -> Capability:
    environ = os.environ if environ is None else environ
    has_chafa = which("chafa") is not None

    if is_wezterm(environ):
        return Capability.WEZTERM_CHAFA if has_chafa else Capability.NONE

    if is_kitty(environ):
        return Capability.KITTY

    if environ.get("TERM_PROGRAM") == "iTerm.app":
        return Capability.ITERM2

    if has_chafa:
        return Capability.CHAFA

    return Capability.NONE


def terminal_size() -> tuple[int, int]:
    """
    Return (columns, rows). os.get_terminal_size is the TIOCGWINSZ ioctl; it is tried on stdout,
    stderr and stdin in that order because any of them may be redirected. Falls back to 80x24.
    """

    for fd in (1, 2, 0):
        try:
            size = os.get_terminal_size(fd)
        except (OSError, ValueError):
            continue

        if size.columns > 0 and size.lines > 0:
            return size.columns, size.lines

    return FALLBACK_SIZE


def detect_profile(
    environ: Mapping = None, which: Callable = shutil.which
) -> TerminalProfile:
    columns, rows = terminal_size()
    return TerminalProfile(columns, rows, detect_capability(environ, which))
