"""
Interactive wallpaper picker

Feeds the downloaded wallpapers to fzf with an image preview pane and returns the chosen file.

fzf draws its interface on /dev/tty and prints the selection on stdout. Our own stdout may be
consumed by something else, so the whole pipeline runs in one 'sh -c': the candidates are read from
a private list file and fzf's stdout is redirected into a private selection file that is read back
after fzf exits. Both files are removed afterwards. fzf owns the terminal until then; this is a
blocking handoff, not something to multiplex.
"""

import logging
import os
import shlex
import shutil
import subprocess
import tempfile
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Optional

from wallow.errors import (
    ExternalToolFailedError,
    ExternalToolMissingError,
    FilesystemFailureError,
    NoResults,
)
from wallow.preview import build_preview_command, quote_fragment
from wallow.terminal import detect_profile, is_wezterm


logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp"}

# fzf exit codes that mean the user picked nothing
FZF_NO_MATCH = 1
FZF_ABORTED = 130


def collect_candidates(directories: Iterable[Path]) -> list[Path]:
    """
    Image files directly inside each directory, in directory order then by name. Missing
    directories are skipped. Never cached: the folders are the source of truth.
    """

    candidates = []
    for directory in directories:
        directory = Path(directory)
        if not directory.is_dir():
            continue

        try:
            entries = sorted(directory.iterdir())
        except OSError as error:
            raise FilesystemFailureError(f"could not read {directory}: {error}") from error

        candidates.extend(
            path
            for path in entries
            if path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS
        )

    return candidates


def check_requirements(environ: Mapping = None, which: Callable = shutil.which):
    """Fail fast if fzf (or chafa under WezTerm) is missing."""

    if which("fzf") is None:
        raise ExternalToolMissingError(
            "fzf", "Install fzf (https://github.com/junegunn/fzf) to use the picker."
        )

    if is_wezterm(environ) and which("chafa") is None:
        raise ExternalToolMissingError(
            "chafa", "WezTerm previews need chafa: brew install chafa / apt install chafa."
        )


def write_candidates(candidates: Iterable[Path], list_file: Path):
    """Write one candidate per line. Paths go through a file, not argv, so no length limit applies."""

    try:
        with open(list_file, "wb") as file:
            for path in candidates:
                file.write(os.fsencode(path) + b"\n")

    except OSError as error:
        raise FilesystemFailureError(f"could not write {list_file}: {error}") from error


def build_shell_command(list_file: Path, preview: str, selection_file: Path) -> str:
    return (
        f"cat {shlex.quote(str(list_file))} "
        f"| fzf --preview {quote_fragment(preview)} --preview-window=right:60% --ansi "
        f"> {shlex.quote(str(selection_file))}"
    )


def _private_file(suffix: str) -> Path:
    fd, name = tempfile.mkstemp(prefix="wallow-fzf-", suffix=suffix)
    os.close(fd)
    return Path(name)


def pick(
    directories: Iterable[Path],
    environ: Mapping = None,
    which: Callable = shutil.which,
    run: Callable = subprocess.run,
) -> Optional[Path]:
    """
    Let the user choose a wallpaper. Returns the chosen path, or None if the user cancelled.
    Raises NoResults when there is nothing to choose from; no process is started in that case.
    """

    candidates = collect_candidates(directories)
    if not candidates:
        raise NoResults("no wallpapers found, run 'wallow fetch' first")

    check_requirements(environ, which)

    profile = detect_profile(environ, which)
    preview = build_preview_command(profile)
    logger.debug("terminal profile %s, preview %r", profile, preview)

    list_file = _private_file(".list")
    selection_file = _private_file(".txt")

    try:
        write_candidates(candidates, list_file)
        command = build_shell_command(list_file, preview, selection_file)

        # fzf draws on /dev/tty, so its stderr only carries error messages
        result = run(["sh", "-c", command], stderr=subprocess.PIPE, text=True)

        if result.returncode in (FZF_NO_MATCH, FZF_ABORTED):
            return None

        if result.returncode != 0:
            raise ExternalToolFailedError("fzf", result.stderr, result.returncode)

        selected = os.fsdecode(selection_file.read_bytes()).strip()

    finally:
        list_file.unlink(missing_ok=True)
        selection_file.unlink(missing_ok=True)

    if not selected:
        return None

    return Path(selected)
