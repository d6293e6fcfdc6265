"""
gowall integration

Theme conversion is delegated to the gowall CLI (https://github.com/Achno/gowall). This module
only builds the command line, runs it, and turns a non-zero exit into ExternalToolFailedError with
gowall's stderr as the reason.
"""

import logging
import shutil
import subprocess
from pathlib import Path

from wallow.errors import ExternalToolFailedError, ExternalToolMissingError


logger = logging.getLogger(__name__)

GOWALL = "gowall"
INSTALL_HINT = "Install it from https://github.com/Achno/gowall to use themes."


def check_installed():
    """Raise ExternalToolMissingError unless gowall is on the PATH."""

    if shutil.which(GOWALL) is None:
        raise ExternalToolMissingError(GOWALL, INSTALL_HINT)


def _run(args: list[str]) -> str:
    logger.debug("running %s", " ".join(args))

    try:
        result = subprocess.run(args, capture_output=True, text=True)
    except FileNotFoundError as error:
        raise ExternalToolMissingError(GOWALL, INSTALL_HINT) from error

    if result.returncode != 0:
        raise ExternalToolFailedError(GOWALL, result.stderr, result.returncode)

    return result.stdout


def convert(image_path, theme: str, output_path=None) -> str:
    """
    Run 'gowall convert <image> -t <theme> [--output <output>]' and return gowall's stdout.
    """

    args = [GOWALL, "convert", str(Path(image_path)), "-t", theme]

    if output_path is not None:
        args += ["--output", str(Path(output_path))]

    return _run(args)


def list_themes() -> list[str]:
    """Return the theme names reported by 'gowall list', one per line."""

    stdout = _run([GOWALL, "list"])
    return [line.strip() for line in stdout.splitlines() if line.strip()]
