"""
wallow console utilities

Rich consoles for writing to stdout and stderr, plus the logging setup. User-facing messages go
through the helpers below; diagnostic output from the core modules goes through the standard
logging module and is rendered on the stderr console by RichHandler.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

wallow_theme = Theme(
    {"warning": "orange_red1", "fail": "bold red", "confirm": "green", "describe": ""}
)

console = Console(theme=wallow_theme)
error_console = Console(theme=wallow_theme, stderr=True)


"""
Formatting helpers
"""


def warn(msg: str):
    """
    Format msg and print to stderr.
    """

    error_console.print(
        f":exclamation_mark-emoji: [bold]warning: [/] {msg}", style="warning"
    )


def describe(msg: str, **kwargs):
    """
    Format descriptive msg and print to stdout.
    """

    console.print(f"{msg}", style="describe", **kwargs)


def confirm_success(msg: str, **kwargs):
    """
    Format confirmation msg and print to stdout. Accept any additional kwargs that console.print from
    rich module exposes.
    """

    console.print(f"{msg}", style="confirm", **kwargs)


def fail(msg: str):
    """
    Format failure msg and print to stderr.
    """

    error_console.print(f":x-emoji: failed. {msg}", style="fail", markup=False)


def configure(quiet: bool = False, debug: bool = False):
    """
    Apply the global output options. quiet silences stdout messages (errors still reach stderr),
    debug turns on DEBUG logging for the wallow package.
    """

    console.quiet = quiet

    logger = logging.getLogger("wallow")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(
            RichHandler(console=error_console, show_path=debug, markup=False)
        )
