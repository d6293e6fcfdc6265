"""
wallow apply

Set a local image as the desktop background.
"""

from pathlib import Path

import click

from wallow import wallpaper_handler
from wallow.cli_utils.console import describe, confirm_success
from wallow.cli_utils.decorators import catch_errors


@click.command(name="apply")
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@catch_errors
def cli(image: Path):
    """Set IMAGE as your desktop background."""

    describe(f":desktop_computer-emoji: setting {image.name} as wallpaper...")
    path = wallpaper_handler.update_wallpaper(image)
    confirm_success(f":white_check_mark-emoji: wallpaper updated to {path}")
