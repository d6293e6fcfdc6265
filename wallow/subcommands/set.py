"""
wallow set

Fetch a wallpaper (optionally themed) and make it the desktop background.
"""

import click

from wallow import pipeline
from wallow import wallpaper_handler
from wallow.cli_utils.console import describe, confirm_success
from wallow.cli_utils.decorators import catch_errors
from wallow.cli_utils.utils import report_download
from wallow.providers import known_providers


@click.command(name="set")
@click.option("--query", "-q", help="Search keywords.")
@click.option("--theme", "-t", help="Optional gowall theme to apply before setting.")
@click.option(
    "--source",
    type=click.Choice(known_providers(), case_sensitive=False),
    help="Wallpaper provider.",
)
@click.pass_obj
@catch_errors
def cli(obj, query, theme, source):
    """Download a wallpaper and set it as your desktop background."""

    describe(":mag-emoji: searching for wallpapers...")

    (path,) = pipeline.acquire(
        obj.config, source=source, theme=theme, report=report_download, query=query
    )

    describe(f":desktop_computer-emoji: setting {path.name} as wallpaper...")
    wallpaper_handler.update_wallpaper(path)
    confirm_success(f":white_check_mark-emoji: wallpaper updated to {path}")
