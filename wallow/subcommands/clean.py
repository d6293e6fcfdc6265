"""
wallow clean

Delete every file wallow has written (the wallow- prefixed ones) from both folders.
"""

import click

from wallow import pipeline
from wallow.cli_utils.console import describe, confirm_success
from wallow.cli_utils.decorators import catch_errors


@click.command(name="clean")
@click.pass_obj
@catch_errors
def cli(obj):
    """Remove downloaded and converted wallpapers."""

    directories = [obj.config.wallpaper_dir, obj.config.converted_dir]
    for directory in directories:
        describe(f":broom-emoji: cleaning {directory}")

    deleted = pipeline.clean(directories)
    for path in deleted:
        describe(f"  deleted {path.name}")

    confirm_success(f":white_check_mark-emoji: removed {len(deleted)} file(s)")
