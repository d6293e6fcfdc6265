"""
wallow list

Print the downloaded and converted wallpapers, or pick one interactively with fzf and set it.
"""

import click

from wallow import picker
from wallow import wallpaper_handler
from wallow.errors import NoResults
from wallow.cli_utils.console import describe, confirm_success
from wallow.cli_utils.decorators import catch_errors


@click.command(name="list")
@click.option(
    "--fzf",
    "use_fzf",
    is_flag=True,
    help="Choose a wallpaper with fzf and an image preview, then set it.",
)
@click.pass_obj
@catch_errors
def cli(obj, use_fzf):
    """List wallpapers in the wallpaper and converted folders."""

    directories = [obj.config.wallpaper_dir, obj.config.converted_dir]

    if not use_fzf:
        candidates = picker.collect_candidates(directories)
        if not candidates:
            raise NoResults("no wallpapers found, run 'wallow fetch' first")

        for path in candidates:
            click.echo(str(path))
        return

    selected = picker.pick(directories)
    if selected is None:
        describe("nothing selected")
        return

    describe(f":desktop_computer-emoji: setting {selected.name} as wallpaper...")
    wallpaper_handler.update_wallpaper(selected)
    confirm_success(f":white_check_mark-emoji: wallpaper updated to {selected}")
