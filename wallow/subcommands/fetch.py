"""
wallow fetch

Search a provider and download the first N results into the wallpaper folder.
"""

import click

from wallow import pipeline
from wallow.cli_utils.console import describe, confirm_success
from wallow.cli_utils.decorators import catch_errors
from wallow.cli_utils.utils import search_options, report_download


@click.command(name="fetch")
@search_options
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    metavar="N",
    help="Number of wallpapers to download.",
)
@click.pass_obj
@catch_errors
def cli(obj, query, resolution, categories, purity, sorting, source, count):
    """Search for wallpapers and download them."""

    describe(":mag-emoji: searching for wallpapers...")

    paths = pipeline.acquire(
        obj.config,
        source=source,
        count=count,
        report=report_download,
        query=query,
        resolution=resolution,
        categories=categories,
        purity=purity,
        sorting=sorting,
    )

    for path in paths:
        confirm_success(f":floppy_disk-emoji: saved {path}")

    confirm_success(f":white_check_mark-emoji: downloaded {len(paths)} wallpaper(s)")
