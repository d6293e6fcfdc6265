"""
wallow run

One step fetch + theme: download the best match and convert it with gowall.
"""

import click

from wallow import pipeline
from wallow.cli_utils.console import describe, confirm_success
from wallow.cli_utils.decorators import catch_errors
from wallow.cli_utils.utils import search_options, report_download


@click.command(name="run")
@search_options
@click.option("--theme", "-t", required=True, help="gowall theme, see 'wallow themes'.")
@click.pass_obj
@catch_errors
def cli(obj, query, resolution, categories, purity, sorting, source, theme):
    """Download a wallpaper and apply a gowall theme to it."""

    describe(":mag-emoji: searching for wallpapers...")

    (path,) = pipeline.acquire(
        obj.config,
        source=source,
        theme=theme,
        report=report_download,
        query=query,
        resolution=resolution,
        categories=categories,
        purity=purity,
        sorting=sorting,
    )

    confirm_success(f":art-emoji: applied '{theme}', saved {path}")
