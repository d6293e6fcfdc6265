"""
wallow convert

Apply a gowall theme to a local image.
"""

from pathlib import Path

import click

from wallow import converter
from wallow import pipeline
from wallow.cli_utils.console import describe, confirm_success
from wallow.cli_utils.decorators import catch_errors, require_tool


@click.command(name="convert")
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--theme", "-t", required=True, help="gowall theme, see 'wallow themes'.")
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file or directory (default: the converted folder).",
)
@click.pass_obj
@catch_errors
@require_tool(converter.GOWALL, converter.INSTALL_HINT)
def cli(obj, image: Path, theme, output):
    """Convert IMAGE to a gowall colour theme."""

    describe(f":art-emoji: converting '{image.name}' with theme '{theme}'...")

    path = pipeline.convert(image, theme, obj.config.converted_dir, output=output)

    confirm_success(f":floppy_disk-emoji: saved {path}")
