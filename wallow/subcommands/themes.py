"""
wallow themes

List the colour themes gowall knows about.
"""

import click

from wallow import converter
from wallow.cli_utils.console import describe
from wallow.cli_utils.decorators import catch_errors, require_tool


@click.command(name="themes")
@catch_errors
@require_tool(converter.GOWALL, converter.INSTALL_HINT)
def cli():
    """List available gowall themes."""

    themes = converter.list_themes()

    describe(f"{len(themes)} themes available")
    describe("-" * 30)
    for theme in themes:
        click.echo(f"  {theme}")
