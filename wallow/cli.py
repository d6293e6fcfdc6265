"""
wallow

Fetch wallpapers from Wallhaven and Unsplash, theme them with gowall, pick them in the terminal
and set them as your desktop background.

This module defines the entry point to the wallow CLI: a 'cli' command group that loads the
configuration, applies global output options and hands a WallowContext to the subcommands found in
the subcommands directory.
"""

import click

from wallow.config import init
from wallow.WallowContext import WallowContext

from wallow.cli_utils.console import configure
from wallow.cli_utils.decorators import catch_errors
from wallow.cli_utils.utils import import_commands, attach_commands


@click.group()
@click.option(
    "--verbose",
    "verbosity",
    flag_value="verbose",
    default=True,
    help="Print all output to stdout or the terminal",
)
@click.option(
    "--quiet",
    "verbosity",
    flag_value="quiet",
    help="Silence all output printed to stdout. Errors are still reported on stderr.",
)
@click.option("--debug", is_flag=True, help="Log requests and subprocess calls to stderr.")
@click.version_option(package_name="wallow")
@click.pass_context
@catch_errors
def cli(ctx: click.Context, verbosity, debug):
    """
    wallow

    wallpapers from Wallhaven and Unsplash, themed with gowall, picked in your terminal.


    ====================
    Quickstart
    ====================

    Download a wallpaper using your saved defaults:

        $ wallow fetch

    Fetch one, apply a gowall theme and set it as your background:

        $ wallow set -q "mountain lake" -t catppuccin

    Browse what you have downloaded with an image preview and pick one:

        $ wallow list --fzf


    ====================
    Configuration
    ====================

    Defaults live in ~/.config/wallow/config.json (or $WALLOW_CONFIG_DIR). Any option given on the
    command line wins over the saved value, which wins over the built-in default:

        $ wallow config set sorting random
        $ wallow config set source unsplash

    Credentials are read from WALLHAVEN_API_KEY and UNSPLASH_ACCESS_KEY, a .env file in the config
    directory, or the config file, in that order.
    """

    quiet = verbosity == "quiet"
    configure(quiet=quiet, debug=debug)

    config = init()
    config.ensure_dirs()

    ctx.obj = WallowContext(config=config)


def main():

    commands = import_commands()
    attach_commands(cli, commands)
    cli()


if __name__ == "__main__":
    main()
