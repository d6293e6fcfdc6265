"""
wallow CLI Utilities

Utilities shared across click subcommands: importing subcommands from the subcommands directory,
attaching them to the main group, and the common search options used by fetch, run and set.
"""

import sys
import inspect
import importlib.util
from pathlib import Path
from collections.abc import Iterable

import click

import wallow
from wallow.cli_utils.console import describe, warn
from wallow.providers import WallpaperRecord, known_providers


def import_commands(
    module_paths: Iterable = None,
) -> list[click.Command]:
    """
    Retrieve a set of click Commands from module_paths. Default directory is the built in subcommands
    directory for commands that come pre-installed with wallow.

    A valid wallow command module defines a "cli" function wrapped as a click Command object. Set
    the 'name' keyword argument in the @click.command decorator to set the name the user types.
    """

    if module_paths is None:
        module_paths = sorted(Path(wallow.__file__).parent.glob("subcommands/*.py"))

    commands = []

    for path in module_paths:
        name = inspect.getmodulename(path)
        if name is None or name == "__init__":
            continue

        # Recipe for loading and executing modules from given filepath comes from importlib docs:
        # https://docs.python.org/3/library/importlib.html#importing-a-source-file-directly
        module_name = f"wallow.subcommands.{name}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)

        try:
            cli = getattr(module, "cli")
            commands.append(cli)

        except AttributeError:
            warn(f"Cannot add command {name}: no 'cli' function found.")

    return commands


def attach_commands(group: click.Group, commands: list[click.Command]):
    """
    Attach each command in a list of click Command objects to a provided group. Useful when
    retrieving a dynamic list of subcommands with import_commands().
    """

    for command in commands:
        group.add_command(command)


def search_options(func):
    """
    Add the shared search options. All default to None so that persisted config values apply
    unless the user passes the option explicitly.
    """

    options = [
        click.option("--query", "-q", help="Search keywords, e.g. 'nature' or 'mountain lake'."),
        click.option("--resolution", "-r", help="Wallpaper resolution, e.g. 3840x2160."),
        click.option(
            "--categories",
            "-c",
            help="Wallhaven category mask general/anime/people, e.g. 111 = all, 100 = general.",
        ),
        click.option(
            "--purity",
            "-p",
            help="Wallhaven purity mask sfw/sketchy/nsfw, e.g. 100 = SFW only. NSFW needs an API key.",
        ),
        click.option(
            "--sorting",
            "-s",
            help="date_added, relevance, random, views, favorites or toplist. Unsplash supports "
            "latest (date_added) and relevant (everything else).",
        ),
        click.option(
            "--source",
            type=click.Choice(known_providers(), case_sensitive=False),
            help="Wallpaper provider (default: config 'source', then wallhaven).",
        ),
    ]

    for option in reversed(options):
        func = option(func)

    return func


def report_download(index: int, total: int, record: WallpaperRecord):
    describe(
        f":arrow_down-emoji: [{index}/{total}] downloading {record.id} ({record.resolution}) from {record.provider_name}"
    )
