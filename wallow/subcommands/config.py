"""
wallow config

Show or change the persisted defaults.
"""

import json
from dataclasses import replace

import click

from wallow.config import default_config_dir, CONFIG_FILE_NAME, WallowConfig
from wallow.cli_utils.console import describe, confirm_success
from wallow.cli_utils.decorators import catch_errors


SECRET_KEYS = ("wallhaven_api_key", "unsplash_access_key")


def masked(config: WallowConfig) -> WallowConfig:
    """Copy of config with stored credentials replaced by asterisks."""

    secrets = {key: "********" for key in SECRET_KEYS if getattr(config, key)}
    return replace(config, **secrets)


@click.group(name="config")
def cli():
    """Show or edit the wallow configuration."""


@cli.command(name="show")
@click.pass_obj
@catch_errors
def show(obj):
    """Print the current configuration."""

    config = masked(obj.config)

    describe(f"config file: {default_config_dir() / CONFIG_FILE_NAME}")
    for key in config.keys():
        value = getattr(config, key)
        click.echo(f"  {key}: {value if value is not None else '-'}")


@cli.command(name="dump")
@click.pass_obj
@catch_errors
def dump(obj):
    """Print the configuration as JSON, credentials masked."""

    click.echo(masked(obj.config).to_json())


@cli.command(name="schema")
@catch_errors
def schema():
    """Print the JSON Schema of config.json."""

    click.echo(json.dumps(WallowConfig.schema(), indent=4))


@cli.command(name="set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
@catch_errors
def set_value(obj, key, value):
    """Save VALUE for KEY, e.g. 'wallow config set sorting random'."""

    key = obj.config.set(key, value)
    obj.config.generate_config_json()
    confirm_success(f":white_check_mark-emoji: {key} = {value}")
