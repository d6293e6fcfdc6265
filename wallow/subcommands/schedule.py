"""
wallow schedule

Register a crontab job that refreshes the wallpaper periodically. The job itself calls
'wallow schedule --run', which fetches one wallpaper using the saved defaults and sets it.
"""

import click

from wallow import pipeline
from wallow import scheduler
from wallow import wallpaper_handler
from wallow.cli_utils.console import describe, confirm_success
from wallow.cli_utils.decorators import catch_errors


@click.command(name="schedule")
@click.argument("cron", required=False)
@click.option(
    "--run",
    "run_now",
    is_flag=True,
    help="Execute the scheduled job (used by the crontab entry).",
)
@click.pass_obj
@catch_errors
def cli(obj, cron, run_now):
    """
    Refresh the wallpaper on a CRON schedule, e.g. wallow schedule "0 * * * *".

    Without CRON the expression saved in the config is used. A CRON given here is saved.
    """

    config = obj.config

    if run_now:
        (path,) = pipeline.acquire(config)
        wallpaper_handler.update_wallpaper(path)
        confirm_success(f":white_check_mark-emoji: wallpaper updated to {path}")
        return

    if cron is None:
        cron = config.cron

    if not cron:
        raise click.UsageError(
            "provide a cron expression or save one with 'wallow config set cron \"0 * * * *\"'"
        )

    if cron != config.cron:
        config.cron = cron
        config.generate_config_json()
        describe(f"saved cron expression '{cron}' to the config")

    entry = scheduler.register(cron)
    confirm_success(f":alarm_clock-emoji: scheduled: {entry}")
