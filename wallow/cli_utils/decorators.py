"""
wallow Decorators

Decorators shared by the subcommands. catch_errors is the single place where exceptions are turned
into user-facing output and exit codes; require_tool checks an external program before the command
body runs so a missing dependency is reported before any work (or network traffic) happens.
"""

import sys
import shutil
from functools import wraps

import click

from wallow.errors import ExternalToolMissingError, NoResults
from wallow.cli_utils.console import describe, fail


def catch_errors(func):
    """
    Catch and format errors with the "fail" console template and exit the application with an error
    code. NoResults is not an error: it is printed as information and the command exits cleanly.
    click's own exceptions (usage errors, aborts) are left for click to handle.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except NoResults as outcome:
            describe(f":mag-emoji: {outcome}")
            return None
        except (click.exceptions.ClickException, click.exceptions.Abort, click.exceptions.Exit):
            raise
        except Exception as error:
            fail(str(error))
            sys.exit(1)

    return wrapper


def require_tool(tool: str, hint: str = ""):
    """
    Fail fast with ExternalToolMissingError if tool is not on the PATH. Place below catch_errors so
    the error is formatted like any other.
    """

    def wrapper(func):
        @wraps(func)
        def inner(*args, **kwargs):
            if shutil.which(tool) is None:
                raise ExternalToolMissingError(tool, hint)
            return func(*args, **kwargs)

        return inner

    return wrapper
