"""
crontab integration

'wallow schedule' keeps exactly one line in the user's crontab that runs 'wallow schedule --run'.
The table is rewritten as text: every line mentioning both the tool and the schedule subcommand is
dropped, and one fresh entry is appended. Running it repeatedly therefore never duplicates the job.
"""

import logging
import shutil
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

from wallow.errors import ExternalToolFailedError, ExternalToolMissingError


logger = logging.getLogger(__name__)

TOOL_MARKER = "wallow"
SUBCOMMAND_MARKER = "schedule"


def default_executable() -> str:
    """The installed wallow script if there is one, otherwise whatever launched us."""

    return shutil.which(TOOL_MARKER) or str(Path(sys.argv[0]).resolve())


def build_entry(cron: str, executable: str) -> str:
    return f"{cron} {executable} {SUBCOMMAND_MARKER} --run"


def is_wallow_entry(line: str) -> bool:
    return TOOL_MARKER in line and SUBCOMMAND_MARKER in line


def rewrite_table(current: str, entry: str) -> str:
    kept = [line for line in current.splitlines() if not is_wallow_entry(line)]
    kept.append(entry)
    return "\n".join(kept) + "\n"


def read_table(run: Callable = subprocess.run) -> str:
    # 'crontab -l' exits non-zero when the user has no crontab yet
    result = run(["crontab", "-l"], capture_output=True, text=True)
    if result.returncode != 0:
        return ""

    return result.stdout


def write_table(table: str, run: Callable = subprocess.run):
    result = run(["crontab", "-"], input=table, capture_output=True, text=True)
    if result.returncode != 0:
        raise ExternalToolFailedError("crontab", result.stderr, result.returncode)


def register(
    cron: str,
    executable: str = None,
    run: Callable = subprocess.run,
    which: Callable = shutil.which,
) -> str:
    """Install (or replace) the wallow job. Returns the crontab line that was written."""

    if which("crontab") is None:
        raise ExternalToolMissingError("crontab", "A cron daemon is required for scheduling.")

    entry = build_entry(cron, executable or default_executable())
    table = rewrite_table(read_table(run), entry)
    write_table(table, run)

    logger.info("registered crontab entry: %s", entry)
    return entry
