"""
Acquisition pipeline

Stateless orchestration of a wallpaper fetch: resolve provider and criteria, search, download the
first N results one after another, and optionally hand each file to gowall. Downloads are strictly
sequential; providers rate limit and nothing here is safe to fan out.

An empty search raises NoResults rather than returning an empty list so callers cannot mistake
"nothing matched" for "the request failed" or for success.
"""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Optional

import requests

from wallow import converter
from wallow.config import WallowConfig
from wallow.errors import FilesystemFailureError, NoResults
from wallow.providers import (
    ENGINE_PREFIX,
    SearchCriteria,
    WallpaperRecord,
    WallpaperSource,
    make_client,
    resolve_criteria,
    resolve_provider,
)


logger = logging.getLogger(__name__)

Reporter = Callable[[int, int, WallpaperRecord], None]


def search(client: WallpaperSource, criteria: SearchCriteria) -> list[WallpaperRecord]:
    records = client.search(criteria)

    if not records:
        raise NoResults(f"no matching wallpapers found on {client.name}")

    return records


def fetch(
    client: WallpaperSource,
    criteria: SearchCriteria,
    destination_dir: Path,
    count: int = 1,
    report: Optional[Reporter] = None,
) -> list[Path]:
    """
    Search once and download the first count results into destination_dir. report(index, total,
    record) is called before each download, index starting at 1.
    """

    records = search(client, criteria)[: max(count, 1)]
    total = len(records)

    saved = []
    for index, record in enumerate(records, start=1):
        if report is not None:
            report(index, total, record)

        saved.append(client.download(record, destination_dir))

    return saved


def converted_filename(name: str, theme: str) -> str:
    """
    Name of the converted copy of name. The engine prefix appears exactly once:

    >>> converted_filename("wallow-wallhaven-abcd.jpg", "dracula")
    'wallow-dracula-wallhaven-abcd.jpg'
    >>> converted_filename("photo.png", "nord")
    'wallow-nord-photo.png'
    """

    prefix = f"{ENGINE_PREFIX}-"
    if name.startswith(prefix):
        name = name[len(prefix):]

    return f"{prefix}{theme}-{name}"


def convert(image, theme: str, converted_dir: Path, output=None) -> Path:
    """
    Convert image with gowall. output may be an existing directory (the converted name is placed
    inside it) or a file path; when omitted the file goes to converted_dir.
    """

    converter.check_installed()

    image = Path(image)
    filename = converted_filename(image.name, theme)

    if output is None:
        destination = Path(converted_dir) / filename
    else:
        output = Path(output).expanduser()
        destination = output / filename if output.is_dir() else output

    converter.convert(image, theme, destination)
    logger.debug("converted %s -> %s", image, destination)
    return destination


def acquire(
    config: WallowConfig,
    source: Optional[str] = None,
    count: int = 1,
    theme: Optional[str] = None,
    report: Optional[Reporter] = None,
    session: requests.Session = None,
    **overrides,
) -> list[Path]:
    """
    Full fetch flow driven by config. overrides are explicit search options (query, resolution,
    categories, purity, sorting) that win over the persisted defaults. Returns the final paths,
    converted ones when a theme is given.
    """

    # fail before touching the network if conversion cannot happen anyway
    if theme:
        converter.check_installed()

    provider = resolve_provider(source, config.source)
    criteria = resolve_criteria(config.search_defaults(), **overrides)
    client = make_client(provider, config.credential_for(provider), session=session)

    logger.info("searching %s with %s", provider, criteria)
    paths = fetch(client, criteria, config.wallpaper_dir, count=count, report=report)

    if theme:
        paths = [convert(path, theme, config.converted_dir) for path in paths]

    return paths


def clean(directories: Iterable[Path]) -> list[Path]:
    """Delete every wallow- file directly inside directories. Returns the deleted paths."""

    deleted = []
    for directory in directories:
        directory = Path(directory)
        if not directory.is_dir():
            continue

        for path in sorted(directory.iterdir()):
            if path.is_file() and path.name.startswith(f"{ENGINE_PREFIX}-"):
                try:
                    path.unlink()
                except OSError as error:
                    raise FilesystemFailureError(
                        f"could not delete {path}: {error}"
                    ) from error

                deleted.append(path)

    return deleted
