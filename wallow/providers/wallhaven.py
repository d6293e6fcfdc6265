"""
Wallhaven API client.

See https://wallhaven.cc/help/api. Searching is open to anonymous users for SFW and sketchy content;
an API key is required to include NSFW results. Wallhaven has no download accounting, so a download
is a single GET of the full-size image path returned by the search.
"""

import logging
from pathlib import Path, PurePosixPath
from typing import Optional
from urllib.parse import urlparse

import requests

from wallow import image_handler
from wallow.errors import CredentialMissingError, MalformedResponseError
from wallow.providers.base import (
    ENGINE_PREFIX,
    SearchCriteria,
    WallpaperRecord,
    WallpaperSource,
)


logger = logging.getLogger(__name__)


class WallhavenClient(WallpaperSource):
    """
    Client for the Wallhaven search API.

    categories and purity are three character bit masks:
        categories: [general][anime][people], e.g. "111" = all, "100" = general only
        purity:     [sfw][sketchy][nsfw],     e.g. "100" = SFW only

    sorting is passed through unchanged: date_added, relevance, random, views, favorites, toplist, hot.
    """

    name = "wallhaven"
    base_url = "https://wallhaven.cc/api/v1"

    def __init__(self, api_key: Optional[str] = None, session: requests.Session = None):
        super().__init__(session)
        self.api_key = api_key or None

    def search(self, criteria: SearchCriteria) -> list[WallpaperRecord]:
        # NSFW results silently disappear without a key, so fail before making the call
        if criteria.purity[2:3] == "1" and self.api_key is None:
            raise CredentialMissingError(
                "Wallhaven requires an API key for NSFW purity. Set WALLHAVEN_API_KEY or "
                "'wallow config set wallhaven_api_key <key>'."
            )

        params = {
            "resolutions": criteria.resolution,
            "categories": criteria.categories,
            "purity": criteria.purity,
            "sorting": criteria.sorting,
        }

        if criteria.query:
            params["q"] = criteria.query

        if self.api_key:
            params["apikey"] = self.api_key

        data = image_handler.get_json(
            self.session, f"{self.base_url}/search", params=params
        )

        try:
            records = [
                WallpaperRecord(
                    id=str(item["id"]),
                    source_url=item["path"],
                    resolution=item["resolution"],
                    provider_name=self.name,
                )
                for item in data["data"]
            ]

        except (KeyError, TypeError) as error:
            raise MalformedResponseError(
                f"unexpected response from Wallhaven search: missing {error}"
            ) from error

        logger.debug("wallhaven returned %d wallpapers", len(records))
        return records

    def download(self, record: WallpaperRecord, destination_dir: Path) -> Path:
        """
        Save the full-size image as wallow-<original name>. Wallhaven names its files
        wallhaven-<id>.<ext>, so the result reads wallow-wallhaven-<id>.<ext>.
        """

        original_name = PurePosixPath(urlparse(record.source_url).path).name
        if original_name:
            filename = f"{ENGINE_PREFIX}-{original_name}"
        else:
            filename = self.filename(record)

        return image_handler.fetch_image(
            self.session, record.source_url, Path(destination_dir) / filename
        )
