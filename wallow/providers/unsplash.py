"""
Unsplash API client.

See https://unsplash.com/documentation. All requests carry "Authorization: Client-ID <access key>".

The API guidelines require that every download is reported through the photo's
links.download_location endpoint. That endpoint answers with a freshly signed image URL, which is
what we actually fetch. The accounting call is never skipped when the record carries a
download_location.
"""

import logging
from pathlib import Path
from typing import Optional

import requests

from wallow import image_handler
from wallow.errors import CredentialMissingError, MalformedResponseError
from wallow.providers.base import SearchCriteria, WallpaperRecord, WallpaperSource


logger = logging.getLogger(__name__)

# Unsplash search needs a query; used when none is supplied
DEFAULT_QUERY = "wallpaper"

# maximum page size allowed by the API
PER_PAGE = 30


def order_by(sorting: str) -> str:
    """
    Map a Wallhaven style sorting value onto Unsplash's order_by. Unsplash only knows 'relevant'
    and 'latest'; anything that is not a recency sort (random, relevance, toplist, views, ...)
    becomes 'relevant'.
    """

    if sorting in ("latest", "date_added"):
        return "latest"

    return "relevant"


def parse_resolution(resolution: str) -> tuple[int, int]:
    """Parse 'WxH' into (W, H). Anything unparseable gives (0, 0)."""

    width, _, height = (resolution or "").partition("x")

    try:
        return int(width), int(height)
    except ValueError:
        return 0, 0


class UnsplashClient(WallpaperSource):
    """Client for the Unsplash photo search API."""

    name = "unsplash"
    base_url = "https://api.unsplash.com"

    def __init__(self, access_key: Optional[str], session: requests.Session = None):
        if not access_key:
            raise CredentialMissingError(
                "Unsplash requires an access key. Set UNSPLASH_ACCESS_KEY or "
                "'wallow config set unsplash_access_key <key>'."
            )

        super().__init__(session)
        self.access_key = access_key

    @property
    def headers(self) -> dict:
        return {
            "Authorization": f"Client-ID {self.access_key}",
            "Accept-Version": "v1",
        }

    def search(self, criteria: SearchCriteria) -> list[WallpaperRecord]:
        width, height = parse_resolution(criteria.resolution)

        params = {
            "query": criteria.query or DEFAULT_QUERY,
            "per_page": PER_PAGE,
            "order_by": order_by(criteria.sorting),
            "orientation": "landscape",
            "content_filter": "low",
        }

        data = image_handler.get_json(
            self.session,
            f"{self.base_url}/search/photos",
            params=params,
            headers=self.headers,
        )

        records = []
        try:
            for photo in data["results"]:
                raw = photo["urls"]["raw"]

                # raw urls already carry a query string (ixid=...), imgix params are appended
                if width > 0 and height > 0:
                    url = f"{raw}&w={width}&h={height}&fit=crop&cs=srgb&fm=jpg"
                else:
                    url = f"{raw}&fm=jpg&q=85"

                records.append(
                    WallpaperRecord(
                        id=str(photo["id"]),
                        source_url=url,
                        resolution=f"{photo['width']}x{photo['height']}",
                        provider_name=self.name,
                        provider_extra=photo["links"]["download_location"],
                    )
                )

        except (KeyError, TypeError) as error:
            raise MalformedResponseError(
                f"unexpected response from Unsplash search: missing {error}"
            ) from error

        logger.debug("unsplash returned %d photos", len(records))
        return records

    def download(self, record: WallpaperRecord, destination_dir: Path) -> Path:
        destination = Path(destination_dir) / self.filename(record)

        if record.provider_extra is None:
            return image_handler.fetch_image(
                self.session, record.source_url, destination
            )

        tracked = image_handler.get_json(
            self.session, record.provider_extra, headers=self.headers
        )

        try:
            url = tracked["url"]
        except (KeyError, TypeError) as error:
            raise MalformedResponseError(
                f"download_location for {record.id} did not return a url"
            ) from error

        logger.debug("download of %s registered with unsplash", record.id)
        return image_handler.fetch_image(self.session, url, destination)
