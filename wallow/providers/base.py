"""
Base classes and types shared by all wallpaper providers.

A provider client turns SearchCriteria into a provider specific query, normalizes the answer into
WallpaperRecord objects, and knows how to download one of its own records. Records are only ever
downloaded by the client that produced them, so provider specific state travels in provider_extra.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional

import requests


# marks every file wallow writes so 'clean' and 'list' can find them
ENGINE_PREFIX = "wallow"


@dataclass(frozen=True)
class WallpaperRecord:
    """
    Normalized search result.

    Attributes:
        id: Identifier of the wallpaper on the provider.
        source_url: Direct (or sized) URL to the image.
        resolution: Resolution string such as "3840x2160".
        provider_name: Name of the provider that produced the record.
        provider_extra: Provider specific state needed by the download step, e.g. Unsplash's
            download accounting URL.
    """

    id: str
    source_url: str
    resolution: str
    provider_name: str
    provider_extra: Optional[str] = None


@dataclass(frozen=True)
class SearchCriteria:
    """Fully resolved search parameters. Only query may be None."""

    resolution: str
    categories: str
    purity: str
    sorting: str
    query: Optional[str] = None


class WallpaperSource(ABC):
    """
    Abstract base class for provider clients.

    Class Attributes:
        name: Provider name, also used in file names and credential lookup.
        base_url: Base URL of the provider API.
    """

    name: ClassVar[str]
    base_url: ClassVar[str]

    def __init__(self, session: requests.Session = None):
        self.session = session if session is not None else requests.Session()

    @abstractmethod
    def search(self, criteria: SearchCriteria) -> list[WallpaperRecord]:
        """
        Search the provider. Order of the returned records is the provider's own ordering.
        An empty list means nothing matched.
        """
        ...

    @abstractmethod
    def download(self, record: WallpaperRecord, destination_dir: Path) -> Path:
        """Download record into destination_dir and return the path of the written file."""
        ...

    def filename(self, record: WallpaperRecord, extension: str = "jpg") -> str:
        return f"{ENGINE_PREFIX}-{self.name}-{record.id}.{extension}"
