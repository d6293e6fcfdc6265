"""
Provider registry and option resolution.

The provider set is small and closed, so selection is a plain enum plus a factory rather than a
plugin registry. Every option follows the same priority: explicit argument > persisted default >
built-in constant. Each search field is merged independently, so overriding one keeps the rest.
"""

from enum import Enum
from typing import Optional

import requests

from wallow.errors import UnknownProviderError
from wallow.providers.base import (
    ENGINE_PREFIX,
    SearchCriteria,
    WallpaperRecord,
    WallpaperSource,
)
from wallow.providers.unsplash import UnsplashClient
from wallow.providers.wallhaven import WallhavenClient


class Provider(str, Enum):
    WALLHAVEN = "wallhaven"
    UNSPLASH = "unsplash"

    def __str__(self):
        return self.value


DEFAULT_PROVIDER = Provider.WALLHAVEN

BUILTIN_CRITERIA = {
    "query": None,
    "resolution": "3840x2160",
    "categories": "111",
    "purity": "100",
    "sorting": "relevance",
}


def known_providers() -> list[str]:
    return [provider.value for provider in Provider]


def _first(*values):
    """Return the first value that is neither None nor an empty string."""

    for value in values:
        if value is not None and value != "":
            return value

    return None


def resolve_provider(
    explicit: Optional[str] = None, persisted: Optional[str] = None
) -> Provider:
    """
    Pick the provider: explicit > persisted > DEFAULT_PROVIDER. A name that does not match a known
    provider raises UnknownProviderError instead of falling back, so typos in the config surface.
    """

    name = _first(explicit, persisted)
    if name is None:
        return DEFAULT_PROVIDER

    try:
        return Provider(str(name).strip().lower())
    except ValueError:
        raise UnknownProviderError(name, known_providers()) from None


def resolve_criteria(persisted: dict = None, **explicit) -> SearchCriteria:
    """
    Merge explicit search options with persisted defaults and BUILTIN_CRITERIA, field by field.

    >>> resolve_criteria({"sorting": "random"}, resolution="1920x1080").sorting
    'random'
    """

    persisted = persisted or {}

    unknown = set(explicit) - set(BUILTIN_CRITERIA)
    if unknown:
        raise TypeError(f"unknown search options: {', '.join(sorted(unknown))}")

    merged = {
        key: _first(explicit.get(key), persisted.get(key), builtin)
        for key, builtin in BUILTIN_CRITERIA.items()
    }
    return SearchCriteria(**merged)


def make_client(
    provider: Provider, credential: Optional[str] = None, session: requests.Session = None
) -> WallpaperSource:
    """Build the client for provider. Unsplash raises CredentialMissingError without a credential."""

    provider = Provider(provider)

    if provider is Provider.UNSPLASH:
        return UnsplashClient(credential, session=session)

    return WallhavenClient(credential, session=session)


__all__ = [
    "BUILTIN_CRITERIA",
    "DEFAULT_PROVIDER",
    "ENGINE_PREFIX",
    "Provider",
    "SearchCriteria",
    "UnsplashClient",
    "WallhavenClient",
    "WallpaperRecord",
    "WallpaperSource",
    "known_providers",
    "make_client",
    "resolve_criteria",
    "resolve_provider",
]
