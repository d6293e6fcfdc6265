"""
wallow Configuration Management

This file handles utilities related to generating and loading variables from a configuration file.
The configuration is a single flat JSON document, "config.json", saved at ~/.config/wallow/config.json
unless the WALLOW_CONFIG_DIR environment variable points somewhere else.

Provider credentials can live in the config file, in a .env file next to it, or in the environment.
The environment always wins: a key exported in the shell overrides whatever is persisted.
"""

import json
import os
import logging
from dataclasses import dataclass
from dataclasses import asdict
from dataclasses import field
from dataclasses import fields
from pathlib import Path, PurePath
from typing import Optional

from dotenv import load_dotenv

from wallow.errors import FilesystemFailureError, WallowError


logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"

# environment variable names for credentials, keyed by provider name
CREDENTIAL_ENV = {
    "wallhaven": "WALLHAVEN_API_KEY",
    "unsplash": "UNSPLASH_ACCESS_KEY",
}

# config keys holding the persisted credential, keyed by provider name
CREDENTIAL_KEYS = {
    "wallhaven": "wallhaven_api_key",
    "unsplash": "unsplash_access_key",
}

# short names accepted by 'wallow config set'
KEY_ALIASES = {"res": "resolution", "provider": "source"}

# shown by 'wallow config schema'
KEY_DESCRIPTIONS = {
    "wallpaper_dir": "Folder downloads are saved to.",
    "converted_dir": "Folder gowall conversions are saved to.",
    "source": "Default provider: wallhaven or unsplash.",
    "query": "Default search keywords.",
    "resolution": "Default resolution, e.g. 3840x2160.",
    "categories": "Wallhaven category mask general/anime/people, e.g. 111.",
    "purity": "Wallhaven purity mask sfw/sketchy/nsfw, e.g. 100.",
    "sorting": "Default sorting, e.g. relevance, random, toplist or date_added.",
    "cron": "Cron expression used by 'wallow schedule'.",
    "wallhaven_api_key": "Wallhaven API key; WALLHAVEN_API_KEY takes priority.",
    "unsplash_access_key": "Unsplash access key; UNSPLASH_ACCESS_KEY takes priority.",
}


class WallowConfigError(WallowError):
    """Raise when an issue occurs with handling wallow configuration."""

    pass


class PathEncoder(json.JSONEncoder):
    """
    custom encoder adds support for serializing pathlib objects as strings
    """

    def default(self, o):
        if isinstance(o, PurePath):
            return str(o)

        else:
            return json.JSONEncoder.default(self, o)


def default_config_dir() -> Path:
    """Return the configuration directory, honouring WALLOW_CONFIG_DIR."""

    try:
        return Path(os.environ["WALLOW_CONFIG_DIR"]).expanduser()

    except KeyError:
        return Path("~/.config/wallow").expanduser()


@dataclass
class WallowConfig:
    """
    Flat set of persisted defaults. Search fields left as None fall through to the built-in
    defaults in wallow.providers, so a user only stores the values they actually want to pin.
    """

    wallpaper_dir: Path = field(default_factory=lambda: Path("~/wallow").expanduser())
    converted_dir: Path = field(
        default_factory=lambda: Path("~/wallow/converted").expanduser()
    )
    source: Optional[str] = None
    query: Optional[str] = None
    resolution: Optional[str] = None
    categories: Optional[str] = None
    purity: Optional[str] = None
    sorting: Optional[str] = None
    cron: Optional[str] = None
    wallhaven_api_key: Optional[str] = None
    unsplash_access_key: Optional[str] = None

    def __post_init__(self):
        """
        JSON cannot deserialize a str into a Path, so convert directory fields here.
        """

        self.wallpaper_dir = Path(self.wallpaper_dir).expanduser()
        self.converted_dir = Path(self.converted_dir).expanduser()

    @classmethod
    def keys(cls) -> list[str]:
        return [item.name for item in fields(cls)]

    def credential_for(self, provider: str) -> Optional[str]:
        """
        Return the credential for provider. The environment variable takes priority over the
        persisted value; empty strings count as unset.
        """

        provider = str(provider)
        from_env = os.environ.get(CREDENTIAL_ENV.get(provider, ""), "")
        if from_env:
            return from_env

        key = CREDENTIAL_KEYS.get(provider)
        persisted = getattr(self, key) if key else None
        return persisted or None

    def search_defaults(self) -> dict:
        """Persisted search defaults, for merging with explicit arguments."""

        return {
            "query": self.query,
            "resolution": self.resolution,
            "categories": self.categories,
            "purity": self.purity,
            "sorting": self.sorting,
        }

    def set(self, key: str, value: str) -> str:
        """
        Update a single key. Returns the canonical key name. Raise WallowConfigError for unknown keys.
        """

        key = KEY_ALIASES.get(key, key)
        if key not in self.keys():
            raise WallowConfigError(
                f"unknown config key '{key}'. Valid keys: {', '.join(self.keys())}"
            )

        if key in ("wallpaper_dir", "converted_dir"):
            value = Path(value).expanduser()

        setattr(self, key, value)
        return key

    def ensure_dirs(self):
        """Create the wallpaper and converted directories if they do not exist yet."""

        for directory in (self.wallpaper_dir, self.converted_dir):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as error:
                raise FilesystemFailureError(
                    f"There was an error creating {directory}: {error}"
                ) from error

    def to_json(self) -> str:
        """Serialize to the JSON document stored in config.json."""

        try:
            return json.dumps(asdict(self), sort_keys=True, indent=4, cls=PathEncoder)

        except TypeError as error:
            raise WallowConfigError(
                f"There was an error trying to serialize config data to JSON: {error}"
            ) from error

    @classmethod
    def schema(cls) -> dict:
        """
        JSON Schema describing config.json. Every key is optional; directories are strings with
        "~" expansion, the other keys are strings or null.
        """

        properties = {}
        for item in fields(cls):
            if item.name in ("wallpaper_dir", "converted_dir"):
                properties[item.name] = {"type": "string", "format": "path"}
            else:
                properties[item.name] = {"type": ["string", "null"]}

            if item.name in KEY_DESCRIPTIONS:
                properties[item.name]["description"] = KEY_DESCRIPTIONS[item.name]

        return {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "title": "wallow configuration",
            "type": "object",
            "properties": properties,
        }

    def generate_config_json(self, config_dir: Path = None) -> Path:
        """
        Write the WallowConfig to file, serializing to JSON. Returns filepath of written
        config.json file.

        Warning: will overwrite any existing config file for wallow.
        """

        config_dir = Path(config_dir) if config_dir else default_config_dir()
        to_json = self.to_json()

        try:
            config_dir.mkdir(parents=True, exist_ok=True)
            dest_file = config_dir / CONFIG_FILE_NAME
            dest_file.write_text(to_json)

        except OSError as error:
            raise WallowConfigError(
                f"There was an error saving the configuration file: {error}."
            ) from error

        logger.debug("wrote config to %s", dest_file)
        return dest_file


def load_config(config_dir: Path = None) -> WallowConfig:
    """
    Load config.json from config_dir (default: WALLOW_CONFIG_DIR or ~/.config/wallow) and instantiate
    it as a WallowConfig. Also loads a .env file from the same directory into the environment without
    overriding variables that are already set. Raise WallowConfigError if the file can't be read.
    """

    config_dir = Path(config_dir) if config_dir else default_config_dir()
    config_src = config_dir / CONFIG_FILE_NAME

    load_dotenv(config_dir / ".env", override=False)

    try:
        with config_src.open("r") as file:
            from_json = json.loads(file.read())

    except json.JSONDecodeError as error:
        raise WallowConfigError(
            f"There was an issue reading the config: {error}"
        ) from error

    except FileNotFoundError as error:
        raise WallowConfigError(
            f"There was an issue opening the config: {error}"
        ) from error

    if not isinstance(from_json, dict):
        raise WallowConfigError(f"{config_src} must contain a flat JSON object.")

    unknown = set(from_json) - set(WallowConfig.keys())
    if unknown:
        logger.warning("ignoring unknown config keys: %s", ", ".join(sorted(unknown)))

    return WallowConfig(
        **{key: value for key, value in from_json.items() if key not in unknown}
    )


def init(config_dir: Path = None) -> WallowConfig:
    """Load the wallow config, writing a default one first if none exists."""

    config_dir = Path(config_dir) if config_dir else default_config_dir()

    if not (config_dir / CONFIG_FILE_NAME).exists():
        WallowConfig().generate_config_json(config_dir)

    return load_config(config_dir)
