"""
Gnome Wallpaper Handler

This module handles updates to the Gnome desktop background by interfacing with the
settings schema org.gnome.desktop.background exposed through Gio (PyGObject).

More information on this schema can be found at:
https://github.com/GNOME/gsettings-desktop-schemas/blob/master/schemas/org.gnome.desktop.background.gschema.xml.in

PyGObject is an optional dependency (pip install wallow[gnome]); it is imported when a wallpaper
is actually set so the rest of wallow works on machines without the GObject stack.
"""

from pathlib import Path

from wallow import image_handler
from wallow.errors import NonUtf8PathError, WallowError


BACKGROUND_SCHEMA = "org.gnome.desktop.background"


class WallpaperUpdateError(WallowError):
    """
    Raised when an attempt to update Gnome desktop background fails.
    """

    pass


def _background_settings():
    try:
        import gi

        gi.require_version("Gio", "2.0")
        from gi.repository import Gio

    except (ImportError, ValueError) as error:
        raise WallpaperUpdateError(
            "Setting the desktop background needs PyGObject: pip install 'wallow[gnome]'"
        ) from error

    return Gio.Settings(schema=BACKGROUND_SCHEMA)


def update_wallpaper(img_path) -> Path:
    """
    Update the background image to the one at img_path. Raise WallpaperUpdateError if the path is
    not an existing image, NonUtf8PathError if it cannot be expressed as UTF-8.
    """

    try:
        wallpaper_location = Path(img_path).expanduser().resolve()
    except TypeError as error:
        raise WallpaperUpdateError(
            f"Invalid parameter: {img_path} is not a valid Pathlike object."
        ) from error

    # gsettings does no validation: a bad path just blanks the background
    if not wallpaper_location.exists() or not wallpaper_location.is_file():
        raise WallpaperUpdateError(
            f"Invalid path provided for image location: {img_path} does not exist."
        )

    try:
        str(wallpaper_location).encode("utf-8")
    except UnicodeEncodeError as error:
        raise NonUtf8PathError(
            f"{wallpaper_location!r} is not valid UTF-8 and cannot be stored in gsettings"
        ) from error

    try:
        image_handler.validate_image(wallpaper_location)
    except image_handler.InvalidImageError as error:
        raise WallpaperUpdateError(
            f"Invalid image type provided. {wallpaper_location.name} is not a valid image."
        ) from error

    settings = _background_settings()
    uri = wallpaper_location.as_uri()
    settings["picture-uri"] = uri
    settings["picture-uri-dark"] = uri

    return wallpaper_location
