"""
Image Handler

Utilities for fetching images over HTTP and validating them before they land on disk. These are
API agnostic: provider clients build the URL (and any auth headers) and hand off to fetch_image,
which handles the request, the status check and image validation.

No image is decoded or re-encoded here. Pillow only reads the header to confirm the bytes are an
image, and the original bytes are written to disk unchanged.
"""

import io
import logging
from pathlib import Path

import requests
from PIL import Image, UnidentifiedImageError

from wallow.errors import (
    BadStatusError,
    FilesystemFailureError,
    MalformedResponseError,
    NetworkFailureError,
)


logger = logging.getLogger(__name__)

# seconds; (connect, read)
REQUEST_TIMEOUT = (10, 60)


class InvalidImageError(MalformedResponseError):
    """
    Raised when a provided binary input is not an image. Wrapper around the PIL
    UnidentifiedImageError for better identification of errors during debugging
    and custom error messaging.
    """

    pass


def validate_image(input) -> str:
    """
    Determine whether input is a valid image and return its format (e.g. 'JPEG'). PIL open accepts a
    Path, a string, or a file object. Only the header is read, so this is safe to call on large files.
    """

    try:
        with Image.open(input) as image:
            return image.format

    except UnidentifiedImageError as error:
        raise InvalidImageError(
            f"Input {str(input)} does not appear to be an image."
        ) from error

    except FileNotFoundError as error:
        raise InvalidImageError(f"Input {str(input)} could not be found.") from error


def get(session: requests.Session, url: str, **kwargs) -> requests.Response:
    """
    Issue a GET request and translate transport errors and non-2xx answers into wallow errors.
    """

    logger.debug("GET %s params=%s", url, kwargs.get("params"))

    try:
        response = session.get(url, timeout=REQUEST_TIMEOUT, **kwargs)

    except requests.exceptions.RequestException as error:
        raise NetworkFailureError(f"request to {url} failed: {error}") from error

    try:
        response.raise_for_status()

    except requests.exceptions.HTTPError as error:
        raise BadStatusError(url, response.status_code) from error

    return response


def get_json(session: requests.Session, url: str, **kwargs):
    """GET url and decode the JSON body. Raise MalformedResponseError if it is not JSON."""

    response = get(session, url, **kwargs)

    try:
        return response.json()

    except ValueError as error:
        raise MalformedResponseError(
            f"response from {url} is not valid JSON: {error}"
        ) from error


def fetch_image(
    session: requests.Session, url: str, destination: Path, **kwargs
) -> Path:
    """
    Download the image at url and write it to destination. The parent directory must already exist.
    The file is fully written and closed when this returns. Returns the destination path.
    """

    destination = Path(destination)

    if not destination.parent.is_dir():
        raise FilesystemFailureError(
            f"Destination directory {destination.parent} does not exist."
        )

    response = get(session, url, **kwargs)
    content = response.content

    try:
        validate_image(io.BytesIO(content))
    except InvalidImageError as error:
        raise InvalidImageError(
            f"Download error: the target resource at {url} does not appear to be an image."
        ) from error

    try:
        with open(destination, "wb") as file:
            file.write(content)

    except OSError as error:
        raise FilesystemFailureError(
            f"There was an error writing {destination}: {error}"
        ) from error

    logger.debug("saved %d bytes to %s", len(content), destination)
    return destination
