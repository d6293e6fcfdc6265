"""
wallow errors

Every failure that can reach the command line boundary is a WallowError. Library exceptions
(requests, Pillow, OSError) are translated into one of these kinds where they are first caught, so
callers never need to know which library sits underneath a provider or a subprocess.

NoResults deliberately lives outside the hierarchy: an empty search or an empty wallpaper folder is
a normal outcome that should be reported to the user, not a failure.
"""


class WallowError(Exception):
    """Base class for all wallow failures."""

    pass


class CredentialMissingError(WallowError):
    """Raise when a provider requires a credential that is not configured."""

    pass


class UnknownProviderError(WallowError):
    """Raise when a provider name does not match any known provider."""

    def __init__(self, name, known):
        self.name = name
        self.known = tuple(known)
        super().__init__(
            f"unknown provider '{name}'. Known providers: {', '.join(self.known)}"
        )


class NetworkFailureError(WallowError):
    """Raise when a request could not be completed."""

    pass


class BadStatusError(NetworkFailureError):
    """Raise when a provider answers with a non-2xx status code."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"request to {url} failed with status code {status_code}")


class MalformedResponseError(WallowError):
    """Raise when a response body cannot be interpreted (bad JSON, missing keys, not an image)."""

    pass


class ExternalToolMissingError(WallowError):
    """Raise when a required external program is not on the search path."""

    def __init__(self, tool: str, hint: str = ""):
        self.tool = tool
        self.hint = hint
        message = f"'{tool}' was not found on your PATH."
        if hint:
            message = f"{message} {hint}"
        super().__init__(message)


class ExternalToolFailedError(WallowError):
    """Raise when an external program exits with a non-zero status. The reason is its stderr, verbatim."""

    def __init__(self, tool: str, reason: str, returncode: int = None):
        self.tool = tool
        self.reason = reason
        self.returncode = returncode
        super().__init__(f"'{tool}' failed: {reason}")


class FilesystemFailureError(WallowError):
    """Raise when reading or writing a local file or directory fails."""

    pass


class NonUtf8PathError(WallowError):
    """Raise when a path cannot be represented as UTF-8 text."""

    pass


class NoResults(Exception):
    """
    Terminal, non-error outcome: a search matched nothing or there is nothing to pick from.
    The command line boundary turns this into an informational message and a clean exit.
    """

    pass
