"""Exception hierarchy for the i18n-translator bootstrap."""

from __future__ import annotations

from pathlib import Path


class BootstrapError(Exception):
    """Base for all bootstrap errors."""


class UnsupportedPlatformError(BootstrapError):
    """No prebuilt binary is published for the running platform."""

    def __init__(self, os_name: str, arch: str):
        self.os_name = os_name
        self.arch = arch
        super().__init__(f"No prebuilt binary for platform={os_name} arch={arch}")


class DownloadError(BootstrapError):
    """Fetching the release asset failed."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class NetworkError(DownloadError):
    """DNS, connect, TLS or timeout failure while talking to the release host."""

    def __init__(self, url: str, reason: object):
        self.reason = reason
        super().__init__(url, f"Error downloading {url}: {reason}")


class RedirectLimitExceeded(DownloadError):
    def __init__(self, url: str, limit: int):
        self.limit = limit
        super().__init__(url, f"Too many redirects (>{limit}) while downloading {url}")


class HttpStatusError(DownloadError):
    def __init__(self, url: str, status: int):
        self.status = status
        super().__init__(url, f"Failed to download {url}: HTTP {status}")


class LaunchError(BootstrapError):
    """The installed binary could not be started."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(message)


class MissingBinaryError(LaunchError):
    def __init__(self, path: Path):
        super().__init__(
            path,
            f"Binary not found at {path}. Try reinstalling the package "
            "or run i18n-translator-install and check its logs.",
        )


class SpawnError(LaunchError):
    def __init__(self, path: Path, reason: object):
        self.reason = reason
        super().__init__(path, f"Failed to start binary {path}: {reason}")
