"""Shared configuration, errors and logging for the i18n-translator bootstrap."""

from .config import (
    BootstrapConfig,
    PlatformTarget,
    binary_name,
    installed_binary_path,
    load_config,
    resolve_target,
)
from .errors import (
    BootstrapError,
    DownloadError,
    HttpStatusError,
    LaunchError,
    MissingBinaryError,
    NetworkError,
    RedirectLimitExceeded,
    SpawnError,
    UnsupportedPlatformError,
)
from .logging_setup import configure_logging, get_logger

__all__ = [
    "BootstrapConfig",
    "BootstrapError",
    "DownloadError",
    "HttpStatusError",
    "LaunchError",
    "MissingBinaryError",
    "NetworkError",
    "PlatformTarget",
    "RedirectLimitExceeded",
    "SpawnError",
    "UnsupportedPlatformError",
    "binary_name",
    "configure_logging",
    "get_logger",
    "installed_binary_path",
    "load_config",
    "resolve_target",
]
