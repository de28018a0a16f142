"""Release asset resolver and installer for the i18n-translator binary."""

from .resolver import ASSET_TABLE, SUPPORTED_TARGETS, download_url, installed_name_for, resolve_asset
from .service import InstallResult, download_file, install_binary, make_executable, run_install

__all__ = [
    "ASSET_TABLE",
    "InstallResult",
    "SUPPORTED_TARGETS",
    "download_file",
    "download_url",
    "install_binary",
    "installed_name_for",
    "make_executable",
    "resolve_asset",
    "run_install",
]
