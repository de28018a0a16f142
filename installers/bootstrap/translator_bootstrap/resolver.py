"""Release asset resolution for OS/architecture specific binaries."""

from __future__ import annotations

from translator_core.config import TOOL_NAME


ASSET_TABLE: dict[tuple[str, str], str] = {
    ("darwin", "arm64"): f"{TOOL_NAME}-darwin-arm64",
    ("darwin", "x64"): f"{TOOL_NAME}-darwin-x64",
    ("linux", "x64"): f"{TOOL_NAME}-linux-x64",
    ("windows", "x64"): f"{TOOL_NAME}-windows-x64.exe",
}

SUPPORTED_TARGETS: tuple[tuple[str, str], ...] = tuple(ASSET_TABLE)


def resolve_asset(os_name: str, arch: str) -> str | None:
    """Return the release asset name for a platform, or None when unsupported."""
    return ASSET_TABLE.get((os_name, arch))


def download_url(release_host: str, repo: str, tag: str, asset: str) -> str:
    """Example: download_url("https://github.com", "o/r", "v2.3.0", "x")
             -> "https://github.com/o/r/releases/download/v2.3.0/x"
    """
    return f"{release_host.rstrip('/')}/{repo.strip('/')}/releases/download/{tag}/{asset}"


def installed_name_for(asset: str) -> str:
    if asset.lower().endswith(".exe"):
        return f"{TOOL_NAME}.exe"
    return TOOL_NAME
