"""Download and install the prebuilt binary for the running platform."""

from __future__ import annotations

import http.client
import os
import ssl
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import certifi

from translator_core.config import DEFAULT_MAX_REDIRECTS, DEFAULT_TIMEOUT_S, BootstrapConfig, PlatformTarget
from translator_core.errors import (
    DownloadError,
    HttpStatusError,
    NetworkError,
    RedirectLimitExceeded,
    UnsupportedPlatformError,
)
from translator_core.logging_setup import get_logger

from .resolver import download_url, installed_name_for, resolve_asset


ProgressCallback = Callable[[str], None]

USER_AGENT = "i18n-translator-installer (+https://github.com/wowblvck/i18n-translator)"
CHUNK_SIZE = 1024 * 64

logger = get_logger()


@dataclass(frozen=True)
class InstallResult:
    target: PlatformTarget | None
    asset: str
    url: str
    path: Path
    executable: bool


class _NoRedirectHandler(urllib.request.HTTPRedirectHandler):
    """Surface 3xx responses as HTTPError so redirects are followed by hand."""

    def redirect_request(self, req, fp, code, msg, headers, newurl):
        return None


def build_ssl_context(ca_bundle: str | None = None, allow_insecure: bool = False) -> ssl.SSLContext:
    """Create TLS context for release downloads with explicit CA handling."""
    if allow_insecure:
        return ssl._create_unverified_context()
    if ca_bundle:
        return ssl.create_default_context(cafile=ca_bundle)
    return ssl.create_default_context(cafile=certifi.where())


def _open_url(url: str, timeout: float, context: ssl.SSLContext):
    opener = urllib.request.build_opener(
        urllib.request.HTTPSHandler(context=context),
        _NoRedirectHandler(),
    )
    request = urllib.request.Request(url, headers={"User-Agent": USER_AGENT, "Accept": "*/*"})
    return opener.open(request, timeout=timeout)


def _content_length(response) -> int | None:
    headers = getattr(response, "headers", None)
    raw = headers.get("Content-Length") if headers is not None else None
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _read_chunk(response, url: str) -> bytes:
    try:
        return response.read(CHUNK_SIZE)
    except (http.client.HTTPException, OSError) as exc:
        raise NetworkError(url, exc) from exc


def _stream_to_file(response, dest: Path, url: str) -> None:
    """Copy the body to ``dest`` chunk by chunk; remove ``dest`` on any failure.

    ``HTTPResponse.read(amt)`` returns ``b""`` when the peer closes early
    instead of raising, so the byte count is checked against Content-Length.
    """
    expected = _content_length(response)
    try:
        fh = dest.open("wb")
    except OSError as exc:
        raise DownloadError(url, f"Could not write {dest}: {exc}") from exc

    written = 0
    try:
        with fh:
            while True:
                chunk = _read_chunk(response, url)
                if not chunk:
                    break
                fh.write(chunk)
                written += len(chunk)
        if expected is not None and written != expected:
            raise NetworkError(url, f"incomplete body: got {written} of {expected} bytes")
    except DownloadError:
        dest.unlink(missing_ok=True)
        raise
    except OSError as exc:
        dest.unlink(missing_ok=True)
        raise DownloadError(url, f"Could not write {dest}: {exc}") from exc


def download_file(
    url: str,
    dest: Path,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    context: ssl.SSLContext | None = None,
) -> str:
    """Fetch ``url`` into ``dest``, following up to ``max_redirects`` hops.

    Returns the final URL the body was read from. Nothing is written unless
    the chain ends in HTTP 200.
    """
    context = context or build_ssl_context()
    current = url
    hops = 0

    while True:
        try:
            response = _open_url(current, timeout_s, context)
        except urllib.error.HTTPError as exc:
            location = exc.headers.get("Location") if exc.headers is not None else None
            exc.close()
            if not (300 <= exc.code < 400 and location):
                raise HttpStatusError(current, exc.code) from exc
            hops += 1
            if hops > max_redirects:
                raise RedirectLimitExceeded(url, max_redirects) from exc
            current = urllib.parse.urljoin(current, location)
            logger.info(f"Following redirect {hops} to {current}", extra={"event": "redirect_followed"})
            continue
        except (urllib.error.URLError, http.client.HTTPException, OSError) as exc:
            reason = getattr(exc, "reason", exc)
            raise NetworkError(current, reason) from exc

        with response:
            status = response.status
            if status != 200:
                raise HttpStatusError(current, status)
            _stream_to_file(response, dest, current)
        return current


def make_executable(path: Path) -> bool:
    """Best-effort chmod +x; a failure is logged, not raised."""
    try:
        path.chmod(path.stat().st_mode | 0o111)
    except OSError as exc:
        logger.warning(f"Could not mark {path} executable: {exc}", extra={"event": "chmod_failed"})
        return False
    return True


def install_binary(
    tag: str,
    asset: str,
    destination_dir: Path,
    *,
    release_host: str,
    repo: str,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    executable: bool = True,
    ssl_context: ssl.SSLContext | None = None,
    target: PlatformTarget | None = None,
    progress: ProgressCallback | None = None,
) -> InstallResult:
    progress = progress or (lambda _msg: None)
    url = download_url(release_host, repo, tag, asset)

    destination_dir.mkdir(parents=True, exist_ok=True)
    dest = destination_dir / installed_name_for(asset)

    progress(f"Downloading binary: {url}")
    logger.debug(f"download target {dest}", extra={"event": "download_started"})
    download_file(url, dest, max_redirects=max_redirects, timeout_s=timeout_s, context=ssl_context)

    is_executable = make_executable(dest) if executable else os.access(dest, os.X_OK)
    logger.debug(f"installed {asset} from {url}", extra={"event": "binary_installed"})
    progress(f"Installed binary to {dest}")
    return InstallResult(target=target, asset=asset, url=url, path=dest, executable=is_executable)


def run_install(cfg: BootstrapConfig, progress: ProgressCallback | None = None) -> InstallResult:
    """Resolve the asset for ``cfg.target`` and install it into ``cfg.bin_dir``.

    Raises UnsupportedPlatformError before any network activity when no
    prebuilt binary exists for the platform.
    """
    target = cfg.target
    asset = resolve_asset(target.os_name, target.arch)
    if asset is None:
        raise UnsupportedPlatformError(target.os_name, target.arch)

    return install_binary(
        cfg.version_tag,
        asset,
        cfg.bin_dir,
        release_host=cfg.release_host,
        repo=cfg.repo,
        max_redirects=cfg.max_redirects,
        timeout_s=cfg.timeout_s,
        executable=target.os_name != "windows",
        ssl_context=build_ssl_context(cfg.ca_bundle, cfg.allow_insecure_tls),
        target=target,
        progress=progress,
    )
