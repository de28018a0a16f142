"""Process configuration read once from the environment at startup."""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass
from importlib import metadata
from pathlib import Path
from typing import Mapping


DIST_NAME = "i18n-translator"
TOOL_NAME = "i18n-translator"

DEFAULT_RELEASE_HOST = "https://github.com"
DEFAULT_REPO = "wowblvck/i18n-translator"
DEFAULT_MAX_REDIRECTS = 5
DEFAULT_TIMEOUT_S = 180.0

ENV_PREFIX = "I18N_TRANSLATOR_"


@dataclass(frozen=True)
class PlatformTarget:
    os_name: str
    arch: str


@dataclass(frozen=True)
class BootstrapConfig:
    version: str
    target: PlatformTarget
    release_host: str = DEFAULT_RELEASE_HOST
    repo: str = DEFAULT_REPO
    bin_dir: Path = Path("bin")
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    timeout_s: float = DEFAULT_TIMEOUT_S
    log_file: Path | None = None
    ca_bundle: str | None = None
    allow_insecure_tls: bool = False

    @property
    def version_tag(self) -> str:
        return f"v{self.version}"


def _normalize_os(system: str) -> str:
    s = system.lower()
    if s.startswith("win"):
        return "windows"
    if s.startswith("darwin") or s.startswith("mac"):
        return "darwin"
    if s.startswith("linux"):
        return "linux"
    return "other"


def _normalize_arch(machine: str) -> str:
    m = machine.lower()
    if m in ("x86_64", "amd64", "x64"):
        return "x64"
    if m in ("aarch64", "arm64"):
        return "arm64"
    return "other"


def resolve_target(system: str, machine: str) -> PlatformTarget:
    return PlatformTarget(os_name=_normalize_os(system), arch=_normalize_arch(machine))


def binary_name(os_name: str) -> str:
    if os_name == "windows":
        return f"{TOOL_NAME}.exe"
    return TOOL_NAME


def default_bin_dir() -> Path:
    return Path(__file__).resolve().parent / "bin"


def installed_binary_path(cfg: BootstrapConfig) -> Path:
    return cfg.bin_dir / binary_name(cfg.target.os_name)


def _installed_version() -> str:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "latest"


def _env(environ: Mapping[str, str], key: str) -> str:
    return environ.get(ENV_PREFIX + key, "").strip()


def _int_setting(raw: str, default: int, lo: int, hi: int) -> int:
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(lo, min(hi, value))


def _float_setting(raw: str, default: float, lo: float) -> float:
    try:
        value = float(raw)
    except ValueError:
        return default
    return max(lo, value)


def load_config(
    environ: Mapping[str, str] | None = None,
    system: str | None = None,
    machine: str | None = None,
) -> BootstrapConfig:
    """Build the immutable config from environment values.

    Every input can be injected; by default the process environment and
    ``platform`` module are consulted.
    """
    environ = os.environ if environ is None else environ
    target = resolve_target(
        platform.system() if system is None else system,
        platform.machine() if machine is None else machine,
    )

    version = _env(environ, "VERSION") or environ.get("npm_package_version", "").strip()
    if not version:
        version = _installed_version()

    bin_dir_raw = _env(environ, "BIN_DIR")
    log_file_raw = _env(environ, "LOG_FILE")

    return BootstrapConfig(
        version=version,
        target=target,
        release_host=_env(environ, "RELEASE_HOST") or DEFAULT_RELEASE_HOST,
        repo=_env(environ, "REPO") or DEFAULT_REPO,
        bin_dir=Path(bin_dir_raw).expanduser() if bin_dir_raw else default_bin_dir(),
        max_redirects=_int_setting(_env(environ, "MAX_REDIRECTS"), DEFAULT_MAX_REDIRECTS, 0, 20),
        timeout_s=_float_setting(_env(environ, "TIMEOUT"), DEFAULT_TIMEOUT_S, 1.0),
        log_file=Path(log_file_raw).expanduser() if log_file_raw else None,
        ca_bundle=_env(environ, "CA_BUNDLE") or None,
        allow_insecure_tls=_env(environ, "ALLOW_INSECURE_TLS") == "1",
    )
