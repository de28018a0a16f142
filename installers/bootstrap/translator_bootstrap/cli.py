"""CLI installer that downloads the native i18n-translator binary."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from translator_core.config import BootstrapConfig, load_config
from translator_core.errors import DownloadError, UnsupportedPlatformError
from translator_core.logging_setup import configure_logging

from .resolver import download_url, installed_name_for, resolve_asset
from .service import run_install


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18n-translator-install",
        description="Download the prebuilt i18n-translator binary for this platform",
    )
    parser.add_argument("--version", dest="release_version", help="Release version without the 'v' prefix")
    parser.add_argument("--repo", help="GitHub owner/repo")
    parser.add_argument("--release-host", help="Release host base URL")
    parser.add_argument("--bin-dir", help="Directory to install the binary into")
    parser.add_argument("--dry-run", action="store_true", help="Resolve asset and URL only")
    parser.add_argument("--verbose", action="store_true", help="Log debug details")
    return parser


def _apply_overrides(cfg: BootstrapConfig, args: argparse.Namespace) -> BootstrapConfig:
    changes: dict[str, object] = {}
    if args.release_version:
        changes["version"] = args.release_version
    if args.repo:
        changes["repo"] = args.repo
    if args.release_host:
        changes["release_host"] = args.release_host
    if args.bin_dir:
        changes["bin_dir"] = Path(args.bin_dir).expanduser()
    return replace(cfg, **changes) if changes else cfg


def _dry_run(cfg: BootstrapConfig) -> int:
    asset = resolve_asset(cfg.target.os_name, cfg.target.arch)
    if asset is None:
        print(f"platform={cfg.target.os_name} arch={cfg.target.arch} asset=none")
        return 0
    print(f"platform={cfg.target.os_name} arch={cfg.target.arch} asset={asset}")
    print(f"url={download_url(cfg.release_host, cfg.repo, cfg.version_tag, asset)}")
    print(f"path={cfg.bin_dir / installed_name_for(asset)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = _apply_overrides(load_config(), args)
    logger = configure_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_file=cfg.log_file,
    )

    if args.dry_run:
        return _dry_run(cfg)

    try:
        run_install(cfg, progress=logger.info)
    except UnsupportedPlatformError as exc:
        logger.warning(f"{exc}. Falling back to source.", extra={"event": "platform_unsupported"})
        logger.warning("Please install Go to build locally or use a supported platform.")
        return 0
    except DownloadError as exc:
        logger.error(str(exc), extra={"event": "download_failed"})
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
