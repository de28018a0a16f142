import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "installers" / "bootstrap"))

from translator_bootstrap.resolver import download_url, installed_name_for, resolve_asset
from translator_core.config import load_config


class BootstrapResolutionTests(unittest.TestCase):
    def test_darwin_arm64_release(self):
        cfg = load_config(environ={"I18N_TRANSLATOR_VERSION": "2.3.0"}, system="Darwin", machine="arm64")
        asset = resolve_asset(cfg.target.os_name, cfg.target.arch)
        self.assertEqual(asset, "i18n-translator-darwin-arm64")

        url = download_url(cfg.release_host, cfg.repo, cfg.version_tag, asset)
        self.assertTrue(url.startswith("https://"))
        self.assertTrue(url.endswith("/releases/download/v2.3.0/i18n-translator-darwin-arm64"))
        self.assertEqual(installed_name_for(asset), "i18n-translator")

    def test_windows_release_keeps_exe(self):
        cfg = load_config(environ={"npm_package_version": "1.0.1"}, system="Windows", machine="AMD64")
        asset = resolve_asset(cfg.target.os_name, cfg.target.arch)
        url = download_url(cfg.release_host, cfg.repo, cfg.version_tag, asset)
        self.assertTrue(url.endswith("/v1.0.1/i18n-translator-windows-x64.exe"))
        self.assertEqual(installed_name_for(asset), "i18n-translator.exe")

    def test_linux_arm64_is_unsupported(self):
        cfg = load_config(environ={"I18N_TRANSLATOR_VERSION": "2.3.0"}, system="Linux", machine="aarch64")
        self.assertIsNone(resolve_asset(cfg.target.os_name, cfg.target.arch))


if __name__ == "__main__":
    unittest.main()
