from __future__ import annotations

import logging
import sys

from translator_core.config import installed_binary_path, load_config
from translator_core.logging_setup import configure_logging

try:
    # Normal package import path.
    from .launcher import launch
except ImportError:
    # Script/frozen entrypoint path.
    from translator_launcher.launcher import launch


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    cfg = load_config()
    configure_logging(level=logging.WARNING, log_file=cfg.log_file)
    return int(launch(installed_binary_path(cfg), list(args)))


if __name__ == "__main__":
    raise SystemExit(main())
