"""Run the installed native binary with inherited stdio and exit status."""

from __future__ import annotations

import signal
import subprocess
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from translator_core.errors import MissingBinaryError, SpawnError
from translator_core.logging_setup import get_logger


def _exit_status(returncode: int) -> int:
    # POSIX reports death by signal N as -N; shells report 128 + N.
    if returncode < 0:
        return 128 - returncode
    return returncode


def _interrupt_signals() -> list[int]:
    signals = [signal.SIGINT]
    sigbreak = getattr(signal, "SIGBREAK", None)
    if sigbreak is not None:
        signals.append(sigbreak)
    return signals


@contextmanager
def _ignore_interrupts() -> Iterator[None]:
    """Leave Ctrl-C to the child; the wrapper only waits for its status.

    Handlers can only be installed from the main thread, elsewhere this is a no-op.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = {signum: signal.signal(signum, signal.SIG_IGN) for signum in _interrupt_signals()}
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def spawn(binary_path: Path, args: list[str]) -> int:
    """Start the binary and wait for it. Raises the LaunchError variants.

    SIGINT is ignored only after the child is started, so the child keeps
    the default disposition while the terminal delivers Ctrl-C to both.
    """
    if not binary_path.exists():
        raise MissingBinaryError(binary_path)
    try:
        proc = subprocess.Popen([str(binary_path), *args])
    except OSError as exc:
        raise SpawnError(binary_path, exc) from exc
    with _ignore_interrupts():
        returncode = proc.wait()
    return _exit_status(returncode)


def launch(binary_path: Path, args: list[str]) -> int:
    """Return the exit code the wrapper process should terminate with."""
    logger = get_logger()
    try:
        return spawn(binary_path, args)
    except MissingBinaryError as exc:
        logger.error(str(exc), extra={"event": "binary_missing"})
    except SpawnError as exc:
        logger.error(str(exc), extra={"event": "spawn_failed"})
    return 1
