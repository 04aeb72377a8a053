from __future__ import annotations

import os
import signal
import sys
from collections.abc import Iterable
from types import FrameType

INTERRUPT_MESSAGE = "Don't do that\n"

_FATAL_SIGNAL_NAMES = ("SIGTERM", "SIGHUP", "SIGQUIT")


def default_fatal_signals() -> tuple[signal.Signals, ...]:
    return tuple(getattr(signal, name) for name in _FATAL_SIGNAL_NAMES if hasattr(signal, name))


def on_interrupt(signum: int, frame: FrameType | None) -> None:
    # sys.stdout may be mid-write here; go straight to the fd.
    os.write(sys.stdout.fileno(), INTERRUPT_MESSAGE.encode())


def on_fatal_signal(signum: int, frame: FrameType | None) -> None:
    signal.signal(signum, signal.SIG_DFL)
    os.write(sys.stderr.fileno(), f"Caught signal {int(signum)}\n".encode())
    raise SystemExit(signum)


def install_signal_handlers(fatal_signals: Iterable[signal.Signals] | None = None) -> None:
    """Register the interrupt and fatal-signal callbacks once at startup."""
    signal.signal(signal.SIGINT, on_interrupt)
    for sig in default_fatal_signals() if fatal_signals is None else fatal_signals:
        signal.signal(sig, on_fatal_signal)
