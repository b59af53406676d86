"""Millisecond clock helpers and a sleep that can be cut short."""

from __future__ import annotations

import threading
import time

SLEEP_CHUNK_S = 0.001


def now_ms() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def elapsed_ms(since: int) -> int:
    """Return the milliseconds passed since the given timestamp."""
    return now_ms() - since


def interruptible_sleep(duration_ms: int, stop_event: threading.Event) -> bool:
    """Sleep for duration_ms in small chunks, stopping early once stop_event is set.

    A negative duration never runs out and waits for stop_event alone.
    Returns True when the full duration passed, False when stopped early.
    """
    start = now_ms()
    while duration_ms < 0 or now_ms() - start < duration_ms:
        if stop_event.is_set():
            return False
        stop_event.wait(SLEEP_CHUNK_S)
    return True