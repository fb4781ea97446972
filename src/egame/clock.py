"""Wall-clock to block quantization."""

from __future__ import annotations

import time

BLOCK_MILLIS = 10_000


def current_block(now_ms: int | None = None, *, block_millis: int = BLOCK_MILLIS) -> int:
    """Return the block number containing ``now_ms`` (defaults to the wall clock)."""

    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return now_ms // block_millis


class Clock:
    """Callable block source bound to a block length."""

    def __init__(self, block_seconds: int = BLOCK_MILLIS // 1000) -> None:
        self.block_millis = block_seconds * 1000

    def __call__(self) -> int:
        return current_block(block_millis=self.block_millis)
