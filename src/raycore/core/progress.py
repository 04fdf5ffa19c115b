"""Progress reporting sinks for the render loop.

The render loop does not own a progress display. It receives a sink,
announces the total number of units once, increments once per pixel and
finishes once after the last pixel:

    progress.start(width * height)
    for each pixel:
        ...
        progress.increment(1)
    progress.finish()

Sinks:
    NullProgress: Ignores all updates.
    CallbackProgress: Forwards (current, total) to a callback.
    ConsoleProgress: Draws a percentage line on a terminal stream.

Example:
    >>> from raycore.core.progress import CallbackProgress
    >>> def report(current, total):
    ...     print(f"Progress: {current}/{total} pixels")
    >>> render(camera, writer, progress=CallbackProgress(report))
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Protocol, TextIO

# Type alias for progress callback
# Callback receives (current_units, total_units)
ProgressCallback = Callable[[int, int], None]


class ProgressSink(Protocol):
    """Interface consumed by the render loop."""

    def start(self, total: int) -> None: ...

    def increment(self, n: int = 1) -> None: ...

    def finish(self) -> None: ...


class NullProgress:
    """Progress sink that discards every update."""

    def start(self, total: int) -> None:
        pass

    def increment(self, n: int = 1) -> None:
        pass

    def finish(self) -> None:
        pass


class CallbackProgress:
    """Progress sink that forwards every increment to a callback.

    Attributes:
        current: Units completed so far.
        total: Units announced by start().
        finished: Whether finish() has been called.
    """

    def __init__(self, callback: ProgressCallback) -> None:
        self._callback = callback
        self.current = 0
        self.total = 0
        self.finished = False

    def start(self, total: int) -> None:
        self.current = 0
        self.total = total
        self.finished = False

    def increment(self, n: int = 1) -> None:
        self.current += n
        self._callback(self.current, self.total)

    def finish(self) -> None:
        self.finished = True


class ConsoleProgress:
    """Progress sink drawing a single updating percentage line.

    The line is only redrawn when the integer percentage changes, so large
    images do not flood the stream.

    Args:
        stream: Output stream (default stderr so image data on stdout stays clean).
        message: Label printed in front of the percentage.
    """

    def __init__(self, stream: TextIO | None = None, message: str = "rendering") -> None:
        self._stream = stream if stream is not None else sys.stderr
        self._message = message
        self._current = 0
        self._total = 0
        self._last_percent = -1

    @property
    def current(self) -> int:
        """Units completed so far."""
        return self._current

    def start(self, total: int) -> None:
        self._current = 0
        self._total = total
        self._last_percent = -1
        self._draw()

    def increment(self, n: int = 1) -> None:
        self._current += n
        self._draw()

    def finish(self) -> None:
        print(f"\r{self._message} finished", file=self._stream, flush=True)

    def _draw(self) -> None:
        percent = self._current * 100 // self._total if self._total > 0 else 100
        if percent == self._last_percent:
            return
        self._last_percent = percent
        print(
            f"\r{self._message} {percent:3d}% ({self._current}/{self._total})",
            end="",
            file=self._stream,
            flush=True,
        )
