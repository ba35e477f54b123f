"""Host input contract for the viewer.

Keys are translated into commands (pan, pause toggle, single step, exit)
and passed from the key-reader thread to the render loop through a
single-slot channel. When the loop falls behind, only the most recent
command is kept.
"""

import curses
import logging
import queue
import threading
from dataclasses import dataclass
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pan:
    """Move the viewport one cell along an axis."""
    axis: int
    delta: int  # +1 or -1

    def __post_init__(self):
        if self.delta not in (-1, 1):
            raise ValueError(f"Pan delta must be +1 or -1, got {self.delta}")


@dataclass(frozen=True)
class TogglePause:
    """Pause or resume the animation."""


@dataclass(frozen=True)
class Step:
    """Advance a single generation while paused."""


@dataclass(frozen=True)
class Exit:
    """Stop the viewer."""


Command = Union[Pan, TogglePause, Step, Exit]

# Axes 2.. are panned with letter pairs: (forward, backward)
EXTRA_AXIS_KEYS = ["ws", "ed", "rf", "tg", "yh", "uj"]


def build_key_map(dimension: int) -> Dict[int, Command]:
    """Key code to command mapping for a simulation of the given dimension.

    Arrow keys pan axes 0 (up/down) and 1 (left/right). Higher axes use
    letter pairs, w/s for axis 2, e/d for axis 3 and so on.
    """
    keys: Dict[int, Command] = {
        curses.KEY_UP: Pan(0, -1),
        curses.KEY_DOWN: Pan(0, 1),
        curses.KEY_LEFT: Pan(1, -1),
        curses.KEY_RIGHT: Pan(1, 1),
        ord(" "): TogglePause(),
        ord("n"): Step(),
        ord("\n"): Step(),
        ord("q"): Exit(),
        ord("Q"): Exit(),
        27: Exit(),  # Escape
    }
    for axis, (forward, backward) in enumerate(EXTRA_AXIS_KEYS[:max(0, dimension - 2)], start=2):
        keys[ord(forward)] = Pan(axis, 1)
        keys[ord(backward)] = Pan(axis, -1)
    return keys


class StopToken:
    """Cooperative cancellation flag shared by the viewer threads."""

    def __init__(self):
        self._event = threading.Event()

    def set(self) -> None:
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._event.wait(timeout)


class InputChannel:
    """Bounded single-slot channel that prefers the latest input."""

    def __init__(self):
        self._queue: "queue.Queue[Command]" = queue.Queue(maxsize=1)
        self._lock = threading.Lock()
        self.dropped = 0

    def offer(self, command: Command) -> None:
        """Store command, replacing any pending one. Never blocks."""
        with self._lock:
            try:
                self._queue.put_nowait(command)
            except queue.Full:
                try:
                    stale = self._queue.get_nowait()
                    self.dropped += 1
                    logger.debug(f"Dropped stale input {stale}")
                except queue.Empty:
                    pass
                self._queue.put_nowait(command)

    def poll(self, timeout: float = 0.0) -> Optional[Command]:
        """Pending command, waiting at most timeout seconds; None if none arrived."""
        try:
            if timeout <= 0:
                return self._queue.get_nowait()
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None
