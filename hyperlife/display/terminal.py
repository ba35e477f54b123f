"""Curses viewer for a running simulation.

A background thread reads keys and offers them to a single-slot input
channel; the render loop polls that channel with a short timeout, applies
the newest command, advances the simulation unless paused and redraws.
Curses is not thread-safe, so both threads touch the window only while
holding one shared lock; the reader polls in no-delay mode and waits
outside the lock. An exit key sets the shared stop token so both threads
wind down and curses.wrapper restores the terminal.
"""

import curses
import logging
import threading
import time
from typing import Optional

from ..config import ViewerConfig
from .controls import Exit, InputChannel, StopToken, build_key_map
from .session import Session

logger = logging.getLogger(__name__)


def read_keys(stdscr: 'curses.window', channel: InputChannel, stop: StopToken,
              dimension: int, lock: Optional[threading.Lock] = None,
              poll_interval: float = 0.01) -> None:
    """Translate key presses into commands until stop is set.

    Args:
        stdscr: Window in no-delay mode
        channel: Latest-wins command buffer read by the render loop
        stop: Ends the loop once set
        dimension: Number of lattice axes, selects the key bindings
        lock: Guards every curses call shared with the render loop
        poll_interval: Seconds to wait when no key is pending
    """
    lock = lock or threading.Lock()
    key_map = build_key_map(dimension)
    while not stop.is_set():
        with lock:
            try:
                key = stdscr.getch()
            except curses.error:
                key = -1

        if key == -1:
            stop.wait(poll_interval)
            continue

        command = key_map.get(key)
        if command is None:
            continue

        channel.offer(command)
        if isinstance(command, Exit):
            return


def draw(stdscr: 'curses.window', session: Session, config: ViewerConfig,
         lock: Optional[threading.Lock] = None) -> None:
    """Redraw the viewport and the status line."""
    lock = lock or threading.Lock()
    with lock:
        max_y, max_x = stdscr.getmaxyx()
        rows = max_y - 1 if config.status_line else max_y
        # Writing the bottom-right cell raises curses.error; stay one column short
        lines = session.render_lines(max(0, max_x - 1), max(0, rows))

        stdscr.erase()
        for y, line in enumerate(lines):
            try:
                stdscr.addstr(y, 0, line)
            except curses.error:
                pass

        if config.status_line:
            try:
                stdscr.addstr(max_y - 1, 0, session.status()[:max_x - 1], curses.A_DIM)
            except curses.error:
                pass
        stdscr.refresh()


def run(stdscr: 'curses.window', session: Session, config: Optional[ViewerConfig] = None,
        stop: Optional[StopToken] = None) -> Session:
    """Animate session inside an initialised curses screen.

    Returns:
        The session in its final state
    """
    config = config or ViewerConfig()
    stop = stop or StopToken()
    channel = InputChannel()
    screen_lock = threading.Lock()

    curses.curs_set(0)
    stdscr.keypad(True)
    stdscr.nodelay(True)

    reader = threading.Thread(target=read_keys,
                              args=(stdscr, channel, stop, session.game.dimension,
                                    screen_lock, config.input_timeout_ms / 1000),
                              name="hyperlife-keys", daemon=True)
    reader.start()
    logger.info(f"Viewer started: {session.game!r}")

    try:
        while session.running and not stop.is_set():
            command = channel.poll(config.input_timeout_ms / 1000)
            if command is not None:
                session.handle(command)
                if not session.running:
                    break

            session.tick()
            draw(stdscr, session, config, screen_lock)
            time.sleep(config.delay_ms / 1000)
    finally:
        stop.set()
        reader.join(timeout=1.0)
        session.game.stepper.close()

    logger.info(f"Viewer stopped at generation {session.game.generation}")
    return session


def launch(session: Session, config: Optional[ViewerConfig] = None) -> Session:
    """Run the viewer in the current terminal and restore it afterwards."""
    return curses.wrapper(run, session, config)
