"""Viewer session: the simulation plus a movable 2D viewport.

The session owns the current generation, the viewport centre and the
pause state. It turns commands from the host into engine calls and
renders the plane spanned by axes 0 and 1 around the viewport centre.
"""

import logging
from enum import Enum
from typing import List, Optional

from ..core.life import Life
from ..core.point import Point
from .controls import Command, Exit, Pan, Step, TogglePause

logger = logging.getLogger(__name__)

ALIVE_CHAR = "#"
DEAD_CHAR = " "


class Direction(Enum):
    """Direction of a viewport move along one axis."""
    FORWARD = 1
    BACKWARDS = -1


class Session:
    """Interactive state layered on top of a Life simulation.

    Attributes:
        game: Current generation
        position: Viewport centre; its axes 2.. select the rendered plane
        paused: Whether the animation loop should hold the current generation
        running: False once an exit has been requested
    """

    def __init__(self, game: Life, position: Optional[Point] = None):
        self.game = game
        self.position = position or Point.origin(game.dimension)
        self.paused = False
        self.running = True

    def update_position(self, direction: Direction, axis: int) -> Point:
        """Move the viewport one cell along axis.

        An axis outside [0, D) leaves the viewport unchanged.

        Returns:
            The viewport position after the move
        """
        if not 0 <= axis < self.game.dimension:
            logger.debug(f"Ignoring pan along axis {axis} of a {self.game.dimension}D simulation")
            return self.position

        self.position = self.position.with_axis(axis, self.position[axis] + direction.value)
        return self.position

    def advance(self) -> Life:
        """Move the simulation to its next generation."""
        self.game = self.game.advance()
        return self.game

    def tick(self) -> bool:
        """Advance one frame of the animation unless paused.

        Returns:
            True if a new generation was computed
        """
        if self.paused or not self.running:
            return False
        self.advance()
        return True

    def handle(self, command: Command) -> None:
        """Apply a host command."""
        if isinstance(command, Pan):
            self.update_position(Direction(command.delta), command.axis)
        elif isinstance(command, TogglePause):
            self.paused = not self.paused
            logger.debug(f"{'Paused' if self.paused else 'Resumed'} at generation {self.game.generation}")
        elif isinstance(command, Step):
            # Single steps only make sense while the animation is held
            if self.paused:
                self.advance()
        elif isinstance(command, Exit):
            self.running = False

    def render(self, width: int, height: int) -> str:
        """Text window of height rows by width columns centred on the viewport.

        Screen rows follow axis 0 and screen columns axis 1.
        """
        return "\n".join(self.render_lines(width, height))

    def render_lines(self, width: int, height: int) -> List[str]:
        if height < 1:
            return []
        center = self.position
        if self.game.dimension == 1:
            # A 1D lattice is drawn as a single row along axis 0
            left = center[0] - width // 2
            row = "".join(ALIVE_CHAR if Point((left + x,)) in self.game.alive else DEAD_CHAR
                          for x in range(width))
            return [row] + [DEAD_CHAR * width] * (height - 1)

        top = center[0] - height // 2
        left = center[1] - width // 2
        rest = center.coords[2:]

        # Only cells on the visible plane can be drawn
        visible = {
            (p[0], p[1]) for p in self.game.alive
            if p.coords[2:] == rest
            and top <= p[0] < top + height
            and left <= p[1] < left + width
        }
        return [
            "".join(ALIVE_CHAR if (top + y, left + x) in visible else DEAD_CHAR
                    for x in range(width))
            for y in range(height)
        ]

    def status(self) -> str:
        """One-line summary for the status bar."""
        coords = ",".join(str(c) for c in self.position)
        state = " [paused]" if self.paused else ""
        return (f"gen {self.game.generation}  cells {self.game.active_cells()}  "
                f"pos ({coords}){state}")
