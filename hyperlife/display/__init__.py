"""Terminal viewer built on the engine's query and step interface."""

from .controls import Exit, InputChannel, Pan, Step, StopToken, TogglePause, build_key_map
from .session import Direction, Session

__all__ = [
    'Exit',
    'InputChannel',
    'Pan',
    'Step',
    'StopToken',
    'TogglePause',
    'build_key_map',
    'Direction',
    'Session',
]
