"""Configuration objects for the engine and the terminal viewer."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for per-generation evaluation."""
    max_workers: Optional[int] = None  # None: one worker per logical CPU
    chunk_size: int = 256              # Frontier cells per work item
    parallel_threshold: int = 512      # Smaller frontiers are evaluated inline

    def __post_init__(self):
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.parallel_threshold < 0:
            raise ValueError(f"parallel_threshold must be non-negative, got {self.parallel_threshold}")


@dataclass(frozen=True)
class ViewerConfig:
    """Configuration for the curses viewer loop."""
    delay_ms: int = 100         # Pause between frames
    input_timeout_ms: int = 10  # Max wait for a pending key per frame
    status_line: bool = True

    def __post_init__(self):
        if self.delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {self.delay_ms}")
        if self.input_timeout_ms < 0:
            raise ValueError(f"input_timeout_ms must be non-negative, got {self.input_timeout_ms}")
