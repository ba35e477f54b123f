"""Generation stepper: parallel evaluation of one generation.

Every frontier cell is evaluated independently against the frozen
previous live-set, so the frontier can be split into chunks and handed
to a worker pool in any order. Results are merged with a set union.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import islice
from typing import FrozenSet, Iterable, Iterator, List, Optional, Set

import psutil

from ..config import EngineConfig
from .neighborhood import neighbors, neighbors_with_self
from .point import Point
from .rules import Rule, State

logger = logging.getLogger(__name__)

LiveSet = FrozenSet[Point]


def smart_bound(alive: Iterable[Point]) -> LiveSet:
    """Coordinates that must be evaluated next generation.

    The union of every live cell's neighborhood including itself. A dead
    cell outside this set has no live neighbor and cannot be born.
    """
    frontier: Set[Point] = set()
    for point in alive:
        frontier.update(neighbors_with_self(point))
    return frozenset(frontier)


def count_live_neighbors(alive: LiveSet, point: Point) -> int:
    """Number of the 3^D - 1 neighbors of point present in alive."""
    return sum(1 for n in neighbors(point) if n in alive)


def evaluate(alive: LiveSet, rule: Rule, point: Point) -> State:
    """Next state of a single cell."""
    state = State.of(point in alive)
    return rule.evaluate(state, count_live_neighbors(alive, point))


def _evaluate_chunk(alive: LiveSet, rule: Rule, chunk: List[Point]) -> List[Point]:
    return [point for point in chunk if evaluate(alive, rule, point) is State.ALIVE]


def _chunked(points: Iterable[Point], size: int) -> Iterator[List[Point]]:
    it = iter(points)
    while True:
        chunk = list(islice(it, size))
        if not chunk:
            return
        yield chunk


class GenerationStepper:
    """Computes successive live-sets, distributing work over a thread pool.

    The pool is created on first use and shared by every generation that
    uses this stepper. Use as a context manager, or call close(), to shut
    the workers down.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """Initialize stepper.

        Args:
            config: Engine configuration (defaults if None)
        """
        self.config = config or EngineConfig()
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def max_workers(self) -> int:
        """Pool size: configured value or the number of logical CPUs."""
        if self.config.max_workers is not None:
            return self.config.max_workers
        return psutil.cpu_count(logical=True) or 1

    def _pool(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=self.max_workers,
                                                thread_name_prefix="hyperlife-step")
            logger.debug(f"Started step pool with {self.max_workers} workers")
        return self._executor

    def step(self, alive: LiveSet, rule: Rule) -> LiveSet:
        """Compute the live-set of the next generation.

        The input is only read. Calling step twice with the same arguments
        yields equal live-sets.

        Args:
            alive: Current live-set
            rule: Transition rule applied to every frontier cell

        Returns:
            New live-set
        """
        frontier = smart_bound(alive)

        if len(frontier) < self.config.parallel_threshold or self.max_workers == 1:
            return frozenset(_evaluate_chunk(alive, rule, list(frontier)))

        pool = self._pool()
        futures = [
            pool.submit(_evaluate_chunk, alive, rule, chunk)
            for chunk in _chunked(frontier, self.config.chunk_size)
        ]

        result: Set[Point] = set()
        for future in futures:
            result.update(future.result())
        return frozenset(result)

    def close(self) -> None:
        """Shut down the worker pool, if one was started."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
            logger.debug("Step pool shut down")

    def __enter__(self) -> 'GenerationStepper':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"GenerationStepper(workers={self.max_workers}, chunk_size={self.config.chunk_size})"
