"""Sparse D-dimensional Game of Life simulation.

A Life instance holds the live-set of one generation together with its
rule and dimensionality. Only live cells are stored; every other lattice
cell is dead. advance() never mutates the instance, it returns the next
generation as a new Life sharing the same rule and stepper.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import DimensionMismatchError
from .point import Point, check_dimension
from .rules import RuleLike, State, as_rule
from .stepper import GenerationStepper, LiveSet, smart_bound

logger = logging.getLogger(__name__)


class Life:
    """One generation of a sparse cellular automaton.

    Attributes:
        alive: Frozen set of live coordinates
        rule: Transition rule, fixed for the lifetime of the simulation
        dimension: Number of lattice axes shared by every coordinate
        generation: Number of steps taken from the initial pattern
    """

    def __init__(self,
                 initial: Iterable[Point] = (),
                 rule: Optional[RuleLike] = None,
                 dimension: Optional[int] = None,
                 stepper: Optional[GenerationStepper] = None,
                 generation: int = 0):
        """Initialize simulation.

        Args:
            initial: Live coordinates of generation 0
            rule: Rule object or (state, count) -> state function; standard Life if None
            dimension: Number of axes; inferred from the cells if None
            stepper: Stepper evaluating generations; a default one if None
            generation: Generation index of this state

        Raises:
            ValueError: If the dimension cannot be inferred or is below 1
            DimensionMismatchError: If a cell has a different number of axes
        """
        alive = frozenset(initial)

        if dimension is None:
            if not alive:
                raise ValueError("dimension is required when the initial pattern is empty")
            dimension = next(iter(alive)).dimension
        if dimension < 1:
            raise ValueError(f"Dimension must be at least 1, got {dimension}")

        check_dimension(alive, dimension)

        self.alive: LiveSet = alive
        self.rule = as_rule(rule)
        self.dimension = dimension
        self.stepper = stepper or GenerationStepper()
        self.generation = generation

    @classmethod
    def from_plate(cls, plate: Sequence[str], rule: Optional[RuleLike] = None,
                   dimension: int = 2, stepper: Optional[GenerationStepper] = None) -> 'Life':
        """Seed a simulation from text rows where '#' marks a live cell.

        Row index maps to axis 0 and column index to axis 1; any further
        axes are zero, so higher dimensions start from a 2D slice.
        """
        from ..patterns.plate import parse_plate
        return cls(parse_plate(plate, dimension), rule, dimension, stepper)

    @classmethod
    def from_plate_default_rules(cls, plate: Sequence[str], dimension: int = 2,
                                 stepper: Optional[GenerationStepper] = None) -> 'Life':
        """Seed a simulation from a plate under standard B3/S23 rules."""
        return cls.from_plate(plate, None, dimension, stepper)

    def get(self, point: Point) -> State:
        """State of a single lattice cell.

        Raises:
            DimensionMismatchError: If point has the wrong number of axes
        """
        if point.dimension != self.dimension:
            raise DimensionMismatchError(self.dimension, point.dimension)
        return State.of(point in self.alive)

    def active_cells(self) -> int:
        """Number of live cells."""
        return len(self.alive)

    def smart_bound(self) -> LiveSet:
        """Frontier: every live cell and every neighbor of one."""
        return smart_bound(self.alive)

    def advance(self) -> 'Life':
        """Compute the next generation as a new Life."""
        alive = self.stepper.step(self.alive, self.rule)
        return Life(alive, self.rule, self.dimension, self.stepper, self.generation + 1)

    next = advance

    def evolve(self, generations: Optional[int] = None, stop=None) -> Iterator['Life']:
        """Yield successive generations, starting with the one after self.

        Args:
            generations: Number of generations to yield; unbounded if None
            stop: Optional StopToken; iteration ends once it is set

        Yields:
            Each new generation in order
        """
        current = self
        produced = 0
        while generations is None or produced < generations:
            if stop is not None and stop.is_set():
                logger.debug(f"Evolution stopped at generation {current.generation}")
                return
            current = current.advance()
            produced += 1
            yield current

    def bounds(self) -> Optional[List[Tuple[int, int]]]:
        """Per-axis (min, max) of the live cells, or None if extinct."""
        if not self.alive:
            return None
        return [
            (min(p[axis] for p in self.alive), max(p[axis] for p in self.alive))
            for axis in range(self.dimension)
        ]

    def is_extinct(self) -> bool:
        return not self.alive

    def __contains__(self, point: object) -> bool:
        return point in self.alive

    def __len__(self) -> int:
        return len(self.alive)

    def __eq__(self, other: object) -> bool:
        """Two simulations are equal when their cells, rule and dimension match."""
        if not isinstance(other, Life):
            return False
        return (self.dimension == other.dimension and
                self.alive == other.alive and
                self.rule == other.rule)

    __hash__ = None

    def __repr__(self) -> str:
        return (f"Life(D={self.dimension}, generation={self.generation}, "
                f"alive={len(self.alive)}, rule={self.rule!r})")
