"""Transition rules for Life-like cellular automata.

A rule maps (current state, live-neighbor count) to the next state. The
stepper only ever sees the Rule interface, so variant automata are a
matter of passing a different rule object. Rules must be pure: the
stepper evaluates them concurrently and in no particular order.
"""

import re
from enum import Enum
from typing import Callable, Dict, FrozenSet, Iterable, Optional, Tuple, Union

from .errors import RuleParseError


class State(Enum):
    """State of a single lattice cell."""
    ALIVE = 1
    DEAD = 0

    @classmethod
    def of(cls, alive: bool) -> 'State':
        return cls.ALIVE if alive else cls.DEAD

    @property
    def is_alive(self) -> bool:
        return self is State.ALIVE


# Standard Conway rules
BIRTH_SET: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbors
SURVIVAL_SET: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors


class Rule:
    """Capability interface for a transition rule.

    Subclasses implement evaluate(); they may carry configuration but
    must not change it while a simulation is running.
    """

    def evaluate(self, state: State, live_neighbors: int) -> State:
        raise NotImplementedError

    def __call__(self, state: State, live_neighbors: int) -> State:
        return self.evaluate(state, live_neighbors)


class LifeRule(Rule):
    """Birth/survival rule of the Life family (B3/S23 and relatives).

    Attributes:
        birth: Neighbor counts that turn a dead cell alive
        survival: Neighbor counts that keep a live cell alive
    """

    def __init__(self,
                 birth: Optional[Iterable[int]] = None,
                 survival: Optional[Iterable[int]] = None):
        """Initialize rule parameters.

        Args:
            birth: Neighbor counts for dead cell birth (default {3})
            survival: Neighbor counts for live cell survival (default {2,3})

        Raises:
            ValueError: If any count is negative
        """
        self.birth: FrozenSet[int] = frozenset(birth) if birth is not None else BIRTH_SET
        self.survival: FrozenSet[int] = frozenset(survival) if survival is not None else SURVIVAL_SET

        if any(n < 0 for n in self.birth | self.survival):
            raise ValueError(f"Neighbor counts must be non-negative: {self!r}")

    @classmethod
    def standard(cls) -> 'LifeRule':
        """Create standard Conway rules."""
        return cls(BIRTH_SET, SURVIVAL_SET)

    @classmethod
    def parse(cls, rulestring: str) -> 'LifeRule':
        """Parse B/S notation such as "B3/S23", "b36/s23" or "23/3".

        Digits inside a clause are read one count per digit ("S23" is
        {2, 3}). Counts above 9, which occur in three or more dimensions,
        are written comma separated ("B5,13/S4,5,6"), a lone one with a
        trailing comma ("B10,/S23").

        Raises:
            RuleParseError: If the string is not valid B/S notation
        """
        text = rulestring.strip()
        parts = text.split("/")
        if len(parts) != 2:
            raise RuleParseError(f"Rulestring must have exactly one '/': {rulestring!r}")

        first, second = parts
        if first[:1].upper() == "B" and second[:1].upper() == "S":
            birth, survival = first[1:], second[1:]
        elif first[:1].upper() == "S" and second[:1].upper() == "B":
            survival, birth = first[1:], second[1:]
        elif not first[:1].isalpha() and not second[:1].isalpha():
            # Legacy S/B order without letters, e.g. "23/3"
            survival, birth = first, second
        else:
            raise RuleParseError(f"Cannot tell birth from survival in {rulestring!r}")

        return cls(_parse_counts(birth, rulestring), _parse_counts(survival, rulestring))

    @property
    def rulestring(self) -> str:
        """B/S notation for this rule."""
        return f"B{_format_counts(self.birth)}/S{_format_counts(self.survival)}"

    def evaluate(self, state: State, live_neighbors: int) -> State:
        if state is State.ALIVE:
            return State.of(live_neighbors in self.survival)
        return State.of(live_neighbors in self.birth)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LifeRule):
            return NotImplemented
        return self.birth == other.birth and self.survival == other.survival

    def __hash__(self) -> int:
        return hash((self.birth, self.survival))

    def __repr__(self) -> str:
        return f"LifeRule({self.rulestring})"


class FunctionRule(Rule):
    """Adapts a bare (state, count) -> state function to the Rule interface."""

    def __init__(self, fn: Callable[[State, int], State]):
        self.fn = fn

    def evaluate(self, state: State, live_neighbors: int) -> State:
        return self.fn(state, live_neighbors)

    def __repr__(self) -> str:
        name = getattr(self.fn, "__name__", repr(self.fn))
        return f"FunctionRule({name})"


RuleLike = Union[Rule, Callable[[State, int], State]]


def as_rule(rule: Optional[RuleLike]) -> Rule:
    """Coerce a Rule, a bare function, or None (standard Life) into a Rule."""
    if rule is None:
        return LifeRule.standard()
    if isinstance(rule, Rule):
        return rule
    if callable(rule):
        return FunctionRule(rule)
    raise TypeError(f"Expected a Rule or callable, got {type(rule).__name__}")


def conway(state: State, live_neighbors: int) -> State:
    """Standard Game of Life transition as a plain function."""
    if state is State.ALIVE:
        # Survival rule
        return State.of(live_neighbors in SURVIVAL_SET)
    else:
        # Birth rule
        return State.of(live_neighbors in BIRTH_SET)


def rule_table(rule: RuleLike, max_neighbors: int = 8) -> Dict[Tuple[State, int], State]:
    """Tabulate a rule for every state and every count 0..max_neighbors.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state
    """
    rule = as_rule(rule)
    return {
        (state, count): rule.evaluate(state, count)
        for state in (State.DEAD, State.ALIVE)
        for count in range(max_neighbors + 1)
    }


_CLAUSE = re.compile(r"^[0-9,]*$")


def _parse_counts(clause: str, rulestring: str) -> FrozenSet[int]:
    if not _CLAUSE.match(clause):
        raise RuleParseError(f"Invalid neighbor counts {clause!r} in {rulestring!r}")
    if "," in clause:
        # A lone multi-digit count is written with a trailing comma ("B10,")
        items = (clause[:-1] if clause.endswith(",") else clause).split(",")
        if not all(items):
            raise RuleParseError(f"Empty count in {clause!r} of {rulestring!r}")
        return frozenset(int(item) for item in items)
    return frozenset(int(ch) for ch in clause)


def _format_counts(counts: FrozenSet[int]) -> str:
    ordered = sorted(counts)
    if any(n > 9 for n in ordered):
        text = ",".join(str(n) for n in ordered)
        return text + "," if len(ordered) == 1 else text
    return "".join(str(n) for n in ordered)
