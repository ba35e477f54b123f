"""Sparse N-dimensional cellular automaton engine."""

from .errors import DimensionMismatchError, RuleParseError
from .life import Life
from .neighborhood import neighbor_offsets, neighbors, neighbors_with_self
from .point import Point, add, offset
from .rules import FunctionRule, LifeRule, Rule, State, as_rule, conway, rule_table
from .stepper import GenerationStepper, smart_bound

__all__ = [
    'DimensionMismatchError',
    'RuleParseError',
    'Life',
    'neighbor_offsets',
    'neighbors',
    'neighbors_with_self',
    'Point',
    'add',
    'offset',
    'FunctionRule',
    'LifeRule',
    'Rule',
    'State',
    'as_rule',
    'conway',
    'rule_table',
    'GenerationStepper',
    'smart_bound',
]
