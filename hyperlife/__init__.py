"""
hyperlife: sparse Game of Life in any number of dimensions.

Only live cells are stored, and each generation evaluates just the live
cells and their neighbors, so cost follows activity rather than the size
of the lattice.
"""

import logging

from .core import GenerationStepper, Life, LifeRule, Point, State

__version__ = "0.1.0"

# Applications decide where log records go
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'GenerationStepper',
    'Life',
    'LifeRule',
    'Point',
    'State',
]
