"""Initial patterns: plate parsing and a library of classic configurations."""

from .library import PATTERNS, get_pattern, list_patterns
from .plate import cells_from_array, load_plate, parse_plate, plate_to_array, read_plate, to_plate

__all__ = [
    'PATTERNS',
    'get_pattern',
    'list_patterns',
    'cells_from_array',
    'load_plate',
    'parse_plate',
    'plate_to_array',
    'read_plate',
    'to_plate',
]
