"""Canonical Life patterns as plates.

Still lifes, oscillators, spaceships and guns used for seeding the
simulation and for regression tests. Each entry is a list of plate rows
with '#' for live cells.
"""

from typing import Dict, List

PATTERNS: Dict[str, List[str]] = {
    # Still lifes
    "block": [
        "##",
        "##",
    ],
    "beehive": [
        ".##.",
        "#..#",
        ".##.",
    ],
    # Oscillators
    "blinker": [
        "###",
    ],
    "toad": [
        ".###",
        "###.",
    ],
    "beacon": [
        "##..",
        "##..",
        "..##",
        "..##",
    ],
    # Spaceships
    "glider": [
        ".#.",
        "..#",
        "###",
    ],
    "lwss": [
        ".#..#",
        "#....",
        "#...#",
        "####.",
    ],
    # Methuselahs
    "r_pentomino": [
        ".##",
        "##.",
        ".#.",
    ],
    "diehard": [
        "......#.",
        "##......",
        ".#...###",
    ],
    # Guns
    "gosper_gun": [
        "........................#...........",
        "......................#.#...........",
        "............##......##............##",
        "...........#...#....##............##",
        "##........#.....#...##..............",
        "##........#...#.##....#.#...........",
        "..........#.....#.......#...........",
        "...........#...#....................",
        "............##......................",
    ],
}


def get_pattern(name: str) -> List[str]:
    """Plate rows of a named pattern.

    Raises:
        KeyError: If the pattern is unknown
    """
    try:
        return list(PATTERNS[name])
    except KeyError:
        raise KeyError(f"Unknown pattern {name!r}; available: {', '.join(sorted(PATTERNS))}") from None


def list_patterns() -> List[str]:
    """Names of all bundled patterns."""
    return sorted(PATTERNS)
