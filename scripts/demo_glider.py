#!/usr/bin/env python3
"""
Glider Demonstration Script

Runs a glider on the unbounded sparse lattice and checks that it keeps
its five cells while travelling diagonally. Unlike a fixed grid there
are no edges to wrap around or collide with.
"""

import sys
import os
import json
import logging
from pathlib import Path

import numpy as np

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

from hyperlife.core.life import Life
from hyperlife.patterns.library import get_pattern


def center_of_mass(game: Life) -> np.ndarray:
    """Mean position of live cells on every axis."""
    if game.is_extinct():
        return np.zeros(game.dimension)
    coords = np.array([p.coords for p in game.alive], dtype=float)
    return coords.mean(axis=0)


def run_glider_demo(steps=40, dimensions=2):
    """Run glider demonstration and return metrics."""
    logger.info("=== GLIDER DEMONSTRATION ===")
    logger.info(f"Dimensions: {dimensions}")
    logger.info(f"Evolution steps: {steps}")

    game = Life.from_plate_default_rules(get_pattern("glider"), dimension=dimensions)

    initial_com = center_of_mass(game)
    live_counts = [game.active_cells()]
    logger.info(f"Initial COM: {np.round(initial_com, 2).tolist()}, live cells: {live_counts[0]}")

    with game.stepper:
        for current in game.evolve(steps):
            live_counts.append(current.active_cells())
            if current.generation % 10 == 0:
                com = center_of_mass(current)
                logger.info(f"Generation {current.generation}: COM={np.round(com, 1).tolist()}, "
                            f"Live={current.active_cells()}")
            game = current

    displacement = center_of_mass(game) - initial_com
    distance = float(np.linalg.norm(displacement))

    results = {
        "dimensions": dimensions,
        "steps": steps,
        "initial_com": initial_com.tolist(),
        "displacement": displacement.tolist(),
        "total_distance": distance,
        "live_count_history": live_counts,
        "mass_conserved": all(count == 5 for count in live_counts),
    }

    logger.info("=== FINAL METRICS ===")
    logger.info(f"Displacement: {np.round(displacement, 2).tolist()}")
    logger.info(f"Total distance: {distance:.2f}")
    logger.info(f"Mass conserved: {'YES' if results['mass_conserved'] else 'NO'}")
    return results


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Glider Demonstration")
    parser.add_argument("--steps", type=int, default=40, help="Evolution steps")
    parser.add_argument("--dimensions", type=int, default=2, help="Lattice dimensions")
    parser.add_argument("--output", type=str, default=None, help="Write results as JSON to this file")

    args = parser.parse_args()

    try:
        results = run_glider_demo(steps=args.steps, dimensions=args.dimensions)

        if args.output:
            Path(args.output).parent.mkdir(parents=True, exist_ok=True)
            with open(args.output, 'w') as f:
                json.dump(results, f, indent=2)
            logger.info(f"Results saved to: {args.output}")

        print(f"\nGlider moved {results['total_distance']:.1f} cells in {results['steps']} generations")

    except Exception as e:
        logger.error(f"Demonstration failed: {e}")
        sys.exit(1)
