#!/usr/bin/env python3
"""
RUN_BIRD_BREEDING: Walk Through Generations of Birds
====================================================

Starts from a bird and repeatedly breeds a left/right pair of children,
picking one side at random each generation, the same loop a user drives by
clicking "left bird" / "right bird".

Run with:
    python demos/run_bird_breeding.py --generations 10 --rng-seed 42

Outputs:
    artifacts/lineage.txt   - One seed per generation
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from birdcraft.session import BirdLab
from birdcraft.seed import SeedError


def main():
    parser = argparse.ArgumentParser(description='Breed birds for several generations')
    parser.add_argument('--generations', type=int, default=10, help='Number of generations (default: 10)')
    parser.add_argument('--rng-seed', type=int, default=42, help='Random seed for reproducibility (default: 42)')
    parser.add_argument('--start', type=str, default=None, help='Starting seed (default: a catalog bird)')
    parser.add_argument('--outdir', type=str, default='artifacts', help='Output directory (default: artifacts)')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    rng = np.random.default_rng(args.rng_seed)

    lab = BirdLab()
    if args.start:
        try:
            lab.load_seed(args.start)
        except SeedError as e:
            print(f"Could not read starting seed: {e}")
            return 1
    else:
        lab.load_good_bird(rng)

    lineage = [lab.seed]
    print(f"gen  0  {lab.seed}")
    for generation in range(1, args.generations + 1):
        lab.new_offspring(rng)
        side = 'left' if rng.random() < 0.5 else 'right'
        lab.select(side)
        lineage.append(lab.seed)
        print(f"gen {generation:2d}  {lab.seed}   ({side})")

    os.makedirs(args.outdir, exist_ok=True)
    outpath = os.path.join(args.outdir, 'lineage.txt')
    with open(outpath, 'w') as f:
        f.write("\n".join(lineage) + "\n")
    print(f"\nLineage saved to: {outpath}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
