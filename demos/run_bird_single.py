#!/usr/bin/env python3
"""
RUN_BIRD_SINGLE: Generate and Export One Bird
=============================================

This demo shows the complete parameters-to-print workflow:
1. Pick a bird (default, seed string, catalog or random)
2. Generate head and body meshes
3. Export a merged ASCII STL
4. Save an interactive 3D preview

Run with:
    python demos/run_bird_single.py
    python demos/run_bird_single.py --seed m.15.80.5.10.h.22.32.7.4.32.10.9.b.60.40.90.25.25.t.50.22.-5.40.80.c.100
    python demos/run_bird_single.py --good --rng-seed 7

Outputs:
    artifacts/coolbird.stl    - Printable model
    artifacts/bird_3d.html    - Interactive 3D visualization
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from birdcraft.config import CONFIG
from birdcraft.params import BirdParams, FIELDS
from birdcraft.seed import decode_seed, encode_seed, SeedError
from birdcraft.catalog import pick_good_bird
from birdcraft.breed import random_params
from birdcraft.geometry import build_bird
from birdcraft.export import export_bird_stl, count_facets
from birdcraft.viz import plot_bird_3d


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {text}")
    print("=" * 70)


def choose_bird(args) -> BirdParams:
    rng = np.random.default_rng(args.rng_seed)
    if args.seed:
        return decode_seed(args.seed)
    if args.good:
        return pick_good_bird(rng)
    if args.random:
        return random_params(rng)
    return BirdParams()


def main():
    parser = argparse.ArgumentParser(
        description='Generate one bird and export it as STL + HTML preview',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--seed', type=str, default=None, help='Bird seed string')
    source.add_argument('--good', action='store_true', help='Pick from the curated catalog')
    source.add_argument('--random', action='store_true', help='Randomize all parameters')
    parser.add_argument('--rng-seed', type=int, default=None, help='Random seed for --good/--random')
    parser.add_argument('--outdir', type=str, default='artifacts', help='Output directory (default: artifacts)')
    parser.add_argument('--no-html', action='store_true', help='Skip the HTML preview')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # =========================================================================
    # STEP 1: CHOOSE BIRD
    # =========================================================================
    print_header("STEP 1: Bird Parameters")
    try:
        params = choose_bird(args)
    except SeedError as e:
        print(f"  Could not read seed: {e}")
        return 1

    section = None
    for entry in FIELDS:
        if entry.section != section:
            section = entry.section
            print(f"\n  [{section}]")
        print(f"    {entry.name:<22} {entry.get(params):8.2f}   ({entry.low:g} .. {entry.high:g})")
    print(f"\n  Seed: {encode_seed(params)}")

    # =========================================================================
    # STEP 2: GENERATE GEOMETRY
    # =========================================================================
    print_header("STEP 2: Generate Geometry")
    meshes = build_bird(params)
    print(f"""
    Head:  {len(meshes.head.faces):6d} triangles
    Body:  {len(meshes.body.faces):6d} triangles
    Body extents: {meshes.body.extents.round(1)}
    """)

    # =========================================================================
    # STEP 3: EXPORT
    # =========================================================================
    print_header("STEP 3: Export")
    os.makedirs(args.outdir, exist_ok=True)

    stl_bytes = export_bird_stl(params)
    stl_path = os.path.join(args.outdir, CONFIG.stl_filename)
    with open(stl_path, 'wb') as f:
        f.write(stl_bytes)
    print(f"  STL exported to: {stl_path} ({count_facets(stl_bytes.decode('ascii'))} facets)")

    if not args.no_html:
        html_path = os.path.join(args.outdir, 'bird_3d.html')
        plot_bird_3d(meshes, title=encode_seed(params), outpath=html_path, show=False)
        print(f"  Preview saved to: {html_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
