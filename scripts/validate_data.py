#!/usr/bin/env python3
"""
Validate Bacon Game data files and report graph statistics.

Usage:
    python scripts/validate_data.py
    python scripts/validate_data.py --data-dir path/to/inputs
"""

import argparse
import logging
import sys
import time
from collections import Counter
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bacon.config import DATA_DIR, DEFAULT_CENTER, data_paths  # noqa: E402 - must be after sys.path modification
from bacon.data import BaconData  # noqa: E402
from bacon.graph import (  # noqa: E402
    average_separation,
    bfs,
    missing_vertices,
    separations,
    vertices_by_in_degree,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)


def check_data_files_exist(data_dir: Path) -> bool:
    """Check that all data files exist."""
    print("\n=== Checking Data Files ===\n")

    all_exist = True
    for path in data_paths(data_dir).values():
        exists = path.exists()
        size_kb = path.stat().st_size / 1024 if exists else 0
        status = f"✓ {path.name}: {size_kb:,.1f} KB" if exists else f"✗ {path.name}: NOT FOUND"
        print(status)
        if not exists:
            all_exist = False

    return all_exist


def load_and_validate(data_dir: Path, center: str) -> bool:
    """Load the data, build the graph, and print statistics."""
    print("\n=== Loading Data ===\n")

    start_time = time.time()
    data = BaconData.from_dir(data_dir)
    try:
        graph = data.build_graph()
    except ValueError as e:
        print(f"✗ {e}")
        return False
    print(f"Built graph in {time.time() - start_time:.2f}s")

    print("\n=== Statistics ===\n")
    for key, value in data.stats().items():
        print(f"  {key}: {value:,}")
    print(f"  collaborations: {graph.num_edges() // 2:,}")

    top = vertices_by_in_degree(graph)[:5]
    print("\nMost connected actors:")
    for actor in top:
        print(f"  {actor}: {graph.in_degree(actor):,} costars")

    print(f"\n=== Separation from {center} ===\n")
    tree = bfs(graph, center)
    if tree.num_vertices() == 0:
        print(f"✗ {center} not found in data")
        return False

    print(f"  connected: {tree.num_vertices() - 1:,}/{graph.num_vertices():,}")
    print(f"  unreachable: {len(missing_vertices(graph, tree)):,}")
    avg = average_separation(tree, center)
    print(f"  average separation: {avg:.3f}" if avg is not None else "  average separation: undefined")

    histogram = Counter(separations(tree, center).values())
    for distance in sorted(histogram):
        print(f"  {distance}: {histogram[distance]:,} actors")

    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate Bacon Game data files")
    parser.add_argument("--data-dir", type=Path, default=DATA_DIR)
    parser.add_argument("--center", type=str, default=DEFAULT_CENTER)
    args = parser.parse_args()

    if not check_data_files_exist(args.data_dir):
        print("\nSome data files are missing.")
        return 1

    if not load_and_validate(args.data_dir, args.center):
        return 1

    print("\n✓ All checks passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
