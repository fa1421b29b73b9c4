#!/usr/bin/env python3
"""
RUN_TRIANGLE: Method-of-Joints Truss Demo
=========================================

Solves a truss and prints member forces and support reactions.

Without arguments, solves the reference triangle:

            N2 (0, 4)   ↓ 20
           /  \\
       M0 /    \\ M1
         /      \\
    N0 (-3,0)----N1 (3,0)
    Pinned   M2   RollerY

    Expected: M0 = M1 = -12.5 (C), M2 = +7.5 (T), Ry0 = Ry1 = 10

Run with:
    python demos/run_triangle.py
    python demos/run_triangle.py --model my_truss.json --plot artifacts/truss.png
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from truss2d import (
    Load, Member, Node, Support, SupportKind, TrussError, TrussModel, solve_truss,
)
from truss2d.post import equilibrium_residual, reactions_table, results_table


def make_triangle() -> TrussModel:
    return TrussModel(
        nodes=[Node(0, -3.0, 0.0), Node(1, 3.0, 0.0), Node(2, 0.0, 4.0)],
        members=[Member(0, 0, 2), Member(1, 1, 2), Member(2, 0, 1)],
        supports=[Support(0, SupportKind.PINNED), Support(1, SupportKind.ROLLER_Y)],
        loads=[Load(2, 0.0, -20.0)],
    )


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 60)
    print(f"  {text}")
    print("=" * 60)


def main() -> int:
    args = _parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.model:
        with open(args.model) as f:
            model = TrussModel.from_dict(json.load(f))
        name = args.model
    else:
        model = make_triangle()
        name = "reference triangle"

    print_header(f"TRUSS: {name}")
    print(f"  Nodes: {len(model.nodes)}  Members: {len(model.members)}  "
          f"Supports: {len(model.supports)}  Loads: {len(model.loads)}")

    try:
        result = solve_truss(model)
    except TrussError as e:
        print(f"\nError ({type(e).__name__}): {e}")
        return 1

    print_header("MEMBER FORCES (+ tension, - compression)")
    print(results_table(result).to_string(index=False))

    print_header("SUPPORT REACTIONS")
    print(reactions_table(result).to_string(index=False))

    fx, fy, mz = equilibrium_residual(model, result)
    print_header("GLOBAL EQUILIBRIUM")
    print(f"  ΣFx = {fx:.3e}   ΣFy = {fy:.3e}   ΣM = {mz:.3e}")

    if args.plot:
        from truss2d.viz import plot_truss_forces
        plot_truss_forces(model, result, args.plot, title=f"Member forces: {name}")
        print(f"\nSaved plot to {args.plot}")

    return 0


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Solve a 2D pin-jointed truss by the method of joints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        "--model", type=str, default=None,
        help="JSON model file (nodes/members/supports/loads); default: reference triangle"
    )
    parser.add_argument(
        "--plot", type=str, default=None,
        help="Save a force diagram to this path"
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args()


if __name__ == "__main__":
    sys.exit(main())
