"""
Braking Distance Simulation

Command line report: braking distance from the initial speed on several road
surfaces, simulated frame by frame and compared with v0² / (2 mu g).
"""

import argparse
import logging

from braking.analysis import SURFACES, run_friction_analysis
from braking.config import load_config
from braking.engine import DEFAULT_DT


def main() -> None:
    parser = argparse.ArgumentParser(description="Print a braking distance report")
    parser.add_argument("--config", help="YAML parameter file")
    parser.add_argument("--brake-at", type=float, default=0.0, help="Position (m) at which to brake")
    parser.add_argument("--dt", type=float, default=DEFAULT_DT, help="Time step (s)")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = load_config(args.config)
    params = config.params
    results = run_friction_analysis(
        list(SURFACES.values()), base_params=params, brake_at=args.brake_at, dt=args.dt
    )

    print(f"Braking from {params.initial_speed_kmh:g} km/h ({params.initial_speed:.2f} m/s):")
    print("-" * 80)

    for name, mu in SURFACES.items():
        result = results[mu]["result"]
        print(f"\nSurface: {name} (mu = {mu})")
        print(f"  Deceleration: {results[mu]['params'].deceleration:.3f} m/s²")
        if result.braking_distance is None:
            print(f"  Not braked, stopped at {result.stop_position:.2f} m")
            continue
        print(f"  Braking distance (simulated): {result.braking_distance:.2f} m")
        print(f"  Braking distance (theoretical): {result.theoretical_braking_distance:.2f} m")
        print(f"  Difference: {result.error:+.3f} m")
        print(f"  Time to stop: {result.stopping_time:.2f} s")


if __name__ == "__main__":
    main()
