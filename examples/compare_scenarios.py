"""
Scenario Comparison: Baseline vs Lifestyle Interventions
=========================================================

Runs the baseline population and one run per intervention, all with the
same seed, and prints the yearly CHD and mortality means side by side.

Usage: python examples/compare_scenarios.py
"""

import sys
import os
import argparse

# Ensure src is on path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pandas as pd

from simulations.config import SimulationConfig
from simulations.engine import Simulation
from simulations.interventions import INTERVENTIONS


def run_scenario(scenario_name, intervention_fn=None, config=None):
    """Run one scenario and return its yearly means with a scenario column."""
    if config is None:
        config = SimulationConfig()
    sim = Simulation(config=config)
    treated = 0
    if intervention_fn is not None:
        treated = sim.apply_intervention(intervention_fn)
    results = sim.run()

    means = results.yearly_means().reset_index()
    means["scenario"] = scenario_name
    return means, treated


def main():
    parser = argparse.ArgumentParser(
        description="Compare baseline and intervention scenarios."
    )
    parser.add_argument("--seed", type=int, default=2013, help="Random seed.")
    parser.add_argument(
        "--n-individuals", type=int, default=10000, help="Population size."
    )
    parser.add_argument(
        "--horizon", type=int, default=30, help="Number of simulated years."
    )
    args = parser.parse_args()

    config = SimulationConfig(
        n_individuals=args.n_individuals, horizon=args.horizon, seed=args.seed
    )

    print("=" * 60)
    print("  CHD Microsimulation: Scenario Comparison")
    print("=" * 60)
    print(
        "Run config: "
        f"seed={config.seed}, n_individuals={config.n_individuals}, "
        f"years={config.start_year}-{config.end_year}"
    )

    frames = []
    baseline, _ = run_scenario("baseline", config=config)
    frames.append(baseline)
    for name, fn in INTERVENTIONS.items():
        means, treated = run_scenario(name, fn, config=config)
        print(f"  {name}: applied to {treated} individuals")
        frames.append(means)

    combined = pd.concat(frames, ignore_index=True)
    chd = combined.pivot(index="year", columns="scenario", values="chd")
    mortality = combined.pivot(index="year", columns="scenario", values="mortality")

    print("\n--- Mean CHD incidence by year ---")
    print(chd.round(4).to_string())
    print("\n--- Mean mortality by year ---")
    print(mortality.round(4).to_string())

    print("\n--- Mean over the horizon ---")
    overall = combined.groupby("scenario")[["chd", "mortality"]].mean()
    print(overall.round(4).to_string())

    print("\nDone.")


if __name__ == "__main__":
    main()
