"""
Population-level summary metrics for the CHD microsimulation.

These are cross-sectional: they describe the population as it stands
after the latest simulated year. Longitudinal aggregates come from the
ResultsStore instead.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .population import Population


def _mean(population: "Population", attribute: str) -> float:
    if len(population) == 0:
        return 0.0
    return sum(getattr(p, attribute) for p in population) / len(population)


def compute_chd_rate(population: "Population") -> float:
    """Fraction of individuals with a CHD event in the latest year."""
    return _mean(population, "chd_incidence")


def compute_mortality_rate(population: "Population") -> float:
    """Fraction of individuals with a death sampled in the latest year.

    Deaths are not persistent, so this is an annual rate and not a
    cumulative one.
    """
    return _mean(population, "mortality")


def compute_mean_age(population: "Population") -> float:
    return _mean(population, "age")


def compute_smoking_prevalence(population: "Population") -> float:
    return _mean(population, "smoking")
