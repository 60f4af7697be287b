"""
Simulation engine for the CHD microsimulation.

A run is a fold over the horizon: each year every individual is aged,
has CHD incidence sampled, then has mortality sampled conditional on
that same-year incidence. One row per individual is written to the
ResultsStore for every year.

Deaths do not remove anyone. An individual with mortality=1 is aged and
resampled the following year like everyone else, and the flag can come
back as 0.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

import numpy as np

from core.individual import Individual
from core.metrics import (
    compute_chd_rate,
    compute_mean_age,
    compute_mortality_rate,
)
from core.population import Population
from core.risk import chd_risk, clamp_probability, mortality_risk, needs_clamping

from .config import ConfigurationError, SimulationConfig
from .interventions import apply_intervention_to_all
from .parameter_profiles import BASELINE_PROFILE, PopulationProfile
from .results import ResultsStore

logger = logging.getLogger(__name__)


class SimulationState(Enum):
    INITIALIZED = "INITIALIZED"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"


@dataclass
class YearOutcome:
    """Outcome rows for one simulated year, in id order."""

    ids: np.ndarray
    chd: np.ndarray
    mortality: np.ndarray
    n_clamped: int = 0


def _bernoulli(rng: np.random.Generator, p: float) -> int:
    return int(rng.random() < p)


def yearly_update(population: Population, rng: np.random.Generator) -> YearOutcome:
    """Advance every individual by one year and sample that year's events.

    Per individual, in id order:
      1. age += 1
      2. chd_incidence ~ Bernoulli(chd_risk)
      3. mortality ~ Bernoulli(mortality_risk given this year's incidence)

    Two uniform draws are consumed per individual, so outcomes depend
    only on the generator state and the population, not on timing.
    """
    n = len(population)
    ids = np.empty(n, dtype=np.int64)
    chd = np.empty(n, dtype=np.int8)
    dead = np.empty(n, dtype=np.int8)
    n_clamped = 0

    for i, person in enumerate(population):
        person.age_one_year()

        p_chd = chd_risk(person.age, person.sex, person.bmi, person.smoking)
        n_clamped += needs_clamping(p_chd)
        incidence = _bernoulli(rng, clamp_probability(p_chd))

        p_death = mortality_risk(person.age, person.sex, incidence)
        n_clamped += needs_clamping(p_death)
        death = _bernoulli(rng, clamp_probability(p_death))

        person.record_outcomes(incidence, death)
        ids[i] = person.id
        chd[i] = incidence
        dead[i] = death

    return YearOutcome(ids=ids, chd=chd, mortality=dead, n_clamped=n_clamped)


class Simulation:
    """Run a population forward year by year and record outcomes."""

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        population: Optional[Population] = None,
        profile: PopulationProfile = BASELINE_PROFILE,
    ):
        self.config = config if config is not None else SimulationConfig()
        self.rng = np.random.default_rng(self.config.seed)

        generated = population is None
        if generated:
            population = Population.generate(self.config.n_individuals, self.rng, profile)
        elif len(population) != self.config.n_individuals:
            raise ConfigurationError(
                f"population has {len(population)} individuals, "
                f"config expects {self.config.n_individuals}"
            )
        self.population = population
        # None when the caller supplied the population
        self.profile = profile if generated else None

        self.results = ResultsStore(
            n_individuals=self.config.n_individuals,
            start_year=self.config.start_year,
            horizon=self.config.horizon,
        )
        self.state = SimulationState.INITIALIZED
        self.years_done = 0

        # History
        self.history: List[Dict] = []

    @property
    def current_year(self) -> Optional[int]:
        """Most recently simulated year, or None before the first step."""
        if self.years_done == 0:
            return None
        return self.config.start_year + self.years_done - 1

    def apply_intervention(
        self,
        intervention_fn: Callable[[Population, int], None],
        predicate: Optional[Callable[[Individual], bool]] = None,
    ) -> int:
        """Modify risk factors before the run. Returns the count targeted."""
        if self.state is not SimulationState.INITIALIZED:
            raise RuntimeError("Interventions can only be applied before the run starts")
        return apply_intervention_to_all(self.population, intervention_fn, predicate)

    def step(self):
        """Simulate and store the next year."""
        if self.state is SimulationState.COMPLETED:
            raise RuntimeError(
                f"Simulation already completed through {self.config.end_year}"
            )
        if self.state is SimulationState.INITIALIZED:
            logger.info(
                "Starting run: n=%d, years %d-%d, seed=%d, profile=%s",
                self.config.n_individuals,
                self.config.start_year,
                self.config.end_year,
                self.config.seed,
                self.profile.name if self.profile is not None else "custom",
            )
            self.state = SimulationState.RUNNING

        year = self.config.start_year + self.years_done
        outcome = yearly_update(self.population, self.rng)
        self.results.record_year(year, outcome.ids, outcome.chd, outcome.mortality)
        self.years_done += 1
        self._record(year, outcome)

        if outcome.n_clamped:
            logger.debug("%d: clamped %d probabilities into [0, 1]", year, outcome.n_clamped)

        if self.years_done == self.config.horizon:
            self.results.freeze()
            self.state = SimulationState.COMPLETED
            logger.info("Run completed: %d rows stored", len(self.results))

    def run(self) -> ResultsStore:
        """Simulate all remaining years and hand back the results."""
        while self.state is not SimulationState.COMPLETED:
            self.step()
        return self.results

    def _record(self, year: int, outcome: YearOutcome):
        row = {
            "year": year,
            "mean_age": compute_mean_age(self.population),
            "chd_rate": compute_chd_rate(self.population),
            "mortality_rate": compute_mortality_rate(self.population),
            "n_clamped": outcome.n_clamped,
        }
        self.history.append(row)
        logger.debug(
            "%d: chd=%.4f mortality=%.4f mean_age=%.1f",
            year, row["chd_rate"], row["mortality_rate"], row["mean_age"],
        )

    # --- Convenience accessors ---

    def chd_series(self) -> List[float]:
        return [h["chd_rate"] for h in self.history]

    def mortality_series(self) -> List[float]:
        return [h["mortality_rate"] for h in self.history]

    def summary(self) -> str:
        if not self.history:
            return "No simulation data."
        h = self.history[-1]
        total_clamped = sum(r["n_clamped"] for r in self.history)

        lines = [
            f"=== Simulation year={h['year']} ({self.state.value}) ===",
            f"  Individuals: {len(self.population)}  (mean age {h['mean_age']:.1f})",
            f"  CHD:         {h['chd_rate']:.4f}",
            f"  Mortality:   {h['mortality_rate']:.4f}",
            f"  Rows:        {len(self.results)}",
            f"  Clamped:     {total_clamped} probabilities",
        ]
        return "\n".join(lines)


def run_simulation(
    config: Optional[SimulationConfig] = None,
    population: Optional[Population] = None,
    profile: PopulationProfile = BASELINE_PROFILE,
) -> ResultsStore:
    """Build a Simulation, run it to completion, and return its results."""
    return Simulation(config=config, population=population, profile=profile).run()
