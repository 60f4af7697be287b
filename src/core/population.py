"""
Synthetic population for the CHD microsimulation.

A population is a fixed-size collection of Individuals keyed by id.
There are no births and no removals: individuals with a sampled death
stay in the population and are simulated again the next year.

Attributes are drawn column by column from a single numpy Generator, so
a population is fully reproducible from its seed and profile.
"""

from typing import Callable, Dict, Iterable, Iterator, List, Optional, TYPE_CHECKING

import numpy as np

from .individual import Individual, Sex

if TYPE_CHECKING:
    from simulations.parameter_profiles import PopulationProfile


def generate_individuals(
    n: int,
    rng: np.random.Generator,
    profile: Optional["PopulationProfile"] = None,
    first_id: int = 0,
) -> List[Individual]:
    """Draw n individuals with independent attributes.

    One column of n draws is consumed per attribute, in the order
    age, sex, bmi, sbp, smoking, alcohol.

    Args:
        n: Number of individuals to create.
        rng: The run's random generator.
        profile: Distribution parameters for every attribute. Defaults
            to the baseline profile.
        first_id: Id given to the first individual; the rest follow
            sequentially.

    Returns:
        List of Individuals ordered by id.
    """
    if profile is None:
        from simulations.parameter_profiles import BASELINE_PROFILE
        profile = BASELINE_PROFILE

    ages = rng.integers(profile.age_min, profile.age_max, size=n, endpoint=True)
    is_female = rng.random(n) < profile.female_share
    bmis = rng.normal(profile.bmi_mean, profile.bmi_sd, size=n)
    sbps = rng.normal(profile.sbp_mean, profile.sbp_sd, size=n)
    smokers = rng.binomial(1, profile.smoking_prevalence, size=n)
    alcohol = rng.normal(profile.alcohol_mean, profile.alcohol_sd, size=n)

    return [
        Individual(
            id=first_id + i,
            age=int(ages[i]),
            sex=Sex.FEMALE if is_female[i] else Sex.MALE,
            bmi=float(bmis[i]),
            sbp=float(sbps[i]),
            smoking=int(smokers[i]),
            alcohol=float(alcohol[i]),
        )
        for i in range(n)
    ]


class Population:
    """A fixed set of individuals, iterated in id order.

    Attributes:
        individuals: Dict mapping id to Individual.
    """

    def __init__(self, individuals: Iterable[Individual] = ()):
        self.individuals: Dict[int, Individual] = {}
        for person in sorted(individuals, key=lambda p: p.id):
            if person.id in self.individuals:
                raise ValueError(f"Duplicate individual id: {person.id}")
            self.individuals[person.id] = person

    @classmethod
    def generate(
        cls,
        n: int,
        rng: np.random.Generator,
        profile: Optional["PopulationProfile"] = None,
    ) -> "Population":
        return cls(generate_individuals(n, rng, profile))

    def __len__(self) -> int:
        return len(self.individuals)

    def __iter__(self) -> Iterator[Individual]:
        return iter(self.individuals.values())

    def __contains__(self, individual_id: int) -> bool:
        return individual_id in self.individuals

    def get(self, individual_id: int) -> Optional[Individual]:
        return self.individuals.get(individual_id)

    def ids(self) -> List[int]:
        return list(self.individuals)

    def select(self, predicate: Callable[[Individual], bool]) -> List[Individual]:
        """Individuals matching predicate, in id order."""
        return [p for p in self.individuals.values() if predicate(p)]
