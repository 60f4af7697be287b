"""
Risk-factor interventions for what-if policy analysis.

Each operator acts on one individual of a Population, changing a risk
factor that the simulation otherwise holds constant. Interventions are
applied before a run starts; during a run bmi and smoking never change.
"""

from typing import Callable, Dict, Optional

from core.individual import Individual
from core.population import Population

HEALTHY_BMI_FLOOR = 18.5
WEIGHT_REDUCTION_FRACTION = 0.10


def smoking_cessation(population: Population, target_id: int):
    """Stop smoking. Removes the additive smoking term from CHD risk."""
    person = population.get(target_id)
    if person is None or not person.smoking:
        return
    person.smoking = 0


def weight_reduction(population: Population, target_id: int):
    """
    Lose 10% of body weight, never going below a BMI of 18.5.

    Individuals already at or below the floor are left alone.
    """
    person = population.get(target_id)
    if person is None or person.bmi <= HEALTHY_BMI_FLOOR:
        return
    person.bmi = max(HEALTHY_BMI_FLOOR, person.bmi * (1.0 - WEIGHT_REDUCTION_FRACTION))


def combined_lifestyle(population: Population, target_id: int):
    """Smoking cessation plus weight reduction."""
    smoking_cessation(population, target_id)
    weight_reduction(population, target_id)


INTERVENTIONS: Dict[str, Callable[[Population, int], None]] = {
    "smoking-cessation": smoking_cessation,
    "weight-reduction": weight_reduction,
    "combined-lifestyle": combined_lifestyle,
}


def apply_intervention_to_all(
    population: Population,
    intervention_fn: Callable[[Population, int], None],
    predicate: Optional[Callable[[Individual], bool]] = None,
) -> int:
    """Apply an intervention to every individual matching predicate.

    Returns the number of individuals targeted.
    """
    if predicate is None:
        target_ids = population.ids()
    else:
        target_ids = [p.id for p in population.select(predicate)]
    for pid in target_ids:
        intervention_fn(population, pid)
    return len(target_ids)
