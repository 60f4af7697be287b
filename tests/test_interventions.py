import pytest

from core.individual import Individual, Sex
from core.population import Population
from simulations.config import SimulationConfig
from simulations.engine import Simulation
from simulations.interventions import (
    apply_intervention_to_all,
    combined_lifestyle,
    smoking_cessation,
    weight_reduction,
)


def _make_population(n=6, n_smokers=3, bmi=30.0):
    return Population(
        Individual(
            id=i, age=50, sex=Sex.FEMALE, bmi=bmi, sbp=125.0,
            smoking=int(i < n_smokers), alcohol=8.0,
        )
        for i in range(n)
    )


def test_smoking_cessation_only_targets_matching_individuals():
    population = _make_population(n=6, n_smokers=3)
    treated = apply_intervention_to_all(
        population, smoking_cessation, predicate=lambda p: p.smoking == 1
    )
    assert treated == 3
    assert all(p.smoking == 0 for p in population)


def test_weight_reduction_respects_floor():
    population = _make_population(n=3, bmi=30.0)
    population.get(1).bmi = 19.0
    population.get(2).bmi = 17.0

    apply_intervention_to_all(population, weight_reduction)

    assert population.get(0).bmi == pytest.approx(27.0)
    assert population.get(1).bmi == 18.5
    assert population.get(2).bmi == 17.0


def test_combined_lifestyle_changes_both_factors():
    population = _make_population(n=2, n_smokers=2, bmi=40.0)
    combined_lifestyle(population, 0)
    assert population.get(0).smoking == 0
    assert population.get(0).bmi == pytest.approx(36.0)
    assert population.get(1).smoking == 1


def test_unknown_id_is_ignored():
    population = _make_population(n=2)
    smoking_cessation(population, 99)
    weight_reduction(population, 99)
    assert [p.smoking for p in population] == [1, 1]


def test_interventions_only_before_run_starts():
    sim = Simulation(
        SimulationConfig(n_individuals=6, horizon=2, seed=0),
        population=_make_population(),
    )
    assert sim.apply_intervention(smoking_cessation) == 6
    sim.step()
    with pytest.raises(RuntimeError):
        sim.apply_intervention(weight_reduction)
