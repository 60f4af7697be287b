import pytest

from core.individual import Sex
from core.risk import (
    chd_risk,
    clamp_probability,
    mortality_risk,
    needs_clamping,
)


def test_risks_at_calibration_point_equal_base_constants():
    assert chd_risk(40, Sex.MALE, 25.0, 0) == 0.05
    assert mortality_risk(40, Sex.MALE, 0) == 0.01


def test_female_multipliers():
    for age, bmi, smoking in [(40, 25.0, 0), (63, 31.2, 1), (88, 19.0, 0)]:
        male = chd_risk(age, Sex.MALE, bmi, smoking)
        female = chd_risk(age, Sex.FEMALE, bmi, smoking)
        assert female == pytest.approx(0.8 * male)

    for age, chd in [(40, 0), (55, 1), (90, 1)]:
        male = mortality_risk(age, Sex.MALE, chd)
        female = mortality_risk(age, Sex.FEMALE, chd)
        assert female == pytest.approx(0.9 * male)


def test_chd_risk_linear_terms():
    base = chd_risk(40, Sex.MALE, 25.0, 0)
    assert chd_risk(50, Sex.MALE, 25.0, 0) - base == pytest.approx(0.015)
    assert chd_risk(40, Sex.MALE, 30.0, 0) - base == pytest.approx(0.01)
    assert chd_risk(40, Sex.MALE, 25.0, 1) - base == pytest.approx(0.05)


def test_mortality_risk_includes_same_year_chd():
    assert mortality_risk(40, Sex.MALE, 1) == pytest.approx(0.04)
    assert mortality_risk(60, Sex.MALE, 0) == pytest.approx(0.03)


def test_raw_formulas_are_unbounded_and_clamping_fixes_them():
    high = chd_risk(120, Sex.MALE, 600.0, 1)
    low = chd_risk(30, Sex.MALE, -100.0, 0)
    assert high > 1.0 and needs_clamping(high)
    assert low < 0.0 and needs_clamping(low)
    assert clamp_probability(high) == 1.0
    assert clamp_probability(low) == 0.0
    assert clamp_probability(0.3) == 0.3
    assert not needs_clamping(0.0) and not needs_clamping(1.0)
