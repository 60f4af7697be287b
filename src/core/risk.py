"""
Annual risk models for the CHD microsimulation.

Both models are linear in their inputs around a calibration point
(age 40, BMI 25, non-smoker, male) and scaled by a sex multiplier:

  chd_risk       = 0.05 + 0.0015*(age-40) + 0.002*(bmi-25) + 0.05*smoking
  mortality_risk = 0.01 + 0.001*(age-40)  + 0.03*chd_incidence

The raw formulas are unbounded. Far from the calibration point (very old
ages, extreme BMI) they leave [0, 1]; callers clamp with
clamp_probability() before sampling a Bernoulli outcome.
"""

from typing import Dict

from .individual import Sex


REFERENCE_AGE = 40
REFERENCE_BMI = 25.0

CHD_BASE_RISK = 0.05
CHD_AGE_SLOPE = 0.0015
CHD_BMI_SLOPE = 0.002
CHD_SMOKING_EFFECT = 0.05

MORTALITY_BASE_RISK = 0.01
MORTALITY_AGE_SLOPE = 0.001
MORTALITY_CHD_EFFECT = 0.03

CHD_SEX_MULTIPLIER: Dict[Sex, float] = {
    Sex.MALE: 1.0,
    Sex.FEMALE: 0.8,
}

MORTALITY_SEX_MULTIPLIER: Dict[Sex, float] = {
    Sex.MALE: 1.0,
    Sex.FEMALE: 0.9,
}


def chd_risk(age: float, sex: Sex, bmi: float, smoking: int) -> float:
    """Annual probability of a CHD event (unclamped)."""
    risk = (
        CHD_BASE_RISK
        + (age - REFERENCE_AGE) * CHD_AGE_SLOPE
        + (bmi - REFERENCE_BMI) * CHD_BMI_SLOPE
        + smoking * CHD_SMOKING_EFFECT
    )
    return risk * CHD_SEX_MULTIPLIER[sex]


def mortality_risk(age: float, sex: Sex, chd_incidence: int) -> float:
    """Annual probability of death (unclamped).

    chd_incidence is the flag sampled in the same year, so a CHD event
    raises mortality without a lag.
    """
    risk = (
        MORTALITY_BASE_RISK
        + (age - REFERENCE_AGE) * MORTALITY_AGE_SLOPE
        + chd_incidence * MORTALITY_CHD_EFFECT
    )
    return risk * MORTALITY_SEX_MULTIPLIER[sex]


def clamp_probability(p: float) -> float:
    return max(0.0, min(1.0, p))


def needs_clamping(p: float) -> bool:
    return p < 0.0 or p > 1.0
