"""
Population profiles for simulation runs.

A profile fixes the distributions the attribute generator draws from.
The baseline profile reproduces the reference synthetic population;
the other presets are what-if variants that shift one risk factor and
leave everything else untouched, so runs with the same seed are directly
comparable.
"""

from dataclasses import dataclass, replace
from typing import Dict

from .config import ConfigurationError


@dataclass(frozen=True)
class PopulationProfile:
    name: str
    age_min: int = 30
    age_max: int = 90
    female_share: float = 0.5
    bmi_mean: float = 28.0
    bmi_sd: float = 5.0
    sbp_mean: float = 130.0
    sbp_sd: float = 20.0
    smoking_prevalence: float = 0.4
    alcohol_mean: float = 10.0
    alcohol_sd: float = 5.0
    note: str = ""

    def __post_init__(self):
        self.validate()

    def validate(self):
        if self.age_min < 0 or self.age_max < self.age_min:
            raise ConfigurationError(
                f"age range must satisfy 0 <= age_min <= age_max, "
                f"got [{self.age_min}, {self.age_max}]"
            )
        for field_name in ("female_share", "smoking_prevalence"):
            value = getattr(self, field_name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{field_name} must be in [0, 1], got {value}")
        for field_name in ("bmi_sd", "sbp_sd", "alcohol_sd"):
            value = getattr(self, field_name)
            if value < 0.0:
                raise ConfigurationError(f"{field_name} must be non-negative, got {value}")

    def with_overrides(self, **changes) -> "PopulationProfile":
        return replace(self, **changes)


BASELINE_PROFILE = PopulationProfile(
    name="baseline",
    note="Reference synthetic adult population.",
)


SMOKE_FREE_PROFILE = BASELINE_PROFILE.with_overrides(
    name="smoke-free",
    smoking_prevalence=0.0,
    note="Baseline with smoking eliminated before the run.",
)


ALL_SMOKERS_PROFILE = BASELINE_PROFILE.with_overrides(
    name="all-smokers",
    smoking_prevalence=1.0,
    note="Upper bound on the smoking contribution to CHD.",
)


HIGH_BMI_PROFILE = BASELINE_PROFILE.with_overrides(
    name="high-bmi",
    bmi_mean=32.0,
    note="Obesity trend scenario: mean BMI shifted up by 4 kg/m^2.",
)


PROFILES: Dict[str, PopulationProfile] = {
    p.name: p
    for p in (BASELINE_PROFILE, SMOKE_FREE_PROFILE, ALL_SMOKERS_PROFILE, HIGH_BMI_PROFILE)
}


def get_profile(name: str) -> PopulationProfile:
    if name not in PROFILES:
        raise KeyError(f"Unknown profile {name!r}; choose from {sorted(PROFILES)}")
    return PROFILES[name]
