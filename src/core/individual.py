"""
Individual representation for the CHD microsimulation.

Each individual carries:
  - Fixed demographics (id, sex) and a mutable age
  - Risk factors drawn once at creation (bmi, smoking)
  - Reserved attributes not consulted by any risk model (sbp, alcohol)
  - Per-year outcome flags (chd_incidence, mortality) that are
    recomputed every simulated year
"""

from enum import Enum
from dataclasses import dataclass


class Sex(Enum):
    MALE = "Male"
    FEMALE = "Female"


@dataclass
class Individual:
    """A single member of the synthetic population.

    Attributes:
        id: Unique identifier, never reused within a population.
        age: Age in whole years. Incremented once per simulated year.
        sex: Biological sex (MALE, FEMALE).
        bmi: Body mass index in kg/m^2. No drift model; constant for the run.
        sbp: Systolic blood pressure in mmHg. Reserved.
        smoking: 1 for current smokers, 0 otherwise.
        alcohol: Alcohol consumption in units/week. Reserved.
        chd_incidence: 1 if a CHD event was sampled in the latest year.
        mortality: 1 if a death event was sampled in the latest year.
            Not persistent: the individual keeps being simulated.
    """

    id: int
    age: int
    sex: Sex
    bmi: float
    sbp: float
    smoking: int
    alcohol: float
    chd_incidence: int = 0
    mortality: int = 0

    def age_one_year(self):
        self.age += 1

    def record_outcomes(self, chd_incidence: int, mortality: int):
        """Overwrite last year's flags. Prior years are not remembered."""
        self.chd_incidence = int(chd_incidence)
        self.mortality = int(mortality)
