"""CHD microsimulation engine."""
from .config import ConfigurationError, SimulationConfig
from .engine import (
    Simulation,
    SimulationState,
    YearOutcome,
    run_simulation,
    yearly_update,
)
from .results import ResultsStore
from .interventions import (
    smoking_cessation,
    weight_reduction,
    combined_lifestyle,
    apply_intervention_to_all,
    INTERVENTIONS,
)
from .parameter_profiles import (
    PopulationProfile,
    BASELINE_PROFILE,
    SMOKE_FREE_PROFILE,
    ALL_SMOKERS_PROFILE,
    HIGH_BMI_PROFILE,
    get_profile,
)
