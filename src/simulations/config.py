"""
Run configuration for the CHD microsimulation.

The horizon counts simulated years, and every simulated year is stored:
a run covers start_year .. start_year + horizon - 1 inclusive.
"""

from dataclasses import dataclass
from numbers import Integral


class ConfigurationError(ValueError):
    """Raised before a run starts when its parameters are unusable."""


@dataclass(frozen=True)
class SimulationConfig:
    n_individuals: int = 10000
    horizon: int = 30
    start_year: int = 2013
    seed: int = 2013

    def __post_init__(self):
        self.validate()

    def validate(self):
        for field_name in ("n_individuals", "horizon", "start_year", "seed"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ConfigurationError(
                    f"{field_name} must be an integer, got {value!r}"
                )
        if self.n_individuals <= 0:
            raise ConfigurationError(
                f"n_individuals must be positive, got {self.n_individuals}"
            )
        if self.horizon <= 0:
            raise ConfigurationError(f"horizon must be positive, got {self.horizon}")
        if self.seed < 0:
            raise ConfigurationError(f"seed must be non-negative, got {self.seed}")

    @property
    def end_year(self) -> int:
        """Last simulated year (inclusive)."""
        return self.start_year + self.horizon - 1

    @property
    def years(self) -> range:
        return range(self.start_year, self.start_year + self.horizon)

    @property
    def n_rows(self) -> int:
        return self.n_individuals * self.horizon
