"""
Longitudinal results store for the CHD microsimulation.

Long format: one row per (year, individual) with the columns
year, id, chd, mortality. The store is pre-sized for the whole run and
each simulated year writes its own disjoint block of rows, so the row
for (year, id) has a fixed slot regardless of the order years arrive in.
"""

from typing import Dict, Iterator, List

import numpy as np
import pandas as pd

from .config import ConfigurationError

COLUMNS = ("year", "id", "chd", "mortality")


class ResultsStore:
    """Append-only table of yearly outcomes.

    Attributes:
        start_year: First year the store accepts.
        horizon: Number of years the store has room for.
        n_individuals: Rows written per year.
        frozen: True once the owning simulation has completed.
    """

    def __init__(self, n_individuals: int, start_year: int, horizon: int):
        if n_individuals <= 0:
            raise ConfigurationError(
                f"n_individuals must be positive, got {n_individuals}"
            )
        if horizon <= 0:
            raise ConfigurationError(f"horizon must be positive, got {horizon}")

        self.n_individuals = n_individuals
        self.start_year = start_year
        self.horizon = horizon
        self.frozen = False

        size = n_individuals * horizon
        self._year = np.zeros(size, dtype=np.int64)
        self._id = np.zeros(size, dtype=np.int64)
        self._chd = np.zeros(size, dtype=np.int8)
        self._mortality = np.zeros(size, dtype=np.int8)
        self._filled = np.zeros(horizon, dtype=bool)

    def record_year(self, year: int, ids, chd, mortality):
        """Write one full year of outcomes into that year's block."""
        if self.frozen:
            raise RuntimeError("ResultsStore is read-only after the run completes")

        offset = year - self.start_year
        if not 0 <= offset < self.horizon:
            raise ValueError(
                f"year {year} outside stored span "
                f"{self.start_year}..{self.start_year + self.horizon - 1}"
            )
        if self._filled[offset]:
            raise ValueError(f"year {year} already recorded")

        ids = np.asarray(ids, dtype=np.int64)
        chd = np.asarray(chd, dtype=np.int8)
        mortality = np.asarray(mortality, dtype=np.int8)
        if not (len(ids) == len(chd) == len(mortality) == self.n_individuals):
            raise ValueError(
                f"expected {self.n_individuals} rows for year {year}, got "
                f"ids={len(ids)}, chd={len(chd)}, mortality={len(mortality)}"
            )

        block = slice(offset * self.n_individuals, (offset + 1) * self.n_individuals)
        self._year[block] = year
        self._id[block] = ids
        self._chd[block] = chd
        self._mortality[block] = mortality
        self._filled[offset] = True

    def freeze(self):
        self.frozen = True

    # --- Read access ---

    def __len__(self) -> int:
        return int(self._filled.sum()) * self.n_individuals

    def recorded_years(self) -> List[int]:
        return [self.start_year + int(i) for i in np.flatnonzero(self._filled)]

    def _filled_rows(self) -> np.ndarray:
        return np.repeat(self._filled, self.n_individuals)

    def to_frame(self) -> pd.DataFrame:
        """Recorded rows as a DataFrame ordered by (year, id)."""
        mask = self._filled_rows()
        return pd.DataFrame({
            "year": self._year[mask],
            "id": self._id[mask],
            "chd": self._chd[mask],
            "mortality": self._mortality[mask],
        }, columns=list(COLUMNS))

    def records(self) -> Iterator[Dict[str, int]]:
        mask = self._filled_rows()
        for year, pid, chd, dead in zip(
            self._year[mask], self._id[mask], self._chd[mask], self._mortality[mask]
        ):
            yield {"year": int(year), "id": int(pid), "chd": int(chd), "mortality": int(dead)}

    def yearly_means(self) -> pd.DataFrame:
        """Mean chd and mortality flag per year, indexed by year."""
        return self.to_frame().groupby("year")[["chd", "mortality"]].mean()
