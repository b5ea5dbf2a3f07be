"""
selene.reference.constants
--------------------------
Process-wide reference instants and cycle lengths for the Selene calendar.

All instants are Julian Dates (days). The values are calibration data, never
recomputed at run time; a variant set is derived with ``tweak()``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

MS_PER_DAY = 86_400_000


@dataclass(frozen=True)
class SeleneConstants:
    # Mean-lunation reference (naming frame, mean phase predictions)
    jd_0: float = 2460556.580372
    # Instant that global lunation L=0, day 1 is aligned to
    jd_start_of_time: float = 347998.466192
    # December solstice that opens Selene year 1
    jd_first_solstice: float = 348072.958333
    # Eclipse reference for Saros extrapolation
    jd_eclipse_0: float = 2460571.614010

    mean_synodic_month: float = 29.53059
    saros_cycle: float = 6585.3213
    tropical_year: float = 365.2422
    lunar_year_days: float = 354.36708

    # Meeus k=0 reference for the precise new moon series
    jde_ref: float = 2451550.09765

    base_year: int = 1
    months_per_year: int = 13

    # Solstices/equinoxes of the calibration year
    constants_year: int = 2024
    jd_march_equinox: float = 2460389.875694
    jd_june_solstice: float = 2460481.612500
    jd_september_equinox: float = 2460576.263194
    jd_december_solstice: float = 2460665.8888899

    jd_unix_epoch: float = 2440587.5

    def __post_init__(self) -> None:
        if self.mean_synodic_month <= 0 or self.tropical_year <= 0:
            raise ValueError("cycle lengths must be positive")
        if self.months_per_year <= 0:
            raise ValueError("months_per_year must be positive")

    @property
    def k0(self) -> float:
        """Fractional Meeus lunation count from jde_ref to the start of time."""
        return (self.jd_start_of_time - self.jde_ref) / self.mean_synodic_month

    @property
    def k_offset(self) -> int:
        """Integer shift such that Meeus k = L + k_offset."""
        return round(self.k0)

    @property
    def week_epoch(self) -> float:
        return float(math.floor(self.jd_start_of_time))

    def tweak(self, **kwargs) -> "SeleneConstants":
        return replace(self, **kwargs)


DEFAULT_CONSTANTS = SeleneConstants()
