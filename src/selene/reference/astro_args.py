from __future__ import annotations

from dataclasses import dataclass
from math import fmod

import math


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y


# ------------------------------------------------------------
# Time variable for lunation-based series
# ------------------------------------------------------------

LUNATIONS_PER_CENTURY = 1236.85


def T_from_k(k):
    """Approximate Julian centuries from J2000.0 for lunation index k (Meeus 49.3)."""
    return k / LUNATIONS_PER_CENTURY


# ------------------------------------------------------------
# Lunation polynomials (Meeus ch. 49)
# ------------------------------------------------------------

# (c0, c_k, c_T2, c_T3, c_T4): c0 + c_k*k + c_T2*T^2 + c_T3*T^3 + c_T4*T^4
M_COEFFS = (2.5534, 29.10535669, -0.0000014, -0.00000011, 0.0)
MP_COEFFS = (201.5643, 385.81693528, 0.0107582, 0.00001238, -0.000000058)
F_COEFFS = (160.7108, 390.67050274, -0.0016118, -0.00000227, 0.000000011)

# Secular T^2, T^3, T^4 terms of the mean phase (days); c0 and c_k are the
# calibrated jde_ref and mean synodic month
MEAN_PHASE_SECULAR = (0.0001337, -0.000000150, 0.00000000073)


def lunation_polynomial(coeffs, k):
    """
    Evaluate a lunation polynomial at k. Plain arithmetic only, so k may be
    a scalar or a numpy array.
    """
    c0, ck, c2, c3, c4 = coeffs
    T = T_from_k(k)
    T2 = T * T
    T3 = T2 * T
    T4 = T3 * T
    return c0 + ck * k + c2 * T2 + c3 * T3 + c4 * T4


def mean_phase_coeffs(jde_ref: float, mean_synodic_month: float):
    return (jde_ref, mean_synodic_month) + MEAN_PHASE_SECULAR


# ------------------------------------------------------------
# New-moon arguments (degrees)
# ------------------------------------------------------------

@dataclass(frozen=True)
class NewMoonArgs:
    """Arguments of the new-moon periodic terms, wrapped to [0,360)."""
    M_deg: float   # Sun's mean anomaly
    Mp_deg: float  # Moon's mean anomaly
    F_deg: float   # Moon's argument of latitude

    @property
    def M_rad(self) -> float: return math.radians(self.M_deg)
    @property
    def Mp_rad(self) -> float: return math.radians(self.Mp_deg)
    @property
    def F_rad(self) -> float: return math.radians(self.F_deg)


def new_moon_args(k: float) -> NewMoonArgs:
    """Sun's and Moon's mean anomalies and the Moon's argument of latitude at the k-th new moon."""
    return NewMoonArgs(
        M_deg=wrap_deg(lunation_polynomial(M_COEFFS, k)),
        Mp_deg=wrap_deg(lunation_polynomial(MP_COEFFS, k)),
        F_deg=wrap_deg(lunation_polynomial(F_COEFFS, k)),
    )
