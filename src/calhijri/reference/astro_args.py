from __future__ import annotations

from math import fmod

import math


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

TO_RAD = math.pi / 180.0

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    # avoid slow % for huge values; fmod is fine
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y

# ------------------------------------------------------------
# Lunation time variable
# ------------------------------------------------------------

JDE0 = 2451550.09766       # Meeus k=0: mean new moon of 2000-01-06
SYNODIC = 29.530588861     # mean synodic month (days), Meeus eq. 49.1


def T_from_k(k: float) -> float:
    """Julian centuries from J2000.0 corresponding to lunation k (Meeus: T = k / 1236.85)."""
    return k / 1236.85


def k_estimate(jd: float) -> float:
    """
    Continuous lunation estimate from mean motion only.

    The integer part identifies the mean new moon preceding jd; callers
    round or floor it and then search neighbouring k with the true series.
    """
    return (jd - JDE0) / SYNODIC


# ------------------------------------------------------------
# Mean new moon (Meeus mean phases)
# ------------------------------------------------------------

def jde_mean_new_moon(k: float) -> float:
    """
    Mean Julian Ephemeris Day (TT) of the k-th new moon relative to 2000.

    Commonly cited Meeus mean-phase polynomial:
      JDE = 2451550.09766 + 29.530588861 k
            + 0.00015437 T^2 - 0.000000150 T^3 + 0.00000000073 T^4,
      T = k / 1236.85.
    """
    T = T_from_k(k)
    T2 = T * T
    T3 = T2 * T
    T4 = T2 * T2
    return (
        JDE0
        + SYNODIC * k
        + 0.00015437 * T2
        - 0.000000150 * T3
        + 0.00000000073 * T4
    )

# ------------------------------------------------------------
# Eccentricity factor
# ------------------------------------------------------------

def eccentricity_factor(T: float) -> float:
    """
    Eccentricity factor E for the Earth's orbit.
    Used to scale analytical lunar perturbations that depend on
    the Sun's mean anomaly.
    """
    return 1.0 - 0.002516 * T - 0.0000074 * (T * T)
