# reference/new_moon.py

"""
True (corrected) new moon instants after Jean Meeus, Astronomical Algorithms
(2nd ed.), chapter 49.

Accuracy is a few minutes over 1000..3000 CE. The series is still evaluated
for any integer lunation k (including large negative k for the first Hijri
centuries); it just drifts further from the true conjunction there.
"""

from __future__ import annotations

import math

from . import astro_args as aa


# Periodic terms for the new moon phase (Meeus Table 49.A).
# (coefficient in days, power of E, M, M', F, Omega)
NEW_MOON_TERMS = (
    (-0.40720, 0, 0, 1, 0, 0),
    (0.17241, 1, 1, 0, 0, 0),
    (0.01608, 0, 0, 2, 0, 0),
    (0.01039, 0, 0, 0, 2, 0),
    (0.00739, 1, -1, 1, 0, 0),
    (-0.00514, 1, 1, 1, 0, 0),
    (0.00208, 2, 2, 0, 0, 0),
    (-0.00111, 0, 0, 1, -2, 0),
    (-0.00057, 0, 0, 1, 2, 0),
    (0.00056, 1, 1, 2, 0, 0),
    (-0.00042, 0, 0, 3, 0, 0),
    (0.00042, 1, 1, 0, 2, 0),
    (0.00038, 1, 1, 0, -2, 0),
    (-0.00024, 1, -1, 2, 0, 0),
    (-0.00017, 0, 0, 0, 0, 1),
    (-0.00007, 0, 2, 1, 0, 0),
    (0.00004, 0, 0, 2, -2, 0),
    (0.00004, 0, 3, 0, 0, 0),
    (0.00003, 0, 1, 1, -2, 0),
    (0.00003, 0, 0, 2, 2, 0),
    (-0.00003, 0, 1, 1, 2, 0),
    (0.00003, 0, -1, 1, 2, 0),
    (-0.00002, 0, -1, 1, -2, 0),
    (-0.00002, 0, 1, 3, 0, 0),
    (0.00002, 0, 0, 4, 0, 0),
)

# Additional corrections common to all phases (Meeus Table 49.B).
# Argument A_i = c0 + c1 k + c2 T^2 (degrees); (c0, c1, c2, coefficient in days)
PLANETARY_TERMS = (
    (299.77, 0.107408, -0.009173, 0.000325),
    (251.88, 0.016321, 0.0, 0.000165),
    (251.83, 26.651886, 0.0, 0.000164),
    (349.42, 36.412478, 0.0, 0.000126),
    (84.66, 18.206239, 0.0, 0.000110),
    (141.74, 53.303771, 0.0, 0.000062),
    (207.14, 2.453732, 0.0, 0.000060),
    (154.84, 7.306860, 0.0, 0.000056),
    (34.52, 27.261239, 0.0, 0.000047),
    (207.19, 0.121824, 0.0, 0.000042),
    (291.34, 1.844379, 0.0, 0.000040),
    (161.72, 24.198154, 0.0, 0.000037),
    (239.56, 25.513099, 0.0, 0.000035),
    (331.55, 3.592518, 0.0, 0.000023),
)


def mean_anomalies_deg(k: float) -> tuple[float, float, float, float]:
    """
    (M, M', F, Omega) at the mean new moon of lunation k, wrapped to [0,360).

    M: Sun's mean anomaly; M': Moon's mean anomaly;
    F: Moon's argument of latitude; Omega: longitude of the ascending node.
    """
    T = aa.T_from_k(k)
    T2 = T * T
    T3 = T2 * T
    T4 = T2 * T2

    M = 2.5534 + 29.10535670 * k - 0.0000014 * T2 - 0.00000011 * T3
    Mp = (
        201.5643
        + 385.81693528 * k
        + 0.0107582 * T2
        + 0.00001238 * T3
        - 0.000000058 * T4
    )
    F = (
        160.7108
        + 390.67050284 * k
        - 0.0016118 * T2
        - 0.00000227 * T3
        + 0.000000011 * T4
    )
    Omega = 124.7746 - 1.56375588 * k + 0.0020672 * T2 + 0.00000215 * T3
    return aa.wrap_deg(M), aa.wrap_deg(Mp), aa.wrap_deg(F), aa.wrap_deg(Omega)


def periodic_correction(k: float) -> float:
    """Sum of the Table 49.A terms (days)."""
    T = aa.T_from_k(k)
    E = aa.eccentricity_factor(T)
    M, Mp, F, Om = (x * aa.TO_RAD for x in mean_anomalies_deg(k))

    total = 0.0
    for coeff, e_pow, m, mp, f, om in NEW_MOON_TERMS:
        arg = m * M + mp * Mp + f * F + om * Om
        total += coeff * (E ** e_pow) * math.sin(arg)
    return total


def planetary_correction(k: float) -> float:
    """Sum of the Table 49.B terms (days)."""
    T = aa.T_from_k(k)
    T2 = T * T
    total = 0.0
    for c0, c1, c2, coeff in PLANETARY_TERMS:
        A = aa.wrap_deg(c0 + c1 * k + c2 * T2)
        total += coeff * math.sin(A * aa.TO_RAD)
    return total


def new_moon_jde(k: int) -> float:
    """
    JDE of the true new moon for integer lunation k
    (k = 0 is the new moon of 2000-01-06).
    """
    return aa.jde_mean_new_moon(k) + periodic_correction(k) + planetary_correction(k)
