"""
Acceleration processing for 1D motion: gravity compensation, baseline shift,
and trapezoidal integration to velocity and displacement.
Expects Y-axis acceleration in g and timestamps in seconds.
"""

import numpy as np
import pandas as pd

import config
from errors import InvalidRangeError

DERIVED_COLUMNS = [
    "elapsed_time",
    "acc_y_compensated_inverted",
    "acc_y_shifted",
    "delta_t",
    "velocity_increment",
    "velocity",
    "displacement_increment",
    "displacement",
]


def gravity_compensate_invert(acc_y: np.ndarray, gravity: float = config.GRAVITY_MS2) -> np.ndarray:
    """Scale g to m/s² and flip the sign so forward motion reads positive."""
    return -(np.asarray(acc_y, dtype=float) * gravity)


def compute_shift_value(values: np.ndarray, shift_from: int, shift_to: int) -> float:
    """
    Mean of values[shift_from..shift_to], inclusive and 1-based (1 = first reading).
    The samples should cover a stretch where the sensor is at rest.
    """
    values = np.asarray(values, dtype=float)
    n = len(values)
    if not (1 <= shift_from <= shift_to <= n):
        raise InvalidRangeError(
            f"Shift sample range [{shift_from}, {shift_to}] is outside the {n} logged readings"
        )
    return float(np.mean(values[shift_from - 1:shift_to]))


def elapsed_time_from_timestamps(timestamps: np.ndarray) -> np.ndarray:
    """Cumulative seconds since the first reading, built from consecutive differences."""
    t = np.asarray(timestamps, dtype=float)
    elapsed = np.zeros(len(t))
    for i in range(1, len(t)):
        elapsed[i] = elapsed[i - 1] + (t[i] - t[i - 1])
    return elapsed


def trapezoid_integrate(values: np.ndarray, delta_t: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Trapezoidal rule, one step per sample. Returns (increments, running total);
    both are 0 at the first sample.
    """
    values = np.asarray(values, dtype=float)
    delta_t = np.asarray(delta_t, dtype=float)
    n = len(values)
    increments = np.zeros(n)
    total = np.zeros(n)
    for i in range(1, n):
        increments[i] = 0.5 * (values[i] + values[i - 1]) * delta_t[i]
        total[i] = total[i - 1] + increments[i]
    return increments, total


def integrate_motion(
    timestamps: np.ndarray,
    acc_y: np.ndarray,
    shift_from: int,
    shift_to: int,
    gravity: float = config.GRAVITY_MS2,
) -> tuple[pd.DataFrame, float]:
    """
    Derive every per-reading column from raw timestamps and Y acceleration.
    shift_from / shift_to are 1-based reading positions of the resting baseline.
    Returns (DataFrame with DERIVED_COLUMNS, one row per reading; shift value).
    """
    compensated = gravity_compensate_invert(acc_y, gravity)
    shift_value = compute_shift_value(compensated, shift_from, shift_to)
    shifted = compensated - shift_value

    elapsed = elapsed_time_from_timestamps(timestamps)
    delta_t = np.zeros(len(elapsed))
    delta_t[1:] = elapsed[1:] - elapsed[:-1]

    velocity_increment, velocity = trapezoid_integrate(shifted, delta_t)
    displacement_increment, displacement = trapezoid_integrate(velocity, delta_t)

    derived = pd.DataFrame({
        "elapsed_time": elapsed,
        "acc_y_compensated_inverted": compensated,
        "acc_y_shifted": shifted,
        "delta_t": delta_t,
        "velocity_increment": velocity_increment,
        "velocity": velocity,
        "displacement_increment": displacement_increment,
        "displacement": displacement,
    }, columns=DERIVED_COLUMNS)
    return derived, shift_value
