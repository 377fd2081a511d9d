"""
Motion insights: distance travelled, peak and mean velocity/acceleration.
Uses the derived columns from integration.integrate_motion.
"""

from dataclasses import dataclass

import numpy as np
import pandas as pd

INSIGHT_LABELS = {
    "max_displacement": "Total Distance Travelled",
    "max_velocity": "Max Velocity Attained",
    "max_abs_acceleration": "Max Acceleration Attained",
    "mean_velocity": "Mean Velocity",
    "mean_acceleration": "Mean Acceleration",
}


@dataclass
class Insights:
    max_displacement: float
    max_velocity: float
    max_abs_acceleration: float
    mean_velocity: float
    mean_acceleration: float
    shift_value: float = 0.0

    def as_rows(self) -> list[tuple[str, float]]:
        """(label, value) in sheet order; the shift value is not part of the table."""
        return [(label, getattr(self, name)) for name, label in INSIGHT_LABELS.items()]


def calculate_insights(derived: pd.DataFrame, shift_value: float = 0.0) -> Insights:
    """
    Reduce the derived rows to scalar insights. NaN in the inputs propagates.
    derived must have columns: displacement, velocity, acc_y_shifted.
    """
    displacement = derived["displacement"].to_numpy(dtype=float)
    velocity = derived["velocity"].to_numpy(dtype=float)
    accel = derived["acc_y_shifted"].to_numpy(dtype=float)
    return Insights(
        max_displacement=float(np.max(displacement)),
        max_velocity=float(np.max(velocity)),
        max_abs_acceleration=float(np.max(np.abs(accel))),
        mean_velocity=float(np.mean(velocity)),
        mean_acceleration=float(np.mean(accel)),
        shift_value=float(shift_value),
    )


def insights_table(insights: Insights) -> pd.DataFrame:
    return pd.DataFrame(insights.as_rows(), columns=["insight", "value"])
