"""
Visualization: displacement, velocity and acceleration against elapsed time.
ChartSpec describes each chart once; the workbook writer, matplotlib and the
dashboard all draw from the same list.
"""

from dataclasses import dataclass

import pandas as pd
import matplotlib.pyplot as plt

import config
from a1_notation import column_to_letter


@dataclass(frozen=True)
class ChartSpec:
    title: str
    x_column: str
    y_column: str
    y_label: str
    anchor_row: int
    anchor_col: int
    n_rows: int = 0  # sheet rows covered, header included

    @property
    def anchor_cell(self) -> str:
        return f"{column_to_letter(self.anchor_col)}{self.anchor_row}"


def insight_chart_specs(n_rows: int = 0) -> list[ChartSpec]:
    """d/t, v/t and a/t charts, stacked CHART_ROW_STEP rows apart."""
    charts = [
        ("d/t", "displacement", "Displacement (m)"),
        ("v/t", "velocity", "Velocity (m/s)"),
        ("a/t", "acc_y_shifted", "Acceleration (m/s²)"),
    ]
    return [
        ChartSpec(
            title=title,
            x_column="elapsed_time",
            y_column=y_column,
            y_label=y_label,
            anchor_row=config.CHART_ANCHOR_ROW + i * config.CHART_ROW_STEP,
            anchor_col=config.CHART_ANCHOR_COL,
            n_rows=n_rows,
        )
        for i, (title, y_column, y_label) in enumerate(charts)
    ]


def plot_insight_chart(derived: pd.DataFrame, spec: ChartSpec, figsize: tuple = (10, 4)) -> plt.Figure:
    """Single line chart for one spec."""
    fig, ax = plt.subplots(figsize=figsize)
    header = config.DERIVED_COLUMN_LAYOUT[spec.y_column][1]
    ax.plot(derived[spec.x_column].values, derived[spec.y_column].values, "b-", label=header)
    ax.set_xlabel("Elapsed time (s)")
    ax.set_ylabel(spec.y_label)
    ax.set_title(spec.title)
    ax.legend(loc="lower center")
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    return fig


def plot_motion_insights(
    derived: pd.DataFrame,
    title: str = "Motion insights",
    figsize: tuple = (12, 9),
) -> plt.Figure:
    """All three charts stacked on a shared time axis."""
    specs = insight_chart_specs(len(derived) + 1)
    fig, axes = plt.subplots(len(specs), 1, sharex=True, figsize=figsize)
    colors = ["g", "b", "r"]
    for ax, spec, color in zip(axes, specs, colors):
        ax.plot(derived[spec.x_column].values, derived[spec.y_column].values, color=color, alpha=0.8)
        ax.set_ylabel(spec.y_label)
        ax.set_title(spec.title, fontsize=10)
        ax.grid(True, alpha=0.3)
    axes[-1].set_xlabel("Elapsed time (s)")
    fig.suptitle(title, fontsize=12)
    plt.tight_layout()
    return fig
