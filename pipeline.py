"""
End-to-end pipeline: load logged sheet -> copy columns -> derive motion columns
-> insights -> processed sheet with charts.
"""

import logging
from pathlib import Path

import pandas as pd

import config
from settings import Settings
from integration import integrate_motion
from insights import calculate_insights
from visualization import plot_motion_insights, plot_insight_chart, insight_chart_specs
from workbook import load_source_table, copy_columns, readings_from_columns, write_processed_sheet

logger = logging.getLogger(__name__)


def default_output_path(source_path: str) -> Path:
    """Workbooks get the new sheet in place; a CSV log gets a sibling .xlsx."""
    source_path = Path(source_path)
    if source_path.suffix.lower() == ".csv":
        return source_path.with_name(source_path.stem + "-processed.xlsx")
    return source_path


def process_readings(readings: pd.DataFrame, settings: Settings, gravity: float = None) -> dict:
    """
    Pure part of the pipeline. readings has config.RAW_COLUMNS, one row per data row.
    Shift rows in settings are sheet rows (header = row 1), so reading = row - 1;
    a range starting on the header row starts at the first reading.
    Returns dict with: derived, shift_value, insights.
    """
    gravity = config.GRAVITY_MS2 if gravity is None else gravity
    shift_from = max(settings.shift_sample_from - 1, 1)
    shift_to = settings.shift_sample_to - 1
    derived, shift_value = integrate_motion(
        readings["unix_time"].values,
        readings["acc_y"].values,
        shift_from,
        shift_to,
        gravity=gravity,
    )
    insights = calculate_insights(derived, shift_value)
    logger.info(
        f"Processed {len(derived)} readings, shift value {shift_value:.4f} m/s² "
        f"(rows {settings.shift_sample_from}-{settings.shift_sample_to})"
    )
    return {"derived": derived, "shift_value": shift_value, "insights": insights}


def run_pipeline(
    settings: Settings,
    source_path: str,
    output_path: str = None,
    write_output: bool = True,
    make_figures: bool = False,
) -> dict:
    """
    Run "Process Data" for one logged sheet.
    Returns dict with: raw, readings, derived, shift_value, insights, output_path, figures.
    Nothing is written unless every computation step succeeded.
    """
    table = load_source_table(source_path, settings.data_sheet)
    raw = copy_columns(table, settings.column_indices())
    readings = readings_from_columns(raw)

    result = process_readings(readings, settings)
    result["raw"] = raw
    result["readings"] = readings

    result["output_path"] = None
    if write_output:
        output_path = output_path or default_output_path(source_path)
        result["output_path"] = write_processed_sheet(
            output_path, raw, result["derived"], result["shift_value"], result["insights"],
        )

    figures = []
    if make_figures:
        figures.append(plot_motion_insights(result["derived"]))
        for spec in insight_chart_specs(len(raw)):
            figures.append(plot_insight_chart(result["derived"], spec))
    result["figures"] = figures
    return result
