"""
Spreadsheet boundary: read the logged sheet, copy the configured columns,
and write the processed sheet (values, insights and line charts) with openpyxl.
"""

import logging
from pathlib import Path

import numpy as np
import pandas as pd
import openpyxl
from openpyxl.chart import LineChart, Reference

import config
from a1_notation import column_to_letter
from errors import DataSheetNotFoundError, InvalidColumnReferenceError, OutputSheetExistsError
from insights import Insights
from visualization import insight_chart_specs

logger = logging.getLogger(__name__)


def load_source_table(filepath: str, sheet_name: str = None) -> pd.DataFrame:
    """
    Load every cell of the logged sheet, header row included, with no header inference.
    .csv files are a single sheet, so sheet_name is ignored for them.
    """
    filepath = Path(filepath)
    if filepath.suffix.lower() == ".csv":
        # Header and data read separately so the numbers keep their numeric types.
        header = pd.read_csv(filepath, header=None, nrows=1)
        data = pd.read_csv(filepath, header=None, skiprows=1)
        table = pd.concat([header.astype(object), data.astype(object)], ignore_index=True)
    else:
        with pd.ExcelFile(filepath, engine="openpyxl") as xls:
            if sheet_name not in xls.sheet_names:
                raise DataSheetNotFoundError(
                    f"Sheet '{sheet_name}' not found in {filepath}; re-run Set Variables with one of {xls.sheet_names}"
                )
            table = xls.parse(sheet_name, header=None)
    logger.info(f"Loaded {len(table)} rows x {table.shape[1]} columns from {filepath}")
    return table


def copy_columns(table: pd.DataFrame, column_indices: dict) -> pd.DataFrame:
    """
    Pick the configured columns verbatim (header row included).
    column_indices maps raw column name -> 1-based source column number.
    """
    width = table.shape[1]
    picked = {}
    for name, col in column_indices.items():
        if col > width:
            raise InvalidColumnReferenceError(
                f"Column {column_to_letter(col)} ({name}) is outside the data sheet ({width} columns)"
            )
        picked[name] = table.iloc[:, col - 1].values
    return pd.DataFrame(picked, columns=list(column_indices))


def readings_from_columns(raw: pd.DataFrame) -> pd.DataFrame:
    """Data rows (sheet row 2 onwards) as numbers; text cells become NaN."""
    return raw.iloc[1:].apply(pd.to_numeric, errors="coerce").reset_index(drop=True)


def _cell_value(value):
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and np.isnan(value):
        return None
    return value


def add_insight_charts(ws, n_rows: int) -> None:
    """Native line charts over sheet rows 1..n_rows (row 1 = series title)."""
    for spec in insight_chart_specs(n_rows):
        x_col = config.DERIVED_COLUMN_LAYOUT[spec.x_column][0]
        y_col = config.DERIVED_COLUMN_LAYOUT[spec.y_column][0]
        chart = LineChart()
        chart.title = spec.title
        chart.legend.position = "b"
        chart.x_axis.title = "Elapsed time (s)"
        chart.y_axis.title = spec.y_label
        chart.add_data(Reference(ws, min_col=y_col, min_row=1, max_row=spec.n_rows), titles_from_data=True)
        chart.set_categories(Reference(ws, min_col=x_col, min_row=2, max_row=spec.n_rows))
        ws.add_chart(chart, spec.anchor_cell)


def write_processed_sheet(
    filepath: str,
    raw: pd.DataFrame,
    derived: pd.DataFrame,
    shift_value: float,
    insights: Insights,
    sheet_name: str = config.OUTPUT_SHEET_NAME,
) -> Path:
    """
    Create sheet_name in filepath (new workbook if the file does not exist) holding
    the raw columns, the derived columns, the insights table and three charts.
    An existing sheet of that name is never overwritten.
    """
    filepath = Path(filepath)
    if filepath.exists():
        # Macro-enabled workbooks keep their VBA part and content type
        wb = openpyxl.load_workbook(filepath, keep_vba=filepath.suffix.lower() == ".xlsm")
        if sheet_name in wb.sheetnames:
            raise OutputSheetExistsError(f"Sheet '{sheet_name}' already exists in {filepath}")
        ws = wb.create_sheet(title=sheet_name)
    else:
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = sheet_name

    # Raw columns A-E
    for r_idx, row in enumerate(raw.itertuples(index=False), 1):
        for c_idx, value in enumerate(row, 1):
            ws.cell(row=r_idx, column=c_idx, value=_cell_value(value))

    for name, (col, header) in config.DERIVED_COLUMN_LAYOUT.items():
        ws.cell(row=1, column=col, value=header)
        for r_idx, value in enumerate(derived[name].values, 2):
            ws.cell(row=r_idx, column=col, value=_cell_value(value))

    ws.cell(row=1, column=config.COL_SHIFT_VALUE, value=config.SHIFT_VALUE_HEADER)
    ws.cell(row=2, column=config.COL_SHIFT_VALUE, value=_cell_value(shift_value))

    for r_idx, (label, value) in enumerate(insights.as_rows(), 2):
        ws.cell(row=r_idx, column=config.COL_INSIGHT_ANCHOR, value=label)
        ws.cell(row=r_idx, column=config.COL_INSIGHT_ANCHOR + 1, value=_cell_value(value))
    ws.column_dimensions[column_to_letter(config.COL_INSIGHT_ANCHOR)].width = 26

    add_insight_charts(ws, n_rows=len(raw))
    ws.freeze_panes = "A2"

    wb.save(filepath)
    logger.info(f"Wrote sheet '{sheet_name}' ({len(raw)} rows) to {filepath}")
    return filepath
