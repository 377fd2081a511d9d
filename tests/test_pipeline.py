import logging
import math
import zipfile
from dataclasses import replace

import numpy as np
import openpyxl
import pandas as pd
import pytest

import config
from errors import InvalidRangeError
from pipeline import default_output_path, process_readings, run_pipeline
from synthetic_data import generate_synthetic_log

# generate_synthetic_log defaults: one sine push of 1 m/s² peak over 4 s
EXPECTED_TRAVEL = 1.0 * 4.0 ** 2 / (2 * math.pi)
EXPECTED_PEAK_VELOCITY = 1.0 * 4.0 / math.pi


def test_csv_log_end_to_end(synthetic_csv, settings):
    result = run_pipeline(settings, synthetic_csv)
    assert result["output_path"] == synthetic_csv.with_name("log-processed.xlsx")
    assert len(result["raw"]) == 101
    assert len(result["readings"]) == 100
    assert len(result["derived"]) == 100

    # resting rows read -0.98 g, so the shift removes the tilt bias
    assert result["shift_value"] == pytest.approx(0.98 * config.GRAVITY_MS2)
    ins = result["insights"]
    assert ins.max_displacement == pytest.approx(EXPECTED_TRAVEL, rel=0.05)
    assert ins.max_velocity == pytest.approx(EXPECTED_PEAK_VELOCITY, rel=0.05)
    assert ins.max_abs_acceleration == pytest.approx(1.0, rel=0.05)
    assert result["derived"]["velocity"].iloc[-1] == pytest.approx(0.0, abs=1e-3)

    wb = openpyxl.load_workbook(result["output_path"])
    assert wb.sheetnames == [config.OUTPUT_SHEET_NAME]


def test_xlsx_log_gets_sheet_in_place(synthetic_xlsx, settings):
    result = run_pipeline(settings, synthetic_xlsx)
    assert result["output_path"] == synthetic_xlsx
    assert openpyxl.load_workbook(synthetic_xlsx).sheetnames == ["log", config.OUTPUT_SHEET_NAME]


def test_explicit_output_path(tmp_path, synthetic_csv, settings):
    out = tmp_path / "elsewhere.xlsx"
    result = run_pipeline(settings, synthetic_csv, output_path=out)
    assert result["output_path"] == out
    assert out.exists()


def test_shift_rows_outside_data_write_nothing(synthetic_csv, settings):
    bad = replace(settings, shift_sample_to=500)
    with pytest.raises(InvalidRangeError):
        run_pipeline(bad, synthetic_csv)
    assert not default_output_path(synthetic_csv).exists()


def test_baseline_from_header_row_starts_at_first_reading(synthetic_csv, settings):
    from_header = run_pipeline(replace(settings, shift_sample_from=1), synthetic_csv, write_output=False)
    from_first = run_pipeline(settings, synthetic_csv, write_output=False)
    assert from_header["shift_value"] == pytest.approx(from_first["shift_value"])
    pd.testing.assert_frame_equal(from_header["derived"], from_first["derived"])


def test_header_row_alone_is_not_a_baseline(synthetic_csv, settings):
    with pytest.raises(InvalidRangeError):
        run_pipeline(replace(settings, shift_sample_from=1, shift_sample_to=1), synthetic_csv, write_output=False)


def test_macro_enabled_workbook_stays_macro_enabled(tmp_path, synthetic_xlsx, settings):
    xlsm = tmp_path / "log.xlsm"
    openpyxl.load_workbook(synthetic_xlsx, keep_vba=True).save(xlsm)

    result = run_pipeline(settings, xlsm)
    assert result["output_path"] == xlsm
    with zipfile.ZipFile(xlsm) as archive:
        assert b"macroEnabled" in archive.read("[Content_Types].xml")
    assert openpyxl.load_workbook(xlsm, keep_vba=True).sheetnames == ["log", config.OUTPUT_SHEET_NAME]


def test_single_row_baseline(settings):
    readings = pd.DataFrame({
        "unix_time": [0, 1, 2, 3],
        "log_sample": [0, 1, 2, 3],
        "acc_x": [0.0] * 4,
        "acc_y": [0.0, -1.0, -1.0, 0.0],
        "acc_z": [0.0] * 4,
    })
    result = process_readings(readings, replace(settings, shift_sample_from=3, shift_sample_to=3))
    assert result["shift_value"] == pytest.approx(9.81)
    assert result["derived"]["acc_y_shifted"].tolist() == pytest.approx([-9.81, 0.0, 0.0, -9.81])


def test_acc_z_does_not_change_results(settings):
    log = generate_synthetic_log(seed=5)
    readings = pd.DataFrame({
        "unix_time": log["timestamp"],
        "log_sample": log["sample"],
        "acc_x": log["accX"],
        "acc_y": log["accY"],
        "acc_z": log["accZ"],
    })
    first = process_readings(readings, settings)
    readings["acc_z"] = np.nan
    second = process_readings(readings, settings)
    pd.testing.assert_frame_equal(first["derived"], second["derived"])


def test_rerun_gives_identical_values(synthetic_csv, settings):
    first = run_pipeline(settings, synthetic_csv, write_output=False)
    second = run_pipeline(settings, synthetic_csv, write_output=False)
    assert first["output_path"] is None
    pd.testing.assert_frame_equal(first["derived"], second["derived"])
    assert first["insights"] == second["insights"]


def test_figures(synthetic_csv, settings):
    result = run_pipeline(settings, synthetic_csv, write_output=False, make_figures=True)
    assert len(result["figures"]) == 4


def test_logs_progress(synthetic_csv, settings, caplog):
    with caplog.at_level(logging.INFO):
        run_pipeline(settings, synthetic_csv)
    messages = [r.getMessage() for r in caplog.records]
    assert any("Processed 100 readings" in m for m in messages)
    assert any(config.OUTPUT_SHEET_NAME in m for m in messages)
