"""
Generate a synthetic accelerometer log for trying the pipeline before real
logger exports are available. Simulates a rest period, one push-and-stop
movement along the Y axis, then rest again.
"""

import numpy as np
import pandas as pd

import config


def generate_synthetic_log(
    duration_sec: float = 10.0,
    sample_rate_hz: float = config.SYNTHETIC_SAMPLE_RATE_HZ,
    rest_sec: float = 2.0,
    push_sec: float = 4.0,
    peak_accel_ms2: float = 1.0,
    tilt_bias_g: float = 0.02,
    noise_level_g: float = 0.0,
    start_unix: float = config.SYNTHETIC_START_UNIX,
    seed: int = None,
) -> pd.DataFrame:
    """
    Log with columns config.SYNTHETIC_HEADERS (timestamp, sample, accX, accY, accZ), accel in g.
    The device reads accY = -1 g at rest; motion a(t) (m/s²) is one sine period over
    push_sec, so it starts and ends at rest. Expected travel: peak * push_sec² / (2π).
    """
    rng = np.random.default_rng(seed)
    n = int(duration_sec * sample_rate_hz)
    t = np.arange(n) / sample_rate_hz

    motion = np.zeros(n)
    in_push = (t >= rest_sec) & (t < rest_sec + push_sec)
    motion[in_push] = peak_accel_ms2 * np.sin(2 * np.pi * (t[in_push] - rest_sec) / push_sec)

    acc_y = -1.0 - motion / config.GRAVITY_MS2 + tilt_bias_g + rng.normal(0, noise_level_g, n)
    acc_x = rng.normal(0, noise_level_g, n)
    acc_z = rng.normal(0, noise_level_g, n)

    headers = config.SYNTHETIC_HEADERS
    return pd.DataFrame({
        headers[0]: np.round(start_unix + t, 3),
        headers[1]: np.arange(n),
        headers[2]: acc_x,
        headers[3]: acc_y,
        headers[4]: acc_z,
    })


def write_synthetic_log(filepath: str, **kwargs) -> pd.DataFrame:
    """
    Write a synthetic log to .csv, or to .xlsx in sheet config.SYNTHETIC_SHEET_NAME.
    Columns land in A-E in config.SYNTHETIC_HEADERS order.
    """
    df = generate_synthetic_log(**kwargs)
    if str(filepath).lower().endswith(".csv"):
        df.to_csv(filepath, index=False)
    else:
        df.to_excel(filepath, sheet_name=config.SYNTHETIC_SHEET_NAME, index=False, engine="openpyxl")
    print(f"Wrote synthetic log to {filepath} ({len(df)} rows)")
    return df


def demo_settings():
    """Variables matching a synthetic log: columns A-E, first second of rest as baseline."""
    from settings import Settings

    rest_rows = int(config.SYNTHETIC_SAMPLE_RATE_HZ)
    return Settings(
        data_sheet=config.SYNTHETIC_SHEET_NAME,
        unix_time="A", log_sample="B", acc_x="C", acc_y="D", acc_z="E",
        shift_sample_from=2, shift_sample_to=1 + rest_rows,
    )


if __name__ == "__main__":
    write_synthetic_log("synthetic_acc_log.xlsx", duration_sec=10, seed=42)
