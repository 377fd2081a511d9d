import matplotlib

matplotlib.use("Agg")

import pytest

from settings import Settings
from synthetic_data import write_synthetic_log


@pytest.fixture
def synthetic_csv(tmp_path):
    path = tmp_path / "log.csv"
    write_synthetic_log(str(path), seed=1)
    return path


@pytest.fixture
def synthetic_xlsx(tmp_path):
    path = tmp_path / "log.xlsx"
    write_synthetic_log(str(path), seed=1)
    return path


@pytest.fixture
def settings():
    # Synthetic logs: columns A-E, rows 2-11 are the first second at rest
    return Settings(
        data_sheet="log",
        unix_time="A",
        log_sample="B",
        acc_x="C",
        acc_y="D",
        acc_z="E",
        shift_sample_from=2,
        shift_sample_to=11,
    )
