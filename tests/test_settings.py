import json

import pytest

import config
from errors import InvalidColumnReferenceError, MissingConfigurationError
from settings import Settings, load_settings, prompt_settings, save_settings

PROPS = {
    "dataSheet": "log",
    "unixTime": "A",
    "logSample": "B",
    "accX": "C",
    "accY": "D",
    "accZ": "E",
    "shiftSampleFrom": "2",
    "shiftSampleTo": "11",
}


def test_save_and_load(tmp_path, settings):
    path = tmp_path / "vars.json"
    save_settings(settings, path)
    with open(path) as f:
        stored = json.load(f)
    assert stored == PROPS
    assert load_settings(path) == settings


def test_missing_file_means_variables_not_set(tmp_path):
    with pytest.raises(MissingConfigurationError) as exc:
        load_settings(tmp_path / "absent.json")
    assert "Variables not set!" in str(exc.value)
    assert exc.value.missing == config.SETTINGS_KEYS


@pytest.mark.parametrize("key", config.SETTINGS_KEYS)
def test_any_absent_key_is_reported(key):
    props = dict(PROPS)
    del props[key]
    with pytest.raises(MissingConfigurationError) as exc:
        Settings.from_properties(props)
    assert exc.value.missing == (key,)


def test_empty_value_counts_as_missing():
    props = dict(PROPS, accZ="")
    with pytest.raises(MissingConfigurationError):
        Settings.from_properties(props)


def test_column_letters_are_normalised():
    s = Settings.from_properties(dict(PROPS, accY=" d "))
    assert s.acc_y == "D"
    assert s.column_indices() == {"unix_time": 1, "log_sample": 2, "acc_x": 3, "acc_y": 4, "acc_z": 5}


def test_bad_column_letter_raises_at_parse_time():
    with pytest.raises(InvalidColumnReferenceError):
        Settings.from_properties(dict(PROPS, accX="C3"))


def test_bad_row_number_raises_at_parse_time():
    with pytest.raises(InvalidColumnReferenceError):
        Settings.from_properties(dict(PROPS, shiftSampleTo="ten"))


def test_prompt_settings_asks_every_key_in_order():
    asked = []
    answers = iter(PROPS.values())

    def ask(title, text):
        asked.append((title, text))
        return next(answers)

    s = prompt_settings(ask)
    assert s.to_properties() == PROPS
    assert asked == [config.SETTINGS_PROMPTS[k] for k in config.SETTINGS_KEYS]


def test_prompt_settings_cancelled():
    answers = iter(["log", "A", None])
    with pytest.raises(MissingConfigurationError) as exc:
        prompt_settings(lambda title, text: next(answers))
    assert exc.value.missing == ("logSample",)
