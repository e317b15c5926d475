import json
from http import HTTPStatus

import numpy as np
import pytest

from mushroom_eda.data import (
    AppState,
    BackendError,
    DataFrameError,
    RegressionError,
    StorageError,
    TaskJoinError,
    load_fit_json,
    load_mushroom_frame,
)

CSV = "cap-diameter,cap-shape,stem-width\n1.5,2,3.25\n4,,6\n"


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "mushroom.csv"
    path.write_text(CSV)
    return path


def test_load_frame_casts_every_column_to_float32(csv_path):
    frame = load_mushroom_frame(csv_path)
    assert list(frame.columns) == ["cap-diameter", "cap-shape", "stem-width"]
    assert all(dtype == np.float32 for dtype in frame.dtypes)
    assert frame["cap-diameter"].tolist() == [1.5, 4.0]
    assert frame["stem-width"].tolist() == [3.25, 6.0]


def test_load_frame_turns_text_into_missing_values(tmp_path):
    path = tmp_path / "text.csv"
    path.write_text("season\nabc\n2\n")
    state = AppState(df=load_mushroom_frame(path))
    assert state.column("season").tolist() == [0.0, 2.0]


def test_load_frame_missing_file_is_storage_error(tmp_path):
    with pytest.raises(StorageError):
        load_mushroom_frame(tmp_path / "absent.csv")


def test_column_replaces_missing_with_zero(csv_path):
    state = AppState(df=load_mushroom_frame(csv_path))
    values = state.column("cap-shape")
    assert values.dtype == np.float32
    assert values.tolist() == [2.0, 0.0]


def test_unknown_column_is_dataframe_error(csv_path):
    state = AppState(df=load_mushroom_frame(csv_path))
    with pytest.raises(DataFrameError, match="gill-color"):
        state.column("gill-color")


def test_fit_json_round_trip(tmp_path):
    document = {"cap_diameter": {"x": [0.0, 1.0], "norm": {"y": [0.5, 0.25], "p": 0.5}}}
    path = tmp_path / "fit.json"
    path.write_text(json.dumps(document))
    assert load_fit_json(path) == document


def test_fit_json_missing_file_is_storage_error(tmp_path):
    with pytest.raises(StorageError):
        load_fit_json(tmp_path / "absent.json")


def test_fit_json_invalid_content_is_storage_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(StorageError):
        load_fit_json(path)


@pytest.mark.parametrize(
    ("error_type", "status"),
    [
        (DataFrameError, HTTPStatus.FAILED_DEPENDENCY),
        (TaskJoinError, HTTPStatus.EXPECTATION_FAILED),
        (StorageError, HTTPStatus.EXPECTATION_FAILED),
        (RegressionError, HTTPStatus.EXPECTATION_FAILED),
    ],
)
def test_errors_map_to_http_status(error_type, status):
    error = error_type("boom")
    assert isinstance(error, BackendError)
    assert error.status_code == status
    assert str(error) == "boom"