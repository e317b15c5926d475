from http import HTTPStatus

import numpy as np
import pandas as pd
import pytest

from mushroom_eda.data import AppState
from mushroom_eda.server import create_app, main

FIT_JSON = {"cap_diameter": {"x": [0.0, 1.0]}}


def make_state():
    frame = pd.DataFrame(
        {
            "cap-diameter": [1.0, 2.0, 3.0, 4.0],
            "stem-width": [3.0, 5.0, 7.0, 9.0],
            "season": [1.0, 1.0, 1.0, 1.0],
        }
    ).astype(np.float32)
    return AppState(df=frame, json=FIT_JSON)


@pytest.fixture
def client():
    return create_app(make_state()).test_client()


def test_single_column_request(client):
    response = client.get("/api/mushroom?col_name=cap_diameter")
    assert response.status_code == HTTPStatus.OK
    body = response.get_json()
    assert body["col_data"] == [1.0, 2.0, 3.0, 4.0]
    assert body["type_of_col"] == "cont"
    assert body["col_json"] == FIT_JSON["cap_diameter"]


def test_fit_request(client):
    response = client.get("/api/mushroom?col_name=cap_diameter&fit_col_name=stem_width")
    body = response.get_json()
    assert set(body) == {"col_data", "second_col_data", "fit_data"}
    assert body["fit_data"] == pytest.approx(body["second_col_data"])


def test_development_allows_any_origin(client):
    response = client.get("/api/mushroom?col_name=cap_diameter")
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "*"


def test_preflight_allows_any_origin(client):
    response = client.options("/api/mushroom")
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Headers"] == "*"


def test_production_sends_no_cors_headers():
    client = create_app(make_state(), production=True).test_client()
    response = client.get("/api/mushroom?col_name=cap_diameter")
    assert response.status_code == HTTPStatus.OK
    assert "Access-Control-Allow-Origin" not in response.headers


def test_missing_col_name_is_bad_request(client):
    response = client.get("/api/mushroom")
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert "col_name" in response.get_data(as_text=True)


def test_unknown_column_is_failed_dependency(client):
    response = client.get("/api/mushroom?col_name=gill_color")
    assert response.status_code == HTTPStatus.FAILED_DEPENDENCY
    assert response.get_data(as_text=True).startswith("DataFrameError: ")


def test_singular_fit_is_expectation_failed(client):
    response = client.get("/api/mushroom?col_name=season&fit_col_name=cap_diameter")
    assert response.status_code == HTTPStatus.EXPECTATION_FAILED
    assert response.get_data(as_text=True).startswith("RegressionError: ")


def test_main_fails_without_data_file(tmp_path):
    assert main(["--data", str(tmp_path / "absent.csv")]) == 1


def test_main_fails_without_fit_json(tmp_path):
    data = tmp_path / "mushroom.csv"
    data.write_text("cap-diameter\n1.0\n")
    argv = ["--data", str(data), "--fit-json", str(tmp_path / "absent.json")]
    assert main(argv) == 1