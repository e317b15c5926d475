import pytest
import requests
import responses

from mushroom_eda.client import DEFAULT_BASE_API, build_url, get_col_data


def test_build_url_without_fit_column():
    assert build_url("cap_diameter") == "http://localhost:3000/api/mushroom?col_name=cap_diameter"


def test_build_url_with_fit_column():
    url = build_url("cap_diameter", "stem_width", "http://example.com/api")
    assert url == "http://example.com/api?col_name=cap_diameter&fit_col_name=stem_width"


def test_get_col_data_returns_object():
    url = build_url("class")
    with responses.RequestsMock() as mock:
        mock.add(responses.GET, url, json={"col_data": [0.0, 1.0], "type_of_col": "cat"})
        body = get_col_data("class")
        sent = mock.calls[0].request.url
    assert body == {"col_data": [0.0, 1.0], "type_of_col": "cat"}
    assert sent == url


def test_get_col_data_sends_fit_column():
    url = build_url("cap_diameter", "stem_width", DEFAULT_BASE_API)
    with responses.RequestsMock() as mock:
        mock.add(responses.GET, url, json={"col_data": [], "fit_data": []})
        body = get_col_data("cap_diameter", "stem_width")
        sent = mock.calls[0].request.url
    assert body["fit_data"] == []
    assert "fit_col_name=stem_width" in sent


def test_get_col_data_rejects_non_object():
    with responses.RequestsMock() as mock:
        mock.add(responses.GET, build_url("class"), json=[1, 2])
        with pytest.raises(ValueError):
            get_col_data("class")


def test_get_col_data_rejects_text_body():
    with responses.RequestsMock() as mock:
        mock.add(
            responses.GET,
            build_url("nope"),
            body="DataFrameError: column not found",
            status=424,
        )
        with pytest.raises(requests.exceptions.JSONDecodeError):
            get_col_data("nope")