"""Chart figures, in plot JSON form, built from the mushroom API answers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np

from .client import DEFAULT_BASE_API, get_col_data
from .events import TableData

TEMPLATE = "plotly_dark"


def _require(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    return data[key]


def _numbers(value: Any, name: str) -> list[float]:
    if not isinstance(value, list):
        raise ValueError(f"invalid value for `{name}`: expected a list of numbers")
    result = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise ValueError(f"invalid value for `{name}`: expected a list of numbers")
        result.append(float(item))
    return result


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"invalid value for `{name}`: expected a number")
    return float(value)


def _mapping(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"invalid value for `{name}`: expected an object")
    return value


def _distinct_count(values: list[float]) -> int:
    return len({str(float(np.float32(value))) for value in values})


def custom_layout() -> dict[str, Any]:
    """The shared dark layout with grid lines off and axis lines on."""
    return {
        "font": {"family": "Monaco", "size": 15},
        "xaxis": {"showgrid": False, "showline": True},
        "yaxis": {"showgrid": False, "showline": True},
        "template": TEMPLATE,
    }


def single_col_histogram(col_name: str, full_data: Mapping[str, Any]
                         ) -> tuple[dict[str, Any], list[TableData]]:
    """Histogram of a column with its fitted distributions on a second axis.

    Returns the figure and one table row per fitted distribution.
    """
    col_data = _numbers(_require(full_data, "col_data"), "col_data")
    fit_map = dict(_mapping(_require(full_data, "col_json"), "col_json"))
    type_of_col = _require(full_data, "type_of_col")
    if not isinstance(type_of_col, str):
        raise ValueError("invalid value for `type_of_col`: expected a string")
    x = _numbers(_require(fit_map, "x"), "x")
    del fit_map["x"]

    histogram: dict[str, Any] = {"type": "histogram", "x": col_data}
    if type_of_col != "cont":
        histogram["nbinsx"] = _distinct_count(col_data)
    histogram["autobinx"] = True
    histogram["name"] = col_name
    traces = [histogram]

    table = []
    for key in sorted(fit_map):
        fit = _mapping(fit_map[key], key)
        y = _numbers(_require(fit, "y"), "y")
        p_value = _number(_require(fit, "p"), "p")
        table.append(TableData(key, p_value))
        traces.append({"type": "scatter", "x": list(x), "y": y, "name": key,
                       "mode": "lines", "yaxis": "y2"})

    label = col_name.replace("_", " ").upper()
    layout = {
        "template": TEMPLATE,
        "title": {"text": f"{label} Histogram Plot"},
        "xaxis": {"showgrid": False, "title": {"text": f"{label} values"}},
        "yaxis": {"showgrid": False, "title": {"text": "Counts"}, "zeroline": True},
        "yaxis2": {"overlaying": "y", "side": "right", "visible": False},
    }
    return {"data": traces, "layout": layout}, table


def cont_col_vs_cont_col(full_data: Mapping[str, Any]) -> dict[str, Any]:
    """Scatter of one column against another, with the fitted line."""
    x = _numbers(_require(full_data, "col_data"), "col_data")
    y = _numbers(_require(full_data, "second_col_data"), "second_col_data")
    y_hat = _numbers(_require(full_data, "fit_data"), "fit_data")
    return {
        "data": [
            {"type": "scattergl", "x": list(x), "y": y, "mode": "markers"},
            {"type": "scattergl", "x": list(x), "y": y_hat, "mode": "lines"},
        ],
        "layout": {
            "template": TEMPLATE,
            "xaxis": {"zeroline": True, "showgrid": False},
            "yaxis": {"zeroline": False, "showgrid": False},
        },
    }


def fetch_single_col_histogram(col_name: str, base_api: str = DEFAULT_BASE_API
                               ) -> tuple[dict[str, Any], list[TableData]]:
    """Fetch a column and build its histogram figure and fit table."""
    return single_col_histogram(col_name, get_col_data(col_name, None, base_api))


def fetch_cont_col_vs_cont_col(first_col: str = "cap_diameter", second_col: str = "stem_width",
                               base_api: str = DEFAULT_BASE_API) -> dict[str, Any]:
    """Fetch two columns with their linear fit and build the scatter figure."""
    return cont_col_vs_cont_col(get_col_data(first_col, second_col, base_api))