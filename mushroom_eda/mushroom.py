"""The mushroom column endpoint: query parsing, response shape and fitting."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np

from .data import CONT_COLS, AppState, RegressionError


class _Unset(enum.Enum):
    UNSET = enum.auto()


_UNSET = _Unset.UNSET


def _as_f32_floats(values: Iterable[float]) -> list[float | None]:
    """Round to float32 and keep the shortest decimal form; non-finite becomes None."""
    result: list[float | None] = []
    for value in np.asarray(list(values) if not isinstance(values, np.ndarray) else values,
                            dtype=np.float32).ravel():
        number = float(str(value))
        result.append(number if math.isfinite(number) else None)
    return result


@dataclass(frozen=True)
class MushroomQuery:
    """Query parameters of the mushroom endpoint."""

    col_name: str
    fit_col_name: str | None = None

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> MushroomQuery:
        """Build a query from request parameters; col_name is required."""
        col_name = params.get("col_name")
        if col_name is None:
            raise ValueError("Failed to deserialize query string: missing field `col_name`")
        return cls(col_name=col_name, fit_col_name=params.get("fit_col_name"))


@dataclass
class MushroomResponse:
    """Body of the mushroom endpoint; unset optional parts are left out."""

    col_data: list[float | None]
    col_json: Any = _UNSET
    type_of_col: str | None = None
    second_col_data: list[float | None] | None = None
    fit_data: list[float | None] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of the set fields."""
        body: dict[str, Any] = {"col_data": list(self.col_data)}
        if self.col_json is not _UNSET:
            body["col_json"] = self.col_json
        if self.type_of_col is not None:
            body["type_of_col"] = self.type_of_col
        if self.second_col_data is not None:
            body["second_col_data"] = list(self.second_col_data)
        if self.fit_data is not None:
            body["fit_data"] = list(self.fit_data)
        return body


def fit_linear_regression(x: Iterable[float], y: Iterable[float]) -> list[float | None]:
    """Fit y = a*x + b by least squares (QR) and return the fitted values."""
    xs = np.asarray(list(x) if not isinstance(x, np.ndarray) else x, dtype=np.float64).ravel()
    ys = np.asarray(list(y) if not isinstance(y, np.ndarray) else y, dtype=np.float64).ravel()
    if xs.size != ys.size:
        raise RegressionError(
            f"x has {xs.size} observations but y has {ys.size}"
        )
    if xs.size < 2:
        raise RegressionError("at least two observations are needed to fit a line")
    design = np.column_stack([xs, np.ones_like(xs)])
    q, r = np.linalg.qr(design)
    diagonal = np.abs(np.diag(r))
    tolerance = np.finfo(np.float64).eps * max(float(diagonal.max()), 1.0) * xs.size
    if not np.all(np.isfinite(diagonal)) or diagonal.min() <= tolerance:
        raise RegressionError("cannot solve a singular matrix")
    coefficients = np.linalg.solve(r, q.T @ ys)
    return _as_f32_floats(design @ coefficients)


def handle_mushroom(state: AppState, query: MushroomQuery) -> MushroomResponse:
    """Answer a column request, with a linear fit when a second column is given."""
    col_data = state.column(query.col_name.replace("_", "-"))
    if query.fit_col_name is not None:
        y = state.column(query.fit_col_name.replace("_", "-"))
        return MushroomResponse(
            col_data=_as_f32_floats(col_data),
            second_col_data=_as_f32_floats(y),
            fit_data=fit_linear_regression(col_data, y),
        )
    document = state.json
    col_json = document.get(query.col_name) if isinstance(document, dict) else None
    return MushroomResponse(
        col_data=_as_f32_floats(col_data),
        col_json=col_json,
        type_of_col="cont" if query.col_name in CONT_COLS else "cat",
    )