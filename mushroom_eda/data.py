"""Mushroom dataset loading, shared application state and backend errors."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from http import HTTPStatus
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

CAP_DIAMETER = "cap-diameter"
CAP_SHAPE = "cap-shape"
GILL_ATTACHMENT = "gill-attachment"
GILL_COLOR = "gill-color"
STEM_WIDTH = "stem-width"
STEM_HEIGHT = "stem-height"
STEM_COLOR = "stem-color"
SEASON = "season"
CLASS = "class"

CONT_COLS = ("cap_diameter", "stem_height", "stem_width")
CAT_COLS = ("cap_shape", "class", "gill_attachment", "gill_color", "season", "stem_color")

DEFAULT_FRAME_PATH = Path("datafolder/mushroom_cleaned.csv")
DEFAULT_FIT_JSON_PATH = Path("datafolder/all_cols_fitted_data.json")


class BackendError(Exception):
    """Base error of the backend; carries the HTTP status it maps to."""

    status_code: int = int(HTTPStatus.EXPECTATION_FAILED)
    label: str = "BackendError"


class DataFrameError(BackendError):
    """A data frame operation failed, e.g. a column is missing."""

    status_code = int(HTTPStatus.FAILED_DEPENDENCY)
    label = "DataFrameError"


class TaskJoinError(BackendError):
    """A background task could not be finished."""

    label = "TaskJoinError"


class StorageError(BackendError):
    """Reading a file from disk failed."""

    label = "StorageError"


class RegressionError(BackendError):
    """Fitting a regression model failed."""

    label = "RegressionError"


def load_mushroom_frame(path: str | Path = DEFAULT_FRAME_PATH) -> pd.DataFrame:
    """Read the mushroom CSV and cast every column to float32.

    Values that cannot be read as numbers become missing.
    """
    try:
        frame = pd.read_csv(path)
    except OSError as exc:
        raise StorageError(str(exc)) from exc
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise DataFrameError(str(exc)) from exc
    try:
        numeric = frame.apply(lambda series: pd.to_numeric(series, errors="coerce"))
        return numeric.astype(np.float32)
    except (ValueError, TypeError) as exc:
        raise DataFrameError(str(exc)) from exc


def load_fit_json(path: str | Path = DEFAULT_FIT_JSON_PATH) -> Any:
    """Read the pre-computed distribution fits for every column."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise StorageError(str(exc)) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise StorageError(f"invalid JSON in {path}: {exc}") from exc


@dataclass
class AppState:
    """Data shared by all request handlers."""

    df: pd.DataFrame
    json: Any = field(default_factory=dict)

    def column(self, name: str) -> np.ndarray:
        """Return a column as float32 values, missing entries replaced by zero."""
        try:
            series = self.df[name]
        except KeyError as exc:
            raise DataFrameError(f"column not found: {name}") from exc
        if not isinstance(series, pd.Series):
            raise DataFrameError(f"column name is ambiguous: {name}")
        try:
            values = series.to_numpy(dtype=np.float32, na_value=np.nan)
        except (ValueError, TypeError) as exc:
            raise DataFrameError(f"column {name} is not float32: {exc}") from exc
        return np.where(np.isnan(values), np.float32(0.0), values).astype(np.float32)