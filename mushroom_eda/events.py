"""Chart click events and the rows of the distribution-fit table."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


def _index(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"invalid value for `{name}`: expected a non-negative integer")
    return value


def _optional_index(value: Any, name: str) -> int | None:
    return None if value is None else _index(value, name)


def _optional_number(value: Any, name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"invalid value for `{name}`: expected a number")
    return float(value)


def _optional_indices(value: Any, name: str) -> list[int] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError(f"invalid value for `{name}`: expected a list")
    return [_index(item, name) for item in value]


@dataclass
class ClickPoint:
    """One point reported by a chart click."""

    curve_number: int = 0
    point_numbers: list[int] | None = None
    point_number: int | None = None
    x: float | None = None
    y: float | None = None
    z: float | None = None
    lat: float | None = None
    lon: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClickPoint:
        """Read a point from its camelCase mapping; curveNumber is required."""
        if not isinstance(data, Mapping):
            raise ValueError("a click point must be a mapping")
        if "curveNumber" not in data:
            raise ValueError("missing field `curveNumber`")
        return cls(
            curve_number=_index(data["curveNumber"], "curveNumber"),
            point_numbers=_optional_indices(data.get("pointNumbers"), "pointNumbers"),
            point_number=_optional_index(data.get("pointNumber"), "pointNumber"),
            x=_optional_number(data.get("x"), "x"),
            y=_optional_number(data.get("y"), "y"),
            z=_optional_number(data.get("z"), "z"),
            lat=_optional_number(data.get("lat"), "lat"),
            lon=_optional_number(data.get("lon"), "lon"),
        )


@dataclass
class ClickEvent:
    """A click on a chart; holds the points that were hit."""

    points: list[ClickPoint] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClickEvent:
        """Read an event; without a points field it holds one default point."""
        if not isinstance(data, Mapping):
            raise ValueError("a click event must be a mapping")
        if "points" not in data:
            return cls(points=[ClickPoint()])
        points = data["points"]
        if not isinstance(points, list):
            raise ValueError("invalid value for `points`: expected a list")
        return cls(points=[ClickPoint.from_dict(point) for point in points])


@dataclass(frozen=True)
class TableData:
    """One row of the distribution-fit table."""

    distribution_name: str
    p_value: float

    def to_dict(self) -> dict[str, Any]:
        """Return the row with the column names the table shows."""
        return {"DistributionName": self.distribution_name, "P-Value": self.p_value}


def table_options(data: Iterable[TableData]) -> dict[str, Any]:
    """Options for a table that derives its columns from the rows."""
    return {
        "data": [row.to_dict() for row in data],
        "autoColumns": True,
        "layout": "fitDataTable",
    }