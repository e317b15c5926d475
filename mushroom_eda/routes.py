"""Site routes, path resolution and the navigation menus."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

_SINGLE = "/mushroom/single_variable"
_DOUBLE = "/mushroom/double_variable"


class Route(enum.Enum):
    """Every page of the site, keyed by its path."""

    HOME = "/"
    MUSHROOM_CAP_DIAMETER = f"{_SINGLE}/cap_diameter"
    MUSHROOM_CAP_SHAPE = f"{_SINGLE}/cap_shape"
    MUSHROOM_GILL_ATTACHMENT = f"{_SINGLE}/gill_attachment"
    MUSHROOM_GILL_COLOR = f"{_SINGLE}/gill_color"
    MUSHROOM_STEM_HEIGHT = f"{_SINGLE}/stem_heigth"
    MUSHROOM_STEM_WIDTH = f"{_SINGLE}/stem_width"
    MUSHROOM_CLASS = f"{_SINGLE}/class"
    CAP_DIAMETER_VS_STEM_HEIGHT = f"{_DOUBLE}/cap_diameter_vs_stem_height"
    CAP_DIAMETER_VS_STEM_WIDTH = f"{_DOUBLE}/cap_diameter_vs_stem_width"
    CAP_SHAPE_VS_GILL_ATTACHMENT = f"{_DOUBLE}/cap_shape_vs_gill_attachment"
    CAP_SHAPE_VS_GILL_COLOR = f"{_DOUBLE}/cap_shape_vs_gill_color"
    CLASS_VS_CAP_DIAMETER = f"{_DOUBLE}/class_vs_cap_diameter"
    GILL_ATTACHMENT_VS_GILL_COLOR = f"{_DOUBLE}/gill_attachment_vs_gill_color"
    GILL_COLOR_VS_STEM_COLOR = f"{_DOUBLE}/gill_color_vs_stem_color"
    GILL_COLOR_VS_STEM_HEIGHT = f"{_DOUBLE}/gill_color_vs_stem_height"
    GILL_COLOR_VS_STEM_WIDTH = f"{_DOUBLE}/gill_color_vs_stem_width"
    SEASON_VS_CAP_DIAMETER = f"{_DOUBLE}/season_vs_cap_diameter"
    STEM_COLOR_VS_CLASS = f"{_DOUBLE}/stem_color_vs_class"
    STEM_COLOR_VS_STEM_HEIGHT = f"{_DOUBLE}/stem_color_vs_stem_height"
    STEM_WIDTH_VS_STEM_HEIGHT = f"{_DOUBLE}/stem_width_vs_stem_height"
    MUSHROOM_INDEX = "/mushroom/"
    COVID_INDEX = "/covid/"
    KFC_STOCK_INDEX = "/kfc_stock/"
    NOT_FOUND = "/..all_matches"

    def path(self) -> str:
        """The path this route is served at."""
        return self.value

    @property
    def heading(self) -> str | None:
        """The heading an index page shows, or None for other pages."""
        return _HEADINGS.get(self)


_HEADINGS = {
    Route.HOME: "Index Page",
    Route.MUSHROOM_INDEX: "Mushroom Index Page",
    Route.COVID_INDEX: "This is Covid Index Page",
    Route.KFC_STOCK_INDEX: "This is KfcIndexPage",
}


def _segments(path: str) -> list[str]:
    return [unquote(part) for part in urlsplit(path).path.split("/") if part]


_BY_SEGMENTS = {
    tuple(_segments(route.value)): route for route in Route if route is not Route.NOT_FOUND
}


def resolve(path: str) -> tuple[Route, list[str]]:
    """Find the route for a path.

    Returns the route and, for an unknown path, the path's segments;
    for a known path the segment list is empty.
    """
    segments = _segments(path)
    route = _BY_SEGMENTS.get(tuple(segments))
    if route is None:
        return Route.NOT_FOUND, segments
    return route, []


def not_found_message(all_matches: Sequence[str]) -> str:
    """The message of the not-found page for the unmatched segments."""
    if not all_matches:
        raise ValueError("a not-found page needs at least one path segment")
    return f"404 Error Page {all_matches[0]}  Not Found"


@dataclass(frozen=True)
class MenuItem:
    """An entry of a dropdown menu; without a route it is a section divider."""

    label: str
    route: Route | None = None
    icon: str | None = None

    @property
    def is_divider(self) -> bool:
        return self.route is None


def main_menu() -> list[MenuItem]:
    """The top-level dataset menu."""
    return [
        MenuItem("INDEX", Route.HOME, "assets/index.png"),
        MenuItem("MUSHROOM", Route.MUSHROOM_INDEX, "assets/mushroom.png"),
        MenuItem("COVID", Route.COVID_INDEX, "assets/covid.png"),
        MenuItem("KFC STOCK", Route.KFC_STOCK_INDEX, "assets/kfc_stock.png"),
    ]


def _mushroom_single_items() -> list[MenuItem]:
    return [
        MenuItem("INDEX", Route.MUSHROOM_INDEX),
        MenuItem("CAP DIAMETER", Route.MUSHROOM_CAP_DIAMETER),
        MenuItem("CAP SHAPE", Route.MUSHROOM_CAP_SHAPE),
        MenuItem("GILL ATTACHMENT", Route.MUSHROOM_GILL_ATTACHMENT),
        MenuItem("GILL COLOR", Route.MUSHROOM_GILL_COLOR),
        MenuItem("STEM HEIGHT", Route.MUSHROOM_STEM_HEIGHT),
        MenuItem("STEM WIDTH", Route.MUSHROOM_STEM_WIDTH),
    ]


def mushroom_menu() -> list[MenuItem]:
    """The mushroom menu: single columns, a divider, then column pairs."""
    return [
        *_mushroom_single_items(),
        MenuItem("CLASS", Route.MUSHROOM_CLASS),
        MenuItem("categorical vs categorical columns"),
        MenuItem("CAP DIAMETER VS STEM WIDTH", Route.CAP_DIAMETER_VS_STEM_WIDTH),
    ]


def covid_menu() -> list[MenuItem]:
    """The menu shown on the covid pages."""
    return _mushroom_single_items()


def kfc_stock_menu() -> list[MenuItem]:
    """The menu shown on the stock pages."""
    return _mushroom_single_items()