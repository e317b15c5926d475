"""Single-column mushroom pages: their content and the data they load."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import requests

from .charts import fetch_single_col_histogram
from .client import DEFAULT_BASE_API
from .events import TableData, table_options
from .routes import Route

REST_SCALE = 1.0
HOVER_SCALE = 1.2


@dataclass
class PageState:
    """What a page shows after loading: a spinner, the chart and table, or an error."""

    is_hidden: bool = True
    figure: dict[str, Any] | None = None
    table_rows: list[TableData] = field(default_factory=list)
    error: str = ""

    @property
    def table_options(self) -> dict[str, Any]:
        """Options for the distribution-fit table built from the loaded rows."""
        return table_options(self.table_rows)


@dataclass(frozen=True)
class SingleColumnPage:
    """A page showing one column's histogram, its notes and its fit table.

    ``images`` holds (caption, asset path) pairs; a caption of None marks
    the header image shown under the title.
    """

    col_name: str
    title: str
    observations_heading: str
    plot_div_id: str
    table_div_id: str
    markdown: str
    route: Route | None = None
    images: tuple[tuple[str | None, str], ...] = ()

    @staticmethod
    def image_scale(hovered: bool) -> float:
        """The scale an image is drawn at, enlarged while the pointer is over it."""
        return HOVER_SCALE if hovered else REST_SCALE

    def load(self, base_api: str = DEFAULT_BASE_API) -> PageState:
        """Fetch the column and build the page state; failures end up in ``error``."""
        state = PageState()
        try:
            figure, rows = fetch_single_col_histogram(self.col_name, base_api)
        except (requests.RequestException, ValueError) as exc:
            state.error = str(exc)
            return state
        state.is_hidden = False
        state.figure = figure
        state.table_rows = rows
        return state


PAGES: tuple[SingleColumnPage, ...] = (
    SingleColumnPage(
        col_name="cap_diameter",
        title="Mushroom Cap Diatmeter Plot",
        observations_heading="Mushroom Cap Diameter Observations",
        plot_div_id="mushroom-plot",
        table_div_id="mushroom-cap-dia-table",
        markdown="mushroom_markdowns/mushroom_cap_dia_markdown.md",
        route=Route.MUSHROOM_CAP_DIAMETER,
        images=((None, "mushroom_assets/cap_diameter.png"),),
    ),
    SingleColumnPage(
        col_name="cap_shape",
        title="Mushroom Cap Shape Plot",
        observations_heading="Mushroom Cap Shape Observations",
        plot_div_id="mushroom-cap-shape-plot",
        table_div_id="mushroom-cap-shape-table",
        markdown="mushroom_markdowns/mushroom_cap_shape_markdown.md",
        route=Route.MUSHROOM_CAP_SHAPE,
        images=((None, "mushroom_assets/cap_shape.png"),),
    ),
    SingleColumnPage(
        col_name="class",
        title="Mushroom Class Plot",
        observations_heading="Mushroom Class Observations",
        plot_div_id="mushroom-class-plot",
        table_div_id="mushroom-class-table",
        markdown="mushroom_markdowns/mushroom_class_markdown.md",
        route=Route.MUSHROOM_CLASS,
        images=(
            ("Some Common Poisonous Mushrooms", "mushroom_assets/posion.jpeg"),
            ("Some Common Edible Mushrooms", "mushroom_assets/edible_mushroom.png"),
        ),
    ),
    SingleColumnPage(
        col_name="gill_attachment",
        title="Mushroom Gill Attachment Plot",
        observations_heading="Mushroom Gill Attachment Observations",
        plot_div_id="mushroom-gill-attachment-plot",
        table_div_id="mushroom-gill-attachment-table",
        markdown="mushroom_markdowns/mushroom_gill_attachment_markdown.md",
        route=Route.MUSHROOM_GILL_ATTACHMENT,
        images=((None, "mushroom_assets/gill_attchment.png"),),
    ),
    SingleColumnPage(
        col_name="gill_color",
        title="Mushroom Gill Color Plot",
        observations_heading="Mushroom Gill Color Observations",
        plot_div_id="mushroom-gill-color-plot",
        table_div_id="mushroom-gill-color-table",
        markdown="mushroom_markdowns/mushroom_gill_color_markdown.md",
        route=Route.MUSHROOM_GILL_COLOR,
        images=((None, "mushroom_assets/gill_color.jpeg"),),
    ),
)

_BY_NAME = {page.col_name: page for page in PAGES}


def get_page(name: str) -> SingleColumnPage:
    """Return the page for a column name such as ``cap_shape``."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"no page for column: {name}") from None