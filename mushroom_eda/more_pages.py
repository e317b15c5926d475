"""The remaining single-column mushroom pages and the full page list."""

from __future__ import annotations

from .pages import PAGES, SingleColumnPage
from .routes import Route

MORE_PAGES: tuple[SingleColumnPage, ...] = (
    SingleColumnPage(
        col_name="season",
        title="Mushroom Season Plot",
        observations_heading="Mushroom Season Observations",
        plot_div_id="mushroom-season-plot",
        table_div_id="mushroom-season-table",
        markdown="mushroom_markdowns/mushroom_season_markdown.md",
    ),
    SingleColumnPage(
        col_name="stem_color",
        title="Mushroom Stem Color Plot",
        observations_heading="Mushroom Stem Color Observations",
        plot_div_id="mushroom-stem-color-plot",
        table_div_id="mushroom-stem-color-table",
        markdown="mushroom_markdowns/mushroom_stem_color_markdown.md",
        images=((None, "mushroom_assets/stem_color.jpeg"),),
    ),
    SingleColumnPage(
        col_name="stem_height",
        title="Mushroom Stem Height Plot",
        observations_heading="Mushroom Stem Height Observations",
        plot_div_id="mushroom-stem-height-plot",
        table_div_id="mushroom-stem-height-table",
        markdown="mushroom_markdowns/mushroom_stem_height_markdown.md",
        route=Route.MUSHROOM_STEM_HEIGHT,
        images=((None, "mushroom_assets/stem_height.png"),),
    ),
    SingleColumnPage(
        col_name="stem_width",
        title="Mushroom Stem Width Plot",
        observations_heading="Mushroom Stem Width Observations",
        plot_div_id="mushroom-stem-width-plot",
        table_div_id="mushroom-stem-width-table",
        markdown="mushroom_markdowns/mushroom_stem_width_markdown.md",
        route=Route.MUSHROOM_STEM_WIDTH,
        images=((None, "mushroom_assets/stem_width.png"),),
    ),
)


def all_pages() -> list[SingleColumnPage]:
    """Every single-column page, in the order the columns are listed."""
    return [*PAGES, *MORE_PAGES]