# mushroom_eda

Exploratory data analysis of a cleaned mushroom dataset.

The package has two halves:

- **A JSON API server** (`mushroom_eda.server`) that loads a mushroom CSV
  file and a JSON file of pre-computed distribution fits, and answers
  `GET /api/mushroom`.
- **Client-side helpers** that query that API and turn the answers into
  Plotly-style figure specifications (plain dicts), distribution-fit table
  rows, site routes, navigation menus and page descriptions.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the server

From a directory that holds `datafolder/mushroom_cleaned.csv` and
`datafolder/all_cols_fitted_data.json`:

```
mushroom-eda
```

Options:

| option          | default                                  | meaning                                  |
|-----------------|------------------------------------------|------------------------------------------|
| `--host`        | `::`                                     | address to bind                          |
| `--port`        | `3000`                                   | port to bind                             |
| `--data`        | `datafolder/mushroom_cleaned.csv`        | mushroom CSV file                        |
| `--fit-json`    | `datafolder/all_cols_fitted_data.json`   | JSON file with the fitted distributions  |
| `--production`  | off                                      | do not add cross-origin headers          |

Every CSV column is read as float32; values that are not numbers become
missing. If either file cannot be loaded, the command logs the error and
exits with status 1. Outside `--production`, every response carries
`Access-Control-Allow-Origin: *` (and the same for headers and methods).

### `GET /api/mushroom`

Query parameters:

| name           | required | meaning                                              |
|----------------|----------|------------------------------------------------------|
| `col_name`     | yes      | column to return, e.g. `cap_diameter`                |
| `fit_col_name` | no       | second column; fits a linear regression on the first |

Underscores in column names are mapped to the dataset's hyphenated headers,
so `cap_diameter` reads the `cap-diameter` column. Missing values are sent
as `0`.

Without `fit_col_name` the response holds `col_data`, `col_json` (the entry
for `col_name` in the fit JSON, or `null` when there is none) and
`type_of_col` (`"cont"` for `cap_diameter`, `stem_height` and `stem_width`,
`"cat"` otherwise). With it, the response holds `col_data`,
`second_col_data` and `fit_data`, the predictions of a least-squares line
`y = a*x + b`.

Errors are answered as plain text `"<label>: <message>"`:

- missing `col_name`: status 400;
- unknown or unreadable column (`DataFrameError`): status 424;
- a fit that cannot be solved (`RegressionError`), and other backend
  errors: status 417.

## Using the library

```python
from mushroom_eda.data import AppState, load_mushroom_frame, load_fit_json
from mushroom_eda.mushroom import MushroomQuery, handle_mushroom
from mushroom_eda.server import create_app

state = AppState(
    load_mushroom_frame("datafolder/mushroom_cleaned.csv"),
    load_fit_json("datafolder/all_cols_fitted_data.json"),
)
response = handle_mushroom(state, MushroomQuery.from_params({"col_name": "cap_diameter"}))
print(response.to_dict()["type_of_col"])

app = create_app(state, production=False)
```

`mushroom_eda.mushroom.fit_linear_regression(x, y)` is also usable on its
own; it raises `RegressionError` for inputs of different lengths, fewer than
two points, or a singular system.

On the client side:

```python
from mushroom_eda.charts import fetch_single_col_histogram, fetch_cont_col_vs_cont_col
from mushroom_eda.routes import resolve, mushroom_menu

api = "http://localhost:3000/api/mushroom"
figure, table_rows = fetch_single_col_histogram("cap_shape", api)
scatter = fetch_cont_col_vs_cont_col("cap_diameter", "stem_width", api)

route, unmatched = resolve("/mushroom/single_variable/cap_shape")
for item in mushroom_menu():
    print(item.label, item.route)
```

- `mushroom_eda.client`: `build_url` and `get_col_data`, which fetches a
  column (default API `http://localhost:3000/api/mushroom`).
- `mushroom_eda.charts`: `single_col_histogram` and `cont_col_vs_cont_col`
  build figures from an API answer; the `fetch_*` variants fetch it first.
  `custom_layout()` returns the shared dark layout.
- `mushroom_eda.events`: `ClickPoint` and `ClickEvent` read chart click
  payloads; `TableData` and `table_options` describe the fit table.
- `mushroom_eda.routes`: the `Route` enum of site paths, `resolve`,
  `not_found_message` and the menus `main_menu`, `mushroom_menu`,
  `covid_menu` and `kfc_stock_menu` (lists of `MenuItem`).
- `mushroom_eda.pages`: `SingleColumnPage` descriptions (title, plot and
  table ids, markdown path, images) for cap diameter, cap shape, class, gill
  attachment and gill colour, looked up with `get_page`.
  `SingleColumnPage.load` returns a `PageState` holding the figure and table
  rows, or the error text when the request fails.
- `mushroom_eda.more_pages`: the season, stem colour, stem height and stem
  width pages; `all_pages()` returns every page.

## What this package does not do

The client-side modules produce data only. They do not render HTML, draw
charts, show tables or serve a web front end: figures are dicts in Plotly's
JSON form, and pages refer to markdown and image files by path without
shipping or reading them. The covid and stock sections have only their
index headings and menus; no data is served for them.