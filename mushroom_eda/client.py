"""HTTP client for the mushroom column API."""

from __future__ import annotations

from typing import Any

import requests

DEFAULT_BASE_API = "http://localhost:3000/api/mushroom"


def build_url(col_name: str, fit_col_name: str | None = None,
              base_api: str = DEFAULT_BASE_API) -> str:
    """Return the request URL for a column, optionally fitted against another."""
    if fit_col_name is not None:
        return f"{base_api}?col_name={col_name}&fit_col_name={fit_col_name}"
    return f"{base_api}?col_name={col_name}"


def get_col_data(col_name: str, fit_col_name: str | None = None,
                 base_api: str = DEFAULT_BASE_API) -> dict[str, Any]:
    """Fetch a column's data; the answer must be a JSON object."""
    response = requests.get(build_url(col_name, fit_col_name, base_api), timeout=60)
    body = response.json()
    if not isinstance(body, dict):
        raise ValueError("expected a JSON object from the mushroom API")
    return body