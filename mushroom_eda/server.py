"""HTTP server exposing the mushroom dataset API."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from flask import Flask, Response, jsonify, request

from .data import (
    DEFAULT_FIT_JSON_PATH,
    DEFAULT_FRAME_PATH,
    AppState,
    BackendError,
    load_fit_json,
    load_mushroom_frame,
)
from .mushroom import MushroomQuery, handle_mushroom

logger = logging.getLogger(__name__)


def create_app(state: AppState, production: bool = False) -> Flask:
    """Build the web application; outside production any origin may call it."""
    app = Flask(__name__)

    @app.get("/api/mushroom")
    def mushroom() -> Response:
        try:
            query = MushroomQuery.from_params(request.args)
        except ValueError as exc:
            return Response(str(exc), status=400, mimetype="text/plain")
        return jsonify(handle_mushroom(state, query).to_dict())

    @app.errorhandler(BackendError)
    def backend_error(exc: BackendError) -> Response:
        return Response(f"{exc.label}: {exc}", status=exc.status_code, mimetype="text/plain")

    if not production:
        @app.after_request
        def allow_any_origin(response: Response) -> Response:
            response.headers["Access-Control-Allow-Origin"] = "*"
            response.headers["Access-Control-Allow-Headers"] = "*"
            response.headers["Access-Control-Allow-Methods"] = "*"
            return response

    return app


def _display_address(host: str, port: int) -> str:
    return f"[{host}]:{port}" if ":" in host else f"{host}:{port}"


def main(argv: Sequence[str] | None = None) -> int:
    """Load the dataset and serve the API until interrupted."""
    parser = argparse.ArgumentParser(
        prog="mushroom-eda", description="Serve the mushroom dataset API."
    )
    parser.add_argument("--host", default="::", help="address to bind (default: ::)")
    parser.add_argument("--port", type=int, default=3000, help="port to bind (default: 3000)")
    parser.add_argument("--data", type=Path, default=DEFAULT_FRAME_PATH,
                        help="mushroom CSV file")
    parser.add_argument("--fit-json", type=Path, default=DEFAULT_FIT_JSON_PATH,
                        help="JSON file with the fitted distributions")
    parser.add_argument("--production", action="store_true",
                        help="do not allow cross-origin requests")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    try:
        state = AppState(df=load_mushroom_frame(args.data), json=load_fit_json(args.fit_json))
    except BackendError as exc:
        logger.error("%s: %s", exc.label, exc)
        return 1

    app = create_app(state, production=args.production)
    logger.info("Server running on : %s", _display_address(args.host, args.port))
    app.run(host=args.host, port=args.port)
    return 0