"""Anagram finder web API — Flask backend."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

# Ensure project root is on sys.path so `anagram.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, Response, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from anagram.constants import (
    DEFAULT_HOST,
    DEFAULT_MIN_LENGTH,
    DEFAULT_PORT,
    DEFAULT_SEARCH_TIMEOUT,
    ENV_HOST,
    ENV_PORT,
    ENV_SEARCH_TIMEOUT,
    GRID_MAX_LENGTH,
    GRID_MIN_LENGTH,
    MAX_INPUT_LENGTH,
    MIN_INPUT_LENGTH,
)
from anagram.dictionary import Dictionary, filter_words, load_default_dictionary
from anagram.finder import InvalidRequest, SearchTimeout, find_words
from anagram.grid_search import find_grid_words

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidRequest(f"'{name}' must be an integer, got {raw!r}") from None


def _truthy(raw: str | None) -> bool:
    return (raw or "").strip().lower() in ("1", "true", "yes")


def _error(message: str, status: int) -> tuple[Response, int]:
    return jsonify({"error": message}), status


def create_app(dictionary: Dictionary | None = None,
               search_timeout: float | None = None) -> Flask:
    """Build the Flask app around one shared, read-only dictionary."""
    app = Flask(__name__)
    if dictionary is None:
        dictionary = load_default_dictionary()
    if search_timeout is None:
        search_timeout = float(os.environ.get(ENV_SEARCH_TIMEOUT, DEFAULT_SEARCH_TIMEOUT))
    app.config["DICTIONARY"] = dictionary
    app.config["SEARCH_TIMEOUT"] = search_timeout

    CORS(
        app,
        origins="*",
        send_wildcard=True,
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # GET /anagrams?input=letters&min=3&max=6 — no automatic OPTIONS here
    @app.route("/anagrams", methods=["GET"], provide_automatic_options=False)
    def anagrams():
        letters = request.args.get("input", "").strip().lower()
        if not (MIN_INPUT_LENGTH <= len(letters) <= MAX_INPUT_LENGTH):
            raise InvalidRequest(
                f"'input' must be {MIN_INPUT_LENGTH}-{MAX_INPUT_LENGTH} letters, got {len(letters)}"
            )
        min_length = _int_arg("min", DEFAULT_MIN_LENGTH)
        max_length = min(_int_arg("max", len(letters)), len(letters))
        if min_length > len(letters):
            # Matches nothing, but the letters still get validated
            max_length = min_length
        words = find_words(
            dictionary, letters, min_length, max_length,
            timeout=app.config["SEARCH_TIMEOUT"],
        )
        return jsonify({"words": words})

    # POST /filter  (body: text/plain, newline-separated words)
    @app.route("/filter", methods=["POST", "OPTIONS"], provide_automatic_options=False)
    def filter_route():
        if request.method == "OPTIONS":
            return Response(status=204)
        text = request.get_data(as_text=True)
        valid = filter_words(dictionary, text, unique=_truthy(request.args.get("unique")))
        return jsonify({"valid": valid})

    @app.route("/wordhunt", methods=["POST"])
    def wordhunt():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise InvalidRequest("Expected a JSON object with a 'board' field")
        board = data.get("board")
        if isinstance(board, str):
            board = [row for row in board.replace(",", "\n").split() if row]
        if not isinstance(board, list):
            raise InvalidRequest("'board' must be a list of rows")
        try:
            min_length = int(data.get("min", GRID_MIN_LENGTH))
            max_length = int(data.get("max", GRID_MAX_LENGTH))
        except (TypeError, ValueError):
            raise InvalidRequest("'min' and 'max' must be integers") from None

        found = find_grid_words(
            dictionary, board, min_length, max_length,
            timeout=app.config["SEARCH_TIMEOUT"],
        )
        return jsonify({
            "words": [
                {"word": gw.word, "path": [[r, c] for r, c in gw.path]}
                for gw in found
            ],
        })

    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "words": dictionary.word_count})

    @app.errorhandler(InvalidRequest)
    def _invalid(e: InvalidRequest):
        return _error(str(e), 400)

    @app.errorhandler(SearchTimeout)
    def _timeout(e: SearchTimeout):
        logger.warning("Search timed out: %s (%s)", request.full_path, e)
        return _error("Search timed out", 503)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return _error(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        logger.exception("Unhandled error on %s", request.path)
        return _error(f"Internal error: {e}", 500)

    @app.after_request
    def _json_charset(response: Response) -> Response:
        if response.mimetype == "application/json":
            response.headers["Content-Type"] = JSON_CONTENT_TYPE
        return response

    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    print(f"Dictionary loaded: {app.config['DICTIONARY'].word_count} words")
    host = os.environ.get(ENV_HOST, DEFAULT_HOST)
    port = int(os.environ.get(ENV_PORT, DEFAULT_PORT))
    print(f"API on http://{host}:{port}")
    app.run(host=host, port=port, threaded=True)
