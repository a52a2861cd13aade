#!/usr/bin/env python3
"""Flask web app for the Receipt Processor: submit receipts, look up their points."""

import os

from flask import Flask, jsonify, request
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException

from receipt_api.audit import get_log_dir, setup_app_logging
from receipt_api.service import NOT_FOUND_MESSAGE, InvalidReceiptError, lookup_points, submit_receipt
from src.store import ReceiptStore

load_dotenv()

log = setup_app_logging()

DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"


def create_app(store: ReceiptStore | None = None) -> Flask:
    """Build the app around an explicit store. A fresh store is created if none is given."""
    app = Flask(__name__)
    app.extensions["receipt_store"] = store if store is not None else ReceiptStore()

    def _store() -> ReceiptStore:
        return app.extensions["receipt_store"]

    @app.route("/receipts/process", methods=["POST"])
    def api_process_receipt():
        """Score a receipt and return its new id."""
        payload = request.get_json(force=True, silent=True)
        if payload is None:
            log.warning("Receipt rejected: body is not valid JSON")
            return jsonify({"error": "Invalid JSON"}), 400

        try:
            receipt_id = submit_receipt(_store(), payload)
        except InvalidReceiptError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify({"id": receipt_id})

    @app.route("/receipts/<receipt_id>/points", methods=["GET"])
    def api_get_points(receipt_id):
        """Return the points awarded to a previously processed receipt."""
        points, found = lookup_points(_store(), receipt_id)
        if not found:
            return jsonify({"error": NOT_FOUND_MESSAGE}), 404
        return jsonify({"points": points})

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        log.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Internal server error"}), 500

    return app


app = create_app()


if __name__ == "__main__":
    port = int(os.getenv("PORT", DEFAULT_PORT))
    host = os.getenv("HOST", DEFAULT_HOST)
    log.info("Receipt Processor starting on http://%s:%d | Logs: %s", host, port, get_log_dir())
    app.run(host=host, port=port, threaded=True)
