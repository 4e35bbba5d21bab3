#!/usr/bin/env python3
"""Flask web app for the Receipt Processor."""

import os

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from receipts import ReceiptNotFoundError, ReceiptStore
from receipts.validation import InvalidReceiptError
from receipt_processor.audit import audit_log, setup_app_logging
from receipt_processor.utils import hash_payload
from receipt_processor.web_service import (
    INVALID_RECEIPT_MESSAGE,
    NOT_FOUND_MESSAGE,
    get_points,
    process_receipt,
)

load_dotenv()

DEBUG = os.getenv("RECEIPT_PROCESSOR_DEBUG", "").strip().lower() in ("1", "true", "yes")
HOST = os.getenv("RECEIPT_PROCESSOR_HOST", "0.0.0.0")
PORT = int(os.getenv("RECEIPT_PROCESSOR_PORT", "8080"))

log = setup_app_logging(debug=DEBUG)


def create_app(store: ReceiptStore | None = None) -> Flask:
    """Build the Flask app around a receipt store (a fresh, empty one unless given)."""
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = 1 * 1024 * 1024  # 1MB
    receipt_store = store if store is not None else ReceiptStore()
    app.extensions["receipt_store"] = receipt_store

    @app.route("/receipts/process", methods=["POST"])
    def api_process_receipt():
        """Score a receipt, store it and return its id."""
        data = request.get_json(silent=True)
        if data is None:
            audit_log(action="process", status="rejected", error="body is not valid JSON")
            log.info("Process rejected: body is not valid JSON")
            return jsonify({"error": INVALID_RECEIPT_MESSAGE, "detail": "Request body must be a JSON object."}), 400

        try:
            receipt_id, record = process_receipt(receipt_store, data)
        except InvalidReceiptError as e:
            audit_log(action="process", status="rejected", error=str(e))
            log.info("Process rejected: %s", e)
            return jsonify({"error": INVALID_RECEIPT_MESSAGE, "detail": str(e)}), 400
        except Exception as e:
            audit_log(action="process", status="error", error=str(e))
            log.exception("Process failed")
            return jsonify({"error": str(e)}), 500

        audit_log(
            action="process",
            status="success",
            receipt_id=receipt_id,
            receipt_hash=hash_payload(record.receipt.to_payload()),
            points=record.points,
            extra={"item_count": len(record.receipt.items)},
        )
        log.info("Receipt processed: id=%s points=%d", receipt_id, record.points)
        return jsonify({"id": receipt_id})

    @app.route("/receipts/<receipt_id>/points", methods=["GET"])
    def api_get_points(receipt_id):
        """Return the points awarded to a stored receipt."""
        try:
            points = get_points(receipt_store, receipt_id)
        except ReceiptNotFoundError:
            audit_log(action="points", status="not_found", receipt_id=receipt_id)
            log.info("Points lookup: id=%s not found", receipt_id)
            return jsonify({"error": NOT_FOUND_MESSAGE}), 404
        except Exception as e:
            audit_log(action="points", status="error", receipt_id=receipt_id, error=str(e))
            log.exception("Points lookup failed")
            return jsonify({"error": str(e)}), 500

        audit_log(action="points", status="success", receipt_id=receipt_id, points=points)
        return jsonify({"points": points})

    @app.errorhandler(413)
    def too_large(e):
        log.info("Request rejected: body larger than %d bytes", app.config["MAX_CONTENT_LENGTH"])
        return jsonify({"error": "Request body too large."}), 413

    @app.errorhandler(500)
    def internal_error(e):
        log.error("Unhandled error: %s", getattr(e, "original_exception", e))
        return jsonify({"error": "Internal server error."}), 500

    return app


app = create_app()


if __name__ == "__main__":
    log.info(
        "Receipt Processor starting on http://%s:%d | Logs: %s",
        HOST,
        PORT,
        os.getenv("RECEIPT_PROCESSOR_LOG_DIR") or "logs/",
    )
    app.run(host=HOST, port=PORT, debug=DEBUG, threaded=True)
