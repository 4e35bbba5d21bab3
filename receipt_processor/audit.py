"""Audit trail and application logging for receipt operations."""

import json
import logging
import os
import threading
from pathlib import Path

from receipt_processor.utils import iso_now

DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
AUDIT_FILENAME = "audit.log"
APP_LOG_FILENAME = "app.log"
LOGGER_NAME = "receipt_processor"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_audit_lock = threading.Lock()


def log_dir() -> Path:
    """Directory for app.log and audit.log (RECEIPT_PROCESSOR_LOG_DIR, else <repo>/logs)."""
    configured = os.environ.get("RECEIPT_PROCESSOR_LOG_DIR", "").strip()
    return Path(configured) if configured else DEFAULT_LOG_DIR


def _ensure_log_dir() -> Path:
    path = log_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def audit_log(
    action: str,
    status: str,
    *,
    receipt_id: str | None = None,
    receipt_hash: str | None = None,
    points: int | None = None,
    error: str | None = None,
    extra: dict | None = None,
):
    """Append a structured audit entry to the audit log (JSONL)."""
    entry = {
        "timestamp": iso_now(),
        "action": action,
        "status": status,
    }
    if receipt_id:
        entry["receipt_id"] = receipt_id
    if receipt_hash:
        entry["receipt_hash"] = receipt_hash
    if points is not None:
        entry["points"] = points
    if error:
        entry["error"] = error
    if extra:
        entry.update(extra)

    line = json.dumps(entry, default=str) + "\n"
    # Request threads share the file.
    with _audit_lock:
        audit_file = _ensure_log_dir() / AUDIT_FILENAME
        with open(audit_file, "a", encoding="utf-8") as f:
            f.write(line)


def setup_app_logging(debug: bool = False) -> logging.Logger:
    """
    Attach a console handler (INFO, or DEBUG when debug=True) and an app.log handler (DEBUG)
    to the receipt_processor logger. Later calls return the already configured logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    targets = [
        (logging.StreamHandler(), logging.DEBUG if debug else logging.INFO),
        (logging.FileHandler(_ensure_log_dir() / APP_LOG_FILENAME, encoding="utf-8"), logging.DEBUG),
    ]
    for handler, level in targets:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
