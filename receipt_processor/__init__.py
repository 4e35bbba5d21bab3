"""Receipt Processor - loyalty points for purchase receipts over HTTP."""

from receipt_processor.audit import audit_log, setup_app_logging
from receipt_processor.web_service import get_points, process_receipt, score_receipt

__all__ = ["audit_log", "setup_app_logging", "get_points", "process_receipt", "score_receipt"]
