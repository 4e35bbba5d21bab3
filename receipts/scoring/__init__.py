"""Deterministic receipt scoring engine."""

from receipts.scoring.engine import RULES, score, score_breakdown

__all__ = ["RULES", "score", "score_breakdown"]
