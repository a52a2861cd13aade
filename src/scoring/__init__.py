"""Deterministic receipt scoring engine."""

from src.scoring.engine import RULES, compute_points, score_breakdown

__all__ = ["RULES", "compute_points", "score_breakdown"]
