"""Deterministic scoring engine."""

from src.scoring.engine import calculate_score, tag_of
from src.scoring.tags import Tag, feedback

__all__ = ["calculate_score", "tag_of", "Tag", "feedback"]
