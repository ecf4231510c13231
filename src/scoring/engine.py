"""Deterministic deduction scoring. Pure code, no I/O."""

from src.scoring.tags import TAG_WEIGHTS, Tag

BASE_SCORE = 100

# Checked in order; the first icon an item starts with is its tag.
TAG_TABLE = tuple(TAG_WEIGHTS)


def tag_of(item: str) -> Tag | None:
    """Return the tag an item starts with, or None for an untagged item."""
    for tag in TAG_TABLE:
        if item.startswith(tag.value):
            return tag
    return None


def calculate_score(results) -> int:
    """
    Start at 100 and subtract each item's tag weight once.
    Untagged items deduct nothing. Result is clamped to [0, 100].
    """
    score = BASE_SCORE
    for item in results:
        tag = tag_of(item)
        if tag is not None:
            score -= tag.weight
    return max(0, min(BASE_SCORE, score))


def tag_counts(results) -> dict[str, int]:
    """Number of items per tag icon, in table order. Used by run reports."""
    counts = {tag.value: 0 for tag in TAG_TABLE}
    for item in results:
        tag = tag_of(item)
        if tag is not None:
            counts[tag.value] += 1
    return counts
