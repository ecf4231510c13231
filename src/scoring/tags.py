"""Severity tags that prefix every feedback item."""

from enum import Enum


class Tag(Enum):
    RED = "🔴"
    WARNING = "⚠️"
    ORANGE = "🟠"
    YELLOW = "🟡"
    GREEN = "🟢"
    OK = "✅"
    FAILED = "❌"

    @property
    def weight(self) -> int:
        """Points deducted from the score for one item carrying this tag."""
        return TAG_WEIGHTS[self]


TAG_WEIGHTS = {
    Tag.RED: 15,
    Tag.WARNING: 10,
    Tag.ORANGE: 7,
    Tag.YELLOW: 5,
    Tag.GREEN: 0,
    Tag.OK: 0,
    Tag.FAILED: 0,
}


def feedback(tag: Tag, message: str) -> str:
    """Build a feedback item: the tag icon, a space, then the message."""
    return f"{tag.value} {message}"
