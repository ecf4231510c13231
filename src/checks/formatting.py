"""Formatting consistency rules over extracted layout data."""

from src.scoring.tags import Tag, feedback

MAX_FONTS = 2
MAX_FONT_SIZES = 4
MAX_LEFT_OFFSET_SPREAD = 30
MAX_BULLET_STYLES = 1

BULLET_MARKER_PATTERN = r"^[-•▪*]"

FORMATTING_FAILED = feedback(Tag.FAILED, "Could not analyze formatting (maybe an image-based PDF).")


def left_offset_spread(left_offsets) -> int:
    """Max minus min left offset; zero when there are no offsets."""
    if not left_offsets:
        return 0
    return max(left_offsets) - min(left_offsets)


def check_formatting_consistency(layout) -> list[str]:
    """
    Flag mixed fonts, too many sizes, ragged left margins and mixed bullet glyphs.

    `layout` is a `cv_scan.layout.LayoutData` (or anything with the same
    `fonts`, `font_sizes`, `left_offsets` and `bullet_markers` attributes).
    """
    issues = []

    if len(layout.fonts) > MAX_FONTS:
        issues.append(feedback(
            Tag.WARNING,
            "Multiple fonts detected — use one consistent font (e.g., Calibri, Arial).",
        ))

    if len(layout.font_sizes) > MAX_FONT_SIZES:
        issues.append(feedback(
            Tag.WARNING,
            "Too many font sizes — use 10–12 pt for text, 14–16 pt for headings.",
        ))

    if left_offset_spread(layout.left_offsets) > MAX_LEFT_OFFSET_SPREAD:
        issues.append(feedback(
            Tag.WARNING,
            "Inconsistent text alignment — keep left margins uniform.",
        ))

    if len(layout.bullet_markers) > MAX_BULLET_STYLES:
        issues.append(feedback(Tag.WARNING, "Different bullet styles used — stick to one format."))

    if not issues:
        issues.append(feedback(Tag.OK, "Formatting appears consistent across sections."))
    return issues
