"""Layout extraction: fonts, font sizes and left margins of every text run."""

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path

from pypdf import PdfReader

from src.checks.formatting import (
    FORMATTING_FAILED,
    BULLET_MARKER_PATTERN,
    check_formatting_consistency,
)

log = logging.getLogger("cv_scan.layout")


class LayoutExtractionError(RuntimeError):
    """Raised when the page content model of a PDF cannot be walked."""


@dataclass(frozen=True)
class LayoutSample:
    """One text run as drawn on the page."""

    font_name: str | None
    font_size: int
    left_offset: int


@dataclass(frozen=True)
class LayoutData:
    samples: tuple[LayoutSample, ...] = ()
    fonts: frozenset[str] = frozenset()
    font_sizes: frozenset[int] = frozenset()
    left_offsets: tuple[int, ...] = ()
    bullet_markers: frozenset[str] = frozenset()

    @classmethod
    def from_samples(cls, samples, first_page_text: str = "") -> "LayoutData":
        samples = tuple(samples)
        return cls(
            samples=samples,
            fonts=frozenset(s.font_name for s in samples if s.font_name),
            font_sizes=frozenset(s.font_size for s in samples),
            left_offsets=tuple(s.left_offset for s in samples),
            bullet_markers=find_bullet_markers(first_page_text),
        )


def find_bullet_markers(text: str) -> frozenset[str]:
    """Distinct bullet glyphs that open a line of text."""
    return frozenset(re.findall(BULLET_MARKER_PATTERN, text, re.MULTILINE))


def round_half_up(value: float) -> int:
    """Round halves up (10.5 -> 11, 11.5 -> 12), unlike round()."""
    return math.floor(value + 0.5)


def _multiply(m1, m2) -> list[float]:
    """Product of two PDF affine matrices given as [a, b, c, d, e, f]."""
    a1, b1, c1, d1, e1, f1 = (float(v) for v in m1)
    a2, b2, c2, d2, e2, f2 = (float(v) for v in m2)
    return [
        a1 * a2 + b1 * c2,
        a1 * b2 + b1 * d2,
        c1 * a2 + d1 * c2,
        c1 * b2 + d1 * d2,
        e1 * a2 + f1 * c2 + e2,
        e1 * b2 + f1 * d2 + f2,
    ]


def _font_name(font_dict) -> str | None:
    if not font_dict:
        return None
    base_font = font_dict.get("/BaseFont")
    if base_font is None:
        return None
    return str(base_font).lstrip("/")


def _page_runs(page) -> list[tuple[str, LayoutSample]]:
    """Collect (text, sample) for every non-blank text run on one page."""
    runs: list[tuple[str, LayoutSample]] = []

    def visitor(text, cm, tm, font_dict, font_size):
        if not text or not text.strip():
            return
        position = _multiply(tm, cm)
        size = font_size or 0
        rendering = _multiply([size, 0, 0, size, 0, 0], position)
        runs.append((
            text,
            LayoutSample(
                font_name=_font_name(font_dict),
                font_size=round_half_up(rendering[0]),
                left_offset=round_half_up(position[4]),
            ),
        ))

    page.extract_text(visitor_text=visitor)
    return runs


def extract_layout(pdf_path: str | Path) -> LayoutData:
    """
    Walk every page of the PDF and record font, size and left offset per text run.

    Page 1 text is rebuilt from its runs (one run per line) to find the bullet
    glyphs in use.

    Raises:
        LayoutExtractionError: the document or one of its pages cannot be parsed,
            or no page carries any text.
    """
    path = Path(pdf_path)
    try:
        reader = PdfReader(path)
        samples: list[LayoutSample] = []
        first_page_text = ""
        for number, page in enumerate(reader.pages, start=1):
            runs = _page_runs(page)
            log.debug("Page %d: %d text runs", number, len(runs))
            samples.extend(sample for _, sample in runs)
            if number == 1:
                first_page_text = "\n".join(text.strip() for text, _ in runs)
    except Exception as e:
        raise LayoutExtractionError(f"Could not walk layout of {path.name}: {e}") from e

    if not samples:
        raise LayoutExtractionError(f"No text runs in {path.name} (image-only PDF?)")
    return LayoutData.from_samples(samples, first_page_text)


def analyze_formatting(pdf_path: str | Path) -> list[str]:
    """Formatting consistency check for a file; layout failures become one ❌ item."""
    try:
        layout = extract_layout(pdf_path)
    except LayoutExtractionError as e:
        log.warning("Formatting analysis failed: %s", e)
        return [FORMATTING_FAILED]
    return check_formatting_consistency(layout)
