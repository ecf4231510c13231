"""CV Scan - rule-based résumé review and scoring."""

from cv_scan.pdf_parser import ExtractionError, NoTextError, extract_text_from_pdf
from cv_scan.layout import LayoutData, LayoutExtractionError, analyze_formatting, extract_layout
from cv_scan.reviewer import ReviewResult, review_resume

__all__ = [
    "ExtractionError",
    "NoTextError",
    "extract_text_from_pdf",
    "LayoutData",
    "LayoutExtractionError",
    "analyze_formatting",
    "extract_layout",
    "ReviewResult",
    "review_resume",
]
