"""PDF parsing utilities for extracting text from résumés."""

from pathlib import Path

from pypdf import PdfReader


class ExtractionError(RuntimeError):
    """Raised when a résumé file cannot be read or parsed as a PDF."""


class NoTextError(ExtractionError):
    """Raised when a readable PDF yields no text at all (image-only scan)."""


def extract_text_from_pdf(pdf_path: str | Path) -> str:
    """
    Extract text from a PDF file (e.g., résumé).

    Args:
        pdf_path: Path to the PDF file.

    Returns:
        Extracted text content. Returns empty string if the PDF has no text layer.

    Raises:
        ExtractionError: file is missing, unreadable, or not a valid PDF.

    Note:
        Scanned PDFs (image-only) will return minimal or empty text.
    """
    path = Path(pdf_path)
    if not path.exists():
        raise ExtractionError(f"PDF not found: {path}")

    try:
        reader = PdfReader(path)
        text_parts = []
        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
    except Exception as e:
        raise ExtractionError(f"Could not read PDF {path.name}: {e}") from e

    return "\n\n".join(text_parts).strip()
