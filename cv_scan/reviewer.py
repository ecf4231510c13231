"""Orchestrates a single résumé review: extract → checks → score."""

from dataclasses import dataclass, field
from pathlib import Path

from cv_scan.audit import EventSink, LoggerSink
from cv_scan.layout import analyze_formatting
from cv_scan.pdf_parser import ExtractionError, NoTextError, extract_text_from_pdf
from src.checks import TEXT_CHECKS
from src.scoring import calculate_score


@dataclass(frozen=True)
class ReviewResult:
    score: int
    results: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {"score": self.score, "results": list(self.results)}


def run_text_checks(text: str, job_desc: str = "", sink: EventSink | None = None) -> list[str]:
    """
    Run the text checks in battery order and concatenate their feedback.
    A check that raises is recorded as `check_failed` and contributes nothing.
    """
    sink = sink or LoggerSink()
    results: list[str] = []
    for name, check, takes_job_desc in TEXT_CHECKS:
        try:
            items = check(text, job_desc) if takes_job_desc else check(text)
        except Exception as e:
            sink.record("check_failed", check=name, error=str(e))
            continue
        results.extend(items)
    return results


def review_resume(
    file_path: str | Path,
    job_desc: str = "",
    sink: EventSink | None = None,
) -> ReviewResult:
    """
    Review a résumé PDF and score it.

    Args:
        file_path: Path to the résumé PDF.
        job_desc: Optional job description for the keyword match check.
        sink: Receives review events; defaults to the `cv_scan` logger.

    Returns:
        ReviewResult with the score (0-100) and feedback items in battery order.

    Raises:
        ExtractionError: the file cannot be read.
        NoTextError: the PDF has no extractable text, so no score is computed.
    """
    sink = sink or LoggerSink()
    path = Path(file_path)
    job_desc = job_desc or ""
    sink.record("review_started", file=str(path), job_desc_chars=len(job_desc))

    try:
        text = extract_text_from_pdf(path)
        if not text.strip():
            raise NoTextError(f"Could not read text from file: {path.name}")
    except ExtractionError as e:
        sink.record("review_failed", file=str(path), error=str(e))
        raise

    results = run_text_checks(text, job_desc, sink)
    results.extend(analyze_formatting(path))

    score = calculate_score(results)
    result = ReviewResult(score=score, results=tuple(results))

    for item in result.results:
        sink.record("feedback", item=item)
    sink.record(
        "review_completed",
        file=str(path),
        score=score,
        result_count=len(result.results),
        resume_char_count=len(text),
    )
    return result
