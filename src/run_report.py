"""Generate run_report.json for auditability."""

import json
from pathlib import Path

from src.scoring.engine import tag_counts
from src.utils import hash_file, hash_text, iso_now
from src.validation import validate_run_report


def build_run_report(result, file_path: str | Path, job_desc: str = "") -> dict:
    """
    Report of one review: hashes, score, per-tag counts and feedback.
    No résumé or job description text beyond hashes.
    """
    path = Path(file_path)
    return {
        "timestamp": iso_now(),
        "filename": path.name,
        "resume_hash": hash_file(path),
        "job_desc_hash": hash_text(job_desc) if job_desc else None,
        "score": result.score,
        "result_count": len(result.results),
        "tag_counts": tag_counts(result.results),
        "results": list(result.results),
    }


def write_run_report(output_path: Path, result, file_path: str | Path, job_desc: str = "") -> dict:
    """Validate and write the run report. Raises jsonschema.ValidationError if invalid."""
    report = build_run_report(result, file_path, job_desc)
    validate_run_report(report)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")
    return report
