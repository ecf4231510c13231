#!/usr/bin/env python3
"""
Repeatability harness: review the same résumé + job description N times; assert identical results.
Exits 0 if stable, 1 if unstable. Prints the differing runs on failure.

Usage: python scripts/repeatability_check.py resume.pdf [--runs 10] [--jd path]
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from cv_scan import ExtractionError, review_resume
from cv_scan.audit import NullSink
from src.utils import hash_file, hash_text

DEFAULT_RUNS = 10


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("resume", type=Path)
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--jd", type=Path, default=None, help="Job description text file")
    args = parser.parse_args()

    if not args.resume.exists():
        print(f"Error: Resume file not found: {args.resume}", file=sys.stderr)
        sys.exit(1)
    job_desc = args.jd.read_text(encoding="utf-8") if args.jd else ""

    print(f"resume_hash: {hash_file(args.resume)[:16]}")
    print(f"job_desc_hash: {hash_text(job_desc)[:16] if job_desc else '-'}")

    runs = []
    for _ in range(args.runs):
        try:
            runs.append(review_resume(args.resume, job_desc, sink=NullSink()))
        except ExtractionError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    first = runs[0]
    unstable = [(i, r) for i, r in enumerate(runs[1:], start=2) if r != first]
    if not unstable:
        print(f"Stable across {args.runs} runs: score={first.score}, items={len(first.results)}")
        sys.exit(0)

    print(f"UNSTABLE: {len(unstable)} of {args.runs - 1} runs differ from run 1 (score={first.score})")
    for i, r in unstable:
        added = [x for x in r.results if x not in first.results]
        missing = [x for x in first.results if x not in r.results]
        print(f"  run {i}: score={r.score} added={added} missing={missing}")
    sys.exit(1)


if __name__ == "__main__":
    main()
