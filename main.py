#!/usr/bin/env python3
"""CLI for the rule-based résumé scanner."""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from cv_scan import ExtractionError, NoTextError, review_resume
from cv_scan.audit import AuditSink, NullSink, setup_app_logging
from src.run_report import write_run_report


def main():
    parser = argparse.ArgumentParser(
        description="Review a résumé PDF and score it with rule-based checks."
    )
    parser.add_argument(
        "resume_pdf",
        type=Path,
        help="Path to the résumé PDF file",
    )
    parser.add_argument(
        "job_description",
        nargs="*",
        help="Optional job description words (joined with spaces)",
    )
    parser.add_argument(
        "--jd-file",
        type=Path,
        default=None,
        help="Read the job description from a text file instead",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of a summary",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Write a run report JSON to this path",
    )
    parser.add_argument(
        "--audit",
        action="store_true",
        help="Also append review events to logs/audit.log",
    )

    args = parser.parse_args()
    load_dotenv()

    if args.jd_file:
        if not args.jd_file.exists():
            print(f"Error: Job description file not found: {args.jd_file}", file=sys.stderr)
            sys.exit(1)
        job_desc = args.jd_file.read_text(encoding="utf-8")
    else:
        job_desc = " ".join(args.job_description)

    setup_app_logging()
    sink = AuditSink() if args.audit else NullSink()

    try:
        result = review_resume(args.resume_pdf, job_desc, sink=sink)
    except NoTextError:
        print("❌ Could not read text from file.", file=sys.stderr)
        print("The PDF may be scanned. Use a text-based PDF.", file=sys.stderr)
        sys.exit(1)
    except ExtractionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.report:
        write_run_report(args.report, result, args.resume_pdf, job_desc)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print("\n📋 Resume Review Summary")
        print("=========================")
        for item in result.results:
            print(f"• {item}")
        print("=========================")
        print(f"📊 Overall Resume Score: {result.score}/100")
        print("=========================\n")
        if args.report:
            print(f"Run report: {args.report}")


if __name__ == "__main__":
    main()
