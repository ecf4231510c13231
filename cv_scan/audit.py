"""Audit trail and event sinks for résumé reviews."""

import json
import logging
from pathlib import Path
from typing import Protocol

from src.utils import iso_now

AUDIT_DIR = Path(__file__).resolve().parent.parent / "logs"
AUDIT_FILE = AUDIT_DIR / "audit.log"
APP_LOG_FILE = AUDIT_DIR / "app.log"


def _ensure_log_dir():
    AUDIT_DIR.mkdir(parents=True, exist_ok=True)


class EventSink(Protocol):
    """Anything that can record a named review event with keyword fields."""

    def record(self, event: str, **fields) -> None: ...


class NullSink:
    def record(self, event: str, **fields) -> None:
        return None


class MemorySink:
    """Keeps (event, fields) pairs in order."""

    def __init__(self):
        self.events: list[tuple[str, dict]] = []

    def record(self, event: str, **fields) -> None:
        self.events.append((event, fields))

    def named(self, event: str) -> list[dict]:
        return [fields for name, fields in self.events if name == event]


class LoggerSink:
    """Human-readable review summary on a `logging.Logger`."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("cv_scan")

    def record(self, event: str, **fields) -> None:
        if event == "review_started":
            self.logger.info("📄 Analyzing resume: %s", fields.get("file"))
        elif event == "feedback":
            self.logger.info("• %s", fields.get("item"))
        elif event == "review_completed":
            self.logger.info("📊 Overall Resume Score: %s/100", fields.get("score"))
        elif event == "check_failed":
            self.logger.error("Check %s failed: %s", fields.get("check"), fields.get("error"))
        else:
            self.logger.info("%s %s", event, json.dumps(fields, default=str))


class AuditSink:
    """Appends review start/completion/failure events to the JSONL audit log."""

    def record(self, event: str, **fields) -> None:
        if event == "feedback":
            return
        status = "error" if event in ("check_failed", "review_failed") else "success"
        audit_log(action=event, status=status, extra=fields)


class FanoutSink:
    def __init__(self, *sinks: EventSink):
        self.sinks = sinks

    def record(self, event: str, **fields) -> None:
        for sink in self.sinks:
            sink.record(event, **fields)


def audit_log(
    action: str,
    status: str,
    *,
    filename: str | None = None,
    score: int | None = None,
    resume_char_count: int | None = None,
    job_desc_char_count: int | None = None,
    error: str | None = None,
    extra: dict | None = None,
):
    """Append a structured audit entry to the audit log (JSONL)."""
    _ensure_log_dir()
    entry = {
        "timestamp": iso_now(),
        "action": action,
        "status": status,
    }
    if filename:
        entry["filename"] = filename
    if score is not None:
        entry["score"] = score
    if resume_char_count is not None:
        entry["resume_char_count"] = resume_char_count
    if job_desc_char_count is not None:
        entry["job_desc_char_count"] = job_desc_char_count
    if error:
        entry["error"] = error
    if extra:
        entry.update(extra)

    with open(AUDIT_FILE, "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, default=str, ensure_ascii=False) + "\n")


def setup_app_logging():
    """Configure application logging to console and file."""
    _ensure_log_dir()
    logger = logging.getLogger("cv_scan")
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(ch)

    # File
    fh = logging.FileHandler(APP_LOG_FILE, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(fh)

    return logger
