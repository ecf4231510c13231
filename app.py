#!/usr/bin/env python3
"""Flask web app for the résumé scanner: upload a PDF, get a score and feedback."""

import os
import uuid
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify, request, send_from_directory
from werkzeug.utils import secure_filename

from cv_scan import ExtractionError, review_resume
from cv_scan.audit import AuditSink, FanoutSink, LoggerSink, audit_log, setup_app_logging
from src.validation import validate_review_result

load_dotenv()

log = setup_app_logging()

PORT = int(os.getenv("PORT", "7005"))
UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", "uploads")).resolve()

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = int(os.getenv("MAX_UPLOAD_MB", "16")) * 1024 * 1024
app.config["UPLOAD_DIR"] = UPLOAD_DIR

INDEX_HTML = """<div style="text-align:center;margin-top:80px;font-family:Arial;">
  <h1>CV SCAN - ATS RESUME SCANNER</h1>
  <h2>POST &rarr; <code>/scan/resume</code></h2>
  <p><strong>Key:</strong> cv | <strong>Type:</strong> File | <strong>Accept:</strong> .pdf</p>
  <p>Optional form field <code>jobDesc</code> for a keyword match score.</p>
</div>"""


@app.route("/")
def index():
    return INDEX_HTML


@app.route("/scan/resume", methods=["POST"])
def api_scan_resume():
    """Review an uploaded résumé PDF (form-data key: cv)."""
    if "cv" not in request.files:
        return jsonify({"error": "No file provided (form-data key: cv)"}), 400

    file = request.files["cv"]
    if file.filename == "":
        return jsonify({"error": "No file selected"}), 400
    if not file.filename.lower().endswith(".pdf"):
        return jsonify({"error": "Only PDF files are accepted"}), 400

    job_desc = (request.form.get("jobDesc") or request.form.get("job_description") or "").strip()

    upload_dir = Path(app.config["UPLOAD_DIR"])
    upload_dir.mkdir(parents=True, exist_ok=True)
    stored_name = f"{uuid.uuid4().hex[:12]}_{secure_filename(file.filename) or 'resume.pdf'}"
    save_path = upload_dir / stored_name
    file.save(save_path)

    log.info("Scan started: filename=%s, job_desc_chars=%d", file.filename, len(job_desc))
    try:
        result = review_resume(save_path, job_desc, sink=FanoutSink(LoggerSink(log), AuditSink()))
        payload = result.to_dict()
        validate_review_result(payload)
        audit_log(
            action="scan",
            status="success",
            filename=file.filename,
            score=result.score,
            job_desc_char_count=len(job_desc),
        )
        payload["file"] = f"/uploads/{stored_name}"
        return jsonify(payload)
    except ExtractionError as e:
        audit_log(action="scan", status="error", filename=file.filename, error=str(e))
        log.warning("Scan failed: %s", e)
        return jsonify({"error": "Could not read text from file.", "detail": str(e)}), 422
    except Exception as e:
        audit_log(action="scan", status="error", filename=file.filename, error=str(e))
        log.exception("Scan failed")
        return jsonify({"error": str(e)}), 500


@app.route("/uploads/<path:filename>")
def uploaded_file(filename):
    return send_from_directory(app.config["UPLOAD_DIR"], filename)


def safe_read(path: str | None) -> Path | None:
    """Return the path if it names a readable file, else None."""
    if not path:
        return None
    p = Path(path)
    try:
        if p.is_file() and os.access(p, os.R_OK):
            return p
    except OSError as e:
        log.warning("Could not read SSL file at %s: %s", path, e)
    return None


def ssl_context():
    """(cert, key) for Flask when both TLS files are configured, else None."""
    key = safe_read(os.getenv("SSL_PRIVATE_KEY"))
    cert = safe_read(os.getenv("SSL_CERTIFICATE"))
    if not (key and cert):
        return None

    import ssl

    context = ssl.create_default_context(ssl.Purpose.CLIENT_AUTH)
    context.load_cert_chain(certfile=str(cert), keyfile=str(key))
    ca_bundle = safe_read(os.getenv("SSL_CA_BUNDLE"))
    if ca_bundle:
        context.load_verify_locations(cafile=str(ca_bundle))
    return context


if __name__ == "__main__":
    context = ssl_context()
    if context:
        log.info("CV Scan starting (HTTPS) on port %d | Upload CV: POST /scan/resume (key: cv)", PORT)
    else:
        log.info("CV Scan starting (HTTP) on http://0.0.0.0:%d | Upload CV: POST /scan/resume (key: cv)", PORT)
        log.warning("SSL keys not found or invalid, falling back to HTTP")
    app.run(host="0.0.0.0", port=PORT, ssl_context=context)
