"""HTTP upload endpoint."""

import io

import pytest

import app as web


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setitem(web.app.config, "UPLOAD_DIR", tmp_path / "uploads")
    monkeypatch.setattr(web, "AuditSink", lambda: web.LoggerSink(web.log))
    monkeypatch.setattr(web, "audit_log", lambda *args, **kwargs: None)
    web.app.config["TESTING"] = True
    with web.app.test_client() as c:
        yield c


def test_index(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"/scan/resume" in resp.data


def test_scan_requires_file(client):
    resp = client.post("/scan/resume", data={})
    assert resp.status_code == 400
    assert "cv" in resp.get_json()["error"]


def test_scan_rejects_non_pdf(client):
    data = {"cv": (io.BytesIO(b"hello"), "resume.txt")}
    resp = client.post("/scan/resume", data=data, content_type="multipart/form-data")
    assert resp.status_code == 400


def test_scan_resume(client, clean_resume_pdf):
    data = {
        "cv": (io.BytesIO(clean_resume_pdf.read_bytes()), "jane.pdf"),
        "jobDesc": "Python backend engineer",
    }
    resp = client.post("/scan/resume", data=data, content_type="multipart/form-data")
    assert resp.status_code == 200
    body = resp.get_json()
    assert 0 <= body["score"] <= 100
    assert any(r.startswith("🟢 Keyword match score") for r in body["results"])

    stored = client.get(body["file"])
    assert stored.status_code == 200
    assert stored.data.startswith(b"%PDF")
    stored.close()


def test_scan_unreadable_pdf(client, image_only_pdf):
    data = {"cv": (io.BytesIO(image_only_pdf.read_bytes()), "scan.pdf")}
    resp = client.post("/scan/resume", data=data, content_type="multipart/form-data")
    assert resp.status_code == 422
    assert resp.get_json()["error"] == "Could not read text from file."


def test_ssl_context_disabled_without_files(monkeypatch):
    monkeypatch.delenv("SSL_PRIVATE_KEY", raising=False)
    monkeypatch.delenv("SSL_CERTIFICATE", raising=False)
    assert web.ssl_context() is None


def test_safe_read(tmp_path):
    f = tmp_path / "key.pem"
    f.write_text("x")
    assert web.safe_read(str(f)) == f
    assert web.safe_read(str(tmp_path / "missing.pem")) is None
    assert web.safe_read(None) is None
