"""Shared fixtures: résumé PDFs drawn with reportlab."""

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

CLEAN_RESUME_LINES = [
    "Jane Doe",
    "jane.doe@example.com | +1 5551234567",
    "Summary: Backend engineer with 6 years of Python.",
    "Experience: Acme Corp, cut API latency by 40%.",
    "Projects: Built 12+ data pipelines for analytics.",
    "Education: BSc Computer Science, State University.",
    "Skills: Python, Flask, PostgreSQL, Docker, AWS.",
]


def draw_pdf(path, pages):
    """
    Write a PDF where each page is a list of lines.
    A line is a string or a (text, font, size, x) tuple.
    """
    c = canvas.Canvas(str(path), pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            if isinstance(line, str):
                line = (line, "Helvetica", 11, 72)
            text, font, size, x = line
            c.setFont(font, size)
            c.drawString(x, y, text)
            y -= 18
        c.showPage()
    c.save()
    return path


@pytest.fixture
def make_pdf(tmp_path):
    counter = {"n": 0}

    def _make(*pages):
        counter["n"] += 1
        return draw_pdf(tmp_path / f"resume_{counter['n']}.pdf", pages)

    return _make


@pytest.fixture
def clean_resume_pdf(make_pdf):
    return make_pdf(CLEAN_RESUME_LINES)


@pytest.fixture
def image_only_pdf(tmp_path):
    path = tmp_path / "scan.pdf"
    c = canvas.Canvas(str(path), pagesize=letter)
    c.rect(72, 72, 400, 600, fill=1)
    c.showPage()
    c.save()
    return path
