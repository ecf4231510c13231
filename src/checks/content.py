"""Text-only résumé checks: structure, sections, contact details, headings."""

import re

from src.checks.titlecase import title_case
from src.scoring.tags import Tag, feedback

MAX_SENTENCES_WITHOUT_BULLETS = 5
MIN_TEXT_LENGTH = 200

BULLET_LINE = re.compile(r"^[-•▪*]", re.MULTILINE)
EMAIL = re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.IGNORECASE)
PHONE = re.compile(r"(\+?\d{1,3}[-.\s]?)?\d{10}")
# Greedy over whitespace, so a heading can run into the next line.
HEADING = re.compile(r"^[A-Z][A-Za-z\s]+(?=\n|:)", re.MULTILINE)
ACHIEVEMENT_LINE = re.compile(r"experience|achievement|project|work", re.IGNORECASE)
QUANTIFIED = re.compile(r"\d+%|\d+\+")


def check_bullet_points(text: str) -> list[str]:
    """Flag blank-line separated sections written as long prose."""
    issues = []
    for number, section in enumerate(text.split("\n\n"), start=1):
        bullet_count = len(BULLET_LINE.findall(section))
        sentence_count = section.count(".")
        if sentence_count > MAX_SENTENCES_WITHOUT_BULLETS and bullet_count == 0:
            issues.append(feedback(
                Tag.ORANGE,
                f"Section {number} has long paragraphs — use concise bullet points.",
            ))
    return issues


def check_projects(text: str) -> list[str]:
    if re.search("project", text, re.IGNORECASE):
        return []
    return [feedback(Tag.YELLOW, "Add a 'Projects' section to showcase your hands-on experience.")]


def check_contact_formatting(text: str) -> list[str]:
    if EMAIL.search(text) and PHONE.search(text):
        return []
    return [feedback(Tag.RED, "Missing proper contact information (email/phone).")]


def check_headings(text: str) -> list[str]:
    """One item per heading-like line that is not in title case."""
    issues = []
    for heading in HEADING.findall(text):
        expected = title_case(heading)
        if heading != expected:
            issues.append(feedback(
                Tag.YELLOW,
                f'Heading "{heading}" should be "{expected}" for consistency.',
            ))
    return issues


def check_achievements(text: str) -> list[str]:
    """One item per experience/project line with no measurable result."""
    issues = []
    for line in text.split("\n"):
        if ACHIEVEMENT_LINE.search(line) and not QUANTIFIED.search(line):
            issues.append(feedback(
                Tag.GREEN,
                'Quantify achievements — add measurable results like "Improved efficiency by 20%".',
            ))
    return issues


def check_file_compatibility(text: str) -> list[str]:
    if len(text) < MIN_TEXT_LENGTH:
        return [feedback(
            Tag.RED,
            "File may be image-based (no readable text). Use text-based PDF or DOCX.",
        )]
    return []
