"""Text checks: each rule fires on its threshold and stays quiet below it."""

import re

from src.checks import (
    check_achievements,
    check_bullet_points,
    check_contact_formatting,
    check_file_compatibility,
    check_grammar_heuristics,
    check_headings,
    check_keyword_match,
    check_projects,
)
from src.checks.content import MIN_TEXT_LENGTH
from src.checks.titlecase import title_case


def _sentences(count, words):
    return " ".join(" ".join(["Word"] * words) + "." for _ in range(count))


def test_bullet_points_flags_prose_section():
    section = "Did a thing. Did two. Did three. Did four. Did five. Did six."
    issues = check_bullet_points("Jane Doe\n\n" + section)
    assert issues == ["🟠 Section 2 has long paragraphs — use concise bullet points."]


def test_bullet_points_ignores_bulleted_or_short_sections():
    bulleted = "- Did a thing. Did two. Did three.\n- Did four. Did five. Did six."
    short = "One. Two. Three. Four. Five."
    assert check_bullet_points(bulleted) == []
    assert check_bullet_points(short) == []


def test_projects_missing_and_present():
    assert check_projects("Experience at Acme") == [
        "🟡 Add a 'Projects' section to showcase your hands-on experience."
    ]
    assert check_projects("PROJECTS\nSearch engine") == []


def test_project_line_with_percentage_is_clean():
    line = "This project improved output by 20%"
    assert check_projects(line) == []
    assert check_achievements(line) == []


def test_contact_requires_email_and_phone():
    assert check_contact_formatting("jane@example.com +1 5551234567") == []
    assert check_contact_formatting("jane@example.com") == [
        "🔴 Missing proper contact information (email/phone)."
    ]
    assert len(check_contact_formatting("+44 7700900123")) == 1


def test_headings_flag_non_title_case():
    issues = check_headings("Work experience: 5 years")
    assert issues == ['🟡 Heading "Work experience" should be "Work Experience" for consistency.']


def test_headings_accept_title_case_acronyms_and_small_words():
    assert check_headings("Work Experience: 5 years") == []
    assert check_headings("EDUCATION: BSc") == []
    assert check_headings("Skills and Tools: Python") == []


def test_title_case():
    assert title_case("work experience") == "Work Experience"
    assert title_case("skills and tools") == "Skills and Tools"
    assert title_case("the end of the") == "The End of The"
    assert title_case("AWS skills") == "AWS Skills"
    assert title_case("my iPhone apps") == "My iPhone Apps"


def test_achievements_one_item_per_unquantified_line():
    text = "Work at Acme\nLed project Apollo\nGrew revenue 30%\nHobbies: chess"
    issues = check_achievements(text)
    assert len(issues) == 2
    assert all(i.startswith("🟢 Quantify achievements") for i in issues)


def test_file_compatibility_threshold():
    assert check_file_compatibility("x" * (MIN_TEXT_LENGTH - 1)) == [
        "🔴 File may be image-based (no readable text). Use text-based PDF or DOCX."
    ]
    assert check_file_compatibility("x" * MIN_TEXT_LENGTH) == []


def test_keyword_match_skipped_without_job_desc():
    assert check_keyword_match("Python developer", "") == []
    assert check_keyword_match("Python developer") == []


def test_keyword_match_reports_percentage():
    issues = check_keyword_match("Python developer with Flask", "Senior Python developer")
    assert len(issues) == 1
    m = re.fullmatch(r"🟢 Keyword match score: (\d{1,3}\.\d{2})%", issues[0])
    assert m
    assert 0.0 <= float(m.group(1)) <= 100.0


def test_keyword_match_identical_is_full_score():
    assert check_keyword_match("Python Developer", "python developer") == [
        "🟢 Keyword match score: 100.00%"
    ]


def test_grammar_six_long_sentences():
    issues = check_grammar_heuristics(_sentences(6, 30))
    assert issues == ["🟠 Found 6 long sentences — consider splitting for clarity."]


def test_grammar_five_long_sentences_is_fine():
    assert check_grammar_heuristics(_sentences(5, 30)) == [
        "✅ No major grammar or structure issues found."
    ]


def test_grammar_clean_short_text():
    issues = check_grammar_heuristics("I build APIs. I lead teams.")
    assert issues == ["✅ No major grammar or structure issues found."]


def test_grammar_lowercase_start():
    issues = check_grammar_heuristics("I build APIs. then I lead teams!")
    assert issues == ["🟠 Some sentences start with lowercase letters — check capitalization."]
