"""Heuristic check battery. Order here is the order of feedback in a review."""

from src.checks.content import (
    check_achievements,
    check_bullet_points,
    check_contact_formatting,
    check_file_compatibility,
    check_headings,
    check_projects,
)
from src.checks.formatting import check_formatting_consistency
from src.checks.grammar import check_grammar_heuristics
from src.checks.keywords import check_keyword_match

# (name, check, takes_job_desc)
TEXT_CHECKS = (
    ("bullet_points", check_bullet_points, False),
    ("projects", check_projects, False),
    ("contact_formatting", check_contact_formatting, False),
    ("headings", check_headings, False),
    ("achievements", check_achievements, False),
    ("file_compatibility", check_file_compatibility, False),
    ("keyword_match", check_keyword_match, True),
    ("grammar", check_grammar_heuristics, False),
)

__all__ = [
    "TEXT_CHECKS",
    "check_achievements",
    "check_bullet_points",
    "check_contact_formatting",
    "check_file_compatibility",
    "check_formatting_consistency",
    "check_grammar_heuristics",
    "check_headings",
    "check_keyword_match",
    "check_projects",
]
