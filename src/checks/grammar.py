"""Basic grammar and style heuristics on sentence boundaries."""

import re

from src.scoring.tags import Tag, feedback

LONG_SENTENCE_WORDS = 25
MAX_LONG_SENTENCES = 5

SENTENCE_END = re.compile(r"[.!?]")
LOWERCASE_START = re.compile(r"^[a-z]")


def split_sentences(text: str) -> list[str]:
    return [s for s in SENTENCE_END.split(text) if s.strip()]


def check_grammar_heuristics(text: str) -> list[str]:
    sentences = split_sentences(text)
    issues = []

    long_sentences = [s for s in sentences if len(s.split()) > LONG_SENTENCE_WORDS]
    if len(long_sentences) > MAX_LONG_SENTENCES:
        issues.append(feedback(
            Tag.ORANGE,
            f"Found {len(long_sentences)} long sentences — consider splitting for clarity.",
        ))

    if any(LOWERCASE_START.match(s.strip()) for s in sentences):
        issues.append(feedback(
            Tag.ORANGE,
            "Some sentences start with lowercase letters — check capitalization.",
        ))

    if not issues:
        issues.append(feedback(Tag.OK, "No major grammar or structure issues found."))
    return issues
