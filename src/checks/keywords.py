"""Similarity between the résumé and an optional job description."""

from rapidfuzz import fuzz

from src.scoring.tags import Tag, feedback


def keyword_similarity(text: str, job_desc: str) -> float:
    """Case-insensitive similarity of the two texts, 0.0 to 1.0."""
    # Indel similarity, not the bigram Dice coefficient of the JS string-similarity package.
    return fuzz.ratio(text.lower(), job_desc.lower()) / 100


def check_keyword_match(text: str, job_desc: str = "") -> list[str]:
    if not job_desc:
        return []
    score = keyword_similarity(text, job_desc)
    return [feedback(Tag.GREEN, f"Keyword match score: {score * 100:.2f}%")]
