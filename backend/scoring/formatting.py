"""
Formatting Risk Checker
Flags layout signals that commonly break ATS parsers. Works on the raw text,
independent of section detection.
"""

import re


DECORATIVE_GLYPHS = re.compile(r"[★☆◆◇■□●○▪▫►▻♦♢]")
STANDARD_BULLET = re.compile(r"^\s*[-•*○]\s+", re.M)
COLUMN_GAP = re.compile(r"\s{5,}\S+\s{5,}")
ALL_CAPS_WORD = re.compile(r"\b[A-Z]{4,}\b")

MIN_LENGTH = 500


def has_table_structure(text: str) -> bool:
    return text.count("|") > 10 or text.count("\t") > 15


def has_multi_column_layout(text: str) -> bool:
    suspicious = sum(1 for line in text.split("\n") if COLUMN_GAP.search(line))
    return suspicious > 3


def has_excessive_glyphs(text: str) -> bool:
    return len(DECORATIVE_GLYPHS.findall(text)) > 10


def lacks_standard_bullets(text: str) -> bool:
    return STANDARD_BULLET.search(text) is None


def is_too_short(text: str) -> bool:
    return len(text) < MIN_LENGTH


def has_excessive_caps(text: str) -> bool:
    # A handful of acronyms (HTML, JSON, AWS...) is normal.
    return len(ALL_CAPS_WORD.findall(text)) > 20


# Evaluation order is also the order issues are reported in.
CHECKS = (
    (has_table_structure, 15, "Tables detected - may cause parsing issues"),
    (has_multi_column_layout, 15, "Multi-column layout detected - may cause reading order issues"),
    (has_excessive_glyphs, 10, "Excessive special characters detected"),
    (lacks_standard_bullets, 5, "Non-standard bullet formatting detected"),
    (is_too_short, 20, "Resume appears very short - may indicate parsing issues"),
    (has_excessive_caps, 5, "Excessive all-caps text detected - prefer standard capitalization"),
)


def check_formatting(text: str) -> dict:
    """
    Runs every check and deducts its penalty from 100 when it fires.

    Returns:
        {
            "score": int (0-100),
            "details": {"issues": [str], "passed": bool}
        }
    """
    score = 100
    issues = []

    for check, penalty, issue in CHECKS:
        if check(text):
            issues.append(issue)
            score -= penalty

    return {
        "score": max(score, 0),
        "details": {"issues": issues, "passed": not issues},
    }
