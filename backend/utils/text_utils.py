"""
Text utility helpers for extracted resume text.
"""

import re


def clean_text(text: str) -> str:
    """
    Normalizes extracted document text while keeping its layout signals.

    Line endings become "\\n", trailing whitespace is stripped from each line
    and runs of blank lines collapse to one. Tabs and inner runs of spaces are
    kept since the formatting checker reads them as table and column hints.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.replace("\x00", "")
    text = "\n".join(line.rstrip() for line in text.split("\n"))
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip("\n")


def truncate(text: str, limit: int) -> str:
    """Cuts text at the last word boundary before limit characters."""
    if len(text) <= limit:
        return text
    cut = text[:limit]
    last_space = cut.rfind(" ")
    return cut[:last_space] if last_space > 0 else cut
