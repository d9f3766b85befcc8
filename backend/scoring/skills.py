"""
Skill Extractor
Pulls technology and tool names out of resume text with a fixed pattern catalog.
"""

import re


def _alternation(*terms: str) -> re.Pattern:
    # Lookarounds instead of \b so tokens ending in symbols (c++, c#, .net) still match.
    return re.compile(r"(?<!\w)(" + "|".join(terms) + r")(?!\w)", re.I)


SKILL_PATTERNS = {
    "languages": _alternation(
        "python", "java", "javascript", "typescript", r"c\+\+", "c#", "ruby",
        "php", "swift", "kotlin", "go", "rust",
    ),
    "web": _alternation(
        "react", "angular", "vue", r"node\.js", "express", "django", "flask",
        "spring", r"\.net", r"asp\.net",
    ),
    "databases": _alternation(
        "mysql", "postgresql", "mongodb", "redis", "elasticsearch", "sql",
        "nosql", "oracle", r"sql\s*server",
    ),
    "cloud_devops": _alternation(
        "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "git",
        "ci/cd", "terraform", "ansible",
    ),
    "data_ml": _alternation(
        "tensorflow", "pytorch", "scikit-learn", "pandas", "numpy",
        r"machine\s*learning", r"deep\s*learning", "nlp",
    ),
    "tools": _alternation(
        "jira", "confluence", "slack", "figma", "photoshop", "illustrator",
        "excel", "powerpoint",
    ),
}


def extract_skills(text: str) -> list[str]:
    """
    Returns the unique, lowercased skill tokens found in text, sorted.
    A token matched by more than one category is kept once.
    """
    found = set()
    for pattern in SKILL_PATTERNS.values():
        for match in pattern.finditer(text):
            found.add(match.group(0).lower())
    return sorted(found)
