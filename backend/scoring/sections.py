"""
Section Segmenter & Structure Scorer
- Splits plain resume text into named sections by header lines
- Scores how complete the resulting section map is
"""

import re


SECTION_NAMES = (
    "contact", "summary", "education", "experience", "skills",
    "projects", "achievements", "certifications", "other",
)

# Tested in this order; first match wins.
HEADER_PATTERNS = (
    ("contact", re.compile(r"^(contact|personal\s+information|details)", re.I)),
    ("summary", re.compile(r"^(summary|objective|profile|about\s+me)", re.I)),
    ("education", re.compile(r"^(education|academic|qualifications)", re.I)),
    ("experience", re.compile(r"^(experience|work\s+history|employment|professional\s+experience)", re.I)),
    ("skills", re.compile(r"^(skills|technical\s+skills|competencies|expertise)", re.I)),
    ("projects", re.compile(r"^(projects|portfolio|work\s+samples)", re.I)),
    ("achievements", re.compile(r"^(achievements|awards|honors|accomplishments)", re.I)),
    ("certifications", re.compile(r"^(certifications|certificates|licenses)", re.I)),
)

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"(\+\d{1,3}[-.]?)?\(?\d{3}\)?[-.]?\d{3}[-.]?\d{4}")
LINKEDIN_RE = re.compile(r"linkedin\.com/in/[\w-]+", re.I)

REQUIRED_SECTIONS = ("education", "experience", "skills")
OPTIONAL_SECTIONS = ("summary", "projects", "achievements", "certifications")


def _match_header(line: str):
    for section, pattern in HEADER_PATTERNS:
        if pattern.match(line):
            return section
    return None


def detect_sections(text: str) -> dict[str, str]:
    """
    Single pass over the lines with a "current section" cursor.

    Lines seen since the last header are buffered and flushed into the
    previous section when a new header appears (and once more at the end).
    Header lines themselves are not kept as content.

    Returns:
        {"contact": str, "summary": str, ..., "other": str}
    """
    sections = {name: "" for name in SECTION_NAMES}
    current = "other"
    buffer: list[str] = []

    def flush():
        if not buffer:
            return
        block = "\n".join(buffer)
        sections[current] = f"{sections[current]}\n{block}" if sections[current] else block

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        header = _match_header(line)
        if header:
            flush()
            current = header
            buffer = []
            continue
        if line:
            buffer.append(line)

    flush()

    if not sections["contact"].strip():
        sections["contact"] = extract_contact_info(text)

    return sections


def extract_contact_info(text: str) -> str:
    """Pulls the first email, phone number and LinkedIn path out of free text."""
    lines = []

    email = EMAIL_RE.search(text)
    if email:
        lines.append(f"Email: {email.group(0)}")

    phone = PHONE_RE.search(text)
    if phone:
        lines.append(f"Phone: {phone.group(0)}")

    linkedin = LINKEDIN_RE.search(text)
    if linkedin:
        lines.append(f"LinkedIn: {linkedin.group(0)}")

    return "\n".join(lines)


def score_structure(sections: dict[str, str]) -> dict:
    """
    Section completeness score.

    Required sections are worth 20 points each when they hold more than 50
    characters, optional ones 10 points when they hold more than 30.
    A header with nothing under it does not count.

    Returns:
        {
            "score": int (0-100),
            "details": {"present": [str], "missing": [str], "optional": [str]}
        }
    """
    score = 0
    present, missing, optional = [], [], []

    for name in REQUIRED_SECTIONS:
        if len(sections.get(name, "").strip()) > 50:
            score += 20
            present.append(name)
        else:
            missing.append(name)

    for name in OPTIONAL_SECTIONS:
        if len(sections.get(name, "").strip()) > 30:
            score += 10
            optional.append(name)

    return {
        "score": min(score, 100),
        "details": {"present": present, "missing": missing, "optional": optional},
    }
