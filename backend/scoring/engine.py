"""
Score Aggregator
Deterministic ATS scoring: runs every scorer for the selected evaluation mode
and combines them into one weighted score with an itemized breakdown.

No I/O, no randomness: the same inputs always give the same breakdown.
"""

import logging
from typing import Optional

from scoring.alignment import round_half_up, score_role_alignment
from scoring.formatting import check_formatting
from scoring.keywords import analyze_keywords
from scoring.roles import GENERAL_ROLE, resolve_role, role_keywords
from scoring.sections import detect_sections, score_structure
from scoring.skills import extract_skills

logger = logging.getLogger(__name__)

MODE_JOB_DESCRIPTION = "job-description"
MODE_TARGET_ROLE = "target-role"
MODE_GENERAL = "general"
MODES = (MODE_JOB_DESCRIPTION, MODE_TARGET_ROLE, MODE_GENERAL)

GENERAL_KEYWORDS = (
    "professional experience education skills qualifications achievements "
    "projects leadership teamwork communication"
)

CATEGORY_WEIGHTS = {
    "keywordRelevance": 0.35,
    "roleAlignment": 0.30,
    "structure": 0.20,
    "formatting": 0.15,
}


def compute_score(
    resume_text: str,
    mode: Optional[str] = MODE_GENERAL,
    job_description: Optional[str] = None,
    target_role: Optional[str] = None,
) -> dict:
    """
    Scores a resume.

    Modes:
        job-description  keywords vs the job description, alignment vs "general"
        target-role      keywords and alignment vs the resolved role profile
        general          keywords vs a generic ATS string, alignment vs "general"
    Unknown or missing modes score as "general". An unknown target role falls
    back to the general profile.

    Returns:
        {
            "overallScore": int (0-100),
            "categoryScores": {"keywordRelevance": float, "roleAlignment": int,
                               "structure": int, "formatting": int},
            "categoryWeights": {...},
            "breakdown": {category: {"score", "weight", "details"}},
            "metadata": {"mode", "targetRole", "sections", "resumeSkills"}
        }
    """
    resume_text = resume_text or ""
    if mode not in MODES:
        mode = MODE_GENERAL

    sections = detect_sections(resume_text)
    structure = score_structure(sections)
    formatting = check_formatting(resume_text)
    resume_skills = extract_skills(resume_text)

    if mode == MODE_JOB_DESCRIPTION:
        profile = resolve_role(GENERAL_ROLE)
        target_text = job_description or ""
    elif mode == MODE_TARGET_ROLE:
        profile = resolve_role(target_role)
        target_text = role_keywords(profile)
    else:
        profile = resolve_role(GENERAL_ROLE)
        target_text = GENERAL_KEYWORDS

    keywords = analyze_keywords(resume_text, target_text)
    alignment = score_role_alignment(resume_skills, resume_text, profile, job_description or "")

    results = {
        "keywordRelevance": keywords,
        "roleAlignment": alignment,
        "structure": structure,
        "formatting": formatting,
    }
    category_scores = {name: result["score"] for name, result in results.items()}

    weighted = sum(category_scores[name] * weight for name, weight in CATEGORY_WEIGHTS.items())
    overall = min(max(round_half_up(weighted), 0), 100)

    logger.debug(
        "Scored resume: mode=%s role=%s overall=%d categories=%s",
        mode, profile.key, overall, category_scores,
    )

    return {
        "overallScore": overall,
        "categoryScores": category_scores,
        "categoryWeights": dict(CATEGORY_WEIGHTS),
        "breakdown": {
            name: {
                "score": result["score"],
                "weight": CATEGORY_WEIGHTS[name],
                "details": result["details"],
            }
            for name, result in results.items()
        },
        "metadata": {
            "mode": mode,
            "targetRole": profile.key,
            "sections": sections,
            "resumeSkills": resume_skills,
        },
    }
