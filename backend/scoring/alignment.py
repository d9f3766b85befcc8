"""
Role Alignment Scorer
Soft-weighted match between a resume and a role profile's skill tiers.
"""

import math

from scoring.roles import RoleProfile


MAX_MISSING_CORE = 10

CORE_SHARE = 0.7
TRANSFERABLE_SHARE = 0.25
PERIPHERAL_SHARE = 0.05
TRANSFERABLE_CEILING = 60
PERIPHERAL_BONUS = 2


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_role_alignment(
    resume_skills: list[str],
    resume_text: str,
    profile: RoleProfile,
    job_description: str = "",
) -> dict:
    """
    Scores how well the resume covers the role's skill tiers.

    A phrase counts as present when it is a substring of the lowercased resume
    text plus the extracted skills. job_description is accepted so every
    scorer has the same call shape; it does not affect the result.

    Returns:
        {
            "score": int (0-100),
            "details": {
                "coreSkills": [{"skill", "weight"}],
                "transferableSkills": [...],
                "peripheralSkills": [...],
                "missingCoreSkills": [str],
                "coreSkillPercentage": int,
                "skillCategories": [{"skill", "category", "weight"}]
            }
        }
    """
    haystack = f"{resume_text} {' '.join(resume_skills)}".lower()

    found: dict[str, list[dict]] = {}
    missing_core = []
    for name, tier in profile.tiers():
        found[name] = []
        for skill in tier.skills:
            if skill.lower() in haystack:
                found[name].append({"skill": skill, "weight": tier.weight})
            elif name == "core":
                missing_core.append(skill)

    core_total = len(profile.core.skills)
    transferable_total = len(profile.transferable.skills)

    core_score = len(found["core"]) / core_total * 100 if core_total else 0.0
    transferable_score = (
        len(found["transferable"]) / transferable_total * TRANSFERABLE_CEILING
        if transferable_total else 0.0
    )
    peripheral_score = len(found["peripheral"]) * PERIPHERAL_BONUS

    alignment = min(
        core_score * CORE_SHARE
        + transferable_score * TRANSFERABLE_SHARE
        + peripheral_score * PERIPHERAL_SHARE,
        100,
    )

    skill_categories = [
        {"skill": skill, **profile.categorize(skill)}
        for skill in resume_skills
    ]

    return {
        "score": round_half_up(alignment),
        "details": {
            "coreSkills": found["core"],
            "transferableSkills": found["transferable"],
            "peripheralSkills": found["peripheral"],
            "missingCoreSkills": missing_core[:MAX_MISSING_CORE],
            "coreSkillPercentage": round_half_up(core_score),
            "skillCategories": skill_categories,
        },
    }
