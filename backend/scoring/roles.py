"""
Role Weight Catalog
Static table of target roles. Each role splits its vocabulary into three tiers
(core, transferable, peripheral) with decreasing weight.

The catalog is built once at import and is read-only; look roles up through
resolve_role().
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional


GENERAL_ROLE = "general"


@dataclass(frozen=True)
class SkillTier:
    weight: float
    skills: tuple[str, ...]


@dataclass(frozen=True)
class RoleProfile:
    key: str
    name: str
    core: SkillTier
    transferable: SkillTier
    peripheral: SkillTier

    def tiers(self) -> tuple[tuple[str, SkillTier], ...]:
        return (
            ("core", self.core),
            ("transferable", self.transferable),
            ("peripheral", self.peripheral),
        )

    def categorize(self, skill: str) -> dict:
        """
        Places a single skill in this role's tiers.

        A tier claims the skill when one of its phrases contains the skill or is
        contained in it. Core is checked before transferable; anything else is
        peripheral.

        Returns:
            {"category": "core" | "transferable" | "peripheral", "weight": float}
        """
        needle = skill.lower()
        for category, tier in (("core", self.core), ("transferable", self.transferable)):
            if any(needle in phrase or phrase in needle for phrase in tier.skills):
                return {"category": category, "weight": tier.weight}
        return {"category": "peripheral", "weight": self.peripheral.weight}


def _role(key: str, name: str, core: tuple, transferable: tuple, peripheral: tuple) -> RoleProfile:
    return RoleProfile(
        key=key,
        name=name,
        core=SkillTier(core[0], tuple(core[1])),
        transferable=SkillTier(transferable[0], tuple(transferable[1])),
        peripheral=SkillTier(peripheral[0], tuple(peripheral[1])),
    )


_PROFILES = (
    _role(
        "software-engineer", "Software Engineer",
        (0.7, [
            "programming", "algorithms", "data structures", "coding", "software development",
            "git", "version control", "debugging", "testing", "code review",
            "java", "python", "javascript", "c++", "typescript",
        ]),
        (0.4, [
            "problem solving", "teamwork", "agile", "scrum", "project management",
            "communication", "leadership", "competitive programming", "hackathons",
            "open source", "system design", "architecture",
        ]),
        (0.15, [
            "design", "ui/ux", "marketing", "sales", "business development",
            "content creation", "social media",
        ]),
    ),
    _role(
        "data-scientist", "Data Scientist",
        (0.75, [
            "machine learning", "deep learning", "python", "r", "statistics",
            "data analysis", "pandas", "numpy", "tensorflow", "pytorch",
            "scikit-learn", "sql", "data mining", "modeling", "algorithms",
        ]),
        (0.45, [
            "research", "mathematics", "programming", "problem solving",
            "visualization", "communication", "domain expertise", "experimentation",
            "a/b testing", "excel", "tableau", "power bi",
        ]),
        (0.2, [
            "web development", "mobile development", "design", "marketing",
            "sales", "business development",
        ]),
    ),
    _role(
        "product-manager", "Product Manager",
        (0.7, [
            "product management", "roadmap", "strategy", "stakeholder management",
            "requirements gathering", "user stories", "prioritization", "metrics",
            "kpis", "product analytics", "market research", "competitive analysis",
        ]),
        (0.5, [
            "communication", "leadership", "agile", "scrum", "jira", "confluence",
            "project management", "data analysis", "sql", "excel", "presentation",
            "technical knowledge", "user experience", "design thinking",
        ]),
        (0.2, [
            "programming", "coding", "development", "design", "photoshop",
            "illustrator",
        ]),
    ),
    _role(
        "frontend-developer", "Frontend Developer",
        (0.75, [
            "html", "css", "javascript", "react", "angular", "vue", "typescript",
            "responsive design", "web development", "ui development", "dom", "ajax",
            "rest api", "webpack", "npm", "git",
        ]),
        (0.4, [
            "ui/ux", "design", "figma", "photoshop", "accessibility", "performance",
            "testing", "debugging", "problem solving", "agile", "teamwork",
            "backend development", "node.js",
        ]),
        (0.15, [
            "data science", "machine learning", "devops", "cloud", "marketing",
            "sales",
        ]),
    ),
    _role(
        "backend-developer", "Backend Developer",
        (0.75, [
            "server", "api", "rest", "graphql", "database", "sql", "nosql",
            "node.js", "python", "java", "go", "spring", "django", "flask",
            "express", "docker", "microservices", "authentication", "security",
        ]),
        (0.4, [
            "algorithms", "data structures", "system design", "architecture",
            "devops", "kubernetes", "cloud", "aws", "azure", "gcp",
            "testing", "git", "agile", "problem solving",
        ]),
        (0.15, [
            "frontend", "react", "angular", "design", "ui/ux", "mobile",
            "marketing",
        ]),
    ),
    _role(
        "designer", "UI/UX Designer",
        (0.7, [
            "ui design", "ux design", "user experience", "user interface",
            "figma", "sketch", "adobe xd", "photoshop", "illustrator",
            "prototyping", "wireframing", "user research", "usability testing",
        ]),
        (0.45, [
            "design thinking", "creativity", "communication", "collaboration",
            "html", "css", "frontend", "accessibility", "branding", "typography",
            "color theory", "visual design", "interaction design",
        ]),
        (0.2, [
            "programming", "backend", "data science", "marketing", "seo",
            "content writing",
        ]),
    ),
    _role(
        "devops-engineer", "DevOps Engineer",
        (0.75, [
            "devops", "ci/cd", "jenkins", "docker", "kubernetes", "terraform",
            "ansible", "aws", "azure", "gcp", "cloud", "infrastructure",
            "automation", "monitoring", "deployment", "linux", "bash", "scripting",
        ]),
        (0.4, [
            "problem solving", "system administration", "networking", "security",
            "python", "git", "agile", "collaboration", "troubleshooting",
            "performance optimization", "backend development",
        ]),
        (0.15, [
            "frontend", "design", "data science", "machine learning", "marketing",
            "sales",
        ]),
    ),
    _role(
        GENERAL_ROLE, "General ATS",
        (0.6, []),
        (0.5, [
            "communication", "teamwork", "leadership", "problem solving",
            "project management", "time management", "critical thinking",
            "analytical skills", "creativity", "adaptability",
        ]),
        (0.3, []),
    ),
)

ROLE_CATALOG = MappingProxyType({profile.key: profile for profile in _PROFILES})


def resolve_role(role_id: Optional[str]) -> RoleProfile:
    """Profile for role_id, or the general profile when it is unknown or empty."""
    key = (role_id or "").strip().lower()
    return ROLE_CATALOG.get(key, ROLE_CATALOG[GENERAL_ROLE])


def available_roles() -> list[dict]:
    """Selectable target roles, in catalog order. The general fallback is not listed."""
    return [
        {"key": profile.key, "name": profile.name}
        for profile in ROLE_CATALOG.values()
        if profile.key != GENERAL_ROLE
    ]


def role_keywords(profile: RoleProfile) -> str:
    """Synthetic target text for keyword analysis: core + transferable vocabulary."""
    return " ".join(profile.core.skills + profile.transferable.skills)


def categorize_skill(skill: str, role_id: Optional[str]) -> dict:
    """Tier and weight of skill for role_id (see RoleProfile.categorize)."""
    return resolve_role(role_id).categorize(skill)
