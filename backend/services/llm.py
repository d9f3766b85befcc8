"""
Groq LLM Integration (score explanations)
- Turns a finished ScoreBreakdown into a short explanation and suggestions
- Falls back to rule-based text when no API key is set or the call fails

Guardrails:
  1. Explain only: the model never produces, adjusts or re-weights a score
  2. Read-only: the breakdown passed in is never modified
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from groq import Groq

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "llama-3.3-70b-versatile"

_client: Optional[Groq] = None


def get_client() -> Groq:
    global _client
    if _client is None:
        api_key = os.getenv("GROQ_API_KEY")
        if not api_key:
            raise ValueError("GROQ_API_KEY not set in environment / .env file")
        _client = Groq(api_key=api_key)
    return _client


EXPLAIN_SYSTEM_PROMPT = """You are a helpful career coach explaining ATS resume scores.
Your role is ONLY to:
1. Explain why the user received their score based on the breakdown provided
2. Suggest specific improvements
3. Encourage the user without being discouraging

You MUST NOT:
- Generate scores
- Modify weights
- Override any deterministic results

Be concise, specific, and encouraging. Focus on actionable advice."""

SUGGESTIONS_SYSTEM_PROMPT = (
    "You are a resume expert. Provide 3-5 specific, actionable suggestions to improve "
    "the resume. One suggestion per line, no numbering. Be concise and practical."
)


def _join(items, empty: str = "None") -> str:
    return ", ".join(items) if items else empty


def build_explanation_prompt(breakdown: dict) -> str:
    scores = breakdown["categoryScores"]
    role = breakdown["breakdown"]["roleAlignment"]["details"]
    issues = breakdown["breakdown"]["formatting"]["details"]["issues"]

    return f"""A resume has been evaluated with the following DETERMINISTIC scores:

Overall ATS Score: {breakdown["overallScore"]}/100

Category Breakdown:
- Keyword Relevance: {round(scores["keywordRelevance"])}/100
- Role Alignment: {round(scores["roleAlignment"])}/100
- Resume Structure: {round(scores["structure"])}/100
- ATS Formatting: {round(scores["formatting"])}/100

Details:
- Evaluation Mode: {breakdown["metadata"]["mode"]}
- Target Role: {breakdown["metadata"]["targetRole"]}
- Core Skills Found: {len(role["coreSkills"])}
- Transferable Skills Found: {len(role["transferableSkills"])}
- Missing Core Skills: {_join(role["missingCoreSkills"][:3])}
- Formatting Issues: {_join(issues)}

Explain why they received this score in 2-3 paragraphs. Be specific about what helped and what could be improved. Be encouraging."""


def build_suggestions_prompt(breakdown: dict) -> str:
    role = breakdown["breakdown"]["roleAlignment"]["details"]
    keywords = breakdown["breakdown"]["keywordRelevance"]["details"]
    issues = breakdown["breakdown"]["formatting"]["details"]["issues"]
    missing_sections = breakdown["breakdown"]["structure"]["details"]["missing"]

    return f"""Based on this resume analysis, provide 3-5 specific improvement suggestions:

Missing Core Skills: {_join(role["missingCoreSkills"][:5])}
Missing Keywords: {_join(keywords["missingKeywords"][:5])}
Missing Sections: {_join(missing_sections)}
Formatting Issues: {_join(issues)}
Target Role: {breakdown["metadata"]["targetRole"]}

Provide actionable suggestions like:
- Add specific skills
- Improve bullet point phrasing
- Fix formatting issues
- Enhance certain sections

Be specific and practical."""


def _complete(system_prompt: str, user_prompt: str, max_tokens: int) -> str:
    response = get_client().chat.completions.create(
        model=os.getenv("GROQ_MODEL", DEFAULT_MODEL),
        messages=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        temperature=0.7,
        max_tokens=max_tokens,
    )
    return (response.choices[0].message.content or "").strip()


def _parse_suggestions(raw: str) -> list[str]:
    lines = [line.strip().lstrip("-•*").strip() for line in raw.splitlines()]
    return [line for line in lines if line]


def fallback_explanation(breakdown: dict) -> dict:
    """Rule-based explanation built only from the breakdown's numbers and lists."""
    scores = breakdown["categoryScores"]
    details = breakdown["breakdown"]
    keyword_score = round(scores["keywordRelevance"])
    role_score = round(scores["roleAlignment"])

    parts = [f"Your resume received an overall ATS score of {breakdown['overallScore']}/100."]

    if keyword_score < 60:
        parts.append(
            f"Your keyword relevance score ({keyword_score}/100) suggests your resume may not "
            "contain enough relevant keywords for the target."
        )
    else:
        parts.append(
            f"Your keyword relevance score ({keyword_score}/100) shows good alignment with the target."
        )

    if role_score < 60:
        parts.append(f"Your role alignment score ({role_score}/100) indicates missing core skills for the target role.")

    if scores["formatting"] < 80:
        parts.append("Your resume has some ATS formatting issues that could affect parsing.")

    suggestions = []
    missing_core = details["roleAlignment"]["details"]["missingCoreSkills"]
    if missing_core:
        suggestions.append(f"Add missing core skills: {', '.join(missing_core[:3])}")

    issues = details["formatting"]["details"]["issues"]
    if issues:
        suggestions.append(f"Fix formatting issues: {issues[0]}")

    if details["keywordRelevance"]["details"]["missingKeywords"]:
        suggestions.append("Include more relevant keywords from the job description")

    missing_sections = details["structure"]["details"]["missing"]
    if missing_sections:
        suggestions.append(f"Add clearly labeled sections for: {', '.join(missing_sections)}")

    suggestions.append("Use action verbs and quantify achievements with metrics")
    suggestions.append("Ensure resume sections are clearly labeled")

    return {
        "explanation": " ".join(parts),
        "suggestions": suggestions[:5],
        "generatedBy": "fallback",
    }


def generate_explanation(breakdown: dict) -> dict:
    """
    Explains a score breakdown in plain language.

    Returns:
        {
            "explanation": str,
            "suggestions": [str],
            "generatedBy": "groq" | "fallback"
        }
    """
    if not os.getenv("GROQ_API_KEY"):
        return fallback_explanation(breakdown)

    try:
        explanation = _complete(EXPLAIN_SYSTEM_PROMPT, build_explanation_prompt(breakdown), 800)
        suggestions = _parse_suggestions(
            _complete(SUGGESTIONS_SYSTEM_PROMPT, build_suggestions_prompt(breakdown), 400)
        )
    except Exception as e:
        # Any Groq failure (network, auth, quota) degrades to the rule-based text.
        logger.warning("Groq explanation failed, using fallback: %s", e)
        return fallback_explanation(breakdown)

    if not explanation:
        return fallback_explanation(breakdown)

    return {
        "explanation": explanation,
        "suggestions": suggestions[:5],
        "generatedBy": "groq",
    }
