"""
FastAPI ATS router: upload, score and explain endpoints.

GET  /api/roles    selectable target roles
POST /api/upload   resume file -> plain text
POST /api/score    resume text + evaluation mode -> score breakdown
POST /api/explain  score breakdown -> explanation + suggestions
POST /api/analyze  resume file + evaluation mode -> all of the above in one call
"""

import logging
import os
from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from scoring.engine import MODE_JOB_DESCRIPTION, MODE_TARGET_ROLE, compute_score
from scoring.roles import available_roles
from services.job_fetcher import fetch_job_posting, parse_pasted_posting
from services.llm import generate_explanation
from services.resume_parser import (
    SUPPORTED_EXTENSIONS,
    ResumeParseError,
    UnsupportedFormatError,
    parse_resume,
)

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024


class ScoreRequest(BaseModel):
    resumeText: Optional[str] = None
    mode: Optional[str] = None
    jobDescription: Optional[str] = None
    jobLink: Optional[str] = None
    targetRole: Optional[str] = None


class ExplainRequest(BaseModel):
    scoreResult: Optional[dict] = None


def max_file_size() -> int:
    return int(os.getenv("MAX_FILE_SIZE", DEFAULT_MAX_FILE_SIZE))


async def read_resume_upload(file: UploadFile) -> str:
    """Validates an uploaded resume and returns its extracted text."""
    filename = file.filename or ""
    if not filename.lower().endswith(SUPPORTED_EXTENSIONS):
        raise HTTPException(status_code=400, detail="Invalid file type. Only PDF and DOCX are allowed.")

    file_bytes = await file.read()
    if len(file_bytes) > max_file_size():
        raise HTTPException(status_code=413, detail="File too large.")

    try:
        return await run_in_threadpool(parse_resume, file_bytes, filename)
    except UnsupportedFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ResumeParseError as e:
        raise HTTPException(status_code=422, detail=str(e))


def resolve_job_description(
    mode: Optional[str],
    job_description: Optional[str],
    job_link: Optional[str],
    target_role: Optional[str],
) -> dict:
    """
    Checks the fields each mode needs and returns the job posting to score against.

    Returns:
        {"title": str, "description": str, "source": str, "error": Optional[str]}
    """
    if not mode:
        raise HTTPException(status_code=400, detail="Evaluation mode is required")

    job_description = (job_description or "").strip()
    job_link = (job_link or "").strip()

    if mode == MODE_JOB_DESCRIPTION:
        if not job_description and not job_link:
            raise HTTPException(status_code=400, detail="Job description or job link is required for this mode")
        if job_description:
            return parse_pasted_posting(job_description)

        posting = fetch_job_posting(job_link)
        if posting["error"] or not posting["description"]:
            raise HTTPException(
                status_code=422,
                detail=f"Job posting fetch failed: {posting['error'] or 'no description found'}. "
                       "Please paste the job description text instead.",
            )
        return posting

    if mode == MODE_TARGET_ROLE and not (target_role or "").strip():
        raise HTTPException(status_code=400, detail="Target role is required for this mode")

    return parse_pasted_posting(job_description)


@router.get("/roles")
def list_roles():
    return {"roles": available_roles()}


@router.post("/upload")
async def upload_resume(resume: UploadFile = File(...)):
    resume_text = await read_resume_upload(resume)
    return {"success": True, "resumeText": resume_text, "filename": resume.filename}


@router.post("/score")
def score_resume(req: ScoreRequest):
    if not req.resumeText:
        raise HTTPException(status_code=400, detail="Resume text is required")

    posting = resolve_job_description(req.mode, req.jobDescription, req.jobLink, req.targetRole)
    result = compute_score(
        req.resumeText,
        mode=req.mode,
        job_description=posting["description"],
        target_role=req.targetRole,
    )
    logger.info("Scored resume: mode=%s overall=%d", result["metadata"]["mode"], result["overallScore"])
    return {"success": True, "scoreResult": result}


@router.post("/explain")
def explain_score(req: ExplainRequest):
    if not req.scoreResult:
        raise HTTPException(status_code=400, detail="Score result is required")

    try:
        explanation = generate_explanation(req.scoreResult)
    except (KeyError, TypeError) as e:
        raise HTTPException(status_code=400, detail=f"Malformed score result: {e}")

    return {"success": True, **explanation}


@router.post("/analyze")
async def analyze_resume(
    resume: UploadFile = File(...),
    mode: Optional[str] = Form(None),
    jobDescription: Optional[str] = Form(None),
    jobLink: Optional[str] = Form(None),
    targetRole: Optional[str] = Form(None),
):
    """
    Combined pipeline:
    1. Extract resume text
    2. Resolve the job posting for the chosen mode
    3. Compute the deterministic score
    4. Explain it (Groq, or rule-based fallback)
    """
    resume_text = await read_resume_upload(resume)
    posting = await run_in_threadpool(resolve_job_description, mode, jobDescription, jobLink, targetRole)

    result = await run_in_threadpool(
        compute_score,
        resume_text,
        mode,
        posting["description"],
        targetRole,
    )
    explanation = await run_in_threadpool(generate_explanation, result)

    return {
        "success": True,
        "scoreResult": result,
        "explanation": explanation["explanation"],
        "suggestions": explanation["suggestions"],
        "generatedBy": explanation["generatedBy"],
    }
