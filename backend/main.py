"""
FastAPI Application Entry Point
Serves the resume ATS scoring API.
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers.ats import router as ats_router

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Resume ATS Score Generator",
    description="Deterministic, explainable ATS scoring with optional Groq-written explanations",
    version="1.0.0",
)

# CORS: allow origins from environment or default to *
allowed_origins = os.getenv("ALLOWED_ORIGINS", "*").split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ats_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "message": "Resume ATS Score Generator API is running"}


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
