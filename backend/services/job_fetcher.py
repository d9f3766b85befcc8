"""
Job Posting Fetcher: pulls title and description text from a job listing URL.
Used when the job-description mode gets a link instead of pasted text.
Failures are reported in the result, never raised.
"""

import logging
import re

import requests
from bs4 import BeautifulSoup

from utils.text_utils import truncate

logger = logging.getLogger(__name__)

MAX_DESCRIPTION_CHARS = 20000

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept-Language": "en-US,en;q=0.9",
}

# Tried in order; the first selector that yields text wins for each field.
SELECTORS = [
    # LinkedIn
    {"title": "h1.t-24", "body": "div.jobs-description__content"},
    # Indeed
    {"title": "h1.jobsearch-JobInfoHeader-title", "body": "#jobDescriptionText"},
    # Greenhouse
    {"title": "h1.app-title", "body": "div#content"},
    # Lever
    {"title": "h2.posting-headline", "body": "div.posting-description"},
    # Workday
    {"title": "h1[data-automation-id='jobPostingHeader']", "body": "div[data-automation-id='jobPostingDescription']"},
    {"title": "h1", "body": "main"},
]


def _posting(title: str, description: str, source: str, error=None) -> dict:
    return {"title": title, "description": description, "source": source, "error": error}


def extract_posting(html: str) -> dict:
    """Finds the title and description in a job listing page."""
    soup = BeautifulSoup(html, "html.parser")
    title = ""
    description = ""

    for sel in SELECTORS:
        if not title:
            el = soup.select_one(sel["title"])
            if el:
                title = el.get_text(strip=True)
        if not description:
            el = soup.select_one(sel["body"])
            if el:
                description = el.get_text(separator="\n", strip=True)
        if title and description:
            break

    if not description and soup.body:
        description = soup.body.get_text(separator="\n", strip=True)

    if not title:
        title = soup.title.string.strip() if soup.title and soup.title.string else "Job Posting"

    description = re.sub(r"\n{3,}", "\n\n", description).strip()
    return _posting(title, truncate(description, MAX_DESCRIPTION_CHARS), "fetched")


def fetch_job_posting(url: str, timeout: int = 10) -> dict:
    """
    Downloads a public job listing and extracts its text.

    Returns:
        {
            "title": str,
            "description": str,
            "source": "fetched" | "error",
            "error": Optional[str]
        }
    """
    try:
        resp = requests.get(url, headers=HEADERS, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.warning("Job posting fetch failed for %s: %s", url, e)
        return _posting("Unknown", "", "error", f"Failed to fetch URL: {e}")

    return extract_posting(resp.text)


def parse_pasted_posting(text: str) -> dict:
    """Wraps pasted job description text; the first non-empty line is the title."""
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    title = lines[0] if lines else "Job Posting"
    return _posting(title, "\n".join(lines), "pasted")
