from unittest.mock import MagicMock, patch

import requests

from services.job_fetcher import extract_posting, fetch_job_posting, parse_pasted_posting

GREENHOUSE_PAGE = """
<html><head><title>Careers</title></head><body>
<h1 class="app-title">Backend Engineer</h1>
<div id="content"><p>Build REST APIs in Python.</p><p>Operate Docker services.</p></div>
</body></html>
"""


def test_extract_posting_uses_site_selectors():
    posting = extract_posting(GREENHOUSE_PAGE)

    assert posting["title"] == "Backend Engineer"
    assert posting["description"] == "Build REST APIs in Python.\nOperate Docker services."
    assert posting["source"] == "fetched"
    assert posting["error"] is None


def test_extract_posting_falls_back_to_page_text():
    posting = extract_posting("<html><head><title>Job 42</title></head><body><p>Do things</p></body></html>")

    assert posting["title"] == "Job 42"
    assert posting["description"] == "Do things"


def test_fetch_job_posting():
    response = MagicMock(text=GREENHOUSE_PAGE)
    with patch("services.job_fetcher.requests.get", return_value=response) as get:
        posting = fetch_job_posting("https://jobs.example.com/123")

    get.assert_called_once()
    assert get.call_args.args[0] == "https://jobs.example.com/123"
    assert posting["title"] == "Backend Engineer"


def test_fetch_job_posting_reports_network_errors():
    with patch("services.job_fetcher.requests.get", side_effect=requests.ConnectionError("boom")):
        posting = fetch_job_posting("https://jobs.example.com/123")

    assert posting["source"] == "error"
    assert posting["description"] == ""
    assert "boom" in posting["error"]


def test_parse_pasted_posting():
    posting = parse_pasted_posting("\n  Data Scientist  \n\nPython and statistics\n")

    assert posting["title"] == "Data Scientist"
    assert posting["description"] == "Data Scientist\nPython and statistics"
    assert posting["source"] == "pasted"


def test_parse_pasted_posting_empty():
    assert parse_pasted_posting("")["description"] == ""
