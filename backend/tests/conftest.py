import io

import pytest
from docx import Document


CONTACT = """Jane Doe
jane.doe@example.com | 555-123-4567 | linkedin.com/in/janedoe
"""

SUMMARY = """Summary
Backend engineer with six years of experience designing reliable services and mentoring small teams.
"""

EXPERIENCE = """Experience
Software Engineer at Acme Corp, 2019 - Present
- Built REST APIs using Python, Django and PostgreSQL serving two million requests per day
- Led migration of legacy services to Docker and Kubernetes on AWS
- Introduced code review guidelines and automated testing in CI/CD pipelines
"""

EDUCATION = """Education
Bachelor of Science in Computer Science, State University, 2015 - 2019
- Coursework in algorithms, data structures and distributed systems
"""

SKILLS = """Skills
Python, Django, Flask, PostgreSQL, Redis, Docker, Kubernetes, AWS, Git, Linux
"""

PROJECTS = """Projects
- Open source contributor to a popular task queue library, focused on retry logic
"""


@pytest.fixture(autouse=True)
def no_groq_key(monkeypatch):
    monkeypatch.delenv("GROQ_API_KEY", raising=False)


@pytest.fixture
def resume_parts():
    return {
        "contact": CONTACT,
        "summary": SUMMARY,
        "experience": EXPERIENCE,
        "education": EDUCATION,
        "skills": SKILLS,
        "projects": PROJECTS,
    }


@pytest.fixture
def sample_resume(resume_parts):
    return "\n".join(resume_parts.values())


@pytest.fixture
def backend_resume():
    return (
        "Experience\n"
        "Software Engineer at Acme, built REST APIs using Python, Docker, and AWS\n"
        "Education\n"
        "B.S. Computer Science, State University, graduated with honors in 2018\n"
        "Skills\n"
        "python, docker, aws, git\n"
    )


@pytest.fixture
def make_docx():
    def _make(paragraphs, table_rows=None) -> bytes:
        doc = Document()
        for text in paragraphs:
            doc.add_paragraph(text)
        if table_rows:
            table = doc.add_table(rows=len(table_rows), cols=len(table_rows[0]))
            for r, row in enumerate(table_rows):
                for c, value in enumerate(row):
                    table.cell(r, c).text = value
        buf = io.BytesIO()
        doc.save(buf)
        return buf.getvalue()
    return _make
