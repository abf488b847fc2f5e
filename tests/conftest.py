from __future__ import annotations

from typing import Any

import pytest

from ats_resume.models.resume import Resume


def make_resume_payload() -> dict[str, Any]:
    """Return a fresh, valid resume payload in the public camelCase shape."""
    return {
        "contact": {
            "fullName": "Jane Doe",
            "jobTitle": "Backend Engineer",
            "email": "jane@example.com",
            "phone": "+1 555-0100",
            "location": "Vancouver, BC",
            "linkedin": "linkedin.com/in/janedoe",
            "github": "github.com/janedoe",
        },
        "summary": {"summary": "Backend engineer with five years of experience building APIs."},
        "experience": [
            {
                "company": "Acme Corp",
                "role": "Software Engineer",
                "location": "Remote",
                "startDate": "Jan 2021",
                "endDate": None,
                "description": [
                    "Built payment APIs in Python.",
                    "Cut p95 latency by 40%.",
                ],
            }
        ],
        "education": [
            {
                "institution": "University of British Columbia",
                "degree": "BSc",
                "fieldOfStudy": "Computer Science",
                "startDate": "Sep 2016",
                "endDate": "May 2020",
                "cgpa": "3.8/4.0",
                "relevantCourseWork": ["Algorithms", "Databases"],
            }
        ],
        "skills": {"skills": ["React", "PostgreSQL", "Cloud: OpenTelemetry", "Bagels"]},
        "projects": [
            {
                "name": "Resume Builder",
                "description": ["Generates ATS-friendly PDFs."],
                "techStack": ["Python", "FastAPI"],
                "link": "github.com/janedoe/resume",
            }
        ],
    }


class RecordingPageWriter:
    """Page writer that records every call instead of drawing.

    Text is measured as 5 points per character and each drawn block is one
    line tall, so layout assertions stay exact.
    """

    CHAR_WIDTH = 5.0

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.page_count = 1

    def new_page(self) -> None:
        self.page_count += 1
        self.calls.append(("new_page",))

    def set_font(self, face: str, size: float) -> None:
        self.calls.append(("set_font", face, size))

    def draw_text(
        self,
        x: float,
        y: float,
        text: str,
        max_width: float,
        *,
        line_height: float,
        wrap: bool = True,
    ) -> float:
        self.calls.append(("draw_text", x, y, text, max_width, line_height, wrap))
        return y + line_height

    def measure_width(self, text: str) -> float:
        return len(text) * self.CHAR_WIDTH

    def add_link_region(self, x: float, y: float, w: float, h: float, target: str) -> None:
        self.calls.append(("link", x, y, w, h, target))

    def finish(self) -> tuple[bytes, int]:
        return b"%PDF-recorded", self.page_count

    def calls_named(self, name: str) -> list[tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == name]

    def drawn_texts(self, *, include_bullets: bool = False) -> list[str]:
        texts = [call[3] for call in self.calls_named("draw_text")]
        if include_bullets:
            return texts
        return [text for text in texts if text != "-"]


@pytest.fixture
def resume_payload() -> dict[str, Any]:
    """A valid resume payload; each test gets its own copy."""
    return make_resume_payload()


@pytest.fixture
def resume(resume_payload: dict[str, Any]) -> Resume:
    """The typed resume built from ``resume_payload``."""
    return Resume.model_validate(resume_payload)


@pytest.fixture
def recording_writer() -> RecordingPageWriter:
    return RecordingPageWriter()


@pytest.fixture
def make_writer() -> type[RecordingPageWriter]:
    """Factory for tests that need more than one recording writer."""
    return RecordingPageWriter
