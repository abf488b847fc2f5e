"""FastAPI application entry point for the ATS resume API."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI

from ats_resume.api.routes import health, resumes
from ats_resume.config import get_log_level

app = FastAPI(
    title="ATS Resume API",
    description="API for validating resume JSON and rendering ATS-friendly PDFs",
    version="0.1.0",
)

app.include_router(health.router)
app.include_router(resumes.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    load_dotenv()
    logging.basicConfig(level=get_log_level())
    uvicorn.run(
        "ats_resume.api.main:app",
        host=os.getenv("ATS_RESUME_HOST", "127.0.0.1"),
        port=int(os.getenv("ATS_RESUME_PORT", "8000")),
        reload=False,
    )


if __name__ == "__main__":
    main()
