"""Command-line entry point: render a resume JSON file to PDF."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from ats_resume.api.schemas.resumes import ResumePdfRequest
from ats_resume.config import get_log_level
from ats_resume.models.errors import AtsInvariantError, ResumeValidationError
from ats_resume.rendering.styles import list_density_presets, list_font_profiles
from ats_resume.services.resume_pdf import generate_resume_pdf

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_INTERNAL_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ats-resume",
        description="Validate resume JSON and render it as an ATS-friendly PDF.",
    )
    parser.add_argument(
        "input",
        help="Path to the resume JSON file, or '-' to read from stdin. Either a bare "
        "resume object or a request object with a 'resume' key.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output PDF path (default: input path with a .pdf suffix)",
    )
    parser.add_argument("--font-profile", choices=list_font_profiles())
    parser.add_argument("--density", choices=list_density_presets())
    parser.add_argument(
        "--section-order",
        help="Comma-separated section keys, e.g. contact,summary,skills,experience",
    )
    return parser


def _read_payload(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with Path(source).open(encoding="utf-8") as handle:
        return json.load(handle)


def _to_request(payload: Any, args: argparse.Namespace) -> ResumePdfRequest:
    """Wrap a bare resume, or accept a request object; flags take precedence."""
    if isinstance(payload, dict) and "resume" in payload:
        request = ResumePdfRequest.model_validate(payload)
    else:
        request = ResumePdfRequest(resume=payload)

    updates: dict[str, Any] = {}
    if args.font_profile:
        updates["font_profile"] = args.font_profile
    if args.density:
        updates["density_preset"] = args.density
    if args.section_order:
        updates["section_order"] = [
            key.strip() for key in args.section_order.split(",") if key.strip()
        ]
    return request.model_copy(update=updates)


def _default_output(source: str) -> Path:
    if source == "-":
        return Path("resume.pdf")
    return Path(source).with_suffix(".pdf")


def run(args: argparse.Namespace) -> int:
    """Run one conversion and return the exit code."""
    try:
        payload = _read_payload(args.input)
    except OSError as exc:
        print(f"Error: cannot read {args.input}: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        print(f"Error: {args.input} is not valid JSON: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        request = _to_request(payload, args)
    except PydanticValidationError as exc:
        print(f"Error: invalid request options:\n{exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        result = generate_resume_pdf(
            request.resume,
            request.section_order,
            font_profile=request.font_profile,
            density=request.density_preset,
        )
    except ResumeValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        for error in exc.errors:
            print(f"  - {error.field}: {error.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except AtsInvariantError:
        logger.exception("Resume rendering failed")
        return EXIT_INTERNAL_ERROR

    output = args.output or _default_output(args.input)
    try:
        output.write_bytes(result.pdf)
    except OSError as exc:
        print(f"Error: cannot write {output}: {exc}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR

    print(f"Wrote {output} ({result.page_count} page{'s' if result.page_count != 1 else ''})")
    if result.page_count > 1:
        print("Warning: resume runs past one page; consider a more compact density.")
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    load_dotenv()
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except KeyboardInterrupt:
        print("\nInterrupted by user. Exiting.", file=sys.stderr)
        return 130
    except Exception:
        logger.exception("Unexpected error while rendering resume")
        return EXIT_INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
