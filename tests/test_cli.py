"""Tests for the ats-resume command-line interface."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from ats_resume.cli import EXIT_INTERNAL_ERROR, EXIT_INVALID_INPUT, EXIT_OK, main
from ats_resume.models.errors import AtsInvariantError


def _write_json(path: Path, data: Any) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestCliSuccess:
    def test_bare_resume_to_pdf(
        self, tmp_path: Path, resume_payload: dict[str, Any], capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = _write_json(tmp_path / "jane.json", resume_payload)
        output = tmp_path / "out.pdf"

        exit_code = main([str(source), "-o", str(output)])

        assert exit_code == EXIT_OK
        assert output.read_bytes().startswith(b"%PDF-")
        assert "(1 page)" in capsys.readouterr().out

    def test_default_output_next_to_input(
        self, tmp_path: Path, resume_payload: dict[str, Any]
    ) -> None:
        source = _write_json(tmp_path / "jane.json", resume_payload)

        assert main([str(source)]) == EXIT_OK
        assert (tmp_path / "jane.pdf").exists()

    def test_request_envelope_options(
        self, tmp_path: Path, resume_payload: dict[str, Any]
    ) -> None:
        source = _write_json(
            tmp_path / "request.json",
            {"resume": resume_payload, "fontProfile": "mono", "sectionOrder": ["skills"]},
        )

        with patch("ats_resume.cli.generate_resume_pdf") as generate:
            generate.return_value.pdf = b"%PDF-stub"
            generate.return_value.page_count = 1
            exit_code = main([str(source), "-o", str(tmp_path / "out.pdf")])

        assert exit_code == EXIT_OK
        args, kwargs = generate.call_args
        assert args[1] == ["skills"]
        assert kwargs == {"font_profile": "mono", "density": "normal"}

    def test_flags_override_envelope(self, tmp_path: Path, resume_payload: dict[str, Any]) -> None:
        source = _write_json(
            tmp_path / "request.json", {"resume": resume_payload, "fontProfile": "mono"}
        )

        with patch("ats_resume.cli.generate_resume_pdf") as generate:
            generate.return_value.pdf = b"%PDF-stub"
            generate.return_value.page_count = 1
            main(
                [
                    str(source),
                    "-o",
                    str(tmp_path / "out.pdf"),
                    "--font-profile",
                    "serif",
                    "--density",
                    "ultra-compact",
                    "--section-order",
                    "projects, skills",
                ]
            )

        args, kwargs = generate.call_args
        assert args[1] == ["projects", "skills"]
        assert kwargs == {"font_profile": "serif", "density": "ultra-compact"}

    def test_reads_stdin(
        self,
        tmp_path: Path,
        resume_payload: dict[str, Any],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(resume_payload)))
        output = tmp_path / "stdin.pdf"

        assert main(["-", "-o", str(output)]) == EXIT_OK
        assert output.exists()

    def test_multi_page_warning(
        self, tmp_path: Path, resume_payload: dict[str, Any], capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = _write_json(tmp_path / "jane.json", resume_payload)

        with patch("ats_resume.cli.generate_resume_pdf") as generate:
            generate.return_value.pdf = b"%PDF-stub"
            generate.return_value.page_count = 3
            main([str(source), "-o", str(tmp_path / "out.pdf")])

        out = capsys.readouterr().out
        assert "(3 pages)" in out
        assert "Warning" in out


class TestCliFailures:
    def test_validation_errors_listed(
        self, tmp_path: Path, resume_payload: dict[str, Any], capsys: pytest.CaptureFixture[str]
    ) -> None:
        del resume_payload["contact"]["email"]
        source = _write_json(tmp_path / "jane.json", resume_payload)
        output = tmp_path / "out.pdf"

        exit_code = main([str(source), "-o", str(output)])

        assert exit_code == EXIT_INVALID_INPUT
        assert "contact.email: contact.email is required" in capsys.readouterr().err
        assert not output.exists()

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "nope.json")]) == EXIT_INVALID_INPUT

    def test_invalid_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        source = tmp_path / "broken.json"
        source.write_text("{not json", encoding="utf-8")

        assert main([str(source)]) == EXIT_INVALID_INPUT
        assert "not valid JSON" in capsys.readouterr().err

    def test_invalid_envelope_option(
        self, tmp_path: Path, resume_payload: dict[str, Any]
    ) -> None:
        source = _write_json(
            tmp_path / "request.json", {"resume": resume_payload, "densityPreset": "huge"}
        )

        assert main([str(source)]) == EXIT_INVALID_INPUT

    def test_unknown_flag_value_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            main([str(tmp_path / "x.json"), "--density", "huge"])

    def test_invariant_failure_is_internal_error(
        self, tmp_path: Path, resume_payload: dict[str, Any]
    ) -> None:
        source = _write_json(tmp_path / "jane.json", resume_payload)

        with patch(
            "ats_resume.cli.generate_resume_pdf",
            side_effect=AtsInvariantError("ATS invariant violated: element 1"),
        ):
            assert main([str(source)]) == EXIT_INTERNAL_ERROR

    def test_unexpected_error_is_internal_error(
        self, tmp_path: Path, resume_payload: dict[str, Any]
    ) -> None:
        source = _write_json(tmp_path / "jane.json", resume_payload)

        with patch("ats_resume.cli.generate_resume_pdf", side_effect=RuntimeError("boom")):
            assert main([str(source)]) == EXIT_INTERNAL_ERROR
