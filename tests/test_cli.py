"""
Test the command-line interface of the TypeScript OAS generator.
"""

import io
import json
import sys
from pathlib import Path
from typing import Any

import pytest

from ts_oas_generator import cli
from ts_oas_generator.constants import (
    EXIT_FETCH_ERROR,
    EXIT_FILE_NOT_FOUND,
    EXIT_GENERATION_ERROR,
    EXIT_INVALID_SPEC,
    EXIT_SUCCESS,
    GENERATED_BANNER,
)
from ts_oas_generator.errors import SpecFetchError

PET_SPEC = {
    "swagger": "2.0",
    "definitions": {
        "Pet": {
            "type": "object",
            "required": ["name"],
            "properties": {"name": {"type": "string"}, "age": {"type": "integer"}},
        },
        "Empty": {"type": "object"},
    },
}
PET_LINE = 'export type Pet = {"name" : string;"age" ? : number;};'


@pytest.fixture
def pet_spec_file(tmp_path: Path) -> Path:
    path = tmp_path / "pet.json"
    path.write_text(json.dumps(PET_SPEC), encoding="utf-8")
    return path


class TestArgumentParsing:
    def test_defaults(self) -> None:
        parsed = cli.parse_command_line_args(["--file", "spec.yaml"])

        assert parsed.spec_file == Path("spec.yaml")
        assert parsed.url is None
        assert parsed.stdin is False
        assert parsed.output_file is None
        assert parsed.skip_empty_types is False
        assert parsed.skip_type_names == []

    def test_repeated_skip_type_name(self) -> None:
        parsed = cli.parse_command_line_args(["--stdin", "--skip-type-name", "Date", "--skip-type-name", "Error"])
        assert parsed.skip_type_names == ["Date", "Error"]

    def test_source_is_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.parse_command_line_args([])

    def test_sources_are_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            cli.parse_command_line_args(["--file", "a.yaml", "--url", "https://example.com/a.yaml"])


class TestMain:
    """Exercise main() across input sources, flags and failures."""

    def test_file_to_stdout(self, pet_spec_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["--file", str(pet_spec_file)]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert out == f"{GENERATED_BANNER}\n{PET_LINE}\nexport type Empty = {{}};\n"

    def test_flags_are_passed_through(self, pet_spec_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["--file", str(pet_spec_file), "--skip-empty-types", "--skip-type-name", "Pet"]) == 0

        assert capsys.readouterr().out == f"{GENERATED_BANNER}\n"

    def test_write_output_file(self, pet_spec_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        destination = tmp_path / "out" / "types.ts"

        assert cli.main(["--file", str(pet_spec_file), "--write", str(destination), "--skip-empty-types"]) == 0

        assert destination.read_text(encoding="utf-8") == f"{GENERATED_BANNER}\n{PET_LINE}\n"
        assert capsys.readouterr().out == ""

    def test_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        yaml_spec = b"swagger: '2.0'\ndefinitions:\n  Id:\n    type: integer\n"
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(yaml_spec)))

        assert cli.main(["--stdin"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines()[1] == "export type Id = number;"

    def test_url_with_credentials(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        calls: list[tuple[str, dict[str, Any]]] = []

        def fake_fetch(url: str, **kwargs: Any) -> bytes:
            calls.append((url, kwargs))
            return json.dumps(PET_SPEC).encode()

        monkeypatch.setattr(cli, "fetch_spec", fake_fetch)

        exit_code = cli.main(
            ["--url", "https://example.com/spec.json", "--auth-user", "me", "--auth-password", "secret"]
        )

        assert exit_code == EXIT_SUCCESS
        assert calls == [("https://example.com/spec.json", {"auth_user": "me", "auth_password": "secret"})]
        assert PET_LINE in capsys.readouterr().out

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["--file", str(tmp_path / "missing.yaml")]) == EXIT_FILE_NOT_FOUND
        assert "not found" in capsys.readouterr().err

    def test_invalid_spec(self, specs_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["--file", str(specs_dir / "not_a_spec.yaml"), "--verbose"]) == EXIT_INVALID_SPEC

        err = capsys.readouterr().err
        assert "Invalid specification" in err
        assert "SwaggerDocument" in err

    def test_invalid_reference(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "bad_ref.yaml"
        path.write_text(
            "swagger: '2.0'\ndefinitions:\n  A:\n    $ref: '#/components/schemas/B'\n", encoding="utf-8"
        )

        assert cli.main(["--file", str(path)]) == EXIT_GENERATION_ERROR
        captured = capsys.readouterr()
        assert "#/components/schemas/B" in captured.err
        assert captured.out == ""

    def test_unsupported_v3_schema(self, tmp_path: Path) -> None:
        path = tmp_path / "file_type.json"
        path.write_text(
            json.dumps(
                {
                    "openapi": "3.0.0",
                    "info": {"title": "T", "version": "1"},
                    "paths": {},
                    "components": {"schemas": {"Upload": {"type": "file"}}},
                }
            ),
            encoding="utf-8",
        )

        assert cli.main(["--file", str(path)]) == EXIT_GENERATION_ERROR

    def test_write_to_directory(
        self, pet_spec_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert cli.main(["--file", str(pet_spec_file), "--write", str(tmp_path)]) == EXIT_GENERATION_ERROR
        assert capsys.readouterr().err.startswith("Error: ")

    def test_file_is_directory(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["--file", str(tmp_path)]) == EXIT_GENERATION_ERROR
        assert capsys.readouterr().err.startswith("Error: ")

    def test_unconvertible_enum_member(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A binary enum member has no TypeScript literal form."""
        path = tmp_path / "binary_enum.yaml"
        path.write_text(
            "openapi: 3.0.0\ninfo:\n  title: T\n  version: '1'\npaths: {}\n"
            "components:\n  schemas:\n    Blob:\n      enum: [!!binary aGk=]\n",
            encoding="utf-8",
        )

        assert cli.main(["--file", str(path)]) == EXIT_GENERATION_ERROR
        captured = capsys.readouterr()
        assert "Error: " in captured.err
        assert captured.out == ""

    def test_fetch_error(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        def failing_fetch(url: str, **kwargs: Any) -> bytes:
            raise SpecFetchError(url, "HTTP 404 Not Found", 404)

        monkeypatch.setattr(cli, "fetch_spec", failing_fetch)

        assert cli.main(["--url", "https://example.com/missing.json"]) == EXIT_FETCH_ERROR
        assert "HTTP 404" in capsys.readouterr().err

    def test_verbose_summary(self, pet_spec_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["--file", str(pet_spec_file), "-v"]) == EXIT_SUCCESS

        err = capsys.readouterr().err
        assert "Detected SwaggerDocument" in err
        assert "Generated 2 type declarations" in err
