"""Unit tests for run spec multipart encoding."""

import io
import re
from unittest.mock import patch

import pytest

from queue_cli.cli.spec_upload import (
    STDIN,
    RunSpecUpload,
    build_multipart,
    encode_run_spec,
    read_run_spec,
)
from queue_cli.core.exceptions import FormEncodingError, SpecReadError


def parse_multipart(body: bytes, content_type: str) -> dict[str, tuple[str | None, bytes]]:
    """Split a multipart/form-data body into {field name: (filename, data)}."""
    assert content_type.startswith("multipart/form-data; boundary=")
    boundary = content_type.split("boundary=", 1)[1].encode()

    fields = {}
    for chunk in body.split(b"--" + boundary)[1:-1]:
        head, _, data = chunk[2:].partition(b"\r\n\r\n")
        disposition = head.decode().split("\r\n")[0]
        name = re.search(r'; name="([^"]*)"', disposition).group(1)
        filename = re.search(r'; filename="([^"]*)"', disposition)
        fields[name] = (filename.group(1) if filename else None, data[:-2])
    return fields


class TestReadRunSpec:
    """Tests for reading spec content."""

    def test_reads_file(self, tmp_path) -> None:
        spec = tmp_path / "nightly.json"
        spec.write_bytes(b'{"name": "nightly"}')

        upload = read_run_spec("spark", str(spec))

        assert upload == RunSpecUpload("spark", str(spec), b'{"name": "nightly"}')
        assert upload.filename == "nightly.json"

    def test_missing_file_raises_spec_read_error(self, tmp_path) -> None:
        missing = tmp_path / "missing.json"

        with pytest.raises(SpecReadError) as exc_info:
            read_run_spec("spark", str(missing))

        assert exc_info.value.message.startswith(
            f"Failed to read specified run spec file {missing}:"
        )

    def test_reads_stdin(self) -> None:
        upload = read_run_spec("spark", STDIN, stdin=io.BytesIO(b"spec-bytes"))

        assert upload.content == b"spec-bytes"
        assert upload.filename == "stdin"

    def test_reads_process_stdin_as_bytes(self, monkeypatch) -> None:
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"\xffraw-spec")))

        upload = read_run_spec("spark", STDIN)

        assert upload.content == b"\xffraw-spec"

    def test_stdin_failure_raises_spec_read_error(self) -> None:
        class BrokenStream(io.RawIOBase):
            def read(self, size: int = -1) -> bytes:
                raise OSError("stream closed")

        with pytest.raises(SpecReadError, match="Failed to read run spec from stdin: stream closed"):
            read_run_spec("spark", STDIN, stdin=BrokenStream())


class TestBuildMultipart:
    """Tests for the multipart body."""

    def test_body_decodes_to_type_and_file(self) -> None:
        content = bytes(range(256)) + b"\r\n--not-a-boundary\r\n"
        upload = RunSpecUpload("spark", "/specs/nightly.yml", content)

        body, content_type = build_multipart(upload)
        fields = parse_multipart(body, content_type)

        assert set(fields) == {"type", "file"}
        assert fields["type"] == (None, b"spark")
        assert fields["file"] == ("nightly.yml", content)

    def test_body_ends_with_closing_boundary(self) -> None:
        body, content_type = build_multipart(RunSpecUpload("spark", "a.json", b"{}"))
        boundary = content_type.split("boundary=", 1)[1]

        assert body.endswith(f"--{boundary}--\r\n".encode())

    def test_stdin_and_file_differ_only_in_filename(self, tmp_path) -> None:
        spec = tmp_path / "job.json"
        spec.write_bytes(b'{"cpus": 2}')

        file_fields = parse_multipart(*encode_run_spec("spark", str(spec)))
        stdin_fields = parse_multipart(
            *encode_run_spec("spark", STDIN, stdin=io.BytesIO(b'{"cpus": 2}'))
        )

        assert file_fields["type"] == stdin_fields["type"]
        assert file_fields["file"][1] == stdin_fields["file"][1]
        assert file_fields["file"][0] == "job.json"
        assert stdin_fields["file"][0] == "stdin"

    def test_form_creation_failure(self) -> None:
        with patch("queue_cli.cli.spec_upload.httpx.Request", side_effect=TypeError("bad field")):
            with pytest.raises(FormEncodingError, match="Failed to create form: bad field"):
                build_multipart(RunSpecUpload("spark", "a.json", b"{}"))

    def test_form_write_failure(self) -> None:
        with patch("queue_cli.cli.spec_upload.httpx.Request") as mock_request:
            mock_request.return_value.read.side_effect = RuntimeError("stream consumed")

            with pytest.raises(FormEncodingError, match="Failed to write form data: stream consumed"):
                build_multipart(RunSpecUpload("spark", "a.json", b"{}"))
