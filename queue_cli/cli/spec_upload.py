"""
Run Spec Upload.

Packages a run spec (read from a file or standard input) into the
multipart/form-data body accepted by POST v1/runs:

    type  plain field holding the spec type
    file  file field holding the spec bytes, named after the source file

The whole spec is buffered in memory before encoding, which limits this to
reasonably small spec files. The returned Content-Type header carries the
multipart boundary and must be sent together with the body.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

import httpx

from queue_cli.cli.output import print_message
from queue_cli.core.exceptions import FormEncodingError, SpecReadError

STDIN = "stdin"

# httpx only needs a URL to build the request; it is never sent.
_ENCODE_URL = "http://localhost/"


@dataclass(frozen=True)
class RunSpecUpload:
    """A run spec loaded into memory, ready to encode."""

    spec_type: str
    source_file: str
    content: bytes

    @property
    def filename(self) -> str:
        if self.source_file == STDIN:
            return STDIN
        return Path(self.source_file).name


def read_run_spec(spec_type: str, spec_file: str, stdin: BinaryIO | None = None) -> RunSpecUpload:
    """
    Read a run spec from a file, or from standard input when spec_file is "stdin".

    Raises:
        SpecReadError: If the file or stream cannot be read.
    """
    if spec_file == STDIN:
        print_message("Reading spec file from stdin...")
        stream = stdin if stdin is not None else sys.stdin.buffer
        try:
            content = stream.read()
        except OSError as e:
            raise SpecReadError(f"Failed to read run spec from stdin: {e}") from e
    else:
        try:
            content = Path(spec_file).read_bytes()
        except OSError as e:
            raise SpecReadError(
                f"Failed to read specified run spec file {spec_file}: {e}"
            ) from e
    return RunSpecUpload(spec_type=spec_type, source_file=spec_file, content=content)


def build_multipart(upload: RunSpecUpload) -> tuple[bytes, str]:
    """
    Encode an upload as a multipart/form-data body.

    Returns:
        Tuple of (body, content_type_header).

    Raises:
        FormEncodingError: If the form cannot be created or written.
    """
    try:
        request = httpx.Request(
            "POST",
            _ENCODE_URL,
            data={"type": upload.spec_type},
            files={"file": (upload.filename, upload.content)},
        )
    except Exception as e:
        raise FormEncodingError(f"Failed to create form: {e}") from e

    try:
        body = request.read()
    except Exception as e:
        raise FormEncodingError(f"Failed to write form data: {e}") from e

    return body, request.headers["Content-Type"]


def encode_run_spec(
    spec_type: str,
    spec_file: str,
    stdin: BinaryIO | None = None,
) -> tuple[bytes, str]:
    """Read a run spec and encode it for upload. See read_run_spec and build_multipart."""
    return build_multipart(read_run_spec(spec_type, spec_file, stdin))
