"""Pytest configuration and fixtures."""

import pytest
from moto import mock_aws

from s3_loader.config import S3LoaderConfig
from s3_loader.loaders import LoaderRegistry
from s3_loader.storage import S3Storage

TEST_BUCKET = "test-bucket"


def make_pdf(*pages: str, title: str | None = None) -> bytes:
    """Build a minimal PDF with one Helvetica text line per page.

    An empty string produces a page with no text.
    """
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"",  # page tree, filled in once the kids are known
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    kids = []
    for text in pages:
        page_num = len(objects) + 1
        content_num = page_num + 1
        stream = f"BT /F1 24 Tf 72 720 Td ({text}) Tj ET".encode("latin-1") if text else b""
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                "/Resources << /Font << /F1 3 0 R >> >> "
                f"/Contents {content_num} 0 R >>"
            ).encode()
        )
        objects.append(f"<< /Length {len(stream)} >>\nstream\n".encode() + stream + b"\nendstream")
        kids.append(f"{page_num} 0 R")
    objects[1] = f"<< /Type /Pages /Kids [{' '.join(kids)}] /Count {len(pages)} >>".encode()

    info = ""
    if title:
        objects.append(f"<< /Title ({title}) >>".encode())
        info = f" /Info {len(objects)} 0 R"

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for num, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{num} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R{info} >>\nstartxref\n{xref_offset}\n".encode()
    out += b"%%EOF\n"
    return bytes(out)


@pytest.fixture(autouse=True)
def reset_registry():
    """Give every test a fresh loader registry."""
    LoaderRegistry._reset()
    yield
    LoaderRegistry._reset()


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake AWS credentials so boto3 never touches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture
def config():
    """Create a test config for us-east-1."""
    return S3LoaderConfig(aws_region="us-east-1", endpoint_url=None)


@pytest.fixture
def storage(aws_credentials, config):
    """S3Storage backed by moto with an empty test bucket."""
    with mock_aws():
        s3 = S3Storage(config)
        s3.create_bucket(TEST_BUCKET)
        yield s3


@pytest.fixture
def sample_pdf():
    """Single-page PDF containing "Hello, S3!"."""
    return make_pdf("Hello, S3!")


@pytest.fixture
def pdf_factory():
    """Return the make_pdf builder for tests that need custom PDFs."""
    return make_pdf
