"""PDF document loader using pypdf."""

import logging
from typing import BinaryIO

from pypdf import PdfReader

from .base import Document, DocumentLoader

logger = logging.getLogger("s3-loader")


class PDFLoader(DocumentLoader):
    """PDF loader using pypdf (no OCR). Produces one document per page."""

    @property
    def extensions(self) -> list[str]:
        return [".pdf"]

    def load(self, file: BinaryIO, filename: str) -> list[Document]:
        reader = PdfReader(file)
        total_pages = len(reader.pages)

        base_metadata = {"filename": filename, "type": "pdf", "total_pages": total_pages}
        if reader.metadata:
            if reader.metadata.title:
                base_metadata["title"] = reader.metadata.title
            if reader.metadata.author:
                base_metadata["author"] = reader.metadata.author

        documents = []
        for number, page in enumerate(reader.pages, start=1):
            text = page.extract_text() or ""
            documents.append(Document(text=text, metadata={**base_metadata, "page": number}))

        if not any(doc.text.strip() for doc in documents):
            logger.warning(f"No text extracted from {filename} - may be scanned PDF")

        return documents
