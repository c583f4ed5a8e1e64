"""Plain text document loader."""

from typing import BinaryIO

from .base import Document, DocumentLoader


class TextLoader(DocumentLoader):
    """Loader for plain text files."""

    @property
    def extensions(self) -> list[str]:
        return [".txt"]

    def load(self, file: BinaryIO, filename: str) -> list[Document]:
        content = file.read()
        text = content.decode("utf-8", errors="replace")
        return [
            Document(
                text=text,
                metadata={"filename": filename, "type": "text"},
            )
        ]
