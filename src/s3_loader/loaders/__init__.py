"""Document loaders with plugin architecture."""

from .base import Document, DocumentLoader
from .pdf import PDFLoader
from .registry import LoaderRegistry
from .text import TextLoader

__all__ = [
    "Document",
    "DocumentLoader",
    "LoaderRegistry",
    "PDFLoader",
    "TextLoader",
]
