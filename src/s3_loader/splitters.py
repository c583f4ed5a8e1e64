"""Text splitters used by S3FileLoader.load_and_split.

The loader never chunks text itself; it hands its documents to any object
implementing TextSplitter. LangChainSplitter adapts the
langchain-text-splitters package to that interface.

Requires langchain-text-splitters: pip install s3-loader[split]
"""

import logging
from typing import Any, Protocol, runtime_checkable

from .loaders.base import Document

logger = logging.getLogger("s3-loader")

# Optional dependency - only needed for LangChainSplitter
try:
    from langchain_core.documents import Document as LCDocument
    from langchain_text_splitters import RecursiveCharacterTextSplitter

    LANGCHAIN_AVAILABLE = True
except ImportError:
    LANGCHAIN_AVAILABLE = False
    LCDocument = None  # type: ignore
    RecursiveCharacterTextSplitter = None  # type: ignore


@runtime_checkable
class TextSplitter(Protocol):
    """Protocol for splitting documents into smaller chunks."""

    def split_documents(self, documents: list[Document]) -> list[Document]:
        """Split documents into finer-grained documents.

        Implementations should carry each source document's metadata onto
        the chunks produced from it.
        """
        ...


class LangChainSplitter:
    """Adapter: wraps a langchain-text-splitters splitter for the TextSplitter interface.

    Usage:
        splitter = LangChainSplitter(chunk_size=500, chunk_overlap=50)
        chunks = loader.load_and_split(splitter)

    Any LangChain splitter can be passed in instead of the default
    RecursiveCharacterTextSplitter:
        splitter = LangChainSplitter(TokenTextSplitter(chunk_size=256))
    """

    def __init__(
        self,
        splitter: Any = None,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ):
        """Initialize adapter.

        Args:
            splitter: Configured LangChain text splitter. If None, a
                RecursiveCharacterTextSplitter is built from chunk_size and
                chunk_overlap.
            chunk_size: Maximum characters per chunk for the default splitter.
            chunk_overlap: Characters shared by consecutive chunks.

        Raises:
            ImportError: If langchain-text-splitters is not installed.
        """
        if not LANGCHAIN_AVAILABLE:
            raise ImportError(
                "langchain-text-splitters is required for LangChainSplitter. Install with:\n"
                "  pip install s3-loader[split]"
            )
        self._splitter = splitter or RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
        )

    def split_documents(self, documents: list[Document]) -> list[Document]:
        lc_docs = [LCDocument(page_content=doc.text, metadata=dict(doc.metadata)) for doc in documents]
        chunks = self._splitter.split_documents(lc_docs)
        logger.debug(f"Split {len(documents)} documents into {len(chunks)} chunks")
        return [Document(text=chunk.page_content, metadata=dict(chunk.metadata)) for chunk in chunks]
