"""s3-loader - Load documents from S3 objects for retrieval pipelines."""

from s3_loader.config import S3LoaderConfig
from s3_loader.exceptions import (
    BodyReadError,
    ClientInitializationError,
    DocumentParseError,
    ObjectAccessDeniedError,
    ObjectFetchError,
    ObjectNotFoundError,
    S3LoaderError,
    UnsupportedFormatError,
)
from s3_loader.loader import S3FileLoader
from s3_loader.loaders import Document, DocumentLoader, LoaderRegistry
from s3_loader.splitters import LangChainSplitter, TextSplitter
from s3_loader.storage import S3Storage, StorageClient, create_storage

try:
    from importlib.metadata import version
    __version__ = version("s3-loader")
except Exception:
    __version__ = "0.1.0"  # Fallback for development

__all__ = [
    "BodyReadError",
    "ClientInitializationError",
    "Document",
    "DocumentLoader",
    "DocumentParseError",
    "LangChainSplitter",
    "LoaderRegistry",
    "ObjectAccessDeniedError",
    "ObjectFetchError",
    "ObjectNotFoundError",
    "S3FileLoader",
    "S3LoaderConfig",
    "S3LoaderError",
    "S3Storage",
    "StorageClient",
    "TextSplitter",
    "UnsupportedFormatError",
    "__version__",
    "create_storage",
]
