"""Load a single S3 object as documents.

S3FileLoader fetches one object, picks a document loader from the key's
suffix and returns the extracted documents, each stamped with the object's
location. The whole object is buffered in memory before extraction, so it is
meant for documents rather than bulk data.

Usage:
    from s3_loader import S3FileLoader

    loader = S3FileLoader("my-bucket", "reports/q3.pdf")
    pages = loader.load()

    # Share one client between loaders
    storage = S3Storage(S3LoaderConfig(aws_region="eu-west-1"))
    docs = S3FileLoader("my-bucket", "notes.txt", storage=storage).load()
"""

import io
import logging
from contextlib import closing

from botocore.exceptions import BotoCoreError

from .config import S3LoaderConfig
from .exceptions import BodyReadError, DocumentParseError, UnsupportedFormatError
from .loaders.base import Document
from .loaders.registry import LoaderRegistry
from .splitters import TextSplitter
from .storage import StorageClient, create_storage

logger = logging.getLogger("s3-loader")


class S3FileLoader:
    """Loads text or PDF documents from one object in an S3 bucket."""

    def __init__(
        self,
        bucket: str,
        key: str,
        storage: StorageClient | None = None,
        config: S3LoaderConfig | None = None,
        registry: LoaderRegistry | None = None,
    ):
        """Initialize loader for bucket/key.

        Args:
            bucket: S3 bucket name
            key: S3 object key; its suffix selects the document loader
            storage: Storage client to fetch with. If None, one is created
                from config.
            config: Loader configuration, used only when storage is None.
                If None, loads from environment.
            registry: Document loader registry. Defaults to the shared
                LoaderRegistry.

        Raises:
            ValueError: If bucket or key is empty.
            ClientInitializationError: If a storage client cannot be created.
        """
        if not bucket or not isinstance(bucket, str):
            raise ValueError("bucket must be a non-empty string")
        if not key or not isinstance(key, str):
            raise ValueError("key must be a non-empty string")

        self._bucket = bucket
        self._key = key
        self._storage = storage or create_storage(config)
        self._registry = registry or LoaderRegistry()

    @property
    def bucket(self) -> str:
        return self._bucket

    @property
    def key(self) -> str:
        return self._key

    @property
    def source(self) -> str:
        return f"s3://{self._bucket}/{self._key}"

    def load(self) -> list[Document]:
        """Fetch the object and extract its documents.

        Every call fetches the object again.

        Returns:
            Extracted documents. Each carries "key", "bucket" and "source"
            in its metadata.

        Raises:
            ObjectFetchError: If the object cannot be fetched
            UnsupportedFormatError: If no loader handles the key's suffix
            BodyReadError: If reading the body fails mid-transfer
            DocumentParseError: If the document loader fails on the payload
                or extracts no documents
        """
        body = self._storage.get_object(self._bucket, self._key)

        with closing(body):
            loader = self._registry.get_loader(self._key)
            if loader is None:
                supported = self._registry.supported_extensions()
                raise UnsupportedFormatError(
                    f"Unsupported file type: {self._key}. "
                    f"Only {', '.join(supported)} are supported",
                    key=self._key,
                    supported=supported,
                )

            try:
                payload = body.read()
            except (BotoCoreError, OSError) as e:
                raise BodyReadError(f"Failed reading body of {self.source}: {e}") from e

        logger.debug(f"Read {len(payload)} bytes from {self.source} using {type(loader).__name__}")

        try:
            documents = loader.load(io.BytesIO(payload), self._key)
        except Exception as e:
            raise DocumentParseError(f"Failed to extract {self.source}: {e}") from e

        if not documents:
            raise DocumentParseError(f"No documents extracted from {self.source}")

        return [self._with_location(doc) for doc in documents]

    def load_and_split(self, splitter: TextSplitter) -> list[Document]:
        """Load the object and split its documents.

        Args:
            splitter: Object implementing TextSplitter.

        Returns:
            Whatever the splitter returns for the loaded documents. The
            splitter is not called if loading fails.
        """
        documents = self.load()
        return splitter.split_documents(documents)

    def _with_location(self, doc: Document) -> Document:
        metadata = {
            **doc.metadata,
            "key": self._key,
            "bucket": self._bucket,
            "source": self.source,
        }
        return Document(text=doc.text, metadata=metadata)
