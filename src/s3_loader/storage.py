"""Object storage client for S3 and S3-compatible services.

This module defines the storage interface the loader depends on and a
boto3-backed implementation. Only ``get_object`` is part of the loader's
runtime contract; the bucket and put/delete helpers exist for test
harnesses and tooling that need to stage objects.
"""

import logging
from typing import BinaryIO, Protocol, runtime_checkable

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError, ProfileNotFound
from pydantic import ValidationError

from .config import S3LoaderConfig
from .exceptions import ClientInitializationError, ObjectFetchError, raise_for_error_code

logger = logging.getLogger("s3-loader")


@runtime_checkable
class StorageClient(Protocol):
    """Protocol defining the storage client interface.

    Implementations must be safe for concurrent read-only use, so that
    several loaders can share one client.
    """

    def get_object(self, bucket: str, key: str) -> BinaryIO:
        """Fetch an object and return its body stream.

        The caller owns the returned stream and must close it.

        Raises:
            ObjectNotFoundError: If the bucket or key does not exist
            ObjectAccessDeniedError: If access is denied
            ObjectFetchError: For any other fetch failure
        """
        ...

    def put_object(self, bucket: str, key: str, body: bytes | BinaryIO) -> None:
        """Upload an object."""
        ...

    def delete_object(self, bucket: str, key: str) -> None:
        """Delete an object."""
        ...

    def create_bucket(self, bucket: str) -> None:
        """Create a bucket."""
        ...

    def delete_bucket(self, bucket: str) -> None:
        """Delete an empty bucket."""
        ...

    def close(self) -> None:
        """Release client resources. Safe to call multiple times."""
        ...


class S3Storage:
    """boto3-backed storage client.

    Implements StorageClient. Timeouts from the configuration apply to
    every request; botocore's own retries are disabled so a failed fetch
    surfaces to the caller immediately.

    Usage:
        storage = S3Storage(config)
        body = storage.get_object("my-bucket", "docs/report.pdf")

    Or as context manager:
        with S3Storage(config) as storage:
            ...
    """

    def __init__(
        self,
        config: S3LoaderConfig | None = None,
        session: "boto3.Session | None" = None,
    ):
        """Initialize the S3 client.

        Args:
            config: Loader configuration. If None, loads from environment.
            session: Optional existing boto3 session (for testing or advanced use).

        Raises:
            ClientInitializationError: If the session or client cannot be created.
        """
        self.config = config or S3LoaderConfig()

        boto_config = BotoConfig(
            region_name=self.config.aws_region,
            connect_timeout=self.config.connect_timeout,
            read_timeout=self.config.read_timeout,
            retries={"max_attempts": 0},
        )

        try:
            self._session = session or boto3.Session(
                profile_name=self.config.aws_profile,
                region_name=self.config.aws_region,
            )
            self._s3 = self._session.client(
                "s3",
                endpoint_url=self.config.endpoint_url,
                config=boto_config,
            )
        except ProfileNotFound as e:
            raise ClientInitializationError(f"AWS profile not found: {self.config.aws_profile}") from e
        except (BotoCoreError, ValueError) as e:
            raise ClientInitializationError(f"Unable to create S3 client: {e}") from e

        logger.debug(
            f"S3 client ready (region={self.config.aws_region}, "
            f"endpoint={self.config.endpoint_url or 'default'})"
        )

    @property
    def region(self) -> str:
        return self.config.aws_region

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        close = getattr(self._s3, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "S3Storage":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def get_object(self, bucket: str, key: str) -> BinaryIO:
        """Fetch an object and return its streaming body.

        Args:
            bucket: Bucket name
            key: Object key

        Returns:
            botocore StreamingBody; the caller must close it

        Raises:
            ObjectNotFoundError: If the bucket or key does not exist
            ObjectAccessDeniedError: If access is denied
            ObjectFetchError: For any other client or connection error
        """
        try:
            response = self._s3.get_object(Bucket=bucket, Key=key)
        except ClientError as e:
            error = e.response.get("Error", {})
            error_code = str(error.get("Code", "Unknown"))
            error_msg = error.get("Message") or str(e)
            request_id = e.response.get("ResponseMetadata", {}).get("RequestId")
            try:
                raise_for_error_code(
                    error_code,
                    f"Unable to read s3://{bucket}/{key}: {error_msg}",
                    bucket=bucket,
                    key=key,
                    request_id=request_id,
                )
            except ObjectFetchError as fetch_error:
                raise fetch_error from e
        except BotoCoreError as e:
            raise ObjectFetchError(
                f"Unable to read s3://{bucket}/{key}: {e}",
                bucket=bucket,
                key=key,
            ) from e

        logger.debug(f"Fetched s3://{bucket}/{key} ({response.get('ContentLength', '?')} bytes)")
        return response["Body"]

    def put_object(self, bucket: str, key: str, body: bytes | BinaryIO) -> None:
        """Upload an object.

        Raises:
            botocore.exceptions.ClientError: If the upload is rejected
        """
        self._s3.put_object(Bucket=bucket, Key=key, Body=body)

    def delete_object(self, bucket: str, key: str) -> None:
        """Delete an object.

        Raises:
            botocore.exceptions.ClientError: If the delete is rejected
        """
        self._s3.delete_object(Bucket=bucket, Key=key)

    def create_bucket(self, bucket: str) -> None:
        """Create a bucket in the configured region.

        us-east-1 rejects an explicit LocationConstraint, so one is only
        sent for other regions.

        Raises:
            botocore.exceptions.ClientError: If the bucket cannot be created
        """
        if self.region == "us-east-1":
            self._s3.create_bucket(Bucket=bucket)
        else:
            self._s3.create_bucket(
                Bucket=bucket,
                CreateBucketConfiguration={"LocationConstraint": self.region},
            )

    def delete_bucket(self, bucket: str) -> None:
        """Delete an empty bucket.

        Raises:
            botocore.exceptions.ClientError: If the bucket cannot be deleted
        """
        self._s3.delete_bucket(Bucket=bucket)


def create_storage(config: S3LoaderConfig | None = None) -> StorageClient:
    """Create a storage client from configuration.

    Args:
        config: Loader configuration. If None, loads from environment.

    Returns:
        Configured client implementing StorageClient.

    Raises:
        ClientInitializationError: If the configuration is invalid or the
            client cannot be created.
    """
    try:
        config = config or S3LoaderConfig()
    except ValidationError as e:
        raise ClientInitializationError(f"Invalid s3-loader configuration: {e}") from e

    return S3Storage(config)
