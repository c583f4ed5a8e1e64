"""Tests for the S3 storage client.

These tests use moto to mock S3, so they don't require real AWS
credentials or buckets.
"""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError, ProfileNotFound

from s3_loader.config import S3LoaderConfig
from s3_loader.exceptions import (
    ClientInitializationError,
    ObjectAccessDeniedError,
    ObjectFetchError,
    ObjectNotFoundError,
)
from s3_loader.storage import S3Storage, StorageClient, create_storage

from conftest import TEST_BUCKET


def _client_error(code: str, message: str = "error", request_id: str = "req-123") -> ClientError:
    return ClientError(
        {
            "Error": {"Code": code, "Message": message},
            "ResponseMetadata": {"RequestId": request_id},
        },
        "GetObject",
    )


class TestS3StorageInit:
    """Tests for S3Storage initialization."""

    def test_init_with_config(self):
        """Test session is built from config."""
        config = S3LoaderConfig(aws_region="us-west-2", aws_profile="dev")
        with patch("boto3.Session") as mock_session:
            storage = S3Storage(config)

            mock_session.assert_called_once_with(profile_name="dev", region_name="us-west-2")
            args, kwargs = mock_session.return_value.client.call_args
            assert args == ("s3",)
            assert kwargs["endpoint_url"] is None
            assert storage.region == "us-west-2"

    def test_init_passes_timeouts_and_disables_retries(self):
        """Test botocore config carries the configured deadlines."""
        config = S3LoaderConfig(connect_timeout=3, read_timeout=7)
        mock_session = MagicMock()

        S3Storage(config, session=mock_session)

        boto_config = mock_session.client.call_args.kwargs["config"]
        assert boto_config.connect_timeout == 3
        assert boto_config.read_timeout == 7
        assert boto_config.retries == {"max_attempts": 0}

    def test_init_with_endpoint(self):
        """Test custom endpoint is forwarded to the client."""
        config = S3LoaderConfig(endpoint_url="http://localhost:9000")
        mock_session = MagicMock()

        S3Storage(config, session=mock_session)

        assert mock_session.client.call_args.kwargs["endpoint_url"] == "http://localhost:9000"

    def test_missing_profile_raises_initialization_error(self):
        """Test unknown profile raises ClientInitializationError."""
        config = S3LoaderConfig(aws_profile="missing")
        with patch("boto3.Session", side_effect=ProfileNotFound(profile="missing")):
            with pytest.raises(ClientInitializationError, match="missing"):
                S3Storage(config)

    def test_implements_protocol(self):
        """Test S3Storage satisfies StorageClient."""
        storage = S3Storage(S3LoaderConfig(), session=MagicMock())
        assert isinstance(storage, StorageClient)

    def test_context_manager_closes_client(self):
        """Test exiting the context closes the boto3 client."""
        mock_session = MagicMock()
        with S3Storage(S3LoaderConfig(), session=mock_session):
            pass
        mock_session.client.return_value.close.assert_called_once()


class TestCreateStorage:
    """Tests for the storage factory."""

    def test_invalid_environment_raises_initialization_error(self, monkeypatch):
        """Test bad settings surface as ClientInitializationError."""
        monkeypatch.setenv("S3_LOADER_LOG_LEVEL", "chatty")
        with pytest.raises(ClientInitializationError, match="Invalid s3-loader configuration"):
            create_storage()

    def test_returns_s3_storage(self, config):
        """Test factory builds S3Storage from config."""
        with patch("boto3.Session"):
            storage = create_storage(config)
        assert isinstance(storage, S3Storage)
        assert storage.config is config


class TestS3StorageErrors:
    """Tests for get-object error mapping."""

    @pytest.fixture
    def storage_and_client(self):
        mock_session = MagicMock()
        storage = S3Storage(S3LoaderConfig(), session=mock_session)
        return storage, mock_session.client.return_value

    def test_no_such_key(self, storage_and_client):
        """Test NoSuchKey raises ObjectNotFoundError."""
        storage, client = storage_and_client
        client.get_object.side_effect = _client_error("NoSuchKey", "The specified key does not exist.")

        with pytest.raises(ObjectNotFoundError) as exc_info:
            storage.get_object("bucket", "missing.txt")

        error = exc_info.value
        assert error.bucket == "bucket"
        assert error.key == "missing.txt"
        assert error.request_id == "req-123"
        assert isinstance(error.__cause__, ClientError)

    def test_access_denied(self, storage_and_client):
        """Test AccessDenied raises ObjectAccessDeniedError."""
        storage, client = storage_and_client
        client.get_object.side_effect = _client_error("AccessDenied", "Access Denied")

        with pytest.raises(ObjectAccessDeniedError, match="Access Denied"):
            storage.get_object("bucket", "secret.pdf")

    def test_other_client_error(self, storage_and_client):
        """Test other codes raise ObjectFetchError."""
        storage, client = storage_and_client
        client.get_object.side_effect = _client_error("InternalError")

        with pytest.raises(ObjectFetchError) as exc_info:
            storage.get_object("bucket", "a.txt")
        assert exc_info.value.error_code == "InternalError"

    def test_connection_error(self, storage_and_client):
        """Test network failures raise ObjectFetchError."""
        storage, client = storage_and_client
        client.get_object.side_effect = EndpointConnectionError(endpoint_url="https://s3.amazonaws.com")

        with pytest.raises(ObjectFetchError) as exc_info:
            storage.get_object("bucket", "a.txt")
        assert isinstance(exc_info.value.__cause__, EndpointConnectionError)

    def test_create_bucket_outside_us_east_1(self):
        """Test LocationConstraint is sent for other regions."""
        mock_session = MagicMock()
        storage = S3Storage(S3LoaderConfig(aws_region="eu-central-1"), session=mock_session)

        storage.create_bucket("my-bucket")

        mock_session.client.return_value.create_bucket.assert_called_once_with(
            Bucket="my-bucket",
            CreateBucketConfiguration={"LocationConstraint": "eu-central-1"},
        )


class TestS3StorageMoto:
    """Round trips against moto's S3."""

    def test_get_object(self, storage):
        """Test uploaded bytes come back from get_object."""
        storage.put_object(TEST_BUCKET, "hello.txt", b"Hello, S3!")

        body = storage.get_object(TEST_BUCKET, "hello.txt")
        try:
            assert body.read() == b"Hello, S3!"
        finally:
            body.close()

    def test_missing_key(self, storage):
        """Test missing key raises ObjectNotFoundError."""
        with pytest.raises(ObjectNotFoundError) as exc_info:
            storage.get_object(TEST_BUCKET, "nope.txt")
        assert exc_info.value.error_code == "NoSuchKey"

    def test_missing_bucket(self, storage):
        """Test missing bucket raises ObjectNotFoundError."""
        with pytest.raises(ObjectNotFoundError) as exc_info:
            storage.get_object("no-such-bucket", "a.txt")
        assert exc_info.value.error_code == "NoSuchBucket"

    def test_delete_object_and_bucket(self, storage):
        """Test harness cleanup removes object then bucket."""
        storage.put_object(TEST_BUCKET, "tmp.txt", b"x")
        storage.delete_object(TEST_BUCKET, "tmp.txt")
        storage.delete_bucket(TEST_BUCKET)

        with pytest.raises(ObjectNotFoundError):
            storage.get_object(TEST_BUCKET, "tmp.txt")
